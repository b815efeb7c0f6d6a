"""
Configuration spécifique au module Orders.
Contient les constantes du cycle de vie des commandes.
"""

from decimal import Decimal
from typing import Dict, List

# Statuts autorisés pour une commande
ALLOWED_ORDER_STATUS: List[str] = [
    "pending",      # Commande enregistrée, en attente de traitement
    "processing",   # Commande en cours de traitement
    "completed",    # Commande terminée (état final)
    "cancelled",    # Commande annulée (état final)
]

DEFAULT_ORDER_STATUS: str = "pending"

# Montant maximum d'une commande : précision de la colonne orders.total_amount (Numeric(12, 2))
MAX_ORDER_AMOUNT: Decimal = Decimal("9999999999.99")

# Transitions autorisées : statut courant -> statuts atteignables
ORDER_STATUS_TRANSITIONS: Dict[str, List[str]] = {
    "pending": ["processing", "cancelled"],
    "processing": ["completed", "cancelled"],
    "completed": [],
    "cancelled": [],
}

# Préfixe des références de commande (ex: ORD-20260118-000042)
ORDER_REFERENCE_PREFIX: str = "ORD"
