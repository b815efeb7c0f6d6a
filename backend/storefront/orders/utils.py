"""
Utilitaires pour le module de gestion des commandes.
"""
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from storefront.orders.config import ORDER_REFERENCE_PREFIX

CENT = Decimal("0.01")


def generate_order_reference(order_id: int, timestamp: Optional[datetime] = None) -> str:
    """
    Génère une référence lisible pour une commande.

    Args:
        order_id: ID de la commande
        timestamp: Horodatage de la commande (optionnel)

    Returns:
        str: Référence formatée, ex: ORD-20260118-000042
    """
    if timestamp is None:
        timestamp = datetime.now(timezone.utc)

    return f"{ORDER_REFERENCE_PREFIX}-{timestamp.strftime('%Y%m%d')}-{order_id:06d}"


def round_amount(amount: Decimal) -> Decimal:
    """Arrondit un montant à 2 décimales (arrondi commercial)."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def is_valid_quantity(quantity, max_quantity: int) -> bool:
    """Une quantité valide est un entier compris entre 1 et max_quantity."""
    return isinstance(quantity, int) and 0 < quantity <= max_quantity
