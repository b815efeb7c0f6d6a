from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from storefront.orders.models import OrderRead


class AbstractOrderRepository(ABC):
    """Interface abstraite pour le repository des commandes et de leurs lignes."""

    @abstractmethod
    async def get_by_id(self, order_id: int) -> Optional[OrderRead]:
        """Récupère une commande complète (devise, lignes, attributs sélectionnés)."""
        pass

    @abstractmethod
    async def get_currency_id(self, label: str) -> Optional[int]:
        pass

    @abstractmethod
    async def create_order_with_items(
        self,
        order_data: Dict[str, Any],  # status, total_amount, currency_id
        items_data: List[Dict[str, Any]],  # product_id, quantity, unit_price, selected_attributes
    ) -> int:
        """Crée une commande et ses lignes de manière atomique. Retourne l'ID créé."""
        pass

    @abstractmethod
    async def update_status(self, order_id: int, status: str) -> bool:
        """Met à jour le statut d'une commande. Retourne False si elle n'existe pas."""
        pass
