from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence, Tuple

from storefront.catalog.domain.entities import ProductEntity
from storefront.catalog.models import CategoryRead


class AbstractProductRepository(ABC):
    """Interface pour le repository des Produits (lecture seule)."""

    @abstractmethod
    async def get_by_id(self, product_id: str) -> Optional[ProductEntity]:
        """Récupère un produit avec ses prix et ses jeux d'attributs (items inclus)."""
        raise NotImplementedError

    @abstractmethod
    async def get_stock_flags(self, product_ids: Sequence[str]) -> Dict[str, bool]:
        """Retourne {product_id: in_stock} pour les IDs existants uniquement."""
        raise NotImplementedError

    @abstractmethod
    async def list_products(self, category: Optional[str] = None) -> List[ProductEntity]:
        raise NotImplementedError


class AbstractCategoryRepository(ABC):
    """Interface pour le repository des Catégories."""

    @abstractmethod
    async def list(self, limit: int = 100, offset: int = 0) -> Tuple[List[CategoryRead], int]:
        raise NotImplementedError
