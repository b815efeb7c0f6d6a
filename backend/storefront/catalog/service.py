import logging
from typing import List, Optional, Sequence

from sqlmodel import SQLModel

from storefront.catalog.domain.entities import ProductEntity
from storefront.catalog.exceptions import ProductNotFoundException, ProductUnavailableException
from storefront.catalog.interfaces.repositories import AbstractCategoryRepository, AbstractProductRepository
from storefront.catalog.models import CategoryRead

logger = logging.getLogger(__name__)

# Valeur du filtre catégorie signifiant "tous les produits"
ALL_CATEGORIES = "all"


class PaginatedCategoryResponse(SQLModel):
    items: List[CategoryRead]
    total: int


class CatalogService:
    """Service applicatif de consultation du catalogue."""

    def __init__(self, product_repository: AbstractProductRepository, category_repository: AbstractCategoryRepository):
        self.product_repository = product_repository
        self.category_repository = category_repository

    async def get_product(self, product_id: str) -> ProductEntity:
        """Récupère un produit complet (stock, prix, jeux d'attributs)."""
        logger.debug(f"[CatalogService] Récupération produit ID: {product_id}")
        product = await self.product_repository.get_by_id(product_id)
        if not product:
            raise ProductNotFoundException(product_id)
        return product

    async def check_availability(self, product_ids: Sequence[str]) -> None:
        """Vérifie en une requête que chaque produit existe et est en stock.

        Les IDs sont contrôlés dans l'ordre de la demande : la première erreur
        rencontrée est levée.
        """
        stock_flags = await self.product_repository.get_stock_flags(product_ids)
        for product_id in product_ids:
            if product_id not in stock_flags:
                logger.warning(f"[CatalogService] Produit {product_id} inexistant.")
                raise ProductNotFoundException(product_id)
            if not stock_flags[product_id]:
                logger.warning(f"[CatalogService] Produit {product_id} en rupture de stock.")
                raise ProductUnavailableException(product_id)

    async def list_products(self, category: Optional[str] = None) -> List[ProductEntity]:
        if category == ALL_CATEGORIES:
            category = None
        logger.debug(f"[CatalogService] Listage produits, catégorie: {category or 'toutes'}")
        return await self.product_repository.list_products(category=category)

    async def list_categories(self, limit: int = 100, offset: int = 0) -> PaginatedCategoryResponse:
        categories, total_count = await self.category_repository.list(limit=limit, offset=offset)
        return PaginatedCategoryResponse(items=categories, total=total_count)
