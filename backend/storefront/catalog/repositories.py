"""
Implémentation SQLAlchemy des repositories du catalogue.

Les produits sont chargés en une seule passe avec leurs prix (et devises), leur
galerie et l'arbre complet des jeux d'attributs, pour que la validation d'une commande
n'ait pas besoin d'un second aller-retour.
"""
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from fastcrud import FastCRUD
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from storefront.catalog.domain.entities import (
    AttributeItemEntity,
    AttributeKind,
    AttributeSetEntity,
    CurrencyEntity,
    PriceEntity,
    ProductEntity,
)
from storefront.catalog.interfaces.repositories import AbstractCategoryRepository, AbstractProductRepository
from storefront.catalog.models import (
    AttributeSet,
    Category,
    CategoryRead,
    Price,
    Product,
    ProductAttributeSet,
)

logger = logging.getLogger(__name__)


def _to_attribute_set_entity(attribute_set: AttributeSet) -> AttributeSetEntity:
    items = sorted(attribute_set.items, key=lambda item: (item.position, item.id))
    return AttributeSetEntity(
        id=attribute_set.id,
        name=attribute_set.name,
        type=AttributeKind(attribute_set.type),
        items=[
            AttributeItemEntity(id=item.id, display_value=item.display_value, value=item.value)
            for item in items
        ],
    )


def _to_product_entity(product: Product) -> ProductEntity:
    links = sorted(product.attribute_links, key=lambda link: link.position)
    return ProductEntity(
        id=product.id,
        name=product.name,
        brand=product.brand,
        description=product.description,
        in_stock=product.in_stock,
        category=product.category,
        prices=[
            PriceEntity(
                amount=price.amount,
                currency=CurrencyEntity(label=price.currency.label, symbol=price.currency.symbol),
            )
            for price in product.prices
        ],
        gallery=[image.image_url for image in sorted(product.gallery, key=lambda image: (image.position, image.id))],
        attributes=[_to_attribute_set_entity(link.attribute_set) for link in links],
    )


class SQLAlchemyProductRepository(AbstractProductRepository):
    """Implémentation SQLAlchemy du repository de produits."""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _select_with_relations(self):
        return (
            select(Product)
            .options(
                selectinload(Product.prices).selectinload(Price.currency),
                selectinload(Product.gallery),
                selectinload(Product.attribute_links)
                .selectinload(ProductAttributeSet.attribute_set)
                .selectinload(AttributeSet.items),
            )
            .execution_options(populate_existing=True)
        )

    async def get_by_id(self, product_id: str) -> Optional[ProductEntity]:
        stmt = self._select_with_relations().where(Product.id == product_id)
        result = await self.session.execute(stmt)
        product = result.scalar_one_or_none()

        if not product:
            logger.debug(f"Produit ID {product_id} non trouvé dans get_by_id().")
            return None

        return _to_product_entity(product)

    async def get_stock_flags(self, product_ids: Sequence[str]) -> Dict[str, bool]:
        if not product_ids:
            return {}
        stmt = select(Product.id, Product.in_stock).where(Product.id.in_(set(product_ids)))
        result = await self.session.execute(stmt)
        return {product_id: bool(in_stock) for product_id, in_stock in result.all()}

    async def list_products(self, category: Optional[str] = None) -> List[ProductEntity]:
        stmt = self._select_with_relations().order_by(Product.name)
        if category:
            stmt = stmt.where(Product.category == category)
        result = await self.session.execute(stmt)
        return [_to_product_entity(product) for product in result.scalars().all()]


class SQLAlchemyCategoryRepository(AbstractCategoryRepository):
    """Implémentation SQLAlchemy du repository des catégories avec FastCRUD."""

    def __init__(self, session: AsyncSession):
        self.db = session
        self.crud = FastCRUD(Category)

    async def list(self, limit: int = 100, offset: int = 0) -> Tuple[List[CategoryRead], int]:
        logger.debug(f"[CategoryRepository] Listing categories: limit={limit}, offset={offset}")
        result = await self.crud.get_multi(
            db=self.db,
            offset=offset,
            limit=limit,
            schema_to_select=CategoryRead,
            return_as_model=True,
            sort_columns="name",
        )
        return result.get("data", []), result.get("total_count", 0)
