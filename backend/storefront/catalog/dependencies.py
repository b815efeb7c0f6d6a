import logging
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.database import get_db_session
from storefront.catalog.interfaces.repositories import AbstractCategoryRepository, AbstractProductRepository
from storefront.catalog.repositories import SQLAlchemyCategoryRepository, SQLAlchemyProductRepository
from storefront.catalog.service import CatalogService

logger = logging.getLogger(__name__)

SessionDep = Annotated[AsyncSession, Depends(get_db_session)]


def get_product_repository(session: SessionDep) -> AbstractProductRepository:
    """Fournit une instance du repository de produits."""
    return SQLAlchemyProductRepository(session=session)


def get_category_repository(session: SessionDep) -> AbstractCategoryRepository:
    """Fournit une instance du repository de catégories."""
    return SQLAlchemyCategoryRepository(session=session)


ProductRepositoryDep = Annotated[AbstractProductRepository, Depends(get_product_repository)]
CategoryRepositoryDep = Annotated[AbstractCategoryRepository, Depends(get_category_repository)]


def get_catalog_service(
    product_repository: ProductRepositoryDep,
    category_repository: CategoryRepositoryDep,
) -> CatalogService:
    """
    Fournit une instance du service catalogue.

    Args:
        product_repository: Repository des produits.
        category_repository: Repository des catégories.

    Returns:
        CatalogService: Service de consultation du catalogue.
    """
    logger.debug("Providing CatalogService with injected repositories")
    return CatalogService(product_repository=product_repository, category_repository=category_repository)


CatalogServiceDep = Annotated[CatalogService, Depends(get_catalog_service)]
