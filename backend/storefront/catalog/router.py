import logging
from typing import List, Optional

from fastapi import APIRouter, Path, Query

from storefront.config import settings
from storefront.catalog.dependencies import CatalogServiceDep
from storefront.catalog.domain.entities import ProductEntity
from storefront.catalog.service import PaginatedCategoryResponse

logger = logging.getLogger(__name__)

product_router = APIRouter()
category_router = APIRouter()


@product_router.get("/", response_model=List[ProductEntity])
async def list_products_endpoint(
    service: CatalogServiceDep,
    category: Optional[str] = Query(default=None, description="Nom de catégorie, 'all' pour tout le catalogue"),
):
    """Liste les produits, éventuellement filtrés par catégorie."""
    logger.info(f"API list_products: category={category}")
    return await service.list_products(category=category)


@product_router.get("/{product_id}", response_model=ProductEntity)
async def get_product_endpoint(
    service: CatalogServiceDep,
    product_id: str = Path(..., min_length=1),
):
    """Récupère un produit avec ses prix et ses attributs."""
    # ProductNotFoundException est convertie en 404 par le handler d'erreurs
    return await service.get_product(product_id)


@category_router.get("/", response_model=PaginatedCategoryResponse)
async def list_categories_endpoint(
    service: CatalogServiceDep,
    limit: int = Query(default=settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    offset: int = Query(default=0, ge=0),
):
    """Récupère une liste paginée de catégories."""
    logger.info(f"API list_categories: limit={limit}, offset={offset}")
    return await service.list_categories(limit=limit, offset=offset)
