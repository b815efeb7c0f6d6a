import logging
from typing import Annotated

from fastapi import Depends

from storefront.catalog.dependencies import CatalogServiceDep, SessionDep
from storefront.orders.interfaces.repositories import AbstractOrderRepository
from storefront.orders.repositories import SQLAlchemyOrderRepository
from storefront.orders.service import OrderService

logger = logging.getLogger(__name__)


def get_order_repository(session: SessionDep) -> AbstractOrderRepository:
    """Fournit une instance du repository de commandes."""
    return SQLAlchemyOrderRepository(session=session)


OrderRepositoryDep = Annotated[AbstractOrderRepository, Depends(get_order_repository)]


def get_order_service(
    order_repository: OrderRepositoryDep,
    catalog_service: CatalogServiceDep,
) -> OrderService:
    """Fournit une instance du service de commandes, branchée sur le catalogue."""
    logger.debug("Providing OrderService with injected dependencies")
    return OrderService(order_repository=order_repository, catalog_service=catalog_service)


OrderServiceDep = Annotated[OrderService, Depends(get_order_service)]
