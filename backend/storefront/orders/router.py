import logging

from fastapi import APIRouter, Path, status

from storefront.orders.dependencies import OrderServiceDep
from storefront.orders.models import OrderCreate, OrderRead, OrderStatusUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/", response_model=OrderRead, status_code=status.HTTP_201_CREATED)
async def create_order_endpoint(
    order_data: OrderCreate,
    service: OrderServiceDep,
):
    """
    Crée une commande à partir d'une liste de lignes.

    Les erreurs de validation sont renvoyées dans l'enveloppe {"errors": [...]}
    par les handlers enregistrés sur l'application.
    """
    logger.info(f"API create_order: {len(order_data.items)} ligne(s), devise={order_data.currency}")
    return await service.create_order(order_data)


@router.get("/{order_id}", response_model=OrderRead)
async def get_order_endpoint(
    service: OrderServiceDep,
    order_id: int = Path(..., gt=0),
):
    return await service.get_order(order_id)


@router.patch("/{order_id}/status", response_model=OrderRead)
async def update_order_status_endpoint(
    status_update: OrderStatusUpdate,
    service: OrderServiceDep,
    order_id: int = Path(..., gt=0),
):
    """Met à jour le statut d'une commande (pending -> processing -> completed, ou cancelled)."""
    logger.info(f"API update_order_status: order_id={order_id}, status={status_update.status}")
    return await service.update_order_status(order_id, status_update.status)
