import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from storefront.catalog.domain.entities import CurrencyEntity
from storefront.catalog.models import Currency
from storefront.orders.interfaces.repositories import AbstractOrderRepository
from storefront.orders.models import (
    Order,
    OrderItem,
    OrderItemRead,
    OrderRead,
    SelectedAttributeRead,
)
from storefront.orders.utils import generate_order_reference

logger = logging.getLogger(__name__)


def _to_item_read(item: OrderItem) -> OrderItemRead:
    unit_price = Decimal(item.unit_price)
    return OrderItemRead(
        id=item.id,
        product_id=item.product_id,
        product_name=item.product.name if item.product else None,
        quantity=item.quantity,
        unit_price=unit_price,
        line_total=unit_price * item.quantity,
        selected_attributes=[SelectedAttributeRead(**attr) for attr in (item.selected_attributes or [])],
    )


def _to_order_read(order: Order) -> OrderRead:
    return OrderRead(
        id=order.id,
        reference=order.reference,
        total=order.total_amount,
        status=order.status,
        currency=CurrencyEntity(label=order.currency.label, symbol=order.currency.symbol),
        created_at=order.created_at,
        items=[_to_item_read(item) for item in sorted(order.items, key=lambda i: i.id)],
    )


class SQLAlchemyOrderRepository(AbstractOrderRepository):
    """Implémentation SQLAlchemy du repository de Commandes."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, order_id: int) -> Optional[OrderRead]:
        """Récupère une commande par son ID, avec devise, lignes et produits."""
        stmt = (
            select(Order)
            .where(Order.id == order_id)
            .options(
                selectinload(Order.items).selectinload(OrderItem.product),
                selectinload(Order.currency),
            )
            # Recharger même si l'objet est déjà dans la session (commande tout juste créée)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        order = result.scalar_one_or_none()

        if not order:
            logger.debug(f"Commande ID {order_id} non trouvée dans get_by_id().")
            return None

        return _to_order_read(order)

    async def get_currency_id(self, label: str) -> Optional[int]:
        result = await self.session.execute(select(Currency.id).where(Currency.label == label))
        return result.scalar_one_or_none()

    async def create_order_with_items(self, order_data: Dict[str, Any], items_data: List[Dict[str, Any]]) -> int:
        """Ajoute la commande puis chacune de ses lignes dans une seule transaction.

        En cas d'erreur, toute la transaction est annulée et l'exception remonte telle quelle.
        """
        new_order = Order(**order_data)
        self.session.add(new_order)
        order_id = None

        try:
            await self.session.flush()  # Obtenir l'ID de la commande
            order_id = new_order.id
            new_order.reference = generate_order_reference(order_id, new_order.created_at)

            for item_data in items_data:
                self.session.add(OrderItem(order_id=order_id, **item_data))
                await self.session.flush()

            await self.session.commit()
            logger.info(f"Commande ID {order_id} ajoutée avec {len(items_data)} ligne(s).")
            return order_id
        except Exception as e:
            await self.session.rollback()
            logger.error(f"Erreur ajout commande (ID provisoire {order_id}), transaction annulée: {e}", exc_info=True)
            raise

    async def update_status(self, order_id: int, status: str) -> bool:
        order = await self.session.get(Order, order_id)
        if not order:
            logger.warning(f"Tentative MAJ statut commande ID {order_id} non trouvée.")
            return False

        order.status = status
        order.updated_at = datetime.now(timezone.utc)

        try:
            await self.session.commit()
            logger.info(f"Statut commande ID {order_id} mis à jour à '{status}'.")
            return True
        except Exception as e:
            await self.session.rollback()
            logger.error(f"Erreur inattendue MAJ statut commande {order_id}: {e}", exc_info=True)
            raise
