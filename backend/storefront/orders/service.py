import logging
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy.exc import SQLAlchemyError

from storefront.config import settings
from storefront.catalog.domain.entities import ProductEntity
from storefront.catalog.service import CatalogService
from storefront.orders.config import ALLOWED_ORDER_STATUS, DEFAULT_ORDER_STATUS, MAX_ORDER_AMOUNT
from storefront.orders.domain.attribute_validator import resolve_selected_attributes, validate_selected_attributes
from storefront.orders.domain.status import OrderStatus, ensure_transition
from storefront.orders.exceptions import (
    InvalidOrderAmountException,
    InvalidOrderRequestException,
    InvalidOrderStatusException,
    InvalidProductPriceException,
    InvalidQuantityException,
    OrderNotFoundException,
    OrderPersistenceException,
)
from storefront.orders.interfaces.repositories import AbstractOrderRepository
from storefront.orders.models import OrderCreate, OrderRead
from storefront.orders.utils import is_valid_quantity, round_amount

logger = logging.getLogger(__name__)


class OrderService:
    """Service applicatif pour la gestion des commandes."""

    def __init__(
        self,
        order_repository: AbstractOrderRepository,
        catalog_service: CatalogService,
        default_currency: str = settings.DEFAULT_CURRENCY,
        max_items: int = settings.MAX_ITEMS_PER_ORDER,
        max_quantity: int = settings.MAX_QUANTITY_PER_ITEM,
        max_total: Decimal = MAX_ORDER_AMOUNT,
    ):
        self.order_repo = order_repository
        self.catalog_service = catalog_service
        self.default_currency = default_currency
        self.max_items = max_items
        self.max_quantity = max_quantity
        self.max_total = max_total
        logger.info("OrderService initialized.")

    def _validate_request(self, order_data: OrderCreate) -> None:
        """Contrôles sans accès au catalogue : structure puis quantités."""
        if not order_data.items:
            raise InvalidOrderRequestException("Order must contain at least one item")
        if len(order_data.items) > self.max_items:
            raise InvalidOrderRequestException(
                f"Order cannot contain more than {self.max_items} items"
            )

        for index, item in enumerate(order_data.items):
            if not item.product_id:
                raise InvalidOrderRequestException(f"Item {index}: productId is required")
            if item.quantity is None:
                raise InvalidOrderRequestException(f"Item {index}: quantity is required")

        for item in order_data.items:
            if not is_valid_quantity(item.quantity, self.max_quantity):
                raise InvalidQuantityException(item.product_id, item.quantity, max_quantity=self.max_quantity)

    async def _load_products(self, order_data: OrderCreate) -> Dict[str, ProductEntity]:
        # Une seule vérification de stock pour tous les produits, dans l'ordre de la demande
        unique_ids = list(dict.fromkeys(item.product_id for item in order_data.items))
        await self.catalog_service.check_availability(unique_ids)

        products: Dict[str, ProductEntity] = {}
        for product_id in unique_ids:
            products[product_id] = await self.catalog_service.get_product(product_id)
        return products

    async def create_order(self, order_data: OrderCreate) -> OrderRead:
        """
        Valide puis enregistre une commande.

        Les validations ont lieu dans cet ordre : structure de la demande,
        quantités, devise, existence et stock des produits, attributs et prix
        de chaque ligne, total. Rien n'est écrit tant qu'une validation échoue.
        """
        logger.info(f"[OrderService] Création commande avec {len(order_data.items)} ligne(s).")
        self._validate_request(order_data)

        currency_label = order_data.currency or self.default_currency
        currency_id = await self.order_repo.get_currency_id(currency_label)
        if currency_id is None:
            raise InvalidOrderRequestException(f"Unknown currency: {currency_label}")

        products = await self._load_products(order_data)

        total = Decimal("0")
        items_data: List[Dict[str, Any]] = []
        for item in order_data.items:
            product = products[item.product_id]
            validate_selected_attributes(product.id, product.attributes, item.selected_attributes)

            price = product.get_price(currency_label)
            if price is None or price.amount <= 0:
                raise InvalidProductPriceException(product.id, currency_label)

            total += price.amount * item.quantity
            items_data.append({
                "product_id": product.id,
                "quantity": item.quantity,
                "unit_price": price.amount,
                "selected_attributes": resolve_selected_attributes(product.attributes, item.selected_attributes),
            })

        total = round_amount(total)
        if total <= 0 or total > self.max_total:
            raise InvalidOrderAmountException(total)

        order_db_data = {
            "status": DEFAULT_ORDER_STATUS,
            "total_amount": total,
            "currency_id": currency_id,
        }

        try:
            order_id = await self.order_repo.create_order_with_items(order_db_data, items_data)
        except SQLAlchemyError as e:
            logger.error(f"[OrderService] Échec écriture commande: {e}", exc_info=True)
            raise OrderPersistenceException(f"Failed to save order: {e}") from e

        logger.info(f"[OrderService] Commande ID {order_id} créée, total {total} {currency_label}.")
        return await self.get_order(order_id)

    async def get_order(self, order_id: int) -> OrderRead:
        order = await self.order_repo.get_by_id(order_id)
        if not order:
            raise OrderNotFoundException(order_id)
        return order

    async def update_order_status(self, order_id: int, new_status: str) -> OrderRead:
        """Change le statut d'une commande en respectant le cycle de vie."""
        logger.info(f"[OrderService] MAJ statut commande ID {order_id} -> '{new_status}'")
        try:
            requested = OrderStatus(new_status)
        except ValueError:
            raise InvalidOrderStatusException(new_status, ALLOWED_ORDER_STATUS)

        order = await self.get_order(order_id)
        ensure_transition(order.status, requested)

        updated = await self.order_repo.update_status(order_id, requested.value)
        if not updated:
            raise OrderNotFoundException(order_id)
        return await self.get_order(order_id)
