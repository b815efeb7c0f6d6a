"""Exceptions spécifiques au domaine Order."""
from decimal import Decimal
from typing import Any, List, Optional

from storefront.core.exceptions import BusinessError, InternalError, UserError


class InvalidOrderRequestException(UserError):
    """Levée lorsque la demande de commande est mal formée (articles absents, champs manquants)."""
    code = "INVALID_ORDER_REQUEST"


class InvalidQuantityException(UserError):
    """Levée lorsque la quantité d'une ligne n'est pas un entier entre 1 et la limite par ligne."""
    code = "INVALID_QUANTITY"

    def __init__(self, product_id: str, quantity: Any, max_quantity: Optional[int] = None):
        if max_quantity is None:
            rule = "Quantity must be greater than 0."
        else:
            rule = f"Quantity must be between 1 and {max_quantity}."
        super().__init__(f"Invalid quantity ({quantity}) for product {product_id}. {rule}")
        self.product_id = product_id
        self.quantity = quantity


class MissingAttributesException(UserError):
    """Levée lorsqu'un ou plusieurs jeux d'attributs requis ne sont pas sélectionnés."""
    code = "MISSING_REQUIRED_ATTRIBUTES"

    def __init__(self, product_id: str, missing_attributes: List[str]):
        super().__init__(f"Missing required attributes for product {product_id}: {', '.join(missing_attributes)}")
        self.product_id = product_id
        self.missing_attributes = missing_attributes


class InvalidAttributeException(UserError):
    """Levée pour un attribut inconnu, dupliqué, ou une valeur hors du jeu."""
    code = "INVALID_ATTRIBUTE"

    def __init__(self, message: str, product_id: Optional[str] = None, attribute: Optional[str] = None):
        super().__init__(message)
        self.product_id = product_id
        self.attribute = attribute


class InvalidProductPriceException(BusinessError):
    """Levée lorsqu'un produit n'a pas de prix strictement positif dans la devise de la commande."""
    code = "INVALID_PRODUCT_PRICE"

    def __init__(self, product_id: str, currency: str):
        super().__init__(f"Invalid product price for: {product_id} ({currency})")
        self.product_id = product_id
        self.currency = currency


class InvalidOrderAmountException(BusinessError):
    """Levée si le total calculé est hors de l'intervalle ]0, MAX_ORDER_AMOUNT]."""
    code = "INVALID_ORDER_AMOUNT"
    status_code = 500

    def __init__(self, total: Decimal):
        super().__init__(f"Invalid order amount: {total}")
        self.total = total


class OrderPersistenceException(InternalError):
    """Levée lorsque l'écriture de la commande a échoué (transaction annulée)."""
    code = "ORDER_PERSISTENCE_FAILED"


class OrderNotFoundException(UserError):
    """Levée lorsqu'une commande spécifique n'est pas trouvée."""
    code = "ORDER_NOT_FOUND"
    status_code = 404

    def __init__(self, order_id: int):
        super().__init__(f"Order not found: {order_id}")
        self.order_id = order_id


class InvalidOrderStatusException(UserError):
    """Levée lorsque le statut fourni pour une commande est inconnu."""
    code = "INVALID_ORDER_STATUS"

    def __init__(self, status: str, allowed: List[str]):
        super().__init__(f"Invalid order status '{status}'. Allowed statuses: {', '.join(allowed)}.")
        self.status = status
        self.allowed = allowed


class InvalidStatusTransitionException(UserError):
    """Levée lorsqu'un changement de statut n'est pas permis par le cycle de vie."""
    code = "INVALID_STATUS_TRANSITION"

    def __init__(self, current_status: str, requested_status: str):
        super().__init__(f"Invalid status transition from {current_status} to {requested_status}")
        self.current_status = current_status
        self.requested_status = requested_status
