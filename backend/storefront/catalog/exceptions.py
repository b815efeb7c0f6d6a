"""Exceptions spécifiques au domaine Catalog."""
from storefront.core.exceptions import UserError


class ProductNotFoundException(UserError):
    """Levée lorsqu'aucun produit ne correspond à l'identifiant."""
    code = "PRODUCT_NOT_FOUND"
    status_code = 404

    def __init__(self, product_id: str):
        super().__init__(f"Product not found: {product_id}")
        self.product_id = product_id


class ProductUnavailableException(UserError):
    """Levée lorsque le produit existe mais n'est pas en stock."""
    code = "PRODUCT_UNAVAILABLE"
    status_code = 400

    def __init__(self, product_id: str):
        super().__init__(f"Product is not available: {product_id}")
        self.product_id = product_id
