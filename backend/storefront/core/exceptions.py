"""Exceptions de base partagées par les domaines catalogue et commandes."""

ERROR_CATEGORY_USER = "user"
ERROR_CATEGORY_BUSINESS = "business"
ERROR_CATEGORY_INTERNAL = "internal"


class DomainException(Exception):
    """Classe de base des erreurs métier exposées au client.

    Chaque sous-classe fixe sa catégorie (user, business, internal), son code
    machine et le statut HTTP associé.
    """
    category: str = ERROR_CATEGORY_INTERNAL
    code: str = "INTERNAL_ERROR"
    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

    @property
    def is_client_safe(self) -> bool:
        """Le message peut-il être montré au client hors mode debug ?"""
        return self.category != ERROR_CATEGORY_INTERNAL


class UserError(DomainException):
    """Erreur causée par une requête client invalide."""
    category = ERROR_CATEGORY_USER
    code = "BAD_REQUEST"
    status_code = 400


class BusinessError(DomainException):
    """Erreur de règle métier (prix, montant...)."""
    category = ERROR_CATEGORY_BUSINESS
    code = "BUSINESS_ERROR"
    status_code = 400


class InternalError(DomainException):
    """Erreur interne dont le message n'est pas destiné au client."""
    category = ERROR_CATEGORY_INTERNAL
    code = "INTERNAL_ERROR"
    status_code = 500
