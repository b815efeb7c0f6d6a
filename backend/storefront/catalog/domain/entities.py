from enum import Enum
from typing import List, Optional
from decimal import Decimal

from pydantic import Field

from storefront.core.schemas import ApiModel

# Entités du Domaine "Catalog"
# Construites depuis les modèles SQLModel, en lecture seule pour la prise de commande.


class ProductKind(str, Enum):
    SIMPLE = "simple"              # Aucun jeu d'attributs
    CONFIGURABLE = "configurable"  # Une valeur requise par jeu d'attributs


class AttributeKind(str, Enum):
    TEXT = "text"
    SWATCH = "swatch"


class CurrencyEntity(ApiModel):
    label: str
    symbol: str


class PriceEntity(ApiModel):
    amount: Decimal = Field(..., ge=0)
    currency: CurrencyEntity


class AttributeItemEntity(ApiModel):
    id: str
    display_value: str
    value: str  # Valeur canonique comparée à la sélection et persistée


class AttributeSetEntity(ApiModel):
    id: str
    name: str
    type: AttributeKind = AttributeKind.TEXT
    items: List[AttributeItemEntity] = []

    def has_value(self, value: str) -> bool:
        return any(item.value == value for item in self.items)


class ProductEntity(ApiModel):
    id: str
    name: str
    brand: Optional[str] = None
    description: Optional[str] = None
    in_stock: bool
    category: str
    prices: List[PriceEntity] = []
    gallery: List[str] = []  # URLs des images, par position
    attributes: List[AttributeSetEntity] = []  # Ordre du catalogue

    @property
    def kind(self) -> ProductKind:
        return ProductKind.CONFIGURABLE if self.attributes else ProductKind.SIMPLE

    def get_price(self, currency_label: str) -> Optional[PriceEntity]:
        """Retourne le prix dans la devise demandée, ou None s'il n'existe pas."""
        for price in self.prices:
            if price.currency.label == currency_label:
                return price
        return None
