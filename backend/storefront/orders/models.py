from typing import Optional, List, Dict, Any
from datetime import datetime, timezone
from decimal import Decimal

from pydantic import Field as PydanticField, StrictInt
from sqlalchemy import JSON, DateTime
from sqlmodel import SQLModel, Field, Relationship

from storefront.catalog.domain.entities import CurrencyEntity
from storefront.catalog.models import Currency, Product
from storefront.core.schemas import ApiModel
from storefront.orders.config import DEFAULT_ORDER_STATUS
from storefront.orders.domain.status import OrderStatus


# --- Modèles de table ---

class Order(SQLModel, table=True):
    """Modèle de table pour les commandes."""
    id: Optional[int] = Field(default=None, primary_key=True)
    reference: Optional[str] = Field(default=None, index=True, unique=True, max_length=30)
    status: str = Field(default=DEFAULT_ORDER_STATUS, max_length=50, index=True)
    total_amount: Decimal = Field(decimal_places=2, max_digits=12)
    currency_id: int = Field(foreign_key="currencies.id")
    # Horodatages en UTC, avec fuseau
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_type=DateTime(timezone=True),
        nullable=False,
    )
    updated_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))

    items: List["OrderItem"] = Relationship(back_populates="order")
    currency: Currency = Relationship()

    __tablename__ = "orders"


class OrderItem(SQLModel, table=True):
    """Modèle de table pour les lignes de commande. Immuables après création."""
    id: Optional[int] = Field(default=None, primary_key=True)
    order_id: int = Field(foreign_key="orders.id", index=True)
    product_id: str = Field(foreign_key="products.id", index=True)
    quantity: int = Field(..., gt=0)
    # Prix figé au moment de la commande
    unit_price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    # Liste de {id, name, value}, le nom du jeu d'attributs est figé à l'écriture
    selected_attributes: Optional[List[Dict[str, Any]]] = Field(default=None, sa_type=JSON)

    order: Order = Relationship(back_populates="items")
    product: Product = Relationship()

    __tablename__ = "order_items"


# --- Schémas API (entrée) ---

class SelectedAttributeInput(ApiModel):
    id: str
    value: str


class OrderItemCreate(ApiModel):
    """Ligne demandée. productId et quantity sont contrôlés par le service."""
    product_id: Optional[str] = None
    # Pas de coercition : un booléen ou un flottant est refusé
    quantity: Optional[StrictInt] = None
    selected_attributes: Optional[List[SelectedAttributeInput]] = None


class OrderCreate(ApiModel):
    items: List[OrderItemCreate] = []
    # Devise de la commande, par défaut settings.DEFAULT_CURRENCY
    currency: Optional[str] = PydanticField(default=None, max_length=10)


class OrderStatusUpdate(ApiModel):
    status: str = PydanticField(..., max_length=50)


# --- Schémas API (sortie) ---

class SelectedAttributeRead(ApiModel):
    id: str
    name: str
    value: str


class OrderItemRead(ApiModel):
    id: int
    product_id: str
    product_name: Optional[str] = None
    quantity: int
    unit_price: Decimal
    line_total: Decimal
    selected_attributes: List[SelectedAttributeRead] = []


class OrderRead(ApiModel):
    id: int
    reference: Optional[str] = None
    total: Decimal
    status: OrderStatus
    currency: CurrencyEntity
    created_at: datetime
    items: List[OrderItemRead] = []
