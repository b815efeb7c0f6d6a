from typing import Optional, List
from decimal import Decimal

from sqlmodel import SQLModel, Field, Relationship


# --- Catégories ---

class Category(SQLModel, table=True):
    """Modèle de table pour les catégories (référencées par leur nom)."""
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True, unique=True, max_length=100)

    __tablename__ = "categories"


class CategoryRead(SQLModel):
    """Schéma pour la lecture d'une catégorie."""
    id: int
    name: str


# --- Devises & Prix ---

class Currency(SQLModel, table=True):
    """Modèle de table pour les devises."""
    id: Optional[int] = Field(default=None, primary_key=True)
    label: str = Field(index=True, unique=True, max_length=10)  # Ex: 'USD'
    symbol: str = Field(max_length=5)  # Ex: '$'

    __tablename__ = "currencies"


class Price(SQLModel, table=True):
    """Prix d'un produit dans une devise donnée."""
    id: Optional[int] = Field(default=None, primary_key=True)
    product_id: str = Field(foreign_key="products.id", index=True)
    currency_id: int = Field(foreign_key="currencies.id")
    amount: Decimal = Field(default=0, ge=0, max_digits=10, decimal_places=2)

    product: "Product" = Relationship(back_populates="prices")
    currency: Currency = Relationship()

    __tablename__ = "prices"


# --- Attributs ---

class AttributeSet(SQLModel, table=True):
    """Dimension sélectionnable d'un produit configurable (ex: 'Size', 'Color')."""
    id: str = Field(primary_key=True, max_length=100)
    name: str = Field(max_length=100)
    type: str = Field(default="text", max_length=20)  # 'text' | 'swatch'

    items: List["AttributeItem"] = Relationship(back_populates="attribute_set")

    __tablename__ = "attribute_sets"


class AttributeItem(SQLModel, table=True):
    """Valeur possible d'un jeu d'attributs. L'ID est unique au sein de son jeu."""
    id: str = Field(primary_key=True, max_length=100)
    attribute_set_id: str = Field(foreign_key="attribute_sets.id", primary_key=True)
    display_value: str = Field(max_length=100)
    value: str = Field(max_length=100)
    position: int = Field(default=0)

    attribute_set: AttributeSet = Relationship(back_populates="items")

    __tablename__ = "attribute_items"


class ProductAttributeSet(SQLModel, table=True):
    """Lien Product <-> AttributeSet, ordonné par position."""
    product_id: str = Field(foreign_key="products.id", primary_key=True)
    attribute_set_id: str = Field(foreign_key="attribute_sets.id", primary_key=True)
    position: int = Field(default=0)

    product: "Product" = Relationship(back_populates="attribute_links")
    attribute_set: AttributeSet = Relationship()

    __tablename__ = "product_attributes"


# --- Galerie ---

class ProductImage(SQLModel, table=True):
    """Image de la galerie d'un produit, affichée par position croissante."""
    id: Optional[int] = Field(default=None, primary_key=True)
    product_id: str = Field(foreign_key="products.id", index=True)
    image_url: str = Field(max_length=500)
    position: int = Field(default=0)

    product: "Product" = Relationship(back_populates="gallery")

    __tablename__ = "product_gallery"


# --- Produits ---

class Product(SQLModel, table=True):
    """Modèle de table pour les produits. L'ID est attribué par le catalogue."""
    id: str = Field(primary_key=True, max_length=100)
    name: str = Field(max_length=255)
    brand: Optional[str] = Field(default=None, max_length=100)
    description: Optional[str] = None
    in_stock: bool = Field(default=True)
    category: str = Field(foreign_key="categories.name", index=True, max_length=100)

    prices: List[Price] = Relationship(back_populates="product")
    attribute_links: List[ProductAttributeSet] = Relationship(back_populates="product")
    gallery: List[ProductImage] = Relationship(back_populates="product")

    __tablename__ = "products"
