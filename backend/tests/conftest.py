# Standard Library
from decimal import Decimal
from typing import AsyncGenerator

# Third-Party Libraries
import pytest_asyncio

from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

# First-Party Libraries (Your project)
from storefront.main import app
from storefront.database import get_db_session
from storefront.catalog.models import (
    AttributeItem,
    AttributeSet,
    Category,
    Currency,
    Price,
    Product,
    ProductAttributeSet,
    ProductImage,
)
from storefront.orders import models as _order_models  # noqa: F401  (enregistre les tables orders)

# URL de base pour la DB en mémoire
TEST_DATABASE_BASE_URL = "sqlite+aiosqlite:///:memory:"


# --- Fixtures de Base ---

@pytest_asyncio.fixture(scope="function")
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Crée un engine en mémoire et ses tables pour chaque test."""
    # StaticPool : une seule connexion, sinon chaque connexion aurait sa propre base vide
    engine = create_async_engine(TEST_DATABASE_BASE_URL, echo=False, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Fournit une session DB isolée pour chaque test."""
    TestingSessionLocal = async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )
    async with TestingSessionLocal() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def test_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Fournit un AsyncClient httpx qui utilise la session DB de test isolée."""
    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db_session] = override_get_db_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    del app.dependency_overrides[get_db_session]


# --- Fixtures Catalogue ---

@pytest_asyncio.fixture(scope="function")
async def catalog(db_session: AsyncSession) -> dict:
    """
    Peuple le catalogue de test :
    - "ps5" : configurable (Color: red/black), en stock, 499.99 USD
    - "airtag" : simple, en stock, 29.99 USD / 27.50 EUR
    - "xbox" : simple, en rupture de stock
    - "jacket" : configurable (Size puis Color), en stock, 120.00 USD, galerie de 2 images
    - "freebie" : simple, en stock, prix 0
    """
    usd = Currency(label="USD", symbol="$")
    eur = Currency(label="EUR", symbol="€")
    db_session.add_all([usd, eur])
    db_session.add_all([Category(name="tech"), Category(name="clothes")])
    await db_session.flush()

    color = AttributeSet(id="color", name="Color", type="swatch")
    size = AttributeSet(id="size", name="Size", type="text")
    db_session.add_all([color, size])
    await db_session.flush()
    db_session.add_all([
        AttributeItem(id="red", attribute_set_id="color", display_value="Red", value="red", position=0),
        AttributeItem(id="black", attribute_set_id="color", display_value="Black", value="black", position=1),
        AttributeItem(id="s", attribute_set_id="size", display_value="Small", value="S", position=0),
        AttributeItem(id="m", attribute_set_id="size", display_value="Medium", value="M", position=1),
    ])

    db_session.add_all([
        Product(id="ps5", name="PlayStation 5", brand="Sony", in_stock=True, category="tech"),
        Product(id="airtag", name="AirTag", brand="Apple", in_stock=True, category="tech"),
        Product(id="xbox", name="Xbox Series S", brand="Microsoft", in_stock=False, category="tech"),
        Product(id="jacket", name="Jacket", brand="Canada Goose", in_stock=True, category="clothes"),
        Product(id="freebie", name="Sticker", in_stock=True, category="tech"),
    ])
    await db_session.flush()

    db_session.add_all([
        ProductAttributeSet(product_id="ps5", attribute_set_id="color", position=0),
        ProductAttributeSet(product_id="jacket", attribute_set_id="size", position=0),
        ProductAttributeSet(product_id="jacket", attribute_set_id="color", position=1),
        Price(product_id="ps5", currency_id=usd.id, amount=Decimal("499.99")),
        Price(product_id="airtag", currency_id=usd.id, amount=Decimal("29.99")),
        Price(product_id="airtag", currency_id=eur.id, amount=Decimal("27.50")),
        Price(product_id="xbox", currency_id=usd.id, amount=Decimal("299.00")),
        Price(product_id="jacket", currency_id=usd.id, amount=Decimal("120.00")),
        Price(product_id="freebie", currency_id=usd.id, amount=Decimal("0")),
        ProductImage(product_id="jacket", image_url="https://cdn.example.com/jacket-back.jpg", position=1),
        ProductImage(product_id="jacket", image_url="https://cdn.example.com/jacket-front.jpg", position=0),
    ])
    await db_session.commit()

    return {"usd_id": usd.id, "eur_id": eur.id}
