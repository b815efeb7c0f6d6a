"""
Module principal de l'application FastAPI Storefront.

Ce module configure l'instance FastAPI, ajoute le middleware CORS, enregistre
les handlers d'erreurs et inclut les routeurs du catalogue et des commandes.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.config import settings
from storefront.core.errors import register_exception_handlers
from storefront.database import create_tables

# --- Importer les routeurs ---
from storefront.catalog.router import category_router, product_router
from storefront.orders.router import router as order_router

# Configurer le logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.DB_CREATE_TABLES:
        logger.info("Création des tables au démarrage (DB_CREATE_TABLES actif).")
        await create_tables()
    yield


app = FastAPI(
    title="Storefront API",
    description="API de consultation du catalogue et de prise de commandes.",
    version="1.0.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# ======================================================
# Inclure les routeurs
# ======================================================
app.include_router(product_router, prefix=f"{settings.API_V1_PREFIX}/products", tags=["Produits"])
app.include_router(category_router, prefix=f"{settings.API_V1_PREFIX}/categories", tags=["Categories"])
app.include_router(order_router, prefix=f"{settings.API_V1_PREFIX}/orders", tags=["Orders"])


@app.get("/")
async def root():
    return {"message": "Storefront API"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("storefront.main:app", host="0.0.0.0", port=8000)
