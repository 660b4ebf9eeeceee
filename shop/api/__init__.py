# shop/api/__init__.py
from fastapi import FastAPI
from shop.api.routers import auth, products, carts
from shop.api.routers.health import router as health_router


def register_routers(app: FastAPI) -> None:
    app.include_router(health_router)
    app.include_router(auth.router)
    app.include_router(products.router)
    app.include_router(carts.router)
