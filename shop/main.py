# shop/main.py
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
import uvicorn

from shop.api import register_routers
from shop.data.database import build_engine, build_session_factory, init_db
from shop.data.seed import seed_products
from shop.domain.errors import AuthError, ShopError
from shop.services.token_service import TokenService
from shop.utils.logging import configure_logging, get_logger
from shop.utils.settings import Settings, load_settings

logger = get_logger(__name__)


async def auth_error_handler(request: Request, exc: AuthError):
    # minimalna informacja - bez zdradzania czy username istnieje
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def shop_error_handler(request: Request, exc: ShopError):
    logger.error(f"Unhandled {type(exc).__name__} on {request.url.path}: {exc.message}")
    return JSONResponse({"detail": "Error occurred"}, status_code=500)


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    engine = engine or build_engine(settings.database_url)
    session_factory = build_session_factory(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Initializing database...")
        init_db(engine)
        if settings.seed_products:
            db = session_factory()
            try:
                seed_products(db)
            finally:
                db.close()
        yield
        engine.dispose()

    app = FastAPI(
        title="Shop Service",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.session_factory = session_factory
    # sekret tylko do odczytu, wstrzykiwany raz przy starcie
    app.state.token_service = TokenService(
        secret_key=settings.secret_key,
        algorithm=settings.token_algorithm,
        ttl_seconds=settings.token_ttl_seconds,
    )

    app.add_exception_handler(AuthError, auth_error_handler)
    app.add_exception_handler(ShopError, shop_error_handler)

    register_routers(app)

    return app


if __name__ == "__main__":
    uvicorn.run(create_app(), host="0.0.0.0", port=3000)
