# shop/data/database.py
from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from shop.utils.logging import get_logger

logger = get_logger(__name__)

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, **kwargs) -> Engine:
    """
    Jeden engine (pula polaczen) na proces.
    SQLite: wlaczamy klucze obce, inaczej carts.product_id nie jest pilnowany.
    """
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
        engine = create_engine(url, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    kwargs.setdefault("pool_size", 10)
    kwargs.setdefault("max_overflow", 20)
    kwargs.setdefault("pool_pre_ping", True)
    return create_engine(url, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker:
    # jedna fabryka sesji na aplikacje, trzymana w app.state
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


def init_db(engine: Engine) -> None:
    # modele musza byc zaimportowane przed create_all
    import shop.data.models  # noqa: F401

    logger.info(f"Creating tables: {list(Base.metadata.tables.keys())}")
    Base.metadata.create_all(bind=engine)


def get_db(request: Request):
    """FastAPI dependency: sesja na request, zawsze zamykana."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
