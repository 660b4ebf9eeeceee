# shop/utils/settings.py
import os
from dataclasses import dataclass
from dotenv import load_dotenv


class ConfigError(RuntimeError):
    pass


@dataclass(frozen=True)
class Settings:
    secret_key: str
    database_url: str = "sqlite:///./database.db"
    token_algorithm: str = "HS256"
    token_ttl_seconds: int = 60 * 60
    seed_products: bool = True
    log_level: str = "INFO"


def load_settings() -> Settings:
    """
    Czyta .env i zmienne srodowiskowe raz, przy starcie aplikacji.
    SECRET_KEY jest wymagany - bez niego nie podpiszemy tokenow.
    """
    load_dotenv()

    secret_key = os.getenv("SECRET_KEY")
    if not secret_key:
        raise ConfigError("SECRET_KEY is not set (env or .env)")

    return Settings(
        secret_key=secret_key,
        database_url=os.getenv("DATABASE_URL", "sqlite:///./database.db"),
        token_algorithm=os.getenv("TOKEN_ALGORITHM", "HS256"),
        token_ttl_seconds=int(os.getenv("TOKEN_TTL_SECONDS", 60 * 60)),
        seed_products=os.getenv("SEED_PRODUCTS", "true").lower() == "true",
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
