# shop/domain/errors.py
"""
Wyjatki domenowe. Kazdy niesie status_code, router/handler zamienia je na
odpowiedz HTTP. Szczegoly bledow bazy nie trafiaja do klienta.
"""
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

# sterownik (np. sqlite3) rzuca OverflowError dla int spoza 64 bitow,
# SQLAlchemy go nie opakowuje
STORE_ERRORS = (SQLAlchemyError, OverflowError)


class ShopError(Exception):
    status_code = 500
    kind = "Internal"

    def __init__(self, message: str = "Internal error"):
        self.message = message
        super().__init__(self.message)


# auth

class AuthError(ShopError):
    status_code = 401


class TokenMissingError(AuthError):
    kind = "Missing"

    def __init__(self):
        super().__init__("Access denied. Token missing.")


class TokenSchemeError(AuthError):
    kind = "BadScheme"

    def __init__(self):
        super().__init__('Invalid token format. It should start with "Bearer "')


class TokenMalformedError(AuthError):
    status_code = 403
    kind = "Malformed"

    def __init__(self):
        super().__init__("Invalid token.")


class TokenExpiredError(AuthError):
    status_code = 403
    kind = "Expired"

    def __init__(self):
        super().__init__("Invalid token.")


class InvalidCredentialsError(AuthError):
    """Ten sam blad dla nieznanego usera i zlego hasla."""
    kind = "InvalidCredentials"

    def __init__(self):
        super().__init__("Authentication failed")


# credentials

class CredentialError(ShopError):
    pass


class DuplicateUsernameError(CredentialError):
    kind = "DuplicateUsername"

    def __init__(self, username: str):
        self.username = username
        super().__init__("Failed to create user")


# pricing

class PricingError(ShopError):
    pass


class ProductNotFoundError(PricingError):
    kind = "ProductNotFound"

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product {product_id} referenced by cart does not exist")


# store

class StoreError(ShopError):
    pass


class StoreConnectionError(StoreError):
    kind = "ConnectionFailure"


class StoreConstraintError(StoreError):
    kind = "ConstraintViolation"


def translate_store_error(exc: Exception) -> StoreError:
    if isinstance(exc, (IntegrityError, OverflowError)):
        return StoreConstraintError(str(getattr(exc, "orig", exc)))
    return StoreConnectionError(str(exc))
