# shop/services/token_service.py
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional

from jose import jwt, JWTError

from shop.domain.errors import (
    TokenMissingError,
    TokenSchemeError,
    TokenMalformedError,
    TokenExpiredError,
)
from shop.utils.clock import now_utc
from shop.utils.logging import get_logger

logger = get_logger(__name__)

BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class IdentityClaims:
    id: int
    username: str
    issued_at: datetime
    expires_at: datetime

    def as_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "username": self.username,
            "iat": int(self.issued_at.timestamp()),
            "exp": int(self.expires_at.timestamp()),
        }


class TokenService:
    """
    Bezstanowe tokeny JWT (HS256). Sekret przychodzi z Settings przy starcie
    aplikacji i nie zmienia sie w trakcie dzialania procesu.
    Brak odswiezania i odwolywania - po wygasnieciu trzeba sie zalogowac ponownie.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        ttl_seconds: int = 3600,
        clock: Callable[[], datetime] = now_utc,
    ):
        if not secret_key:
            raise ValueError("secret_key is required")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.ttl = timedelta(seconds=ttl_seconds)
        self.clock = clock

    def issue(self, claims: Dict[str, Any]) -> str:
        to_encode = dict(claims)
        issued_at = self.clock()
        to_encode["iat"] = issued_at
        to_encode["exp"] = issued_at + self.ttl
        return jwt.encode(to_encode, self._secret_key, algorithm=self.algorithm)

    def validate(self, token: Optional[str]) -> IdentityClaims:
        if not token:
            raise TokenMissingError()

        # jose sprawdza podpis; exp porownujemy z self.clock przy kazdym wywolaniu
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
        except JWTError as e:
            logger.info(f"Rejected malformed token: {e}")
            raise TokenMalformedError()

        try:
            claims = IdentityClaims(
                id=int(payload["id"]),
                username=str(payload["username"]),
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )
        except (KeyError, TypeError, ValueError, OverflowError, OSError):
            raise TokenMalformedError()

        if self.clock() >= claims.expires_at:
            logger.info("Rejected expired token")
            raise TokenExpiredError()
        return claims

    @staticmethod
    def parse_authorization(header: Optional[str]) -> str:
        if not header:
            raise TokenMissingError()
        if not header.startswith(BEARER_PREFIX):
            raise TokenSchemeError()
        return header[len(BEARER_PREFIX):]

    def authenticate(self, header: Optional[str]) -> IdentityClaims:
        return self.validate(self.parse_authorization(header))
