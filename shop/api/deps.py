# shop/api/deps.py
from typing import Optional

from fastapi import Depends, Header, Request

from shop.services.token_service import IdentityClaims, TokenService


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_current_user(
    authorization: Optional[str] = Header(default=None),
    token_service: TokenService = Depends(get_token_service),
) -> IdentityClaims:
    """
    Bearer token z naglowka Authorization -> tozsamosc usera.
    Bledy (AuthError) zamienia na 401/403 handler w main.py.
    """
    return token_service.authenticate(authorization)
