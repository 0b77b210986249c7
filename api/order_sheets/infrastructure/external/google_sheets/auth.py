"""
Access token de Google a partir de una cuenta de servicio.

Flujo (OAuth2 JWT bearer):
- Se firma un JWT RS256 con la clave privada de la cuenta de servicio
  (iss = email, aud = token URL, scope fijo, exp = ahora + 1h)
- Se intercambia en el endpoint de token por un access token de corta vida
- El token se reutiliza hasta poco antes de expirar
"""

from __future__ import annotations

import asyncio
import time
from typing import Optional

import httpx
from jose import jwt
from jose.exceptions import JOSEError
from loguru import logger
from pydantic import ValidationError

from order_sheets.infrastructure.external.google_sheets.schemas import TokenResponseSchema
from order_sheets.shared.exceptions.upstream import UpstreamAuthException

JWT_BEARER_GRANT = "urn:ietf:params:oauth:grant-type:jwt-bearer"

# Margen para renovar antes de que el token expire (segundos)
EXPIRY_MARGIN_S = 60


class GoogleServiceAccountAuth:
    """
    Proveedor de access tokens para las APIs de Google.

    Importante:
    - No reintenta: un fallo en el intercambio aborta la pasada.
    - El cache es por instancia; se protege con un asyncio.Lock para que
      requests concurrentes no pidan varios tokens a la vez.
    """

    def __init__(
        self,
        *,
        client_email: str,
        private_key: str,
        token_url: str = "https://oauth2.googleapis.com/token",
        scope: str = "https://www.googleapis.com/auth/spreadsheets",
        lifetime_s: int = 3600,
        timeout_s: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._client_email = client_email
        self._private_key = private_key
        self._token_url = token_url
        self._scope = scope
        self._lifetime_s = lifetime_s
        self._timeout_s = timeout_s
        self._transport = transport
        self._access_token: Optional[str] = None
        self._expires_at: float = 0.0
        self._lock = asyncio.Lock()

    def build_assertion(self, now: Optional[int] = None) -> str:
        """
        Firma el JWT que se intercambia por el access token.

        Raises:
            UpstreamAuthException: Si faltan credenciales o la clave es invalida
        """
        if not self._client_email or not self._private_key:
            raise UpstreamAuthException("Missing Google service account credentials.")

        issued_at = int(time.time()) if now is None else now
        claims = {
            "iss": self._client_email,
            "scope": self._scope,
            "aud": self._token_url,
            "iat": issued_at,
            "exp": issued_at + self._lifetime_s,
        }
        try:
            return jwt.encode(claims, self._private_key, algorithm="RS256", headers={"typ": "JWT"})
        except JOSEError as e:
            raise UpstreamAuthException(f"Failed to sign service account assertion: {e}") from e

    async def get_access_token(self) -> str:
        """Retorna un access token vigente, pidiendo uno nuevo si hace falta."""
        async with self._lock:
            if self._access_token and time.time() < self._expires_at - EXPIRY_MARGIN_S:
                return self._access_token

            token, expires_in = await self._exchange(self.build_assertion())
            self._access_token = token
            self._expires_at = time.time() + expires_in
            logger.debug(f"Access token de Google obtenido (expira en {expires_in}s)")
            return token

    def invalidate(self) -> None:
        """Descarta el token cacheado."""
        self._access_token = None
        self._expires_at = 0.0

    async def _exchange(self, assertion: str) -> tuple[str, int]:
        data = {"grant_type": JWT_BEARER_GRANT, "assertion": assertion}
        try:
            async with httpx.AsyncClient(timeout=self._timeout_s, transport=self._transport) as client:
                resp = await client.post(self._token_url, data=data)
        except httpx.HTTPError as e:
            raise UpstreamAuthException(f"Failed to get access token: {e}") from e

        if not resp.is_success:
            raise UpstreamAuthException(
                f"Failed to get access token: {resp.text}",
                details={"upstream_status": resp.status_code},
            )

        try:
            payload = TokenResponseSchema.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise UpstreamAuthException(f"Unexpected token response: {e}") from e

        return payload.access_token, payload.expires_in or self._lifetime_s
