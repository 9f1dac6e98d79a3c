"""PIN authentication for API endpoints.

The app is unlocked with a single shared PIN (APP_PIN). Clients send it as
a Bearer token on every request; the PIN itself is never returned.
"""

import hmac
import logging

from fastapi import HTTPException, Security, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from recipebox.core.config import AuthConfig

_LOGGER = logging.getLogger(__name__)

# Bearer token security scheme
security = HTTPBearer(auto_error=False)


class PinNotConfiguredError(RuntimeError):
    """Raised when APP_PIN is not set."""


def check_pin(pin: str) -> bool:
    """Compare a PIN against the configured one in constant time.

    Raises:
        PinNotConfiguredError: If APP_PIN is not configured
    """
    if not AuthConfig.is_configured():
        raise PinNotConfiguredError("APP_PIN not configured")
    return hmac.compare_digest(pin.encode("utf-8"), AuthConfig.APP_PIN.encode("utf-8"))


def verify_pin(
    credentials: HTTPAuthorizationCredentials | None = Security(security),
) -> str:
    """Verify the PIN sent as Bearer token in the Authorization header.

    Args:
        credentials: The HTTP authorization credentials from the request header.

    Returns:
        The verified PIN.

    Raises:
        HTTPException: If the PIN is missing, wrong, or not configured.
    """
    if not AuthConfig.is_configured():
        _LOGGER.error("APP_PIN secret not configured")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="PIN not configured. Set APP_PIN environment variable.",
        )

    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authorization header",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not check_pin(credentials.credentials):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect PIN",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return credentials.credentials
