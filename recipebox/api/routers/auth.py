"""PIN check for the lock screen."""

import logging

from fastapi import APIRouter, HTTPException, status

from recipebox.api.auth import PinNotConfiguredError, check_pin
from recipebox.api.schemas.common import VerifyPinRequest, VerifyPinResponse

router = APIRouter(prefix="/api/auth", tags=["auth"])
_LOGGER = logging.getLogger(__name__)


@router.post("/verify-pin", response_model=VerifyPinResponse)
def verify_pin_endpoint(request: VerifyPinRequest) -> VerifyPinResponse:
    """Check a PIN entered on the lock screen.

    Returns {"valid": false} for a wrong PIN; clients keep showing the
    lock screen and send the PIN as Bearer token once it is valid.
    """
    if not request.pin:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No PIN provided",
        )

    try:
        valid = check_pin(request.pin)
    except PinNotConfiguredError:
        _LOGGER.error("APP_PIN secret not configured")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Server configuration error",
        )

    if not valid:
        _LOGGER.info("Rejected PIN attempt")
    return VerifyPinResponse(valid=valid)
