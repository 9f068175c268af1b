from __future__ import annotations

"""OTP endpoint: email a one-time password to an account."""

from fastapi import APIRouter, Depends, status

from authcore.adapters.api.v1.auth.schemas import MessageResponse, OtpRequest
from authcore.domain.services.auth.otp import OtpService
from authcore.infrastructure.dependency_injection.auth_dependencies import get_otp_service

router = APIRouter()

OTP_REQUEST_ACCEPTED = "If an account exists for this email, a verification code has been sent."


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_202_ACCEPTED,
    tags=["auth"],
    summary="Send a one-time password",
    responses={
        202: {"description": "Request accepted; the response never reveals whether the account exists"},
        500: {"description": "The mail transport failed"},
    },
)
async def request_otp(
    payload: OtpRequest,
    otp_service: OtpService = Depends(get_otp_service),
) -> MessageResponse:
    """Send a code to the account's email without echoing it back."""
    await otp_service.generate_and_send_otp(str(payload.email))
    return MessageResponse(message=OTP_REQUEST_ACCEPTED)
