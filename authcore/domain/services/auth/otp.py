from typing import Optional

from structlog import get_logger

from authcore.core.exceptions import EmailServiceError
from authcore.core.logging import mask_email
from authcore.domain.interfaces.email import IMailTransport
from authcore.domain.interfaces.repositories import IUserRepository
from authcore.domain.services.email.template_renderer import EmailTemplateRenderer
from authcore.domain.value_objects.mail_message import MailMessage
from authcore.domain.value_objects.otp_code import OtpCode, RandomSource

logger = get_logger(__name__)

OTP_EMAIL_SUBJECT = "OTP Verification"
OTP_EMAIL_TEMPLATE = "otp_verification.txt"


class OtpService:
    """Issues one-time passwords and delivers them by email.

    The user record holds a single outstanding code; each issuance overwrites
    it. Verification of submitted codes happens elsewhere.

    Failure behaviour is deliberately asymmetric:
    - an unknown email returns None without sending anything, so the caller
      cannot discover which accounts exist;
    - a mail transport failure raises `EmailServiceError`, since it needs an
      operator, and the code is not stored.

    Attributes:
        user_repository (IUserRepository): Lookup by email and OTP writes.
        mail_transport (IMailTransport): Outbound mail channel.
        sender (str): From address of OTP emails.
        renderer (EmailTemplateRenderer): Renders the message body.
        rng (RandomSource): Source of codes; `secrets.SystemRandom` when None.

    """

    def __init__(
        self,
        user_repository: IUserRepository,
        mail_transport: IMailTransport,
        sender: str,
        renderer: Optional[EmailTemplateRenderer] = None,
        rng: Optional[RandomSource] = None,
    ):
        self.user_repository = user_repository
        self.mail_transport = mail_transport
        self.sender = sender
        self.renderer = renderer or EmailTemplateRenderer()
        self.rng = rng

    async def generate_and_send_otp(self, email: str) -> Optional[str]:
        """Generate a code for the user owning `email`, mail it, then store it.

        Args:
            email (str): Address of the account requesting a code.

        Returns:
            Optional[str]: The six-digit code, or None if no account uses
            this address.

        Raises:
            EmailServiceError: If the message cannot be rendered or sent.
                Nothing is persisted in that case.

        Note:
            The send happens before the write. If the write fails after a
            successful send, the error propagates and the emailed code is
            never valid; the user simply requests another one.

        """
        user = await self.user_repository.get_by_email(email)
        if user is None:
            logger.info("OTP requested for unknown email", email=mask_email(email))
            return None

        otp = OtpCode.generate(self.rng)
        await self._send_otp(email, otp)
        await self.user_repository.update_otp(user.id, str(otp))

        logger.info("OTP issued", user_id=user.id)
        return str(otp)

    async def _send_otp(self, email: str, otp: OtpCode) -> None:
        try:
            message = MailMessage(
                sender=self.sender,
                recipient=email,
                subject=OTP_EMAIL_SUBJECT,
                body=self.renderer.render(OTP_EMAIL_TEMPLATE, otp=str(otp)),
            )
            await self.mail_transport.send(message)
        except Exception as e:
            logger.error(
                "Failed to send OTP email",
                email=mask_email(email),
                error=str(e),
                error_type=type(e).__name__,
            )
            raise EmailServiceError("Failed to send OTP.") from e
