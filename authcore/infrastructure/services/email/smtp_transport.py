"""SMTP mail transport built on fastapi-mail."""

from fastapi_mail import ConnectionConfig, FastMail, MessageSchema, MessageType
from structlog import get_logger

from authcore.core.config.email import EmailSettings
from authcore.core.exceptions import EmailServiceError
from authcore.core.logging import mask_email
from authcore.domain.interfaces.email import IMailTransport
from authcore.domain.value_objects.mail_message import MailMessage

logger = get_logger(__name__)


class SmtpMailTransport(IMailTransport):
    """Sends plain-text mail through an authenticated SMTP server.

    Defaults to the submission port (587) with STARTTLS and no implicit TLS.
    In test mode messages are logged instead of sent and no SMTP connection
    is configured.

    Attributes:
        settings: Email configuration settings
        fastmail: FastMail instance, None in test mode
    """

    def __init__(self, settings: EmailSettings):
        """Initialize the transport.

        Args:
            settings: Email configuration settings

        Raises:
            EmailServiceError: If the SMTP configuration is rejected
        """
        self.settings = settings
        self.fastmail = None if settings.EMAIL_TEST_MODE else self._build_fastmail(settings)

        logger.info(
            "SMTP mail transport initialized",
            test_mode=settings.EMAIL_TEST_MODE,
            smtp_host=settings.SMTP_HOST,
            smtp_port=settings.SMTP_PORT,
        )

    @staticmethod
    def _build_fastmail(settings: EmailSettings) -> FastMail:
        try:
            config = ConnectionConfig(
                MAIL_USERNAME=settings.SMTP_USERNAME or "",
                MAIL_PASSWORD=settings.SMTP_PASSWORD.get_secret_value() if settings.SMTP_PASSWORD else "",
                MAIL_FROM=settings.FROM_EMAIL,
                MAIL_FROM_NAME=settings.FROM_NAME,
                MAIL_PORT=settings.SMTP_PORT,
                MAIL_SERVER=settings.SMTP_HOST,
                MAIL_STARTTLS=settings.SMTP_USE_TLS,
                MAIL_SSL_TLS=settings.SMTP_USE_SSL,
                USE_CREDENTIALS=bool(settings.SMTP_USERNAME and settings.SMTP_PASSWORD),
                VALIDATE_CERTS=True,
            )
        except Exception as e:
            logger.error("Failed to configure FastMail", error=str(e))
            raise EmailServiceError(f"Failed to configure email service: {e}") from e
        return FastMail(config)

    async def send(self, message: MailMessage) -> None:
        if self.fastmail is None:
            logger.info(
                "Email sent in test mode",
                to_email=mask_email(message.recipient),
                subject=message.subject,
                body_length=len(message.body),
            )
            return

        schema = MessageSchema(
            subject=message.subject,
            recipients=[message.recipient],
            body=message.body,
            subtype=MessageType.plain,
        )
        # FastMail always sends From: MAIL_FROM.
        if message.sender != self.settings.FROM_EMAIL:
            logger.warning(
                "Message sender differs from configured FROM_EMAIL",
                sender=mask_email(message.sender),
                from_email=mask_email(self.settings.FROM_EMAIL),
            )
        await self.fastmail.send_message(schema)
        logger.info(
            "Email sent successfully",
            to_email=mask_email(message.recipient),
            subject=message.subject,
        )
