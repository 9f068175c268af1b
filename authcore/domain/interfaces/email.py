"""Mail transport interface used for OTP delivery."""

from abc import ABC, abstractmethod

from authcore.domain.value_objects.mail_message import MailMessage


class IMailTransport(ABC):
    """Delivers a single message over an authenticated channel."""

    @abstractmethod
    async def send(self, message: MailMessage) -> None:
        """Send `message`.

        Raises:
            Exception: Any transport failure; callers decide how to surface it.
        """
        raise NotImplementedError
