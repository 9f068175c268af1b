"""Tests for OTP issuance and delivery."""

import random
import re
from unittest.mock import MagicMock

import pytest

from authcore.core.exceptions import (
    DatabaseError,
    EmailServiceError,
    InternalError,
    TemplateRenderError,
)
from authcore.domain.services.auth.otp import OTP_EMAIL_SUBJECT, OtpService
from authcore.domain.services.email.template_renderer import EmailTemplateRenderer
from authcore.domain.value_objects.mail_message import MailMessage
from tests.factories import create_fake_user
from tests.utils.in_memory_repository import InMemoryUserRepository

SENDER = "no-reply@example.com"


class TestOtpService:
    """Test cases for OtpService."""

    @pytest.fixture
    def user(self):
        return create_fake_user(id=5, email="real@x.com", otp="111111")

    @pytest.fixture
    def repository(self, user):
        return InMemoryUserRepository([user])

    @pytest.fixture
    def otp_service(self, repository, mail_transport):
        return OtpService(repository, mail_transport, sender=SENDER, rng=random.Random(1234))

    @pytest.mark.asyncio
    async def test_unknown_email_returns_none_silently(self, user_repository, mail_transport):
        service = OtpService(user_repository, mail_transport, sender=SENDER)

        result = await service.generate_and_send_otp("missing@x.com")

        assert result is None
        mail_transport.send.assert_not_called()
        user_repository.update_otp.assert_not_called()

    @pytest.mark.asyncio
    async def test_existing_user_gets_six_digit_code(self, otp_service, mail_transport, repository, user):
        # Act
        otp = await otp_service.generate_and_send_otp(user.email)

        # Assert
        assert re.fullmatch(r"[1-9][0-9]{5}", otp)
        assert 100000 <= int(otp) <= 999999
        mail_transport.send.assert_awaited_once()
        message = mail_transport.send.await_args.args[0]
        assert isinstance(message, MailMessage)
        assert message.recipient == user.email
        assert message.sender == SENDER
        assert message.subject == OTP_EMAIL_SUBJECT
        assert message.body == f"Your OTP for verification is: {otp}"
        assert repository.otp_writes == [(user.id, otp)]
        assert repository.users[user.id].otp == otp

    @pytest.mark.asyncio
    async def test_code_comes_from_injected_random_source(self, repository, mail_transport, user):
        rng = MagicMock()
        rng.randint.return_value = 654321
        service = OtpService(repository, mail_transport, sender=SENDER, rng=rng)

        assert await service.generate_and_send_otp(user.email) == "654321"
        rng.randint.assert_called_once_with(100000, 999999)

    @pytest.mark.asyncio
    async def test_lookup_is_case_insensitive(self, otp_service, mail_transport, user):
        otp = await otp_service.generate_and_send_otp("REAL@X.COM")

        assert otp is not None
        assert mail_transport.send.await_args.args[0].recipient == "REAL@X.COM"

    @pytest.mark.asyncio
    async def test_mail_failure_raises_and_keeps_previous_code(
        self, otp_service, mail_transport, repository, user
    ):
        # Arrange
        mail_transport.send.side_effect = ConnectionRefusedError("smtp down")

        # Act/Assert
        with pytest.raises(InternalError) as exc_info:
            await otp_service.generate_and_send_otp(user.email)

        assert isinstance(exc_info.value, EmailServiceError)
        assert str(exc_info.value) == "Failed to send OTP."
        assert repository.otp_writes == []
        assert repository.users[user.id].otp == "111111"

    @pytest.mark.asyncio
    async def test_template_failure_reported_as_send_failure(
        self, repository, mail_transport, user, tmp_path
    ):
        service = OtpService(
            repository,
            mail_transport,
            sender=SENDER,
            renderer=EmailTemplateRenderer(tmp_path),
        )

        with pytest.raises(EmailServiceError) as exc_info:
            await service.generate_and_send_otp(user.email)

        assert str(exc_info.value) == "Failed to send OTP."
        assert isinstance(exc_info.value.__cause__, TemplateRenderError)
        mail_transport.send.assert_not_called()
        assert repository.otp_writes == []

    @pytest.mark.asyncio
    async def test_send_happens_before_persist(self, user_repository, mail_transport, user):
        calls = []
        user_repository.get_by_email.return_value = user
        mail_transport.send.side_effect = lambda message: calls.append("send")
        user_repository.update_otp.side_effect = lambda user_id, otp: calls.append("persist")
        service = OtpService(user_repository, mail_transport, sender=SENDER)

        await service.generate_and_send_otp(user.email)

        assert calls == ["send", "persist"]

    @pytest.mark.asyncio
    async def test_persistence_failure_propagates(self, user_repository, mail_transport, user):
        user_repository.get_by_email.return_value = user
        user_repository.update_otp.side_effect = DatabaseError("write failed")
        service = OtpService(user_repository, mail_transport, sender=SENDER)

        with pytest.raises(DatabaseError):
            await service.generate_and_send_otp(user.email)

        mail_transport.send.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_repeated_requests_overwrite_stored_code(self, otp_service, repository, user):
        first = await otp_service.generate_and_send_otp(user.email)
        second = await otp_service.generate_and_send_otp(user.email)

        assert [otp for _, otp in repository.otp_writes] == [first, second]
        assert repository.users[user.id].otp == second
