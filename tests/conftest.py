import os

import pytest

from tests.utils import TEST_SECRET

# Settings are read once at import time, so the environment must be primed
# before anything under authcore is imported.
os.environ["APP_ENV"] = "test"
os.environ["JWT_SECRET_KEY"] = TEST_SECRET
os.environ.setdefault("LOG_JSON", "false")

from unittest.mock import AsyncMock  # noqa: E402

from authcore.domain.interfaces.email import IMailTransport  # noqa: E402
from authcore.domain.interfaces.repositories import IUserRepository  # noqa: E402
from authcore.infrastructure.services.authentication.jwt_signer import JwtTokenSigner  # noqa: E402


@pytest.fixture
def token_signer():
    return JwtTokenSigner(TEST_SECRET)

@pytest.fixture
def user_repository():
    """Provides a mocked user repository that finds nobody by default."""
    repository = AsyncMock(spec=IUserRepository)
    repository.get_by_id = AsyncMock(return_value=None)
    repository.get_by_email = AsyncMock(return_value=None)
    repository.update_otp = AsyncMock(return_value=None)
    return repository

@pytest.fixture
def mail_transport():
    transport = AsyncMock(spec=IMailTransport)
    transport.send = AsyncMock(return_value=None)
    return transport
