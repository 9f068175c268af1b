from datetime import datetime, timedelta, timezone

import jwt
import pytest

from authcore.core.exceptions import AuthenticationError
from authcore.domain.services.auth.token import REFRESH_TOKEN_LIFETIME, TokenService
from authcore.infrastructure.services.authentication.jwt_signer import JwtTokenSigner
from tests.utils import TEST_SECRET
from tests.factories import create_fake_token, create_fake_user
from tests.utils.in_memory_repository import InMemoryUserRepository


def _decode(token: str) -> dict:
    return jwt.decode(token, TEST_SECRET, algorithms=["HS256"])


@pytest.fixture
def user():
    return create_fake_user(id=42, email="real@x.com")


@pytest.fixture
def repository(user):
    return InMemoryUserRepository([user])


@pytest.fixture
def token_service(repository, token_signer):
    return TokenService(repository, token_signer)


@pytest.mark.asyncio
async def test_issue_token_pair_for_existing_user(token_service, user):
    # Act
    pair = await token_service.issue_token_pair(user.id)

    # Assert
    access = _decode(pair.access_token)
    refresh = _decode(pair.refresh_token)
    assert access["sub"] == str(user.id)
    assert refresh["sub"] == str(user.id)
    assert pair.token_type == "bearer"
    assert pair.expires_in == 15 * 60


@pytest.mark.asyncio
async def test_issue_token_pair_lifetimes(token_service, user):
    pair = await token_service.issue_token_pair(user.id)

    access = _decode(pair.access_token)
    refresh = _decode(pair.refresh_token)
    assert access["exp"] - access["iat"] == 15 * 60
    assert refresh["exp"] - refresh["iat"] == int(REFRESH_TOKEN_LIFETIME.total_seconds())


@pytest.mark.asyncio
async def test_issue_token_pair_unknown_user_raises_unauthorized(user_repository, mocker, token_signer):
    # Arrange
    sign = mocker.spy(token_signer, "sign")
    service = TokenService(user_repository, token_signer)

    # Act/Assert
    with pytest.raises(AuthenticationError) as exc_info:
        await service.issue_token_pair(999)

    assert exc_info.value.code == "unauthorized"
    user_repository.get_by_id.assert_awaited_once_with(999)
    sign.assert_not_called()


def test_issue_access_token_skips_user_lookup(user_repository, token_signer):
    service = TokenService(user_repository, token_signer)

    token = service.issue_access_token(7)

    assert _decode(token)["sub"] == "7"
    user_repository.get_by_id.assert_not_called()


def test_issue_refresh_token_expires_in_two_days(user_repository, token_signer):
    service = TokenService(user_repository, token_signer)

    claims = _decode(service.issue_refresh_token(7))

    assert claims["exp"] - claims["iat"] == 2 * 24 * 60 * 60


@pytest.mark.asyncio
async def test_verify_refresh_token_resolves_user(token_service, user):
    refresh_token = token_service.issue_refresh_token(user.id)

    assert await token_service.verify_refresh_token(refresh_token) == user.id


@pytest.mark.asyncio
async def test_verify_refresh_token_near_end_of_window(repository, user):
    # Issued 47 hours ago: still inside the two-day window
    issued_at = datetime.now(timezone.utc) - timedelta(hours=47)
    issuer = TokenService(repository, JwtTokenSigner(TEST_SECRET, clock=lambda: issued_at))
    verifier = TokenService(repository, JwtTokenSigner(TEST_SECRET))

    refresh_token = issuer.issue_refresh_token(user.id)

    assert await verifier.verify_refresh_token(refresh_token) == user.id


@pytest.mark.asyncio
async def test_verify_refresh_token_after_two_days_returns_none(repository, user):
    issued_at = datetime.now(timezone.utc) - timedelta(days=2, minutes=1)
    issuer = TokenService(repository, JwtTokenSigner(TEST_SECRET, clock=lambda: issued_at))
    verifier = TokenService(repository, JwtTokenSigner(TEST_SECRET))

    refresh_token = issuer.issue_refresh_token(user.id)

    assert await verifier.verify_refresh_token(refresh_token) is None


@pytest.mark.asyncio
@pytest.mark.parametrize("garbage", ["", "invalid-token", "a.b.c", "eyJhbGciOiJIUzI1NiJ9.e30."])
async def test_verify_refresh_token_malformed_returns_none(token_service, garbage):
    assert await token_service.verify_refresh_token(garbage) is None


@pytest.mark.asyncio
async def test_verify_refresh_token_wrong_signature_returns_none(token_service, user):
    forged = create_fake_token(sub=str(user.id))

    assert await token_service.verify_refresh_token(forged) is None


@pytest.mark.asyncio
async def test_verify_refresh_token_non_numeric_subject_returns_none(token_service):
    token = create_fake_token(sub="not-a-number", secret=TEST_SECRET)

    assert await token_service.verify_refresh_token(token) is None


@pytest.mark.asyncio
async def test_verify_refresh_token_missing_subject_returns_none(token_service):
    token = create_fake_token(sub=None, secret=TEST_SECRET)

    assert await token_service.verify_refresh_token(token) is None


@pytest.mark.asyncio
async def test_verify_refresh_token_for_deleted_user_returns_none(token_service, repository, user):
    # Arrange
    refresh_token = token_service.issue_refresh_token(user.id)
    repository.delete(user.id)

    # Act/Assert
    assert await token_service.verify_refresh_token(refresh_token) is None


@pytest.mark.asyncio
async def test_verify_refresh_token_swallows_repository_errors(user_repository, token_signer):
    from authcore.core.exceptions import DatabaseError

    user_repository.get_by_id.side_effect = DatabaseError("connection reset")
    service = TokenService(user_repository, token_signer)

    assert await service.verify_refresh_token(service.issue_refresh_token(3)) is None


@pytest.mark.asyncio
async def test_verify_refresh_token_unreachable_user_store_returns_none(user_repository, token_signer):
    user_repository.get_by_id.side_effect = ConnectionRefusedError("db down")
    service = TokenService(user_repository, token_signer)

    assert await service.verify_refresh_token(service.issue_refresh_token(3)) is None


@pytest.mark.asyncio
async def test_verify_refresh_token_oversized_subject_returns_none(user_repository, token_signer, mocker):
    mocker.patch.object(token_signer, "verify", return_value={"sub": float("inf")})
    service = TokenService(user_repository, token_signer)

    assert await service.verify_refresh_token("any.token.value") is None
    user_repository.get_by_id.assert_not_called()
