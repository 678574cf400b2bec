import pytest
from unittest.mock import AsyncMock

from modules.auth.service import AuthService
from modules.auth.models import RegisterRequest
from modules.auth.exceptions import (
    EmailAlreadyRegisteredError,
    InvalidPasswordError,
    UserNotRegisteredError,
)
from modules.users.exceptions import DuplicateEmailError, UserNotFoundError
from modules.users.models import IdentityProvider, User, UserRole

from tests.conftest import TEST_PASSWORD


def register_request(email: str = "new@example.com", password: str = "s3cret-pass") -> RegisterRequest:
    return RegisterRequest(
        firstName="Ada",
        lastName="Lovelace",
        email=email,
        password=password,
        avatar="ada.png",
    )


class TestVerifyPassword:
    @pytest.mark.asyncio
    async def test_correct_password(self, store, auth_service: AuthService, password_hash):
        """Correct credentials should return the stored user."""
        user_id = store.add_user(email="login@example.com", password_hash=password_hash)

        user = await auth_service.verify_password("login@example.com", TEST_PASSWORD)

        assert user.id == user_id
        assert user.email == "login@example.com"

    @pytest.mark.asyncio
    async def test_wrong_password(self, store, auth_service: AuthService, password_hash):
        store.add_user(email="login@example.com", password_hash=password_hash)

        with pytest.raises(InvalidPasswordError) as exc_info:
            await auth_service.verify_password("login@example.com", "wrong-password")
        assert exc_info.value.code == "BAD_PASSWORD"

    @pytest.mark.asyncio
    async def test_unregistered_email(self, auth_service: AuthService):
        with pytest.raises(UserNotRegisteredError) as exc_info:
            await auth_service.verify_password("nobody@example.com", TEST_PASSWORD)
        assert exc_info.value.code == "NOT_REGISTERED"

    @pytest.mark.asyncio
    async def test_federated_account_has_no_password(self, store, auth_service: AuthService):
        """A Google-only account cannot log in with a password."""
        store.add_user(email="g@example.com", password_hash=None, provider="google")

        with pytest.raises(InvalidPasswordError):
            await auth_service.verify_password("g@example.com", "")

    @pytest.mark.asyncio
    async def test_corrupt_hash(self, store, auth_service: AuthService):
        store.add_user(email="odd@example.com", password_hash="not-a-bcrypt-hash")

        with pytest.raises(InvalidPasswordError):
            await auth_service.verify_password("odd@example.com", TEST_PASSWORD)


class TestResolveFederatedIdentity:
    @pytest.mark.asyncio
    async def test_creates_user_on_first_login(self, store, auth_service: AuthService):
        user = await auth_service.resolve_federated_identity(
            "fed@example.com", first_name="Grace", last_name="Hopper", avatar="g.png"
        )

        assert store.insert_calls == 1
        assert user.email == "fed@example.com"
        assert user.provider is IdentityProvider.GOOGLE
        assert user.role is UserRole.USER
        assert user.profiles == []
        assert user.first_name == "Grace"
        assert user.password_hash is None

    @pytest.mark.asyncio
    async def test_second_login_returns_same_user(self, store, auth_service: AuthService):
        first = await auth_service.resolve_federated_identity("fed@example.com")
        second = await auth_service.resolve_federated_identity("fed@example.com")

        assert first.id == second.id
        assert store.insert_calls == 1
        assert len(store.documents) == 1

    @pytest.mark.asyncio
    async def test_existing_user_not_updated(self, store, auth_service: AuthService):
        """Repeat federated logins do not overwrite stored display fields."""
        await auth_service.resolve_federated_identity("fed@example.com", first_name="Old")
        user = await auth_service.resolve_federated_identity("fed@example.com", first_name="New")

        assert user.first_name == "Old"

    @pytest.mark.asyncio
    async def test_existing_local_user_returned(self, store, auth_service: AuthService, password_hash):
        user_id = store.add_user(email="local@example.com", password_hash=password_hash)

        user = await auth_service.resolve_federated_identity("local@example.com")

        assert user.id == user_id
        assert user.provider is IdentityProvider.LOCAL
        assert store.insert_calls == 0

    @pytest.mark.asyncio
    async def test_concurrent_insert_resolves_to_existing(self, hasher):
        """A duplicate-key failure on insert means another request created the user."""
        existing = User(id="65f0c0ffee0000000000abcd", email="race@example.com", provider="google")
        store = AsyncMock()
        store.find_by_email.side_effect = [None, existing]
        store.insert.side_effect = DuplicateEmailError("race@example.com")

        user = await AuthService(store, hasher).resolve_federated_identity("race@example.com")

        assert user is existing
        assert store.find_by_email.await_count == 2


class TestRegister:
    @pytest.mark.asyncio
    async def test_register(self, store, auth_service: AuthService):
        user = await auth_service.register(register_request())

        assert user.email == "new@example.com"
        assert user.provider is IdentityProvider.LOCAL
        assert user.role is UserRole.USER
        assert user.profiles == []
        stored = store.documents[user.id]
        assert stored["password"] != "s3cret-pass"
        assert stored["password"].startswith("$2")

    @pytest.mark.asyncio
    async def test_registered_user_can_log_in(self, auth_service: AuthService):
        await auth_service.register(register_request())

        user = await auth_service.verify_password("new@example.com", "s3cret-pass")
        assert user.email == "new@example.com"

    @pytest.mark.asyncio
    async def test_duplicate_email(self, store, auth_service: AuthService):
        store.add_user(email="new@example.com")

        with pytest.raises(EmailAlreadyRegisteredError):
            await auth_service.register(register_request())
        assert store.insert_calls == 0

    @pytest.mark.asyncio
    async def test_duplicate_key_on_insert(self, hasher):
        store = AsyncMock()
        store.find_by_email.return_value = None
        store.insert.side_effect = DuplicateEmailError("new@example.com")

        with pytest.raises(EmailAlreadyRegisteredError):
            await AuthService(store, hasher).register(register_request())


class TestGetUser:
    @pytest.mark.asyncio
    async def test_found(self, store, auth_service: AuthService):
        user_id = store.add_user()
        user = await auth_service.get_user(user_id)
        assert user.id == user_id

    @pytest.mark.asyncio
    async def test_missing(self, auth_service: AuthService):
        with pytest.raises(UserNotFoundError):
            await auth_service.get_user("65f0c0ffee0000000000abcd")
