"""
Unit tests for UserRepository.
"""
import pytest

from device_relay.domain.entities import UserRole
from device_relay.domain.exceptions import DuplicateUserException
from device_relay.infrastructure.memory import UserRepository

from tests.factories import UserFactory


class TestSeeding:

    def test_duplicate_seed_rejected(self):
        with pytest.raises(DuplicateUserException):
            UserRepository([UserFactory(username="a"), UserFactory(username="a")])

    @pytest.mark.asyncio
    async def test_seeded_user_is_available(self, user_repo):
        admin = await user_repo.get("admin")

        assert admin is not None
        assert admin.role == UserRole.ADMIN


class TestAdd:

    @pytest.mark.asyncio
    async def test_add_and_get(self, user_repo):
        user = UserFactory(username="carol")

        await user_repo.add(user)

        assert await user_repo.get("carol") is user

    @pytest.mark.asyncio
    async def test_add_duplicate_raises(self, user_repo):
        with pytest.raises(DuplicateUserException) as exc_info:
            await user_repo.add(UserFactory(username="admin"))

        assert exc_info.value.code == "DUPLICATE_USER"

    @pytest.mark.asyncio
    async def test_list_all(self, user_repo):
        await user_repo.add(UserFactory(username="carol"))

        names = [u.username for u in await user_repo.list_all()]

        assert names == ["admin", "carol"]

    @pytest.mark.asyncio
    async def test_get_unknown(self, user_repo):
        assert await user_repo.get("nobody") is None
