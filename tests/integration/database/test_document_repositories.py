"""Integration tests for the SQLAlchemy document repositories on SQLite."""

from datetime import date
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.exceptions import (
    ConcurrentModificationError,
    HandleTakenError,
    ProfileAlreadyExistsError,
)
from domain.entities.post import Comment, Post
from domain.entities.profile import Experience, Profile, SocialLinks
from domain.entities.user import UserAccount, UserSummary
from domain.validation import HANDLE_MAX_LENGTH
from infrastructure.database.models import PostModel, ProfileModel
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


@pytest.fixture
def uow_factory(session_factory: async_sessionmaker[AsyncSession]):
    return lambda: SQLAlchemyUnitOfWork(session_factory)


class TestProfileDocuments:
    @pytest.mark.asyncio
    async def test_embedded_records_round_trip(self, uow_factory) -> None:
        profile = Profile(
            user_id=uuid4(),
            handle="ada",
            skills=["go", "rust"],
            social=SocialLinks(twitter="twitter.com/ada"),
            experience=[
                Experience(
                    title="Engineer",
                    company="Acme",
                    from_date=date(2020, 1, 1),
                    to_date=date(2021, 6, 30),
                )
            ],
        )
        async with uow_factory() as uow:
            await uow.profiles.create(profile)
            await uow.commit()

        async with uow_factory() as uow:
            stored = await uow.profiles.get_by_handle("ada")

        assert stored.skills == ["go", "rust"]
        assert stored.social.twitter == "twitter.com/ada"
        assert stored.experience == profile.experience
        assert stored.version == 0

    @pytest.mark.asyncio
    async def test_stale_write_is_rejected(self, uow_factory) -> None:
        user_id = uuid4()
        async with uow_factory() as uow:
            await uow.profiles.create(Profile(user_id=user_id, status="Dev"))
            await uow.commit()

        async with uow_factory() as uow:
            first = await uow.profiles.get_by_user(user_id)
        async with uow_factory() as uow:
            second = await uow.profiles.get_by_user(user_id)

        first.bio = "first writer"
        async with uow_factory() as uow:
            await uow.profiles.update(first)
            await uow.commit()

        second.bio = "second writer"
        with pytest.raises(ConcurrentModificationError):
            async with uow_factory() as uow:
                await uow.profiles.update(second)

        async with uow_factory() as uow:
            stored = await uow.profiles.get_by_user(user_id)
        assert stored.bio == "first writer"
        assert stored.version == 1

    @pytest.mark.asyncio
    async def test_second_profile_for_user_is_rejected(self, uow_factory) -> None:
        user_id = uuid4()
        async with uow_factory() as uow:
            await uow.profiles.create(Profile(user_id=user_id))
            await uow.commit()

        with pytest.raises(ProfileAlreadyExistsError):
            async with uow_factory() as uow:
                await uow.profiles.create(Profile(user_id=user_id))

    @pytest.mark.asyncio
    async def test_duplicate_handle_is_rejected_by_store(self, uow_factory) -> None:
        async with uow_factory() as uow:
            await uow.profiles.create(Profile(user_id=uuid4(), handle="ada"))
            await uow.commit()

        with pytest.raises(HandleTakenError):
            async with uow_factory() as uow:
                await uow.profiles.create(Profile(user_id=uuid4(), handle="ada"))


class TestPostDocuments:
    @pytest.mark.asyncio
    async def test_likes_and_comments_round_trip(self, uow_factory) -> None:
        post = Post(user_id=uuid4(), text="hello", name="Ada", avatar="a.png")
        async with uow_factory() as uow:
            await uow.posts.create(post)
            await uow.commit()

        liker = uuid4()
        async with uow_factory() as uow:
            stored = await uow.posts.get(post.id)
            stored.add_like(liker)
            stored.add_comment(Comment(user_id=liker, text="nice", name="Grace"))
            await uow.posts.update(stored)
            await uow.commit()

        async with uow_factory() as uow:
            reloaded = await uow.posts.get(post.id)

        assert reloaded.has_liked(liker)
        assert reloaded.comments[0].text == "nice"
        assert reloaded.comments[0].date == stored.comments[0].date
        assert reloaded.version == 1

    @pytest.mark.asyncio
    async def test_update_of_deleted_post_is_rejected(self, uow_factory) -> None:
        post = Post(user_id=uuid4(), text="hello")
        async with uow_factory() as uow:
            await uow.posts.create(post)
            await uow.commit()
        async with uow_factory() as uow:
            assert await uow.posts.delete(post.id)
            await uow.commit()

        post.add_like(uuid4())
        with pytest.raises(ConcurrentModificationError):
            async with uow_factory() as uow:
                await uow.posts.update(post)


class TestColumnBounds:
    def test_only_validated_columns_are_length_bounded(self) -> None:
        bounded = {
            f"{table.name}.{column.name}": column.type.length
            for table in (ProfileModel.__table__, PostModel.__table__)
            for column in table.columns
            if getattr(column.type, "length", None)
        }

        assert bounded == {"profiles.handle": HANDLE_MAX_LENGTH}

    @pytest.mark.asyncio
    async def test_long_free_text_fields_are_stored_whole(self, uow_factory) -> None:
        name = "N" * 101
        avatar = "https://avatars.example.com/" + "a" * 600
        post = Post(user_id=uuid4(), text="hello", name=name, avatar=avatar)
        async with uow_factory() as uow:
            await uow.posts.create(post)
            await uow.commit()

        async with uow_factory() as uow:
            stored = await uow.posts.get(post.id)

        assert stored.name == name
        assert stored.avatar == avatar


class TestUserDirectory:
    @pytest.mark.asyncio
    async def test_save_inserts_then_refreshes(self, uow_factory) -> None:
        account = UserAccount(id=uuid4(), email="ada@example.com", name="Ada", avatar="a.png")
        async with uow_factory() as uow:
            await uow.users.save(account)
            await uow.commit()

        async with uow_factory() as uow:
            await uow.users.save(
                UserAccount(id=account.id, email="ada@example.com", name="Ada King")
            )
            await uow.commit()

        async with uow_factory() as uow:
            summary = await uow.users.get(account.id)

        assert summary == UserSummary(id=account.id, name="Ada King", avatar=None)

    @pytest.mark.asyncio
    async def test_saved_account_is_removed_by_delete(self, uow_factory) -> None:
        account = UserAccount(id=uuid4(), email="grace@example.com")
        async with uow_factory() as uow:
            await uow.users.save(account)
            await uow.commit()

        async with uow_factory() as uow:
            assert await uow.users.delete(account.id) is True
            await uow.commit()

        async with uow_factory() as uow:
            assert await uow.users.get(account.id) is None
