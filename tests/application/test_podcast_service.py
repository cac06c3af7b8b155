"""
Test suite for PodcastService.

Runs against in-memory SQLite so ownership checks, duplicate detection
and the download aggregate are exercised end to end.

System role: Verification of podcast service orchestration layer
"""

import uuid
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import SQLAlchemyError

from podcast_analytics.application.services.podcast_documents import (
    to_columns,
    validate_record,
)
from podcast_analytics.application.services.podcast_service import (
    PodcastService,
    build_create_document,
    parse_count,
)
from podcast_analytics.boundary.db.CRUD.podcast_crud import podcast_crud
from podcast_analytics.core.exceptions import (
    InvalidIdentifierError,
    NotAuthorizedError,
    PodcastNotFoundError,
    ValidationError,
)
from podcast_analytics.models.podcast import CreatePodcastRequest, UpdatePodcastRequest


@pytest.fixture
def store_podcast(test_async_db, podcast_document):
    """Factory persisting a sample document for a user."""

    async def _store(user_id: uuid.UUID, **overrides):
        record = validate_record(podcast_document(user_id, **overrides))
        podcast = await podcast_crud.create(test_async_db, user_id=user_id, **to_columns(record))
        await test_async_db.commit()
        return podcast

    return _store


@pytest.fixture
def service(test_async_db) -> PodcastService:
    return PodcastService(test_async_db)


@pytest.mark.parametrize(
    "value,expected",
    [("1234", 1234), (56, 56), ("12.7", 12), (None, 0), ("n/a", 0), (True, 0)],
)
def test_parse_count(value, expected) -> None:
    assert parse_count(value) == expected


class TestBuildCreateDocument:
    def test_statistics_seed_headline_numbers(self, fake_user) -> None:
        request = CreatePodcastRequest(
            title="Clip",
            source="youtube",
            statistics={"viewCount": "1500", "subscriberCount": "20", "commentCount": "3"},
        )

        data = build_create_document(fake_user, request)

        assert data["total_downloads"] == 1500
        assert data["platform_stats"]["youtube"] == {
            "downloads": 1500,
            "subscribers": 20,
            "reviews": 3,
        }
        assert data["engagement_metrics"]["subscribers"]["total"] == 20

    def test_defaults_fill_missing_fields(self, fake_user) -> None:
        data = build_create_document(fake_user, CreatePodcastRequest())

        assert data["title"] == "Untitled Podcast"
        assert data["description"] == "No description provided"
        assert data["source"] == "youtube"
        assert data["category"] == "Other"
        assert "cover_image" not in data


class TestCreatePodcast:
    @pytest.mark.asyncio
    async def test_creates_and_refreshes_user_total(
        self, service: PodcastService, create_user, test_async_db
    ) -> None:
        user = await create_user()
        request = CreatePodcastRequest(
            title="First",
            source="youtube",
            source_id="vid1",
            url="https://youtu.be/vid1",
            thumbnail="https://img.example.com/1.jpg",
            statistics={"viewCount": "1500"},
        )

        record, created = await service.create_podcast(user, request)

        assert created is True
        assert record.user_id == user.id
        assert record.cover_image == "https://img.example.com/1.jpg"
        assert record.total_downloads == 1500
        await test_async_db.refresh(user)
        assert user.total_downloads == 1500

    @pytest.mark.asyncio
    async def test_same_source_id_returns_existing(
        self, service: PodcastService, create_user
    ) -> None:
        user = await create_user()
        request = CreatePodcastRequest(title="Clip", source="youtube", source_id="vid1")

        first, _ = await service.create_podcast(user, request)
        second, created = await service.create_podcast(user, request)

        assert created is False
        assert second.id == first.id

    @pytest.mark.asyncio
    async def test_same_url_returns_existing(
        self, service: PodcastService, create_user
    ) -> None:
        user = await create_user()
        url = "https://youtu.be/vid1"

        first, _ = await service.create_podcast(
            user, CreatePodcastRequest(title="A", source_id="one", url=url)
        )
        second, created = await service.create_podcast(
            user, CreatePodcastRequest(title="B", source_id="two", url=url)
        )

        assert created is False
        assert second.id == first.id

    @pytest.mark.asyncio
    async def test_invalid_document_rejected(
        self, service: PodcastService, create_user
    ) -> None:
        user = await create_user()

        with pytest.raises(ValidationError) as exc_info:
            await service.create_podcast(
                user, CreatePodcastRequest(title="Bad", category="Cooking")
            )
        assert exc_info.value.status_code == 400
        assert exc_info.value.details["errors"][0]["field"] == "category"


class TestAccess:
    @pytest.mark.asyncio
    async def test_owner_and_admin_can_read(
        self, service: PodcastService, create_user, store_podcast
    ) -> None:
        owner = await create_user()
        admin = await create_user(role="admin")
        podcast = await store_podcast(owner.id)

        assert (await service.get_podcast(owner, str(podcast.id))).title == "Signal and Noise"
        assert (await service.get_podcast(admin, str(podcast.id))).id == podcast.id

    @pytest.mark.asyncio
    async def test_other_user_rejected(
        self, service: PodcastService, create_user, store_podcast
    ) -> None:
        owner = await create_user()
        stranger = await create_user()
        podcast = await store_podcast(owner.id)

        with pytest.raises(NotAuthorizedError) as exc_info:
            await service.delete_podcast(stranger, str(podcast.id))
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_bad_and_unknown_ids(self, service: PodcastService, create_user) -> None:
        user = await create_user()

        with pytest.raises(InvalidIdentifierError):
            await service.get_podcast(user, "12345")
        with pytest.raises(PodcastNotFoundError):
            await service.get_podcast(user, str(uuid.uuid4()))


class TestListPodcasts:
    @pytest.mark.asyncio
    async def test_pagination_links(
        self, service: PodcastService, create_user, store_podcast
    ) -> None:
        user = await create_user()
        for i in range(3):
            await store_podcast(user.id, source_id=f"id{i}", url=f"https://youtu.be/id{i}")

        first = await service.list_podcasts(user, page=1, limit=2)
        second = await service.list_podcasts(user, page=2, limit=2)

        assert first["count"] == 2
        assert first["pagination"].next.page == 2
        assert first["pagination"].prev is None
        assert second["count"] == 1
        assert second["pagination"].next is None
        assert second["pagination"].prev.page == 1

    @pytest.mark.asyncio
    async def test_admin_sees_all_or_one_owner(
        self, service: PodcastService, create_user, store_podcast
    ) -> None:
        alice = await create_user()
        bob = await create_user()
        admin = await create_user(role="admin")
        await store_podcast(alice.id)
        await store_podcast(bob.id)

        everything = await service.list_podcasts(admin)
        only_bob = await service.list_podcasts(admin, owner=str(bob.id))
        alice_view = await service.list_podcasts(alice)

        assert everything["count"] == 2
        assert [r.user_id for r in only_bob["data"]] == [bob.id]
        assert [r.user_id for r in alice_view["data"]] == [alice.id]


class TestUpdatePodcast:
    @pytest.mark.asyncio
    async def test_replaces_provided_fields(
        self, service: PodcastService, create_user, store_podcast, test_async_db
    ) -> None:
        user = await create_user()
        podcast = await store_podcast(user.id)

        updated = await service.update_podcast(
            user,
            str(podcast.id),
            UpdatePodcastRequest(title="Renamed", total_downloads=4321),
        )

        assert updated.title == "Renamed"
        assert updated.category == "Technology"
        assert len(updated.episodes) == 3
        await test_async_db.refresh(user)
        assert user.total_downloads == 4321

    @pytest.mark.asyncio
    async def test_merged_document_revalidated(
        self, service: PodcastService, create_user, store_podcast
    ) -> None:
        user = await create_user()
        podcast = await store_podcast(user.id)

        with pytest.raises(ValidationError, match="valid URL"):
            await service.update_podcast(
                user, str(podcast.id), UpdatePodcastRequest(website="example")
            )

        unchanged = await service.get_podcast(user, str(podcast.id))
        assert unchanged.website is None


class TestReadViews:
    @pytest.mark.asyncio
    async def test_analytics_and_rankings(
        self, service: PodcastService, create_user, store_podcast
    ) -> None:
        user = await create_user()
        podcast = await store_podcast(
            user.id,
            chart_rankings=[{"chart": "Spotify Top Podcasts", "rank": 4}],
        )

        analytics = await service.get_analytics(user, str(podcast.id))
        rankings = await service.get_rankings(user, str(podcast.id))

        assert analytics.total_downloads == 1000
        assert analytics.recent_episodes[0].title == "New"
        assert rankings[0].rank == 4

    @pytest.mark.asyncio
    async def test_history_and_removal(
        self, service: PodcastService, create_user, store_podcast
    ) -> None:
        user = await create_user()
        assert await service.get_history(user) == []

        podcast = await store_podcast(user.id)
        history = await service.get_history(user)

        assert history[0].id == podcast.id
        assert history[0].thumbnail == "https://via.placeholder.com/150"
        assert history[0].duration == "1:00:00"
        assert history[0].total_plays == 1000

        await service.remove_from_history(user, str(podcast.id))
        assert await service.get_history(user) == []


class TestWriteConflictsAndAggregate:
    @pytest.mark.asyncio
    async def test_update_to_existing_url_rejected(
        self, service: PodcastService, create_user, store_podcast
    ) -> None:
        user = await create_user()
        await store_podcast(user.id, url="https://youtu.be/a", source_id="a")
        second = await store_podcast(user.id, url="https://youtu.be/b", source_id="b")

        with pytest.raises(ValidationError, match="already in your library") as exc_info:
            await service.update_podcast(
                user, str(second.id), UpdatePodcastRequest(url="https://youtu.be/a")
            )
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_create_succeeds_when_total_refresh_fails(
        self, service: PodcastService, create_user, test_async_db, monkeypatch
    ) -> None:
        user = await create_user()
        monkeypatch.setattr(
            podcast_crud,
            "sum_downloads",
            AsyncMock(side_effect=SQLAlchemyError("aggregate failed")),
        )

        record, created = await service.create_podcast(
            user,
            CreatePodcastRequest(title="Kept", source_id="v1", statistics={"viewCount": "10"}),
        )

        assert created is True
        assert record.title == "Kept"
        await test_async_db.refresh(user)
        assert user.total_downloads == 0

    @pytest.mark.asyncio
    async def test_delete_succeeds_when_total_refresh_fails(
        self, service: PodcastService, create_user, store_podcast, monkeypatch
    ) -> None:
        user = await create_user()
        podcast = await store_podcast(user.id)
        podcast_id = str(podcast.id)
        monkeypatch.setattr(
            podcast_crud,
            "sum_downloads",
            AsyncMock(side_effect=SQLAlchemyError("aggregate failed")),
        )

        await service.delete_podcast(user, podcast_id)

        with pytest.raises(PodcastNotFoundError):
            await service.get_podcast(user, podcast_id)
