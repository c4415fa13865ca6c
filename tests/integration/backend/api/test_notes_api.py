"""
Integration Tests for Notes API.

Tests the notes API endpoints with a real database.
"""

from datetime import datetime
from uuid import UUID, uuid4

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from modules.backend.models.note import NoteModel


async def _create(client: AsyncClient, **fields) -> dict:
    """Create a note through the API and return its data."""
    body = {"title": "Title", "content": "Content", **fields}
    response = await client.post("/api/v1/notes", json=body)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestCreateNote:
    """Tests for POST /api/v1/notes."""

    @pytest.mark.asyncio
    async def test_create_note_success(
        self,
        client: AsyncClient,
        note_payload,
        api,
    ):
        """Should create a note and return it."""
        response = await client.post("/api/v1/notes", json=note_payload)

        data = api.assert_success(response, expected_status=201)
        note = data["data"]
        assert note["title"] == "Test Note"
        assert note["content"] == "Test content"
        assert note["tags"] == ["tag1", "tag2"]
        assert UUID(note["id"])
        assert note["created_at"] == note["updated_at"]

    @pytest.mark.asyncio
    async def test_create_note_persists_row(
        self,
        client: AsyncClient,
        db_session: AsyncSession,
        note_payload,
    ):
        """The created note should be committed to the notes table."""
        response = await client.post("/api/v1/notes", json=note_payload)
        note_id = response.json()["data"]["id"]

        row = await db_session.get(NoteModel, note_id)
        assert row is not None
        assert row.tags == ["tag1", "tag2"]

    @pytest.mark.asyncio
    async def test_create_note_without_tags(
        self,
        client: AsyncClient,
        api,
    ):
        """Missing tags should come back as an empty list."""
        response = await client.post(
            "/api/v1/notes",
            json={"title": "Title Only Tags", "content": "Body"},
        )

        data = api.assert_success(response, expected_status=201)
        assert data["data"]["tags"] == []

    @pytest.mark.asyncio
    async def test_create_note_keeps_duplicate_tags(
        self,
        client: AsyncClient,
    ):
        """Tags should round-trip with order and duplicates intact."""
        note = await _create(client, tags=["b", "a", "b"])

        assert note["tags"] == ["b", "a", "b"]

    @pytest.mark.asyncio
    async def test_create_twice_gives_distinct_ids(
        self,
        client: AsyncClient,
        note_payload,
    ):
        """Identical requests should create two notes."""
        first = await client.post("/api/v1/notes", json=note_payload)
        second = await client.post("/api/v1/notes", json=note_payload)

        assert first.json()["data"]["id"] != second.json()["data"]["id"]

    @pytest.mark.asyncio
    async def test_create_note_blank_title_fails(
        self,
        client: AsyncClient,
        db_session: AsyncSession,
        api,
    ):
        """Should reject a blank title and store nothing."""
        response = await client.post(
            "/api/v1/notes",
            json={"title": "   ", "content": "Content"},
        )

        data = api.assert_error(response, 400, "VAL_TITLE_REQUIRED")
        assert data["error"]["details"]["field"] == "title"
        count = await db_session.scalar(select(func.count()).select_from(NoteModel))
        assert count == 0

    @pytest.mark.asyncio
    async def test_create_note_empty_content_fails(
        self,
        client: AsyncClient,
        api,
    ):
        """Should reject empty content."""
        response = await client.post(
            "/api/v1/notes",
            json={"title": "Title", "content": ""},
        )

        api.assert_error(response, 400, "VAL_CONTENT_REQUIRED")

    @pytest.mark.asyncio
    async def test_create_note_missing_title_fails(
        self,
        client: AsyncClient,
        api,
    ):
        """Should reject a body without a title."""
        response = await client.post(
            "/api/v1/notes",
            json={"content": "Content without title"},
        )

        api.assert_validation_error(response, field="title")

    @pytest.mark.asyncio
    async def test_create_note_title_too_long_fails(
        self,
        client: AsyncClient,
        api,
    ):
        """Should reject a title longer than the column allows."""
        response = await client.post(
            "/api/v1/notes",
            json={"title": "x" * 256, "content": "Content"},
        )

        api.assert_validation_error(response, field="title")

    @pytest.mark.asyncio
    async def test_create_note_long_content_accepted(
        self,
        client: AsyncClient,
        api,
    ):
        """Content has no length cap and should round-trip unchanged."""
        content = "x" * 20001

        response = await client.post(
            "/api/v1/notes",
            json={"title": "Long", "content": content},
        )

        data = api.assert_success(response, expected_status=201)
        fetched = await client.get(f"/api/v1/notes/{data['data']['id']}")
        assert fetched.json()["data"]["content"] == content

    @pytest.mark.asyncio
    async def test_create_note_non_breaking_space_title_accepted(
        self,
        client: AsyncClient,
        api,
    ):
        """A title of non-breaking spaces is content, not blank."""
        response = await client.post(
            "/api/v1/notes",
            json={"title": "\u00a0\u00a0", "content": "Content"},
        )

        data = api.assert_success(response, expected_status=201)
        assert data["data"]["title"] == "\u00a0\u00a0"


class TestGetNote:
    """Tests for GET /api/v1/notes/{note_id}."""

    @pytest.mark.asyncio
    async def test_get_note_success(
        self,
        client: AsyncClient,
        api,
    ):
        """Should return a note by ID."""
        created = await _create(client, title="Get Test", tags=["x"])

        response = await client.get(f"/api/v1/notes/{created['id']}")

        data = api.assert_success(response)
        assert data["data"] == created

    @pytest.mark.asyncio
    async def test_get_note_not_found(
        self,
        client: AsyncClient,
        api,
    ):
        """Should return 404 for a well-formed but unknown id."""
        missing = uuid4()

        response = await client.get(f"/api/v1/notes/{missing}")

        data = api.assert_error(response, 404, "RES_NOT_FOUND")
        assert data["error"]["message"] == f"Note not found with id: {missing}"

    @pytest.mark.asyncio
    async def test_get_note_malformed_id(
        self,
        client: AsyncClient,
        api,
    ):
        """Should reject an id that is not a UUID."""
        response = await client.get("/api/v1/notes/nonexistent-id")

        api.assert_validation_error(response, field="note_id")


class TestListNotes:
    """Tests for GET /api/v1/notes."""

    @pytest.mark.asyncio
    async def test_list_notes_empty(
        self,
        client: AsyncClient,
        api,
    ):
        """Should return empty list when no notes."""
        response = await client.get("/api/v1/notes")

        data = api.assert_success(response)
        assert data["data"] == []

    @pytest.mark.asyncio
    async def test_list_notes_returns_all(
        self,
        client: AsyncClient,
        api,
    ):
        """Should return every stored note."""
        first = await _create(client, title="First")
        second = await _create(client, title="Second")

        response = await client.get("/api/v1/notes")

        data = api.assert_success(response)
        assert {note["id"] for note in data["data"]} == {first["id"], second["id"]}


class TestUpdateNote:
    """Tests for PUT /api/v1/notes/{note_id}."""

    @pytest.mark.asyncio
    async def test_update_note_success(
        self,
        client: AsyncClient,
        api,
    ):
        """Should replace fields and keep identity and created_at."""
        created = await _create(client, tags=["old"])

        response = await client.put(
            f"/api/v1/notes/{created['id']}",
            json={"title": "Updated", "content": "Updated", "tags": ["updated"]},
        )

        data = api.assert_success(response)
        updated = data["data"]
        assert updated["id"] == created["id"]
        assert updated["title"] == "Updated"
        assert updated["content"] == "Updated"
        assert updated["tags"] == ["updated"]
        assert updated["created_at"] == created["created_at"]
        assert datetime.fromisoformat(updated["updated_at"]) > datetime.fromisoformat(
            created["updated_at"]
        )

    @pytest.mark.asyncio
    async def test_update_is_visible_on_get(
        self,
        client: AsyncClient,
        api,
    ):
        """A subsequent GET should return the new values."""
        created = await _create(client)
        await client.put(
            f"/api/v1/notes/{created['id']}",
            json={"title": "Changed", "content": "Changed"},
        )

        response = await client.get(f"/api/v1/notes/{created['id']}")

        data = api.assert_success(response)
        assert data["data"]["title"] == "Changed"
        assert data["data"]["tags"] == []

    @pytest.mark.asyncio
    async def test_update_note_not_found(
        self,
        client: AsyncClient,
        api,
    ):
        """Should return 404 for an unknown id."""
        response = await client.put(
            f"/api/v1/notes/{uuid4()}",
            json={"title": "Title", "content": "Content"},
        )

        api.assert_error(response, 404, "RES_NOT_FOUND")

    @pytest.mark.asyncio
    async def test_update_note_blank_title_keeps_original(
        self,
        client: AsyncClient,
        api,
    ):
        """A rejected update should leave the stored note unchanged."""
        created = await _create(client, title="Original")

        response = await client.put(
            f"/api/v1/notes/{created['id']}",
            json={"title": "", "content": "Content"},
        )

        api.assert_error(response, 400, "VAL_TITLE_REQUIRED")
        stored = await client.get(f"/api/v1/notes/{created['id']}")
        assert stored.json()["data"]["title"] == "Original"


class TestDeleteNote:
    """Tests for DELETE /api/v1/notes/{note_id}."""

    @pytest.mark.asyncio
    async def test_delete_note_success(
        self,
        client: AsyncClient,
        api,
    ):
        """Should delete the note and return 204 with no body."""
        created = await _create(client)

        response = await client.delete(f"/api/v1/notes/{created['id']}")

        assert response.status_code == 204
        assert response.content == b""
        missing = await client.get(f"/api/v1/notes/{created['id']}")
        api.assert_error(missing, 404, "RES_NOT_FOUND")

    @pytest.mark.asyncio
    async def test_delete_note_twice(
        self,
        client: AsyncClient,
        api,
    ):
        """The second delete of the same id should be 404."""
        created = await _create(client)
        await client.delete(f"/api/v1/notes/{created['id']}")

        response = await client.delete(f"/api/v1/notes/{created['id']}")

        api.assert_error(response, 404, "RES_NOT_FOUND")

    @pytest.mark.asyncio
    async def test_delete_leaves_other_notes(
        self,
        client: AsyncClient,
        api,
    ):
        """Deleting one note should not affect others."""
        keep = await _create(client, title="Keep")
        drop = await _create(client, title="Drop")

        await client.delete(f"/api/v1/notes/{drop['id']}")

        data = api.assert_success(await client.get("/api/v1/notes"))
        assert [note["id"] for note in data["data"]] == [keep["id"]]
