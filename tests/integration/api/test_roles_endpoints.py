"""Integration tests for roles endpoints."""

import httpx
import pytest

pytestmark = pytest.mark.integration


class TestListRoles:
    """Tests for GET /api/v1/roles."""

    @pytest.mark.asyncio
    async def test_list_returns_initial_roles(
        self, test_client: httpx.AsyncClient, api_v1_prefix: str
    ):
        """The three initial roles are listed after startup."""
        response = await test_client.get(f"{api_v1_prefix}/roles")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert {role["name"] for role in data["roles"]} == {"User", "Admin", "Moderator"}


class TestGetRole:
    """Tests for GET /api/v1/roles/{id}."""

    @pytest.mark.asyncio
    async def test_get_seeded_role(
        self, test_client: httpx.AsyncClient, api_v1_prefix: str
    ):
        """Seeded roles carry their fixed guid and timestamp."""
        response = await test_client.get(f"{api_v1_prefix}/roles/2")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Admin"
        assert data["guid"] == "b2c3d4e5-f6a7-8899-a0b1-cdef12345678"
        assert data["created_on"].startswith("2025-01-01T00:00:00")

    @pytest.mark.asyncio
    async def test_get_missing_role_is_404(
        self, test_client: httpx.AsyncClient, api_v1_prefix: str
    ):
        """An unknown role id is a 404 with the standard error body."""
        response = await test_client.get(f"{api_v1_prefix}/roles/999")

        assert response.status_code == 404
        assert response.json() == {
            "detail": "Role with Id '999' does not exist.",
            "code": "ROLE_NOT_FOUND",
        }


class TestCreateRole:
    """Tests for POST /api/v1/roles."""

    @pytest.mark.asyncio
    async def test_create_role(self, test_client: httpx.AsyncClient, api_v1_prefix: str):
        """A new role is created with a store-assigned id."""
        response = await test_client.post(
            f"{api_v1_prefix}/roles",
            json={"name": "Editor"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Editor"
        assert data["id"] > 3
        assert data["created_on"] == data["updated_on"]

        listed = await test_client.get(f"{api_v1_prefix}/roles")
        assert listed.json()["total"] == 4

    @pytest.mark.asyncio
    async def test_duplicate_name_is_400(
        self, test_client: httpx.AsyncClient, api_v1_prefix: str
    ):
        """Creating a role with a taken name is a bad request."""
        response = await test_client.post(
            f"{api_v1_prefix}/roles",
            json={"name": "Admin"},
        )

        assert response.status_code == 400
        assert response.json() == {
            "detail": "A Role with name 'Admin' already exists.",
            "code": "DUPLICATE_ROLE_NAME",
        }

    @pytest.mark.asyncio
    async def test_duplicate_guid_is_400(
        self, test_client: httpx.AsyncClient, api_v1_prefix: str
    ):
        """Creating a role with a taken guid is a bad request."""
        response = await test_client.post(
            f"{api_v1_prefix}/roles",
            json={"name": "Editor", "guid": "a1b2c3d4-e5f6-7788-99a0-bcdef1234567"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "DUPLICATE_ROLE_GUID"

    @pytest.mark.asyncio
    async def test_empty_guid_is_422(
        self, test_client: httpx.AsyncClient, api_v1_prefix: str
    ):
        """The all-zero guid is refused by request validation."""
        response = await test_client.post(
            f"{api_v1_prefix}/roles",
            json={"name": "Editor", "guid": "00000000-0000-0000-0000-000000000000"},
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_name_too_long_is_422(
        self, test_client: httpx.AsyncClient, api_v1_prefix: str
    ):
        """Names over 50 characters fail request validation."""
        response = await test_client.post(
            f"{api_v1_prefix}/roles",
            json={"name": "x" * 51},
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_blank_name_is_400(
        self, test_client: httpx.AsyncClient, api_v1_prefix: str
    ):
        """Whitespace-only names pass the schema but fail domain validation."""
        response = await test_client.post(
            f"{api_v1_prefix}/roles",
            json={"name": "   "},
        )

        assert response.status_code == 400
        assert response.json() == {
            "detail": "Role name is required.",
            "code": "INVALID_ROLE_NAME",
        }


class TestUpdateRole:
    """Tests for PUT /api/v1/roles."""

    @pytest.mark.asyncio
    async def test_rename_role(self, test_client: httpx.AsyncClient, api_v1_prefix: str):
        """Renaming a role is persisted and bumps updated_on."""
        response = await test_client.put(
            f"{api_v1_prefix}/roles",
            json={"id": 3, "name": "Mod"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Mod"
        assert data["updated_on"] > data["created_on"]

        fetched = await test_client.get(f"{api_v1_prefix}/roles/3")
        assert fetched.json()["name"] == "Mod"

    @pytest.mark.asyncio
    async def test_rename_to_taken_name_is_400(
        self, test_client: httpx.AsyncClient, api_v1_prefix: str
    ):
        """Taking another role's name is rejected and nothing changes."""
        response = await test_client.put(
            f"{api_v1_prefix}/roles",
            json={"id": 3, "name": "Admin"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == (
            "Another role with the name 'Admin' already exists."
        )

        fetched = await test_client.get(f"{api_v1_prefix}/roles/3")
        assert fetched.json()["name"] == "Moderator"

    @pytest.mark.asyncio
    async def test_update_missing_role_is_404(
        self, test_client: httpx.AsyncClient, api_v1_prefix: str
    ):
        """Renaming an unknown role is a 404."""
        response = await test_client.put(
            f"{api_v1_prefix}/roles",
            json={"id": 999, "name": "Ghost"},
        )

        assert response.status_code == 404
        assert response.json()["code"] == "ROLE_NOT_FOUND"
