"""Integration tests for user profile endpoints."""

import httpx
import pytest

pytestmark = pytest.mark.integration


class TestCreateProfile:
    """Tests for POST /api/v1/profiles."""

    @pytest.mark.asyncio
    async def test_create_profile(
        self, test_client: httpx.AsyncClient, api_v1_prefix: str, alice_payload: dict
    ):
        """Creating a profile returns it with role_id but no embedded role."""
        response = await test_client.post(
            f"{api_v1_prefix}/profiles",
            json=alice_payload,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Alice"
        assert data["email"] == "alice@x.com"
        assert data["role_id"] == 2
        assert data["role"] is None
        assert data["receive_newsletter"] is True

    @pytest.mark.asyncio
    async def test_apostrophe_email_is_accepted(
        self, test_client: httpx.AsyncClient, api_v1_prefix: str, alice_payload: dict
    ):
        """Valid addresses such as o'brien@example.com are stored."""
        alice_payload["email"] = "o'brien@example.com"

        response = await test_client.post(
            f"{api_v1_prefix}/profiles",
            json=alice_payload,
        )

        assert response.status_code == 201
        assert response.json()["email"] == "o'brien@example.com"

    @pytest.mark.asyncio
    async def test_missing_role_is_400(
        self, test_client: httpx.AsyncClient, api_v1_prefix: str, alice_payload: dict
    ):
        """A role_id that matches no role is a bad request."""
        alice_payload["role_id"] = 999

        response = await test_client.post(
            f"{api_v1_prefix}/profiles",
            json=alice_payload,
        )

        assert response.status_code == 400
        assert response.json() == {
            "detail": "Role with Id '999' does not exist. Cannot create user profile.",
            "code": "ROLE_REFERENCE_NOT_FOUND",
        }

    @pytest.mark.asyncio
    async def test_duplicate_guid_is_400(
        self, test_client: httpx.AsyncClient, api_v1_prefix: str, alice_payload: dict
    ):
        """Reusing a profile guid is a bad request."""
        # Create the first profile with a fixed guid
        alice_payload["guid"] = "11111111-2222-3333-4444-555555555555"
        await test_client.post(f"{api_v1_prefix}/profiles", json=alice_payload)

        alice_payload["email"] = "someone.else@x.com"
        response = await test_client.post(
            f"{api_v1_prefix}/profiles",
            json=alice_payload,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "DUPLICATE_IDENTITY"

    @pytest.mark.asyncio
    async def test_duplicate_email_is_400(
        self, test_client: httpx.AsyncClient, api_v1_prefix: str, alice_payload: dict
    ):
        """Reusing an email on create is a bad request."""
        await test_client.post(f"{api_v1_prefix}/profiles", json=alice_payload)

        alice_payload["name"] = "Alice Clone"
        response = await test_client.post(
            f"{api_v1_prefix}/profiles",
            json=alice_payload,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "DUPLICATE_EMAIL"

    @pytest.mark.asyncio
    async def test_empty_guid_is_422(
        self, test_client: httpx.AsyncClient, api_v1_prefix: str, alice_payload: dict
    ):
        """The all-zero guid is refused by request validation."""
        alice_payload["guid"] = "00000000-0000-0000-0000-000000000000"

        response = await test_client.post(
            f"{api_v1_prefix}/profiles",
            json=alice_payload,
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_invalid_email_is_422(
        self, test_client: httpx.AsyncClient, api_v1_prefix: str, alice_payload: dict
    ):
        """Malformed addresses fail request validation."""
        alice_payload["email"] = "not-an-email"

        response = await test_client.post(
            f"{api_v1_prefix}/profiles",
            json=alice_payload,
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_bio_too_long_is_422(
        self, test_client: httpx.AsyncClient, api_v1_prefix: str, alice_payload: dict
    ):
        """A bio over 500 characters fails request validation."""
        alice_payload["bio"] = "b" * 501

        response = await test_client.post(
            f"{api_v1_prefix}/profiles",
            json=alice_payload,
        )

        assert response.status_code == 422


class TestReadProfiles:
    """Tests for GET /api/v1/profiles and /api/v1/profiles/{id}."""

    @pytest.mark.asyncio
    async def test_get_missing_profile_is_404(
        self, test_client: httpx.AsyncClient, api_v1_prefix: str
    ):
        """An unknown profile id is a 404."""
        response = await test_client.get(f"{api_v1_prefix}/profiles/404")

        assert response.status_code == 404
        assert response.json()["code"] == "USER_PROFILE_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_list_embeds_roles(
        self, test_client: httpx.AsyncClient, api_v1_prefix: str, alice_payload: dict
    ):
        """Listed profiles carry their role."""
        # Create two profiles on different roles
        await test_client.post(f"{api_v1_prefix}/profiles", json=alice_payload)
        await test_client.post(
            f"{api_v1_prefix}/profiles",
            json={"name": "Bob", "email": "bob@x.com", "role_id": 1},
        )

        response = await test_client.get(f"{api_v1_prefix}/profiles")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        roles = {p["name"]: p["role"]["name"] for p in data["profiles"]}
        assert roles == {"Alice": "Admin", "Bob": "User"}

    @pytest.mark.asyncio
    async def test_list_empty(self, test_client: httpx.AsyncClient, api_v1_prefix: str):
        """No profiles gives an empty list."""
        response = await test_client.get(f"{api_v1_prefix}/profiles")

        assert response.json() == {"profiles": [], "total": 0}


class TestUpdateProfile:
    """Tests for PUT /api/v1/profiles."""

    @pytest.mark.asyncio
    async def test_update_profile(
        self, test_client: httpx.AsyncClient, api_v1_prefix: str, alice_payload: dict
    ):
        """An update overwrites fields and keeps guid and created_on."""
        created = (
            await test_client.post(f"{api_v1_prefix}/profiles", json=alice_payload)
        ).json()

        response = await test_client.put(
            f"{api_v1_prefix}/profiles",
            json={
                "id": created["id"],
                "name": "Alice Liddell",
                "email": "alice@x.com",
                "role_id": 3,
                "receive_newsletter": False,
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Alice Liddell"
        assert data["bio"] is None
        assert data["guid"] == created["guid"]
        assert data["created_on"] == created["created_on"]
        assert data["updated_on"] > created["updated_on"]

        fetched = await test_client.get(f"{api_v1_prefix}/profiles/{created['id']}")
        assert fetched.json()["role"]["name"] == "Moderator"

    @pytest.mark.asyncio
    async def test_update_to_taken_email_is_400(
        self, test_client: httpx.AsyncClient, api_v1_prefix: str, alice_payload: dict
    ):
        """Taking another profile's email is a bad request."""
        await test_client.post(f"{api_v1_prefix}/profiles", json=alice_payload)
        bob = (
            await test_client.post(
                f"{api_v1_prefix}/profiles",
                json={"name": "Bob", "email": "bob@x.com", "role_id": 1},
            )
        ).json()

        response = await test_client.put(
            f"{api_v1_prefix}/profiles",
            json={"id": bob["id"], "name": "Bob", "email": "alice@x.com", "role_id": 1},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "DUPLICATE_EMAIL"

    @pytest.mark.asyncio
    async def test_update_to_missing_role_is_400(
        self, test_client: httpx.AsyncClient, api_v1_prefix: str, alice_payload: dict
    ):
        """Moving a profile to an unknown role is a bad request."""
        created = (
            await test_client.post(f"{api_v1_prefix}/profiles", json=alice_payload)
        ).json()

        response = await test_client.put(
            f"{api_v1_prefix}/profiles",
            json={
                "id": created["id"],
                "name": "Alice",
                "email": "alice@x.com",
                "role_id": 999,
            },
        )

        assert response.status_code == 400
        assert response.json()["code"] == "ROLE_REFERENCE_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_update_missing_profile_is_404(
        self, test_client: httpx.AsyncClient, api_v1_prefix: str
    ):
        """Updating an unknown profile id is a 404."""
        response = await test_client.put(
            f"{api_v1_prefix}/profiles",
            json={"id": 999, "name": "Ghost", "email": "ghost@x.com", "role_id": 1},
        )

        assert response.status_code == 404
        assert response.json()["code"] == "USER_PROFILE_NOT_FOUND"


class TestHealth:
    """Tests for GET /health."""

    @pytest.mark.asyncio
    async def test_health(self, test_client: httpx.AsyncClient):
        """The unversioned health check reports healthy."""
        response = await test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
