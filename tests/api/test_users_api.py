"""HTTP tests for /api/v1/users: status codes, payload shapes and the list contract."""

from httpx import AsyncClient

from tests.helpers import user_payload

USERS = "/api/v1/users"


async def _create(client: AsyncClient, n, **overrides) -> dict:
    resp = await client.post(USERS, json=user_payload(n, **overrides))
    assert resp.status_code == 201, resp.text
    return resp.json()


async def test_create_and_get_user(client: AsyncClient) -> None:
    created = await _create(client, 1, date_of_birth="1990-05-17")
    assert "password" not in created
    assert "hashed_password" not in created
    assert created["is_active"] is True

    resp = await client.get(f"{USERS}/{created['id']}")
    assert resp.status_code == 200
    body = resp.json()
    assert body["username"] == "user1"
    assert body["date_of_birth"] == "1990-05-17"


async def test_create_validation_is_422(client: AsyncClient) -> None:
    resp = await client.post(USERS, json=user_payload(1, email="not-an-email"))
    assert resp.status_code == 422
    assert resp.json()["error"] == "REQUEST_VALIDATION_ERROR"

    resp = await client.post(USERS, json=user_payload(1, password="short"))
    assert resp.status_code == 422


async def test_duplicate_username_is_409(client: AsyncClient) -> None:
    await _create(client, 1)
    resp = await client.post(USERS, json=user_payload(2, username="user1"))
    assert resp.status_code == 409
    body = resp.json()
    assert body["error"] == "USER_ALREADY_EXISTS"
    assert body["details"] == {"field": "username"}

    listed = (await client.get(USERS)).json()
    assert listed["total"] == 1


async def test_get_missing_user_is_404(client: AsyncClient) -> None:
    resp = await client.get(f"{USERS}/does-not-exist")
    assert resp.status_code == 404
    assert resp.json()["error"] == "RESOURCE_NOT_FOUND"


async def test_soft_delete_restore_cycle(client: AsyncClient) -> None:
    user = await _create(client, 1)

    resp = await client.delete(f"{USERS}/{user['id']}")
    assert resp.status_code == 204
    assert (await client.get(f"{USERS}/{user['id']}")).status_code == 404

    deleted = (await client.get(f"{USERS}/deleted")).json()
    assert [u["id"] for u in deleted] == [user["id"]]
    assert deleted[0]["is_deleted"] is True

    resp = await client.patch(f"{USERS}/{user['id']}/restore")
    assert resp.status_code == 200
    assert resp.json()["is_deleted"] is False
    assert (await client.get(f"{USERS}/{user['id']}")).status_code == 200


async def test_restore_live_user_is_404(client: AsyncClient) -> None:
    user = await _create(client, 1)
    resp = await client.patch(f"{USERS}/{user['id']}/restore")
    assert resp.status_code == 404


async def test_hard_delete(client: AsyncClient) -> None:
    user = await _create(client, 1)
    resp = await client.delete(f"{USERS}/{user['id']}/hard")
    assert resp.status_code == 204
    assert (await client.get(f"{USERS}/deleted")).json() == []
    resp = await client.delete(f"{USERS}/{user['id']}/hard")
    assert resp.status_code == 404


async def test_partial_update_and_clear_last_name(client: AsyncClient) -> None:
    user = await _create(client, 1)
    resp = await client.patch(
        f"{USERS}/{user['id']}", json={"first_name": "Renamed", "last_name": None}
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["first_name"] == "Renamed"
    assert body["last_name"] is None
    assert body["username"] == "user1"


async def test_update_to_taken_email_is_409(client: AsyncClient) -> None:
    await _create(client, 1)
    other = await _create(client, 2)
    resp = await client.patch(
        f"{USERS}/{other['id']}", json={"email": "user1@example.com"}
    )
    assert resp.status_code == 409


async def test_activate_deactivate_and_active_list(client: AsyncClient) -> None:
    user = await _create(client, 1)
    resp = await client.patch(f"{USERS}/{user['id']}/deactivate")
    assert resp.json()["is_active"] is False
    assert (await client.get(f"{USERS}/active")).json() == []

    resp = await client.patch(f"{USERS}/{user['id']}/activate")
    assert resp.json()["is_active"] is True
    assert len((await client.get(f"{USERS}/active")).json()) == 1


async def test_list_search_and_pagination(client: AsyncClient) -> None:
    for n in range(15):
        await _create(client, f"{n:02d}", first_name="Searchable")
    await _create(client, "zz", first_name="Other")

    resp = await client.get(
        USERS,
        params={
            "search": "Search",
            "page": 2,
            "limit": 10,
            "sort_by": "username",
            "sort_order": "asc",
        },
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == 15
    assert body["total_pages"] == 2
    assert body["page"] == 2
    assert body["limit"] == 10
    assert len(body["items"]) == 5


async def test_list_default_limit_and_sort_order_case(client: AsyncClient) -> None:
    await _create(client, 1)
    resp = await client.get(USERS, params={"sort_order": "DESC"})
    assert resp.status_code == 200
    assert resp.json()["limit"] == 10


async def test_list_rejects_bad_parameters(client: AsyncClient) -> None:
    resp = await client.get(USERS, params={"sort_by": "hashed_password"})
    assert resp.status_code == 400
    assert resp.json()["details"] == {"field": "sort_by"}

    assert (await client.get(USERS, params={"limit": 101})).status_code == 400
    assert (await client.get(USERS, params={"page": 0})).status_code == 422
    assert (await client.get(USERS, params={"sort_order": "up"})).status_code == 422


async def test_list_filters_by_is_active(client: AsyncClient) -> None:
    await _create(client, 1)
    await _create(client, 2, is_active=False)
    body = (await client.get(USERS, params={"is_active": "false"})).json()
    assert [u["username"] for u in body["items"]] == ["user2"]


async def test_bulk_status(client: AsyncClient) -> None:
    a = await _create(client, 1)
    b = await _create(client, 2)

    resp = await client.patch(
        f"{USERS}/bulk/status", json={"ids": [a["id"], b["id"]], "is_active": False}
    )
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "updated_count": 2}


async def test_bulk_status_edge_cases(client: AsyncClient) -> None:
    resp = await client.patch(f"{USERS}/bulk/status", json={"ids": [], "is_active": True})
    assert resp.status_code == 400

    resp = await client.patch(
        f"{USERS}/bulk/status", json={"ids": ["nope"], "is_active": True}
    )
    assert resp.status_code == 200
    assert resp.json()["updated_count"] == 0


async def test_authenticated_writes_record_actor(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    me = (await client.get("/api/v1/auth/me", headers=auth_headers)).json()
    created = (
        await client.post(USERS, json=user_payload(1), headers=auth_headers)
    ).json()
    assert created["created_by"] == me["id"]
    assert created["updated_by"] == me["id"]


async def test_invalid_token_on_directory_route_is_anonymous(client: AsyncClient) -> None:
    resp = await client.post(
        USERS, json=user_payload(1), headers={"Authorization": "Bearer garbage"}
    )
    assert resp.status_code == 201
    assert resp.json()["created_by"] is None
