"""Category endpoints."""

API = "/api/v1"


async def _create(client, headers, category_id, name, index=0):
    return await client.post(
        f"{API}/category",
        data={"id": str(category_id), "name": name, "index": str(index)},
        headers=headers,
    )


async def test_create_and_fetch_by_path_id(client, auth_headers):
    created = await _create(client, auth_headers, 3, "Events", 1)

    response = await client.get(f"{API}/category/3")

    assert created.json() == {}
    assert response.json() == {"category": {"id": 3, "name": "Events", "index": 1}}


async def test_list_without_count_returns_all(client, auth_headers):
    for category_id in range(1, 4):
        await _create(client, auth_headers, category_id, f"Cat {category_id}")

    everything = await client.get(f"{API}/category")
    two = await client.get(f"{API}/category", params={"count": 2})

    assert len(everything.json()["categories"]) == 3
    assert len(two.json()["categories"]) == 2


async def test_patch_updates_name_only(client, auth_headers):
    await _create(client, auth_headers, 1, "News", 4)

    response = await client.patch(f"{API}/category", data={"id": "1", "name": "Updates"}, headers=auth_headers)

    assert response.status_code == 200
    assert (await client.get(f"{API}/category/1")).json()["category"] == {"id": 1, "name": "Updates", "index": 4}


async def test_delete_does_not_cascade_to_posts(client, auth_headers):
    await _create(client, auth_headers, 2, "Blog")
    await client.post(f"{API}/post", data={"id": "1", "category": "2", "title": "Orphan"}, headers=auth_headers)

    deleted = await client.request("DELETE", f"{API}/category", data={"id": "2"}, headers=auth_headers)

    assert deleted.status_code == 200
    assert (await client.get(f"{API}/category/2")).status_code == 404
    assert (await client.get(f"{API}/posts", params={"id": 1, "category": 2})).status_code == 200


async def test_non_integer_path_id_is_rejected(client):
    response = await client.get(f"{API}/category/abc")

    assert response.status_code == 422


async def test_store_failure_on_fetch_one(client, database):
    database["categories"].fail = True

    response = await client.get(f"{API}/category/1")

    assert response.status_code == 400
    assert response.json() == {"detail": "Couldn't get a category by ID"}


async def test_trailing_slash_on_path_id(client, auth_headers):
    await _create(client, auth_headers, 3, "Events", 1)

    response = await client.get(f"{API}/category/3/")

    assert response.status_code == 200
    assert response.json()["category"]["name"] == "Events"


async def test_patch_missing_category_succeeds_without_change(client, auth_headers, database):
    await _create(client, auth_headers, 1, "News", 4)
    before = [dict(document) for document in database["categories"].documents]

    response = await client.patch(f"{API}/category", data={"id": "99", "name": "Ghost"}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {}
    assert database["categories"].documents == before


async def test_category_without_id_is_skipped_in_list(client, auth_headers, database):
    await _create(client, auth_headers, 1, "News")
    database["categories"].documents.append({"categoryid": 2, "categoryname": "Legacy"})

    response = await client.get(f"{API}/category")

    assert response.status_code == 200
    assert response.json() == {"categories": [{"id": 1, "name": "News", "index": 0}]}
