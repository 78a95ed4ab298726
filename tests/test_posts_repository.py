"""Post repository: one store operation per function, against FakeCollection."""

import pytest

from posts import repository


async def _seed(collection, total, *, category=1):
    for post_id in range(1, total + 1):
        await repository.create_post(collection, post_id=post_id, category=category, title=f"Post {post_id}")


async def test_create_then_get_returns_every_field(database):
    collection = database["posts"]

    created = await repository.create_post(
        collection,
        post_id=7,
        category=3,
        title="Hello",
        subtitle="World",
        post_type="article",
        content="Body text",
        image_link="https://img.example/7.png",
        resource_link="https://res.example/7",
        canonical_link="https://example.org/posts/7",
        show_in_menu=True,
    )
    fetched = await repository.get_post(collection, 7, category=3)

    assert "_id" not in created
    assert fetched == created
    assert fetched["created_on"] > 0
    assert fetched["last_edited_on"] == 0
    assert fetched["show_in_menu"] is True


async def test_get_requires_matching_category_when_given(database):
    collection = database["posts"]
    await repository.create_post(collection, post_id=1, category=2, title="Hello")

    assert await repository.get_post(collection, 1, category=9) is None
    assert (await repository.get_post(collection, 1))["title"] == "Hello"


@pytest.mark.parametrize("count, expected", [(0, 0), (1, 1), (10, 10), (50, 50), (51, 50), (500, 50)])
async def test_list_never_exceeds_min_of_count_and_cap(database, count, expected):
    collection = database["posts"]
    await _seed(collection, 60)

    posts = await repository.list_posts(collection, count=count)

    assert len(posts) == expected


async def test_list_filters_by_category_unless_zero(database):
    collection = database["posts"]
    await repository.create_post(collection, post_id=1, category=1)
    await repository.create_post(collection, post_id=2, category=2)
    await repository.create_post(collection, post_id=3, category=2)

    assert [p["id"] for p in await repository.list_posts(collection, count=10, category=2)] == [2, 3]
    assert len(await repository.list_posts(collection, count=10, category=0)) == 3


async def test_update_sets_supplied_fields_and_edit_time(database):
    collection = database["posts"]
    await repository.create_post(collection, post_id=1, category=1, title="Old", subtitle="Keep me")

    matched = await repository.update_post(collection, 1, title="New", category=4)
    post = await repository.get_post(collection, 1)

    assert matched is True
    assert post["title"] == "New"
    assert post["category"] == 4
    assert post["subtitle"] == "Keep me"
    assert post["last_edited_on"] > 0


async def test_update_missing_post_is_a_noop(database):
    collection = database["posts"]
    await repository.create_post(collection, post_id=1, category=1, title="Only")
    before = list(collection.documents)

    matched = await repository.update_post(collection, 99, title="Ghost")

    assert matched is False
    assert collection.documents == before


async def test_delete_is_idempotent(database):
    collection = database["posts"]
    await repository.create_post(collection, post_id=1, category=1)

    assert await repository.delete_post(collection, 1) is True
    assert await repository.delete_post(collection, 1) is False
    assert await repository.get_post(collection, 1) is None
