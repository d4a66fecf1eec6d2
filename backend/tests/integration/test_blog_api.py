"""
Integration Test: BlogPost API resource

Drives the real FastAPI app over HTTP with a seeded in-memory store.
Each test gets a fresh store holding SEED_COUNT posts.
"""

import asyncio

from tests.factories import SEED_COUNT, generate_post_data

POST_KEYS = {"id", "title", "content", "author", "created"}


def _first_post(store):
    return asyncio.run(store.list())[0]


class TestGetEndpoint:
    def test_returns_all_existing_posts(self, client, store):
        response = client.get("/posts")

        assert response.status_code == 200
        posts = response.json()
        assert len(posts) >= 1
        assert len(posts) == asyncio.run(store.count()) == SEED_COUNT

    def test_returns_posts_with_right_fields(self, client, store):
        response = client.get("/posts")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        posts = response.json()
        assert isinstance(posts, list)
        for post in posts:
            assert POST_KEYS <= set(post)

        first = posts[0]
        stored = asyncio.run(store.find_by_id(first["id"]))
        assert first["id"] == stored.id
        assert first["title"] == stored.title
        assert first["content"] == stored.content
        assert first["author"] == stored.author

    def test_get_single_post(self, client, store):
        post = _first_post(store)

        response = client.get(f"/posts/{post.id}")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == post.id
        assert body["title"] == post.title

    def test_get_unknown_post_is_404(self, client):
        response = client.get("/posts/000000000000000000000000")

        assert response.status_code == 404
        assert response.json()["error"] == "NotFoundError"

    def test_get_malformed_id_is_404(self, client):
        response = client.get("/posts/not-an-id")

        assert response.status_code == 404


class TestPostEndpoint:
    def test_adds_a_new_post(self, client, store):
        new_post = generate_post_data()

        response = client.post("/posts", json=new_post)

        assert response.status_code == 201
        body = response.json()
        assert POST_KEYS <= set(body)
        assert body["id"] is not None
        assert body["title"] == new_post["title"]
        assert body["content"] == new_post["content"]
        assert body["author"] == new_post["author"]

        stored = asyncio.run(store.find_by_id(body["id"]))
        assert stored.title == new_post["title"]
        assert stored.content == new_post["content"]
        assert stored.author == new_post["author"]

    def test_created_post_listed_exactly_once(self, client):
        response = client.post(
            "/posts", json={"title": "A", "content": "B", "author": "C D"}
        )
        assert response.status_code == 201
        created = response.json()
        assert created["id"]

        posts = client.get("/posts").json()
        matches = [p for p in posts if p["id"] == created["id"]]
        assert len(matches) == 1
        assert matches[0]["title"] == "A"
        assert matches[0]["content"] == "B"
        assert matches[0]["author"] == "C D"
        assert len(posts) == SEED_COUNT + 1

    def test_ids_are_unique(self, client):
        ids = {client.post("/posts", json=generate_post_data()).json()["id"] for _ in range(5)}
        listed = [p["id"] for p in client.get("/posts").json()]

        assert len(ids) == 5
        assert len(listed) == len(set(listed))

    def test_structured_author_is_flattened(self, client):
        payload = {
            "title": "Structured",
            "content": "Body",
            "author": {"firstName": "Mace", "lastName": "Windu"},
        }

        response = client.post("/posts", json=payload)

        assert response.status_code == 201
        assert response.json()["author"] == "Mace Windu"

    def test_missing_field_is_400(self, client, store):
        payload = generate_post_data()
        del payload["content"]

        response = client.post("/posts", json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "ValidationError"
        assert "content" in body["detail"]
        assert asyncio.run(store.count()) == SEED_COUNT

    def test_blank_field_is_400(self, client):
        payload = generate_post_data()
        payload["title"] = "   "

        response = client.post("/posts", json=payload)

        assert response.status_code == 400
        assert "title" in response.json()["detail"]


class TestPutEndpoint:
    def test_updates_fields_sent_over(self, client, store):
        post = _first_post(store)
        update_data = {"id": post.id, "title": "fofofofofofofo", "author": "Mace Windu"}

        response = client.put(f"/posts/{post.id}", json=update_data)

        assert response.status_code == 200
        body = response.json()
        assert body["title"] == update_data["title"]
        assert body["author"] == update_data["author"]

        stored = asyncio.run(store.find_by_id(post.id))
        assert stored.title == update_data["title"]
        assert stored.author == update_data["author"]

    def test_partial_update_leaves_other_fields(self, client, store):
        post = _first_post(store)

        response = client.put(f"/posts/{post.id}", json={"content": "new body"})

        assert response.status_code == 200
        stored = asyncio.run(store.find_by_id(post.id))
        assert stored.content == "new body"
        assert stored.title == post.title
        assert stored.author == post.author
        assert stored.created == post.created

    def test_mismatched_body_id_is_400(self, client, store):
        post = _first_post(store)

        response = client.put(
            f"/posts/{post.id}",
            json={"id": "111111111111111111111111", "title": "nope"},
        )

        assert response.status_code == 400
        assert asyncio.run(store.find_by_id(post.id)).title == post.title

    def test_unknown_id_is_404(self, client):
        response = client.put(
            "/posts/000000000000000000000000", json={"title": "ghost"}
        )

        assert response.status_code == 404

    def test_update_cannot_change_created(self, client, store):
        post = _first_post(store)

        response = client.put(
            f"/posts/{post.id}",
            json={"created": "2000-01-01T00:00:00Z", "title": "x"},
        )

        assert response.status_code == 200
        stored = asyncio.run(store.find_by_id(post.id))
        assert stored.title == "x"
        assert stored.created == post.created
        assert response.json()["id"] == post.id

    def test_structured_author_update_is_flattened(self, client, store):
        post = _first_post(store)

        response = client.put(
            f"/posts/{post.id}",
            json={"author": {"firstName": "Mace", "lastName": "Windu"}},
        )

        assert response.status_code == 200
        assert response.json()["author"] == "Mace Windu"
        stored = asyncio.run(store.find_by_id(post.id))
        assert stored.author == "Mace Windu"
        assert stored.title == post.title


class TestDeleteEndpoint:
    def test_deletes_a_post_by_id(self, client, store):
        post = _first_post(store)

        response = client.delete(f"/posts/{post.id}")

        assert response.status_code == 204
        assert response.content == b""
        assert asyncio.run(store.find_by_id(post.id)) is None

    def test_deleted_post_is_not_found(self, client):
        created = client.post("/posts", json=generate_post_data()).json()

        assert client.delete(f"/posts/{created['id']}").status_code == 204
        assert client.get(f"/posts/{created['id']}").status_code == 404
        assert client.delete(f"/posts/{created['id']}").status_code == 404


class TestHealthEndpoint:
    def test_health_reports_store(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["environment"] == "test"
