"""Test post listing, detail and authoring."""

import pytest

from tests.fakes import ADMIN_ID


@pytest.fixture
def posts(fake_supabase):
    return fake_supabase.seed(
        "posts",
        {"title": "Học Python", "content": "một hai ba", "excerpt": "Bắt đầu với FastAPI",
         "author_id": ADMIN_ID, "published": True, "tags": ["python"]},
        {"title": "Draft thoughts", "content": "wip", "excerpt": None,
         "author_id": ADMIN_ID, "published": False},
        {"title": "Design notes", "content": "colors", "excerpt": "Typography and PYTHON tooling",
         "author_id": "ghost-author", "published": True},
    )


def test_list_only_published_newest_first(client, posts):
    response = client.get("/api/v1/posts")
    assert response.status_code == 200
    titles = [p["title"] for p in response.json()]
    assert titles == ["Design notes", "Học Python"]


def test_list_joins_author_and_defaults_missing_profile(client, posts):
    by_title = {p["title"]: p for p in client.get("/api/v1/posts").json()}
    assert by_title["Học Python"]["profiles"] == {"full_name": "John Deus", "username": "johndeus"}
    assert by_title["Design notes"]["profiles"] == {"full_name": "", "username": ""}


def test_search_matches_title_or_excerpt_case_insensitively(client, posts):
    titles = [p["title"] for p in client.get("/api/v1/posts", params={"search": "python"}).json()]
    assert titles == ["Design notes", "Học Python"]

    titles = [p["title"] for p in client.get("/api/v1/posts", params={"search": "fastapi"}).json()]
    assert titles == ["Học Python"]

    assert client.get("/api/v1/posts", params={"search": "nothing here"}).json() == []


def test_latest_is_limited(client, fake_supabase):
    for i in range(8):
        fake_supabase.seed("posts", {"title": f"Post {i}", "content": "x", "author_id": ADMIN_ID, "published": True})
    response = client.get("/api/v1/posts/latest")
    assert [p["title"] for p in response.json()] == [f"Post {i}" for i in range(7, 1, -1)]


def test_get_published_post(client, posts):
    response = client.get(f"/api/v1/posts/{posts[0]['id']}")
    assert response.status_code == 200
    assert response.json()["tags"] == ["python"]


def test_draft_post_is_not_found(client, posts):
    response = client.get(f"/api/v1/posts/{posts[1]['id']}")
    assert response.status_code == 404
    assert response.json()["detail"] == "Post does not exist or is not published"


def test_share_link(client, posts):
    response = client.get(f"/api/v1/posts/{posts[0]['id']}/share")
    assert response.status_code == 200
    assert response.json()["url"].endswith(f"/blog/{posts[0]['id']}")


def test_create_post_with_image(client, fake_supabase, admin_headers):
    response = client.post(
        "/api/v1/posts",
        data={"title": "New", "content": "word " * 450, "excerpt": "short",
              "published": "true", "tags": ["python", "web"]},
        files={"image": ("cover.png", b"\x89PNG", "image/png")},
        headers=admin_headers,
    )
    assert response.status_code == 201
    body = response.json()
    assert body["author_id"] == ADMIN_ID
    assert body["published"] is True
    assert body["tags"] == ["python", "web"]
    assert body["reading_time"] == 3
    assert body["featured_image"].startswith("https://storage.test/blog-images/")
    assert body["featured_image"].endswith(".png")
    assert len(fake_supabase.storage.objects) == 1
    assert [token for _, token in fake_supabase.storage.uploads] == ["admin-token"]


def test_create_post_survives_failed_upload(client, fake_supabase, admin_headers):
    fake_supabase.storage.fail_uploads = True
    response = client.post(
        "/api/v1/posts",
        data={"title": "Draft", "content": "short"},
        files={"image": ("cover.jpg", b"jpeg", "image/jpeg")},
        headers=admin_headers,
    )
    assert response.status_code == 201
    body = response.json()
    assert body["featured_image"] == ""
    assert body["published"] is False


def test_create_post_requires_admin(client, reader_headers):
    response = client.post("/api/v1/posts", data={"title": "x", "content": "y"}, headers=reader_headers)
    assert response.status_code == 403


def test_admin_lists_drafts(client, posts, admin_headers):
    response = client.get("/api/v1/posts/all", headers=admin_headers)
    assert len(response.json()) == 3


def test_update_and_delete_post(client, posts, admin_headers):
    post_id = posts[1]["id"]
    response = client.put(f"/api/v1/posts/{post_id}", json={"published": True}, headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["published"] is True
    assert client.get(f"/api/v1/posts/{post_id}").status_code == 200

    assert client.delete(f"/api/v1/posts/{post_id}", headers=admin_headers).status_code == 204
    assert client.delete(f"/api/v1/posts/{post_id}", headers=admin_headers).status_code == 404


def test_backend_error_is_reported(client, fake_supabase, posts):
    fake_supabase.fail("posts", "select", message="connection reset")
    response = client.get("/api/v1/posts")
    assert response.status_code == 500
    assert response.json()["detail"] == "connection reset"


def test_limit_counts_search_matches(client, fake_supabase):
    for i in range(4):
        fake_supabase.seed("posts", {"title": f"Python {i}", "content": "c", "author_id": ADMIN_ID, "published": True})
    for i in range(4):
        fake_supabase.seed("posts", {"title": f"Rust {i}", "content": "c", "author_id": ADMIN_ID, "published": True})

    response = client.get("/api/v1/posts", params={"search": "python", "limit": 3})
    assert [p["title"] for p in response.json()] == ["Python 3", "Python 2", "Python 1"]
