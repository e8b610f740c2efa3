"""Test tag management."""


def test_tags_are_listed_by_name(client, fake_supabase):
    fake_supabase.seed("tags", {"name": "web", "slug": "web"}, {"name": "ai", "slug": "ai"})
    names = [t["name"] for t in client.get("/api/v1/tags").json()]
    assert names == ["ai", "web"]


def test_create_tag_generates_slug_and_default_color(client, admin_headers):
    response = client.post("/api/v1/tags", json={"name": "Machine Learning 101!"}, headers=admin_headers)
    assert response.status_code == 201
    body = response.json()
    assert body["slug"] == "machine-learning-101"
    assert body["color"] == "#3b82f6"


def test_explicit_slug_is_kept(client, admin_headers):
    response = client.post("/api/v1/tags", json={"name": "Python", "slug": "py", "color": "#ff0000"},
                           headers=admin_headers)
    assert response.json()["slug"] == "py"
    assert response.json()["color"] == "#ff0000"


def test_duplicate_tag_conflicts(client, admin_headers):
    assert client.post("/api/v1/tags", json={"name": "Python"}, headers=admin_headers).status_code == 201
    response = client.post("/api/v1/tags", json={"name": "Python"}, headers=admin_headers)
    assert response.status_code == 409
    assert response.json()["detail"] == "A tag with this name or slug already exists"


def test_update_and_delete_tag(client, fake_supabase, admin_headers):
    tag = fake_supabase.seed("tags", {"name": "Old", "slug": "old", "color": "#000000"})
    response = client.put(f"/api/v1/tags/{tag['id']}", json={"name": "New Name", "slug": ""}, headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["slug"] == "new-name"

    assert client.delete(f"/api/v1/tags/{tag['id']}", headers=admin_headers).status_code == 204
    assert client.get("/api/v1/tags").json() == []


def test_update_missing_tag(client, admin_headers):
    response = client.put("/api/v1/tags/nope", json={"name": "x"}, headers=admin_headers)
    assert response.status_code == 404
