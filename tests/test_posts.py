"""Post API tests."""

from datetime import datetime


def create_post(client, headers, **fields):
    """Create a post through the API and return its data."""
    payload = {"title": "T", "content": "C", **fields}
    response = client.post("/api/posts", headers=headers, json=payload)
    assert response.status_code == 201
    return response.json()["data"]


def test_create_post(client, auth_headers):
    """Test creating a post defaults to a draft."""
    response = client.post(
        "/api/posts", headers=auth_headers, json={"title": "T", "content": "C"}
    )
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["title"] == "T"
    assert body["data"]["content"] == "C"
    assert body["data"]["isDraft"] is True
    assert body["data"]["ownerId"] == auth_headers.user_id


def test_create_published_post(client, auth_headers):
    """Test creating a post that is not a draft."""
    post = create_post(client, auth_headers, isDraft=False)
    assert post["isDraft"] is False


def test_create_post_trims_fields(client, auth_headers):
    """Test title and content are stored trimmed."""
    post = create_post(client, auth_headers, title="  Spaced  ", content="\n body \n")
    assert post["title"] == "Spaced"
    assert post["content"] == "body"


def test_create_post_missing_content(client, auth_headers):
    """Test creating a post without content."""
    response = client.post("/api/posts", headers=auth_headers, json={"title": "Only a title"})
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Please provide title and content"}


def test_create_post_blank_title(client, auth_headers):
    """Test a whitespace-only title is treated as missing."""
    response = client.post(
        "/api/posts", headers=auth_headers, json={"title": "   ", "content": "C"}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Please provide title and content"


def test_create_post_title_too_long(client, auth_headers):
    """Test titles are capped at 100 characters."""
    response = client.post(
        "/api/posts", headers=auth_headers, json={"title": "x" * 101, "content": "C"}
    )
    assert response.status_code == 400
    assert "100 characters" in response.json()["error"]


def test_create_post_title_at_limit(client, auth_headers):
    """Test a 100 character title is accepted."""
    post = create_post(client, auth_headers, title="x" * 100)
    assert len(post["title"]) == 100


def test_create_post_non_boolean_draft(client, auth_headers):
    """Test isDraft must be a real boolean."""
    response = client.post(
        "/api/posts",
        headers=auth_headers,
        json={"title": "T", "content": "C", "isDraft": "yes"},
    )
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_get_posts_newest_first(client, auth_headers):
    """Test listing posts returns the newest first."""
    first = create_post(client, auth_headers, title="First")
    second = create_post(client, auth_headers, title="Second")
    third = create_post(client, auth_headers, title="Third")

    response = client.get("/api/posts", headers=auth_headers)
    assert response.status_code == 200
    ids = [post["id"] for post in response.json()["data"]]
    assert ids == [third["id"], second["id"], first["id"]]


def test_get_posts_only_own(client, auth_headers, other_auth_headers):
    """Test users only see their own posts."""
    create_post(client, auth_headers, title="Mine")
    create_post(client, other_auth_headers, title="Theirs")

    response = client.get("/api/posts", headers=auth_headers)
    titles = [post["title"] for post in response.json()["data"]]
    assert titles == ["Mine"]


def test_get_post(client, auth_headers):
    """Test getting a post returns what was stored."""
    created = create_post(client, auth_headers, title="Round", content="Trip", isDraft=False)

    response = client.get(f"/api/posts/{created['id']}", headers=auth_headers)
    assert response.status_code == 200
    post = response.json()["data"]
    assert (post["title"], post["content"], post["isDraft"]) == ("Round", "Trip", False)
    assert datetime.fromisoformat(post["createdAt"]) <= datetime.fromisoformat(post["updatedAt"])


def test_get_post_not_found(client, auth_headers):
    """Test an unknown id."""
    response = client.get("/api/posts/does-not-exist", headers=auth_headers)
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Post not found"}


def test_other_user_cannot_see_post(client, auth_headers, other_auth_headers):
    """Another user's post looks exactly like a missing one."""
    post = create_post(client, auth_headers)

    foreign = client.get(f"/api/posts/{post['id']}", headers=other_auth_headers)
    missing = client.get("/api/posts/does-not-exist", headers=other_auth_headers)
    assert foreign.status_code == missing.status_code == 404
    assert foreign.json() == missing.json()


def test_other_user_cannot_update_or_delete(client, auth_headers, other_auth_headers):
    """Test updates and deletes are scoped to the owner."""
    post = create_post(client, auth_headers, title="Original")

    response = client.patch(
        f"/api/posts/{post['id']}", headers=other_auth_headers, json={"title": "Hijacked"}
    )
    assert response.status_code == 404

    response = client.delete(f"/api/posts/{post['id']}", headers=other_auth_headers)
    assert response.status_code == 404

    response = client.get(f"/api/posts/{post['id']}", headers=auth_headers)
    assert response.json()["data"]["title"] == "Original"


def test_update_post(client, auth_headers):
    """Test a partial update only touches the supplied fields."""
    post = create_post(client, auth_headers, title="Old", content="Body")

    response = client.patch(
        f"/api/posts/{post['id']}", headers=auth_headers, json={"title": "New"}
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["title"] == "New"
    assert data["content"] == "Body"
    assert data["isDraft"] is True
    assert datetime.fromisoformat(data["updatedAt"]) >= datetime.fromisoformat(post["updatedAt"])


def test_update_post_invalid_title(client, auth_headers):
    """Test an update with an empty title is rejected."""
    post = create_post(client, auth_headers)

    response = client.patch(f"/api/posts/{post['id']}", headers=auth_headers, json={"title": " "})
    assert response.status_code == 400
    assert response.json()["error"] == "Post title cannot be empty"


def test_update_post_null_content(client, auth_headers):
    """Test an explicit null is not a way to clear content."""
    post = create_post(client, auth_headers)

    response = client.patch(
        f"/api/posts/{post['id']}", headers=auth_headers, json={"content": None}
    )
    assert response.status_code == 400


def test_update_post_cannot_change_owner(client, auth_headers, other_auth_headers):
    """Test the owner is not part of the update surface."""
    post = create_post(client, auth_headers)

    response = client.patch(
        f"/api/posts/{post['id']}",
        headers=auth_headers,
        json={"ownerId": other_auth_headers.user_id},
    )
    assert response.status_code == 400

    response = client.get(f"/api/posts/{post['id']}", headers=auth_headers)
    assert response.json()["data"]["ownerId"] == auth_headers.user_id


def test_update_post_without_fields(client, auth_headers):
    """Test an empty update body."""
    post = create_post(client, auth_headers)

    response = client.patch(f"/api/posts/{post['id']}", headers=auth_headers, json={})
    assert response.status_code == 400
    assert response.json()["error"] == "Please provide a field to update"


def test_publish_then_delete_lifecycle(client, auth_headers):
    """Create a draft, publish it, delete it, and confirm it is gone."""
    post = create_post(client, auth_headers)
    assert post["isDraft"] is True

    response = client.patch(
        f"/api/posts/{post['id']}", headers=auth_headers, json={"isDraft": False}
    )
    assert response.status_code == 200
    assert response.json()["data"]["isDraft"] is False

    response = client.delete(f"/api/posts/{post['id']}", headers=auth_headers)
    assert response.status_code == 204
    assert response.content == b""

    response = client.get(f"/api/posts/{post['id']}", headers=auth_headers)
    assert response.status_code == 404


def test_delete_post_twice(client, auth_headers):
    """Test deleting an already deleted post is a 404, not a crash."""
    post = create_post(client, auth_headers)

    assert client.delete(f"/api/posts/{post['id']}", headers=auth_headers).status_code == 204
    response = client.delete(f"/api/posts/{post['id']}", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "Post not found"
