from conftest import png_file


def create_post(client, auth_headers, **fields):
    payload = {"title": "Hello World", "content": "Body", **fields}
    response = client.post("/api/blog-posts", json=payload, headers=auth_headers)
    assert response.status_code == 201, response.get_json()
    return response.get_json()


def test_colliding_titles_get_numbered_slugs(client, auth_headers):
    first = create_post(client, auth_headers, content="First body")
    second = create_post(client, auth_headers, content="Second body")
    third = create_post(client, auth_headers, content="Third body")

    assert first["slug"] == "hello-world"
    assert second["slug"] == "hello-world-1"
    assert third["slug"] == "hello-world-2"


def test_create_requires_title_and_content(client, auth_headers):
    response = client.post("/api/blog-posts", json={"title": "No body"}, headers=auth_headers)
    assert response.status_code == 400


def test_create_defaults(client, auth_headers, app):
    post = create_post(client, auth_headers, content="  A short   body  ")

    assert post["excerpt"] == "A short body"
    assert post["author"] == app.config["DEFAULT_AUTHOR"]
    assert post["published"] is False
    assert post["publishedAt"] is None
    assert post["views"] == 0


def test_create_published_sets_published_at(client, auth_headers):
    post = create_post(client, auth_headers, published=True, author="Equipo")

    assert post["published"] is True
    assert post["publishedAt"] is not None
    assert post["author"] == "Equipo"


def test_create_from_multipart_form(client, auth_headers):
    response = client.post(
        "/api/blog-posts",
        data={
            "title": "Con imagen",
            "content": "Body",
            "published": "true",
            "image": png_file(),
        },
        content_type="multipart/form-data",
        headers=auth_headers,
    )

    assert response.status_code == 201
    post = response.get_json()
    assert post["slug"] == "con-imagen"
    assert post["published"] is True
    assert post["imageUrl"].startswith("/uploads/")


def test_content_image_rejects_non_images(client, auth_headers):
    response = client.post(
        "/api/blog-posts",
        data={
            "title": "Bad",
            "content": "Body",
            "image": (png_file()[0], "doc.pdf", "application/pdf"),
        },
        content_type="multipart/form-data",
        headers=auth_headers,
    )
    assert response.status_code == 400


def test_content_image_size_ceiling(app, client, auth_headers):
    app.config["CONTENT_IMAGE_MAX_BYTES"] = 1024

    response = client.post(
        "/api/blog-posts",
        data={"title": "Big", "content": "Body", "image": png_file(size=2048)},
        content_type="multipart/form-data",
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert "too large" in response.get_json()["error"]
    assert client.get("/api/blog-posts/admin/all", headers=auth_headers).get_json() == []


def test_public_list_only_published(client, auth_headers):
    create_post(client, auth_headers, title="Draft")
    create_post(client, auth_headers, title="Live", published=True)

    public = client.get("/api/blog-posts").get_json()
    assert [p["title"] for p in public] == ["Live"]

    admin = client.get("/api/blog-posts/admin/all", headers=auth_headers).get_json()
    assert {p["title"] for p in admin} == {"Draft", "Live"}


def test_read_by_slug_counts_views(client, auth_headers):
    create_post(client, auth_headers, title="Counted", published=True)

    assert client.get("/api/blog-posts/slug/counted").get_json()["views"] == 1
    assert client.get("/api/blog-posts/slug/counted").get_json()["views"] == 2


def test_draft_not_readable_by_slug(client, auth_headers):
    create_post(client, auth_headers, title="Secret")
    assert client.get("/api/blog-posts/slug/secret").status_code == 404


def test_admin_get_by_id_does_not_count_view(client, auth_headers):
    post = create_post(client, auth_headers, published=True)

    body = client.get(f"/api/blog-posts/admin/{post['id']}", headers=auth_headers).get_json()
    assert body["views"] == 0


def test_title_change_regenerates_slug(client, auth_headers):
    create_post(client, auth_headers, title="Taken")
    post = create_post(client, auth_headers, title="Original")

    updated = client.put(
        f"/api/blog-posts/{post['id']}", json={"title": "Taken"}, headers=auth_headers
    ).get_json()
    assert updated["slug"] == "taken-1"

    unchanged = client.put(
        f"/api/blog-posts/{post['id']}", json={"content": "New"}, headers=auth_headers
    ).get_json()
    assert unchanged["slug"] == "taken-1"
    assert unchanged["content"] == "New"


def test_same_title_update_keeps_slug(client, auth_headers):
    post = create_post(client, auth_headers)

    updated = client.put(
        f"/api/blog-posts/{post['id']}",
        json={"title": "Hello World", "excerpt": "Short"},
        headers=auth_headers,
    ).get_json()

    assert updated["slug"] == "hello-world"
    assert updated["excerpt"] == "Short"


def test_publish_lifecycle_keeps_first_published_at(client, auth_headers):
    post = create_post(client, auth_headers)

    published = client.put(
        f"/api/blog-posts/{post['id']}", json={"published": True}, headers=auth_headers
    ).get_json()
    first_published_at = published["publishedAt"]
    assert first_published_at is not None

    hidden = client.put(
        f"/api/blog-posts/{post['id']}", json={"published": False}, headers=auth_headers
    ).get_json()
    assert hidden["published"] is False
    assert hidden["publishedAt"] == first_published_at

    again = client.put(
        f"/api/blog-posts/{post['id']}", json={"published": "true"}, headers=auth_headers
    ).get_json()
    assert again["publishedAt"] == first_published_at


def test_delete_post(client, auth_headers):
    post = create_post(client, auth_headers)

    assert client.delete(f"/api/blog-posts/{post['id']}", headers=auth_headers).status_code == 200
    assert client.delete(f"/api/blog-posts/{post['id']}", headers=auth_headers).status_code == 404
