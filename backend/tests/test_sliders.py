import os

from conftest import png_file


def create_slider(client, auth_headers, **fields):
    payload = {"title": "Slide", **fields}
    response = client.post("/api/sliders", json=payload, headers=auth_headers)
    assert response.status_code == 201, response.get_json()
    return response.get_json()


def test_create_requires_auth(client):
    response = client.post("/api/sliders", json={"title": "Nope"})
    assert response.status_code == 401


def test_create_requires_title(client, auth_headers):
    response = client.post("/api/sliders", json={"subtitle": "x"}, headers=auth_headers)
    assert response.status_code == 400


def test_create_with_image_upload(client, auth_headers):
    response = client.post(
        "/api/sliders",
        data={"title": "Hero", "order": "2", "active": "true", "image": png_file()},
        content_type="multipart/form-data",
        headers=auth_headers,
    )

    assert response.status_code == 201
    slider = response.get_json()
    assert slider["order"] == 2
    assert slider["active"] is True
    assert slider["imageUrl"].startswith("/uploads/")
    assert client.get(slider["imageUrl"]).status_code == 200


def test_public_list_only_active_admin_list_all(client, auth_headers):
    create_slider(client, auth_headers, title="Visible", active=True)
    create_slider(client, auth_headers, title="Hidden", active=False)

    public = client.get("/api/sliders").get_json()
    assert [s["title"] for s in public] == ["Visible"]

    admin = client.get("/api/sliders/admin/all", headers=auth_headers).get_json()
    assert {s["title"] for s in admin} == {"Visible", "Hidden"}


def test_admin_list_requires_auth(client):
    assert client.get("/api/sliders/admin/all").status_code == 401


def test_list_orders_by_order_then_title(client, auth_headers):
    create_slider(client, auth_headers, title="Beta", order=1)
    create_slider(client, auth_headers, title="Alpha", order=1)
    create_slider(client, auth_headers, title="First", order=0)

    titles = [s["title"] for s in client.get("/api/sliders").get_json()]
    assert titles == ["First", "Alpha", "Beta"]


def test_update_keeps_untouched_fields(client, auth_headers):
    slider = create_slider(
        client, auth_headers, title="Hero", subtitle="Sub", buttonText="Buy", order=3
    )

    response = client.put(
        f"/api/sliders/{slider['id']}",
        json={"subtitle": "New sub"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    updated = response.get_json()
    assert updated["subtitle"] == "New sub"
    assert updated["title"] == "Hero"
    assert updated["buttonText"] == "Buy"
    assert updated["order"] == 3


def test_update_ignores_blank_title(client, auth_headers):
    slider = create_slider(client, auth_headers, title="Hero")

    updated = client.put(
        f"/api/sliders/{slider['id']}", json={"title": ""}, headers=auth_headers
    ).get_json()
    assert updated["title"] == "Hero"


def test_update_rejects_non_integer_order(client, auth_headers):
    slider = create_slider(client, auth_headers)

    response = client.put(
        f"/api/sliders/{slider['id']}", json={"order": "first"}, headers=auth_headers
    )
    assert response.status_code == 400


def test_rejected_update_leaves_no_image_behind(app, client, auth_headers):
    slider = create_slider(client, auth_headers)

    bad_order = client.put(
        f"/api/sliders/{slider['id']}",
        data={"order": "first", "image": png_file()},
        content_type="multipart/form-data",
        headers=auth_headers,
    )
    missing = client.put(
        "/api/sliders/missing",
        data={"title": "X", "image": png_file()},
        content_type="multipart/form-data",
        headers=auth_headers,
    )

    assert bad_order.status_code == 400
    assert missing.status_code == 404
    folder = app.config["UPLOAD_FOLDER"]
    assert not os.path.isdir(folder) or not os.listdir(folder)


def test_get_update_delete_missing_slider(client, auth_headers):
    assert client.get("/api/sliders/missing").status_code == 404
    assert client.put("/api/sliders/missing", json={}, headers=auth_headers).status_code == 404
    assert client.delete("/api/sliders/missing", headers=auth_headers).status_code == 404


def test_delete_slider(client, auth_headers):
    slider = create_slider(client, auth_headers)

    response = client.delete(f"/api/sliders/{slider['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert client.get(f"/api/sliders/{slider['id']}").status_code == 404


def test_unknown_route_is_json_404(client):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.get_json() == {"error": "Route not found"}
