import io
import os

from conftest import PNG_BYTES, png_file


def test_upload_requires_auth(client):
    response = client.post(
        "/api/uploads",
        data={"file": png_file()},
        content_type="multipart/form-data",
    )
    assert response.status_code == 401


def test_accepted_upload_is_served_at_returned_url(client, auth_headers):
    response = client.post(
        "/api/uploads",
        data={"file": png_file("logo.png")},
        content_type="multipart/form-data",
        headers=auth_headers,
    )

    assert response.status_code == 201
    saved = response.get_json()
    assert saved["originalName"] == "logo.png"
    assert saved["filename"] != "logo.png"
    assert saved["url"] == f"/uploads/{saved['filename']}"

    served = client.get(saved["url"])
    assert served.status_code == 200
    assert served.data == PNG_BYTES


def test_disallowed_mime_type_rejected(client, auth_headers):
    response = client.post(
        "/api/uploads",
        data={"file": (io.BytesIO(b"#!/bin/sh"), "run.sh", "application/x-sh")},
        content_type="multipart/form-data",
        headers=auth_headers,
    )
    assert response.status_code == 400


def test_oversized_file_rejected(app, client, auth_headers):
    app.config["UPLOAD_MAX_BYTES"] = 1024

    response = client.post(
        "/api/uploads",
        data={"file": png_file(size=2048)},
        content_type="multipart/form-data",
        headers=auth_headers,
    )
    assert response.status_code == 400
    folder = app.config["UPLOAD_FOLDER"]
    assert not os.path.isdir(folder) or not os.listdir(folder)


def test_request_over_body_limit_is_rejected(app, client, auth_headers):
    app.config["MAX_CONTENT_LENGTH"] = 1024

    response = client.post(
        "/api/uploads",
        data={"file": png_file(size=4096)},
        content_type="multipart/form-data",
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.get_json() == {"error": "File too large"}


def test_missing_file_rejected(client, auth_headers):
    response = client.post(
        "/api/uploads",
        data={},
        content_type="multipart/form-data",
        headers=auth_headers,
    )
    assert response.status_code == 400


def test_multiple_upload(client, auth_headers):
    response = client.post(
        "/api/uploads/multiple",
        data={"files": [png_file("a.png"), png_file("b.png")]},
        content_type="multipart/form-data",
        headers=auth_headers,
    )

    assert response.status_code == 201
    files = response.get_json()["files"]
    assert [f["originalName"] for f in files] == ["a.png", "b.png"]


def test_multiple_upload_is_all_or_nothing(app, client, auth_headers):
    response = client.post(
        "/api/uploads/multiple",
        data={
            "files": [
                png_file("a.png"),
                (io.BytesIO(b"x"), "b.exe", "application/octet-stream"),
            ]
        },
        content_type="multipart/form-data",
        headers=auth_headers,
    )

    assert response.status_code == 400
    folder = app.config["UPLOAD_FOLDER"]
    assert not os.path.isdir(folder) or not os.listdir(folder)


def test_list_uploads_filters_by_extension(app, client, auth_headers):
    folder = app.config["UPLOAD_FOLDER"]
    os.makedirs(folder, exist_ok=True)
    for name in ("b.png", "a.JPG", "notes.txt", "clip.mp4"):
        with open(os.path.join(folder, name), "wb") as fh:
            fh.write(b"x")

    assert client.get("/api/uploads/list").get_json() == ["a.JPG", "b.png", "clip.mp4"]


def test_list_uploads_creates_missing_directory(app, client):
    assert client.get("/api/uploads/list").get_json() == []
    assert os.path.isdir(app.config["UPLOAD_FOLDER"])


def test_delete_upload(client, auth_headers):
    saved = client.post(
        "/api/uploads",
        data={"file": png_file()},
        content_type="multipart/form-data",
        headers=auth_headers,
    ).get_json()

    response = client.delete(f"/api/uploads/{saved['filename']}", headers=auth_headers)
    assert response.status_code == 200
    assert client.get("/api/uploads/list").get_json() == []
    assert client.delete(f"/api/uploads/{saved['filename']}", headers=auth_headers).status_code == 404
