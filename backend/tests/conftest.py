import io

import pytest

from bionutrex import create_app
from bionutrex.extensions import db as _db
from bionutrex.models import Admin

ADMIN_EMAIL = "admin@bionutrex.com"
ADMIN_PASSWORD = "admin123"

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


@pytest.fixture
def app(tmp_path):
    app = create_app("testing", {"UPLOAD_FOLDER": str(tmp_path / "uploads")})

    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db(app):
    return _db


@pytest.fixture
def admin(db):
    admin = Admin()
    admin.email = ADMIN_EMAIL
    admin.name = "Admin BioNutrex"
    admin.set_password(ADMIN_PASSWORD)
    db.session.add(admin)
    db.session.commit()
    return admin


@pytest.fixture
def token(client, admin):
    response = client.post(
        "/api/auth/login",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return response.get_json()["token"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


def png_file(name="photo.png", size=None):
    payload = PNG_BYTES if size is None else b"\x00" * size
    return (io.BytesIO(payload), name, "image/png")
