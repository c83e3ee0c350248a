from bionutrex.cli import seed_database
from bionutrex.models import Admin, BlogPost, HomeSection


def test_seed_is_idempotent(app):
    assert seed_database() == 6
    assert seed_database() == 0

    assert Admin.query.count() == 1
    assert [s.section_key for s in HomeSection.query.order_by(HomeSection.order)] == [
        "hero", "quality", "methodology", "blog",
    ]
    assert BlogPost.query.filter_by(published=True).count() == 1


def test_seed_command(app):
    result = app.test_cli_runner().invoke(args=["seed"])

    assert result.exit_code == 0
    assert "6 rows created" in result.output


def test_seeded_admin_can_log_in(app, client):
    seed_database()

    response = client.post(
        "/api/auth/login",
        json={"email": "admin@bionutrex.com", "password": "admin123"},
    )
    assert response.status_code == 200
