from datetime import datetime, timezone

import click

from bionutrex.extensions import db
from bionutrex.models import Admin, BlogPost, HomeSection
from bionutrex.seed_data import DEFAULT_ADMIN, HOME_SECTIONS, WELCOME_POST
from bionutrex.utils.transaction import transactional


def seed_database():
    """
    Insert the default admin, home sections and welcome post.

    Idempotent: rows matched by email / section key / slug are left untouched.
    Returns the number of rows created.
    """
    created = 0

    with transactional():
        if not Admin.query.filter_by(email=DEFAULT_ADMIN["email"]).first():
            admin = Admin()
            admin.email = DEFAULT_ADMIN["email"]
            admin.name = DEFAULT_ADMIN["name"]
            admin.set_password(DEFAULT_ADMIN["password"])
            db.session.add(admin)
            created += 1

        for values in HOME_SECTIONS:
            if HomeSection.query.filter_by(section_key=values["section_key"]).first():
                continue
            section = HomeSection()
            for field, value in values.items():
                setattr(section, field, value)
            section.active = True
            db.session.add(section)
            created += 1

        if not BlogPost.query.filter_by(slug=WELCOME_POST["slug"]).first():
            post = BlogPost()
            for field, value in WELCOME_POST.items():
                setattr(post, field, value)
            post.published = True
            post.published_at = datetime.now(timezone.utc)
            post.views = 0
            db.session.add(post)
            created += 1

    return created


def register_commands(app):
    @app.cli.command("seed")
    @click.option("--create-tables", is_flag=True, help="Create missing tables before seeding.")
    def seed(create_tables):
        """Seed the database with default content."""
        if create_tables:
            db.create_all()

        created = seed_database()
        click.echo(f"Seeding completed: {created} rows created.")
        click.echo(f"Default admin: {DEFAULT_ADMIN['email']} (change the password in production)")
