import re
import unicodedata

from bionutrex.extensions import db

FALLBACK_SLUG = "post"


def generate_slug(text) -> str:
    """
    Turn a title into a URL-safe slug.

    "Ciencia Avanzada. Pureza Natural." -> "ciencia-avanzada-pureza-natural"
    """
    value = unicodedata.normalize("NFKD", str(text)).encode("ascii", "ignore").decode("ascii")
    value = value.lower().strip()
    value = re.sub(r"\s+", "-", value)
    value = re.sub(r"[^\w\-]+", "", value)
    value = re.sub(r"\-\-+", "-", value)
    return value.strip("-_") or FALLBACK_SLUG


def unique_slug(model, text, *, exclude_id=None, column="slug") -> str:
    """
    Generate a slug for ``text`` that no other row of ``model`` uses.

    Collisions get an incrementing suffix: hello-world, hello-world-1, ...
    Check-then-write: the unique constraint is the final guard.
    """
    base = generate_slug(text)
    field = getattr(model, column)

    slug = base
    counter = 1
    while True:
        query = db.session.query(model.id).filter(field == slug)
        if exclude_id is not None:
            query = query.filter(model.id != exclude_id)
        if query.first() is None:
            return slug

        slug = f"{base}-{counter}"
        counter += 1
