from sqlalchemy import inspect
from bionutrex.extensions import db


def has_table(table_name: str) -> bool:
    """
    Check whether a table exists in the bound database.

    Used to keep serving home sections on databases that have not been
    migrated to the gallery-images schema yet.
    """
    return inspect(db.session.connection()).has_table(table_name)
