from functools import wraps
from flask import g
from flask_jwt_extended import get_current_user, jwt_required
from bionutrex.extensions import db, jwt
from bionutrex.models.admin import Admin


@jwt.user_lookup_loader
def load_admin(jwt_header, jwt_data):
    return db.session.get(Admin, jwt_data["sub"])


def admin_required(fn):
    """
    Require a valid bearer token naming an existing admin.

    The admin is attached to ``g.current_admin`` for the handler and the
    audit log.
    """
    @wraps(fn)
    @jwt_required()
    def wrapper(*args, **kwargs):
        g.current_admin = get_current_user()
        return fn(*args, **kwargs)
    return wrapper
