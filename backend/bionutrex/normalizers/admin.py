from .common import iso


def normalize_admin(admin):
    # never expose password_hash
    return {
        "id": admin.id,
        "email": admin.email,
        "name": admin.name,
        "createdAt": iso(admin.created_at),
    }
