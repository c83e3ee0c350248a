def iso(value):
    return value.isoformat() if value is not None else None


def timestamps(entity):
    return {
        "createdAt": iso(entity.created_at),
        "updatedAt": iso(entity.updated_at),
    }
