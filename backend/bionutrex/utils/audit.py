from flask import current_app, g
from typing import Optional


def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    payload: dict | None = None
):
    """
    Emit one audit line for a content mutation.

    The acting admin is taken from the request context when present.
    """
    admin = getattr(g, "current_admin", None)

    current_app.logger.info(
        "audit action=%s entity_type=%s entity_id=%s actor_id=%s payload=%s",
        action,
        entity_type,
        entity_id,
        admin.id if admin is not None else None,
        payload or {},
    )
