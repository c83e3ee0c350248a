from typing import Any, Dict, Optional

from bionutrex.utils.forms import blank_to_none, parse_bool, parse_int


def ordered(query, model):
    """Display order: ``order`` ascending, ties broken alphabetically by title."""
    return query.order_by(model.order.asc(), model.title.asc())


def apply_text(entity, attr: str, data: Dict[str, Any], field: str, *, required=False):
    """
    Partial-update one text column.

    Absent fields keep the stored value. Required columns also ignore blank
    input; optional ones are cleared to None.
    """
    if field not in data:
        return

    value = data[field]
    if required:
        if value is not None and str(value).strip():
            setattr(entity, attr, str(value))
        return

    setattr(entity, attr, blank_to_none(value))


def apply_display_fields(entity, data: Dict[str, Any]):
    """``order`` and ``active``, shared by sliders and home sections."""
    if data.get("order") not in (None, ""):
        entity.order = parse_int(data["order"], "order")

    if "active" in data and data["active"] is not None:
        entity.active = parse_bool(data["active"], "active")


def apply_image(entity, data: Dict[str, Any], uploaded_url: Optional[str]):
    """An uploaded file wins over an ``imageUrl`` field."""
    if uploaded_url:
        entity.image_url = uploaded_url
    elif "imageUrl" in data:
        entity.image_url = blank_to_none(data["imageUrl"])
