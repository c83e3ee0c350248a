from typing import Any, Dict, List, Optional
from bionutrex.extensions import db
from bionutrex.models.slider import Slider
from bionutrex.domain.invariants.content import assert_slider
from bionutrex.utils.audit import log_action
from bionutrex.utils.transaction import transactional
from .common import apply_display_fields, apply_image, apply_text, ordered

TEXT_FIELDS = (
    ("subtitle", "subtitle"),
    ("description", "description"),
    ("button_text", "buttonText"),
    ("button_link", "buttonLink"),
)


def list_sliders(*, include_inactive: bool = False) -> List[Slider]:
    query = Slider.query
    if not include_inactive:
        query = query.filter_by(active=True)
    return ordered(query, Slider).all()


def get_slider(slider_id: str) -> Slider:
    return Slider.query.filter_by(id=slider_id).first_or_404(description="Slider not found")


def create_slider(*, data: Dict[str, Any], image_url: Optional[str] = None) -> Slider:
    """
    Create a slider. ``active`` defaults to True, ``order`` to 0.
    """
    assert_slider(data)

    slider = Slider()
    slider.title = str(data["title"])
    slider.order = 0
    slider.active = True

    for attr, field in TEXT_FIELDS:
        apply_text(slider, attr, data, field)
    apply_display_fields(slider, data)
    apply_image(slider, data, image_url)

    with transactional():
        db.session.add(slider)
        db.session.flush()

    log_action(
        action="slider.create",
        entity_type="slider",
        entity_id=slider.id,
        payload={"title": slider.title, "order": slider.order, "active": slider.active},
    )
    return slider


def update_slider(
    *,
    slider_id: str,
    data: Dict[str, Any],
    image_url: Optional[str] = None,
) -> Slider:
    slider = get_slider(slider_id)

    with transactional():
        apply_text(slider, "title", data, "title", required=True)
        for attr, field in TEXT_FIELDS:
            apply_text(slider, attr, data, field)
        apply_display_fields(slider, data)
        apply_image(slider, data, image_url)

    log_action(
        action="slider.update",
        entity_type="slider",
        entity_id=slider.id,
        payload={"fields": sorted(data.keys())},
    )
    return slider


def delete_slider(*, slider_id: str) -> None:
    slider = get_slider(slider_id)

    with transactional():
        db.session.delete(slider)

    log_action(action="slider.delete", entity_type="slider", entity_id=slider_id)
