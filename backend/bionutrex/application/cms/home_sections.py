import json
from typing import Any, Dict, List, Optional
from flask import current_app
from sqlalchemy.orm import selectinload
from bionutrex.extensions import db
from bionutrex.models.home_section import HomeSection
from bionutrex.models.section_image import SectionImage
from bionutrex.domain.invariants.content import assert_home_section, assert_section_images
from bionutrex.domain.invariants.exceptions import InvariantViolation
from bionutrex.utils.audit import log_action
from bionutrex.utils.forms import parse_int
from bionutrex.utils.schema import has_table
from bionutrex.utils.transaction import transactional
from .common import apply_display_fields, apply_image, apply_text, ordered

TEXT_FIELDS = (
    ("subtitle", "subtitle"),
    ("button_text", "buttonText"),
    ("button_link", "buttonLink"),
)


def images_available() -> bool:
    return has_table(SectionImage.__tablename__)


def _with_images(query):
    if images_available():
        return query.options(selectinload(HomeSection.images))
    return query


def list_home_sections(*, include_inactive: bool = False) -> List[HomeSection]:
    query = HomeSection.query
    if not include_inactive:
        query = query.filter_by(active=True)
    return ordered(_with_images(query), HomeSection).all()


def get_home_section(section_id: str) -> HomeSection:
    return HomeSection.query.filter_by(id=section_id).first_or_404(description="Section not found")


def get_active_section_by_key(section_key: str) -> HomeSection:
    return (
        _with_images(HomeSection.query)
        .filter_by(section_key=section_key, active=True)
        .first_or_404(description="Section not found")
    )


def _assert_key_free(section_key: str, exclude_id: Optional[str] = None) -> None:
    query = HomeSection.query.filter_by(section_key=section_key)
    if exclude_id is not None:
        query = query.filter(HomeSection.id != exclude_id)
    if query.first() is not None:
        raise InvariantViolation("Section with this key already exists")


def _parse_images(raw) -> Optional[list]:
    """``images`` arrives as a list in JSON bodies and as a JSON string in forms."""
    if raw is None:
        return None
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError as exc:
            raise InvariantViolation("images must be a JSON list") from exc
    assert_section_images(raw)
    return raw


def _replace_images(section: HomeSection, images: list) -> None:
    new_images = []
    for index, item in enumerate(images):
        url = item.get("url") or ""
        if not url:
            continue

        image = SectionImage()
        image.url = url
        image.alt = item.get("alt") or ""
        image.caption = item.get("caption") or None
        image.order = index if item.get("order") is None else parse_int(item["order"], "order")
        new_images.append(image)

    # delete-orphan removes the previous collection on flush
    section.images = new_images


def _apply_section_fields(section: HomeSection, data: Dict[str, Any], image_url: Optional[str]) -> None:
    apply_text(section, "section_key", data, "sectionKey", required=True)
    apply_text(section, "title", data, "title", required=True)
    apply_text(section, "content", data, "content", required=True)
    for attr, field in TEXT_FIELDS:
        apply_text(section, attr, data, field)
    apply_display_fields(section, data)
    apply_image(section, data, image_url)


def create_home_section(*, data: Dict[str, Any], image_url: Optional[str] = None) -> HomeSection:
    assert_home_section(data)
    _assert_key_free(str(data["sectionKey"]))

    section = HomeSection()
    section.section_key = str(data["sectionKey"])
    section.title = str(data["title"])
    section.content = str(data.get("content") or "")
    section.order = 0
    section.active = True

    for attr, field in TEXT_FIELDS:
        apply_text(section, attr, data, field)
    apply_display_fields(section, data)
    apply_image(section, data, image_url)

    with transactional():
        db.session.add(section)
        db.session.flush()

    log_action(
        action="section.create",
        entity_type="section",
        entity_id=section.id,
        payload={"section_key": section.section_key, "order": section.order},
    )
    return section


def update_home_section(
    *,
    section_id: str,
    data: Dict[str, Any],
    image_url: Optional[str] = None,
) -> HomeSection:
    """
    Partial update of a home section.

    When ``images`` is given, the field update and the gallery replacement
    commit together. Databases without the images table get the field
    update only.
    """
    section = get_home_section(section_id)

    new_key = data.get("sectionKey")
    if new_key and str(new_key).strip() and new_key != section.section_key:
        _assert_key_free(str(new_key), exclude_id=section.id)

    images = _parse_images(data.get("images"))

    if images is not None and images_available():
        with transactional():
            _apply_section_fields(section, data, image_url)
            _replace_images(section, images)
    else:
        if images is not None:
            current_app.logger.warning(
                "Images table not found, updating section %s only", section.id
            )
        with transactional():
            _apply_section_fields(section, data, image_url)

    log_action(
        action="section.update",
        entity_type="section",
        entity_id=section.id,
        payload={"fields": sorted(data.keys())},
    )
    return section


def delete_home_section(*, section_id: str) -> None:
    section = get_home_section(section_id)

    with transactional():
        if images_available():
            # images go with the section (cascade)
            db.session.delete(section)
        else:
            # the ORM cascade would query the missing images table
            HomeSection.query.filter_by(id=section.id).delete()

    log_action(action="section.delete", entity_type="section", entity_id=section_id)
