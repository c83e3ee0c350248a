import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

import requests

logger = logging.getLogger(__name__)

DEMO_SLIDERS = [
    {
        "id": "demo-slider-1",
        "title": "Ciencia Avanzada. Pureza Natural.",
        "subtitle": "Innovación en Biotecnología",
        "imageUrl": None,
        "order": 1,
        "active": True,
    },
]

DEMO_SECTIONS = [
    {
        "id": "demo-hero",
        "sectionKey": "hero",
        "title": "Ciencia Avanzada. Pureza Natural.",
        "subtitle": "Innovación en Biotecnología",
        "content": "Suplementos naturales de alta potencia.",
        "order": 1,
        "active": True,
        "images": [],
    },
    {
        "id": "demo-quality",
        "sectionKey": "quality",
        "title": "Calidad Superior",
        "subtitle": "Estándares Farmacéuticos",
        "content": "Controles de pureza en cada lote.",
        "order": 2,
        "active": True,
        "images": [],
    },
]


@dataclass
class HomeContent:
    sliders: List[Dict[str, Any]] = field(default_factory=list)
    sections: List[Dict[str, Any]] = field(default_factory=list)
    offline: bool = False

    def section(self, section_key: str):
        for section in self.sections:
            if section.get("sectionKey") == section_key:
                return section
        return None


def display_order(items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Sort by ``order``, ties alphabetically by title."""
    return sorted(items, key=lambda item: (item.get("order") or 0, item.get("title") or ""))


def load_home_content(client, *, admin: bool = False, demo_fallback: bool = False) -> HomeContent:
    """
    Fetch sliders and home sections ready for rendering.

    When the backend cannot be reached and ``demo_fallback`` is set, demo
    content is returned with ``offline=True`` so callers can flag it.
    """
    try:
        sliders = client.list_sliders(admin=admin)
        sections = client.list_home_sections(admin=admin)
    except requests.RequestException as exc:
        if not demo_fallback:
            raise
        logger.warning("Backend unreachable (%s), serving demo content", exc)
        return HomeContent(
            sliders=display_order([dict(s) for s in DEMO_SLIDERS]),
            sections=display_order([dict(s) for s in DEMO_SECTIONS]),
            offline=True,
        )

    return HomeContent(
        sliders=display_order(sliders),
        sections=display_order(sections),
    )
