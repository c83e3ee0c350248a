from .common import timestamps


def normalize_slider(slider):
    return {
        "id": slider.id,
        "title": slider.title,
        "subtitle": slider.subtitle,
        "description": slider.description,
        "imageUrl": slider.image_url,
        "buttonText": slider.button_text,
        "buttonLink": slider.button_link,
        "order": slider.order,
        "active": slider.active,
        **timestamps(slider),
    }
