from .common import timestamps


def normalize_section_image(image):
    return {
        "id": image.id,
        "sectionId": image.section_id,
        "url": image.url,
        "alt": image.alt,
        "caption": image.caption,
        "order": image.order,
    }


def normalize_home_section(section, include_images=True):
    data = {
        "id": section.id,
        "sectionKey": section.section_key,
        "title": section.title,
        "subtitle": section.subtitle,
        "content": section.content,
        "imageUrl": section.image_url,
        "buttonText": section.button_text,
        "buttonLink": section.button_link,
        "order": section.order,
        "active": section.active,
        **timestamps(section),
    }

    if include_images:
        images = sorted(section.images, key=lambda i: i.order)
        data["images"] = [normalize_section_image(i) for i in images]

    return data
