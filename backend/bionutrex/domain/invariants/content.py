from .exceptions import InvariantViolation


def _present(data, field):
    value = data.get(field)
    if value is None:
        return False
    return bool(str(value).strip())


def assert_required(data, fields, message):
    missing = [field for field in fields if not _present(data, field)]
    if missing:
        raise InvariantViolation(message)


def assert_slider(data):
    assert_required(data, ("title",), "Title is required")


def assert_home_section(data):
    assert_required(data, ("sectionKey", "title"), "Section key and title are required")


def assert_blog_post(data):
    assert_required(data, ("title", "content"), "Title and content are required")


def assert_section_images(images):
    if not isinstance(images, list):
        raise InvariantViolation("images must be a list")

    for image in images:
        if not isinstance(image, dict):
            raise InvariantViolation("Each image must be an object")
