import os
import re
import uuid
from contextlib import contextmanager
from flask import current_app, request
from werkzeug.exceptions import NotFound
from werkzeug.utils import secure_filename

from bionutrex.domain.invariants.exceptions import UploadRejected

# MIME type -> canonical extension
CONTENT_IMAGE_TYPES = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/webp": "webp",
    "image/svg+xml": "svg",
}

UPLOAD_TYPES = {
    **CONTENT_IMAGE_TYPES,
    "application/pdf": "pdf",
    "video/mp4": "mp4",
    "video/webm": "webm",
}

LISTED_FILE_PATTERN = re.compile(r"\.(jpe?g|png|gif|webp|svg|pdf|mp4|webm)$", re.IGNORECASE)

PUBLIC_PREFIX = "/uploads"


def upload_folder():
    folder = current_app.config["UPLOAD_FOLDER"]
    os.makedirs(folder, exist_ok=True)
    return folder


def _file_size(file):
    stream = file.stream
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size


def _extension_for(file, allowed_types):
    canonical = allowed_types[file.mimetype]
    filename = secure_filename(file.filename or "")
    if "." in filename:
        ext = filename.rsplit(".", 1)[1].lower()
        if ext == canonical or (canonical == "jpg" and ext == "jpeg"):
            return ext
    return canonical


def validate_file(file, *, allowed_types, max_bytes):
    """
    Check a werkzeug FileStorage against a MIME allow-list and a size ceiling.

    Returns the file size in bytes.
    """
    if file is None or not file.filename:
        raise UploadRejected("No file provided")

    if file.mimetype not in allowed_types:
        raise UploadRejected(f"File type not allowed: {file.mimetype or 'unknown'}")

    size = _file_size(file)
    if size > max_bytes:
        raise UploadRejected(f"File too large (max {max_bytes // (1024 * 1024)} MB)")

    return size


def save_file(file, *, allowed_types=UPLOAD_TYPES, max_bytes=None):
    if max_bytes is None:
        max_bytes = current_app.config["UPLOAD_MAX_BYTES"]

    size = validate_file(file, allowed_types=allowed_types, max_bytes=max_bytes)

    ext = _extension_for(file, allowed_types)
    unique_filename = f"{uuid.uuid4().hex}.{ext}"
    file_path = os.path.join(upload_folder(), unique_filename)

    file.save(file_path)

    return {
        "url": f"{PUBLIC_PREFIX}/{unique_filename}",
        "filename": unique_filename,
        "originalName": file.filename,
        "mimetype": file.mimetype,
        "size": size,
    }


def save_files(files, *, allowed_types=UPLOAD_TYPES, max_bytes=None):
    """Validate every file first so a rejected file leaves nothing on disk."""
    if max_bytes is None:
        max_bytes = current_app.config["UPLOAD_MAX_BYTES"]

    if not files:
        raise UploadRejected("No files provided")

    for file in files:
        validate_file(file, allowed_types=allowed_types, max_bytes=max_bytes)

    return [
        save_file(file, allowed_types=allowed_types, max_bytes=max_bytes)
        for file in files
    ]


def save_content_image(field="image"):
    """
    Store the optional image attached to a content create/update request.

    Returns the public URL, or None when the request carries no image.
    """
    file = request.files.get(field)
    if file is None or not file.filename:
        return None

    saved = save_file(
        file,
        allowed_types=CONTENT_IMAGE_TYPES,
        max_bytes=current_app.config["CONTENT_IMAGE_MAX_BYTES"],
    )
    return saved["url"]


@contextmanager
def content_image(field="image"):
    """
    Yield the URL of the request's optional content image.

    The stored file is removed again when the block raises.
    """
    url = save_content_image(field)
    try:
        yield url
    except Exception:
        if url:
            _remove_saved(url)
        raise


def _remove_saved(url):
    path = os.path.join(upload_folder(), url.rsplit("/", 1)[-1])
    if os.path.isfile(path):
        os.remove(path)


def list_uploads():
    """Filenames in the upload directory with a known media extension."""
    folder = upload_folder()
    return sorted(
        name
        for name in os.listdir(folder)
        if LISTED_FILE_PATTERN.search(name)
        and os.path.isfile(os.path.join(folder, name))
    )


def delete_upload(filename):
    safe_name = secure_filename(filename)
    if not safe_name or safe_name != filename:
        raise NotFound("File not found")

    file_path = os.path.join(upload_folder(), safe_name)
    if not os.path.isfile(file_path):
        raise NotFound("File not found")

    os.remove(file_path)
    current_app.logger.info("Deleted upload %s", safe_name)
