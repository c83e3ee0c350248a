from flask import jsonify, request
from bionutrex.utils.decorators import admin_required
from bionutrex.utils.media import delete_upload, list_uploads, save_file, save_files
from bionutrex.utils.audit import log_action
from . import api_bp


@api_bp.route("/uploads", methods=["POST"])
@admin_required
def upload_file():
    saved = save_file(request.files.get("file"))

    log_action(
        action="upload.create",
        entity_type="upload",
        entity_id=saved["filename"],
        payload={"size": saved["size"], "mimetype": saved["mimetype"]},
    )
    return jsonify(saved), 201


@api_bp.route("/uploads/multiple", methods=["POST"])
@admin_required
def upload_multiple_files():
    files = [f for f in request.files.getlist("files") if f and f.filename]
    saved = save_files(files)

    log_action(
        action="upload.create_many",
        entity_type="upload",
        entity_id="*",
        payload={"count": len(saved)},
    )
    return jsonify({"files": saved}), 201


@api_bp.route("/uploads/list", methods=["GET"])
def list_uploaded_files():
    return jsonify(list_uploads())


@api_bp.route("/uploads/<filename>", methods=["DELETE"])
@admin_required
def delete_uploaded_file(filename):
    delete_upload(filename)

    log_action(action="upload.delete", entity_type="upload", entity_id=filename)
    return jsonify({"message": "File deleted successfully"}), 200
