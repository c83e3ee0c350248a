from flask import jsonify
from bionutrex.application.cms import home_sections as service
from bionutrex.normalizers.home_section import normalize_home_section
from bionutrex.utils.decorators import admin_required
from bionutrex.utils.forms import request_data
from bionutrex.utils.media import content_image
from . import api_bp


def _serialize(sections):
    include_images = service.images_available()
    return [normalize_home_section(s, include_images=include_images) for s in sections]


@api_bp.route("/home-sections", methods=["GET"])
def list_home_sections():
    return jsonify(_serialize(service.list_home_sections()))


@api_bp.route("/home-sections/admin/all", methods=["GET"])
@admin_required
def list_all_home_sections():
    return jsonify(_serialize(service.list_home_sections(include_inactive=True)))


@api_bp.route("/home-sections/admin/<section_id>", methods=["GET"])
@admin_required
def get_home_section(section_id):
    return jsonify(_serialize([service.get_home_section(section_id)])[0])


@api_bp.route("/home-sections/key/<section_key>", methods=["GET"])
def get_home_section_by_key(section_key):
    return jsonify(_serialize([service.get_active_section_by_key(section_key)])[0])


@api_bp.route("/home-sections", methods=["POST"])
@admin_required
def create_home_section():
    data = request_data()
    with content_image() as image_url:
        section = service.create_home_section(data=data, image_url=image_url)
    return jsonify(_serialize([section])[0]), 201


@api_bp.route("/home-sections/<section_id>", methods=["PUT"])
@admin_required
def update_home_section(section_id):
    data = request_data()
    with content_image() as image_url:
        section = service.update_home_section(
            section_id=section_id,
            data=data,
            image_url=image_url,
        )
    return jsonify(_serialize([section])[0]), 200


@api_bp.route("/home-sections/<section_id>", methods=["DELETE"])
@admin_required
def delete_home_section(section_id):
    service.delete_home_section(section_id=section_id)
    return jsonify({"message": "Section deleted successfully"}), 200
