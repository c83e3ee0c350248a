from flask import jsonify
from bionutrex.application.cms import sliders as service
from bionutrex.normalizers.slider import normalize_slider
from bionutrex.utils.decorators import admin_required
from bionutrex.utils.forms import request_data
from bionutrex.utils.media import content_image
from . import api_bp


@api_bp.route("/sliders", methods=["GET"])
def list_sliders():
    return jsonify([normalize_slider(s) for s in service.list_sliders()])


@api_bp.route("/sliders/admin/all", methods=["GET"])
@admin_required
def list_all_sliders():
    return jsonify([
        normalize_slider(s) for s in service.list_sliders(include_inactive=True)
    ])


@api_bp.route("/sliders/<slider_id>", methods=["GET"])
def get_slider(slider_id):
    return jsonify(normalize_slider(service.get_slider(slider_id)))


@api_bp.route("/sliders", methods=["POST"])
@admin_required
def create_slider():
    data = request_data()
    with content_image() as image_url:
        slider = service.create_slider(data=data, image_url=image_url)
    return jsonify(normalize_slider(slider)), 201


@api_bp.route("/sliders/<slider_id>", methods=["PUT"])
@admin_required
def update_slider(slider_id):
    data = request_data()
    with content_image() as image_url:
        slider = service.update_slider(
            slider_id=slider_id,
            data=data,
            image_url=image_url,
        )
    return jsonify(normalize_slider(slider)), 200


@api_bp.route("/sliders/<slider_id>", methods=["DELETE"])
@admin_required
def delete_slider(slider_id):
    service.delete_slider(slider_id=slider_id)
    return jsonify({"message": "Slider deleted successfully"}), 200
