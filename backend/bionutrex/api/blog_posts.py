from flask import jsonify
from bionutrex.application.cms import blog_posts as service
from bionutrex.normalizers.blog_post import normalize_blog_post
from bionutrex.utils.decorators import admin_required
from bionutrex.utils.forms import request_data
from bionutrex.utils.media import content_image
from . import api_bp


@api_bp.route("/blog-posts", methods=["GET"])
def list_blog_posts():
    return jsonify([normalize_blog_post(p) for p in service.list_published_posts()])


@api_bp.route("/blog-posts/admin/all", methods=["GET"])
@admin_required
def list_all_blog_posts():
    return jsonify([normalize_blog_post(p) for p in service.list_all_posts()])


@api_bp.route("/blog-posts/admin/<post_id>", methods=["GET"])
@admin_required
def get_blog_post(post_id):
    return jsonify(normalize_blog_post(service.get_post(post_id)))


@api_bp.route("/blog-posts/slug/<slug>", methods=["GET"])
def get_blog_post_by_slug(slug):
    return jsonify(normalize_blog_post(service.read_published_post(slug)))


@api_bp.route("/blog-posts", methods=["POST"])
@admin_required
def create_blog_post():
    data = request_data()
    with content_image() as image_url:
        post = service.create_blog_post(data=data, image_url=image_url)
    return jsonify(normalize_blog_post(post)), 201


@api_bp.route("/blog-posts/<post_id>", methods=["PUT"])
@admin_required
def update_blog_post(post_id):
    data = request_data()
    with content_image() as image_url:
        post = service.update_blog_post(
            post_id=post_id,
            data=data,
            image_url=image_url,
        )
    return jsonify(normalize_blog_post(post)), 200


@api_bp.route("/blog-posts/<post_id>", methods=["DELETE"])
@admin_required
def delete_blog_post(post_id):
    service.delete_blog_post(post_id=post_id)
    return jsonify({"message": "Post deleted successfully"}), 200
