from flask import request, jsonify, g
from flask_jwt_extended import create_access_token
from bionutrex.extensions import db
from bionutrex.models.admin import Admin
from bionutrex.normalizers.admin import normalize_admin
from bionutrex.utils.decorators import admin_required
from bionutrex.utils.transaction import transactional
from . import api_bp


def _credentials():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = request.form.to_dict()
    return data


def _field(data, name):
    value = data.get(name)
    return "" if value is None else str(value)


@api_bp.route("/auth/login", methods=["POST"])
def login():
    data = _credentials()

    email = _field(data, "email").strip()
    password = _field(data, "password")

    if not email or not password:
        return jsonify({"error": "Email and password are required"}), 400

    admin = Admin.query.filter_by(email=email).first()

    if not admin or not admin.check_password(password):
        return jsonify({"error": "Invalid credentials"}), 401

    return jsonify({
        "token": create_access_token(identity=admin.id),
        "admin": normalize_admin(admin)
    }), 200


@api_bp.route("/auth/register", methods=["POST"])
def register():
    data = _credentials()

    email = _field(data, "email").strip()
    password = _field(data, "password")
    name = _field(data, "name").strip()

    if not email or not password or not name:
        return jsonify({"error": "All fields are required"}), 400

    if Admin.query.filter_by(email=email).first():
        return jsonify({"error": "Admin already exists"}), 400

    admin = Admin()
    admin.email = email
    admin.name = name
    admin.set_password(password)

    with transactional():
        db.session.add(admin)
        db.session.flush()

    return jsonify({
        "token": create_access_token(identity=admin.id),
        "admin": normalize_admin(admin)
    }), 201


@api_bp.route("/auth/verify", methods=["GET"])
@admin_required
def verify():
    return jsonify({"admin": normalize_admin(g.current_admin)}), 200
