from flask import current_app, jsonify, request
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from bionutrex.domain.invariants.exceptions import InvariantViolation
from bionutrex.extensions import db, jwt


def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        response = jsonify({
            "error": str(error),
            "message": str(error)
        })
        response.status_code = 400
        return response

    # body over MAX_CONTENT_LENGTH
    @app.errorhandler(RequestEntityTooLarge)
    def handle_request_too_large(error):
        return jsonify({"error": "File too large"}), 400

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        if error.code == 404 and request.url_rule is None:
            return jsonify({"error": "Route not found"}), 404

        return jsonify({"error": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        db.session.rollback()
        current_app.logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"error": "Internal server error"}), 500


# Every token failure is an auth error for the API consumers.
@jwt.unauthorized_loader
def handle_missing_token(reason):
    return jsonify({"error": "No token provided"}), 401


@jwt.invalid_token_loader
def handle_invalid_token(reason):
    return jsonify({"error": "Invalid token"}), 401


@jwt.expired_token_loader
def handle_expired_token(jwt_header, jwt_payload):
    return jsonify({"error": "Token has expired"}), 401


@jwt.user_lookup_error_loader
def handle_unknown_admin(jwt_header, jwt_payload):
    return jsonify({"error": "Admin not found"}), 401
