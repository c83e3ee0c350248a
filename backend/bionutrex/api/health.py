from datetime import datetime, timezone
from flask import jsonify
from . import api_bp

@api_bp.route('/health', methods=['GET'])
def health_check():
    return jsonify({
        "status": "OK",
        "message": "BioNutrex API is running",
        "timestamp": datetime.now(timezone.utc).isoformat()
    })
