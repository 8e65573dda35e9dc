from flask import Blueprint, jsonify
from flask_cors import cross_origin
from datetime import datetime, timezone

from nubevdc.services.health import get_system_health

main_bp = Blueprint('main', __name__)


@main_bp.route('/', methods=['GET'])
def index():
    return jsonify({
        "project": "NubeVDC API",
        "status": "online",
        "documentation": "/docs"
    }), 200


@main_bp.route('/health', methods=['GET'])
@main_bp.route('/api/health', methods=['GET', 'OPTIONS'])
@cross_origin()
def health_check():
    """
    Verifica a saúde usando a MESMA conexão que o resto do sistema usa.
    ---
    tags:
      - System
    responses:
      200:
        description: Estado da API e do vCloud
    """
    report = get_system_health()
    report['server_time'] = datetime.now(timezone.utc).isoformat()
    return jsonify(report), 200
