from flask import Flask, jsonify
import flask
import markupsafe
# Patch para compatibilidade do Flasgger com Flask 3.0+
flask.Markup = markupsafe.Markup

from flasgger import Swagger
import logging
import requests

from nubevdc.config import DevelopmentConfig

# 1. IMPORTAÇÃO CENTRALIZADA (SINGLETON)
from nubevdc.extensions import cors, vcloud_client

from nubevdc.vcloud.errors import (
    BatchFailureError,
    ConflictError,
    InvalidArgumentError,
    ObjectNotFoundError,
    TaskFailedError,
)

from nubevdc.api.main import main_bp


def create_app(config_class=DevelopmentConfig):
    """Factory do aplicativo Flask"""
    app = Flask(__name__)
    app.config.from_object(config_class)

    # REGISTRO DE COMANDOS
    from nubevdc.commands import vdc_cli
    app.cli.add_command(vdc_cli)

    # Configuração do Swagger
    swagger_config = {
        "headers": [],
        "specs": [
            {
                "endpoint": 'apispec',
                "route": '/apispec.json',
                "rule_filter": lambda rule: True,
                "model_filter": lambda tag: True,
            }
        ],
        "static_url_path": "/flasgger_static",
        "swagger_ui": True,
        "specs_route": "/docs"
    }

    Swagger(app, config=swagger_config)

    # 2. INICIALIZAR EXTENSÕES
    init_extensions(app)

    # 3. CONFIGURAR LOGGING
    configure_logging(app)

    # 4. REGISTRAR ROTAS
    register_blueprints(app)

    # Registra a rota raiz (Health Check / Main)
    app.register_blueprint(main_bp)

    # 5. TRATAMENTO DE ERROS
    register_error_handlers(app)

    return app


def init_extensions(app):
    """Inicializa todas as extensões do Flask."""
    cors.init_app(app, resources={r"/*": {
        "origins": app.config.get('CORS_ORIGINS', []),
        "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        "allow_headers": ["Content-Type", "Authorization"],
        "expose_headers": ["Content-Range", "X-Total-Count"]
    }}, supports_credentials=True)

    # --- INICIALIZAÇÃO DO SINGLETON VCLOUD ---
    # O objeto já existe (criado em nubevdc/vcloud/__init__.py), aqui apenas injetamos a config do app.
    vcloud_client.init_app(app)


def configure_logging(app):
    if not app.debug:
        logging.basicConfig(level=logging.INFO)


def register_blueprints(app):
    """Registra os módulos de rotas (Blueprints)."""
    prefix = app.config.get('API_PREFIX', '/api')

    # Import dentro da função para evitar ciclos
    from nubevdc.vcloud import bp as vcloud_bp
    app.register_blueprint(vcloud_bp, url_prefix=f"{prefix}/vcloud")


def register_error_handlers(app):
    """Centraliza o tratamento de exceções da aplicação."""

    @app.errorhandler(ObjectNotFoundError)
    def handle_not_found(e):
        return jsonify({'success': False, 'error': str(e)}), 404

    @app.errorhandler(InvalidArgumentError)
    def handle_invalid_argument(e):
        return jsonify({'success': False, 'error': str(e)}), 400

    @app.errorhandler(ConflictError)
    def handle_conflict(e):
        app.logger.warning(f"vCloud Conflict: {str(e)}")
        return jsonify({'success': False, 'error': str(e), 'links': e.links}), 409

    @app.errorhandler(BatchFailureError)
    def handle_batch_failure(e):
        app.logger.error(f"vCloud Batch Error: {str(e)}")
        return jsonify({
            'success': False,
            'error': str(e),
            'failed': [href for href, _ in e.failures]
        }), 500

    @app.errorhandler(TaskFailedError)
    def handle_task_error(e):
        app.logger.error(f"vCloud Task Error: {str(e)}")
        return jsonify({'success': False, 'error': str(e)}), 500

    @app.errorhandler(requests.HTTPError)
    def handle_vcloud_http_error(e):
        app.logger.error(f"vCloud HTTP Error: {str(e)}")
        return jsonify({'success': False, 'error': str(e)}), 502

    @app.errorhandler(400)
    def handle_bad_request(e):
        return jsonify({'success': False, 'error': e.description}), 400

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'Endpoint not found'}), 404

    @app.errorhandler(500)
    def handle_generic_error(e):
        app.logger.error(f"Internal Server Error: {str(e)}")
        return jsonify({'success': False, 'error': str(e)}), 500
