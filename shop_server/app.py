"""
Shop API server
Serves the static product catalog and echoes validated payments
"""

from flask import Flask, abort, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException, MethodNotAllowed
import logging

from .catalog import list_products
from .config import load_config
from .payments import decode_payment

logger = logging.getLogger(__name__)

SERVICE_NAME = 'shop-server'


def create_app(config=None):
    """Build the Flask app; `config` overrides values read from the environment"""
    app = Flask(__name__)
    app.config.update(load_config())
    if config:
        app.config.update(config)

    # Keep declared field order and compact output with a trailing newline
    app.json.sort_keys = False
    app.json.compact = True
    app.json.ensure_ascii = False

    CORS(app, resources={r"/api/*": {"origins": app.config['CORS_ORIGINS']}})

    register_routes(app)
    register_error_handlers(app)
    return app


def register_routes(app):
    @app.before_request
    def reject_implicit_head():
        """Routes serve only their declared methods; HEAD is added to GET rules implicitly"""
        if request.method == 'HEAD' and request.url_rule is not None:
            abort(405, valid_methods=sorted(request.url_rule.methods - {'HEAD'}))

    @app.route('/health', provide_automatic_options=False)
    def health():
        """Health check endpoint"""
        return jsonify({'service': SERVICE_NAME, 'status': 'healthy'})

    @app.route('/api/products', methods=['GET'], provide_automatic_options=False)
    def get_products():
        logger.info(f"Products requested: {request.method} {request.path}")
        return jsonify(list_products())

    @app.route('/api/payments', methods=['POST'], provide_automatic_options=False)
    def handle_payments():
        logger.info(f"Payment received: {request.content_length or 0} bytes")
        payment = decode_payment(request.get_data(cache=False))
        return app.response_class(payment.to_json() + '\n', mimetype='application/json')


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        """Render 4xx/5xx errors as JSON, keeping headers such as Allow"""
        if e.code is None or e.code < 400:
            return e

        if e.code == 400:
            logger.warning(f"Rejected {request.method} {request.path}: {e.description}")
        else:
            logger.info(f"{e.code} for {request.method} {request.path}")

        if isinstance(e, MethodNotAllowed) and e.valid_methods:
            e.valid_methods = [m for m in e.valid_methods if m != 'HEAD']

        response = e.get_response()
        response.data = app.json.dumps(
            {'error': e.name, 'message': e.description}, separators=(',', ':')
        ) + '\n'
        response.content_type = 'application/json'
        return response


def main():
    config = load_config()
    logging.basicConfig(level=getattr(logging, config['LOG_LEVEL'], logging.INFO))

    app = create_app(config)
    logger.info("🚀 Starting shop server")
    logger.info(f"🛒 Products: http://localhost:{config['PORT']}/api/products")
    logger.info(f"💳 Payments: http://localhost:{config['PORT']}/api/payments")

    app.run(host=config['HOST'], port=config['PORT'], debug=False)
