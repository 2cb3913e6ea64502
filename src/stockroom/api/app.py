from flask import Flask, jsonify

from stockroom.config import configure_logging
from stockroom.errors import StockroomError
from stockroom.product.service import ProductService


def create_app(product_service: ProductService = None) -> Flask:
    """Application factory."""
    configure_logging()

    app = Flask(__name__)
    app.product_service = product_service or ProductService()

    # Register blueprints
    from stockroom.api.products import bp as products_bp

    app.register_blueprint(products_bp, url_prefix="/api/products")

    @app.errorhandler(StockroomError)
    def handle_stockroom_error(error: StockroomError):
        return jsonify({"error": error.message}), error.status_code

    @app.route("/api/health")
    def health():
        return {"status": "ok"}

    return app
