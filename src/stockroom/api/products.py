from flask import Blueprint, current_app, jsonify, request

from stockroom.config import config
from stockroom.errors import ValidationError

bp = Blueprint("products", __name__)


def int_arg(name: str, default: int) -> int:
    value = request.args.get(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{name} must be an integer") from None


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


@bp.route("", methods=["GET"])
def list_products():
    """Search products with paging, sorting and a name filter."""
    result = current_app.product_service.search(
        page=int_arg("page", 1),
        per_page=int_arg("per_page", config.default_per_page),
        sort=request.args.get("sort", "created_at"),
        sort_dir=request.args.get("sort_dir", "desc"),
        filter=request.args.get("filter"),
    )
    return jsonify(result.to_dict(lambda product: product.to_dict()))


@bp.route("", methods=["POST"])
def create_product():
    """Create a new product."""
    data = json_body()

    product = current_app.product_service.create(
        name=data.get("name"),
        price=data.get("price"),
        quantity=data.get("quantity"),
    )

    return jsonify(product.to_dict()), 201


@bp.route("/lookup", methods=["POST"])
def lookup_products():
    """Fetch several products at once. Unknown ids are left out."""
    ids = json_body().get("ids")
    if not isinstance(ids, list) or not all(isinstance(i, str) for i in ids):
        raise ValidationError("ids must be a list of strings")

    products = current_app.product_service.get_many(ids)
    return jsonify([product.to_dict() for product in products])


@bp.route("/<product_id>", methods=["GET"])
def get_product(product_id: str):
    """Get product by ID."""
    product = current_app.product_service.get(product_id)
    return jsonify(product.to_dict())


@bp.route("/<product_id>", methods=["PUT"])
def update_product(product_id: str):
    """Update any of name, price and quantity."""
    data = json_body()

    product = current_app.product_service.update(
        product_id,
        name=data.get("name"),
        price=data.get("price"),
        quantity=data.get("quantity"),
    )

    return jsonify(product.to_dict())


@bp.route("/<product_id>", methods=["DELETE"])
def delete_product(product_id: str):
    """Delete a product."""
    current_app.product_service.delete(product_id)
    return "", 204
