import logging
from dataclasses import replace
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from stockroom.errors import ConflictError, NotFoundError, ValidationError
from stockroom.product.model import CreateProductProps, Product, ProductId
from stockroom.product.repository import ProductRepository
from stockroom.repository import Repository, SearchInput, SearchOutput

logger = logging.getLogger(__name__)

# Bounds of the products.price NUMERIC(12, 2) and products.quantity INTEGER columns
MAX_PRICE = Decimal("9999999999.99")
MAX_QUANTITY = 2**31 - 1


def clean_name(name) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Product name is required")
    return name.strip()


def clean_price(price) -> Decimal:
    if isinstance(price, bool):
        raise ValidationError(f"Invalid price: {price!r}")
    try:
        value = Decimal(str(price))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"Invalid price: {price!r}") from None
    if not value.is_finite() or value < 0 or value > MAX_PRICE:
        raise ValidationError(f"Invalid price: {price!r}")
    if value != value.quantize(Decimal("0.01")):
        raise ValidationError(f"Price has more than 2 decimal places: {price!r}")
    return value


def clean_quantity(quantity) -> int:
    if isinstance(quantity, bool) or not isinstance(quantity, int) or not 0 <= quantity <= MAX_QUANTITY:
        raise ValidationError(f"Invalid quantity: {quantity!r}")
    return quantity


class ProductService:
    """
    Product use cases on top of a product repository.

    Validates input, keeps product names unique and turns the repository's
    None results into NotFoundError.
    """

    def __init__(self, repository: Repository[Product, CreateProductProps] = None):
        self.repository = repository or ProductRepository()

    def create(self, name: str, price, quantity: int) -> Product:
        props = CreateProductProps(
            name=clean_name(name),
            price=clean_price(price),
            quantity=clean_quantity(quantity),
        )
        if self.repository.find_by_name(props.name):
            logger.warning("Rejected duplicate product name %r", props.name)
            raise ConflictError(f"Product {props.name} already exists")

        product = self.repository.create(props)
        logger.info("Created product %s (%s)", product.id, product.name)
        return product

    def get(self, product_id: str) -> Product:
        product = self.repository.find_by_id(product_id)
        if not product:
            raise NotFoundError(f"Product {product_id} not found")
        return product

    def get_many(self, product_ids: List[str]) -> List[Product]:
        return self.repository.find_all_by_ids([ProductId(id=i) for i in product_ids])

    def update(
        self,
        product_id: str,
        name: Optional[str] = None,
        price=None,
        quantity: Optional[int] = None,
    ) -> Product:
        product = self.get(product_id)

        changes = {}
        if name is not None:
            changes["name"] = clean_name(name)
        if price is not None:
            changes["price"] = clean_price(price)
        if quantity is not None:
            changes["quantity"] = clean_quantity(quantity)

        if "name" in changes and changes["name"] != product.name:
            existing = self.repository.find_by_name(changes["name"])
            if existing and existing.id != product.id:
                logger.warning("Rejected rename of %s to taken name %r", product.id, changes["name"])
                raise ConflictError(f"Product {changes['name']} already exists")

        updated = self.repository.update(replace(product, **changes))
        if not updated:
            # Deleted between the read and the write
            raise NotFoundError(f"Product {product_id} not found")
        logger.info("Updated product %s", updated.id)
        return updated

    def delete(self, product_id: str) -> None:
        self.get(product_id)
        self.repository.delete(product_id)
        logger.info("Deleted product %s", product_id)

    def search(
        self,
        page: int = 1,
        per_page: int = 10,
        sort: Optional[str] = "created_at",
        sort_dir: Optional[str] = "desc",
        filter: Optional[str] = None,
    ) -> SearchOutput[Product]:
        return self.repository.select_all(
            SearchInput(page=page, per_page=per_page, sort=sort, sort_dir=sort_dir, filter=filter)
        )
