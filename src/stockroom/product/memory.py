import threading
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, List, Optional

from stockroom.config import config
from stockroom.product.model import CreateProductProps, Product, ProductId
from stockroom.repository import (
    SearchInput,
    SearchOutput,
    resolve_page,
    resolve_per_page,
    resolve_sort,
    resolve_sort_dir,
)


class InMemoryProductRepository:
    """
    Dict-backed product repository.

    Honours the same contract and search rules as ProductRepository.
    Handy for tests and for running the API without a database.
    """

    sortable_fields = ("name", "created_at")

    def __init__(self):
        self._products: Dict[str, Product] = {}
        self._lock = threading.Lock()

    def find_by_name(self, name: str) -> Optional[Product]:
        with self._lock:
            for product in self._products.values():
                if product.name == name:
                    return replace(product)
        return None

    def find_all_by_ids(self, product_ids: List[ProductId]) -> List[Product]:
        ids = dict.fromkeys(p.id for p in product_ids)
        with self._lock:
            return [replace(self._products[i]) for i in ids if i in self._products]

    def create(self, props: CreateProductProps) -> Product:
        now = datetime.now(timezone.utc)
        product = Product(
            id=str(uuid.uuid4()),
            name=props.name,
            price=props.price,
            quantity=props.quantity,
            created_at=now,
            updated_at=now,
        )
        with self._lock:
            self._products[product.id] = product
        return replace(product)

    def find_by_id(self, id: str) -> Optional[Product]:
        with self._lock:
            product = self._products.get(id)
        return replace(product) if product else None

    def update(self, model: Product) -> Optional[Product]:
        with self._lock:
            existing = self._products.get(model.id)
            if existing is None:
                return None
            updated = replace(
                existing,
                name=model.name,
                price=model.price,
                quantity=model.quantity,
                updated_at=datetime.now(timezone.utc),
            )
            self._products[model.id] = updated
        return replace(updated)

    def delete(self, id: str) -> None:
        with self._lock:
            self._products.pop(id, None)

    def select_all(self, props: SearchInput) -> SearchOutput[Product]:
        order_by = resolve_sort(props.sort, self.sortable_fields)
        order_dir = resolve_sort_dir(props.sort_dir)
        page = resolve_page(props.page)
        per_page = resolve_per_page(props.per_page, config.default_per_page)

        with self._lock:
            products = list(self._products.values())

        if props.filter:
            needle = props.filter.lower()
            products = [p for p in products if needle in p.name.lower()]

        products.sort(key=lambda p: getattr(p, order_by), reverse=order_dir == "DESC")

        offset = (page - 1) * per_page
        return SearchOutput(
            items=[replace(p) for p in products[offset : offset + per_page]],
            per_page=per_page,
            total=len(products),
            current_page=page,
            sort=order_by,
            sort_dir=order_dir,
            filter=props.filter,
        )
