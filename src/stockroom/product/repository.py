import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from stockroom import db
from stockroom.config import config
from stockroom.product.model import CreateProductProps, Product, ProductId
from stockroom.repository import (
    SearchInput,
    SearchOutput,
    Store,
    resolve_page,
    resolve_per_page,
    resolve_sort,
    resolve_sort_dir,
)

logger = logging.getLogger(__name__)


def escape_like(value: str) -> str:
    """Escape LIKE metacharacters so value matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class ProductRepository:
    """
    Repository for product data access.
    Encapsulates all SQL and queries for the products table.
    """

    # Only these identifiers are ever interpolated into ORDER BY
    sortable_fields = ("name", "created_at")

    def __init__(self, store: Store = None):
        self.store = store or db

    def _fetch_one(self, query: str, params: tuple) -> Optional[Product]:
        rows = self.store.fetch_all(query, params)
        return Product.from_row(rows[0]) if rows else None

    def find_by_name(self, name: str) -> Optional[Product]:
        """Get a product by its exact name."""
        return self._fetch_one("SELECT * FROM products WHERE name = %s", (name,))

    def find_all_by_ids(self, product_ids: List[ProductId]) -> List[Product]:
        """Get every product whose id is listed. Unknown ids are skipped."""
        ids = [product_id.id for product_id in product_ids]
        if not ids:
            return []
        rows = self.store.fetch_all("SELECT * FROM products WHERE id = ANY(%s)", (ids,))
        return [Product.from_row(row) for row in rows]

    def create(self, props: CreateProductProps) -> Product:
        """Create a new product."""
        rows = self.store.fetch_all(
            """
            INSERT INTO products (name, price, quantity)
            VALUES (%s, %s, %s)
            RETURNING *
            """,
            (props.name, props.price, props.quantity),
        )
        return Product.from_row(rows[0])

    def find_by_id(self, id: str) -> Optional[Product]:
        """Get a product by ID."""
        return self._fetch_one("SELECT * FROM products WHERE id = %s", (id,))

    def update(self, model: Product) -> Optional[Product]:
        """Rewrite name, price and quantity of an existing product."""
        return self._fetch_one(
            """
            UPDATE products
            SET name = %s, price = %s, quantity = %s, updated_at = now()
            WHERE id = %s
            RETURNING *
            """,
            (model.name, model.price, model.quantity, model.id),
        )

    def delete(self, id: str) -> None:
        """Delete a product. Deleting an unknown id is a no-op."""
        self.store.fetch_all("DELETE FROM products WHERE id = %s", (id,))

    def select_all(self, props: SearchInput) -> SearchOutput[Product]:
        """
        Return one page of products plus the total number of matches.

        Unknown sort fields fall back to created_at, and any direction other
        than "asc" sorts descending. The filter is a case-insensitive
        substring match on name. The count and page queries run concurrently
        and share the same WHERE clause.
        """
        order_by = resolve_sort(props.sort, self.sortable_fields)
        order_dir = resolve_sort_dir(props.sort_dir)
        page = resolve_page(props.page)
        per_page = resolve_per_page(props.per_page, config.default_per_page)

        where_clause = ""
        filter_params: list = []
        if props.filter:
            where_clause = "WHERE name ILIKE %s"
            filter_params.append(f"%{escape_like(props.filter)}%")

        offset = (page - 1) * per_page

        count_query = f"SELECT COUNT(*) AS count FROM products {where_clause}"
        page_query = f"""
            SELECT * FROM products
            {where_clause}
            ORDER BY {order_by} {order_dir}
            LIMIT %s OFFSET %s
        """

        logger.debug(
            "Searching products: sort=%s %s page=%s per_page=%s filter=%r",
            order_by,
            order_dir,
            page,
            per_page,
            props.filter,
        )

        with ThreadPoolExecutor(max_workers=2) as executor:
            count_future = executor.submit(
                self.store.fetch_all, count_query, tuple(filter_params)
            )
            page_future = executor.submit(
                self.store.fetch_all, page_query, (*filter_params, per_page, offset)
            )
            count_rows = count_future.result()
            page_rows = page_future.result()

        return SearchOutput(
            items=[Product.from_row(row) for row in page_rows],
            per_page=per_page,
            total=int(count_rows[0]["count"]),
            current_page=page,
            sort=order_by,
            sort_dir=order_dir,
            filter=props.filter,
        )
