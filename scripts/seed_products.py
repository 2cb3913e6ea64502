"""Seed an initial product catalog into the database."""
from decimal import Decimal

from stockroom.product.model import CreateProductProps
from stockroom.product.repository import ProductRepository

INITIAL_PRODUCTS = [
    {"name": "Espresso Beans 1kg", "price": Decimal("24.90"), "quantity": 40},
    {"name": "Pour-Over Kettle", "price": Decimal("59.00"), "quantity": 12},
    {"name": "Paper Filters (100)", "price": Decimal("6.50"), "quantity": 200},
    {"name": "Ceramic Dripper", "price": Decimal("18.75"), "quantity": 25},
]


def main():
    products_repo = ProductRepository()

    for product in INITIAL_PRODUCTS:
        existing = products_repo.find_by_name(product["name"])
        if existing:
            print(f"Skipping {product['name']} - already exists")
            continue

        result = products_repo.create(CreateProductProps(**product))
        print(f"Created: {result.name} (id={result.id})")


if __name__ == "__main__":
    main()
