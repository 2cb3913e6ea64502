"""
Product

This module provides the product model, its repositories and the product service.
"""

from stockroom.product.memory import InMemoryProductRepository
from stockroom.product.model import CreateProductProps, Product, ProductId
from stockroom.product.repository import ProductRepository
from stockroom.product.service import ProductService

__all__ = [
    "CreateProductProps",
    "InMemoryProductRepository",
    "Product",
    "ProductId",
    "ProductRepository",
    "ProductService",
]
