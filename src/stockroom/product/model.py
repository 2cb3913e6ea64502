from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any


@dataclass
class Product:
    id: str
    name: str
    price: Decimal
    quantity: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Product":
        """Build a Product from a products table row."""
        return cls(
            id=str(row["id"]),
            name=row["name"],
            price=Decimal(str(row["price"])),
            quantity=int(row["quantity"]),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "price": str(self.price),
            "quantity": self.quantity,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


@dataclass
class CreateProductProps:
    name: str
    price: Decimal
    quantity: int


@dataclass(frozen=True)
class ProductId:
    id: str
