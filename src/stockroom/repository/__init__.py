"""
Repositories: Data Access Layer

This package holds the contract every repository honours. Each concrete
repository encapsulates all data access for one entity and returns plain
model objects, so callers depend on the behavior below rather than on a
particular store.

Repositories should:
- Provide create, find_by_id, update, delete and select_all for their entity.
- Return None for "not found" and let store errors propagate.
- Contain no business logic, only data access and row-to-model mapping.

Distinction from Services:
- **Repositories** answer: "How do I get or store this data?"
- **Services** answer: "What should happen when X occurs?" They validate
  input and enforce rules such as unique product names.

Example:
    - `ProductRepository`: Handles all SQL for the `products` table.
    - `InMemoryProductRepository`: Same contract over a dict.
    - `ProductService`: Validates input and reports missing products as errors.
"""

from stockroom.repository.base import (
    DEFAULT_SORT,
    Repository,
    SearchInput,
    SearchOutput,
    Store,
    resolve_page,
    resolve_per_page,
    resolve_sort,
    resolve_sort_dir,
)

__all__ = [
    "DEFAULT_SORT",
    "Repository",
    "SearchInput",
    "SearchOutput",
    "Store",
    "resolve_page",
    "resolve_per_page",
    "resolve_sort",
    "resolve_sort_dir",
]
