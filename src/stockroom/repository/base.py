import math
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Optional, Protocol, TypeVar

ModelT = TypeVar("ModelT")
CreatePropsT = TypeVar("CreatePropsT", contravariant=True)

DEFAULT_SORT = "created_at"


class Store(Protocol):
    """Anything that can run a statement with bound parameters and return rows."""

    def fetch_all(self, query: str, params: tuple = None) -> list[dict[str, Any]]: ...


@dataclass
class SearchInput:
    page: int = 1
    per_page: int = 10
    sort: Optional[str] = DEFAULT_SORT
    sort_dir: Optional[str] = "desc"
    filter: Optional[str] = None


@dataclass
class SearchOutput(Generic[ModelT]):
    items: list[ModelT] = field(default_factory=list)
    per_page: int = 10
    total: int = 0
    current_page: int = 1
    sort: Optional[str] = None
    sort_dir: Optional[str] = None
    filter: Optional[str] = None

    @property
    def last_page(self) -> int:
        if self.total == 0:
            return 1
        return math.ceil(self.total / self.per_page)

    def to_dict(self, serialize: Callable[[ModelT], dict] = None) -> dict:
        serialize = serialize or (lambda item: item)
        return {
            "items": [serialize(item) for item in self.items],
            "per_page": self.per_page,
            "total": self.total,
            "current_page": self.current_page,
            "last_page": self.last_page,
            "sort": self.sort,
            "sort_dir": self.sort_dir,
            "filter": self.filter,
        }


class Repository(Protocol[ModelT, CreatePropsT]):
    """
    Data access contract shared by every store adapter.

    Lookups that find nothing return None rather than raising; store
    failures propagate unchanged.
    """

    def create(self, props: CreatePropsT) -> ModelT: ...

    def find_by_id(self, id: str) -> Optional[ModelT]: ...

    def update(self, model: ModelT) -> Optional[ModelT]: ...

    def delete(self, id: str) -> None: ...

    def select_all(self, props: SearchInput) -> SearchOutput[ModelT]: ...


# =============================================================================
# Search Resolution
# =============================================================================


def resolve_sort(sort: Optional[str], sortable_fields: tuple[str, ...]) -> str:
    """Return the sort field if allow-listed, else the default."""
    return sort if sort in sortable_fields else DEFAULT_SORT


def resolve_sort_dir(sort_dir: Optional[str]) -> str:
    return "ASC" if (sort_dir or "").lower() == "asc" else "DESC"


def resolve_page(page: Optional[int]) -> int:
    if page is None or page < 1:
        return 1
    return page


def resolve_per_page(per_page: Optional[int], default: int) -> int:
    if per_page is None or per_page < 1:
        return default
    return per_page
