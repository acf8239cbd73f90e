"""Query builder for Delivery API collection endpoints.

Collection endpoints accept search parameters for paging, ordering and
filtering. DeliveryQuery collects them with a fluent interface and
serializes them to the flat query string the API expects.

Example:
    >>> query = (DeliveryQuery()
    ...     .content_type("cat")
    ...     .where("fields.lives", 3, operator="gte")
    ...     .order_by("-sys.createdAt")
    ...     .paginate(skip=100, limit=50))
    >>> query.to_query_params()
    {'content_type': 'cat', 'fields.lives[gte]': '3', 'order': '-sys.createdAt', 'skip': 100, 'limit': 50}
"""

from typing import Any

MAX_LIMIT = 1000

FILTER_OPERATORS = frozenset(
    {"ne", "all", "in", "nin", "exists", "lt", "lte", "gt", "gte", "match", "near", "within"}
)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(_format_value(item) for item in value)
    return str(value)


class DeliveryQuery:
    """Fluent builder for collection query parameters.

    Every method returns the builder itself so calls can be chained.
    """

    def __init__(self) -> None:
        self._skip: int | None = None
        self._limit: int | None = None
        self._order: list[str] = []
        self._content_type: str | None = None
        self._select: list[str] = []
        self._locale: str | None = None
        self._search: str | None = None
        self._filters: dict[str, str] = {}

    def paginate(self, skip: int | None = None, limit: int | None = None) -> "DeliveryQuery":
        """Set the page window.

        Args:
            skip: Number of items to skip
            limit: Page size (1 to 1000)

        Raises:
            ValueError: If skip is negative or limit is out of range
        """
        if skip is not None and skip < 0:
            raise ValueError(f"skip must be >= 0, got {skip}")
        if limit is not None and not 1 <= limit <= MAX_LIMIT:
            raise ValueError(f"limit must be between 1 and {MAX_LIMIT}, got {limit}")
        self._skip = skip
        self._limit = limit
        return self

    def order_by(self, *fields: str) -> "DeliveryQuery":
        """Order results; prefix a field path with ``-`` for descending order."""
        self._order.extend(fields)
        return self

    def content_type(self, content_type_id: str) -> "DeliveryQuery":
        """Restrict entries to one content type (required for field filters)."""
        self._content_type = content_type_id
        return self

    def select(self, *paths: str) -> "DeliveryQuery":
        """Return only the given field paths, e.g. ``"sys.id"``, ``"fields.title"``."""
        self._select.extend(paths)
        return self

    def locale(self, code: str) -> "DeliveryQuery":
        self._locale = code
        return self

    def search(self, text: str) -> "DeliveryQuery":
        """Full-text search across all text fields."""
        self._search = text
        return self

    def where(self, path: str, value: Any, operator: str | None = None) -> "DeliveryQuery":
        """Add a filter on a field path.

        Args:
            path: Field path, e.g. ``"fields.slug"`` or ``"sys.id"``
            value: Value to compare; sequences are comma-joined
            operator: Optional search operator (``gte``, ``in``, ``exists``, ...)

        Raises:
            ValueError: If the operator is unknown

        Example:
            >>> DeliveryQuery().where("sys.id", ["a", "b"], operator="in").to_query_params()
            {'sys.id[in]': 'a,b'}
        """
        if operator is not None:
            if operator not in FILTER_OPERATORS:
                raise ValueError(f"Unknown filter operator: {operator}")
            key = f"{path}[{operator}]"
        else:
            key = path
        self._filters[key] = _format_value(value)
        return self

    def to_query_params(self) -> dict[str, str | int]:
        """Serialize to a flat parameter mapping; empty when nothing was set."""
        params: dict[str, str | int] = {}

        if self._content_type is not None:
            params["content_type"] = self._content_type
        params.update(self._filters)
        if self._search is not None:
            params["query"] = self._search
        if self._select:
            params["select"] = ",".join(self._select)
        if self._locale is not None:
            params["locale"] = self._locale
        if self._order:
            params["order"] = ",".join(self._order)
        if self._skip is not None:
            params["skip"] = self._skip
        if self._limit is not None:
            params["limit"] = self._limit

        return params

    def __repr__(self) -> str:
        return f"DeliveryQuery({self.to_query_params()!r})"
