"""Explicit pagination request."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

from .paged_result import PagedResult

T = TypeVar("T")


def _coerce_positive_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = int(str(value).strip())
    except ValueError:
        return None
    return number if number > 0 else None


@dataclass(frozen=True)
class PageRequest:
    """A bounded page window. Pages are 1-based.

    Absence of a ``PageRequest`` (``None``) means "return the default set",
    which keeps "no paging requested" distinct from any real page.
    """

    page: int
    size: int

    def __post_init__(self) -> None:
        if self.page < 1 or self.size < 1:
            raise ValueError("page and size must both be >= 1")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size

    @classmethod
    def parse(cls, page: Any = None, size: Any = None) -> "PageRequest | None":
        """Build a page request from raw query values.

        Missing, zero, negative or non-integer values are not errors; any of
        them in either position means no paging was requested.
        """
        resolved_page = _coerce_positive_int(page)
        resolved_size = _coerce_positive_int(size)
        if resolved_page is None or resolved_size is None:
            return None
        return cls(page=resolved_page, size=resolved_size)

    def apply(self, items: Sequence[T]) -> PagedResult[T]:
        """Slice an already ordered sequence down to this page."""
        window = list(items[self.offset : self.offset + self.size])
        return PagedResult(data=window, total=len(items))
