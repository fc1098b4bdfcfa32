"""Paged result domain entity."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """One page of records plus the full matching count.

    Attributes:
        data: The records on this page, in order
        total: Number of records matching the query, independent of the page window
    """

    data: list[T] = field(default_factory=list)
    total: int = 0

    def __post_init__(self) -> None:
        if self.total < 0:
            raise ValueError("total must be >= 0")
        if len(self.data) > self.total:
            raise ValueError(
                f"page holds {len(self.data)} records but total is {self.total}"
            )
