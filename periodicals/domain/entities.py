"""
Registry Domain Entities

Journals and the scientific articles they publish.
All entities are immutable (frozen dataclasses).

Both record kinds define a natural ordering through an explicit
``compare_to`` method; the dataclass ``order`` flag is left off because
the ordering is a two-key tie-break, not a field-wise comparison.
Equality and hashing remain field-wise value equality.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Tuple


def _sign(left: Any, right: Any) -> int:
    """Return -1, 0 or 1 for ``left`` versus ``right``."""
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


class _Ordered(ABC):
    """Rich comparisons derived from ``compare_to`` for same-kind records."""

    @abstractmethod
    def compare_to(self, other) -> int:
        """Negative, zero or positive as self orders before, with or after other."""

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.compare_to(other) >= 0


@dataclass(frozen=True)
class ScientificArticle(_Ordered):
    """
    Scientific article published in a journal.

    Ordered by date written; articles written the same day are ordered
    by title.
    """
    title: str
    author: str
    date_written: date
    word_count: int
    reference_count: int
    original_language: bool

    def __post_init__(self):
        if self.word_count < 0:
            raise ValueError("word_count must be >= 0")
        if self.reference_count < 0:
            raise ValueError("reference_count must be >= 0")

    def compare_to(self, other: "ScientificArticle") -> int:
        if self.date_written == other.date_written:
            return _sign(self.title, other.title)
        return _sign(self.date_written, other.date_written)


@dataclass(frozen=True)
class Journal(_Ordered):
    """
    Journal aggregate.

    Ordered by name; journals sharing a name are ordered by founding date.

    ``articles`` is copied into a tuple at construction, so a journal never
    shares a mutable article list with its caller or with other journals.
    """
    name: str
    topic: str
    language: str
    founding_date: date
    issn: str
    price: Decimal
    is_periodic: bool
    articles: Tuple[ScientificArticle, ...] = field(default_factory=tuple)

    def __post_init__(self):
        price = self.price
        if not isinstance(price, Decimal):
            try:
                price = Decimal(str(price))
            except InvalidOperation:
                raise ValueError(f"price is not a number: {self.price!r}") from None
            object.__setattr__(self, "price", price)
        if not price.is_finite():
            raise ValueError(f"price must be a finite number: {self.price!r}")
        if price < 0:
            raise ValueError("price must be >= 0")
        object.__setattr__(self, "articles", tuple(self.articles))

    def compare_to(self, other: "Journal") -> int:
        if self.name == other.name:
            return _sign(self.founding_date, other.founding_date)
        return _sign(self.name, other.name)

    @property
    def article_count(self) -> int:
        return len(self.articles)


def compare_journals(left: Journal, right: Journal) -> int:
    """Comparison function for ``functools.cmp_to_key``."""
    return left.compare_to(right)


def compare_articles(left: ScientificArticle, right: ScientificArticle) -> int:
    """Comparison function for ``functools.cmp_to_key``."""
    return left.compare_to(right)
