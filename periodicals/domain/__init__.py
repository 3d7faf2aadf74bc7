"""
Registry Domain Layer

Immutable journal and article records (frozen dataclasses) and the
container contract. ZERO external dependencies.
"""
from .entities import (
    Journal,
    ScientificArticle,
    compare_journals,
    compare_articles,
)
from .errors import OutOfRangeError
from .container_ports import Container

__all__ = [
    "Journal",
    "ScientificArticle",
    "compare_journals",
    "compare_articles",
    "OutOfRangeError",
    "Container",
]
