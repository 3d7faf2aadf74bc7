"""
Output schemas for container snapshots.

Pydantic models used when the CLI prints records as JSON. Domain entities
stay plain dataclasses; these models are built from them at the edge.
"""
from datetime import date
from decimal import Decimal
from typing import List, Sequence, Union

from pydantic import BaseModel, Field

from periodicals.domain.entities import Journal, ScientificArticle


class ArticleSchema(BaseModel):
    """JSON view of a ScientificArticle."""

    title: str
    author: str
    date_written: date
    word_count: int = Field(ge=0)
    reference_count: int = Field(ge=0)
    original_language: bool

    @classmethod
    def from_entity(cls, article: ScientificArticle) -> "ArticleSchema":
        return cls(
            title=article.title,
            author=article.author,
            date_written=article.date_written,
            word_count=article.word_count,
            reference_count=article.reference_count,
            original_language=article.original_language,
        )


class JournalSchema(BaseModel):
    """JSON view of a Journal. ``price`` serializes as a decimal string."""

    name: str
    topic: str
    language: str
    founding_date: date
    issn: str
    price: Decimal = Field(ge=0)
    is_periodic: bool
    articles: List[ArticleSchema] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, journal: Journal) -> "JournalSchema":
        return cls(
            name=journal.name,
            topic=journal.topic,
            language=journal.language,
            founding_date=journal.founding_date,
            issn=journal.issn,
            price=journal.price,
            is_periodic=journal.is_periodic,
            articles=[ArticleSchema.from_entity(a) for a in journal.articles],
        )


class SnapshotSchema(BaseModel):
    """A container snapshot: kind, size and items in positional order."""

    kind: str
    count: int
    items: List[Union[JournalSchema, ArticleSchema]]

    @classmethod
    def from_entities(
        cls,
        kind: str,
        entities: Sequence[Union[Journal, ScientificArticle]],
    ) -> "SnapshotSchema":
        items = []
        for entity in entities:
            if isinstance(entity, Journal):
                items.append(JournalSchema.from_entity(entity))
            elif isinstance(entity, ScientificArticle):
                items.append(ArticleSchema.from_entity(entity))
            else:
                raise TypeError(f"Unsupported entity type: {type(entity).__name__}")
        return cls(kind=kind, count=len(items), items=items)
