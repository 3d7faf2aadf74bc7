"""
Registry Wiring

Explicit construction of the two registry containers and the sample data
they are populated with. Plain factory functions stand in for a
dependency-injection container.
"""
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List, Optional

from periodicals.domain.entities import Journal, ScientificArticle
from periodicals.infrastructure.adapters.entity_container import EntityContainer
from periodicals.infrastructure.logging.registry_logger import LogContext, RegistryLogger


@dataclass
class Registry:
    """
    The journal and article containers of one registry instance.
    """
    journals: EntityContainer[Journal] = field(default_factory=EntityContainer)
    articles: EntityContainer[ScientificArticle] = field(default_factory=EntityContainer)

    def container(self, kind: str) -> EntityContainer:
        """Look up a container by kind name ("journals" or "articles")."""
        if kind == "journals":
            return self.journals
        if kind == "articles":
            return self.articles
        raise ValueError(f"Unknown container kind: {kind}")


def create_registry() -> Registry:
    """Create a registry with two empty containers."""
    return Registry()


def sample_articles(today: date) -> List[ScientificArticle]:
    return [
        ScientificArticle(
            title="Думи мої",
            author="Т.Г. Шевченко",
            date_written=today,
            word_count=100,
            reference_count=10,
            original_language=True,
        ),
        ScientificArticle(
            title="Суботній звіт",
            author="В.В. Суботін",
            date_written=today,
            word_count=150,
            reference_count=100,
            original_language=True,
        ),
    ]


# name, topic, issn, price, is_periodic
_SAMPLE_JOURNALS = (
    ("Вісник КПІ", "Життя університету", "243-5345", "45.65", True),
    ("Підслухано, КПІ", "Життя університету", "2543-535", "450.65", False),
    ("Новини КПІ", "Життя університету", "2643-5354", "65.65", True),
    ("Життя Києва", "Новини", "2435-5355", "12.54", False),
    ("Волонтерський рух", "Новини", "2453-5535", "412.32", True),
)


def load_sample_data(
    registry: Registry,
    today: Optional[date] = None,
    logger: Optional[RegistryLogger] = None,
    context: Optional[LogContext] = None,
) -> Registry:
    """
    Append the sample articles and journals to ``registry``.

    Every journal receives its own copy of the article container's
    contents at the moment it is built.

    Args:
        registry: Registry to populate.
        today: Date used for founding and writing dates. Defaults to today.
        logger: Optional logger for progress messages.
        context: Log context to attach to those messages.

    Returns:
        The same registry, for chaining.
    """
    today = today or date.today()
    context = context or LogContext()

    for article in sample_articles(today):
        registry.articles.add(len(registry.articles), article)
    if logger:
        logger.info(
            "Loaded sample articles",
            context.with_container("articles"),
            count=len(registry.articles),
        )

    for name, topic, issn, price, is_periodic in _SAMPLE_JOURNALS:
        journal = Journal(
            name=name,
            topic=topic,
            language="Українська",
            founding_date=today,
            issn=issn,
            price=Decimal(price),
            is_periodic=is_periodic,
            articles=registry.articles.get_all(),
        )
        registry.journals.add(len(registry.journals), journal)
    if logger:
        logger.info(
            "Loaded sample journals",
            context.with_container("journals"),
            count=len(registry.journals),
        )

    return registry

