"""
Periodical Registry Command-Line Interface.

Provides commands for:
- demo: Build the sample registry, show one journal and remove another
- list: Print a container snapshot, optionally sorted
- get: Print the record at one position
- config: Show configuration
"""
import argparse
import sys
import uuid
from typing import Callable, Dict, List, Optional, Sequence

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from periodicals.application.registry import Registry, create_registry, load_sample_data
from periodicals.domain.entities import Journal, ScientificArticle
from periodicals.domain.errors import OutOfRangeError
from periodicals.infrastructure.cli.registry_config import OUTPUT_FORMATS, RegistryConfig
from periodicals.infrastructure.cli.schemas import SnapshotSchema
from periodicals.infrastructure.logging.registry_logger import (
    LogContext,
    LogLevel,
    RegistryLogger,
    create_registry_logger,
)

CONTAINER_KINDS = ["journals", "articles"]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the registry CLI."""
    parser = argparse.ArgumentParser(
        prog="periodical-registry",
        description="In-memory registry of journals and scientific articles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s demo
  %(prog)s list journals --sort
  %(prog)s list articles --format json
  %(prog)s get journals 3
  %(prog)s config --show
        """,
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress non-essential output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser(
        "demo",
        help="Load sample data, show journal 3 and remove journal 4",
    )

    list_parser = subparsers.add_parser(
        "list",
        help="Print every record of a container",
    )
    list_parser.add_argument("kind", choices=CONTAINER_KINDS)
    list_parser.add_argument(
        "--sort",
        action="store_true",
        help="Sort by the records' natural ordering",
    )
    _add_format_argument(list_parser)

    get_parser = subparsers.add_parser(
        "get",
        help="Print the record at one position",
    )
    get_parser.add_argument("kind", choices=CONTAINER_KINDS)
    get_parser.add_argument("position", type=int)
    _add_format_argument(get_parser)

    config_parser = subparsers.add_parser(
        "config",
        help="Show configuration",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        help="Show current configuration",
    )

    return parser


def _add_format_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: from REGISTRY_OUTPUT_FORMAT or table)",
    )


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = create_parser()
    return parser.parse_args(args)


def setup_logging(
    config: RegistryConfig,
    verbose: bool = False,
    quiet: bool = False,
) -> RegistryLogger:
    """Configure the CLI logger. Flags override the configured level."""
    level = config.log_level
    if verbose:
        level = "DEBUG"
    elif quiet:
        level = "WARNING"

    return create_registry_logger(
        "cli",
        level=level,
        json_output=config.json_logs,
        log_dir=config.log_dir,
    )


def journal_table(journals: Sequence[Journal], title: str = "Journals") -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Topic")
    table.add_column("Language")
    table.add_column("Founded")
    table.add_column("ISSN")
    table.add_column("Price", justify="right")
    table.add_column("Periodic")
    table.add_column("Articles", justify="right")
    for position, journal in enumerate(journals):
        table.add_row(
            str(position),
            journal.name,
            journal.topic,
            journal.language,
            journal.founding_date.isoformat(),
            journal.issn,
            f"{journal.price:.2f}",
            "yes" if journal.is_periodic else "no",
            str(journal.article_count),
        )
    return table


def article_table(articles: Sequence[ScientificArticle], title: str = "Articles") -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("Title")
    table.add_column("Author")
    table.add_column("Written")
    table.add_column("Words", justify="right")
    table.add_column("References", justify="right")
    table.add_column("Original")
    for position, article in enumerate(articles):
        table.add_row(
            str(position),
            article.title,
            article.author,
            article.date_written.isoformat(),
            str(article.word_count),
            str(article.reference_count),
            "yes" if article.original_language else "no",
        )
    return table


def render(console: Console, kind: str, entities: Sequence, output_format: str, title: str) -> None:
    """Print ``entities`` as a rich table or as a JSON snapshot."""
    if output_format == "json":
        console.print_json(SnapshotSchema.from_entities(kind, entities).model_dump_json())
    elif kind == "journals":
        console.print(journal_table(entities, title=title))
    else:
        console.print(article_table(entities, title=title))


def _build_registry(logger: RegistryLogger, context: LogContext) -> Registry:
    with logger.timed_operation("load_sample_data", context):
        return load_sample_data(create_registry(), logger=logger, context=context)


def run_demo(
    args: argparse.Namespace,
    config: RegistryConfig,
    logger: RegistryLogger,
    console: Console,
) -> int:
    """Execute the demo command."""
    context = LogContext(run_id=uuid.uuid4().hex[:8])
    registry = _build_registry(logger, context)

    journal = registry.journals.get(3)
    render(console, "journals", [journal], config.output_format, title="Journal at position 3")

    removed = registry.journals.remove(4)
    logger.info(
        f"Removed journal: {removed.name}",
        context.with_container("journals"),
        remaining=len(registry.journals),
    )

    render(console, "journals", registry.journals.get_all(), config.output_format, title="Journals")
    return 0


def run_list(
    args: argparse.Namespace,
    config: RegistryConfig,
    logger: RegistryLogger,
    console: Console,
) -> int:
    """Execute the list command."""
    context = LogContext(run_id=uuid.uuid4().hex[:8], container=args.kind)
    registry = _build_registry(logger, context)

    entities = registry.container(args.kind).get_all()
    if args.sort:
        entities = tuple(sorted(entities))
        logger.debug("Sorted snapshot by natural ordering", context)

    title = args.kind.capitalize() + (" (sorted)" if args.sort else "")
    render(console, args.kind, entities, args.format or config.output_format, title=title)
    return 0


def run_get(
    args: argparse.Namespace,
    config: RegistryConfig,
    logger: RegistryLogger,
    console: Console,
) -> int:
    """Execute the get command."""
    context = LogContext(run_id=uuid.uuid4().hex[:8], container=args.kind)
    registry = _build_registry(logger, context)

    entity = registry.container(args.kind).get(args.position)
    render(
        console,
        args.kind,
        [entity],
        args.format or config.output_format,
        title=f"{args.kind.capitalize()} at position {args.position}",
    )
    return 0


def run_config(
    args: argparse.Namespace,
    config: RegistryConfig,
    logger: RegistryLogger,
    console: Console,
) -> int:
    """Execute the config command."""
    if args.show:
        console.print("Current configuration:")
        for key, value in config.to_dict().items():
            console.print(f"  {key}: {value}")
    else:
        console.print("Use --show to print the current configuration")

    return 0


CommandHandler = Callable[[argparse.Namespace, RegistryConfig, RegistryLogger, Console], int]

COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "demo": run_demo,
    "list": run_list,
    "get": run_get,
    "config": run_config,
}


def main(args: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    """Main entry point."""
    parsed_args = parse_args(args)

    if not parsed_args.command:
        create_parser().print_help()
        return 0

    load_dotenv()
    try:
        config = RegistryConfig.from_env()
        LogLevel.parse(config.log_level)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1
    logger = setup_logging(config, verbose=parsed_args.verbose, quiet=parsed_args.quiet)
    console = console or Console()

    handler = COMMAND_HANDLERS.get(parsed_args.command)
    if handler is None:
        logger.error(f"Unknown command: {parsed_args.command}", exc_info=False)
        return 1

    try:
        return handler(parsed_args, config, logger, console)
    except OutOfRangeError as e:
        logger.error(str(e), LogContext(operation=e.operation), exc_info=False)
        return 1


if __name__ == "__main__":
    sys.exit(main())
