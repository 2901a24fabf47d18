"""Command line interface to run the content-processing pipeline on an article."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from historia.container import build_container
from historia.extraction import TopicDocument, sort_timeline_events
from historia.schemas import TopicPayload
from historia.settings import get_log_level

_OPERATIONS = {
    "sections": "sections",
    "timeline": "timelineEvents",
    "figures": "keyFigures",
    "locations": "locations",
    "terms": "keyTerms",
    "quiz": "quizQuestions",
    "takeaways": "keyTakeaways",
    "facts": "quickFacts",
    "related": "relatedTopics",
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="historia", description="Historia - turns article text into study material"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    process = subparsers.add_parser(
        "process", help="Run every extractor over an article and print the result as JSON"
    )
    _add_input_arguments(process)
    process.add_argument(
        "--seed", type=int, default=None, help="Seed for quiz shuffling and placeholder coordinates"
    )
    process.add_argument(
        "--only",
        choices=sorted(_OPERATIONS),
        default=None,
        help="Print a single extractor output instead of the whole topic",
    )

    timeline = subparsers.add_parser(
        "timeline", help="Print the timeline events of an article in chronological order"
    )
    _add_input_arguments(timeline)

    for sp in (process, timeline):
        sp.add_argument(
            "--log-level",
            default=None,
            help="Log level: DEBUG, INFO, WARNING, ERROR (default INFO)",
        )

    return parser.parse_args(argv)


def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        help="Encyclopedia JSON payload (.json), plain text file, or '-' for stdin (JSON or text)",
    )
    parser.add_argument("--title", default=None, help="Topic title for plain text input")
    parser.add_argument("--topic-id", default=None, help="Identifier of the topic")


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    args = parse_args(argv)
    console = Console()
    level_name = getattr(args, "log_level", None) or get_log_level()
    handler = RichHandler(console=console, markup=True, rich_tracebacks=True)
    logging.basicConfig(
        level=getattr(logging, str(level_name).upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    logger = logging.getLogger("historia.cli")

    try:
        document = load_document(args.path, title=args.title, topic_id=args.topic_id)
    except (OSError, ValidationError, ValueError) as exc:
        console.print(f"[red]Could not read article: {escape(str(exc))}[/red]")
        sys.exit(1)

    if not document.paragraphs():
        logger.warning("Article '%s' has no text, every extractor will be empty", document.title)

    if args.command == "process":
        container = build_container(seed=args.seed)
        payload = container.pipeline.process(document).to_mapping()
        if args.only:
            console.print_json(data=payload[_OPERATIONS[args.only]])
        else:
            console.print_json(data=payload)
    elif args.command == "timeline":
        container = build_container()
        events = sort_timeline_events(container.service.extract_timeline_events(document.content))
        if not events:
            console.print("[yellow]No timeline events found.[/yellow]")
        for event in events:
            console.print(f"[bold]{escape(event.year)}[/bold] - {escape(event.description)}")
    else:
        raise ValueError(f"Unknown command: {args.command}")


def load_document(path: str, *, title: str | None = None, topic_id: str | None = None) -> TopicDocument:
    """Read an article from a JSON payload, a text file or stdin."""

    if path == "-":
        raw = sys.stdin.read()
        source = Path("stdin")
        is_json = raw.lstrip().startswith("{")
    else:
        source = Path(path)
        raw = source.read_text(encoding="utf-8")
        is_json = source.suffix.lower() == ".json"

    if is_json:
        payload = TopicPayload.model_validate_json(raw)
        if title:
            payload = payload.model_copy(update={"title": title})
        return payload.to_domain(topic_id)

    resolved_title = title or source.stem.replace("_", " ")
    if not resolved_title:
        raise ValueError("a --title is required for plain text input")
    return TopicPayload(title=resolved_title, extract=raw).to_domain(topic_id)


if __name__ == "__main__":
    main()
