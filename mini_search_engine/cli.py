"""Interactive console for the mini search engine."""

import argparse
import sys
from typing import Any, Dict, List, Optional, Sequence, TextIO

import structlog

from .config import get_settings
from .core.engine import SearchEngine
from .loader import load_batch_file
from .logging_config import configure_logging
from .models.response import SearchResult
from .sample_data import load_sample_documents

logger = structlog.get_logger(__name__)

PROMPT = "Enter your search query (or 'quit' to exit): "
EXIT_COMMANDS = ("quit", "exit")
FAREWELL = "Thank you for using the Mini Search Engine!"


def format_results(results: List[SearchResult], query: str) -> str:
    """Render ranked results as a console block."""
    lines = [
        "",
        f'=== Results for: "{query}" ===',
        f"Found {len(results)} results",
        "",
    ]

    for rank, result in enumerate(results, start=1):
        lines.append(f"[{rank}] {result.title}")
        if result.url:
            lines.append(f"    URL: {result.url}")
        lines.append(f"    {result.snippet}")
        lines.append(f"    Score: {result.score:.3f}")
        lines.append("")

    return "\n".join(lines)


def format_stats(stats: Dict[str, Any]) -> str:
    """Render index statistics as a console block."""
    return "\n".join([
        "",
        "=== Search Engine Statistics ===",
        f"Indexed documents: {stats['document_count']}",
        f"Unique terms: {stats['unique_term_count']}",
        "================================",
    ])


def run_interactive(
    engine: SearchEngine,
    input_stream: TextIO,
    output_stream: TextIO,
    max_results: int = 10
) -> int:
    """
    Read queries until 'quit', 'exit' or end of input, printing results.

    Returns:
        Number of queries answered
    """
    answered = 0

    while True:
        output_stream.write("\n" + PROMPT)
        output_stream.flush()

        line = input_stream.readline()
        if not line:
            break

        query = line.rstrip("\r\n")
        if query in EXIT_COMMANDS:
            break
        if not query:
            continue

        results = engine.search(query, max_results)
        print(format_results(results, query), file=output_stream)
        answered += 1

    print(FAREWELL, file=output_stream)
    return answered


def build_argument_parser() -> argparse.ArgumentParser:
    """Build the console argument parser, with defaults taken from settings."""
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="mini-search",
        description="Search a small document collection interactively."
    )
    parser.add_argument(
        "--file",
        dest="data_file",
        default=settings.data_file,
        help="Load documents from a title|content|url file instead of the built-in samples",
    )
    parser.add_argument(
        "--max-results",
        type=int,
        default=settings.max_results,
        help="Maximum results per query (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Log level for diagnostics written to stderr (default: %(default)s)",
    )
    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    input_stream: Optional[TextIO] = None,
    output_stream: Optional[TextIO] = None
) -> int:
    """
    Run the interactive search console.

    Args:
        argv: Command line arguments; defaults to ``sys.argv[1:]``
        input_stream: Query source; defaults to stdin
        output_stream: Result sink; defaults to stdout

    Returns:
        Process exit status: 0 on success, 1 if the data file is missing
    """
    args = build_argument_parser().parse_args(argv)
    input_stream = input_stream or sys.stdin
    output_stream = output_stream or sys.stdout

    configure_logging(args.log_level, "console")
    settings = get_settings()

    engine = SearchEngine(
        max_documents=settings.max_documents,
        suggestion_threshold=settings.suggestion_threshold,
        max_suggestions=settings.max_suggestions
    )

    if args.data_file:
        try:
            load_batch_file(engine, args.data_file)
        except FileNotFoundError:
            logger.warning("Data file not found", path=args.data_file)
            print(f"Error: cannot open {args.data_file}", file=sys.stderr)
            return 1
    else:
        load_sample_documents(engine)

    print(format_stats(engine.get_stats()), file=output_stream)
    run_interactive(engine, input_stream, output_stream, args.max_results)
    return 0


if __name__ == "__main__":
    sys.exit(main())
