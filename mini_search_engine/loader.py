"""Loading documents into an engine from disk or the built-in samples."""

from pathlib import Path
from typing import List, Union

import structlog

from .config import Settings
from .core.batch import BatchLoadResult
from .core.engine import SearchEngine
from .sample_data import load_sample_documents

logger = structlog.get_logger(__name__)


def read_batch_file(path: Union[str, Path]) -> List[str]:
    """
    Read a batch file into lines.

    Lines break at ``\\n`` only; other Unicode line boundaries such as form
    feed stay inside the line. Terminators are left for the batch parser
    to strip.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    with open(path, "r", encoding="utf-8", newline="") as f:
        lines = f.read().split("\n")

    # A final terminator does not start another line
    if lines[-1] == "":
        lines.pop()
    return lines


def load_batch_file(engine: SearchEngine, path: Union[str, Path]) -> BatchLoadResult:
    """
    Load a ``title|content|url`` file into an engine.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    result = engine.load_batch_report(read_batch_file(path))
    logger.info(
        "Batch file loaded",
        path=str(path),
        added=result.added,
        skipped=result.skipped
    )
    return result


def seed_engine(engine: SearchEngine, settings: Settings) -> int:
    """
    Populate an engine at startup according to settings.

    A configured data file takes precedence over the sample documents.

    Returns:
        Number of documents added
    """
    if settings.data_file:
        return load_batch_file(engine, settings.data_file).added

    if settings.load_sample_documents:
        added = load_sample_documents(engine)
        logger.info("Sample documents loaded", added=added)
        return added

    return 0
