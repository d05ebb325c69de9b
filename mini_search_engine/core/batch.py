"""Parser for the pipe-delimited batch document format.

Each line has the form ``title|content|url``:

=============  ==============================================================
pipes in line  result
=============  ==============================================================
0              skipped
1              title before the pipe, content after it, empty url
2 or more      content between the first two pipes, url is everything after
               the second pipe (later pipes are kept verbatim)
=============  ==============================================================
"""

from typing import NamedTuple, Optional

FIELD_DELIMITER = "|"


class ParsedLine(NamedTuple):
    """Fields of one batch line."""

    title: str
    content: str
    url: str


class BatchLoadResult(NamedTuple):
    """Outcome of loading a batch of lines."""

    added: int
    skipped: int


def parse_batch_line(line: str) -> Optional[ParsedLine]:
    """
    Split one batch line into its fields.

    Args:
        line: A single line, with or without its trailing newline

    Returns:
        ParsedLine, or None if the line has no delimiter
    """
    line = line.rstrip("\r\n")

    first = line.find(FIELD_DELIMITER)
    if first == -1:
        return None

    second = line.find(FIELD_DELIMITER, first + 1)
    title = line[:first]

    if second == -1:
        return ParsedLine(title=title, content=line[first + 1:], url="")

    return ParsedLine(
        title=title,
        content=line[first + 1:second],
        url=line[second + 1:]
    )
