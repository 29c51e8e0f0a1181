"""Parser for the ``field:value`` configuration source format

One pair per line:
    maximum:50
    minimum:1
    attempts:3

Values are base-10 integers with an optional sign. No comments, no
whitespace trimming, no quoting. The first bad line stops the parse.
"""

import logging
import re
from typing import Dict, Optional, Tuple

from rangeconf.domain.errors import SourceFormatError
from rangeconf.domain.models.parse_outcome import Applied, Malformed, NotFound, ParseOutcome
from rangeconf.infrastructure.source import ConfigSource

logger = logging.getLogger(__name__)

# Source field name -> builder working field
FIELD_NAMES = {
    "maximum": "max",
    "minimum": "min",
    "attempts": "attempts",
}

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Values must fit a signed 32-bit integer
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def parse_line(line: str, line_number: Optional[int] = None) -> Tuple[str, int]:
    """Parse one source line

    Args:
        line: Line text, with or without its line terminator
        line_number: 1-based position, reported in errors

    Returns:
        Tuple of (working field name, value)

    Raises:
        SourceFormatError: If the line has no ':', the value is not an
            integer, is outside the 32-bit range, or the field name
            is not recognized
    """
    text = line.rstrip("\r\n")
    field, sep, raw_value = text.partition(":")
    if not sep:
        raise SourceFormatError(f"Missing ':' separator in line {text!r}", line_number)

    if not _INTEGER_RE.fullmatch(raw_value):
        raise SourceFormatError(f"Value {raw_value!r} is not an integer", line_number)

    if field not in FIELD_NAMES:
        raise SourceFormatError(f'Field "{field}" is not recognized', line_number)

    try:
        value = int(raw_value)
    except ValueError as e:
        # Digit count above the interpreter limit
        raise SourceFormatError(f"Value for \"{field}\" is too long: {e}", line_number) from e
    if not INT_MIN <= value <= INT_MAX:
        raise SourceFormatError(f"Value {value} for \"{field}\" is out of range", line_number)

    return FIELD_NAMES[field], value


def parse_source(source: ConfigSource) -> ParseOutcome:
    """Read a source once and describe what happened

    Never raises for missing, unreadable or malformed sources; those are
    reported as NotFound or Malformed.

    Args:
        source: Source to read

    Returns:
        Applied, NotFound or Malformed
    """
    fields: Dict[str, int] = {}
    try:
        with source.open() as lines:
            for line_number, line in enumerate(lines, start=1):
                name, value = parse_line(line, line_number)
                fields[name] = value
    except FileNotFoundError:
        return NotFound(location=source.location)
    except SourceFormatError as e:
        return Malformed(reason=str(e), line_number=e.line_number, partial=dict(fields))
    except (OSError, UnicodeDecodeError) as e:
        return Malformed(reason=f"Failed to read {source.location}: {e}", partial=dict(fields))

    logger.debug(f"Parsed {len(fields)} field(s) from {source.location}")
    return Applied(fields=fields)
