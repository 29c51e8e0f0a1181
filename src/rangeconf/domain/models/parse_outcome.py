"""ParseOutcome model - result of reading a configuration source"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Union


@dataclass(frozen=True)
class Applied:
    """Source read to the end"""

    fields: Dict[str, int] = field(default_factory=dict)  # Working field name -> last value


@dataclass(frozen=True)
class NotFound:
    """Source does not exist"""

    location: str


@dataclass(frozen=True)
class Malformed:
    """Reading stopped on an error"""

    reason: str
    line_number: Optional[int] = None  # 1-based, None for I/O errors
    partial: Dict[str, int] = field(default_factory=dict)  # Values set by earlier lines


ParseOutcome = Union[Applied, NotFound, Malformed]
