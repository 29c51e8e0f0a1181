"""Single-use builder for Configuration"""

import logging
from enum import Enum
from typing import Dict, Optional

from pydantic import StrictInt, TypeAdapter

from rangeconf.domain.config import Configuration
from rangeconf.domain.errors import UseAfterConsumedError
from rangeconf.domain.models.parse_outcome import Applied, Malformed, NotFound, ParseOutcome
from rangeconf.infrastructure.source import ConfigSource, FileConfigSource, resolve_source_path
from rangeconf.infrastructure.source_parser import parse_source

logger = logging.getLogger(__name__)

_strict_int = TypeAdapter(StrictInt)


class BuilderState(str, Enum):
    """Lifecycle of a ConfigBuilder"""

    FRESH = "fresh"
    CONSUMED = "consumed"


class PartialParsePolicy(str, Enum):
    """What to do with values read before a source error"""

    DISCARD = "discard"  # Keep pre-parse values
    KEEP = "keep"  # Apply lines read before the error


class ConfigBuilder:
    """Builds a Configuration from defaults, setters and a source file

    Value priority:
    1. Default values (class constants below)
    2. Setter calls
    3. Source file lines, if the file exists and is applied

    A missing or malformed source never fails the build; it is logged and
    the earlier values are used. The builder can be built only once.

    Example:
        config = (ConfigBuilder()
            .set_min(1)
            .set_max(10)
            .set_attempts(5)
            .build())
    """

    DEFAULT_MAX = 0
    DEFAULT_MIN = 100
    DEFAULT_ATTEMPTS = 10

    def __init__(
        self,
        source: Optional[ConfigSource] = None,
        partial_policy: PartialParsePolicy = PartialParsePolicy.DISCARD,
    ):
        """Initialize builder

        Args:
            source: Source to read overrides from (resolved at build time if None)
            partial_policy: Handling of values read before a source error
        """
        self.source = source
        self.partial_policy = PartialParsePolicy(partial_policy)
        self._max = self.DEFAULT_MAX
        self._min = self.DEFAULT_MIN
        self._attempts = self.DEFAULT_ATTEMPTS
        self._state = BuilderState.FRESH

    @property
    def state(self) -> BuilderState:
        return self._state

    def set_max(self, value: int) -> "ConfigBuilder":
        """Set the maximum value"""
        self._max = _strict_int.validate_python(value)
        return self

    def set_min(self, value: int) -> "ConfigBuilder":
        """Set the minimum value"""
        self._min = _strict_int.validate_python(value)
        return self

    def set_attempts(self, value: int) -> "ConfigBuilder":
        """Set the number of attempts"""
        self._attempts = _strict_int.validate_python(value)
        return self

    def build(self) -> Configuration:
        """Build the configuration

        Returns:
            Configuration from the current values, after applying the source

        Raises:
            UseAfterConsumedError: If the builder was already built
        """
        if self._state is BuilderState.CONSUMED:
            raise UseAfterConsumedError("The builder can only be used once")
        self._state = BuilderState.CONSUMED

        source = self.source or FileConfigSource(resolve_source_path())
        self._apply_outcome(parse_source(source), source)

        return Configuration(max=self._max, min=self._min, attempts=self._attempts)

    def _apply_outcome(self, outcome: ParseOutcome, source: ConfigSource) -> None:
        """Update working values from a parse outcome

        Args:
            outcome: Result of reading the source
            source: Source that was read (for log messages)
        """
        if isinstance(outcome, Applied):
            self._update(outcome.fields)
            logger.info(f"Loaded configuration from {source.location}")
        elif isinstance(outcome, NotFound):
            logger.debug(f"No config file at {outcome.location}, using defaults")
        elif isinstance(outcome, Malformed):
            logger.warning(f"Failed to load config from {source.location}: {outcome.reason}")
            if self.partial_policy is PartialParsePolicy.KEEP:
                self._update(outcome.partial)
                logger.info(f"Keeping {len(outcome.partial)} value(s) read before the error")
            else:
                logger.info("Using values set before parsing")

    def _update(self, fields: Dict[str, int]) -> None:
        """Overwrite working values with the fields present"""
        self._max = fields.get("max", self._max)
        self._min = fields.get("min", self._min)
        self._attempts = fields.get("attempts", self._attempts)
