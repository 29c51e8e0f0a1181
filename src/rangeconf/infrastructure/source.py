"""Configuration sources - where builder overrides are read from"""

import io
import logging
import os
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "RANGECONF_CONFIG_PATH"
DEFAULT_RELATIVE_PATH = Path("src") / "main" / "resources" / "config.yml"


def resolve_source_path() -> Path:
    """Resolve the configuration file location

    Returns:
        Path from RANGECONF_CONFIG_PATH if set, otherwise
        <cwd>/src/main/resources/config.yml
    """
    env_path = os.getenv(CONFIG_PATH_ENV)
    if env_path:
        logger.debug(f"Using config path from {CONFIG_PATH_ENV}: {env_path}")
        return Path(env_path)
    return Path.cwd() / DEFAULT_RELATIVE_PATH


class ConfigSource(ABC):
    """Abstract base class for configuration sources"""

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable location, used in log messages"""
        pass

    @abstractmethod
    @contextmanager
    def open(self) -> Iterator[Iterator[str]]:
        """Open the source and yield its lines

        The underlying stream is released when the block exits, including on
        exceptions raised while iterating.

        Yields:
            Iterator over text lines (line terminators may be present)

        Raises:
            FileNotFoundError: If the source does not exist
            OSError: If the source cannot be read
        """
        pass


class FileConfigSource(ConfigSource):
    """UTF-8 text file on disk"""

    def __init__(self, path: Union[str, Path]):
        # Convert to Path if string
        if isinstance(path, str):
            path = Path(path)
        self.path = path

    @property
    def location(self) -> str:
        return str(self.path)

    @contextmanager
    def open(self) -> Iterator[Iterator[str]]:
        with open(self.path, "r", encoding="utf-8", newline="") as f:
            yield iter(f)


class StaticConfigSource(ConfigSource):
    """In-memory source, useful for tests and embedded defaults"""

    def __init__(self, text: str, location: str = "<static>"):
        self.text = text
        self._location = location

    @property
    def location(self) -> str:
        return self._location

    @contextmanager
    def open(self) -> Iterator[Iterator[str]]:
        with io.StringIO(self.text, newline="") as stream:
            yield iter(stream)
