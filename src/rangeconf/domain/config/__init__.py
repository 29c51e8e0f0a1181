"""Configuration value objects."""

from rangeconf.domain.config.configuration import Configuration

__all__ = [
    "Configuration",
]
