"""Configuration value object."""

from pydantic import BaseModel, ConfigDict, StrictInt


class Configuration(BaseModel):
    """Immutable snapshot of the game bounds.

    Instances are produced by ``ConfigBuilder.build()``. Consistency is not
    enforced here: an inconsistent configuration is a valid value, and callers
    are expected to check ``is_consistent()`` before trusting it.

    Attributes:
        max: Upper bound of the range
        min: Lower bound of the range
        attempts: Number of attempts allowed
    """

    max: StrictInt
    min: StrictInt
    attempts: StrictInt

    model_config = ConfigDict(
        frozen=True,  # No mutation after build
        extra="forbid",
    )

    def is_consistent(self) -> bool:
        """Check that attempts is positive and min is strictly below max"""
        return self.attempts > 0 and self.min < self.max
