"""Approval threshold configuration.

The threshold is read once from the environment and shared by every
ReviewService. Provides get/set/reset accessors so tests can swap it.
"""

import os
from dataclasses import dataclass

MIN_COUNT_ENV = "CAMPUSCOFFEE_APPROVAL_MIN_COUNT"
DEFAULT_MIN_COUNT = 3


@dataclass(frozen=True)
class ApprovalConfiguration:
    """Number of approvals a review needs before it counts as approved."""

    min_count: int = DEFAULT_MIN_COUNT

    def __post_init__(self):
        if isinstance(self.min_count, bool) or not isinstance(self.min_count, int):
            raise ValueError(f"min_count must be an integer, got {self.min_count!r}")
        if self.min_count < 1:
            raise ValueError(f"min_count must be at least 1, got {self.min_count}")


def load_approval_configuration() -> ApprovalConfiguration:
    """Build the configuration from CAMPUSCOFFEE_APPROVAL_MIN_COUNT."""
    raw = os.environ.get(MIN_COUNT_ENV)
    if raw is None or not raw.strip():
        return ApprovalConfiguration()

    try:
        min_count = int(raw)
    except ValueError as exc:
        raise ValueError(f"{MIN_COUNT_ENV} must be an integer, got {raw!r}") from exc

    return ApprovalConfiguration(min_count=min_count)


_current_configuration: ApprovalConfiguration | None = None


def get_approval_configuration() -> ApprovalConfiguration:
    """Return the active approval configuration, loading it on first use."""
    global _current_configuration
    if _current_configuration is None:
        _current_configuration = load_approval_configuration()
    return _current_configuration


def set_approval_configuration(configuration: ApprovalConfiguration) -> None:
    """Override the active approval configuration (useful for tests)."""
    global _current_configuration
    _current_configuration = configuration


def reset_approval_configuration() -> None:
    """Drop the active configuration so the next access reloads it."""
    global _current_configuration
    _current_configuration = None
