"""
Frontier Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Toolkit configuration loaded from environment variables."""

    # Search tracing
    # When enabled, every search prints one line per wave (or every n-th wave)
    TRACE_SEARCH: bool = _env_flag("FRONTIER_TRACE_SEARCH")
    TRACE_EVERY: int = int(os.getenv("FRONTIER_TRACE_EVERY", "1"))

    # Console output
    NO_COLOR: bool = _env_flag("FRONTIER_NO_COLOR")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are out of range."""
        if cls.TRACE_EVERY < 1:
            raise ValueError(
                "FRONTIER_TRACE_EVERY must be a positive integer "
                f"(got {cls.TRACE_EVERY})"
            )

    @classmethod
    def should_trace(cls, wave: int) -> bool:
        """Return True if the given wave index should be traced."""
        return cls.TRACE_SEARCH and wave % max(cls.TRACE_EVERY, 1) == 0

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Frontier Configuration:",
            f"  Trace Search: {cls.TRACE_SEARCH}",
            f"  Trace Every: {cls.TRACE_EVERY} wave(s)",
            f"  Color Output: {not cls.NO_COLOR}",
        ]
        return "\n".join(lines)
