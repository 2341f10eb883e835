"""Protocol interfaces for dependency injection from the host application."""

from typing import Protocol, List, Any

class Segmenter(Protocol):
    """Injected sentence segmenter (optional). If None, use the deterministic regex splitter."""

    def segment(self, text: str) -> List[str]:
        """
        Segment text into sentences, in reading order.

        Args:
            text: Input text to segment

        Returns:
            List[str]: List of sentence segments
        """
        ...

class Logger(Protocol):
    """
    Optional structured logging interface.

    Planner events: content_classified and plan_complete (info),
    empty_input and undershoot_fallback (warn), plan_failed (error).
    """

    def info(self, msg: str, **kv: Any) -> None:
        """Log info level message with optional key-value context."""
        ...

    def warn(self, msg: str, **kv: Any) -> None:
        """Log a recoverable planning event with key-value context."""
        ...

    def error(self, msg: str, **kv: Any) -> None:
        """Log error level message with optional key-value context."""
        ...

class Meter(Protocol):
    """
    Optional metrics collection interface.

    Counters: slidesplit.fallback_used, slidesplit.plan_failed.
    Observations: slidesplit.fragment_count, slidesplit.balance.
    """

    def inc(self, name: str, amount: int = 1, **tags: str) -> None:
        """Increment a counter, tagged with content_type where known."""
        ...

    def observe(self, name: str, value: float, **tags: str) -> None:
        """Record an observation metric with optional tags."""
        ...
