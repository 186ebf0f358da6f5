"""Parser configuration."""

import os
from dataclasses import dataclass

__all__ = ["ParserConfig", "DEFAULT_QUEUE_SIZE"]

DEFAULT_QUEUE_SIZE = 100


@dataclass(slots=True, frozen=True)
class ParserConfig:
    """
    Tunables for a parsing session.

    :param num_workers: Number of parse worker threads (default: CPU count).
    :param queue_size: Capacity of the line and outcome queues.
    :param ordered: Sort components, commands and diagnostics by line number.
    :param report_dropped_parameters: Emit a WARNING when a model parameter is dropped.
    """

    num_workers: int | None = None
    queue_size: int = DEFAULT_QUEUE_SIZE
    ordered: bool = True
    report_dropped_parameters: bool = True

    def __post_init__(self):
        if self.queue_size <= 0:
            raise ValueError(f"queue_size must be positive, got {self.queue_size}")

    def resolved_workers(self) -> int:
        """
        Returns the effective worker count.

        :return: Configured worker count, or the CPU count when unset.
        :raises ValueError: If the configured count is not positive.
        """
        if self.num_workers is None:
            return os.cpu_count() or 1
        if self.num_workers <= 0:
            raise ValueError(f"num_workers must be positive, got {self.num_workers}")
        return self.num_workers
