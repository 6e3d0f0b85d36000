"""
Partitioning Mode Module

How aggressively the orchestrator should split a table into partitions.
"""

from enum import Enum


class PartitioningMode(str, Enum):
    """Partitioning strategies per table"""
    DISABLED = "DISABLED"
    BEST_EFFORT = "BEST_EFFORT"
    REQUIRED = "REQUIRED"

    @property
    def label(self) -> str:
        """Get the human-readable label"""
        return _LABELS[self]


_LABELS = {
    PartitioningMode.DISABLED: "Disabled",
    PartitioningMode.BEST_EFFORT: "Best Effort",
    PartitioningMode.REQUIRED: "Required",
}


DEFAULT_PARTITIONING_MODE = PartitioningMode.BEST_EFFORT
