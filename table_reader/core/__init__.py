# Core module

from .column_types import (
    ColumnType,
    PARTITIONABLE_TYPES,
    get_column_type,
    get_partitionable_types,
)
from .partitioning_mode import PartitioningMode, DEFAULT_PARTITIONING_MODE
from .table_naming import get_qualified_table_name, split_qualified_table_name
from .exceptions import TableReaderError, PartitioningRequiredError, TableDiscoveryError
from .partitionability import (
    PartitionabilityResult,
    evaluate_partitionability,
    is_partitionable,
)
from .table_context import TableContext, DEFAULT_MAX_NUM_ACTIVE_PARTITIONS
from .reading_strategy import ReadingStrategy, resolve_reading_strategy
from .table_context_registry import TableContextRegistry
from .table_discovery import TableDiscovery

__all__ = [
    # Column Types
    'ColumnType',
    'PARTITIONABLE_TYPES',
    'get_column_type',
    'get_partitionable_types',
    'PartitioningMode',
    'DEFAULT_PARTITIONING_MODE',
    # Naming
    'get_qualified_table_name',
    'split_qualified_table_name',
    # Errors
    'TableReaderError',
    'PartitioningRequiredError',
    'TableDiscoveryError',
    # Core Components
    'PartitionabilityResult',
    'evaluate_partitionability',
    'is_partitionable',
    'TableContext',
    'DEFAULT_MAX_NUM_ACTIVE_PARTITIONS',
    'ReadingStrategy',
    'resolve_reading_strategy',
    'TableContextRegistry',
    'TableDiscovery',
]
