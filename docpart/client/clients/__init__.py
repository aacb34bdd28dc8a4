"""High-level clients."""

from .partition_client import PartitionClient

__all__ = ["PartitionClient"]
