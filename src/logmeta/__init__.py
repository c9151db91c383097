"""logmeta: tag Google Cloud log entries with the resource they came from."""

__version__ = "0.1.0"

from .entry import LogEntry
from .resource import (
    SKIPPED,
    ResourceDescriptor,
    ResourceResolver,
    ResourceType,
)

__all__ = [
    "SKIPPED",
    "LogEntry",
    "ResourceDescriptor",
    "ResourceResolver",
    "ResourceType",
    "__version__",
]
