"""
logmeta exception hierarchy.

All logmeta exceptions inherit from LogmetaError, making it easy for consumers
to catch library-level errors while still distinguishing specific failure modes.
The resolver itself never raises these; they come from the config layer and
the bundled identity providers.
"""


class LogmetaError(Exception):
    """Base exception class for all logmeta errors."""


class ConfigurationError(LogmetaError):
    """Raised for configuration errors (missing keys, invalid values)."""


class IdentityError(LogmetaError):
    """Raised when an identity provider cannot answer a query."""


class ProjectIdNotFoundError(IdentityError):
    """Raised when no project ID can be determined from the credentials."""


class EnvironmentDetectionError(IdentityError):
    """Raised when the compute environment probe fails outright."""
