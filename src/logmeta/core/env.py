"""
Environment variable access.

Every environment read in logmeta goes through an EnvironmentReader so that
callers (and tests) can substitute a plain dict for ``os.environ``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

# Variables consulted when building resource descriptors
FUNCTION_NAME = "FUNCTION_NAME"
SUPERVISOR_REGION = "SUPERVISOR_REGION"
GAE_SERVICE = "GAE_SERVICE"
GAE_MODULE_NAME = "GAE_MODULE_NAME"
GAE_VERSION = "GAE_VERSION"


class EnvironmentReader:
    """Read-only view over a mapping of environment variables.

    Args:
        environ: Mapping to read from. Defaults to the live ``os.environ``,
            so later changes to the process environment are visible.
    """

    def __init__(self, environ: Mapping[str, str] | None = None):
        self._environ = os.environ if environ is None else environ

    @classmethod
    def from_dict(cls, values: Mapping[str, str]) -> EnvironmentReader:
        """Build a reader over a private copy of ``values``."""
        return cls(dict(values))

    def get(self, name: str, default: str | None = None) -> str | None:
        return self._environ.get(name, default)

    def first(self, *names: str) -> str | None:
        """Return the first non-empty value among ``names``, or None."""
        for name in names:
            value = self._environ.get(name)
            if value:
                return value
        return None

    def is_set(self, name: str) -> bool:
        return bool(self._environ.get(name))


def default_reader() -> EnvironmentReader:
    """Reader bound to the process environment."""
    return EnvironmentReader()
