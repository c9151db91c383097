"""Identity provider protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from logmeta.resource.environment import EnvironmentClassification


@runtime_checkable
class IdentityProvider(Protocol):
    """Supplies the project ID and environment classification.

    Either call may perform network I/O and may raise; the resolver passes
    such errors through unchanged.
    """

    async def get_project_id(self) -> str: ...

    async def get_environment(self) -> EnvironmentClassification: ...
