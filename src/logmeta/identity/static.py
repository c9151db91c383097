"""Identity provider with fixed answers, for local runs and tests."""

from __future__ import annotations

from logmeta.core.exceptions import ProjectIdNotFoundError
from logmeta.resource.environment import EnvironmentClassification


class StaticIdentityProvider:
    """Answer identity queries from values given up front.

    Args:
        project_id: Returned by ``get_project_id()``.  If ``None``, that
            call raises :class:`ProjectIdNotFoundError`.
        environment: Returned by ``get_environment()``.  Defaults to no
            platform, which resolves to the global resource.
    """

    def __init__(
        self,
        project_id: str | None = None,
        environment: EnvironmentClassification | None = None,
    ):
        self.project_id = project_id
        self.environment = environment or EnvironmentClassification()

    async def get_project_id(self) -> str:
        if self.project_id is None:
            raise ProjectIdNotFoundError("StaticIdentityProvider has no project ID configured")
        return self.project_id

    async def get_environment(self) -> EnvironmentClassification:
        return self.environment
