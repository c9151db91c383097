"""Resolve the default monitored resource for outgoing log entries.

The resolver asks an identity provider for the project ID and the compute
environment, then picks a descriptor by priority.  It adds no retries,
timeouts or error wrapping of its own: whatever the provider raises reaches
the caller unchanged.
"""

from __future__ import annotations

import enum
from collections.abc import MutableMapping
from typing import TYPE_CHECKING, Any, TypeVar

from loguru import logger

from logmeta.core.env import EnvironmentReader, default_reader
from logmeta.core.utils.async_helpers import run_async_safely

from .descriptor import ResourceDescriptor
from .environment import select_descriptor

if TYPE_CHECKING:
    from logmeta.core.config import Config
    from logmeta.identity.base import IdentityProvider

EntryT = TypeVar("EntryT")


class Skipped(enum.Enum):
    """Result variant for lookups that were deliberately not performed."""

    SKIPPED = "skipped"

    def __repr__(self) -> str:
        return "SKIPPED"


SKIPPED = Skipped.SKIPPED


class ResourceResolver:
    """Attach a default ``resource`` to log entries.

    Args:
        identity: Provider answering ``get_project_id()`` and
            ``get_environment()``.
        project_id: Pre-configured project ID.  When set, the provider is
            never asked for one.
        disable_project_lookup: Skip project resolution entirely, for
            restricted runtimes where the lookup must not happen.  Every
            resolution then returns :data:`SKIPPED`.
        env: Environment reader used by the descriptor builders.
    """

    def __init__(
        self,
        identity: IdentityProvider,
        project_id: str | None = None,
        disable_project_lookup: bool = False,
        env: EnvironmentReader | None = None,
    ):
        self.identity = identity
        self.disable_project_lookup = disable_project_lookup
        self.env = env or default_reader()
        self._project_id = project_id or None

    @classmethod
    def from_config(
        cls,
        config: Config,
        identity: IdentityProvider,
        env: EnvironmentReader | None = None,
    ) -> ResourceResolver:
        settings = config.validated().resource
        return cls(
            identity,
            project_id=settings.project_id,
            disable_project_lookup=settings.disable_project_lookup,
            env=env,
        )

    @property
    def project_id(self) -> str | None:
        """Configured or previously fetched project ID, if any."""
        return self._project_id

    async def resolve_project_id(self) -> str | Skipped:
        """Return the project ID, fetching it from the provider at most once."""
        if self.disable_project_lookup:
            logger.debug("Project lookup disabled; skipping")
            return SKIPPED

        if self._project_id:
            return self._project_id

        project_id = await self.identity.get_project_id()
        logger.debug(f"Fetched project ID {project_id!r} from identity provider")
        self._project_id = project_id
        return project_id

    async def resolve_default_descriptor(self) -> ResourceDescriptor | Skipped:
        """Describe the environment this process runs in."""
        project_id = await self.resolve_project_id()
        if project_id is SKIPPED:
            return SKIPPED

        classification = await self.identity.get_environment()
        return select_descriptor(classification, project_id, self.env)

    async def ensure_entry_has_resource(self, entry: EntryT) -> EntryT:
        """Fill in ``entry.resource`` when it is missing and return the entry.

        Entries that already carry a resource are returned untouched without
        any lookup.  Dict entries receive the descriptor's wire dict; other
        entries receive the :class:`ResourceDescriptor` itself.  The entry is
        mutated in place.
        """
        if _get_resource(entry):
            return entry

        resource = await self.resolve_default_descriptor()
        if resource is SKIPPED:
            return entry

        _set_resource(entry, resource)
        return entry

    def ensure_entry_has_resource_sync(self, entry: EntryT, timeout: float | None = None) -> EntryT:
        """Blocking variant of :meth:`ensure_entry_has_resource`.

        ``timeout`` bounds the whole resolution; the resolver has no timeout
        of its own.
        """
        return run_async_safely(self.ensure_entry_has_resource(entry), timeout=timeout)


def _get_resource(entry: Any) -> Any:
    if isinstance(entry, MutableMapping):
        return entry.get("resource")
    return getattr(entry, "resource", None)


def _set_resource(entry: Any, resource: ResourceDescriptor) -> None:
    if isinstance(entry, MutableMapping):
        entry["resource"] = resource.to_dict()
    else:
        entry.resource = resource
