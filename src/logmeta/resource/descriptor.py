"""Monitored-resource descriptors for Cloud Logging entries.

A descriptor names the kind of compute resource an entry came from plus the
labels Cloud Logging expects for that kind.  Builders read their labels from
an :class:`~logmeta.core.env.EnvironmentReader`; unset variables are simply
left out of ``labels``.

See https://cloud.google.com/logging/docs/api/v2/resource-list
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from logmeta.core.env import (
    FUNCTION_NAME,
    GAE_MODULE_NAME,
    GAE_SERVICE,
    GAE_VERSION,
    SUPERVISOR_REGION,
    EnvironmentReader,
    default_reader,
)


class ResourceType(str, enum.Enum):
    """Monitored resource types logmeta can emit."""

    CLOUD_FUNCTION = "cloud_function"
    GAE_APP = "gae_app"
    GCE_INSTANCE = "gce_instance"
    GLOBAL = "global"


class FrozenLabels(dict):
    """Read-only label mapping.

    A dict subclass so that ``copy.deepcopy``, ``pickle`` and
    ``dataclasses.asdict`` handle descriptors and the entries holding them.
    """

    def _readonly(self, *args, **kwargs):
        raise TypeError("resource labels are read-only")

    __setitem__ = __delitem__ = __ior__ = _readonly
    clear = pop = popitem = setdefault = update = _readonly

    def __reduce__(self):
        return (type(self), (dict(self),))

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.items())))


@dataclass(frozen=True)
class ResourceDescriptor:
    """Immutable ``{type, labels}`` pair attached to a log entry."""

    type: ResourceType
    labels: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", ResourceType(self.type))
        object.__setattr__(self, "labels", FrozenLabels(self.labels))

    def __hash__(self) -> int:
        return hash((self.type, self.labels))

    def to_dict(self) -> dict[str, Any]:
        """Wire shape used by the Cloud Logging API."""
        return {"type": self.type.value, "labels": dict(self.labels)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ResourceDescriptor:
        return cls(type=data["type"], labels=data.get("labels") or {})


def _labels(**values: str | None) -> dict[str, str]:
    return {key: value for key, value in values.items() if value is not None}


def build_cloud_function_descriptor(
    project_id: str | None, env: EnvironmentReader | None = None
) -> ResourceDescriptor:
    """Descriptor for a Cloud Function (``FUNCTION_NAME``, ``SUPERVISOR_REGION``)."""
    env = env or default_reader()
    return ResourceDescriptor(
        type=ResourceType.CLOUD_FUNCTION,
        labels=_labels(
            project_id=project_id,
            function_name=env.get(FUNCTION_NAME),
            region=env.get(SUPERVISOR_REGION),
        ),
    )


def build_app_engine_descriptor(
    project_id: str | None, env: EnvironmentReader | None = None
) -> ResourceDescriptor:
    """Descriptor for an App Engine app.

    ``module_id`` comes from ``GAE_SERVICE``, falling back to the legacy
    ``GAE_MODULE_NAME`` when the former is unset or empty.
    """
    env = env or default_reader()
    return ResourceDescriptor(
        type=ResourceType.GAE_APP,
        labels=_labels(
            project_id=project_id,
            module_id=env.first(GAE_SERVICE, GAE_MODULE_NAME),
            version_id=env.get(GAE_VERSION),
        ),
    )


def build_compute_engine_descriptor(
    project_id: str | None, env: EnvironmentReader | None = None
) -> ResourceDescriptor:
    return ResourceDescriptor(type=ResourceType.GCE_INSTANCE, labels=_labels(project_id=project_id))


def build_global_descriptor(project_id: str | None, env: EnvironmentReader | None = None) -> ResourceDescriptor:
    """Fallback descriptor when no specific environment matched."""
    return ResourceDescriptor(type=ResourceType.GLOBAL, labels=_labels(project_id=project_id))
