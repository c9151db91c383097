"""Log entries as handed to a transport."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from logmeta.resource.descriptor import ResourceDescriptor


@dataclass
class LogEntry:
    """A single Cloud Logging entry before submission.

    ``payload`` is a string for text entries or a dict for JSON entries.
    ``resource`` stays ``None`` until a resolver fills it in.
    """

    payload: str | dict[str, Any]
    severity: str = "DEFAULT"
    labels: dict[str, str] = field(default_factory=dict)
    resource: ResourceDescriptor | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"severity": self.severity}
        if isinstance(self.payload, dict):
            data["jsonPayload"] = self.payload
        else:
            data["textPayload"] = self.payload
        if self.labels:
            data["labels"] = dict(self.labels)
        if self.resource is not None:
            data["resource"] = self.resource.to_dict()
        return data
