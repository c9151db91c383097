"""Environment classification and descriptor dispatch.

A detector may report several flags at once (App Engine flexible runs on GCE,
for instance).  Resolution always walks ``DESCRIPTOR_RULES`` in order and
takes the first match: App Engine, then Cloud Function, then Compute Engine,
then global.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass

from loguru import logger

from logmeta.core.env import EnvironmentReader

from .descriptor import (
    ResourceDescriptor,
    build_app_engine_descriptor,
    build_cloud_function_descriptor,
    build_compute_engine_descriptor,
    build_global_descriptor,
)

DescriptorBuilder = Callable[[str | None, EnvironmentReader | None], ResourceDescriptor]


class Platform(enum.Enum):
    """Single compute platform chosen from a classification."""

    APP_ENGINE = "app_engine"
    CLOUD_FUNCTION = "cloud_function"
    COMPUTE_ENGINE = "compute_engine"
    NONE = "none"


@dataclass(frozen=True)
class EnvironmentClassification:
    """Flags reported by an environment probe."""

    is_app_engine: bool = False
    is_cloud_function: bool = False
    is_compute_engine: bool = False

    @classmethod
    def for_platform(cls, platform: Platform) -> EnvironmentClassification:
        return cls(
            is_app_engine=platform is Platform.APP_ENGINE,
            is_cloud_function=platform is Platform.CLOUD_FUNCTION,
            is_compute_engine=platform is Platform.COMPUTE_ENGINE,
        )

    @property
    def platform(self) -> Platform:
        for rule in DESCRIPTOR_RULES:
            if rule.matches(self):
                return rule.platform
        return Platform.NONE


@dataclass(frozen=True)
class DescriptorRule:
    platform: Platform
    matches: Callable[[EnvironmentClassification], bool]
    build: DescriptorBuilder


# Highest priority first
DESCRIPTOR_RULES: list[DescriptorRule] = [
    DescriptorRule(Platform.APP_ENGINE, lambda c: c.is_app_engine, build_app_engine_descriptor),
    DescriptorRule(Platform.CLOUD_FUNCTION, lambda c: c.is_cloud_function, build_cloud_function_descriptor),
    DescriptorRule(Platform.COMPUTE_ENGINE, lambda c: c.is_compute_engine, build_compute_engine_descriptor),
]


def select_descriptor(
    classification: EnvironmentClassification,
    project_id: str | None,
    env: EnvironmentReader | None = None,
) -> ResourceDescriptor:
    """Build the descriptor for the highest-priority matching platform."""
    for rule in DESCRIPTOR_RULES:
        if rule.matches(classification):
            logger.debug(f"Resource platform resolved to {rule.platform.value}")
            return rule.build(project_id, env)
    logger.debug("No platform matched; using global resource")
    return build_global_descriptor(project_id, env)
