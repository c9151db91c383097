"""Resource descriptors and the resolver that attaches them to entries."""

from .descriptor import (
    ResourceDescriptor,
    ResourceType,
    build_app_engine_descriptor,
    build_cloud_function_descriptor,
    build_compute_engine_descriptor,
    build_global_descriptor,
)
from .environment import DESCRIPTOR_RULES, EnvironmentClassification, Platform, select_descriptor
from .resolver import SKIPPED, ResourceResolver, Skipped

__all__ = [
    "DESCRIPTOR_RULES",
    "SKIPPED",
    "EnvironmentClassification",
    "Platform",
    "ResourceDescriptor",
    "ResourceResolver",
    "ResourceType",
    "Skipped",
    "build_app_engine_descriptor",
    "build_cloud_function_descriptor",
    "build_compute_engine_descriptor",
    "build_global_descriptor",
    "select_descriptor",
]
