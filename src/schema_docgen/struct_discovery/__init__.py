"""Struct discovery exports."""

from .discovery_models import ARRAY_INDEX_SEGMENT, DiscoveredStruct, DiscoveryResult
from .struct_discoverer import find_structs

__all__ = [
    "ARRAY_INDEX_SEGMENT",
    "DiscoveredStruct",
    "DiscoveryResult",
    "find_structs",
]
