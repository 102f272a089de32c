"""Core types: Kind, Optional, Present, Absent."""

from klaw_optional.types.kind import IsInstance, Kind
from klaw_optional.types.optional import Absent, Optional, Present, is_optional

__all__ = [
    'Absent',
    'IsInstance',
    'Kind',
    'Optional',
    'Present',
    'is_optional',
]
