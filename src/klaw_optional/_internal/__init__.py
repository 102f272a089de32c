"""Internal helpers, not part of the public API."""

from klaw_optional._internal.sync import OnceCell, OnceMap

__all__ = ['OnceCell', 'OnceMap']
