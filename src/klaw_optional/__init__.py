"""klaw-optional: Typed Optional containers for Python 3.13+.

An Optional is either Present (a validated, non-None value of one kind) or
Absent (the one cached empty instance of that kind). Kinds supply the
validation predicate; the container supplies map/flat_map/filter and the
or_else family.

Flat imports (preferred):
    from klaw_optional import INT, STR, Kind, Optional, Present, Absent

Submodule imports (for organization):
    from klaw_optional.types import Kind, Optional
    from klaw_optional.kinds import BOOL, FLOAT
    from klaw_optional.errors import NoValuePresentError
"""

# Configuration
from klaw_optional._config import OptionalConfig, get_config, init

# Logging
from klaw_optional._logging import add_log_hook, clear_log_hooks, configure_logging, remove_log_hook

# Errors
from klaw_optional.errors import (
    InvalidArgumentError,
    InvalidConstructionError,
    InvalidFallbackError,
    InvalidMapperResultError,
    NoValuePresentError,
    OptionalError,
)

# Built-in kinds
from klaw_optional.kinds import ANY, BOOL, FLOAT, INT, STR, instance_of

# Types
from klaw_optional.types import Absent, Kind, Optional, Present, is_optional

__all__ = [
    'ANY',
    'BOOL',
    'FLOAT',
    'INT',
    'STR',
    'Absent',
    'InvalidArgumentError',
    'InvalidConstructionError',
    'InvalidFallbackError',
    'InvalidMapperResultError',
    'Kind',
    'NoValuePresentError',
    'Optional',
    'OptionalConfig',
    'OptionalError',
    'Present',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_config',
    'init',
    'instance_of',
    'is_optional',
    'remove_log_hook',
]
