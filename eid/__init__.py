"""eid: exception ids for guarded preconditions.

Every check that can fail carries its own id. When it fails, the id lands in
the message, and the message lands in the logs. One grep away from the line.
"""

from __future__ import annotations

from eid.core.config import EidConfig, configure, get_config
from eid.core.exceptions import (
    ConfigError,
    EidContainer,
    EidIllegalArgumentError,
    EidIllegalStateError,
    EidIndexOutOfBoundsError,
    EidNullReferenceError,
    EidRuntimeError,
)
from eid.core.identity import (
    Eid,
    HashUniqIdGenerator,
    UniqIdGenerator,
    ensure_eid,
    new_id,
    set_uniq_id_generator,
)
from eid.preconditions import (
    EidPreconditions,
    check_argument,
    check_element_index,
    check_not_null,
    check_state,
    try_to_execute,
    try_to_supply,
)

__all__ = [
    "__version__",
    "ConfigError",
    "Eid",
    "EidConfig",
    "EidContainer",
    "EidIllegalArgumentError",
    "EidIllegalStateError",
    "EidIndexOutOfBoundsError",
    "EidNullReferenceError",
    "EidPreconditions",
    "EidRuntimeError",
    "HashUniqIdGenerator",
    "UniqIdGenerator",
    "check_argument",
    "check_element_index",
    "check_not_null",
    "check_state",
    "configure",
    "ensure_eid",
    "get_config",
    "new_id",
    "set_uniq_id_generator",
    "try_to_execute",
    "try_to_supply",
]

__version__ = "1.0.0"
