"""eid.core

Core primitives: config, identity, formatting, exceptions.

Nothing here imports from the guards. The guards import from here.
"""

from .config import EidConfig, configure, get_config
from .exceptions import ConfigError, EidContainer, EidRuntimeError
from .identity import Eid, ensure_eid

__all__ = [
    "ConfigError",
    "Eid",
    "EidConfig",
    "EidContainer",
    "EidRuntimeError",
    "configure",
    "ensure_eid",
    "get_config",
]
