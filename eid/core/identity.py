"""eid.core.identity

An Eid is a token plus two derived fingerprints:

  id   = chosen by the developer, e.g. "20150718:075046"
  ref  = <module>:<function>:<lineno> of the frame that created it
  uniq = hash(id | ref), truncated

The id says which check failed. The ref and uniq say where the Eid came from,
so the same id reused at two call sites can still be told apart.
"""

from __future__ import annotations

import hashlib
import sys
from dataclasses import dataclass, field
from datetime import UTC, datetime
from types import FrameType
from typing import Any, Protocol, runtime_checkable

from eid.core.config import get_config
from eid.core.formatting import format_message

ID_TIME_FORMAT = "%Y%m%d:%H%M%S"
UNKNOWN_REF = "<unknown>"
NULL_EID_MESSAGE = "Pass not-null Eid to EidPreconditions first!"

_PACKAGE = __name__.split(".", 1)[0]
_SKIPPED_MODULES = {"dataclasses"}


@runtime_checkable
class UniqIdGenerator(Protocol):
    def generate(self, id: str, ref: str) -> str: ...


class HashUniqIdGenerator:
    """Default generator: truncated hex digest of ``id|ref``."""

    def __init__(self, algorithm: str | None = None, length: int | None = None) -> None:
        self.algorithm = algorithm
        self.length = length

    def generate(self, id: str, ref: str) -> str:
        cfg = get_config()
        algorithm = self.algorithm or cfg.hash_algorithm
        length = self.length or cfg.uniq_length
        digest = hashlib.new(algorithm, f"{id}|{ref}".encode()).hexdigest()
        return digest[:length]


_generator: UniqIdGenerator = HashUniqIdGenerator()


def get_uniq_id_generator() -> UniqIdGenerator:
    return _generator


def set_uniq_id_generator(generator: UniqIdGenerator) -> UniqIdGenerator:
    """Install a new uniq generator. Returns the previous one."""
    global _generator
    if not isinstance(generator, UniqIdGenerator):
        raise TypeError(f"Not a UniqIdGenerator: {generator!r}")
    previous = _generator
    _generator = generator
    return previous


def _is_internal(frame: FrameType) -> bool:
    if frame.f_code.co_filename.startswith("<"):
        return True
    module = str(frame.f_globals.get("__name__", ""))
    if module in _SKIPPED_MODULES:
        return True
    return module == _PACKAGE or module.startswith(_PACKAGE + ".")


def call_site_ref() -> str:
    """Reference to the first frame outside this package."""
    frame: FrameType | None = sys._getframe(1)
    while frame is not None and _is_internal(frame):
        frame = frame.f_back
    if frame is None:
        return UNKNOWN_REF
    module = frame.f_globals.get("__name__", "?")
    return f"{module}:{frame.f_code.co_name}:{frame.f_lineno}"


@dataclass(frozen=True, slots=True)
class Eid:
    """Exception id. Immutable; equality and hashing use ``id`` only."""

    id: str
    ref: str = field(init=False, compare=False)
    uniq: str = field(init=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id:
            raise ValueError(f"Eid id must be a non-empty string, got {self.id!r}")
        ref = call_site_ref()
        uniq = str(_generator.generate(self.id, ref) or "")
        if not uniq:
            raise ValueError(f"Uniq id generator returned an empty value for {self.id!r}")
        object.__setattr__(self, "ref", ref)
        object.__setattr__(self, "uniq", uniq)

    def get_id(self) -> str:
        return self.id

    def get_ref(self) -> str:
        return self.ref

    def get_uniq(self) -> str:
        return self.uniq

    def make_log_message(self, fmt: str, *args: Any) -> str:
        """Render an Eid-tagged log line without raising anything."""
        message = format_message(fmt, args)
        return get_config().log_message_format.format(eid=self, message=message)

    def __str__(self) -> str:
        return get_config().eid_format.format(id=self.id, ref=self.ref, uniq=self.uniq)


def ensure_eid(value: str | Eid) -> Eid:
    """Accept a raw id or an Eid; the single conversion used by every guard."""
    if value is None:
        raise TypeError(NULL_EID_MESSAGE)
    if isinstance(value, Eid):
        return value
    return Eid(value)


def new_id(now: datetime | None = None) -> str:
    """Mint an id in the ``YYYYMMDD:HHMMSS`` convention (UTC)."""
    ts = now or datetime.now(UTC)
    return ts.strftime(ID_TIME_FORMAT)
