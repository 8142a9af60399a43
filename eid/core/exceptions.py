"""eid.core.exceptions

Errors are part of the interface.

Every guarded error carries exactly one Eid, and its message always carries the id.
Building one never fails: a bad format string degrades, it does not explode.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from eid.core.config import ConfigError, get_config
from eid.core.formatting import format_message
from eid.core.identity import Eid, ensure_eid

__all__ = [
    "ConfigError",
    "EidContainer",
    "EidIllegalArgumentError",
    "EidIllegalStateError",
    "EidIndexOutOfBoundsError",
    "EidNullReferenceError",
    "EidRuntimeError",
]


@runtime_checkable
class EidContainer(Protocol):
    """Anything that carries an Eid."""

    def get_eid(self) -> Eid: ...


class EidRuntimeError(RuntimeError):
    """Base guarded error. Also the generic wrapper used by ``try_to_execute``."""

    def __init__(
        self,
        eid: str | Eid,
        message: str | None = None,
        *args: Any,
        cause: BaseException | None = None,
    ) -> None:
        self._eid = ensure_eid(eid)
        self._message = _describe(message, args, cause)
        self._cause = cause
        super().__init__(self._render())
        if cause is not None:
            self.__cause__ = cause

    @property
    def eid(self) -> Eid:
        return self._eid

    @property
    def message(self) -> str:
        return self._message

    @property
    def cause(self) -> BaseException | None:
        return self._cause

    def get_eid(self) -> Eid:
        return self._eid

    def _render(self) -> str:
        e = self._eid
        return get_config().message_format.format(id=e.id, ref=e.ref, uniq=e.uniq, message=self._message)


class EidIllegalArgumentError(EidRuntimeError, ValueError):
    """An argument failed its precondition."""


class EidIllegalStateError(EidRuntimeError):
    """The object or process is not in the state the call requires."""


class EidNullReferenceError(EidRuntimeError):
    """A required reference was None."""


class EidIndexOutOfBoundsError(EidRuntimeError, IndexError):
    """An index fell outside ``[0, size)``."""


def _describe(message: str | None, args: tuple[Any, ...], cause: BaseException | None) -> str:
    if message is not None:
        return format_message(message, args)
    if cause is not None:
        text = _safe_str(cause)
        return f"{type(cause).__name__}: {text}" if text else type(cause).__name__
    return get_config().default_message


def _safe_str(cause: BaseException) -> str:
    try:
        return str(cause)
    except Exception:  # noqa: BLE001 - cause isolation boundary
        return ""
