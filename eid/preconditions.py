"""eid.preconditions

Guards. Each one takes a condition and an Eid (or a raw id), and either gets out of
the way or raises the matching guarded error.

    check_argument(amount > 0, "20150718:075046", "amount must be positive, got %d", amount)

Guard policy:
- the id is converted first, so a None Eid fails even when the condition holds
- violations are never swallowed; the only local recovery is message formatting
- pass-through guards return their input unchanged
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, NoReturn, TypeVar

from eid.core.exceptions import (
    EidIllegalArgumentError,
    EidIllegalStateError,
    EidIndexOutOfBoundsError,
    EidNullReferenceError,
    EidRuntimeError,
)
from eid.core.identity import Eid, ensure_eid

logger = logging.getLogger(__name__)

T = TypeVar("T")

UnsafeProcedure = Callable[[], Any]
UnsafeSupplier = Callable[[], T]

NOT_ACCESSIBLE_EID = "20150718:083450"
NOT_ACCESSIBLE_MESSAGE = "This should not be accessed"


def _fail(guard: str, error: EidRuntimeError) -> NoReturn:
    e = error.eid
    logger.debug(
        "eid_guard_violated",
        extra={"eid": e.id, "ref": e.ref, "uniq": e.uniq, "guard": guard},
    )
    raise error


def check_argument(expression: Any, eid: str | Eid, message: str | None = None, *args: Any) -> None:
    """Raise ``EidIllegalArgumentError`` unless ``expression`` is truthy."""
    checked = ensure_eid(eid)
    if not expression:
        _fail("check_argument", EidIllegalArgumentError(checked, message, *args))


def check_state(expression: Any, eid: str | Eid, message: str | None = None, *args: Any) -> None:
    """Raise ``EidIllegalStateError`` unless ``expression`` is truthy."""
    checked = ensure_eid(eid)
    if not expression:
        _fail("check_state", EidIllegalStateError(checked, message, *args))


def check_not_null(reference: T | None, eid: str | Eid, message: str | None = None, *args: Any) -> T:
    """Return ``reference`` itself, or raise ``EidNullReferenceError`` if it is None."""
    checked = ensure_eid(eid)
    if reference is None:
        _fail("check_not_null", EidNullReferenceError(checked, message, *args))
    return reference


def check_element_index(index: int, size: int, eid: str | Eid, message: str | None = None, *args: Any) -> int:
    """Return ``index`` if it addresses an element of a sequence of ``size``.

    A negative size is an argument error and wins over a bad index.
    """
    checked = ensure_eid(eid)
    if index is None or size is None:
        raise TypeError(f"index and size must not be None, got index={index!r}, size={size!r}")
    if size < 0:
        _fail("check_element_index", EidIllegalArgumentError(checked, message, *args))
    if index < 0 or index >= size:
        _fail("check_element_index", EidIndexOutOfBoundsError(checked, message, *args))
    return index


def try_to_execute(procedure: UnsafeProcedure, eid: str | Eid) -> None:
    """Run ``procedure``; any failure becomes the cause of an ``EidRuntimeError``."""
    checked = ensure_eid(eid)
    try:
        procedure()
    except Exception as exc:
        _fail("try_to_execute", _wrap(checked, exc))


def try_to_supply(supplier: UnsafeSupplier[T], eid: str | Eid) -> T:
    """Like ``try_to_execute``, but hands back what the supplier returned."""
    checked = ensure_eid(eid)
    try:
        return supplier()
    except Exception as exc:
        _fail("try_to_supply", _wrap(checked, exc))


def _wrap(eid: Eid, exc: Exception) -> EidRuntimeError:
    return EidRuntimeError(eid, cause=exc)


class EidPreconditions:
    """Namespace for the guards. Not meant to be instantiated."""

    check_argument = staticmethod(check_argument)
    check_state = staticmethod(check_state)
    check_not_null = staticmethod(check_not_null)
    check_element_index = staticmethod(check_element_index)
    try_to_execute = staticmethod(try_to_execute)
    try_to_supply = staticmethod(try_to_supply)

    def __init__(self) -> None:
        raise EidRuntimeError(Eid(NOT_ACCESSIBLE_EID), NOT_ACCESSIBLE_MESSAGE)
