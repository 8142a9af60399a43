from __future__ import annotations

import pytest

from eid.core.config import configure
from eid.core.exceptions import (
    ConfigError,
    EidContainer,
    EidIllegalArgumentError,
    EidIllegalStateError,
    EidIndexOutOfBoundsError,
    EidNullReferenceError,
    EidRuntimeError,
)
from eid.core.identity import Eid

FAMILY = [
    EidRuntimeError,
    EidIllegalArgumentError,
    EidIllegalStateError,
    EidNullReferenceError,
    EidIndexOutOfBoundsError,
]


def test_exception_hierarchy_is_structural() -> None:
    for cls in FAMILY:
        assert issubclass(cls, EidRuntimeError)
        assert issubclass(cls, RuntimeError)
    assert issubclass(EidIllegalArgumentError, ValueError)
    assert issubclass(EidIndexOutOfBoundsError, IndexError)
    assert not issubclass(ConfigError, EidRuntimeError)


@pytest.mark.parametrize("cls", FAMILY)
def test_every_variant_is_an_eid_container(cls: type[EidRuntimeError], eid_id: str) -> None:
    e = cls(eid_id)
    assert isinstance(e, EidContainer)
    assert e.get_eid().id == eid_id
    assert e.eid is e.get_eid()


@pytest.mark.parametrize("cls", FAMILY)
def test_default_message_when_none_given(cls: type[EidRuntimeError], eid_id: str) -> None:
    e = cls(eid_id)
    assert str(e) == f"[{eid_id}|This should not happen]"
    assert e.message == "This should not happen"


def test_message_is_formatted(eid_id: str) -> None:
    e = EidIllegalStateError(eid_id, "PI is %.4f", 3.14159265)
    assert str(e) == f"[{eid_id}|PI is 3.1416]"


def test_literal_message_without_args_is_kept(eid_id: str) -> None:
    e = EidIllegalArgumentError(eid_id, "100% sure")
    assert str(e) == f"[{eid_id}|100% sure]"


def test_format_mismatch_does_not_mask_the_error(eid_id: str) -> None:
    e = EidNullReferenceError(eid_id, "%s and %s", "only one")
    assert eid_id in str(e)
    assert "%s and %s" in e.message
    assert "'only one'" in e.message


def test_explicit_eid_instance_is_kept(eid_id: str) -> None:
    eid = Eid(eid_id)
    e = EidRuntimeError(eid, "boom")
    assert e.get_eid() is eid


def test_cause_is_chained(eid_id: str) -> None:
    cause = KeyError("missing")
    e = EidRuntimeError(eid_id, cause=cause)
    assert e.cause is cause
    assert e.__cause__ is cause
    assert e.message == "KeyError: 'missing'"
    assert str(e) == f"[{eid_id}|KeyError: 'missing']"


def test_cause_without_text_uses_type_name(eid_id: str) -> None:
    e = EidRuntimeError(eid_id, cause=ValueError())
    assert e.message == "ValueError"


def test_explicit_message_wins_over_cause(eid_id: str) -> None:
    e = EidRuntimeError(eid_id, "parsing %s failed", "doc.json", cause=ValueError("bad"))
    assert e.message == "parsing doc.json failed"
    assert isinstance(e.cause, ValueError)


def test_message_format_follows_config(eid_id: str) -> None:
    configure(message_format="{id} ({uniq}): {message}", default_message="Unreachable")
    e = EidIllegalStateError(eid_id)
    assert str(e) == f"{eid_id} ({e.eid.uniq}): Unreachable"


def test_attributes_are_read_only(eid_id: str) -> None:
    e = EidRuntimeError(eid_id, "x")
    with pytest.raises(AttributeError):
        e.eid = Eid("other")  # type: ignore[misc]
    with pytest.raises(AttributeError):
        e.message = "y"  # type: ignore[misc]


def test_none_eid_is_a_plain_error() -> None:
    with pytest.raises(TypeError) as e:
        EidRuntimeError(None)  # type: ignore[arg-type]
    assert not isinstance(e.value, EidRuntimeError)


def test_guarded_errors_are_catchable_by_builtin_kind(eid_id: str) -> None:
    with pytest.raises(ValueError):
        raise EidIllegalArgumentError(eid_id, "nope")
    with pytest.raises(IndexError):
        raise EidIndexOutOfBoundsError(eid_id, "nope")


class _UnprintableError(Exception):
    def __str__(self) -> str:
        raise RuntimeError("no str for you")


def test_unprintable_cause_falls_back_to_type_name(eid_id: str) -> None:
    cause = _UnprintableError()
    e = EidRuntimeError(eid_id, cause=cause)
    assert e.message == "_UnprintableError"
    assert e.cause is cause
    assert str(e) == f"[{eid_id}|_UnprintableError]"
