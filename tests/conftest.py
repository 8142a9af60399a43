from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# pytest may run without installing the project; ensure repo root is importable.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from eid.core.config import EidConfig, configure  # noqa: E402
from eid.core.identity import HashUniqIdGenerator, set_uniq_id_generator  # noqa: E402

EID = "20150718:075046"


@pytest.fixture(autouse=True)
def default_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[EidConfig]:
    """Every test starts from built-in defaults, whatever the shell exports."""

    for name in ("MESSAGE_FORMAT", "EID_FORMAT", "LOG_MESSAGE_FORMAT", "DEFAULT_MESSAGE", "UNIQ_LENGTH", "HASH_ALGORITHM"):
        monkeypatch.delenv(f"EID_{name}", raising=False)

    cfg = EidConfig()
    previous = configure(cfg)
    previous_generator = set_uniq_id_generator(HashUniqIdGenerator())
    yield cfg
    configure(previous)
    set_uniq_id_generator(previous_generator)


@pytest.fixture()
def eid_id() -> str:
    return EID
