"""eid.core.formatting

A broken format string must never hide the failure it was meant to describe.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

logger = logging.getLogger(__name__)


def format_message(fmt: str, args: Sequence[Any] = ()) -> str:
    """Percent-style substitution that degrades instead of raising.

    No args: ``fmt`` is returned verbatim (a literal ``%`` stays literal).
    Mismatched args: the raw format plus the reprs of the args.
    """
    if not args:
        return str(fmt)
    try:
        return str(fmt) % tuple(args)
    except Exception as exc:  # noqa: BLE001 - formatting isolation boundary
        logger.warning(
            "eid_message_format_failed",
            extra={"format": fmt, "arg_count": len(args), "error": type(exc).__name__},
        )
        return fallback_message(fmt, args)


def fallback_message(fmt: str, args: Sequence[Any]) -> str:
    rendered = ", ".join(_safe_repr(a) for a in args)
    return f"{fmt} (args: {rendered})"


def _safe_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception:  # noqa: BLE001 - repr isolation boundary
        return f"<{type(value).__name__} object>"
