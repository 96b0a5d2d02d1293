"""Interpretation of the upstream tool's multi-select encoding.

Multi-select fields arrive as a mapping from option label to an indicator,
typically ``true``/``false`` or ``1``/``0``. Everything that needs to ask
"was this option ticked?" goes through :func:`is_selected`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterator

FALSY_STRINGS = {"", "false", "0", "no"}


def is_selected(value: Any) -> bool:
    # Strings such as "false" or "0" count as unticked.
    if isinstance(value, str):
        return value.strip().lower() not in FALSY_STRINGS
    return bool(value)


def iter_options(value: Any, *, only_selected: bool = False) -> Iterator[str]:
    """Yield option labels of a sentinel mapping in insertion order.

    Values that are not mappings carry no options and yield nothing.
    """
    if not isinstance(value, Mapping):
        return
    for label, indicator in value.items():
        if only_selected and not is_selected(indicator):
            continue
        yield label


def last_option(value: Any, *, only_selected: bool = False) -> str | None:
    """Return the last option label visited, or None when there is none."""
    options = list(iter_options(value, only_selected=only_selected))
    return options[-1] if options else None


def is_indicator_on(code: Any, *, accept_boolean: bool = False) -> bool:
    if isinstance(code, bool):
        return accept_boolean and code
    return isinstance(code, (int, float)) and code == 1
