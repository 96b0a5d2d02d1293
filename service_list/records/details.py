"""Itemised details and opening hours from numbered property keys."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from service_list.common.constants import (
    CLOSE_AT_PREFIX,
    CLOSING_HOURS_PREFIX,
    COMMENTS_KEY,
    OPENING_HOURS_PREFIX,
)
from service_list.common.models import Hours, ServiceDetails
from service_list.records.selection import iter_options, last_option

_LEADING_INT_RE = re.compile(r"^\s*([+-]?[0-9]+)")


def _parse_prefix(segment: str) -> int | None:
    match = _LEADING_INT_RE.match(segment)
    if not match:
        return None
    prefix = int(match.group(1))
    # Upstream numbering starts at 1; a zero prefix is not a numbered property.
    if prefix == 0:
        return None
    return prefix


def parse_property_key(key: str) -> tuple[int, str] | None:
    """Split ``"<N>. <Label>"`` into ``(N, "Label")``.

    Returns None for keys without a usable integer prefix.
    """
    if key == COMMENTS_KEY:
        return None
    segments = key.split(".")
    if len(segments) < 2:
        return None
    prefix = _parse_prefix(segments[0])
    if prefix is None:
        return None
    return prefix, segments[1].strip()


def extract_details(properties: Mapping[str, Any], *, only_selected: bool = False) -> ServiceDetails:
    details: list[dict[str, str]] = []
    open_at = None
    closed_at = None

    for key, value in properties.items():
        parsed = parse_property_key(key)
        if parsed is None:
            continue
        prefix, label = parsed

        if prefix == OPENING_HOURS_PREFIX:
            option = last_option(value, only_selected=only_selected)
            if option is not None:
                open_at = option
        elif prefix == CLOSING_HOURS_PREFIX:
            option = last_option(value, only_selected=only_selected)
            if option is not None:
                closed_at = option.removeprefix(CLOSE_AT_PREFIX)
        else:
            details.extend(
                {label: option} for option in iter_options(value, only_selected=only_selected) if option
            )

    return ServiceDetails(details=tuple(details), hours=Hours(open_at=open_at, closed_at=closed_at))
