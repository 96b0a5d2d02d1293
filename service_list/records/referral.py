"""Referral policy derived from the referral-method multi-select."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from service_list.common.constants import REFERRAL_METHOD_KEY, REFERRAL_NOT_REQUIRED_SENTINELS
from service_list.common.models import Referral
from service_list.records.selection import is_selected, last_option


def normalise_referral(properties: Mapping[str, Any], *, only_selected: bool = False) -> Referral:
    """Derive the referral policy of one record.

    A referral is required unless one of the "not required" sentinels is
    ticked; a record without referral data requires none. The type is the
    last option label in the mapping's order.
    """
    referral_data = properties.get(REFERRAL_METHOD_KEY)
    if not isinstance(referral_data, Mapping) or not referral_data:
        return Referral(required=False, type=None)

    not_required = any(is_selected(referral_data.get(label)) for label in REFERRAL_NOT_REQUIRED_SENTINELS)
    return Referral(
        required=not not_required,
        type=last_option(referral_data, only_selected=only_selected),
    )
