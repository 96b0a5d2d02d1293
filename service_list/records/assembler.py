"""Flatten one raw upstream record into a services-directory record."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from service_list.common.models import RawRecord, TransformedRecord, TransformOptions
from service_list.records.details import extract_details
from service_list.records.referral import normalise_referral
from service_list.records.selection import is_indicator_on


def services_provided(indicators: Any, *, accept_boolean: bool = False) -> tuple[str, ...]:
    if not isinstance(indicators, Mapping):
        return ()
    return tuple(name for name, code in indicators.items() if is_indicator_on(code, accept_boolean=accept_boolean))


def assemble_record(raw: RawRecord, options: TransformOptions | None = None) -> TransformedRecord:
    options = options or TransformOptions()
    props = raw.properties
    service_details = extract_details(props, only_selected=options.only_selected_options)

    return TransformedRecord(
        id=raw.id,
        region=props.get("locationName"),
        organization_name=props.get("partnerName"),
        category_name=props.get("activityCategory"),
        sub_category_name=props.get("activityName"),
        start_date=props.get("startDate"),
        end_date=props.get("endDate"),
        services_provided=services_provided(
            props.get("indicators"),
            accept_boolean=options.accept_boolean_indicators,
        ),
        geometry=raw.geometry,
        details=service_details.details,
        hours=service_details.hours,
        referral=normalise_referral(props, only_selected=options.only_selected_options),
    )
