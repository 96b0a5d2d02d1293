"""Data models used across the pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class RawRecord:
    id: Any
    geometry: Any
    properties: Mapping[str, Any]

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "RawRecord":
        properties = payload.get("properties")
        return cls(
            id=payload.get("id"),
            geometry=payload.get("geometry"),
            properties=properties if isinstance(properties, Mapping) else {},
        )


@dataclass(frozen=True)
class TransformOptions:
    only_selected_options: bool = False
    accept_boolean_indicators: bool = False

    @classmethod
    def from_config(cls, transform_config: Mapping[str, Any] | None) -> "TransformOptions":
        transform_config = transform_config or {}
        return cls(
            only_selected_options=bool(transform_config.get("only_selected_options", False)),
            accept_boolean_indicators=bool(transform_config.get("accept_boolean_indicators", False)),
        )


@dataclass(frozen=True)
class Referral:
    required: bool = False
    type: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"required": self.required, "type": self.type}


@dataclass(frozen=True)
class Hours:
    open_at: str | None = None
    closed_at: str | None = None

    def to_dict(self) -> dict[str, str]:
        out = {}
        if self.open_at is not None:
            out["openAt"] = self.open_at
        if self.closed_at is not None:
            out["closedAt"] = self.closed_at
        return out


@dataclass(frozen=True)
class ServiceDetails:
    details: tuple[dict[str, str], ...] = ()
    hours: Hours = field(default_factory=Hours)


@dataclass(frozen=True)
class TransformedRecord:
    id: Any
    region: Any
    organization_name: Any
    category_name: Any
    sub_category_name: Any
    start_date: Any
    end_date: Any
    services_provided: tuple[str, ...]
    geometry: Any
    details: tuple[dict[str, str], ...]
    hours: Hours
    referral: Referral

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "region": self.region,
            "organization": {"name": self.organization_name},
            "category": {
                "name": self.category_name,
                "subCategory": {"name": self.sub_category_name},
            },
            "startDate": self.start_date,
            "endDate": self.end_date,
            "servicesProvided": list(self.services_provided),
            "location": {"type": "Feature", "geometry": self.geometry},
            "details": [dict(pair) for pair in self.details],
            "hours": self.hours.to_dict(),
            "referral": self.referral.to_dict(),
        }
