"""Pydantic models for the Lighthouse result (LHR) JSON.

Only the parts the adapters read are modelled; everything else in the
payload is ignored. Both the Lighthouse CLI and PageSpeed Insights return
this shape (PSI nests it under ``lighthouseResult``).
"""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ScoreDisplayMode(StrEnum):
    """Lighthouse audit display modes."""

    BINARY = "binary"
    NUMERIC = "numeric"
    METRIC_SAVINGS = "metricSavings"
    MANUAL = "manual"
    INFORMATIVE = "informative"
    NOT_APPLICABLE = "notApplicable"
    ERROR = "error"


class _LHRModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class LighthouseAudit(_LHRModel):
    """One audit entry from ``audits``."""

    id: str = ""
    title: str = ""
    description: str = ""
    score: float | None = None
    # Kept as str: newer Lighthouse releases add modes we treat as scored
    score_display_mode: str = Field(default=ScoreDisplayMode.BINARY, alias="scoreDisplayMode")
    numeric_value: float | None = Field(default=None, alias="numericValue")
    display_value: str | None = Field(default=None, alias="displayValue")


class AuditRef(_LHRModel):
    """Reference from a category to one of its audits."""

    id: str
    weight: float = 0.0
    group: str | None = None


class LighthouseCategory(_LHRModel):
    """One entry from ``categories``."""

    id: str = ""
    title: str = ""
    score: float | None = None
    audit_refs: list[AuditRef] = Field(default_factory=list, alias="auditRefs")


class LighthouseResult(_LHRModel):
    """The subset of an LHR consumed by the category adapters."""

    lighthouse_version: str | None = Field(default=None, alias="lighthouseVersion")
    requested_url: str | None = Field(default=None, alias="requestedUrl")
    final_url: str | None = Field(default=None, alias="finalUrl")
    categories: dict[str, LighthouseCategory] = Field(default_factory=dict)
    audits: dict[str, LighthouseAudit] = Field(default_factory=dict)

    @classmethod
    def from_json(cls, payload: str | bytes | dict[str, Any]) -> "LighthouseResult":
        """Validate raw LHR JSON (text or already-decoded)."""
        if isinstance(payload, dict):
            return cls.model_validate(payload)
        return cls.model_validate_json(payload)

    def audit(self, audit_id: str) -> LighthouseAudit | None:
        return self.audits.get(audit_id)
