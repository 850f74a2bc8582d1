"""Timeline assessor - limitation risk from the key dates given at intake."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from legal_workbench.core.ontology import RiskLevel, try_parse_iso

HIGH_RISK_AGE_DAYS = 730
MEDIUM_RISK_AGE_DAYS = 180


class TimelineAssessment(BaseModel):
    """Risk level and notes for a matter's key dates."""

    risk: RiskLevel
    notes: list[str] = Field(default_factory=list)
    latest_date: str | None = None
    days_since_latest: int | None = None


class TimelineAssessor:
    """Flags matters whose latest key date is old enough to threaten a limitation period."""

    def assess(self, key_dates: list[str] | None, now: datetime | None = None) -> TimelineAssessment:
        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)

        dates = []
        unreadable = []
        for value in key_dates or []:
            parsed = try_parse_iso(value)
            if parsed is None:
                unreadable.append(value)
            else:
                dates.append(parsed)

        notes: list[str] = []
        if unreadable:
            notes.append(
                "Could not read key date(s) " + ", ".join(repr(v) for v in unreadable)
                + "; confirm dates in YYYY-MM-DD form."
            )
        if not dates:
            notes.extend(
                [
                    "No usable key dates provided; confirm dates to assess limitation periods.",
                    "Appeal or review windows may apply; confirm deadlines with the forum.",
                ]
            )
            return TimelineAssessment(risk=RiskLevel.HIGH, notes=notes)

        latest = max(dates)
        age_days = (now - latest).days
        if age_days > HIGH_RISK_AGE_DAYS:
            risk = RiskLevel.HIGH
            notes.append("Latest event is more than two years old; the general limitation period may have run.")
        elif age_days > MEDIUM_RISK_AGE_DAYS:
            risk = RiskLevel.MEDIUM
            notes.append("Latest event is more than six months old; some notice periods may have passed.")
        else:
            risk = RiskLevel.LOW
            notes.append("Key dates are recent.")
        notes.append("Appeal or review windows may apply; confirm deadlines with the forum.")

        return TimelineAssessment(
            risk=risk,
            notes=notes,
            latest_date=latest.date().isoformat(),
            days_since_latest=age_days,
        )
