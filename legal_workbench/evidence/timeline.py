"""Timeline generation, gap detection and missing-evidence alerts.

All functions here are pure over their inputs and safe to re-run.
"""

from __future__ import annotations

from legal_workbench.core.ontology import (
    EvidenceIndex,
    EvidenceType,
    MissingEvidenceAlert,
    RiskLevel,
    TimelineEntry,
    TimelineGap,
    parse_iso,
    try_parse_iso,
)

GAP_THRESHOLD_DAYS = 7
HIGH_RISK_GAP_DAYS = 30
MEDIUM_RISK_GAP_DAYS = 14

IMAGE_TYPES = frozenset({EvidenceType.PNG, EvidenceType.JPG})
CORRESPONDENCE_TYPES = frozenset({EvidenceType.TXT, EvidenceType.EML})


def gap_risk(duration_days: int) -> RiskLevel:
    """Risk for a gap of the given length."""
    if duration_days > HIGH_RISK_GAP_DAYS:
        return RiskLevel.HIGH
    if duration_days > MEDIUM_RISK_GAP_DAYS:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


class TimelineGenerator:
    """Derives timelines, gaps and alerts from an evidence index."""

    def __init__(self, gap_threshold_days: int = GAP_THRESHOLD_DAYS):
        self.gap_threshold_days = gap_threshold_days

    def generate(self, index: EvidenceIndex) -> list[TimelineEntry]:
        """Items with a readable date, in ascending date order."""
        entries = [
            TimelineEntry(
                date=item.date,
                item_id=item.id,
                filename=item.filename,
                type=item.type,
                summary=item.summary,
            )
            for item in index.items
            if try_parse_iso(item.date)
        ]
        return sorted(entries, key=lambda entry: parse_iso(entry.date))

    def detect_gaps(self, timeline: list[TimelineEntry]) -> list[TimelineGap]:
        """Flag consecutive entries more than the threshold apart (whole days)."""
        gaps: list[TimelineGap] = []
        for current, following in zip(timeline, timeline[1:]):
            delta = parse_iso(following.date) - parse_iso(current.date)
            duration_days = int(delta.total_seconds() // 86400)
            if duration_days > self.gap_threshold_days:
                gaps.append(
                    TimelineGap(
                        start=current.date,
                        end=following.date,
                        duration_days=duration_days,
                        risk_level=gap_risk(duration_days),
                    )
                )
        return gaps

    def flag_missing_evidence(
        self, index: EvidenceIndex, timeline: list[TimelineEntry]
    ) -> list[MissingEvidenceAlert]:
        """Suggest evidence types that appear to be missing.

        An email only counts as an original when its sender header was
        extracted; pasted or header-less emails still raise the alert.
        """
        alerts: list[MissingEvidenceAlert] = []

        has_image = any(item.type in IMAGE_TYPES for item in index.items)
        has_email_original = any(
            item.type == EvidenceType.EML and item.sender for item in index.items
        )
        correspondence_entries = sum(1 for entry in timeline if entry.type in CORRESPONDENCE_TYPES)

        if not has_image and timeline:
            alerts.append(
                MissingEvidenceAlert(
                    type="screenshot",
                    message="No screenshot evidence found; consider adding visual documentation.",
                )
            )
        if not has_email_original:
            alerts.append(
                MissingEvidenceAlert(
                    type="email-original",
                    message=(
                        "No original emails (EML) with headers found; consider exporting full "
                        "emails from your mail client."
                    ),
                )
            )
        if len(timeline) > 2 and correspondence_entries < 3:
            alerts.append(
                MissingEvidenceAlert(
                    type="unknown",
                    message="Limited correspondence in evidence; consider adding written communications.",
                )
            )
        return alerts

    def to_markdown(self, timeline: list[TimelineEntry], gaps: list[TimelineGap] | None = None) -> str:
        """Render a timeline as the ``timeline.md`` package file."""
        lines = ["# Timeline", ""]
        if not timeline:
            lines.append("No dated evidence recorded.")
        for entry in timeline:
            lines.append(f"- {entry.date}: {entry.filename} ({entry.type.value})")
        if gaps:
            lines.extend(["", "## Gaps"])
            for gap in gaps:
                lines.append(
                    f"- {gap.start} to {gap.end}: {gap.duration_days} days ({gap.risk_level.value} risk)"
                )
        return "\n".join(lines) + "\n"


def alerts_to_markdown(alerts: list[MissingEvidenceAlert]) -> str:
    """Render alerts as the ``missing_evidence.md`` package file."""
    lines = ["# Missing Evidence", ""]
    if not alerts:
        lines.append("None identified.")
    lines.extend(f"- [ ] {alert.message}" for alert in alerts)
    return "\n".join(lines) + "\n"
