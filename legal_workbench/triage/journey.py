"""Journey tracker - progress through the five matter stages."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

STAGES: list[tuple[str, list[str]]] = [
    (
        "Understand",
        [
            "Confirm the facts you provided are accurate",
            "Clarify missing details if prompted",
        ],
    ),
    (
        "Options",
        [
            "Review the forums and pathways listed for your matter",
            "Note deadlines or notice requirements",
        ],
    ),
    (
        "Prepare",
        [
            "Upload evidence and organize key dates",
            "Fill evidence gaps and collect witness contact details",
        ],
    ),
    (
        "Act",
        [
            "Generate drafts and review them for accuracy",
            "Follow the filing or submission instructions for the forum",
        ],
    ),
    (
        "Resolve",
        [
            "Track responses, deadlines and hearing dates",
            "Record outcomes and note any appeal or compliance steps",
        ],
    ),
]


class JourneyStep(BaseModel):
    id: str
    label: str
    status: str = "pending"  # done, active, pending
    next_steps: list[str] = Field(default_factory=list)


class JourneyProgress(BaseModel):
    current_stage: str
    percent_complete: int
    steps: list[JourneyStep]


class JourneyTracker:
    """Builds stage progress from what the session has produced so far."""

    def build_progress(
        self,
        classification: Any = None,
        forum_map: Any = None,
        evidence_count: int = 0,
        documents_generated: bool = False,
    ) -> JourneyProgress:
        steps = [
            JourneyStep(id=stage, label=stage, next_steps=list(next_steps))
            for stage, next_steps in STAGES
        ]
        steps[0].status = "done"
        steps[1].status = "active"

        if classification is not None and getattr(classification, "domain", None) and forum_map:
            self._mark_done(steps, "Options")
        if evidence_count > 0:
            self._mark_done(steps, "Prepare")
        if documents_generated:
            self._mark_done(steps, "Act")

        remaining = [s for s in steps if s.status != "done"]
        if len(remaining) == 1 and remaining[0].id == "Resolve":
            remaining[0].status = "active"
        elif not any(s.status == "active" for s in steps):
            pending = next((s for s in steps if s.status == "pending"), None)
            if pending:
                pending.status = "active"

        done = sum(1 for s in steps if s.status == "done")
        current = (
            next((s for s in steps if s.status == "active"), None)
            or next((s for s in steps if s.status == "pending"), None)
            or steps[0]
        )
        return JourneyProgress(
            current_stage=current.id,
            percent_complete=round(done / len(steps) * 100),
            steps=steps,
        )

    def _mark_done(self, steps: list[JourneyStep], step_id: str) -> None:
        step = next((s for s in steps if s.id == step_id), None)
        if step is None:
            return
        step.status = "done"
        following = next((s for s in steps if s.status == "pending"), None)
        if following:
            following.status = "active"
