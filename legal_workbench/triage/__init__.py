"""Triage - matter classification, pillars, routing and journey tracking."""

from .classifier import (
    DomainRule,
    DOMAIN_RULES,
    MatterClassifier,
    resolve_domain,
    resolve_jurisdiction,
)
from .pillars import (
    PILLAR_KEYWORDS,
    PillarClassifier,
    PillarExplainer,
    PillarExplanation,
)
from .routing import ForumRouter, RouteRule, RoutingInput, ROUTE_TABLE
from .timeline import TimelineAssessment, TimelineAssessor
from .journey import JourneyProgress, JourneyStep, JourneyTracker

__all__ = [
    # Classifier
    "DomainRule",
    "DOMAIN_RULES",
    "MatterClassifier",
    "resolve_domain",
    "resolve_jurisdiction",
    # Pillars
    "PILLAR_KEYWORDS",
    "PillarClassifier",
    "PillarExplainer",
    "PillarExplanation",
    # Routing
    "ForumRouter",
    "RouteRule",
    "RoutingInput",
    "ROUTE_TABLE",
    # Timeline
    "TimelineAssessment",
    "TimelineAssessor",
    # Journey
    "JourneyProgress",
    "JourneyStep",
    "JourneyTracker",
]
