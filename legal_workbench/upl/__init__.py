"""UPL guardrails - citations, disclaimers and boundary tiering."""

from .citations import CitationCheck, CitationEnforcer
from .disclaimers import AdviceRedirect, DisclaimerService, PathwayOption
from .sandbox import A2ISandboxFramework, HumanReview, SandboxInput, SandboxPlan

__all__ = [
    "CitationCheck",
    "CitationEnforcer",
    "AdviceRedirect",
    "DisclaimerService",
    "PathwayOption",
    "A2ISandboxFramework",
    "HumanReview",
    "SandboxInput",
    "SandboxPlan",
]
