"""Explanation collaborator (text-generation API client and on-demand panel)."""

from faradaylab.tutor.explain import (
    EMPTY_RESPONSE_MESSAGE,
    MISSING_KEY_MESSAGE,
    UNAVAILABLE_MESSAGE,
    ExplanationRequest,
    ExplanationService,
    build_prompt,
)
from faradaylab.tutor.panel import TutorPanel

__all__ = [
    "ExplanationRequest",
    "ExplanationService",
    "build_prompt",
    "TutorPanel",
    "MISSING_KEY_MESSAGE",
    "UNAVAILABLE_MESSAGE",
    "EMPTY_RESPONSE_MESSAGE",
]
