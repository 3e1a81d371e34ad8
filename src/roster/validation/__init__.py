"""Payload validation models"""

from .candidates import (
    CandidatePayload,
    SendRemindersRequest,
    UpdateCandidateRequest,
    parse_candidates,
)

__all__ = [
    "CandidatePayload",
    "UpdateCandidateRequest",
    "SendRemindersRequest",
    "parse_candidates",
]
