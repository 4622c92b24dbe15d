"""Content access module.

Decides and enforces learner access to course content:
- AccessPolicy: ordered enrollment / course / content checks
- AccessDecision: allow, or deny with a DenialReason
- ContentAccessService: raises AccessDeniedError on denial, returns content
"""

from .models import AccessDecision, DenialReason
from .policy import AccessPolicy, AccessPolicyProtocol
from .schemas import AccessCheckResponse
from .service import AccessDeniedError, AccessError, ContentAccessService


__all__ = [
    "AccessCheckResponse",
    "AccessDecision",
    "AccessDeniedError",
    "AccessError",
    "AccessPolicy",
    "AccessPolicyProtocol",
    "ContentAccessService",
    "DenialReason",
]
