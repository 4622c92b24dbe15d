"""Course content access decisions for enrolled learners."""

from lms_access.access import (
    AccessDecision,
    AccessDeniedError,
    AccessPolicy,
    ContentAccessService,
    DenialReason,
)


__version__ = "0.1.0"

__all__ = [
    "AccessDecision",
    "AccessDeniedError",
    "AccessPolicy",
    "ContentAccessService",
    "DenialReason",
    "__version__",
]
