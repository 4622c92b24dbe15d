# Core infrastructure
from lms_access.core.clock import Clock, FixedClock, SystemClock, ensure_utc_aware
from lms_access.core.context import RequestContext, get_context
from lms_access.core.identifiers import (
    ContentId,
    CourseId,
    InvalidIdentifierError,
    LearnerId,
)
from lms_access.core.logging import configure_structlog, get_logger
from lms_access.core.time_range import TimeRange


__all__ = [
    "Clock",
    "ContentId",
    "CourseId",
    "FixedClock",
    "InvalidIdentifierError",
    "LearnerId",
    "RequestContext",
    "SystemClock",
    "TimeRange",
    "configure_structlog",
    "ensure_utc_aware",
    "get_context",
    "get_logger",
]
