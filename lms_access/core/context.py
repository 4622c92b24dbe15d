"""Per-call logging context.

``ContentAccessService`` opens a ``RequestContext`` around every access
call; ``add_context_processor`` in ``lms_access.core.logging`` copies the
current values into each log line, so policy and repository logs carry the
learner and request ids without receiving them as arguments.
"""

from contextvars import ContextVar, Token
from typing import Any
from uuid import uuid4


request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)
learner_id_var: ContextVar[str | None] = ContextVar("learner_id", default=None)
correlation_id_var: ContextVar[str | None] = ContextVar("correlation_id", default=None)

_VARS: dict[str, ContextVar[str | None]] = {
    "request_id": request_id_var,
    "learner_id": learner_id_var,
    "correlation_id": correlation_id_var,
}


def get_context() -> dict[str, Any]:
    """Return the context values that are currently set."""
    return {name: var.get() for name, var in _VARS.items() if var.get()}


class RequestContext:
    """Context manager scoping log context to one access call.

    A request id already set by an enclosing context (for example a host
    application wrapping several calls) is kept; otherwise a new one is
    generated. Values are restored on exit, so contexts nest.

    Usage:
        with RequestContext(learner_id=learner_id, correlation_id="import-42"):
            service.get_lesson(learner_id, course_id, lesson_id)
    """

    def __init__(
        self,
        request_id: str | None = None,
        learner_id: object | None = None,
        correlation_id: str | None = None,
    ) -> None:
        """Initialize; ``learner_id`` may be a ``LearnerId`` or a string."""
        self.values: dict[str, str | None] = {
            "request_id": request_id or request_id_var.get() or str(uuid4()),
            "learner_id": (
                str(getattr(learner_id, "value", learner_id))
                if learner_id is not None
                else None
            ),
            "correlation_id": correlation_id,
        }
        self._tokens: dict[str, Token[str | None]] = {}

    def __enter__(self) -> "RequestContext":
        """Set the non-empty values."""
        for name, value in self.values.items():
            if value is not None:
                self._tokens[name] = _VARS[name].set(value)
        return self

    def __exit__(self, *_: object) -> None:
        """Restore previous values."""
        for name, token in self._tokens.items():
            _VARS[name].reset(token)
        self._tokens.clear()
