"""Admin event cancellation handlers.

Repair entry point for cancellation cascades that were interrupted after
the event was marked but before it reached CANCELLED.
"""

from fastapi import Depends, Request
from fastapi.responses import JSONResponse

from src.application.commands.event_commands import ResumeEventCancellations
from src.application.commands.handlers.resume_event_cancellations_handler import (
    ResumeEventCancellationsHandler,
)
from src.core.container import get_resume_event_cancellations_handler
from src.core.result import Failure
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.event_schemas import CancellationResumeResponse


async def resume_event_cancellations(
    request: Request,
    handler: ResumeEventCancellationsHandler = Depends(
        get_resume_event_cancellations_handler
    ),
) -> CancellationResumeResponse | JSONResponse:
    """Complete every pending cancellation cascade.

    POST /api/v1/admin/event-cancellations/resumptions → 200 OK
    """
    result = await handler.handle(ResumeEventCancellations())

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return CancellationResumeResponse(completed_event_ids=result.value)
