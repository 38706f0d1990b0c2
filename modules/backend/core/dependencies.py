"""
FastAPI Dependencies.

Shared dependencies for request handling: the request-scoped database
session and the request context injected into every handler.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Annotated, Any

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from modules.backend.core.database import get_db_session
from modules.backend.core.logging import get_logger
from modules.backend.core.utils import utc_now

# Type alias for database session dependency
DbSession = Annotated[AsyncSession, Depends(get_db_session)]


@dataclass(frozen=True)
class RequestContext:
    """
    Per-request correlation data handed explicitly to handlers.

    ``logger`` is bound to the request id, method and path so handlers
    never rely on ambient state for correlation.
    """

    request_id: str
    method: str
    path: str
    start_time: datetime
    logger: Any = field(repr=False, compare=False)

    def bind(self, **values: Any) -> Any:
        """Return the request logger with extra fields bound."""
        return self.logger.bind(**values)


def get_request_context(request: Request) -> RequestContext:
    """
    Build the RequestContext from state set by RequestContextMiddleware.

    Falls back to the X-Request-ID header, then a fresh id, when the
    middleware is not installed (e.g. in isolated router tests).
    """
    request_id = (
        getattr(request.state, "request_id", None)
        or request.headers.get("x-request-id")
        or str(uuid.uuid4())
    )
    request.state.request_id = request_id
    start_time = getattr(request.state, "start_time", None) or utc_now()

    logger = get_logger("modules.backend.api").bind(
        request_id=request_id,
        method=request.method,
        path=request.url.path,
    )
    return RequestContext(
        request_id=request_id,
        method=request.method,
        path=request.url.path,
        start_time=start_time,
        logger=logger,
    )


Context = Annotated[RequestContext, Depends(get_request_context)]
