"""Route class that authenticates the caller before the request body is read."""

from collections.abc import Callable, Coroutine
from typing import Any

from fastapi import Request, Response
from fastapi.dependencies.models import Dependant
from fastapi.routing import APIRoute
from starlette.concurrency import run_in_threadpool

from src.addressbook.api.http.app_data import ApplicationDependencies
from src.addressbook.api.http.deps import get_current_user, token_header
from src.addressbook.core.models.auth import Auth
from src.addressbook.core.services import TokenAuthenticator


def _depends_on(dependant: Dependant, call: Callable[..., Any]) -> bool:
    return any(
        sub.call is call or _depends_on(sub, call) for sub in dependant.dependencies
    )


def _authenticate(request: Request) -> Auth:
    deps: ApplicationDependencies = request.app.state.app_dependencies
    token = request.headers.get(token_header.model.name)
    with deps.database_service.get_session() as session:
        return TokenAuthenticator(session, deps.config.security).authenticate(token)


class AuthGateRoute(APIRoute):
    """Rejects unauthenticated requests to routes that depend on ``get_current_user``.

    FastAPI parses the JSON body before it resolves dependencies, so a bad
    body would otherwise be reported ahead of a missing token. Routes that
    do not use ``get_current_user`` are served unchanged.
    """

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        handler = super().get_route_handler()
        if not _depends_on(self.dependant, get_current_user):
            return handler

        async def gated_handler(request: Request) -> Response:
            request.state.auth = await run_in_threadpool(_authenticate, request)
            return await handler(request)

        return gated_handler
