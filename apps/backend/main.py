"""HTTP entry point for the backend.

:func:`create_app` wires the three startup-time values together: the frozen
:class:`~lib.config.security_loader.SecurityConfig`, the
:class:`~apps.gate.AuthorizationGate` built from it and the explicit
:class:`~apps.backend.RouteTable`.  The gate runs as HTTP middleware so it
sees every request, including ones for paths no route matches.

Importing this module builds nothing; :func:`run` is the process entry point.
"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from apps.backend import RouteTable, build_route_table
from apps.gate import AuthorizationGate
from lib.config.security_loader import SecurityConfig, load_security_config
from lib.contracts.errors import AuthorizationDenied
from lib.telemetry.logger import configure_logging, get_logger
from lib.utils.helpers import parse_basic_auth


log = get_logger(__name__)

FORBIDDEN_BODY = "Forbidden"


def _register_routes(app: FastAPI, routes: RouteTable) -> None:
    for route in routes:
        app.add_api_route(
            route.path,
            route.handler,
            methods=[route.method],
            name=route.name,
            response_class=PlainTextResponse,
        )


def create_app(config: Optional[SecurityConfig] = None) -> FastAPI:
    """Build the FastAPI application for ``config``.

    When ``config`` is omitted it is loaded with
    :func:`~lib.config.security_loader.load_security_config`.
    """

    config = config or load_security_config()
    gate = AuthorizationGate(config)
    routes = build_route_table()

    app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)
    app.state.security = config
    app.state.gate = gate
    app.state.routes = routes
    _register_routes(app, routes)

    @app.middleware("http")
    async def authorization_gate(request: Request, call_next):
        credentials = parse_basic_auth(request.headers.get("authorization"))
        try:
            gate.authorize(request.url.path, credentials)
        except AuthorizationDenied as exc:
            log.debug("denied %s %s", request.method, exc.path)
            return PlainTextResponse(FORBIDDEN_BODY, status_code=403)
        return await call_next(request)

    if config.password_generated:
        log.warning(
            "Using generated security password: %s (user %r)",
            config.user_password,
            config.user_name,
        )
    log.info("permit paths: %s; %d routes registered", ", ".join(config.permit_paths), len(routes))
    return app


def run() -> None:
    """Load the config, configure logging, then serve the app with uvicorn.

    ASGI servers can also use the factory directly:
    ``uvicorn --factory apps.backend.main:create_app``.
    """

    import uvicorn

    config = load_security_config()
    configure_logging(config.log_level)
    app = create_app(config)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    run()
