"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
See comingsoon.core.lifespan and comingsoon.core.exception_handlers.

Settings are loaded inside create_app() so tests can set env (and clear
the get_settings cache) before building an app.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from comingsoon.api.v1 import api_router
from comingsoon.application.dtos.launching import LaunchingScreenState
from comingsoon.core.config import get_settings
from comingsoon.core.exception_handlers import register_exception_handlers
from comingsoon.core.lifespan import create_lifespan
from comingsoon.core.limiter import limiter
from comingsoon.middleware import (
    RequestIDMiddleware,
    SecurityHeadersMiddleware,
    TimeoutMiddleware,
)
from comingsoon.pages import render_launching_page


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    register_exception_handlers(app)

    # First added = innermost. Effective order: timeout -> request ID -> security -> CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    app.add_middleware(TimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds)

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/", response_class=HTMLResponse)
    def root(request: Request) -> HTMLResponse:
        """Coming-soon page seeded with the current screen state."""
        controller = getattr(request.app.state, "launching_controller", None)
        state = controller.state if controller is not None else LaunchingScreenState()
        return HTMLResponse(
            content=render_launching_page(
                settings.app_name, state, settings.social_link_list
            )
        )

    return app


app = create_app()
