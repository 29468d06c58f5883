"""FastAPI application factory."""

from fastapi import FastAPI

from .api import api_router
from .web import web_router
from .middleware.logging import LoggingMiddleware


def create_app(
    service_instance,
    config,
) -> FastAPI:
    """Create and configure FastAPI application.
    
    Args:
        service_instance: LinkService instance wrapping the loaded store
            (may be None and set later on ``app.state.service``)
        config: Configuration instance
        
    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Go Links",
        description="Personal URL shortcut service",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        swagger_ui_oauth2_redirect_url="/api/docs/oauth2-redirect",
        openapi_url="/api/openapi.json",
    )
    
    # Store instances in app state for access in routes
    app.state.service = service_instance
    app.state.config = config
    
    app.add_middleware(LoggingMiddleware)
    
    # API first: the web router ends with a catch-all shortcut route
    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Web"])
    
    return app
