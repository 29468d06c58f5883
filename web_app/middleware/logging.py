"""Logging middleware."""

import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable

from golinks.common.logging_config import get_logger


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for request/response logging."""
    
    def __init__(self, app, logger: logging.Logger = None):
        """Initialize logging middleware."""
        super().__init__(app)
        self.logger = logger or get_logger("golinks.web")
    
    async def dispatch(self, request: Request, call_next: Callable):
        """Log request and response."""
        start_time = time.time()
        
        client_ip = request.client.host if request.client else "unknown"
        self.logger.info(f"Request: {request.method} {request.url.path} from {client_ip}")
        
        response = await call_next(request)
        
        duration_ms = (time.time() - start_time) * 1000
        
        self.logger.info(
            f"Response: {request.method} {request.url.path} - "
            f"Status: {response.status_code} - Duration: {duration_ms:.2f}ms"
        )
        
        return response
