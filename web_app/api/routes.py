"""API routes implementation."""

from typing import Optional
from fastapi import APIRouter, Request, HTTPException, status
from datetime import datetime, timezone

from .schemas import (
    LinkRequest,
    LinkResponse,
    LinkListResponse,
    HealthResponse,
    ErrorResponse,
)
from golinks.common.logging_config import get_logger
from golinks.storage.exceptions import LinkStoreError

router = APIRouter()

logger = get_logger("golinks.api")


@router.get(
    "/links",
    response_model=LinkListResponse,
    summary="List links",
    description=(
        "List every shortcut and its destination, sorted by shortcut. "
        "Pass `shortcut` to look up a single link (an empty list if unknown)."
    ),
)
async def list_links(request: Request, shortcut: Optional[str] = None):
    """List all links, or the one matching ``shortcut``."""
    service = request.app.state.service
    
    if shortcut is not None:
        link = await service.get_link(shortcut)
        links = [link] if link else []
        return LinkListResponse(
            links=[LinkResponse(shortcut=found.shortcut, url=found.url) for found in links],
            count=len(links),
        )
    
    all_links = await service.list_links()
    
    return LinkListResponse(
        links=[
            LinkResponse(shortcut=key, url=url)
            for key, url in sorted(all_links.items())
        ],
        count=len(all_links),
    )


@router.post(
    "/links",
    response_model=LinkResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        500: {"model": ErrorResponse, "description": "Link could not be saved"},
    },
    summary="Create link",
    description="Create a link, or overwrite the destination of an existing shortcut.",
)
async def create_link(request: Request, body: LinkRequest):
    """Create or overwrite a link."""
    service = request.app.state.service
    
    try:
        link = await service.add_link(shortcut=body.shortcut, url=body.url)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except LinkStoreError as e:
        logger.error(f"Failed to save link: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save link",
        )
    
    return LinkResponse(shortcut=link.shortcut, url=link.url)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is healthy.",
)
async def health_check(request: Request):
    """Health check endpoint for container and monitoring probes."""
    service = request.app.state.service
    
    health = await service.health_check()
    link_count = await service.count_links()
    
    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        storage="healthy" if health["storage"] else "unhealthy",
        link_count=link_count,
        timestamp=datetime.now(timezone.utc),
    )
