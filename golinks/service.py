"""Business logic service for go links."""

import logging
from typing import Optional, Dict

from .storage.base import LinkStoreBase
from .storage.models import Link
from .common.validators import normalize_url, is_valid_shortcut


class LinkService:
    """Service layer between the web/CLI front ends and the link store."""
    
    def __init__(
        self,
        store: LinkStoreBase,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize link service.
        
        Args:
            store: Link store instance (owns the mapping)
            logger: Optional logger
        """
        self.store = store
        self.logger = logger or logging.getLogger(__name__)
    
    async def add_link(self, shortcut: str, url: str) -> Link:
        """Create or overwrite a go link.
        
        Args:
            shortcut: The shortcut key (surrounding whitespace is trimmed)
            url: The destination URL; ``http://`` is prepended if no scheme
            
        Returns:
            The stored link with its normalized URL
            
        Raises:
            ValueError: If either field is blank or the shortcut is reserved
            LinkStoreError: If the link could not be persisted
        """
        shortcut = (shortcut or "").strip()
        url = (url or "").strip()
        
        if not shortcut or not url:
            raise ValueError("Shortcut and URL are required")
        
        is_valid, error = is_valid_shortcut(shortcut)
        if not is_valid:
            raise ValueError(f"Invalid shortcut: {error}")
        
        url = normalize_url(url)
        
        await self.store.add(shortcut, url)
        
        self.logger.info(f"Saved link: {shortcut} -> {url}")
        
        return Link(shortcut=shortcut, url=url)
    
    async def resolve(self, shortcut: str) -> Optional[str]:
        """Get the destination URL for a shortcut.
        
        Args:
            shortcut: The shortcut, used verbatim
            
        Returns:
            Destination URL or None if not found
        """
        url = await self.store.get(shortcut)
        
        if url is not None:
            self.logger.debug(f"Resolved link: {shortcut} -> {url}")
        else:
            self.logger.debug(f"Shortcut not found: {shortcut}")
        
        return url
    
    async def get_link(self, shortcut: str) -> Optional[Link]:
        url = await self.store.get(shortcut)
        if url is None:
            return None
        return Link(shortcut=shortcut, url=url)
    
    async def list_links(self) -> Dict[str, str]:
        """Get a copy of every shortcut and its destination."""
        return await self.store.get_all()
    
    async def count_links(self) -> int:
        return await self.store.count()
    
    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.
        
        Returns:
            Dictionary with health status
        """
        storage_healthy = await self.store.health_check()
        
        return {
            "storage": storage_healthy,
            "overall": storage_healthy,
        }
