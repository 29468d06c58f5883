"""Abstract base class for link store implementations."""

from abc import ABC, abstractmethod
from typing import Optional, Dict


class LinkStoreBase(ABC):
    """Abstract base class for link storage operations."""
    
    @abstractmethod
    async def load(self) -> None:
        """Load links from persistent storage, replacing the in-memory mapping.
        
        Raises:
            LinkStoreIOError: If storage cannot be read
            LinkFileFormatError: If stored data is malformed
        """
        pass
    
    @abstractmethod
    async def save(self) -> None:
        """Write the full in-memory mapping to persistent storage.
        
        Raises:
            LinkStoreIOError: If storage cannot be written
        """
        pass
    
    @abstractmethod
    async def add(self, shortcut: str, url: str) -> None:
        """Insert or overwrite a link, then save.
        
        Args:
            shortcut: The shortcut key
            url: The destination URL
            
        Raises:
            LinkStoreIOError: If the save fails. The in-memory mapping
                keeps the new value.
        """
        pass
    
    @abstractmethod
    async def get(self, shortcut: str) -> Optional[str]:
        """Get the destination URL for a shortcut.
        
        Args:
            shortcut: The shortcut to lookup
            
        Returns:
            The destination URL if found, None otherwise
        """
        pass
    
    @abstractmethod
    async def get_all(self) -> Dict[str, str]:
        """Get a copy of the full shortcut to URL mapping.
        
        Returns:
            Dictionary the caller may freely modify
        """
        pass
    
    @abstractmethod
    async def count(self) -> int:
        """Get the number of stored links."""
        pass
    
    @abstractmethod
    async def health_check(self) -> bool:
        """Check if storage is usable.
        
        Returns:
            True if healthy, False otherwise
        """
        pass
