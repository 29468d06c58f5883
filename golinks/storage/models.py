"""Data models for go links."""

from dataclasses import dataclass


@dataclass
class Link:
    """A shortcut and the destination URL it redirects to."""
    
    shortcut: str
    url: str
    
    def to_dict(self) -> dict:
        """Convert to the persisted record shape."""
        return {
            "shortcut": self.shortcut,
            "url": self.url,
        }
    
    @classmethod
    def from_dict(cls, data: dict) -> "Link":
        """Create from a persisted record.
        
        Raises:
            ValueError: If the record is not an object with string
                ``shortcut`` and ``url`` fields
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected an object, got {type(data).__name__}")
        
        shortcut = data.get("shortcut")
        url = data.get("url")
        if not isinstance(shortcut, str) or not isinstance(url, str):
            raise ValueError("Record must have string 'shortcut' and 'url' fields")
        
        return cls(shortcut=shortcut, url=url)
