"""JSON file implementation of the link store."""

import os
import json
import asyncio
import logging
from typing import Optional, Dict, List

from .base import LinkStoreBase
from .models import Link
from .exceptions import LinkStoreIOError, LinkFileFormatError


class JSONFileLinkStore(LinkStoreBase):
    """Link store backed by a single pretty-printed JSON file.
    
    The file holds an array of ``{"shortcut": ..., "url": ...}`` records and is
    rewritten in full on every mutation. Mutations are serialized by an
    ``asyncio.Lock``; blocking file I/O runs in a worker thread while the lock
    is held so concurrent writers never interleave.
    """
    
    def __init__(self, file_path: str, logger: Optional[logging.Logger] = None):
        """Initialize the store.
        
        Args:
            file_path: Path of the JSON data file
            logger: Optional logger instance
        """
        self.file_path = file_path
        self.logger = logger or logging.getLogger(__name__)
        self._links: Dict[str, str] = {}
        self._lock = asyncio.Lock()
    
    async def load(self) -> None:
        """Load links from the data file.
        
        A missing file yields an empty mapping. The parent directory is
        created if needed. On failure the current mapping is left untouched.
        """
        async with self._lock:
            links = await asyncio.to_thread(self._read_file)
            self._links = links
        
        self.logger.info(f"Loaded {len(links)} links from {self.file_path}")
    
    async def save(self) -> None:
        """Write all links to the data file."""
        async with self._lock:
            await self._save_locked()
    
    async def add(self, shortcut: str, url: str) -> None:
        """Insert or overwrite a link and persist the whole mapping."""
        async with self._lock:
            self._links[shortcut] = url
            await self._save_locked()
    
    async def get(self, shortcut: str) -> Optional[str]:
        return self._links.get(shortcut)
    
    async def get_all(self) -> Dict[str, str]:
        return dict(self._links)
    
    async def count(self) -> int:
        return len(self._links)
    
    async def health_check(self) -> bool:
        """Check that the data directory exists and is writable."""
        directory = os.path.dirname(os.path.abspath(self.file_path))
        return os.path.isdir(directory) and os.access(directory, os.W_OK)
    
    async def _save_locked(self) -> None:
        # Snapshot under the lock so the thread serializes a stable mapping
        records = [
            Link(shortcut=shortcut, url=url).to_dict()
            for shortcut, url in sorted(self._links.items())
        ]
        await asyncio.to_thread(self._write_file, records)
        self.logger.debug(f"Saved {len(records)} links to {self.file_path}")
    
    def _read_file(self) -> Dict[str, str]:
        """Read and parse the data file (runs in a worker thread)."""
        directory = os.path.dirname(os.path.abspath(self.file_path))
        try:
            os.makedirs(directory, exist_ok=True)
        except OSError as e:
            raise LinkStoreIOError(f"Cannot create data directory {directory}: {e}") from e
        
        if not os.path.exists(self.file_path):
            self.logger.info(f"No data file at {self.file_path}, starting empty")
            return {}
        
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                raw = f.read()
        except UnicodeDecodeError as e:
            raise LinkFileFormatError(f"{self.file_path} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise LinkStoreIOError(f"Cannot read {self.file_path}: {e}") from e
        
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise LinkFileFormatError(f"Invalid JSON in {self.file_path}: {e}") from e
        except RecursionError as e:
            raise LinkFileFormatError(f"JSON in {self.file_path} is nested too deeply") from e
        
        if not isinstance(data, list):
            raise LinkFileFormatError(
                f"Expected a list of links in {self.file_path}, got {type(data).__name__}"
            )
        
        links: Dict[str, str] = {}
        for index, record in enumerate(data):
            try:
                link = Link.from_dict(record)
            except ValueError as e:
                raise LinkFileFormatError(
                    f"Invalid link record at index {index} in {self.file_path}: {e}"
                ) from e
            # Later duplicates win
            links[link.shortcut] = link.url
        
        return links
    
    def _write_file(self, records: List[dict]) -> None:
        """Replace the data file contents (runs in a worker thread)."""
        tmp_path = self.file_path + ".tmp"
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
                f.write("\n")
            os.replace(tmp_path, self.file_path)
        except OSError as e:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise LinkStoreIOError(f"Cannot write {self.file_path}: {e}") from e
