"""
Download targets for generated files.

A FileSink receives finished bytes with a MIME type and filename and performs
the host's save-file action:
- DirectorySink writes into a local directory
- CollectingSink keeps downloads in memory (Streamlit download buttons, tests)
"""

import asyncio
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Protocol, Union

from pydantic import BaseModel, Field


logger = logging.getLogger(__name__)


class FileSink(Protocol):
    """Anything that can save a finished file."""

    async def save(self, content: bytes, mime_type: str, filename: str) -> None:
        ...


class Download(BaseModel):
    """A file handed to a CollectingSink."""

    content: bytes = Field(description="File bytes")
    mime_type: str = Field(description="MIME type of the file")
    filename: str = Field(description="Download filename")


class CollectingSink:
    """Keeps saved files in memory, in save order."""

    def __init__(self):
        self.downloads: List[Download] = []

    async def save(self, content: bytes, mime_type: str, filename: str) -> None:
        self.downloads.append(
            Download(content=content, mime_type=mime_type, filename=filename)
        )

    @property
    def filenames(self) -> List[str]:
        return [d.filename for d in self.downloads]

    def clear(self) -> None:
        self.downloads.clear()


class DirectorySink:
    """
    Writes saved files into a directory.

    Each file is written to a temporary file in the same directory and then
    moved into place, so a failed save leaves no partial file. Existing files
    with the same name are overwritten.
    """

    def __init__(self, output_dir: Union[str, Path]):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    async def save(self, content: bytes, mime_type: str, filename: str) -> None:
        # Only the final path component is used
        target = self.output_dir / Path(filename).name
        await asyncio.to_thread(self._write, target, content)
        logger.info(f"Saved {filename} ({mime_type}) to {target}")

    def _write(self, target: Path, content: bytes) -> None:
        fd, tmp_name = tempfile.mkstemp(dir=self.output_dir, prefix=f".{target.name}.", suffix=".part")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(content)
            os.replace(tmp_name, target)
        except Exception:
            Path(tmp_name).unlink(missing_ok=True)
            raise
