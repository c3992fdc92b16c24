"""
Archive bundling for multi-document downloads.
"""

import io
import logging
import zipfile
from typing import Mapping


logger = logging.getLogger(__name__)


class ZipArchiver:
    """Bundles generated files into a single deflated zip archive."""

    def bundle(self, files: Mapping[str, bytes]) -> bytes:
        """
        Combine files into one archive.

        Args:
            files: Mapping of entry filename to file bytes, written in order

        Returns:
            Archive bytes

        Raises:
            ValueError: If files is empty
        """
        if not files:
            raise ValueError("Cannot build an archive with no files")

        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for filename, content in files.items():
                archive.writestr(filename, content)

        logger.debug(f"Bundled {len(files)} files into archive")
        return buffer.getvalue()
