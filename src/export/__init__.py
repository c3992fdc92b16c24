"""
Export module for claim document downloads.

Provides DOCX serialization, zip bundling, and download targets.

Classes:
    DocxExporter: Export rendered documents to DOCX
    ZipArchiver: Bundle several files into one zip archive
    FileSink: Protocol for save-file targets
    DirectorySink: Save files into a local directory
    CollectingSink: Keep saved files in memory
    ExportFormat: Enum of supported formats (DOCX, ZIP)
    ExportResult: Result model with bytes and filename
"""

from src.export.models import ExportFormat, ExportResult
from src.export.docx import DocxExporter
from src.export.archive import ZipArchiver
from src.export.download import CollectingSink, DirectorySink, Download, FileSink

__all__ = [
    "ExportFormat",
    "ExportResult",
    "DocxExporter",
    "ZipArchiver",
    "FileSink",
    "DirectorySink",
    "CollectingSink",
    "Download",
]
