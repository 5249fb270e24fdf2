"""
Exceptions raised while loading workbooks.

The analysis functions themselves never raise; only the loader and the
command line use these.
"""

from typing import Any, Dict, Optional


class SheetInsightsError(Exception):
    """Base exception for the package."""

    def __init__(
        self,
        message: str,
        error_type: str = "sheet_insights_error",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error_type = error_type
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "detail": self.message,
            "type": self.error_type,
            "details": self.details,
        }


class WorkbookNotFoundError(SheetInsightsError):
    """The file to load does not exist."""

    def __init__(self, path: str):
        super().__init__(
            message=f"File not found: {path}",
            error_type="not_found",
            details={"path": path},
        )


class UnsupportedFileTypeError(SheetInsightsError):
    """The file extension is not one the loader can decode."""

    def __init__(self, path: str, extension: str):
        super().__init__(
            message=(
                f"Unsupported file type '{extension or '(none)'}'. "
                "Please upload .xlsx, .xlsm or .csv files."
            ),
            error_type="unsupported_file_type",
            details={"path": path, "extension": extension},
        )


class FileTooLargeError(SheetInsightsError):
    """The file exceeds the configured upload size."""

    def __init__(self, path: str, size_bytes: int, limit_bytes: int):
        super().__init__(
            message=f"File too large: {size_bytes} bytes (limit {limit_bytes} bytes)",
            error_type="file_too_large",
            details={"path": path, "size_bytes": size_bytes, "limit_bytes": limit_bytes},
        )


class WorkbookDecodeError(SheetInsightsError):
    """The decoder rejected the file contents."""

    def __init__(self, path: str, message: str):
        super().__init__(
            message=f"Failed to read {path}: {message}",
            error_type="decode_error",
            details={"path": path},
        )
