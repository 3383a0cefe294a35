"""Custom exception hierarchy for SrtStudio."""


class SrtStudioError(Exception):
    """Base exception for all SrtStudio errors."""

    def __init__(self, message, error_code=None, details=None, original_error=None):
        self.message = message
        self.error_code = error_code or "UNKNOWN"
        self.details = details or {}
        self.original_error = original_error

        full_message = f"[{self.error_code}] {message}"
        if details:
            full_message += f"\nDetails: {details}"
        if original_error:
            full_message += f"\nCaused by: {original_error}"

        super().__init__(full_message)

    def to_dict(self):
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "original_error": str(self.original_error) if self.original_error else None,
        }


class EditorError(SrtStudioError):
    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or "EDIT_ERR", details, original_error)


class InvalidInputFileError(EditorError):
    """Raised for files rejected before any parsing attempt (wrong extension, unreadable)."""

    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or "INP_ERR", details, original_error)


class EmptyDocumentError(EditorError):
    """Raised when a file yields no subtitle entries."""

    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or "EMPTY_DOC", details, original_error)


class StructuralEditError(EditorError):
    """Raised when an insert/delete violates a document constraint. The document is unchanged."""

    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or "STRUCT_ERR", details, original_error)


class SearchPatternError(EditorError):
    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or "SEARCH_ERR", details, original_error)


class PersistenceError(EditorError):
    def __init__(self, message, error_code=None, details=None, original_error=None):
        super().__init__(message, error_code or "PERSIST_ERR", details, original_error)
