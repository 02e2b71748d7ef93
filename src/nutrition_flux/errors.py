"""Named failures raised around the encoder."""


class ExportError(Exception):
    """Base class for failures that abort an export run."""


class AuthenticationFailed(ExportError):
    """Credentials are missing or were rejected by the export endpoint."""


class FetchFailed(ExportError):
    """Servings could not be downloaded, read or parsed."""


class InvalidDateRange(ExportError):
    """The requested dates are malformed or out of order."""


class ConfigurationError(ExportError):
    """The application settings cannot produce a working export."""


class OutputFailed(ExportError):
    """Encoded lines could not be written to the requested destination."""
