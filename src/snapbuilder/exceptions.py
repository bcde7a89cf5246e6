class SnapBuilderError(Exception):
    """Base exception for all application-specific errors."""

    pass


# --- 1. Errors related to loading and parsing the configuration file ---
class ConfigurationError(SnapBuilderError):
    """Base class for errors encountered while finding, reading, or parsing config files."""

    pass


class ConfigFileMissingError(ConfigurationError):
    """Raised when the main configuration file cannot be found."""

    pass


class ConfigParsingError(ConfigurationError):
    """Raised when a YAML configuration file is syntactically incorrect."""

    pass


class ConfigValidationError(ConfigurationError):
    """Raised when the configuration fails structural validation (e.g., Pydantic)."""

    pass


# --- 2. Errors raised while talking to the cloud provider ---
class ProviderError(SnapBuilderError):
    """Base class for failures of a provider API call."""

    pass


class ProviderTransportError(ProviderError):
    """Raised when the provider cannot be reached (connection, TLS, timeout)."""

    pass


class ProviderAPIError(ProviderError):
    """Raised when the provider answers with a non-2xx status."""

    def __init__(self, status_code: int, code: str | None = None, message: str | None = None):
        self.status_code = status_code
        self.code = code
        self.message = message
        detail = f"{message} ({code})" if code else (message or "no error details")
        super().__init__(f"provider returned HTTP {status_code}: {detail}")


class ProviderDecodeError(ProviderError):
    """Raised when a provider response body is not the expected JSON document."""

    pass


# --- 3. Errors that halt a pipeline step ---
class StepError(SnapBuilderError):
    """Base class for errors recorded by a pipeline step before halting."""

    pass


class PreValidateError(StepError):
    """Raised when the existing images could not be listed."""

    pass


class SnapshotNameCollisionError(StepError):
    """Raised when the desired snapshot name is already taken by a snapshot."""

    def __init__(self, snapshot_name: str, image_id: int):
        self.snapshot_name = snapshot_name
        self.image_id = image_id
        super().__init__(
            f"Error: snapshot name: '{snapshot_name}' is used by existing snapshot "
            f"with ID {image_id}. Use the force flag to delete it."
        )
