from autocomment.core.exceptions.errors import (
    AutocommentError,
    ConfigurationError,
    DocumentError,
    IssueNotFoundError,
    MissingDescriptionError,
    SerializationError,
    SourceAuthenticationError,
    SourceError,
    SourceNotFoundError,
    SourceRateLimitError,
    TrackerAuthenticationError,
    TrackerError,
    TransportError,
)

__all__ = [
    "AutocommentError",
    "ConfigurationError",
    "TransportError",
    "SourceError",
    "SourceAuthenticationError",
    "SourceRateLimitError",
    "SourceNotFoundError",
    "TrackerError",
    "TrackerAuthenticationError",
    "IssueNotFoundError",
    "DocumentError",
    "MissingDescriptionError",
    "SerializationError",
]
