from datetime import datetime
from typing import Optional


class AutocommentError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(AutocommentError):
    pass


class TransportError(AutocommentError):
    pass


class SourceError(TransportError):
    pass


class SourceAuthenticationError(SourceError):
    pass


class SourceRateLimitError(SourceError):
    def __init__(self, message: str, retry_after: datetime) -> None:
        self.retry_after = retry_after
        super().__init__(message)


class SourceNotFoundError(SourceError):
    def __init__(self, message: str, resource: str) -> None:
        self.resource = resource
        super().__init__(message)


class TrackerError(TransportError):
    def __init__(
        self,
        message: str,
        issue_key: str,
        status_code: Optional[int] = None,
    ) -> None:
        self.issue_key = issue_key
        self.status_code = status_code
        super().__init__(message)


class TrackerAuthenticationError(TrackerError):
    pass


class IssueNotFoundError(TrackerError):
    pass


class DocumentError(AutocommentError):
    pass


class MissingDescriptionError(DocumentError):
    def __init__(self, pr_url: str) -> None:
        self.pr_url = pr_url
        super().__init__(f"PR {pr_url} does not have a description!")


class SerializationError(DocumentError):
    pass
