"""Error categories and exceptions surfaced to the dashboard."""

from enum import Enum

from .constants import ErrorMessages


class ErrorCategory(str, Enum):
    """Categories of fetch errors for diagnostics."""

    URL_INVALID = "URL_INVALID"
    API_NOT_FOUND = "API_NOT_FOUND"
    API_PERMISSION_DENIED = "API_PERMISSION_DENIED"
    NETWORK_ERROR = "NETWORK_ERROR"


class SentiTubeError(Exception):
    """Base error carrying a message suitable for an error banner."""

    category = ErrorCategory.NETWORK_ERROR

    def __init__(self, message: str, user_message: str = None):
        super().__init__(message)
        self.user_message = user_message or message


class InvalidVideoUrlError(SentiTubeError):
    """The submitted URL has no recognizable video identifier."""

    category = ErrorCategory.URL_INVALID

    def __init__(self, url: str):
        super().__init__(f"Not a YouTube video URL: {url!r}", ErrorMessages.INVALID_URL)
        self.url = url


class VideoNotFoundError(SentiTubeError):
    """The API returned no video for the identifier."""

    category = ErrorCategory.API_NOT_FOUND

    def __init__(self, video_id: str):
        super().__init__(f"Video not found: {video_id}", ErrorMessages.NOT_FOUND)
        self.video_id = video_id


class ApiKeyError(SentiTubeError):
    """The YouTube API key is missing or was rejected."""

    category = ErrorCategory.API_PERMISSION_DENIED

    def __init__(self, message: str = "YouTube API key rejected"):
        super().__init__(message, ErrorMessages.API_KEY)


class FetchNetworkError(SentiTubeError):
    """Any other transport, HTTP or payload failure."""

    category = ErrorCategory.NETWORK_ERROR

    def __init__(self, message: str):
        super().__init__(message, ErrorMessages.NETWORK.format(message=message or "Unknown error"))
