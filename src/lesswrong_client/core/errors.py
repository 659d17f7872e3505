"""Exception hierarchy for the LessWrong client."""

from typing import Optional


class LessWrongError(Exception):
    """Base class for every error raised by the client."""


class TransportError(LessWrongError):
    """The request never produced an HTTP response (connection, TLS, timeout)."""
    
    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"HTTP request failed: {cause}")


class ServerError(LessWrongError):
    """The endpoint answered with a non-success status."""
    
    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Server error: Status {status_code} - {body}")


class DeserializationError(LessWrongError):
    """The response body did not match the GraphQL envelope shape."""
    
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Failed to decode response: {reason}")


class NotFoundError(LessWrongError):
    """The requested post does not exist upstream."""
    
    def __init__(self, post_id: Optional[str] = None):
        self.post_id = post_id
        super().__init__("Post not found" if post_id is None else f"Post not found: {post_id}")


class MalformedResponseError(LessWrongError):
    """The envelope parsed, but an expected field was absent or had the wrong shape.
    
    ``field`` holds the dotted path of the offending field, e.g. ``post.title``.
    """
    
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Malformatted response: missing/malformatted field {field}")


class MalformedCommentError(MalformedResponseError):
    """A displayable comment lacked one of its mandatory fields."""
    
    def __init__(self, field: str, page_url: Optional[str] = None):
        super().__init__(field)
        self.page_url = page_url
        if page_url:
            self.args = (f"{self.args[0]} for '{page_url}'",)
