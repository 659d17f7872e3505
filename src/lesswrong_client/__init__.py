"""Client for the LessWrong GraphQL API."""

from .clients.lesswrong_client import LessWrongClient
from .core.config import LessWrongConfig
from .core.errors import (
    LessWrongError, TransportError, ServerError, DeserializationError,
    NotFoundError, MalformedResponseError, MalformedCommentError
)
from .models.lesswrong_models import Post, Comment

__all__ = [
    'LessWrongClient', 'LessWrongConfig', 'Post', 'Comment',
    'LessWrongError', 'TransportError', 'ServerError', 'DeserializationError',
    'NotFoundError', 'MalformedResponseError', 'MalformedCommentError'
]
