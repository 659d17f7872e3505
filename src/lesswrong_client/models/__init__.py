"""Data models for the client."""

from .lesswrong_models import Post, Comment
from .envelope import GraphQLEnvelope

__all__ = ['Post', 'Comment', 'GraphQLEnvelope']
