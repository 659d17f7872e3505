"""API clients."""

from .graphql_transport import GraphQLTransport
from .lesswrong_client import LessWrongClient

__all__ = ['GraphQLTransport', 'LessWrongClient']
