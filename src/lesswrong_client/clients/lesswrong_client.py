"""LessWrong API client."""

from typing import Dict, Optional

import requests

from ..core.config import LessWrongConfig
from ..models.lesswrong_models import Comment, Post
from ..services.response_mapper import map_comments, map_post
from .graphql_transport import GraphQLTransport
from .queries import build_comments_query, build_post_query


class LessWrongClient:
    """LessWrong GraphQL API client wrapper.
    
    Holds nothing but the transport, so one instance can serve any number of
    independent calls.
    """
    
    def __init__(self, config: Optional[LessWrongConfig] = None,
                 session: Optional[requests.Session] = None):
        """Initialize LessWrong client."""
        self.config = config or LessWrongConfig()
        self.config.validate()
        self._transport = GraphQLTransport(self.config, session)
    
    def __enter__(self) -> 'LessWrongClient':
        return self
    
    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
    
    def close(self) -> None:
        """Release the HTTP session if the client created it."""
        self._transport.close()
    
    def get_post(self, post_id: str) -> Post:
        """Fetch a single post.
        
        Args:
            post_id: Upstream post identifier
            
        Returns:
            Fully populated Post
            
        Raises:
            NotFoundError: No post exists with this id
            MalformedResponseError: A mandatory field was missing upstream
            TransportError, ServerError, DeserializationError: Request failures
        """
        if not post_id:
            raise ValueError("post_id is required")
        
        envelope = self._transport.execute(build_post_query(post_id))
        post = map_post(envelope, post_id)
        
        if self.config.debug:
            print(f"Fetched post '{post.title[:40]}' by {post.author} ({post.word_count} words)")
        
        return post
    
    def get_comments(self, post_id: str, limit: Optional[int] = None,
                     skip_malformed: bool = False) -> Dict[str, Comment]:
        """Fetch the top comments of a post.
        
        Args:
            post_id: Upstream post identifier
            limit: Maximum number of comments requested (defaults to config)
            skip_malformed: Skip comments missing mandatory fields instead of failing
            
        Returns:
            Dictionary mapping comment ids to Comment objects
        """
        if not post_id:
            raise ValueError("post_id is required")
        if limit is None:
            limit = self.config.comment_limit
        if limit < 1:
            raise ValueError("limit must be at least 1")
        
        envelope = self._transport.execute(build_comments_query(post_id, limit))
        comments = map_comments(envelope, skip_malformed=skip_malformed)
        
        if self.config.debug:
            replies = sum(1 for c in comments.values() if not c.is_top_level)
            print(f"Fetched {len(comments)} comments for {post_id} ({replies} replies)")
        
        return comments
