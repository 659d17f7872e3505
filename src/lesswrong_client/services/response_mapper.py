"""Map GraphQL envelopes onto domain records.

The post mapper is strict: every mandatory field is checked in turn and the
first absent one is reported by its dotted path. The comments mapper filters
undisplayable comments silently, defaults the author to "anonymous", and
treats any other missing field as fatal for the batch unless the caller asks
to skip such comments.
"""

from typing import Any, Dict, Optional, TypeVar

from ..core.constants import Constants
from ..core.errors import MalformedCommentError, MalformedResponseError, NotFoundError
from ..core.validators import FieldValidator
from ..models.envelope import GraphQLEnvelope
from ..models.lesswrong_models import Comment, Post

T = TypeVar('T')


def _require(value: Optional[T], path: str) -> T:
    if value is None:
        raise MalformedResponseError(path)
    return value


def _resolve_author(raw: Any) -> Optional[str]:
    """Explicit author field, else the display name of the user reference."""
    author = FieldValidator.as_str(FieldValidator.get(raw, 'author'))
    if author is None:
        user = FieldValidator.get(raw, 'user')
        author = FieldValidator.as_str(FieldValidator.get(user, 'displayName'))
    return author


def map_post(envelope: GraphQLEnvelope, post_id: Optional[str] = None) -> Post:
    """Turn a post query envelope into a Post.
    
    Args:
        envelope: Parsed response of the post query
        post_id: Requested id, only used to annotate NotFoundError
        
    Raises:
        NotFoundError: The post lookup came back empty
        MalformedResponseError: A mandatory field was absent or malformed
    """
    if envelope.data is None:
        raise MalformedResponseError('data')
    
    lookup = envelope.data.get('post')
    if lookup is None:
        raise NotFoundError(post_id)
    
    post_data = FieldValidator.get(lookup, 'result')
    if not isinstance(post_data, dict):
        raise MalformedResponseError('post')
    
    contents = post_data.get('contents')
    if not isinstance(contents, dict):
        raise MalformedResponseError('post.contents')
    
    return Post(
        id=_require(FieldValidator.as_str(post_data.get('_id')), 'post.id'),
        title=_require(FieldValidator.as_str(post_data.get('title')), 'post.title'),
        author=_require(_resolve_author(post_data), 'post.author'),
        posted_at=_require(FieldValidator.parse_timestamp(post_data.get('postedAt')), 'post.posted_at'),
        slug=_require(FieldValidator.as_str(post_data.get('slug')), 'post.slug'),
        page_url=post_data.get('pageUrl'),
        base_score=_require(FieldValidator.as_float(post_data.get('baseScore')), 'post.base_score'),
        word_count=_require(FieldValidator.as_int(post_data.get('wordCount')), 'post.word_count'),
        content_markdown=_require(FieldValidator.as_str(contents.get('markdown')), 'post.contents.markdown'),
        content_html=_require(FieldValidator.as_str(post_data.get('htmlBody')), 'post.html_body')
    )


def _map_comment(raw: Dict[str, Any]) -> Comment:
    """Build one Comment from a raw entry that already passed filtering."""
    page_url = FieldValidator.as_str(raw.get('pageUrl'))
    if page_url is None:
        raise MalformedCommentError('comment.page_url')
    
    def require(value: Optional[T], path: str) -> T:
        if value is None:
            raise MalformedCommentError(path, page_url)
        return value
    
    content_markdown = require(
        FieldValidator.as_str(FieldValidator.get(raw.get('contents'), 'markdown')),
        'comment.contents.markdown'
    )
    author = _resolve_author(raw)
    if author is None:
        author = Constants.ANONYMOUS_AUTHOR
    
    return Comment(
        id=require(FieldValidator.as_str(raw.get('_id')), 'comment.id'),
        parent_comment_id=FieldValidator.as_str(raw.get('parentCommentId')),
        author=author,
        posted_at=require(FieldValidator.parse_timestamp(raw.get('postedAt')), 'comment.posted_at'),
        base_score=require(FieldValidator.as_float(raw.get('baseScore')), 'comment.base_score'),
        vote_count=require(FieldValidator.as_float(raw.get('voteCount')), 'comment.vote_count'),
        content_html=require(FieldValidator.as_str(raw.get('htmlBody')), 'comment.html_body'),
        content_markdown=content_markdown,
        page_url=page_url
    )


def map_comments(envelope: GraphQLEnvelope, skip_malformed: bool = False) -> Dict[str, Comment]:
    """Turn a comments query envelope into a mapping of comment id to Comment.
    
    Deleted comments and comments without rendered HTML are dropped. With
    ``skip_malformed`` a displayable comment missing a mandatory field is
    skipped with a printed warning instead of failing the whole batch.
    
    Raises:
        MalformedResponseError: The envelope lacks data, comments or results
        MalformedCommentError: A displayable comment lacked a mandatory field
    """
    if envelope.data is None:
        raise MalformedResponseError('data')
    
    container = envelope.data.get('comments')
    if not isinstance(container, dict):
        raise MalformedResponseError('comments')
    
    results = container.get('results')
    if not isinstance(results, list):
        raise MalformedResponseError('comments.results')
    
    comments: Dict[str, Comment] = {}
    for raw in results:
        # null slots and filtered comments are expected, not errors
        if not raw or not FieldValidator.is_displayable_comment(raw):
            continue
        
        try:
            comment = _map_comment(raw)
        except MalformedCommentError as e:
            if not skip_malformed:
                raise
            print(f"Skipping malformed comment: {e}")
            continue
        
        comments[comment.id] = comment
    
    return comments
