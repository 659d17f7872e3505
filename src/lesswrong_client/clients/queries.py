"""GraphQL documents and variable builders for the LessWrong API."""

from typing import Any, Dict

from ..core.constants import Constants


POST_QUERY = """
query PostQuery($id: String) {
  post(input: {selector: {_id: $id}}) {
    result {
      _id
      title
      slug
      pageUrl
      postedAt
      baseScore
      wordCount
      htmlBody
      author
      user {
        displayName
      }
      contents {
        markdown
      }
    }
  }
}
"""

COMMENTS_QUERY = """
query CommentsQuery($terms: JSON) {
  comments(input: {terms: $terms}) {
    results {
      _id
      parentCommentId
      author
      user {
        displayName
      }
      postedAt
      pageUrl
      baseScore
      voteCount
      htmlBody
      deleted
      contents {
        markdown
      }
    }
  }
}
"""


def build_post_query(post_id: str) -> Dict[str, Any]:
    """Build the request body for a single post lookup."""
    return {
        'query': POST_QUERY,
        'variables': {'id': post_id}
    }


def build_comments_query(post_id: str, limit: int) -> Dict[str, Any]:
    """Build the request body for a post's top comments."""
    return {
        'query': COMMENTS_QUERY,
        'variables': {
            'terms': {
                'view': Constants.COMMENTS_VIEW,
                'postId': post_id,
                'limit': limit
            }
        }
    }
