"""Constants used throughout the client."""


class Constants:
    """Client constants."""
    
    # Endpoint
    GRAPHQL_URL = "https://www.lesswrong.com/graphql"
    USER_AGENT = "lesswrong-client"
    
    # Comments query
    COMMENTS_VIEW = "postCommentsTop"
    DEFAULT_COMMENT_LIMIT = 100
    
    # Field resolution
    ANONYMOUS_AUTHOR = "anonymous"
    
    # Placeholder used when a failed response body cannot be read
    UNREADABLE_BODY = "Error reading response text"
    
    # Timeouts
    REQUEST_TIMEOUT = 30  # seconds
