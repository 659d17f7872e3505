"""HTTP transport for GraphQL requests."""

from typing import Any, Dict, Optional

import requests

from ..core.config import LessWrongConfig
from ..core.constants import Constants
from ..core.errors import DeserializationError, ServerError, TransportError
from ..models.envelope import GraphQLEnvelope


class GraphQLTransport:
    """Sends one GraphQL request per call and classifies the outcome."""
    
    def __init__(self, config: LessWrongConfig, session: Optional[requests.Session] = None):
        """Initialize transport; a session is created lazily unless injected."""
        self.config = config
        self._session = session
        self._owns_session = session is None
    
    def _get_session(self) -> requests.Session:
        """Get or create the HTTP session."""
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({
                'User-Agent': self.config.user_agent,
                'Accept': 'application/json'
            })
        return self._session
    
    def close(self) -> None:
        """Close the session if this transport created it."""
        if self._owns_session and self._session is not None:
            self._session.close()
            self._session = None
    
    def execute(self, payload: Dict[str, Any]) -> GraphQLEnvelope:
        """POST a query payload and return the parsed envelope.
        
        Args:
            payload: Dictionary with ``query`` and ``variables`` keys
            
        Returns:
            GraphQLEnvelope with the raw ``data`` payload
            
        Raises:
            TransportError: The request failed before a response arrived
            ServerError: The endpoint returned a non-success status
            DeserializationError: The body is not a GraphQL envelope
        """
        session = self._get_session()
        
        if self.config.debug:
            print(f"POST {self.config.endpoint} variables={payload.get('variables')}")
        
        try:
            response = session.post(
                self.config.endpoint,
                json=payload,
                timeout=self.config.timeout
            )
        except requests.RequestException as e:
            raise TransportError(e) from e
        
        if not 200 <= response.status_code < 300:
            try:
                error_text = response.text
            except Exception:
                error_text = Constants.UNREADABLE_BODY
            raise ServerError(response.status_code, error_text)
        
        try:
            body = response.json()
        except ValueError as e:
            raise DeserializationError(f"invalid JSON: {e}") from e
        
        envelope = self._parse_envelope(body)
        
        if self.config.debug:
            print(f"Response {response.status_code}, {len(envelope.errors)} GraphQL errors")
            for error in envelope.errors:
                print(f"  - {error.get('message', error)}")
        
        return envelope
    
    @staticmethod
    def _parse_envelope(body: Any) -> GraphQLEnvelope:
        """Check the top-level envelope shape."""
        if not isinstance(body, dict):
            raise DeserializationError(f"expected a JSON object, got {type(body).__name__}")
        
        data = body.get('data')
        if data is not None and not isinstance(data, dict):
            raise DeserializationError(f"'data' must be an object, got {type(data).__name__}")
        
        errors = body.get('errors')
        if errors is None:
            errors = []
        elif not isinstance(errors, list):
            raise DeserializationError(f"'errors' must be a list, got {type(errors).__name__}")
        
        return GraphQLEnvelope(
            data=data,
            errors=[error for error in errors if isinstance(error, dict)]
        )
