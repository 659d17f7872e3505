"""GraphQL response envelope."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class GraphQLEnvelope:
    """Top-level GraphQL response: the ``data`` payload plus any ``errors``.
    
    Only ``data`` is interpreted by the mappers.
    """
    data: Optional[Dict[str, Any]] = None
    errors: List[Dict[str, Any]] = field(default_factory=list)
