"""Field coercion helpers for loosely-typed GraphQL payloads."""

import re
from datetime import datetime
from typing import Any, Optional

import pytz

# fractional seconds, padded or cut to the six digits fromisoformat needs
_FRACTION = re.compile(r"(?<=:\d\d)\.(\d+)")


class FieldValidator:
    """Utility class turning raw JSON values into strict Python types.
    
    Every coercion returns ``None`` when the value is absent or has the wrong
    shape, leaving the decision of what that means to the caller.
    """
    
    @staticmethod
    def get(container: Any, key: str) -> Any:
        """Read a key from a JSON object, tolerating non-object containers."""
        if isinstance(container, dict):
            return container.get(key)
        return None
    
    @staticmethod
    def as_str(value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None
    
    @staticmethod
    def as_float(value: Any) -> Optional[float]:
        # bool is an int subclass, but a flag is never a score
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        return float(value)
    
    @staticmethod
    def as_int(value: Any) -> Optional[int]:
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return None
    
    @staticmethod
    def parse_timestamp(value: Any) -> Optional[datetime]:
        """Parse an ISO-8601 timestamp and normalize it to UTC.
        
        Upstream sends e.g. ``2006-01-01T08:00:05.370Z``; naive values are
        taken to already be UTC.
        """
        if not isinstance(value, str) or not value:
            return None
        text = value.strip()
        if text.endswith(('Z', 'z')):
            text = text[:-1] + '+00:00'
        text = _FRACTION.sub(lambda m: '.' + m.group(1)[:6].ljust(6, '0'), text, count=1)
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
        if parsed.tzinfo is None:
            return pytz.utc.localize(parsed)
        return parsed.astimezone(pytz.utc)
    
    @staticmethod
    def is_displayable_comment(raw: Any) -> bool:
        """Check that a raw comment is not deleted and has rendered HTML."""
        if not isinstance(raw, dict):
            return False
        if raw.get('deleted') is True:
            return False
        html_body = raw.get('htmlBody')
        return isinstance(html_body, str) and html_body != ''
