import re
from typing import MutableMapping, Optional, Tuple

TAG_RE = re.compile('<.*?>')


def sanitize_input(text: Optional[str]) -> str:
    """Removes HTML tags to prevent XSS and strips whitespace."""
    if not text:
        return ""
    return re.sub(TAG_RE, '', text).strip()


def pop_messages(client_state: MutableMapping) -> Tuple[Optional[str], Optional[str]]:
    """Flash messages left by the previous request, shown once."""
    return client_state.pop("error", None), client_state.pop("success", None)
