from typing import Iterable, Optional


def starts_with(value: Optional[str], prefixes: Iterable[str]) -> bool:
    """Return True if value starts with any of the given prefixes."""
    if not value:
        return False
    return any(value.startswith(prefix) for prefix in prefixes)
