def to_uppercase(value: str | None) -> str | None:
    """
    Converts a string to uppercase if it's not None.
    """
    if value is None:
        return None
    return value.strip().upper()

def to_lowercase(value: str | None) -> str | None:
    """
    Converts a string to lowercase if it's not None.
    """
    if value is None:
        return None
    return value.strip().lower()

def strip_trailing_slash(value: str | None) -> str | None:
    """
    Remove trailing slashes from a URL so callers can safely append paths ("/login").
    Empty strings are treated as "not configured" and returned as None.
    """
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    return value.rstrip("/")
