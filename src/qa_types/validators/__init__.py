from .config_validators import to_uppercase, to_lowercase, strip_trailing_slash

__all__ = ["to_uppercase", "to_lowercase", "strip_trailing_slash"]
