from .calculator import add

__all__ = ["add"]
