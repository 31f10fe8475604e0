from .base import Base
from .session import build_engine, build_sessionmaker, create_schema

__all__ = ["Base", "build_engine", "build_sessionmaker", "create_schema"]
