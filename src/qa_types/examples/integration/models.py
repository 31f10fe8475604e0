from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from qa_types.database.base import Base


class User(Base):
    """
    A user that can be looked up by its integer identifier.
    """
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Display name (must be unique and non-null)
    name: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        index=True,
        nullable=False
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id!r}, name={self.name!r})>"
