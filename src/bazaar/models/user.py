from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from bazaar.database.base import Base
import uuid


class User(Base):
    """
    SQLAlchemy model for User.

    The identifier is generated client-side by SQLAlchemy on first flush and is
    never taken from API input; name and email are mutable.
    """
    __tablename__ = "users"

    # Unique identifier for the user (primary key), assigned once at insert
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    # Display name
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False
    )

    # Contact email (not unique: several users may share one)
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False
    )

    def __repr__(self) -> str:
        # Helpful for debugging/logging
        return f"<User(id={self.id!r}, name={self.name!r}, email={self.email!r})>"
