"""User model."""
from sqlalchemy import Column, Integer, String
from catalog.data.database.connection import Base


class User(Base):
    """Registered user account."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"
