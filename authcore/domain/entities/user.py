from typing import Optional  # For optional fields

from sqlalchemy import text  # For SQL expressions
from sqlmodel import Column, Field, Index, SQLModel, String  # For ORM and table definition


class User(SQLModel, table=True):
    """Represents a User entity as seen by the authentication core.

    The user store owns this record; the token and OTP services only read it
    and overwrite the `otp` field.

    Attributes:
        id: The unique identifier for the user (primary key).
        email: A unique, case-insensitive email address.
        otp: The single currently-valid one-time code, if any. Writing a new
            code replaces the previous one; no history is kept.
    """

    __tablename__ = "users"

    id: Optional[int] = Field(
        default=None,  # Auto-incremented by database
        primary_key=True,
        description="The unique identifier for the user.",
    )
    email: str = Field(
        sa_column=Column(String, unique=True, index=True, nullable=False),
        description="Unique, case-insensitive email address.",
    )
    otp: Optional[str] = Field(
        default=None,
        max_length=6,
        description="The outstanding one-time password, overwritten on each issuance.",
    )

    __table_args__ = (
        Index("ix_users_email_lower", text("lower(email)")),  # Case-insensitive index
        {"extend_existing": True},
    )
