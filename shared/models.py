"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    This model is populated from access-token claims and made available
    to route handlers via dependency injection.
    """

    id: str = Field(..., description="User ID (hex ObjectId)")
    email: str = Field(..., description="User's email address")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",  # Ignore extra claims
    }
