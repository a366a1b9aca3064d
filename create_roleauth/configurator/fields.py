"""Prompt descriptors for the ``.env`` configuration questions.

The order of :data:`ENV_FIELDS` is the order the user is asked in, and the
order keys are written to ``backend/.env``.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DisplayMode(str, Enum):
    """How the user's input is echoed while typing."""

    TEXT = "text"
    MASKED = "masked"


class PromptField(BaseModel):
    """One configuration question."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Environment variable name")
    message: str = Field(..., description="Question shown to the user; may span several lines")
    default: Optional[str] = Field(default=None, description="Value used on empty input")
    mode: DisplayMode = Field(default=DisplayMode.TEXT)

    @property
    def masked(self) -> bool:
        return self.mode is DisplayMode.MASKED


ENV_FIELDS: tuple[PromptField, ...] = (
    PromptField(
        key="PORT",
        message="What port should your backend run on?",
        default="5000",
    ),
    PromptField(
        key="MONGO_URI",
        message=(
            "What is your MongoDB URI?\n"
            "(Create one here: https://www.mongodb.com/atlas/database)"
        ),
        default="mongodb://localhost:27017/mern-auth",
    ),
    PromptField(
        key="JWT_SECRET",
        message=(
            "What should we use as your JWT secret?\n"
            "(Generate: https://generate-random.org/string)"
        ),
        default="your_jwt_secret",
    ),
    PromptField(
        key="EMAIL_HOST",
        message="What is your email SMTP host?",
        default="smtp.gmail.com",
    ),
    PromptField(
        key="EMAIL_USER",
        message="What is your email username?",
        default="your_email@example.com",
    ),
    PromptField(
        key="EMAIL_PASS",
        message="What is your email password?",
        mode=DisplayMode.MASKED,
    ),
    PromptField(
        key="GOOGLE_CLIENT_ID",
        message=(
            "What is your Google Client ID?\n"
            "(https://console.cloud.google.com/apis/credentials)"
        ),
    ),
    PromptField(
        key="GOOGLE_CLIENT_SECRET",
        message="What is your Google Client Secret?",
    ),
    PromptField(
        key="GOOGLE_CALLBACK_URL",
        message="What is your Google Callback URL?",
        default="http://localhost:5000/api/auth/google/callback",
    ),
    PromptField(
        key="REACT_APP_API_BASE_URL",
        message="What is your React API base URL?",
        default="http://localhost:5000",
    ),
)
