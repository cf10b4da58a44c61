from __future__ import annotations

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from ..core.constants import MIN_PASSWORD_LENGTH

# Trimmed, non-blank text. Numbers and lists are refused rather than coerced.
Text = Annotated[str, StringConstraints(strict=True, strip_whitespace=True, min_length=1, max_length=255)]


class RegisterPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    username: Text
    email: Text
    password: str = Field(..., strict=True, min_length=MIN_PASSWORD_LENGTH)
    role: Optional[Annotated[str, StringConstraints(strict=True, strip_whitespace=True, min_length=1, max_length=50)]] = None


class LoginPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email: str = Field(..., strict=True)
    password: str = Field(..., strict=True)
