"""Configuration models for Tasklist CLI."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class AppConfig(BaseModel):
    """Main Tasklist configuration."""

    model_config = {"validate_assignment": True}

    tasks_file: str = Field(..., description="Path of the JSON tasks file")
    timestamp_format: str = Field(
        default="%d/%m/%Y %H:%M:%S", description="strftime format used to display timestamps"
    )
    currency_symbol: str = Field(default="$", description="Prefix shown before costs")
    clear_screen: bool = Field(
        default=True, description="Clear the terminal between interactive actions"
    )

    @field_validator("tasks_file")
    @classmethod
    def validate_tasks_file(cls, v: str) -> str:
        """Reject blank paths."""
        if not v or not v.strip():
            raise ValueError("tasks_file cannot be empty")
        return v.strip()
