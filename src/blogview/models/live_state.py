"""LivePanelState model for interactive code panels."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class LiveStatus(str, Enum):
    """Enum for live panel states."""

    IDLE = "idle"
    EVALUATING = "evaluating"
    SHOWN = "shown"
    ERRORED = "errored"


class EvaluationResult(BaseModel):
    """Outcome of evaluating one snippet."""

    ok: bool = Field(..., description="True when the snippet ran to completion")
    output: Optional[str] = Field(default=None, description="Rendered output on success")
    error: Optional[str] = Field(default=None, description="Error message on failure")

    model_config = {"frozen": True}

    @classmethod
    def success(cls, output: str) -> "EvaluationResult":
        return cls(ok=True, output=output)

    @classmethod
    def failure(cls, error: str) -> "EvaluationResult":
        return cls(ok=False, error=error)


class LivePanelState(BaseModel):
    """Editor, error and preview state of one mounted live panel."""

    status: LiveStatus = Field(default=LiveStatus.IDLE, description="Current state machine state")

    text: str = Field(..., description="Current editor text")

    output: Optional[str] = Field(
        default=None,
        description="Rendered output of the most recent successful evaluation"
    )

    error: Optional[str] = Field(
        default=None,
        description="Message of the most recent failed evaluation"
    )

    evaluations: int = Field(
        default=0,
        ge=0,
        description="Number of evaluation results applied to this panel"
    )

    model_config = {"frozen": False}  # Mutated as the user edits

    @property
    def error_display(self) -> str:
        """Text for the error region."""
        return self.error or ""

    @property
    def preview_display(self) -> str:
        """Text for the preview region."""
        return self.output or ""
