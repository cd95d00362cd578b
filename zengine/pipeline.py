"""Generic staged pipeline: a context runs one stage at a time."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

__all__ = ["StageInformation", "PipelineStage", "PipelineContext"]


@dataclass
class StageInformation:
    """Outcome of running a stage."""

    is_success: bool = True
    error_message: str = ""


class PipelineStage(ABC):
    """One step of a pipeline, linked to the step that follows it."""

    def __init__(self, next_stage: PipelineStage | None = None) -> None:
        self.next_stage = next_stage
        self.information = StageInformation()
        self._context: PipelineContext | None = None

    @property
    def context(self) -> PipelineContext | None:
        return self._context

    @context.setter
    def context(self, value: PipelineContext | None) -> None:
        if value is not None:
            self._context = value

    @abstractmethod
    def run(self, information: Any) -> None:
        """Do this stage's work on the shared pipeline data."""

    def next(self) -> None:
        """Make the following stage the context's current stage."""
        if self._context is not None:
            self._context.update_stage(self.next_stage)

    def has_next(self) -> bool:
        return self.next_stage is not None


class PipelineContext:
    """Holds the stage a pipeline is currently at."""

    def __init__(self, stage: PipelineStage | None = None) -> None:
        self.stage: PipelineStage | None = None
        if stage is not None:
            self.update_stage(stage)

    def update_stage(self, stage: PipelineStage) -> None:
        """Make ``stage`` current and attach it to this context."""
        if stage is None:
            raise ValueError("a pipeline stage is required")
        self.stage = stage
        stage.context = self