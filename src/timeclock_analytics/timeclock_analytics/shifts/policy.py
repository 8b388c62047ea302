from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from ..core.constants import CUSTOM_SHIFT_NAME, MORNING_CUTOFF_HOUR
from .model import AFTERNOON, MORNING, Shift


@dataclass(frozen=True)
class ShiftTemplate:
    """A shift that applies when the first clock-in happens before ``before_hour``.

    ``before_hour=None`` marks the fallback template.
    """

    shift: Shift
    before_hour: Optional[int] = None

    def matches(self, first_in: Optional[datetime]) -> bool:
        if self.before_hour is None:
            return True
        return first_in is not None and first_in.hour < self.before_hour


DEFAULT_TEMPLATES: tuple[ShiftTemplate, ...] = (
    ShiftTemplate(MORNING, before_hour=MORNING_CUTOFF_HOUR),
    ShiftTemplate(AFTERNOON),
)


class ShiftResolutionPolicy(ABC):
    """Strategy Pattern: decide which shift a day is measured against."""

    @abstractmethod
    def resolve(self, *, first_in: Optional[datetime], custom: Optional[Shift] = None) -> Shift:
        raise NotImplementedError


class TemplateShiftPolicy(ShiftResolutionPolicy):
    """Custom override when complete, otherwise the first matching template."""

    def __init__(self, templates: Sequence[ShiftTemplate] = DEFAULT_TEMPLATES):
        if not templates:
            raise ValueError("at least one shift template is required")
        self._templates = tuple(templates)

    def resolve(self, *, first_in: Optional[datetime], custom: Optional[Shift] = None) -> Shift:
        if custom is not None and custom.is_complete:
            return custom.renamed(CUSTOM_SHIFT_NAME)

        for template in self._templates:
            if template.matches(first_in):
                return template.shift
        # No fallback in the table: the last template stands in for it.
        return self._templates[-1].shift
