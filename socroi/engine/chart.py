"""Donut chart slice ordering and angles for a value breakdown.

Slices follow the breakdown order. The first starts at 12 o'clock (-90
degrees) and angles grow clockwise in screen coordinates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from socroi.engine.result import ValueBreakdown

START_ANGLE = -90.0

DEFAULT_PALETTE: tuple[str, ...] = (
    "#FF6B6B",
    "#4ECDC4",
    "#45B7D1",
    "#96CEB4",
    "#FFEAA7",
    "#DDA0DD",
    "#98D8C8",
    "#F7DC6F",
    "#FF9FF3",
    "#54A0FF",
)


@dataclass(frozen=True)
class DonutSlice:
    name: str
    value: float
    color: str
    description: str
    percentage: float
    start_angle: float
    end_angle: float

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle


def color_for_index(index: int, palette: Sequence[str] = DEFAULT_PALETTE) -> str:
    return palette[index % len(palette)]


def donut_slices(
    breakdown: ValueBreakdown,
    palette: Sequence[str] = DEFAULT_PALETTE,
) -> list[DonutSlice]:
    """Lay out one slice per category; an all-zero breakdown gives empty slices."""
    if not palette:
        raise ValueError("palette must contain at least one color")

    total = breakdown.total_value
    slices: list[DonutSlice] = []
    angle = START_ANGLE
    for index, category in enumerate(breakdown.categories):
        sweep = category.value / total * 360 if total else 0.0
        slices.append(
            DonutSlice(
                name=category.name,
                value=category.value,
                color=color_for_index(index, palette),
                description=category.description,
                percentage=category.percentage,
                start_angle=angle,
                end_angle=angle + sweep,
            )
        )
        angle += sweep
    return slices
