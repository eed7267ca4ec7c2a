"""Docking ports and their capture sequence."""

from __future__ import annotations

import enum
import weakref
from typing import TYPE_CHECKING, Optional

from deepspace.linalg import Vec3d

if TYPE_CHECKING:
    from deepspace.vessel import Vessel


class DockingState(enum.Enum):
    OPEN = "open"
    APPROACH = "approach"
    SOFT_CAPTURE = "soft_capture"
    HARD_DOCK = "hard_dock"


class DockingPort:
    """A port that goes from open through soft capture to a hard dock."""

    SOFT_CAPTURE_VELOCITY = 0.5
    HARD_DOCK_VELOCITY = 0.1
    HARD_DOCK_ANGLE_DEG = 5.0
    CAPTURE_RANGE = 10.0

    def __init__(self, name: str, local_position: Vec3d, local_direction: Vec3d):
        self.name = name
        self.local_position = local_position
        self.local_direction = local_direction.normalized()
        self.state = DockingState.OPEN
        self._docked_vessel: Optional[weakref.ReferenceType] = None

    def __repr__(self) -> str:
        return f"DockingPort({self.name!r}, state={self.state.name})"

    @property
    def docked_vessel(self) -> Optional[Vessel]:
        """The docked vessel, if it is still alive; the port does not own it."""
        return self._docked_vessel() if self._docked_vessel is not None else None

    @docked_vessel.setter
    def docked_vessel(self, vessel: Optional[Vessel]) -> None:
        self._docked_vessel = weakref.ref(vessel) if vessel is not None else None

    def can_initiate_soft_capture(
        self, incoming_position: Vec3d, incoming_velocity: Vec3d, station_angular_velocity: Vec3d
    ) -> bool:
        """True when the port is open and the approach is slow and close enough."""
        if self.state is not DockingState.OPEN:
            return False
        if (incoming_velocity - station_angular_velocity).length() > self.SOFT_CAPTURE_VELOCITY:
            return False
        return (self.local_position - incoming_position).length() <= self.CAPTURE_RANGE

    def initiate_soft_capture(self) -> None:
        if self.state is DockingState.OPEN:
            self.state = DockingState.SOFT_CAPTURE

    def can_complete_hard_dock(self, relative_velocity: float) -> bool:
        if self.state is not DockingState.SOFT_CAPTURE:
            return False
        return relative_velocity < self.HARD_DOCK_VELOCITY

    def complete_hard_dock(self) -> None:
        if self.state is DockingState.SOFT_CAPTURE:
            self.state = DockingState.HARD_DOCK

    def undock(self) -> None:
        self.state = DockingState.OPEN
        self._docked_vessel = None