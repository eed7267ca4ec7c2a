"""Stage sequencing from the highest stage number down."""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable

from deepspace.parts import DecouplerPart, EnginePart, Part


class StagingSystem:
    """Fires stages in descending order, separating spent stages at decouplers."""

    def __init__(self):
        self.stages: dict[int, list[Part]] = {}
        self.current_stage = -1

    def rebuild_stages(self, parts: Iterable[Part]) -> None:
        """Group staged parts by stage number and start from the highest."""
        grouped: dict[int, list[Part]] = defaultdict(list)
        for part in parts:
            if part.stage >= 0:
                grouped[part.stage].append(part)
        self.stages = dict(sorted(grouped.items()))
        self.current_stage = max(self.stages, default=-1)

    def activate_next_stage(self) -> bool:
        """Fire the current stage; False when there is nothing left to fire."""
        if self.current_stage < 0 or not self.stages:
            return False

        parts = self.stages.get(self.current_stage)
        if parts is None:
            self.current_stage -= 1
            return True

        for part in parts:
            if isinstance(part, EnginePart):
                part.active = True
                part.set_throttle(1.0)
            if isinstance(part, DecouplerPart):
                part.activate()

        if any(isinstance(part, DecouplerPart) for part in parts):
            for stage, staged in self.stages.items():
                if stage > self.current_stage:
                    for part in staged:
                        if not part.persistent:
                            part.decoupled = True

        self.current_stage -= 1
        return True