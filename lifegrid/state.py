"""Mutable interaction state of a running game."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GameState:
    """Flags and settings that track the game session."""

    keep_alive: bool = True
    pause: bool = False
    loaded_filename: str | None = None
    current_rule_index: int = 0
    is_dragging: bool = False
    drag_paint_mode: bool = True

    def toggle_pause(self) -> bool:
        """Flip the pause flag and return its new value."""
        self.pause = not self.pause
        return self.pause

    def advance_rule_index(self, count: int) -> int:
        """Move to the next of ``count`` rule sets, wrapping, and return it."""
        if count <= 0:
            raise ValueError(f"rule set count must be positive, got {count}")
        self.current_rule_index = (self.current_rule_index + 1) % count
        return self.current_rule_index