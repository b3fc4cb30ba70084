"""Birth/survival rule sets for two-state cellular automata."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

MAX_NEIGHBORS = 8
"""Largest possible neighbour count on an 8-connected grid."""

MAX_NAME_LENGTH = 63
"""Longest name a rule set keeps; longer names are truncated."""

_VALID_COUNTS = range(MAX_NEIGHBORS + 1)


@dataclass(frozen=True)
class Rules:
    """A named rule set: neighbour counts that cause birth and survival."""

    name: str
    birth: frozenset[int]
    survival: frozenset[int]

    def apply(self, alive: bool, neighbor_count: int) -> bool:
        """Return whether a cell is alive in the next generation."""
        if neighbor_count not in _VALID_COUNTS:
            raise ValueError(
                f"neighbor count must be between 0 and {MAX_NEIGHBORS}, "
                f"got {neighbor_count}"
            )
        counts = self.survival if alive else self.birth
        return neighbor_count in counts

    def describe(self) -> str:
        """Return a human-readable description of the rule set."""
        birth = "".join(f"{n} " for n in sorted(self.birth))
        survival = "".join(f"{n} " for n in sorted(self.survival))
        return (
            f"Rules: {self.name}\n"
            f"Birth conditions (neighbor count): {birth}\n"
            f"Survival conditions (neighbor count): {survival}\n"
        )


def make_rules(
    name: str | None,
    birth_counts: Iterable[int],
    survival_counts: Iterable[int],
) -> Rules:
    """Build a rule set, silently dropping counts outside 0..8."""
    label = "Custom" if name is None else name
    return Rules(
        name=label[:MAX_NAME_LENGTH],
        birth=frozenset(n for n in birth_counts if n in _VALID_COUNTS),
        survival=frozenset(n for n in survival_counts if n in _VALID_COUNTS),
    )


def conway() -> Rules:
    """Classic Life: birth on 3, survival on 2 or 3."""
    return make_rules("Conway's Life (B3/S23)", [3], [2, 3])


def highlife() -> Rules:
    """HighLife: birth on 3 or 6, survival on 2 or 3."""
    return make_rules("HighLife (B36/S23)", [3, 6], [2, 3])


def day_night() -> Rules:
    """Day & Night: birth on 3, 6, 7, 8; survival on 3, 4, 6, 7, 8."""
    return make_rules("Day & Night (B3678/S34678)", [3, 6, 7, 8], [3, 4, 6, 7, 8])


def maze() -> Rules:
    """Maze: birth on 3, survival on 1 to 5."""
    return make_rules("Maze (B3/S12345)", [3], [1, 2, 3, 4, 5])