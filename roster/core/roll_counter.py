"""
Source of automatically assigned roll numbers.
"""

from .enums import DEFAULT_ROLL_SEED


class RollCounter:
    """
    Monotonically increasing roll sequence.
    
    The counter is incremented before each assignment, so with the default
    seed of 1000 the first roll handed out is 1001. It is never reset and
    never goes backwards; deleting a student does not return its roll.
    """
    
    def __init__(self, seed: int = DEFAULT_ROLL_SEED):
        if isinstance(seed, bool) or not isinstance(seed, int) or seed < 0:
            raise ValueError(f"Roll seed must be a non-negative integer, got {seed!r}")
        self._seed = seed
        self._current = seed
    
    @property
    def seed(self) -> int:
        return self._seed
    
    @property
    def current(self) -> int:
        """Last value handed out (the seed if nothing was assigned yet)."""
        return self._current
    
    def next_roll(self) -> int:
        """Advance the counter and return the new roll."""
        self._current += 1
        return self._current
    
    def __repr__(self) -> str:
        return f"RollCounter(seed={self._seed}, current={self._current})"
