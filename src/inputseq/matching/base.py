"""Capability interfaces and shared bookkeeping for sequence matchers."""
from abc import ABC, abstractmethod
from typing import List


class AccessibilityConfigurable(ABC):
    """Something whose auto-reset-on-wrong-input policy can be toggled.

    Accessibility enabled means auto-reset is disabled: wrong inputs are
    ignored instead of resetting progress.
    """

    @property
    @abstractmethod
    def is_accessibility_enabled(self) -> bool:
        """True if wrong inputs are tolerated."""
        pass

    @abstractmethod
    def set_accessibility(self, enabled: bool) -> None:
        """Enable or disable tolerance of wrong inputs."""
        pass


class MatchableSequence(AccessibilityConfigurable):
    """Interface shared by single-channel sequences and sequence sets.

    Hosts call update_sequence() once per step and observe `completed`.
    """

    @abstractmethod
    def update_sequence(self) -> None:
        """Poll input for this step and advance, reset or complete."""
        pass

    @abstractmethod
    def reset_sequence(self) -> None:
        """Return to the initial, not completed state."""
        pass

    @abstractmethod
    def set_as_complete(self) -> None:
        """Mark as completed."""
        pass

    @abstractmethod
    def force_complete(self) -> None:
        """Mark as completed with every position recorded as matched."""
        pass

    @property
    @abstractmethod
    def completed(self) -> bool:
        pass

    @property
    @abstractmethod
    def progress(self) -> int:
        """Index of the next expected position."""
        pass

    @property
    @abstractmethod
    def regressed(self) -> bool:
        """True if the most recent update_sequence() call moved this back toward the start.

        Sets use this to tell a member that fell back from one that
        advanced or stayed idle.
        """
        pass

    def is_complete(self) -> bool:
        return self.completed

    def __bool__(self) -> bool:
        return self.completed


class MatchProgress:
    """Progress index, per-position success record and completion flag.

    Holds the reset/complete bookkeeping for one automaton. The record is
    allocated once to the sequence length and never resized.
    """

    def __init__(self, length: int):
        if length < 0:
            raise ValueError(f"length must be >= 0, got {length}")
        self.length = length
        self.index = 0
        self.completed = False
        self._record: List[bool] = [False] * length

    def _check(self, i: int) -> None:
        if not isinstance(i, int) or isinstance(i, bool):
            raise TypeError(f"success record indices must be int, not {type(i).__name__}")
        if i < 0 or i >= self.length:
            raise IndexError(f"success record index {i} out of range [0, {self.length})")

    def __getitem__(self, i: int) -> bool:
        self._check(i)
        return self._record[i]

    def __setitem__(self, i: int, value: bool) -> None:
        self._check(i)
        self._record[i] = bool(value)

    @property
    def record(self) -> List[bool]:
        return list(self._record)

    @property
    def last_input_successful(self) -> bool:
        if self.index == 0:
            return False
        return self._record[self.index - 1]

    def match_current(self) -> bool:
        """Record the current position as matched.

        Returns:
            True if that was the final position, False if the index advanced
        """
        self._record[self.index] = True
        if self.index + 1 < self.length:
            self.index += 1
            return False
        return True

    def fill(self) -> None:
        for i in range(self.length):
            self._record[i] = True

    def reset(self) -> None:
        self.index = 0
        self.completed = False
        for i in range(self.length):
            self._record[i] = False
