"""Synchronised sets of sequences representing one gesture on several channels."""
from typing import Iterator, Optional, Tuple

from ..config import get_config
from ..exceptions import SequenceConfigurationError
from ..logging_config import setup_logger
from .base import MatchableSequence

logger = setup_logger("inputseq.sequence_set")


class SequenceSet(MatchableSequence):
    """Shares one completion/reset lifecycle between several sequences.

    Typically one member per device (keyboard, gamepad) encoding the same
    gesture. Members progress independently; only three coarse signals are
    synchronised on each update:

    - any member completed: the whole set completes, and every member is
      forced into a fully matched, completed state
    - every member regressed this step: the whole set resets
    - otherwise: nothing, partial progress on different channels is kept

    Members of different lengths are never synchronised by progress. Copying
    progress from a longer member into a shorter one would mark the shorter
    one complete too early.

    The all-regressed rule is a heuristic, not a consistency protocol. A
    member sitting at position 0 that receives a wrong input has not
    regressed, so it counts as idle. A nested set counts as regressed only
    when it reset itself, never because one of its own members fell back.
    """

    def __init__(self, *members: MatchableSequence, trace: Optional[bool] = None):
        for member in members:
            if not isinstance(member, MatchableSequence):
                raise SequenceConfigurationError(
                    f"SequenceSet members must be MatchableSequence, got {type(member).__name__}"
                )

        self._members: Tuple[MatchableSequence, ...] = tuple(members)
        self._completed = False
        self._regressed = False
        cfg = get_config().sequence
        self.trace: bool = cfg.debug_trace if trace is None else trace
        setup_logger(logger.name, cfg.log_level)

    @property
    def members(self) -> Tuple[MatchableSequence, ...]:
        return self._members

    @property
    def completed(self) -> bool:
        return self._completed

    @property
    def progress(self) -> int:
        """Highest progress among members, 0 for an empty set.

        Informational only; synchronisation uses `regressed`.
        """
        return max((m.progress for m in self._members), default=0)

    @property
    def regressed(self) -> bool:
        """True if the last update reset the whole set."""
        return self._regressed

    def update_sequence(self) -> None:
        self._regressed = False
        if self._completed or not self._members:
            return

        any_advanced_or_idle = False
        any_member_completed = False

        for member in self._members:
            before = member.progress
            member.update_sequence()
            after = member.progress

            if self.trace:
                logger.info(f"member progress {before} -> {after}")

            if not member.regressed:
                any_advanced_or_idle = True
            if member.completed:
                any_member_completed = True

        if any_member_completed:
            self.set_as_complete()
            return

        if not any_advanced_or_idle:
            if self.trace:
                logger.info("every member reset this step; resetting set")
            self.reset_sequence()
            self._regressed = True

    def set_as_complete(self) -> None:
        for member in self._members:
            member.force_complete()
        self._completed = True
        if self.trace:
            logger.info("sequence set complete")

    def force_complete(self) -> None:
        self.set_as_complete()

    def reset_sequence(self) -> None:
        self._completed = False
        for member in self._members:
            member.reset_sequence()

    @property
    def is_accessibility_enabled(self) -> bool:
        if not self._members:
            return False
        return all(m.is_accessibility_enabled for m in self._members)

    def set_accessibility(self, enabled: bool) -> None:
        for member in self._members:
            member.set_accessibility(enabled)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[MatchableSequence]:
        return iter(self._members)

    def __getitem__(self, i: int) -> MatchableSequence:
        return self._members[i]

    def __repr__(self) -> str:
        return f"SequenceSet(members={len(self._members)}, completed={self._completed})"
