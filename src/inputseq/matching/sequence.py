"""Single-channel input sequence automaton."""
from typing import Iterable, List, Optional, Sequence, Tuple

from ..config import get_config
from ..logging_config import setup_logger
from ..sources import Channel, Token
from .base import MatchableSequence, MatchProgress

logger = setup_logger("inputseq.sequence")


class InputSequence(MatchableSequence):
    """Tracks one ordered list of tokens on one channel.

    Each call to update_sequence() polls the channel for the next expected
    token. A match records the position and advances; matching the last
    token completes the sequence. With auto-reset enabled, a different token
    activated on the channel resets progress to the start. No input at all
    never resets, however long the idle period.

    Completion is terminal: further updates do nothing until
    reset_sequence() is called.

    Example:
        seq = InputSequence([Key.UP, Key.DOWN], keyboard_channel(source))
        source.step({Key.UP}); seq.update_sequence()
        source.step({Key.DOWN}); seq.update_sequence()
        assert seq.is_complete()
    """

    def __init__(
        self,
        tokens: Iterable[Token],
        channel: Channel,
        *,
        auto_reset: Optional[bool] = None,
        trace: Optional[bool] = None,
        watch: Sequence[Channel] = ()
    ):
        """
        Args:
            tokens: Expected tokens in order; fixed for the sequence's lifetime
            channel: Channel polled for input
            auto_reset: Reset on wrong input; defaults to the configured value
            trace: Log per-step diagnostics; defaults to the configured value
            watch: Extra channels whose activations also count as wrong input
        """
        cfg = get_config().sequence

        self._tokens: Tuple[Token, ...] = tuple(tokens)
        self.channel = channel
        self.channel.validate(self._tokens)
        self.watch: Tuple[Channel, ...] = tuple(watch)
        self.auto_reset: bool = cfg.auto_reset if auto_reset is None else auto_reset
        self.trace: bool = cfg.debug_trace if trace is None else trace
        self._progress = MatchProgress(len(self._tokens))
        self._regressed = False
        setup_logger(logger.name, cfg.log_level)

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return self._tokens

    @property
    def progress(self) -> int:
        return self._progress.index

    @property
    def completed(self) -> bool:
        return self._progress.completed

    @property
    def success_record(self) -> List[bool]:
        """Copy of the per-position success record."""
        return self._progress.record

    @property
    def last_input_successful(self) -> bool:
        """Was the token before the current position matched?"""
        return self._progress.last_input_successful

    @property
    def regressed(self) -> bool:
        """True if the last update moved progress backwards."""
        return self._regressed

    def update_sequence(self) -> None:
        before = self._progress.index
        self._step()
        self._regressed = self._progress.index < before

    def _step(self) -> None:
        if self.completed or not self._tokens:
            return

        current = self._progress.index
        expected = self._tokens[current]

        if self.trace:
            upcoming = (
                self._tokens[current + 1]
                if current + 1 < len(self._tokens)
                else "sequence will complete"
            )
            logger.info(
                f"[{self.channel.name}] index: {current} | "
                f"current: {_label(expected)} | next: {_label(upcoming)}"
            )

        if self.channel.is_activated(expected):
            if self.trace:
                logger.info(f"[{self.channel.name}] input {_label(expected)} successful")
            if self._progress.match_current():
                self.set_as_complete()
            return

        if not self.auto_reset:
            return

        wrong = self._wrong_input_detected(expected)
        if wrong:
            if self.trace:
                logger.info(
                    f"[{self.channel.name}] expected {_label(expected)}, "
                    f"got other input; sequence reset"
                )
            self.reset_sequence()

    def _wrong_input_detected(self, expected: Token) -> bool:
        if self.channel.any_other_activated(expected):
            return True
        for channel in self.watch:
            if channel.any_other_activated(expected):
                return True
        return False

    def set_as_complete(self) -> None:
        self._progress.completed = True
        if self.trace:
            logger.info(f"[{self.channel.name}] sequence complete")

    def force_complete(self) -> None:
        for i in range(len(self)):
            self[i] = True
        self.set_as_complete()

    def reset_sequence(self) -> None:
        self._progress.reset()

    @property
    def is_accessibility_enabled(self) -> bool:
        return not self.auto_reset

    def set_accessibility(self, enabled: bool) -> None:
        self.auto_reset = not enabled

    def __len__(self) -> int:
        return len(self._tokens)

    def __getitem__(self, i: int) -> bool:
        return self._progress[i]

    def __setitem__(self, i: int, value: bool) -> None:
        self._progress[i] = value

    def __repr__(self) -> str:
        return (
            f"InputSequence(channel={self.channel.name!r}, "
            f"tokens={[_label(t) for t in self._tokens]}, "
            f"progress={self.progress}, completed={self.completed})"
        )


def _label(token: object) -> str:
    """Readable name for enum and plain tokens."""
    value = getattr(token, "name", None)
    return value if isinstance(value, str) else str(token)
