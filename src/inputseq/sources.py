"""Input sources and channels.

A source answers edge-triggered questions about the current step: was this
token activated (just pressed) this step, and was any token activated. A
channel pairs a source with the universe of tokens that belong to one device.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import FrozenSet, Hashable, Iterable, Mapping, Optional

from .exceptions import InputSourceError, SequenceConfigurationError

Token = Hashable


class BaseInputSource(ABC):
    """Base class for input sources polled by sequences."""

    @abstractmethod
    def is_activated_this_step(self, token: Token) -> bool:
        """Return True if the token became active on this step."""
        pass

    @abstractmethod
    def is_any_activated_this_step(self) -> bool:
        """Return True if any token on this source became active this step."""
        pass


@dataclass(frozen=True)
class ChannelState:
    """Snapshot of held tokens for one step with edge detection.

    Usage:
        state = ChannelState(held=frozenset({"A"}), previously_held=frozenset())
        assert "A" in state.just_pressed
    """
    held: FrozenSet[Token] = frozenset()
    previously_held: FrozenSet[Token] = frozenset()

    just_pressed: FrozenSet[Token] = field(init=False)
    just_released: FrozenSet[Token] = field(init=False)

    def __post_init__(self):
        if not isinstance(self.held, frozenset):
            raise SequenceConfigurationError("held must be a frozenset of tokens")
        if not isinstance(self.previously_held, frozenset):
            raise SequenceConfigurationError("previously_held must be a frozenset of tokens")

        object.__setattr__(self, "just_pressed", self.held - self.previously_held)
        object.__setattr__(self, "just_released", self.previously_held - self.held)

    @property
    def any_pressed(self) -> bool:
        """True if at least one token was pressed on this step."""
        return bool(self.just_pressed)

    def __str__(self) -> str:
        return (
            f"ChannelState("
            f"held={sorted(map(str, self.held))}, "
            f"pressed={sorted(map(str, self.just_pressed))}"
            f")"
        )


class SteppedInputSource(BaseInputSource):
    """Edge-triggered source driven by the host once per step.

    The host reports which tokens are currently held; a token counts as
    activated only on the step where it goes from released to held, so a
    key held across several steps activates once.

    Example:
        source = SteppedInputSource()
        source.step({"A"})   # A activated
        source.step({"A"})   # A held, not activated
        source.step(())      # released
    """

    def __init__(self, tokens: Optional[Iterable[Token]] = None):
        """
        Args:
            tokens: Optional universe; stepping with anything outside it
                raises InputSourceError.
        """
        self._universe: Optional[FrozenSet[Token]] = (
            frozenset(tokens) if tokens is not None else None
        )
        self._state = ChannelState()
        self._step_count = 0

    @property
    def state(self) -> ChannelState:
        """The snapshot for the most recent step."""
        return self._state

    @property
    def step_count(self) -> int:
        return self._step_count

    def step(self, held: Iterable[Token]) -> ChannelState:
        """Advance one step with the given set of held tokens."""
        held_now = frozenset(held)
        if self._universe is not None:
            unknown = held_now - self._universe
            if unknown:
                raise InputSourceError(
                    f"Tokens not in this source's universe: {sorted(map(str, unknown))}"
                )

        self._state = ChannelState(held=held_now, previously_held=self._state.held)
        self._step_count += 1
        return self._state

    def release_all(self) -> ChannelState:
        """Advance one step with nothing held."""
        return self.step(())

    def is_activated_this_step(self, token: Token) -> bool:
        return token in self._state.just_pressed

    def is_any_activated_this_step(self) -> bool:
        return self._state.any_pressed


@dataclass(frozen=True, eq=False)
class Channel:
    """One input device: a source plus the tokens it can produce.

    An empty universe means the channel cannot enumerate its tokens; wrong
    input detection then relies on the source's any-activated shortcut.
    `aliases` maps a token of this channel to the token it stands for on
    another channel; an aliased token is never a wrong input for its target.
    """
    name: str
    source: BaseInputSource
    tokens: FrozenSet[Token] = frozenset()
    aliases: Mapping[Token, Token] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.source, BaseInputSource):
            raise SequenceConfigurationError(
                f"Channel '{self.name}' needs a BaseInputSource, got {type(self.source).__name__}"
            )
        object.__setattr__(self, "tokens", frozenset(self.tokens))

    def is_activated(self, token: Token) -> bool:
        return self.source.is_activated_this_step(token)

    def any_other_activated(self, token: Token) -> bool:
        """True if any token other than the given one was activated this step."""
        if not self.tokens:
            # Only valid once `token` itself has been observed inactive.
            return self.source.is_any_activated_this_step()

        for other in self.tokens:
            if other == token or self.aliases.get(other) == token:
                continue
            if self.source.is_activated_this_step(other):
                return True
        return False

    def validate(self, tokens: Iterable[Token]) -> None:
        """Reject tokens outside a non-empty universe."""
        if not self.tokens:
            return
        unknown = [t for t in tokens if t not in self.tokens]
        if unknown:
            raise SequenceConfigurationError(
                f"Tokens not valid on channel '{self.name}': {unknown}"
            )
