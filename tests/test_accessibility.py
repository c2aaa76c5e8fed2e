"""Tests for the accessibility (auto-reset) capability."""
import pytest

from inputseq.matching.sequence import InputSequence
from inputseq.matching.sequence_set import SequenceSet
from inputseq.sources import Channel, SteppedInputSource

UNIVERSE = frozenset("ABCDE")


def make_sequence(tokens="AB", auto_reset=True):
    source = SteppedInputSource()
    channel = Channel(name="pad", source=source, tokens=UNIVERSE)
    return InputSequence(list(tokens), channel, auto_reset=auto_reset, trace=False)


class TestSequenceAccessibility:
    """Accessibility on a single sequence."""

    def test_default_auto_reset(self):
        sequence = make_sequence()
        assert sequence.auto_reset is True
        assert sequence.is_accessibility_enabled is False

    def test_enable(self):
        sequence = make_sequence()
        sequence.set_accessibility(True)
        assert sequence.auto_reset is False
        assert sequence.is_accessibility_enabled is True

    def test_disable(self):
        sequence = make_sequence(auto_reset=False)
        sequence.set_accessibility(False)
        assert sequence.auto_reset is True

    def test_enabled_sequence_tolerates_wrong_input(self):
        source = SteppedInputSource()
        sequence = InputSequence(["A", "B"], Channel(name="pad", source=source, tokens=UNIVERSE), auto_reset=True, trace=False)
        sequence.set_accessibility(True)

        source.step({"A"})
        sequence.update_sequence()
        source.step({"C"})
        sequence.update_sequence()

        assert sequence.progress == 1


class TestSetAccessibility:
    """Accessibility on a sequence set."""

    @pytest.fixture
    def members(self):
        return make_sequence(), make_sequence("CDE")

    def test_reports_enabled_only_when_all_enabled(self, members):
        first, second = members
        sequence_set = SequenceSet(first, second, trace=False)
        assert sequence_set.is_accessibility_enabled is False

        first.set_accessibility(True)
        assert sequence_set.is_accessibility_enabled is False

        second.set_accessibility(True)
        assert sequence_set.is_accessibility_enabled is True

    def test_setter_applies_to_every_member(self, members):
        first, second = members
        sequence_set = SequenceSet(first, second, trace=False)

        sequence_set.set_accessibility(True)
        assert first.auto_reset is False
        assert second.auto_reset is False
        assert sequence_set.is_accessibility_enabled is True

        sequence_set.set_accessibility(False)
        assert first.auto_reset is True
        assert second.auto_reset is True
        assert sequence_set.is_accessibility_enabled is False

    def test_empty_set(self):
        sequence_set = SequenceSet(trace=False)
        sequence_set.set_accessibility(True)
        assert sequence_set.is_accessibility_enabled is False

    def test_nested_sets(self, members):
        inner = SequenceSet(*members, trace=False)
        outer = SequenceSet(make_sequence(), inner, trace=False)

        outer.set_accessibility(True)

        assert inner.is_accessibility_enabled is True
        assert outer.is_accessibility_enabled is True
