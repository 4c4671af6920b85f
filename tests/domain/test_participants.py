"""Tests for the participant registry."""

from __future__ import annotations

import pytest

from seqfig.domain.errors import UnknownParticipantError
from seqfig.domain.participants import Participants


class TestAdd:
    def test_first_seen_order(self) -> None:
        registry = Participants()
        for name in ["Client", "Server", "Database"]:
            registry.add(name)
        assert registry.names() == ["Client", "Server", "Database"]

    def test_duplicates_ignored(self) -> None:
        registry = Participants()
        for name in ["A", "B", "A", "C", "B"]:
            registry.add(name)
        assert registry.names() == ["A", "B", "C"]
        assert registry.count() == 3

    def test_trims_names(self) -> None:
        registry = Participants()
        registry.add("  A ")
        registry.add("A")
        assert registry.names() == ["A"]

    def test_case_sensitive(self) -> None:
        registry = Participants()
        registry.add("a")
        registry.add("A")
        assert len(registry) == 2


class TestIndexOf:
    def test_index_is_first_occurrence(self) -> None:
        registry = Participants()
        sequence = ["X", "Y", "X", "Z", "Y", "W"]
        for name in sequence:
            registry.add(name)
        for name in set(sequence):
            assert registry.index_of(name) == sequence.index(name)

    def test_index_of_trims(self) -> None:
        registry = Participants()
        registry.add("A")
        assert registry.index_of(" A ") == 0

    def test_unknown_name_raises(self) -> None:
        registry = Participants()
        registry.add("A")
        with pytest.raises(UnknownParticipantError) as exc_info:
            registry.index_of("B")
        assert exc_info.value.code == "UNKNOWN_PARTICIPANT"
        assert exc_info.value.detail == {"name": "B"}

    def test_contains(self) -> None:
        registry = Participants()
        registry.add("A")
        assert "A" in registry
        assert "B" not in registry


class TestHeaderRow:
    def test_separators(self) -> None:
        registry = Participants()
        registry.add("A")
        registry.add("B")
        assert registry.header_row() == "  *+[F]{\\txt{A}} &\n  *+[F]{\\txt{B}} \\\\"

    def test_single_participant(self) -> None:
        registry = Participants()
        registry.add("Solo")
        assert registry.header_row() == "  *+[F]{\\txt{Solo}} \\\\"

    def test_empty(self) -> None:
        assert Participants().header_row() == ""
