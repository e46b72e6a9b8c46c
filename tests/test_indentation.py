"""Tests for the indentation stack."""

from __future__ import annotations

from sqlindent.indentation import Indentation


class TestIndentation:
    def test_starts_empty(self) -> None:
        ind = Indentation()
        assert ind.depth == 0
        assert ind.get_indent() == ""

    def test_indent_repeats_unit(self) -> None:
        ind = Indentation("\t")
        ind.increase_top_level()
        ind.increase_block_level()
        assert ind.get_indent() == "\t\t"

    def test_decrease_top_level_only_pops_top_level(self) -> None:
        ind = Indentation()
        ind.increase_block_level()
        ind.decrease_top_level()
        assert ind.depth == 1
        ind.increase_top_level()
        ind.decrease_top_level()
        assert ind.depth == 1

    def test_decrease_block_level_pops_through_top_levels(self) -> None:
        ind = Indentation()
        ind.increase_top_level()
        ind.increase_block_level()
        ind.increase_top_level()
        ind.decrease_block_level()
        assert ind.depth == 1
        assert ind.get_indent() == "  "

    def test_decrease_on_empty_stack_is_harmless(self) -> None:
        ind = Indentation()
        ind.decrease_block_level()
        ind.decrease_top_level()
        assert ind.depth == 0

    def test_reset(self) -> None:
        ind = Indentation("    ")
        ind.increase_top_level()
        ind.increase_block_level()
        ind.reset()
        assert ind.get_indent() == ""
