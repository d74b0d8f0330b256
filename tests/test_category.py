"""
Tests for GM1 instrument category classification.
"""

import pytest

from chuk_mcp_gm1.core import INVALID_CATEGORY_NAME, InstrumentCategory, category_name, classify


class TestClassify:
    """Tests for classify()."""

    @pytest.mark.parametrize(
        "program,expected",
        [
            (1, InstrumentCategory.PIANO),
            (8, InstrumentCategory.PIANO),
            (9, InstrumentCategory.CHROMATIC_PERCUSSION),
            (16, InstrumentCategory.CHROMATIC_PERCUSSION),
            (17, InstrumentCategory.ORGAN),
            (25, InstrumentCategory.GUITAR),
            (33, InstrumentCategory.BASS),
            (41, InstrumentCategory.STRINGS),
            (49, InstrumentCategory.ENSEMBLE),
            (57, InstrumentCategory.BRASS),
            (65, InstrumentCategory.REED),
            (73, InstrumentCategory.PIPE),
            (81, InstrumentCategory.SYNTH_LEAD),
            (89, InstrumentCategory.SYNTH_PAD),
            (97, InstrumentCategory.SYNTH_EFFECTS),
            (105, InstrumentCategory.ETHNIC),
            (113, InstrumentCategory.PERCUSSIVE),
            (121, InstrumentCategory.SOUND_EFFECTS),
            (128, InstrumentCategory.SOUND_EFFECTS),
        ],
    )
    def test_block_boundaries(self, program: int, expected: InstrumentCategory) -> None:
        """Programs fall into contiguous blocks of 8."""
        assert classify(program) == expected

    @pytest.mark.parametrize("program", [0, 129, 255, -1])
    def test_out_of_range_is_unknown(self, program: int) -> None:
        """Invalid programs classify as UNKNOWN rather than failing."""
        assert classify(program) == InstrumentCategory.UNKNOWN

    def test_every_program_is_melodic(self) -> None:
        """All 128 programs map to a melodic category, 8 per category."""
        counts: dict[InstrumentCategory, int] = {}
        for program in range(1, 129):
            category = classify(program)
            assert category.is_melodic
            counts[category] = counts.get(category, 0) + 1
        assert len(counts) == 16
        assert all(count == 8 for count in counts.values())

    def test_from_program(self) -> None:
        """Classmethod matches the function."""
        assert InstrumentCategory.from_program(41) == InstrumentCategory.STRINGS
        assert InstrumentCategory.from_program(0) == InstrumentCategory.UNKNOWN


class TestInstrumentCategory:
    """Tests for InstrumentCategory helpers."""

    def test_melodic_order(self) -> None:
        """Melodic categories are declared in program order."""
        melodic = InstrumentCategory.melodic()
        assert len(melodic) == 16
        assert melodic[0] == InstrumentCategory.PIANO
        assert melodic[-1] == InstrumentCategory.SOUND_EFFECTS

    def test_sentinels_not_melodic(self) -> None:
        """Percussion and unknown are not program families."""
        assert not InstrumentCategory.PERCUSSION.is_melodic
        assert not InstrumentCategory.UNKNOWN.is_melodic

    def test_program_range(self) -> None:
        """Program ranges cover 8 programs each."""
        assert InstrumentCategory.PIANO.program_range() == (1, 8)
        assert InstrumentCategory.STRINGS.program_range() == (41, 48)
        assert InstrumentCategory.SOUND_EFFECTS.program_range() == (121, 128)
        assert InstrumentCategory.UNKNOWN.program_range() is None


class TestCategoryName:
    """Tests for category_name()."""

    def test_names(self) -> None:
        """Display names are fixed strings."""
        assert category_name(InstrumentCategory.PIANO) == "Piano"
        assert category_name(InstrumentCategory.CHROMATIC_PERCUSSION) == "Chromatic Percussion"
        assert category_name(InstrumentCategory.STRINGS) == "Strings"
        assert category_name(InstrumentCategory.BRASS) == "Brass"
        assert category_name(InstrumentCategory.SYNTH_EFFECTS) == "Synth Effects"
        assert category_name(InstrumentCategory.PERCUSSION) == "Percussion (Channel 10)"
        assert category_name(InstrumentCategory.UNKNOWN) == "Unknown"

    def test_total_over_all_categories(self) -> None:
        """Every category has a distinct name."""
        names = {category_name(c) for c in InstrumentCategory}
        assert len(names) == 18
        assert INVALID_CATEGORY_NAME not in names

    @pytest.mark.parametrize("value", [18, 99, -1])
    def test_invalid_value(self, value: int) -> None:
        """Values outside the enum give the Invalid sentinel."""
        assert category_name(value) == "Invalid"

    def test_display_name_property(self) -> None:
        """Property matches the function."""
        assert InstrumentCategory.ORGAN.display_name == category_name(InstrumentCategory.ORGAN)
