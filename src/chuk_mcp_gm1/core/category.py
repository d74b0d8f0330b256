"""
Instrument categories - the GM1 melodic families.

GM1 groups its 128 programs into 16 families of 8 contiguous programs.
The family a program belongs to decides how it responds to the
modulation wheel and how expensive a program switch into it is.

Classification is arithmetic: program 1-8 is block 0 (Piano), 9-16 is
block 1 (Chromatic Percussion), and so on up to 121-128 (Sound Effects).
"""

from __future__ import annotations

from enum import IntEnum

from chuk_mcp_gm1.constants import MAX_PROGRAM, MIN_PROGRAM, PROGRAMS_PER_CATEGORY

# Display names (module level to avoid IntEnum member issues)
_CATEGORY_NAMES: list[str] = [
    "Piano",
    "Chromatic Percussion",
    "Organ",
    "Guitar",
    "Bass",
    "Strings",
    "Ensemble",
    "Brass",
    "Reed",
    "Pipe",
    "Synth Lead",
    "Synth Pad",
    "Synth Effects",
    "Ethnic",
    "Percussive",
    "Sound Effects",
    "Percussion (Channel 10)",
    "Unknown",
]

INVALID_CATEGORY_NAME = "Invalid"


class InstrumentCategory(IntEnum):
    """
    GM1 instrument category.

    The 16 melodic families are declared in program order, so the value
    of a melodic category is also its block index. PERCUSSION is the
    channel 10 special case and UNKNOWN is what invalid programs map to.
    """

    PIANO = 0  # Programs 1-8
    CHROMATIC_PERCUSSION = 1  # Programs 9-16
    ORGAN = 2  # Programs 17-24
    GUITAR = 3  # Programs 25-32
    BASS = 4  # Programs 33-40
    STRINGS = 5  # Programs 41-48
    ENSEMBLE = 6  # Programs 49-56
    BRASS = 7  # Programs 57-64
    REED = 8  # Programs 65-72
    PIPE = 9  # Programs 73-80
    SYNTH_LEAD = 10  # Programs 81-88
    SYNTH_PAD = 11  # Programs 89-96
    SYNTH_EFFECTS = 12  # Programs 97-104
    ETHNIC = 13  # Programs 105-112
    PERCUSSIVE = 14  # Programs 113-120
    SOUND_EFFECTS = 15  # Programs 121-128
    PERCUSSION = 16  # Channel 10
    UNKNOWN = 17  # Invalid program

    @property
    def display_name(self) -> str:
        """Human-readable category name."""
        return _CATEGORY_NAMES[self.value]

    @property
    def is_melodic(self) -> bool:
        """True for the 16 program families, False for the sentinels."""
        return self.value < InstrumentCategory.PERCUSSION.value

    def program_range(self) -> tuple[int, int] | None:
        """First and last program of a melodic category, None for sentinels."""
        if not self.is_melodic:
            return None
        first = self.value * PROGRAMS_PER_CATEGORY + MIN_PROGRAM
        return (first, first + PROGRAMS_PER_CATEGORY - 1)

    @classmethod
    def from_program(cls, program: int) -> InstrumentCategory:
        """Classify a GM1 program number (1-128). Out of range is UNKNOWN."""
        return classify(program)

    @classmethod
    def melodic(cls) -> list[InstrumentCategory]:
        """The 16 melodic categories in declaration order."""
        return [c for c in cls if c.is_melodic]


def classify(program: int) -> InstrumentCategory:
    """
    Get the instrument category for a GM1 program number.

    Fails closed: anything outside 1-128 is UNKNOWN, never an error.

    Args:
        program: GM1 program number (1-128)

    Returns:
        The program's melodic category, or UNKNOWN
    """
    if not MIN_PROGRAM <= program <= MAX_PROGRAM:
        return InstrumentCategory.UNKNOWN
    return InstrumentCategory((program - MIN_PROGRAM) // PROGRAMS_PER_CATEGORY)


def category_name(category: InstrumentCategory | int) -> str:
    """
    Get the display name of a category.

    Total over all 18 categories; any other value gives "Invalid".
    """
    try:
        return InstrumentCategory(category).display_name
    except ValueError:
        return INVALID_CATEGORY_NAME
