"""Data model definitions — the values passed between converters and callers."""

from dataclasses import astuple, dataclass
from enum import Enum, IntEnum


class Weekday(IntEnum):
    """Day code of a Julian day, ``(jdn + 2) % 7``."""

    SHABBAT = 0
    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6

    @classmethod
    def of(cls, jdn: int) -> "Weekday":
        """Day of the week of a Julian day."""
        return cls((jdn + 2) % 7)

    @property
    def number(self) -> int:
        """Traditional numbering: Sunday is the 1st day, Shabbat the 7th."""
        return self.value or 7


class YearKind(Enum):
    """Hebrew year kind, by the combined length of Heshvan and Kislev."""

    DEFICIENT = -1  # Heshvan 29, Kislev 29
    REGULAR = 0  # Heshvan 29, Kislev 30
    COMPLETE = 1  # Heshvan 30, Kislev 30

    @property
    def offset(self) -> int:
        """Extra days over a deficient year (0, 1 or 2)."""
        return self.value + 1


@dataclass(frozen=True)
class GregorianDate:
    """Proleptic Gregorian date. Year 0 is 1 BCE, -1 is 2 BCE."""

    day: int
    month: int  # 1..12
    year: int  # Astronomical year numbering

    def astuple(self) -> tuple[int, int, int]:
        return astuple(self)


@dataclass(frozen=True)
class HebrewDate:
    """Hebrew date. Month 13 is Adar I and only exists in leap years."""

    day: int
    month: int  # 1 = Tishrei ... 6 = Adar (Adar II) ... 12 = Elul, 13 = Adar I
    year: int  # Anno Mundi, >= 1

    def astuple(self) -> tuple[int, int, int]:
        return astuple(self)


@dataclass(frozen=True)
class YearDescriptor:
    """Leap status and kind of a Hebrew year. Derived from the year length."""

    leap: bool
    kind: YearKind

    @property
    def length(self) -> int:
        """Total days in the year (353..355 or 383..385)."""
        return (383 if self.leap else 353) + self.kind.offset

    @property
    def heshvan_kislev(self) -> int:
        """Combined days of Heshvan and Kislev (58, 59 or 60)."""
        return 58 + self.kind.offset


@dataclass(frozen=True)
class MoladMoment:
    """Calculated mean new moon: a Julian day and the parts elapsed into it."""

    day: int  # Julian day number
    parts: int  # 0 <= parts < 25920, 1080 parts per hour

    @property
    def weekday(self) -> Weekday:
        return Weekday.of(self.day)

    @property
    def hours(self) -> int:
        """Whole hours into the day."""
        return self.parts // 1080

    @property
    def remainder_parts(self) -> int:
        """Parts past the last whole hour."""
        return self.parts % 1080


# Transliterated initials used in the traditional three-letter year character.
_DAY_LETTERS: dict[int, str] = {1: "A", 2: "B", 3: "G", 4: "D", 5: "H", 6: "V", 7: "Z"}
_KIND_LETTERS: dict[YearKind, str] = {
    YearKind.DEFICIENT: "Ch",
    YearKind.REGULAR: "Kh",
    YearKind.COMPLETE: "Sh",
}


@dataclass(frozen=True)
class YearCharacter:
    """Year character (keviah): Rosh Hashanah weekday, kind, 15 Nisan weekday."""

    rosh_hashanah: Weekday
    kind: YearKind
    pesach: Weekday
    leap: bool

    @property
    def code(self) -> str:
        """Numeric form, e.g. ``"725"`` for a complete year starting on Shabbat."""
        return f"{self.rosh_hashanah.number}{self.kind.offset}{self.pesach.number}"

    @property
    def letters(self) -> str:
        """Letter form, e.g. ``"ZShH"``."""
        return (
            _DAY_LETTERS[self.rosh_hashanah.number]
            + _KIND_LETTERS[self.kind]
            + _DAY_LETTERS[self.pesach.number]
        )
