# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Value types that can be written into XMP properties.

Every value that ends up between an opening and a closing tag goes through
:func:`render`, which maps the closed set of supported Python values to the
exact text XMP expects.
"""

import calendar
import enum
import math
import re
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import ClassVar, Union

from .exceptions import InvalidDateTimeError, InvalidRatingError

# Language tag meaning "no specific language"
DEFAULT_LANGUAGE = "x-default"

# Characters that must not appear raw in XMP text or attribute values
_XML_ESCAPES = {
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
    "'": "&apos;",
    '"': "&quot;",
}
_XML_ESCAPE_RE = re.compile("[%s]" % "".join(_XML_ESCAPES))

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def escape_text(text: str) -> str:
    """Replace XML special characters with their named entities.

    All other characters, including non-ASCII ones, pass through unchanged.
    """
    return _XML_ESCAPE_RE.sub(lambda m: _XML_ESCAPES[m.group(0)], text)


def _format_real(value: float) -> str:
    """Format a float as round-trip decimal text without exponent notation."""
    text = repr(value)
    if math.isfinite(value) and ("e" in text or "E" in text):
        text = format(Decimal(text), "f")
    return text


@dataclass(frozen=True)
class Timezone:
    """A UTC offset for :class:`DateTime`.

    The sign is carried by ``hour`` (or by ``minute`` when ``hour`` is zero).
    ``Timezone.UTC`` renders as ``Z``.
    """

    hour: int = 0
    minute: int = 0
    utc: bool = False

    UTC: ClassVar["Timezone"]

    def __post_init__(self) -> None:
        if not -23 <= self.hour <= 23:
            raise InvalidDateTimeError(f"Timezone hour out of range: {self.hour}")
        if not -59 <= self.minute <= 59:
            raise InvalidDateTimeError(f"Timezone minute out of range: {self.minute}")
        if self.hour * self.minute < 0:
            raise InvalidDateTimeError(
                f"Timezone hour and minute have opposite signs: "
                f"{self.hour}, {self.minute}"
            )

    def render(self) -> str:
        if self.utc:
            return "Z"
        sign = "-" if self.hour < 0 or self.minute < 0 else "+"
        return f"{sign}{abs(self.hour):02d}:{abs(self.minute):02d}"


Timezone.UTC = Timezone(utc=True)


@dataclass(frozen=True)
class DateTime:
    """An XMP date with partial precision.

    Only a leading run of fields may be given: a year, then optionally the
    month, the day, hour and minute together, the second, and a timezone
    (which requires at least hour and minute). Any gap in that sequence or
    any out-of-range field raises :class:`InvalidDateTimeError` here, so
    rendering never fails.
    """

    year: int
    month: int | None = None
    day: int | None = None
    hour: int | None = None
    minute: int | None = None
    second: int | None = None
    timezone: Timezone | None = None

    def __post_init__(self) -> None:
        self._check_sequence()
        self._check_ranges()

    def _check_sequence(self) -> None:
        fields = (
            ("month", self.month),
            ("day", self.day),
            ("hour", self.hour),
            ("minute", self.minute),
            ("second", self.second),
        )
        missing = None
        for name, value in fields:
            if value is None:
                missing = missing or name
            elif missing is not None:
                raise InvalidDateTimeError(f"Date has {name} but no {missing}")
        if self.hour is not None and self.minute is None:
            raise InvalidDateTimeError("Date has hour but no minute")
        if self.timezone is not None and self.minute is None:
            raise InvalidDateTimeError("Date has a timezone but no time")

    def _check_ranges(self) -> None:
        if not 0 <= self.year <= 9999:
            raise InvalidDateTimeError(f"Year out of range: {self.year}")
        if self.month is not None and not 1 <= self.month <= 12:
            raise InvalidDateTimeError(f"Month out of range: {self.month}")
        if self.day is not None:
            max_day = _DAYS_IN_MONTH[self.month - 1]
            if self.month == 2 and calendar.isleap(self.year):
                max_day = 29
            if not 1 <= self.day <= max_day:
                raise InvalidDateTimeError(
                    f"Day out of range for {self.year:04d}-{self.month:02d}: "
                    f"{self.day}"
                )
        if self.hour is not None and not 0 <= self.hour <= 23:
            raise InvalidDateTimeError(f"Hour out of range: {self.hour}")
        if self.minute is not None and not 0 <= self.minute <= 59:
            raise InvalidDateTimeError(f"Minute out of range: {self.minute}")
        if self.second is not None and not 0 <= self.second <= 59:
            raise InvalidDateTimeError(f"Second out of range: {self.second}")

    # Defined before the ``date`` constructor so the annotation below
    # resolves to datetime.date
    @classmethod
    def from_datetime(cls, value: date) -> "DateTime":
        """Convert a :class:`datetime.date` or :class:`datetime.datetime`.

        Aware datetimes keep their offset (``Z`` for a zero offset given as
        ``datetime.UTC``); microseconds are dropped.
        """
        if not isinstance(value, datetime):
            return cls(value.year, value.month, value.day)

        timezone = None
        offset = value.utcoffset()
        if offset is not None:
            if value.tzinfo is not None and value.tzname() == "UTC":
                timezone = Timezone.UTC
            else:
                total = int(offset.total_seconds()) // 60
                hours = int(total / 60)
                timezone = Timezone(hours, total - hours * 60)
        return cls(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            timezone,
        )

    @classmethod
    def date(cls, year: int, month: int, day: int) -> "DateTime":
        """Create a date without a time component."""
        return cls(year, month, day)

    @classmethod
    def local_time(
        cls, year: int, month: int, day: int, hour: int, minute: int, second: int
    ) -> "DateTime":
        """Create a date and time without a timezone."""
        return cls(year, month, day, hour, minute, second)

    def render(self) -> str:
        parts = [f"{self.year:04d}"]
        if self.month is not None:
            parts.append(f"-{self.month:02d}")
        if self.day is not None:
            parts.append(f"-{self.day:02d}")
        if self.hour is not None:
            parts.append(f"T{self.hour:02d}:{self.minute:02d}")
        if self.second is not None:
            parts.append(f":{self.second:02d}")
        if self.timezone is not None:
            parts.append(self.timezone.render())
        return "".join(parts)


@dataclass(frozen=True)
class Custom:
    """A value outside an enumerated domain, written as entered."""

    text: str

    def render(self) -> str:
        return escape_text(self.text)


class RdfCollectionType(enum.Enum):
    """The three RDF array shapes."""

    SEQ = "Seq"
    BAG = "Bag"
    ALT = "Alt"


class RenditionClass(enum.Enum):
    """Rendition class of a document (``xmpMM:RenditionClass``)."""

    DEFAULT = "default"
    DRAFT = "draft"
    LOW_RESOLUTION = "low-res"
    PROOF = "proof"
    SCREEN = "screen"
    THUMBNAIL = "thumbnail"


@dataclass(frozen=True)
class Thumbnail:
    """A ``thumbnail`` rendition class with optional parameters.

    Renders as ``thumbnail[:format][:WIDTHxHEIGHT][:color_space]``.
    """

    format: str | None = None
    size: tuple[int, int] | None = None
    color_space: str | None = None

    def render(self) -> str:
        text = "thumbnail"
        if self.format is not None:
            text += f":{self.format}"
        if self.size is not None:
            width, height = self.size
            text += f":{width}x{height}"
        if self.color_space is not None:
            text += f":{self.color_space}"
        return escape_text(text)


class ResourceEventAction(enum.Enum):
    """Action recorded in a ``stEvt:action`` field."""

    CONVERTED = "converted"
    COPIED = "copied"
    CREATED = "created"
    CROPPED = "cropped"
    EDITED = "edited"
    FILTERED = "filtered"
    FORMATTED = "formatted"
    VERSION_UPDATED = "version_updated"
    PRINTED = "printed"
    PUBLISHED = "published"
    MANAGED = "managed"
    PRODUCED = "produced"
    RESIZED = "resized"
    SAVED = "saved"


class ColorantMode(enum.Enum):
    CMYK = "CMYK"
    RGB = "RGB"
    LAB = "Lab"


class ColorantType(enum.Enum):
    PROCESS = "PROCESS"
    SPOT = "SPOT"


class DimensionUnit(enum.Enum):
    INCH = "inch"
    MM = "mm"
    PIXEL = "pixel"
    PICA = "pica"
    POINT = "point"


class FontType(enum.Enum):
    TRUETYPE = "TrueType"
    OPENTYPE = "OpenType"
    TYPE1 = "Type1"
    BITMAP = "Bitmap"


class MaskMarkers(enum.Enum):
    """Whether markers of a referenced resource are ignored (``stRef:maskMarkers``)."""

    ALL = "All"
    NONE = "None"


class Rating(enum.IntEnum):
    """A user-assigned star rating (``xmp:Rating``)."""

    REJECTED = -1
    UNKNOWN = 0
    ONE_STAR = 1
    TWO_STARS = 2
    THREE_STARS = 3
    FOUR_STARS = 4
    FIVE_STARS = 5

    @classmethod
    def from_stars(cls, stars: int | None) -> "Rating":
        """Map a number of stars (0 to 5, or None) to a rating.

        Raises:
            InvalidRatingError: If ``stars`` is outside 0 to 5.
        """
        if stars is None:
            return cls.UNKNOWN
        if isinstance(stars, bool) or not isinstance(stars, int) or not 0 <= stars <= 5:
            raise InvalidRatingError(
                f"Invalid number of stars: {stars!r} (must be between 0 and 5)"
            )
        return cls(stars)


XmpValue = Union[bool, int, float, str, DateTime, Custom, Thumbnail, enum.Enum]


def render(value: XmpValue) -> str:
    """Render a value as the text XMP expects between tags.

    Raises:
        TypeError: If the value is not one of the supported types.
    """
    # bool and IntEnum are int subclasses; check them first
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, enum.IntEnum):
        return str(int(value))
    if isinstance(value, enum.Enum):
        return escape_text(value.value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_real(value)
    if isinstance(value, str):
        return escape_text(value)
    if isinstance(value, (DateTime, Custom, Thumbnail)):
        return value.render()
    raise TypeError(f"Unsupported XMP value type: {type(value).__name__}")
