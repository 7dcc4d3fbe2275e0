"""Label grammar and cascade patterns for autoland report fields.

Every field is located by an ordered cascade of three compiled patterns,
tried most-specific first. The first variant that matches anywhere in the
text wins, and within a variant the first occurrence in document order
wins:

1. ``NEXT_LINE`` -- label alone on its line (optional colon), value on the
   following line(s). Free-text values extend across line breaks until a
   line that starts with a terminator label, or end of text.
2. ``INLINE`` -- label, then a colon or whitespace, then the value starting
   on the same line. It ends at a terminator label that is followed by a
   colon or preceded by two or more spaces. Shaped values also end at end
   of line; free-text values wrap onto following lines the same way as in
   ``NEXT_LINE``.
3. ``LOOSE`` -- label, any whitespace/colons, then the value, with no
   terminator. Free text is bounded by the line, shaped values by their
   own pattern.

In the first two variants the label must start a line. A value may never
begin with a known label, so an empty field does not capture its
neighbour's label.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum

_FLAGS = re.IGNORECASE | re.MULTILINE

# Label regexes. Intra-label whitespace is [ \t]* so a label never spans lines.
LABELS: dict[str, str] = {
    "report_number": r"REPORT[ \t]*(?:NO\.?|NUMBER|#)",
    "aircraft_reg": r"A/C[ \t]*REG(?:ISTRATION)?\.?",
    "flight_number": r"(?:FLT|FLIGHT)[ \t]*(?:NO\.?|NUMBER)",
    "airport": r"(?:AIRPORT|APT)",
    "runway": r"(?:RWY|RUNWAY)",
    "captain": r"CAPT(?:AIN)?(?![ \t]*SIGN)",
    "first_officer": r"(?:F/O|FIRST[ \t]*OFFICER)",
    "date_utc": r"DATE(?:[ \t]*\(?[ \t]*UTC[ \t]*\)?)?",
    "time_utc": r"TIME(?:[ \t]*\(?[ \t]*UTC[ \t]*\)?)?",
    "wind_velocity": r"(?:W/V|WIND)",
    "td_point": r"T/?D[ \t]*POINT",
    "tracking": r"TRACKING",
    "qnh": r"QNH",
    "alignment": r"ALIGNMENT",
    "speed_control": r"SPEED[ \t]*CONTROL",
    "temperature": r"TEMP(?:ERATURE)?",
    "landing": r"LANDING",
    "aircraft_dropout": r"A/C[ \t]*DROPOUT",
    "visibility_rvr": r"VIS[ \t]*/[ \t]*RVR",
    "other": r"OTHERS?",
    "result": r"RESULT",
    "reasons": r"REASONS?",
    "captain_signature": r"CAPT(?:AIN)?(?:'S)?[ \t]*SIGN(?:ATURE)?",
}

# Non-field lines that still end a preceding free-text value.
SECTION_MARKERS: dict[str, str] = {
    "page_header": r"AUTOLAND[ \t]+REPORT",
}

_MONTHS = r"(?:JAN|FEB|MAR|APR|MAY|JUN|JUL|AUG|SEP|OCT|NOV|DEC)"

# Value shapes for non-free-text fields. Each ends in a permissive
# alternative where a malformed value should still be captured, so that
# coercion can report it instead of the field looking absent.
SHAPES: dict[str, str] = {
    "report_number": r"[A-Z0-9][A-Z0-9\-/_]*",
    "aircraft_reg": r"[A-Z0-9]{1,3}[ \t]?-[ \t]?[A-Z0-9]{2,6}|[A-Z0-9][A-Z0-9\-]*",
    "flight_number": r"[A-Z0-9]{2}[ \t]?\d{1,4}[A-Z]?|[A-Z0-9][A-Z0-9\-]*",
    "airport": r"[A-Z0-9]{3,4}",
    "runway": r"\d{1,2}[ \t]?[LRC]?|[A-Z0-9]{1,4}",
    "date_utc": (
        r"\d{4}-\d{1,2}-\d{1,2}"
        r"|\d{1,2}[/.\-]\d{1,2}[/.\-]\d{2,4}"
        rf"|\d{{1,2}}[ \t\-]?{_MONTHS}[ \t\-]?\d{{2,4}}"
        r"|\d{8}"
        r"|\S+"
    ),
    "time_utc": r"\d{1,2}:\d{2}(?::\d{2})?(?:[ \t]?(?:Z|UTC))?|\d{4}(?:[ \t]?(?:Z|UTC))?|\S+",
    "wind_velocity": r"\S+",
    "qnh": r"\S+",
    "temperature": r"(?:M|-|\+)?\d{1,2}(?:[ \t]?(?:°|DEG)?[ \t]?C)?|\S+",
}


class PatternVariant(IntEnum):
    """Cascade position; lower values are tried first."""

    NEXT_LINE = 1
    INLINE = 2
    LOOSE = 3


CASCADE_ORDER: tuple[PatternVariant, ...] = (
    PatternVariant.NEXT_LINE,
    PatternVariant.INLINE,
    PatternVariant.LOOSE,
)


def _label(name: str) -> str:
    return f"(?:{LABELS[name]})(?![A-Z0-9])"


def _alternation(names: tuple[str, ...]) -> str:
    parts = [LABELS[n] if n in LABELS else SECTION_MARKERS[n] for n in names]
    return "(?:" + "|".join(f"(?:{p})" for p in parts) + ")(?![A-Z0-9])"


# A value starts with a visible non-colon character and is never a field label.
_VALUE_START = r"(?=[^\s:])(?!" + _alternation(tuple(LABELS)) + ")"

DEFAULT_TERMINATORS: tuple[str, ...] = (*LABELS, *SECTION_MARKERS)


@dataclass(frozen=True)
class FieldMatch:
    """A raw captured value and the cascade variant that produced it."""

    value: str
    variant: PatternVariant
    start: int


@dataclass(frozen=True)
class FieldPattern:
    """The compiled cascade for one field.

    Args:
        name: Field name; selects the label from :data:`LABELS`.
        shape: Value regex for shaped fields, or None for free text.
        terminators: Labels (or section markers) that end this field's value.
    """

    name: str
    shape: str | None = None
    terminators: tuple[str, ...] = DEFAULT_TERMINATORS
    cascade: tuple[tuple[PatternVariant, re.Pattern[str]], ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "cascade", build_cascade(self.name, self.shape, self.terminators))

    def match(self, text: str) -> FieldMatch | None:
        """Run the cascade; return the first variant's first match, or None."""
        for variant, pattern in self.cascade:
            m = pattern.search(text)
            if m:
                return FieldMatch(value=m.group("value"), variant=variant, start=m.start("value"))
        return None


def build_cascade(
    name: str,
    shape: str | None,
    terminators: tuple[str, ...] = DEFAULT_TERMINATORS,
) -> tuple[tuple[PatternVariant, re.Pattern[str]], ...]:
    """Compile the three cascade variants for a field, in priority order."""
    label = _label(name)
    terms = _alternation(terminators)
    line_start = r"^[ \t]*"
    anywhere = r"(?<![A-Z0-9/])"

    if shape is None:
        next_line_value = r"[^\s:][\s\S]*?"
        next_line_end = rf"(?=\s*\n[ \t]*{terms}|\s*\Z)"
        inline_value = next_line_value
        loose_value = r"[^\s:](?:[^\n]*\S)?"
        line_end = rf"\s*\n[ \t]*{terms}|\s*\Z"
    else:
        next_line_value = inline_value = loose_value = f"(?:{shape})"
        next_line_end = r"(?=[ \t]*(?:\n|\Z))"
        line_end = r"[ \t]*(?:\n|\Z)"

    # A neighbouring label ends an inline value when followed by a colon or
    # set off by a column gap of two or more spaces.
    inline_end = rf"(?=[ \t]+{terms}[ \t]*:|[ \t]{{2,}}{terms}|{line_end})"

    sources = {
        PatternVariant.NEXT_LINE: (
            rf"{line_start}{label}[ \t]*:?[ \t]*\n\s*{_VALUE_START}"
            rf"(?P<value>{next_line_value}){next_line_end}"
        ),
        PatternVariant.INLINE: (
            rf"{line_start}{label}(?:[ \t]*:[ \t]*|[ \t]+){_VALUE_START}"
            rf"(?P<value>{inline_value}){inline_end}"
        ),
        PatternVariant.LOOSE: (
            rf"{anywhere}{label}[:\s]+{_VALUE_START}(?P<value>{loose_value})"
        ),
    }
    return tuple((variant, re.compile(sources[variant], _FLAGS)) for variant in CASCADE_ORDER)


# Result markers are matched case-sensitively as printed on the form.
SUCCESSFUL_MARKER = re.compile(r"(?<![A-Z])SUCCESSFUL(?![A-Z])")
UNSUCCESSFUL_MARKER = re.compile(r"(?<![A-Z])UNSUCCESSFUL(?![A-Z])")
