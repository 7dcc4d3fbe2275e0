"""Field parser for autoland report text.

Turns the linear text of one report into a :class:`ParseOutcome`. Every
field is attempted regardless of earlier failures; problems with required
fields become errors, everything else becomes a warning. The parse succeeds
only when no errors were recorded.

Pure function of its input: no state, no I/O, no randomness.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from loguru import logger
from pydantic import ValidationError

from autoland.errors import FieldParseError
from autoland.models.report import (
    AutolandRecord,
    LandingResult,
    ParsedFields,
    ParseOutcome,
    combine_utc,
)
from autoland.parsing.patterns import (
    SHAPES,
    SUCCESSFUL_MARKER,
    UNSUCCESSFUL_MARKER,
    FieldPattern,
    PatternVariant,
)
from autoland.transforms.dates import parse_report_date, parse_report_time
from autoland.transforms.values import (
    is_valid_aircraft_reg,
    is_valid_flight_number,
    is_valid_wind_velocity,
    normalize_identifier,
    normalize_whitespace,
    parse_int_field,
    parse_temperature,
)

REQUIRED_FIELDS: frozenset[str] = frozenset(
    {"report_number", "aircraft_reg", "flight_number", "date_utc", "time_utc", "result"}
)


@dataclass(frozen=True)
class FieldSpec:
    """How one report field is located, coerced and checked.

    Args:
        pattern: Compiled cascade locating the raw value.
        coerce: Converts the raw capture; raises FieldParseError on bad input.
        check: Optional format predicate; a False result is a warning only.
        check_message: Describes the expected format for that warning.
    """

    pattern: FieldPattern
    coerce: Callable[[str], Any] = normalize_whitespace
    check: Callable[[Any], bool] | None = None
    check_message: str = ""

    @property
    def name(self) -> str:
        return self.pattern.name

    @property
    def required(self) -> bool:
        return self.name in REQUIRED_FIELDS


def _shaped(name: str) -> FieldPattern:
    return FieldPattern(name, shape=SHAPES[name])


# Evaluation order follows the printed layout of the form.
FIELD_SPECS: tuple[FieldSpec, ...] = (
    FieldSpec(_shaped("report_number"), coerce=normalize_identifier),
    FieldSpec(
        _shaped("aircraft_reg"),
        coerce=normalize_identifier,
        check=is_valid_aircraft_reg,
        check_message="expected two-letter prefix and suffix, e.g. VN-A546",
    ),
    FieldSpec(
        _shaped("flight_number"),
        coerce=normalize_identifier,
        check=is_valid_flight_number,
        check_message="expected airline designator and number, e.g. VJ442",
    ),
    FieldSpec(_shaped("date_utc"), coerce=parse_report_date),
    FieldSpec(_shaped("time_utc"), coerce=parse_report_time),
    FieldSpec(_shaped("airport"), coerce=normalize_identifier),
    FieldSpec(_shaped("runway"), coerce=normalize_identifier),
    FieldSpec(FieldPattern("captain")),
    FieldSpec(FieldPattern("first_officer")),
    FieldSpec(
        _shaped("wind_velocity"),
        coerce=normalize_identifier,
        check=is_valid_wind_velocity,
        check_message="expected DDD/SS",
    ),
    FieldSpec(FieldPattern("td_point")),
    FieldSpec(FieldPattern("tracking")),
    FieldSpec(_shaped("qnh"), coerce=lambda raw: parse_int_field(raw, "qnh")),
    FieldSpec(FieldPattern("alignment")),
    FieldSpec(FieldPattern("speed_control")),
    FieldSpec(_shaped("temperature"), coerce=parse_temperature),
    FieldSpec(FieldPattern("landing")),
    FieldSpec(FieldPattern("aircraft_dropout")),
    # Kept verbatim: either a distance or the token CAVOK.
    FieldSpec(FieldPattern("visibility_rvr")),
    FieldSpec(FieldPattern("other")),
    FieldSpec(FieldPattern("reasons")),
    FieldSpec(FieldPattern("captain_signature")),
)


def _prepare_text(text: str) -> str:
    """Normalize line endings and exotic spaces left by PDF extraction."""
    return (
        text.replace("\r\n", "\n")
        .replace("\r", "\n")
        .replace("\u00a0", " ")
        .replace("\u2007", " ")
        .replace("\u202f", " ")
    )


def detect_result(text: str) -> tuple[LandingResult | None, str | None]:
    """Find the landing result from its marker phrase.

    Exactly one of ``SUCCESSFUL`` / ``UNSUCCESSFUL`` must be printed.

    Returns:
        ``(result, None)`` on success, ``(None, error)`` if neither or both
        markers are present.
    """
    successful = SUCCESSFUL_MARKER.search(text) is not None
    unsuccessful = UNSUCCESSFUL_MARKER.search(text) is not None

    if successful and unsuccessful:
        return None, "result: ambiguous, both SUCCESSFUL and UNSUCCESSFUL markers present"
    if successful:
        return LandingResult.SUCCESSFUL, None
    if unsuccessful:
        return LandingResult.UNSUCCESSFUL, None
    return None, "result: no SUCCESSFUL/UNSUCCESSFUL marker found"


def _extract_field(
    spec: FieldSpec,
    text: str,
    errors: list[str],
    warnings: list[str],
) -> Any:
    """Locate, coerce and check one field, recording any problems."""
    match = spec.pattern.match(text)
    if match is None:
        if spec.required:
            errors.append(f"{spec.name}: not found")
        else:
            logger.debug("Optional field '{name}' not present", name=spec.name)
        return None

    logger.debug(
        "Field '{name}' matched by {variant} pattern: {value!r}",
        name=spec.name,
        variant=match.variant.name,
        value=match.value,
    )
    if spec.required and match.variant is PatternVariant.LOOSE:
        warnings.append(f"{spec.name}: matched only by loose fallback pattern")

    try:
        value = spec.coerce(match.value)
    except FieldParseError as e:
        if spec.required:
            errors.append(str(e))
        else:
            warnings.append(f"{e}; value discarded")
        return None

    if spec.check is not None and not spec.check(value):
        warnings.append(f"{spec.name}: unexpected format {value!r}, {spec.check_message}")

    return value


def parse_autoland_report(text: str) -> ParseOutcome:
    """Parse the extracted text of one autoland report.

    Args:
        text: Linear text from :func:`autoland.parsing.pdf_extractor.extract_text`.
            Arbitrary text is accepted; it simply yields errors.

    Returns:
        :class:`ParseOutcome` with the record on success, and the partial
        :class:`ParsedFields` either way.
    """
    prepared = _prepare_text(text)
    errors: list[str] = []
    warnings: list[str] = []
    values: dict[str, Any] = {}

    for spec in FIELD_SPECS:
        values[spec.name] = _extract_field(spec, prepared, errors, warnings)

    result, result_error = detect_result(prepared)
    values["result"] = result
    if result_error is not None:
        errors.append(result_error)

    if values["date_utc"] is not None and values["time_utc"] is not None:
        values["datetime_utc"] = combine_utc(values["date_utc"], values["time_utc"])
    else:
        errors.append("datetime_utc: not computed, date_utc or time_utc missing or invalid")

    if result is LandingResult.UNSUCCESSFUL and not values["reasons"]:
        warnings.append("reasons: UNSUCCESSFUL result without reasons")

    fields = ParsedFields(**values)

    if errors:
        logger.warning(
            "Autoland report parse failed with {n} error(s): {errors}",
            n=len(errors),
            errors="; ".join(errors),
        )
        return ParseOutcome(success=False, fields=fields, errors=errors, warnings=warnings)

    record_values = {k: v for k, v in values.items() if k != "datetime_utc"}
    try:
        record = AutolandRecord(**record_values)
    except ValidationError as e:
        errors.append(f"record: {e.error_count()} validation error(s): {e}")
        return ParseOutcome(success=False, fields=fields, errors=errors, warnings=warnings)

    logger.info(
        "Parsed autoland report {report} ({reg}, {flight}): {result}",
        report=record.report_number,
        reg=record.aircraft_reg,
        flight=record.flight_number,
        result=record.result.value,
    )
    return ParseOutcome(success=True, data=record, fields=fields, warnings=warnings)
