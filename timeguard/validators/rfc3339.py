"""
Strict RFC3339 parsing and canonical rendering.

Only the profile `YYYY-MM-DDTHH:MM:SS[.fraction](Z|+HH:MM|-HH:MM)` is accepted.
Fractional seconds are kept verbatim so that precision finer than
microseconds survives a parse/render cycle.

Behavior and error messages must remain consistent across validators.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


DEFAULT_EXAMPLE = "2222-01-01T00:00:00Z"

# Year 2000 shares year 0000's leap-year status and 400-year cycle.
PROXY_YEAR_SHIFT = 2000

_RFC3339_RE = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
    r"T(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    r"(?:\.(?P<fraction>[0-9]+))?"
    r"(?:(?P<zulu>Z)|(?P<sign>[+-])(?P<off_hour>[0-9]{2}):(?P<off_minute>[0-9]{2}))"
)


def utc_reason(example: str = DEFAULT_EXAMPLE) -> str:
    return f'should be an RFC3339 string in UTC, e.g., "{example}"'


class TimeFormatError(ValueError):
    """Raised when a value is not an RFC3339 timestamp in canonical UTC form."""


@dataclass(frozen=True)
class ParsedTimestamp:
    """
    An RFC3339 timestamp as parsed.

    `moment` is timezone-aware and carries the source offset (microsecond
    precision). `fraction` holds the fractional-second digits exactly as
    written, possibly empty.

    datetime cannot hold year 0000, so such values are stored in a proxy
    year `year_shift` years later on the same 400-year Gregorian cycle;
    `year` is the calendar year as written.
    """
    moment: datetime
    fraction: str = ""
    year_shift: int = 0

    @property
    def year(self) -> int:
        return self.moment.year - self.year_shift

    def to_utc(self) -> "ParsedTimestamp":
        return ParsedTimestamp(
            moment=self.moment.astimezone(timezone.utc),
            fraction=self.fraction,
            year_shift=self.year_shift,
        )


def format_rfc3339(ts: ParsedTimestamp) -> str:
    """
    The one canonical rendering routine.

    Zero offset always renders as "Z".
    """
    m = ts.moment
    text = (
        f"{ts.year:04d}-{m.month:02d}-{m.day:02d}"
        f"T{m.hour:02d}:{m.minute:02d}:{m.second:02d}"
    )
    if ts.fraction:
        text += "." + ts.fraction

    offset = m.utcoffset() or timedelta(0)
    if offset == timedelta(0):
        return text + "Z"

    total_minutes = int(offset.total_seconds()) // 60
    sign = "+" if total_minutes > 0 else "-"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{text}{sign}{hours:02d}:{minutes:02d}"


def parse_rfc3339(value: str, *, example: str = DEFAULT_EXAMPLE) -> ParsedTimestamp:
    """
    Parse against the RFC3339 grammar, keeping the source offset.

    Structural failures and out-of-range components (month 13, Feb 30,
    second 60, offset hour 24) all raise TimeFormatError. Year 0000 is
    checked against its proxy year, so 0000-02-29 is accepted.
    """
    if not isinstance(value, str):
        raise TimeFormatError(utc_reason(example))

    match = _RFC3339_RE.fullmatch(value)
    if match is None:
        raise TimeFormatError(utc_reason(example))

    fraction = match.group("fraction") or ""
    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0

    if match.group("zulu"):
        tz = timezone.utc
    else:
        off_hour = int(match.group("off_hour"))
        off_minute = int(match.group("off_minute"))
        if off_hour > 23 or off_minute > 59:
            raise TimeFormatError(utc_reason(example))
        offset = timedelta(hours=off_hour, minutes=off_minute)
        tz = timezone(-offset if match.group("sign") == "-" else offset)

    year = int(match.group("year"))
    year_shift = PROXY_YEAR_SHIFT if year == 0 else 0

    try:
        moment = datetime(
            year + year_shift,
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second")),
            microsecond,
            tzinfo=tz,
        )
    except ValueError as exc:
        raise TimeFormatError(utc_reason(example)) from exc

    return ParsedTimestamp(moment=moment, fraction=fraction, year_shift=year_shift)


def parse_time(value: str, *, example: str = DEFAULT_EXAMPLE) -> ParsedTimestamp:
    """
    Parse an RFC3339 timestamp that must already be in canonical UTC form.

    The value as written and the value converted to UTC are both rendered
    with format_rfc3339; any textual difference is a failure. Returns the
    UTC timestamp.
    """
    parsed = parse_rfc3339(value, example=example)

    try:
        as_utc = parsed.to_utc()
    except OverflowError as exc:
        # e.g. 0001-01-01T00:00:00+01:00 has no representable UTC instant
        raise TimeFormatError(utc_reason(example)) from exc

    if format_rfc3339(as_utc) != format_rfc3339(parsed):
        raise TimeFormatError(utc_reason(example))

    return as_utc
