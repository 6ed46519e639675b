"""Timestamp normalization.

Clients send points in time in several shapes: browser ``datetime-local``
pickers drop the seconds, ISO producers append ``Z`` or an offset, some send
a bare date and some send epoch milliseconds. Everything is converted to a
``Timestamp`` (seconds + nanoseconds since the epoch) before it reaches a
service, and rendered back as an ISO-8601 UTC string on the way out.
"""

from __future__ import annotations

import calendar
import logging
import re
import time
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Any, Optional

from google.api_core.datetime_helpers import DatetimeWithNanoseconds

from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)

NANOS_PER_SECOND = 1_000_000_000
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
# 0001-01-01T00:00:00Z .. 9999-12-31T23:59:59Z, the range a datetime can hold.
MIN_SECONDS = -62_135_596_800
MAX_SECONDS = 253_402_300_799

SUPPORTED_FORMATS = (
    "2025-10-11T11:50",
    "2025-10-11T11:50:00",
    "2025-10-11T11:50:00Z",
    "2025-10-11",
    "1760183400000",
)

_DATETIME_LOCAL = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}")
_DATE_TIME = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
    r"T(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2})"
    r"(?::(?P<second>[0-9]{2})(?:\.(?P<fraction>[0-9]{1,9}))?)?"
    r"(?P<zone>Z|[+-][0-9]{2}:[0-9]{2})?"
)
_DATE = re.compile(r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})")
_EPOCH_MILLIS = re.compile(r"[+-]?[0-9]+")


class MalformedTimestamp(ValidationError):
    """Raised when a text matches none of the supported timestamp formats."""

    def __init__(self, text: str, supported_formats: tuple[str, ...] = SUPPORTED_FORMATS):
        self.text = text
        self.supported_formats = supported_formats
        super().__init__(
            f"Unable to parse timestamp: '{text}'. Supported formats: {', '.join(supported_formats)}"
        )


@dataclass(frozen=True, order=True)
class Timestamp:
    """Point in time as whole seconds plus a nanosecond remainder in [0, 1e9)."""

    seconds: int
    nanos: int = 0

    def __post_init__(self) -> None:
        carry, nanos = divmod(int(self.nanos), NANOS_PER_SECOND)
        object.__setattr__(self, "seconds", int(self.seconds) + carry)
        object.__setattr__(self, "nanos", nanos)

    @classmethod
    def now(cls) -> "Timestamp":
        seconds, nanos = divmod(time.time_ns(), NANOS_PER_SECOND)
        return cls(seconds, nanos)

    @classmethod
    def from_epoch_millis(cls, millis: int) -> "Timestamp":
        seconds, remainder = divmod(int(millis), 1000)
        return cls(seconds, remainder * 1_000_000)

    @classmethod
    def from_datetime(cls, value: datetime) -> "Timestamp":
        """Convert a datetime; naive values are taken as UTC."""

        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        if isinstance(value, DatetimeWithNanoseconds):
            nanos = value.nanosecond
        else:
            nanos = value.microsecond * 1000
        return cls(calendar.timegm(value.utctimetuple()), nanos)

    def to_datetime(self) -> DatetimeWithNanoseconds:
        """UTC datetime keeping full precision (Firestore stores nanoseconds)."""

        base = _EPOCH + timedelta(seconds=self.seconds)
        return DatetimeWithNanoseconds(
            base.year,
            base.month,
            base.day,
            base.hour,
            base.minute,
            base.second,
            nanosecond=self.nanos,
            tzinfo=timezone.utc,
        )


def format_timestamp(ts: Optional[Timestamp]) -> Optional[str]:
    """Render as ISO-8601 in UTC, e.g. ``2025-10-07T01:33:00Z``.

    The fraction is printed only when non-zero, in groups of 3, 6 or 9 digits.
    """

    if ts is None:
        return None
    text = (_EPOCH + timedelta(seconds=ts.seconds)).replace(tzinfo=None).isoformat(timespec="seconds")
    if ts.nanos:
        if ts.nanos % 1_000_000 == 0:
            text += f".{ts.nanos // 1_000_000:03d}"
        elif ts.nanos % 1000 == 0:
            text += f".{ts.nanos // 1000:06d}"
        else:
            text += f".{ts.nanos:09d}"
    return text + "Z"


def _in_range(ts: Timestamp) -> bool:
    return MIN_SECONDS <= ts.seconds <= MAX_SECONDS


def _fraction_to_nanos(fraction: Optional[str]) -> int:
    if not fraction:
        return 0
    return int(fraction.ljust(9, "0"))


def _wall_clock(match: re.Match) -> datetime:
    return datetime(
        int(match["year"]),
        int(match["month"]),
        int(match["day"]),
        int(match["hour"]),
        int(match["minute"]),
        int(match["second"] or 0),
    )


def _parse_instant(text: str) -> Optional[Timestamp]:
    match = _DATE_TIME.fullmatch(text)
    # An instant needs its seconds: 2025-10-11T11:50Z is rejected.
    if not match or not match["zone"] or match["second"] is None:
        return None
    zone = match["zone"]
    if zone == "Z":
        offset = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        offset = timezone(sign * timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6])))
    moment = _wall_clock(match).replace(tzinfo=offset)
    return Timestamp(calendar.timegm(moment.utctimetuple()), _fraction_to_nanos(match["fraction"]))


def _parse_local(text: str, zone: tzinfo) -> Optional[Timestamp]:
    match = _DATE_TIME.fullmatch(text)
    if not match or match["zone"]:
        return None
    moment = _wall_clock(match).replace(tzinfo=zone)
    return Timestamp(calendar.timegm(moment.utctimetuple()), _fraction_to_nanos(match["fraction"]))


def _parse_date(text: str) -> Optional[Timestamp]:
    match = _DATE.fullmatch(text)
    if not match:
        return None
    day = date(int(match["year"]), int(match["month"]), int(match["day"]))
    return Timestamp(calendar.timegm(day.timetuple()))


def _parse_epoch_millis(text: str) -> Optional[Timestamp]:
    if not _EPOCH_MILLIS.fullmatch(text):
        return None
    return Timestamp.from_epoch_millis(int(text))


class TimestampNormalizer:
    """Parses client-supplied timestamps.

    ``local_zone`` is the zone a date-time without offset is read in. Request
    fields and entity bodies historically used different zones, so each call
    site owns its own normalizer instead of sharing one default.
    """

    def __init__(self, local_zone: tzinfo = timezone.utc):
        self._local_zone = local_zone

    @property
    def local_zone(self) -> tzinfo:
        return self._local_zone

    def parse(self, text: Optional[str]) -> Optional[Timestamp]:
        if not text:
            return None

        logger.debug("Parsing timestamp from: %s", text)
        candidate = text + ":00" if _DATETIME_LOCAL.fullmatch(text) else text

        attempts = (
            ("ISO instant", _parse_instant),
            ("local date-time", lambda value: _parse_local(value, self._local_zone)),
            ("date only", _parse_date),
            ("epoch milliseconds", _parse_epoch_millis),
        )
        for label, attempt in attempts:
            try:
                result = attempt(candidate)
            except (ValueError, OverflowError):
                # Out-of-range field (month 13, hour 25, ...): try the next format.
                continue
            if result is not None and _in_range(result):
                logger.debug("Parsed %r as %s", candidate, label)
                return result

        logger.error("Failed to parse timestamp: %s", text)
        raise MalformedTimestamp(text)

    def coerce(self, value: Any) -> Optional[Timestamp]:
        """Decode a JSON value: object ``{seconds, nanos}``, number or string."""

        if value is None:
            return None
        if isinstance(value, Timestamp):
            return value
        if isinstance(value, datetime):
            return Timestamp.from_datetime(value)
        if isinstance(value, dict):
            if "seconds" not in value:
                raise MalformedTimestamp(str(value))
            try:
                result = Timestamp(int(value["seconds"]), int(value.get("nanos") or 0))
            except (TypeError, ValueError) as exc:
                raise MalformedTimestamp(str(value)) from exc
            if not _in_range(result):
                raise MalformedTimestamp(str(value))
            return result
        if isinstance(value, bool):
            raise MalformedTimestamp(str(value))
        if isinstance(value, int):
            return self.parse(str(value))
        if isinstance(value, str):
            return self.parse(value)
        raise MalformedTimestamp(str(value))
