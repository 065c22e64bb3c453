"""Resolved date range for a single chat message"""
from dataclasses import dataclass
from datetime import datetime

from ...utils.date.date_utils import ensure_utc, format_timestamp, try_parse_timestamp


@dataclass(frozen=True)
class DateContext:
    """
    Date range a message refers to.

    Created fresh per message and handed downstream without mutation;
    corrections produce a new instance via dataclasses.replace().
    """

    has_date_reference: bool
    period:             str
    start_date:         datetime
    end_date:           datetime
    human_readable:     str
    timezone:           str
    confidence:         float = 0.0

    def __post_init__(self ) -> None:

        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence must be within [0, 1], got {self.confidence!r}")

        # Frozen; normalize the instants through object.__setattr__
        object.__setattr__(self, 'start_date', ensure_utc(self.start_date))
        object.__setattr__(self, 'end_date', ensure_utc(self.end_date))


    def to_dict(self ) -> dict:

        return {
            'has_date_reference': self.has_date_reference,
            'period':             self.period,
            'start_date':         format_timestamp(self.start_date),
            'end_date':           format_timestamp(self.end_date),
            'human_readable':     self.human_readable,
            'timezone':           self.timezone,
            'confidence':         self.confidence,
        }


    def range_dict(self ) -> dict:

        """Start/end/period only; the shape used in correction logs."""

        return {
            'start_date': format_timestamp(self.start_date),
            'end_date':   format_timestamp(self.end_date),
            'period':     self.period,
        }


    @classmethod
    def from_dict(cls,
            data: dict,
            timezone: str | None = None ) -> 'DateContext':

        """
        Build from a snake_case or camelCase mapping.

        Args:
            data:     Mapping such as {"hasDateReference": true, "startDate": "..."}
            timezone: Overrides whatever timezone the mapping carries

        Raises:
            ValueError: start/end missing or unparseable, confidence out of range
        """

        def pick(snake: str, camel: str, default=None):
            if snake in data:
                return data[snake]
            return data.get(camel, default)

        start = try_parse_timestamp(pick('start_date', 'startDate'))
        end   = try_parse_timestamp(pick('end_date', 'endDate'))

        if start is None or end is None:
            raise ValueError(
                f"Unparseable date range: start={pick('start_date', 'startDate')!r} "
                f"end={pick('end_date', 'endDate')!r}"
            )

        return cls(
            has_date_reference=_as_bool(pick('has_date_reference', 'hasDateReference', False)),
            period=str(pick('period', 'period', 'none')),
            start_date=start,
            end_date=end,
            human_readable=str(pick('human_readable', 'humanReadable', '')),
            timezone=timezone or str(data.get('timezone', '')),
            confidence=float(pick('confidence', 'confidence', 0.0)),
        )


def _as_bool(
        value ) -> bool:

    # JSON replies sometimes quote booleans: "false" must stay False
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")

    return bool(value)
