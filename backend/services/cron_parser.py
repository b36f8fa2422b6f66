"""
Cron Parser Service - Parse 5-field cron expressions and describe them in English

Supports: *, N, N,M,..., N-M, */K, N-M/K
Month and weekday names (JAN, MON, ...) are accepted wherever a number is.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from models.cron import (
    AnyField,
    CronField,
    CronPreset,
    ListField,
    RangeField,
    StepField,
    ValueField,
)
from services.errors import ParseError

_NUMBER_RE = re.compile(r"[0-9]+")

MONTH_NAMES = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
DAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]


@dataclass(frozen=True)
class CronDomain:
    """Value range and English phrasing of one cron field position"""

    name: str
    minimum: int
    maximum: int
    unit: str
    plural: str
    any_phrase: str | None  # None: omitted from descriptions when `*`
    value_format: str
    list_prefix: str
    labels: tuple[str, ...] = ()  # Display names, indexed from minimum
    names: dict[str, int] = field(default_factory=dict)

    def render(self, value: int) -> str:
        if self.labels:
            return self.labels[value - self.minimum]
        return str(value)


MINUTE = CronDomain(
    "minute", 0, 59,
    unit="minute",
    plural="minutes",
    any_phrase="every minute",
    value_format="at minute {}",
    list_prefix="at minutes",
)
HOUR = CronDomain(
    "hour", 0, 23,
    unit="hour",
    plural="hours",
    any_phrase="of every hour",
    value_format="at {}:00",
    list_prefix="at hours",
)
DAY_OF_MONTH = CronDomain(
    "day-of-month", 1, 31,
    unit="day",
    plural="days",
    any_phrase=None,
    value_format="on day {}",
    list_prefix="on days",
)
MONTH = CronDomain(
    "month", 1, 12,
    unit="month",
    plural="months",
    any_phrase=None,
    value_format="in {}",
    list_prefix="in",
    labels=tuple(MONTH_NAMES),
    names={name.upper(): index + 1 for index, name in enumerate(MONTH_NAMES)},
)
DAY_OF_WEEK = CronDomain(
    "day-of-week", 0, 6,
    unit="day of the week",
    plural="days of the week",
    any_phrase=None,
    value_format="on {}",
    list_prefix="on",
    labels=tuple(DAY_NAMES),
    names={name[:3].upper(): index for index, name in enumerate(DAY_NAMES)},
)

DOMAINS = (MINUTE, HOUR, DAY_OF_MONTH, MONTH, DAY_OF_WEEK)

PRESETS = [
    CronPreset(label="Every minute", expression="* * * * *"),
    CronPreset(label="Every 5 minutes", expression="*/5 * * * *"),
    CronPreset(label="Every 15 minutes", expression="*/15 * * * *"),
    CronPreset(label="Every hour", expression="0 * * * *"),
    CronPreset(label="Every day at midnight", expression="0 0 * * *"),
    CronPreset(label="Every day at noon", expression="0 12 * * *"),
    CronPreset(label="Every Monday at 9am", expression="0 9 * * 1"),
    CronPreset(label="Every Sunday at midnight", expression="0 0 * * 0"),
    CronPreset(label="First day of month", expression="0 0 1 * *"),
    CronPreset(label="Every weekday at 8am", expression="0 8 * * 1-5"),
]


def _check_value(value: int, domain: CronDomain) -> int:
    if not domain.minimum <= value <= domain.maximum:
        raise ParseError(
            f"{domain.name} value {value} is outside {domain.minimum}-{domain.maximum}",
            field=domain.name,
        )
    return value


def _parse_literal(token: str, domain: CronDomain) -> int:
    """Parse a number or name and check it against the field's range"""
    if _NUMBER_RE.fullmatch(token):
        value = int(token)
    elif token.upper() in domain.names:
        value = domain.names[token.upper()]
    else:
        raise ParseError(f"Invalid {domain.name} value '{token}'", field=domain.name)

    return _check_value(value, domain)


def _parse_range(text: str, domain: CronDomain) -> tuple[int, int]:
    start_text, _, end_text = text.partition("-")
    start = _parse_literal(start_text, domain)
    end = _parse_literal(end_text, domain)
    if start > end:
        raise ParseError(f"Inverted {domain.name} range '{text}'", field=domain.name)
    return start, end


def parse_field(raw: str, domain: CronDomain) -> CronField:
    """Parse one cron field against its domain"""
    text = raw.strip()
    if not text:
        raise ParseError(f"Empty {domain.name} field", field=domain.name)

    if text == "*":
        return AnyField()

    if "/" in text:
        base_text, _, step_text = text.partition("/")
        if not _NUMBER_RE.fullmatch(step_text) or int(step_text) < 1:
            raise ParseError(
                f"Step '{step_text}' in {domain.name} field must be a positive integer",
                field=domain.name,
            )
        interval = int(step_text)
        if base_text == "*":
            return StepField(base=0, interval=interval)
        if "-" in base_text:
            start, end = _parse_range(base_text, domain)
            return StepField(base=start, interval=interval, end=end)
        raise ParseError(f"Unrecognized {domain.name} field '{text}'", field=domain.name)

    if "," in text:
        return ListField(values=[_parse_literal(item, domain) for item in text.split(",")])

    if "-" in text:
        start, end = _parse_range(text, domain)
        return RangeField(start=start, end=end)

    return ValueField(value=_parse_literal(text, domain))


def parse_cron(expression: str) -> list[CronField]:
    """Parse a 5-field expression: minute hour day-of-month month day-of-week"""
    parts = expression.split()
    if len(parts) != len(DOMAINS):
        raise ParseError(f"Expected {len(DOMAINS)} fields, got {len(parts)}")
    return [parse_field(part, domain) for part, domain in zip(parts, DOMAINS)]


def build_expression(fields: list[CronField]) -> str:
    """Render parsed fields back into expression text"""
    return " ".join(cron_field.to_expression() for cron_field in fields)


def _check_field(cron_field: CronField, domain: CronDomain) -> None:
    """Re-check a field built outside parse_field against its domain"""
    if isinstance(cron_field, ValueField):
        _check_value(cron_field.value, domain)
    elif isinstance(cron_field, ListField):
        if not cron_field.values:
            raise ParseError(f"Empty {domain.name} list", field=domain.name)
        for value in cron_field.values:
            _check_value(value, domain)
    elif isinstance(cron_field, RangeField):
        _check_value(cron_field.start, domain)
        _check_value(cron_field.end, domain)
        if cron_field.start > cron_field.end:
            raise ParseError(f"Inverted {domain.name} range", field=domain.name)
    elif isinstance(cron_field, StepField):
        if cron_field.interval < 1:
            raise ParseError(
                f"Step '{cron_field.interval}' in {domain.name} field must be a positive integer",
                field=domain.name,
            )
        # `*/K` carries base 0 for every field, only ranged steps have literals
        if cron_field.end is not None:
            _check_value(cron_field.base, domain)
            _check_value(cron_field.end, domain)
            if cron_field.base > cron_field.end:
                raise ParseError(f"Inverted {domain.name} range", field=domain.name)


def _describe_field(cron_field: CronField, domain: CronDomain) -> str | None:
    if isinstance(cron_field, AnyField):
        return domain.any_phrase

    if isinstance(cron_field, ValueField):
        return domain.value_format.format(domain.render(cron_field.value))

    if isinstance(cron_field, ListField):
        rendered = ", ".join(domain.render(value) for value in cron_field.values)
        return f"{domain.list_prefix} {rendered}"

    if isinstance(cron_field, RangeField):
        return (
            f"{domain.list_prefix} {domain.render(cron_field.start)}"
            f" through {domain.render(cron_field.end)}"
        )

    if cron_field.interval == 1:
        phrase = f"every {domain.unit}"
    else:
        phrase = f"every {cron_field.interval} {domain.plural}"
    if cron_field.end is not None:
        phrase += f" from {domain.render(cron_field.base)} through {domain.render(cron_field.end)}"
    return phrase


def describe_cron(fields: list[CronField]) -> str:
    """Compose an English description, one fragment per field"""
    if len(fields) != len(DOMAINS):
        raise ParseError(f"Expected {len(DOMAINS)} fields, got {len(fields)}")

    descriptions = []
    for cron_field, domain in zip(fields, DOMAINS):
        _check_field(cron_field, domain)
        fragment = _describe_field(cron_field, domain)
        if fragment:
            descriptions.append(fragment)
    return " ".join(descriptions)
