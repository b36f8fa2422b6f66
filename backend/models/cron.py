"""Cron expression data models"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class AnyField(BaseModel):
    """`*` - every value of the field"""

    kind: Literal["any"] = "any"

    def to_expression(self) -> str:
        return "*"


class ValueField(BaseModel):
    """`N` - a single value"""

    kind: Literal["value"] = "value"
    value: int

    def to_expression(self) -> str:
        return str(self.value)


class ListField(BaseModel):
    """`N,M,...` - enumerated values"""

    kind: Literal["list"] = "list"
    values: list[int]

    def to_expression(self) -> str:
        return ",".join(str(value) for value in self.values)


class RangeField(BaseModel):
    """`N-M` - inclusive range"""

    kind: Literal["range"] = "range"
    start: int
    end: int

    def to_expression(self) -> str:
        return f"{self.start}-{self.end}"


class StepField(BaseModel):
    """`*/K` or `N-M/K` - every K-th value, from base"""

    kind: Literal["step"] = "step"
    base: int
    interval: int
    end: int | None = None  # Upper bound of a ranged step

    def to_expression(self) -> str:
        if self.end is None:
            return f"*/{self.interval}"
        return f"{self.base}-{self.end}/{self.interval}"


CronField = Annotated[
    Union[AnyField, ValueField, ListField, RangeField, StepField],
    Field(discriminator="kind"),
]


class CronRequest(BaseModel):
    """Request to parse and describe a cron expression"""

    expression: str


class CronResponse(BaseModel):
    """Parsed cron expression"""

    expression: str  # Normalized, single-spaced
    fields: list[CronField]
    description: str


class CronPreset(BaseModel):
    """A commonly used schedule"""

    label: str
    expression: str
