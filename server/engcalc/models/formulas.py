from __future__ import annotations

import re
from typing import Annotated, Any, List, Literal, Optional

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field, field_validator

FiniteFloat = Annotated[float, Field(allow_inf_nan=False)]


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


OptionalFloat = Annotated[Optional[FiniteFloat], BeforeValidator(_blank_to_none)]


class FormulaInput(BaseModel):
    """Base for the typed inputs of a formula; unknown form fields are ignored."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class RiseRunInput(FormulaInput):
    rise: FiniteFloat
    run: FiniteFloat


class RiseSlopeInput(FormulaInput):
    rise: FiniteFloat
    slope: FiniteFloat


class SlopeRunInput(FormulaInput):
    slope: FiniteFloat
    run: FiniteFloat


class QuadraticInput(FormulaInput):
    a: FiniteFloat
    b: FiniteFloat
    c: FiniteFloat


class TrigonometricInput(FormulaInput):
    angle: FiniteFloat
    unit: Literal["degrees", "radians"] = Field(
        "degrees", validation_alias=AliasChoices("angle_unit", "unit", "angleUnit")
    )

    @field_validator("unit", mode="before")
    @classmethod
    def normalize_unit(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return "degrees"
        if isinstance(value, str):
            return value.strip().lower()
        return value


class PercentErrorInput(FormulaInput):
    experimental: FiniteFloat = Field(
        validation_alias=AliasChoices("experimental_value", "experimental", "experimentalValue")
    )
    theoretical: FiniteFloat = Field(
        validation_alias=AliasChoices("theoretical_value", "theoretical", "theoreticalValue")
    )


class ElectricalInput(FormulaInput):
    """Any subset of voltage, current and resistance; blanks count as missing."""

    voltage: OptionalFloat = None
    current: OptionalFloat = None
    resistance: OptionalFloat = None

    @property
    def provided(self) -> List[str]:
        return [
            name
            for name in ("voltage", "current", "resistance")
            if getattr(self, name) is not None
        ]


class ResistanceListInput(FormulaInput):
    resistances: List[FiniteFloat] = Field(validation_alias=AliasChoices("resistances", "values"))

    @field_validator("resistances", mode="before")
    @classmethod
    def split_resistances(cls, value: Any) -> Any:
        # Forms submit "10, 20, 30"; query strings may repeat the key instead.
        if isinstance(value, str):
            return [part for part in re.split(r"[,\s;]+", value.strip()) if part]
        if isinstance(value, (int, float)):
            return [value]
        if isinstance(value, (list, tuple)):
            flattened: list[Any] = []
            for item in value:
                if isinstance(item, str):
                    flattened.extend(part for part in re.split(r"[,\s;]+", item.strip()) if part)
                else:
                    flattened.append(item)
            return flattened
        return value
