from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ErrorKind(str, Enum):
    invalid_domain = "InvalidDomain"
    division_by_zero = "DivisionByZero"
    validation_failure = "ValidationFailure"
    remote_failure = "RemoteFailure"


class CalculationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    formulaId: str = Field(..., min_length=1, description="Identifier of the formula to evaluate.")
    inputs: dict[str, Any] = Field(
        default_factory=dict, description="Parameter name to raw value, as submitted by a form or test."
    )


class CalculationSuccess(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    formulaId: str = Field(..., description="Formula that produced this result.")
    data: dict[str, Any] = Field(default_factory=dict, description="Rounded result fields.")
    derivation: str = Field(..., description="Step-by-step work shown for the calculation.")

    @property
    def ok(self) -> bool:
        return True

    def to_wire(self) -> dict[str, Any]:
        return {"status": self.status, "result": self.data, "workShown": self.derivation}


class CalculationFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["error"] = "error"
    formulaId: str = Field(..., description="Formula that was requested.")
    kind: ErrorKind = Field(..., description="Category of the failure.")
    message: str = Field(..., description="Human-readable explanation.")

    @property
    def ok(self) -> bool:
        return False

    def to_wire(self) -> dict[str, Any]:
        return {"status": self.status, "kind": self.kind.value, "message": self.message}


CalculationResult = Annotated[
    Union[CalculationSuccess, CalculationFailure],
    Field(discriminator="status"),
]


class CalculationCategory(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    discipline: str = Field(..., description="Engineering discipline shown on the dashboard card.")


class FormulaDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Stable formula identifier.")
    category: str = Field(..., description="Category the formula is listed under.")
    title: str
    description: str
    formula: str | None = Field(None, description="Formula as displayed to the user.")
    variables: List[str] = Field(default_factory=list, description="Input names, in form order.")
    evaluable: bool = Field(False, description="Whether the engine can compute this formula.")


class ServiceCheck(BaseModel):
    success: bool
    data: Any | None = None
    error: str | None = None
