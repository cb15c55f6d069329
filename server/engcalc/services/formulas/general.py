"""General math: quadratic roots, trigonometric ratios and percent error."""

from __future__ import annotations

import math

from engcalc.models.formulas import PercentErrorInput, QuadraticInput, TrigonometricInput
from engcalc.services.formatting import (
    as_number,
    format_fixed,
    format_number,
    reciprocal,
    round_to,
)
from engcalc.services.formulas.base import (
    Derivation,
    DivisionByZeroError,
    FormulaOutput,
    InvalidDomainError,
    require_finite,
)


def _signed(value: float) -> str:
    sign = "-" if value < 0 else "+"
    return f"{sign} {format_number(abs(value))}"


def _parenthesized(value: float) -> str:
    text = format_number(value)
    return f"({text})" if value < 0 else text


def quadratic_equation(params: QuadraticInput) -> FormulaOutput:
    a, b, c = params.a, params.b, params.c
    if a == 0:
        raise InvalidDomainError('Coefficient "a" cannot be zero (not a quadratic equation)')

    b_squared = b * b
    four_ac = 4 * a * c
    discriminant = b_squared - four_ac
    require_finite(b_squared, four_ac, discriminant)

    derivation = (
        Derivation("Quadratic Equation Solver")
        .formula("x = (-b ± √(b² - 4ac)) / 2a")
        .note(f"Given equation: {format_number(a)}x² {_signed(b)}x {_signed(c)} = 0")
        .section("Coefficients", f"a = {format_number(a)}", f"b = {format_number(b)}", f"c = {format_number(c)}")
        .section(
            "Calculation",
            f"Discriminant = b² - 4ac = {_parenthesized(b)}² - 4({format_number(a)})({format_number(c)})"
            f" = {format_number(b_squared)} - {_parenthesized(four_ac)} = {format_number(discriminant)}",
        )
    )

    if discriminant < 0:
        derivation.note(
            "Since discriminant < 0, there are no real solutions.",
            "The equation has two complex solutions.",
        )
        return FormulaOutput(
            data={
                "discriminant": round_to(discriminant, 4),
                "hasRealSolutions": False,
                "solutionType": "complex",
                "message": "No real solutions (complex roots exist)",
            },
            derivation=derivation.render(),
        )

    sqrt_discriminant = math.sqrt(discriminant)
    x1 = (-b + sqrt_discriminant) / (2 * a)
    x2 = (-b - sqrt_discriminant) / (2 * a)
    require_finite(x1, x2)
    solution_type = "repeated" if discriminant == 0 else "distinct"

    derivation.section(
        "Solutions",
        f"√{format_number(discriminant)} = {format_fixed(sqrt_discriminant, 4)}",
        f"x₁ = (-{_parenthesized(b)} + {format_fixed(sqrt_discriminant, 4)}) / (2 × {format_number(a)})"
        f" = {format_fixed(x1, 4)}",
        f"x₂ = (-{_parenthesized(b)} - {format_fixed(sqrt_discriminant, 4)}) / (2 × {format_number(a)})"
        f" = {format_fixed(x2, 4)}",
    )
    if solution_type == "repeated":
        derivation.note("Since discriminant = 0, there is one repeated real solution.")
    else:
        derivation.note("Since discriminant > 0, there are two distinct real solutions.")
    derivation.result(f"x₁ = {format_fixed(x1, 4)}, x₂ = {format_fixed(x2, 4)}")

    return FormulaOutput(
        data={
            "discriminant": round_to(discriminant, 4),
            "hasRealSolutions": True,
            "x1": round_to(x1, 4),
            "x2": round_to(x2, 4),
            "solutionType": solution_type,
        },
        derivation=derivation.render(),
    )


def trigonometric(params: TrigonometricInput) -> FormulaOutput:
    if params.unit == "degrees":
        angle_radians = math.radians(params.angle)
        angle_degrees = params.angle
    else:
        angle_radians = params.angle
        angle_degrees = math.degrees(params.angle)

    sin_value = math.sin(angle_radians)
    cos_value = math.cos(angle_radians)
    tan_value = math.tan(angle_radians)
    csc_value = reciprocal(sin_value)
    sec_value = reciprocal(cos_value)
    cot_value = reciprocal(tan_value)
    require_finite(angle_radians, angle_degrees, sin_value, cos_value, tan_value)

    label = f"{format_fixed(angle_degrees, 2)}°"
    derivation = (
        Derivation("Trigonometric Functions Calculation")
        .section(
            "Given",
            f"Angle = {format_number(params.angle)} {params.unit}",
            f"Angle in radians = {format_fixed(angle_radians, 4)} rad",
            f"Angle in degrees = {label}",
        )
        .section(
            "Primary Functions",
            f"sin({label}) = {format_fixed(sin_value, 4)}",
            f"cos({label}) = {format_fixed(cos_value, 4)}",
            f"tan({label}) = {format_fixed(tan_value, 4)}",
        )
        .section(
            "Reciprocal Functions",
            f"csc({label}) = 1/sin = {format_fixed(csc_value, 4)}",
            f"sec({label}) = 1/cos = {format_fixed(sec_value, 4)}",
            f"cot({label}) = 1/tan = {format_fixed(cot_value, 4)}",
        )
        .result(
            f"sin = {format_fixed(sin_value, 4)}, cos = {format_fixed(cos_value, 4)}, "
            f"tan = {format_fixed(tan_value, 4)}"
        )
    )

    return FormulaOutput(
        data={
            "angleRadians": round_to(angle_radians, 4),
            "angleDegrees": round_to(angle_degrees, 2),
            "sin": round_to(sin_value, 4),
            "cos": round_to(cos_value, 4),
            "tan": round_to(tan_value, 4),
            "csc": round_to(csc_value, 4),
            "sec": round_to(sec_value, 4),
            "cot": round_to(cot_value, 4),
        },
        derivation=derivation.render(),
    )


def percent_error(params: PercentErrorInput) -> FormulaOutput:
    experimental, theoretical = params.experimental, params.theoretical
    if theoretical == 0:
        raise DivisionByZeroError("Theoretical value cannot be zero (division by zero)")

    absolute_error = abs(experimental - theoretical)
    relative_error = absolute_error / abs(theoretical)
    percent = relative_error * 100
    require_finite(absolute_error, relative_error, percent)

    derivation = (
        Derivation("Percent Error Calculation")
        .formula("% Error = |Experimental - Theoretical| / |Theoretical| × 100")
        .section(
            "Given",
            f"Experimental Value = {format_number(experimental)}",
            f"Theoretical Value = {format_number(theoretical)}",
        )
        .section(
            "Calculation",
            f"Absolute Error = |{format_number(experimental)} - {format_number(theoretical)}|"
            f" = {format_fixed(absolute_error, 4)}",
            f"Relative Error = {format_fixed(absolute_error, 4)} / |{format_number(theoretical)}|"
            f" = {format_fixed(relative_error, 6)}",
            f"Percent Error = {format_fixed(relative_error, 6)} × 100 = {format_fixed(percent, 2)}%",
        )
        .result(f"{format_fixed(percent, 2)}% error")
    )

    return FormulaOutput(
        data={
            "percentError": round_to(percent, 2),
            "absoluteError": round_to(absolute_error, 4),
            "relativeError": round_to(relative_error, 6),
            "experimentalValue": as_number(experimental),
            "theoreticalValue": as_number(theoretical),
        },
        derivation=derivation.render(),
    )
