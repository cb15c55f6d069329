"""Slope and grade formulas (civil engineering)."""

from __future__ import annotations

import math

from engcalc.models.formulas import RiseRunInput, RiseSlopeInput, SlopeRunInput
from engcalc.services.formatting import as_number, format_fixed, format_number, round_to
from engcalc.services.formulas.base import Derivation, DivisionByZeroError, FormulaOutput, require_finite


def _require_run(run: float) -> None:
    if run == 0:
        raise DivisionByZeroError("Run cannot be zero (division by zero)")


def _angle_of(slope: float) -> tuple[float, float]:
    angle_radians = math.atan(slope)
    return angle_radians, math.degrees(angle_radians)


def slope_basic(params: RiseRunInput) -> FormulaOutput:
    _require_run(params.run)

    slope = params.rise / params.run
    grade_percent = slope * 100
    require_finite(slope, grade_percent)
    _, angle_degrees = _angle_of(slope)
    if params.rise == 0:
        ratio = "0:1"
    else:
        run_per_rise = abs(params.run / params.rise)
        require_finite(run_per_rise)
        ratio = f"1:{format_number(round_to(run_per_rise, 2))}"

    derivation = (
        Derivation("Slope Calculation")
        .formula("Slope = Rise ÷ Run")
        .section("Given", f"Rise = {format_number(params.rise)}", f"Run = {format_number(params.run)}")
        .section(
            "Calculation",
            f"Slope = {format_number(params.rise)} ÷ {format_number(params.run)} = {format_fixed(slope, 4)}",
            f"Grade% = {format_fixed(slope, 4)} × 100 = {format_fixed(grade_percent, 2)}%",
            f"Angle = arctan({format_fixed(slope, 4)}) = {format_fixed(angle_degrees, 2)}°",
            f"Ratio (V:H) = {ratio}",
        )
        .result(f"Slope = {format_fixed(slope, 4)}")
    )

    return FormulaOutput(
        data={
            "slope": round_to(slope, 4),
            "gradePercent": round_to(grade_percent, 2),
            "angle": round_to(angle_degrees, 2),
            "ratio": ratio,
        },
        derivation=derivation.render(),
    )


def grade_percent(params: RiseRunInput) -> FormulaOutput:
    _require_run(params.run)

    slope = params.rise / params.run
    grade = slope * 100
    require_finite(slope, grade)
    angle_radians, angle_degrees = _angle_of(slope)

    derivation = (
        Derivation("Grade Percentage Calculation")
        .formula("Grade% = (Rise ÷ Run) × 100")
        .section("Given", f"Rise = {format_number(params.rise)}", f"Run = {format_number(params.run)}")
        .section(
            "Calculation",
            f"Slope = {format_number(params.rise)} ÷ {format_number(params.run)} = {format_fixed(slope, 4)}",
            f"Grade% = {format_fixed(slope, 4)} × 100 = {format_fixed(grade, 2)}%",
            f"Angle = arctan({format_fixed(slope, 4)}) = {format_fixed(angle_degrees, 2)}°",
        )
        .result(f"{format_fixed(grade, 2)}% grade")
    )

    return FormulaOutput(
        data={
            "gradePercent": round_to(grade, 2),
            "slope": round_to(slope, 4),
            "angle": round_to(angle_degrees, 2),
            "angleRadians": round_to(angle_radians, 4),
        },
        derivation=derivation.render(),
    )


def slope_angle(params: RiseRunInput) -> FormulaOutput:
    _require_run(params.run)

    slope = params.rise / params.run
    angle_radians, angle_degrees = _angle_of(slope)
    grade = slope * 100
    require_finite(slope, grade)

    derivation = (
        Derivation("Slope Angle Calculation")
        .formula("θ = arctan(Rise ÷ Run)")
        .section("Given", f"Rise = {format_number(params.rise)}", f"Run = {format_number(params.run)}")
        .section(
            "Calculation",
            f"Slope = {format_number(params.rise)} ÷ {format_number(params.run)} = {format_fixed(slope, 4)}",
            f"Angle (radians) = arctan({format_fixed(slope, 4)}) = {format_fixed(angle_radians, 4)} rad",
            f"Angle (degrees) = {format_fixed(angle_radians, 4)} × (180/π) = {format_fixed(angle_degrees, 2)}°",
            f"Grade = {format_fixed(slope, 4)} × 100 = {format_fixed(grade, 2)}%",
        )
        .result(f"{format_fixed(angle_degrees, 2)}° ({format_fixed(angle_radians, 4)} radians)")
    )

    return FormulaOutput(
        data={
            "angleDegrees": round_to(angle_degrees, 2),
            "angleRadians": round_to(angle_radians, 4),
            "slope": round_to(slope, 4),
            "gradePercent": round_to(grade, 2),
        },
        derivation=derivation.render(),
    )


def horizontal_distance(params: RiseSlopeInput) -> FormulaOutput:
    if params.slope == 0:
        raise DivisionByZeroError("Slope cannot be zero (division by zero)")

    run = params.rise / params.slope
    grade = params.slope * 100
    require_finite(run, grade)
    _, angle_degrees = _angle_of(params.slope)

    derivation = (
        Derivation("Horizontal Distance Calculation")
        .formula("Run = Rise ÷ Slope")
        .section("Given", f"Rise = {format_number(params.rise)}", f"Slope = {format_number(params.slope)}")
        .section(
            "Calculation",
            f"Run = {format_number(params.rise)} ÷ {format_number(params.slope)} = {format_fixed(run, 2)}",
            f"Grade% = {format_number(params.slope)} × 100 = {format_fixed(grade, 2)}%",
            f"Angle = arctan({format_number(params.slope)}) = {format_fixed(angle_degrees, 2)}°",
        )
        .result(f"Horizontal distance = {format_fixed(run, 2)}")
    )

    return FormulaOutput(
        data={
            "run": round_to(run, 2),
            "slope": as_number(params.slope),
            "gradePercent": round_to(grade, 2),
            "angle": round_to(angle_degrees, 2),
        },
        derivation=derivation.render(),
    )


def vertical_rise(params: SlopeRunInput) -> FormulaOutput:
    rise = params.slope * params.run
    grade = params.slope * 100
    require_finite(rise, grade)
    _, angle_degrees = _angle_of(params.slope)

    derivation = (
        Derivation("Vertical Rise Calculation")
        .formula("Rise = Slope × Run")
        .section("Given", f"Slope = {format_number(params.slope)}", f"Run = {format_number(params.run)}")
        .section(
            "Calculation",
            f"Rise = {format_number(params.slope)} × {format_number(params.run)} = {format_fixed(rise, 2)}",
            f"Grade% = {format_number(params.slope)} × 100 = {format_fixed(grade, 2)}%",
            f"Angle = arctan({format_number(params.slope)}) = {format_fixed(angle_degrees, 2)}°",
        )
        .result(f"Vertical rise = {format_fixed(rise, 2)}")
    )

    return FormulaOutput(
        data={
            "rise": round_to(rise, 2),
            "slope": as_number(params.slope),
            "gradePercent": round_to(grade, 2),
            "angle": round_to(angle_degrees, 2),
        },
        derivation=derivation.render(),
    )
