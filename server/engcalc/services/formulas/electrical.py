"""Ohm's law, electrical power and resistor networks."""

from __future__ import annotations

from engcalc.models.formulas import ElectricalInput, ResistanceListInput
from engcalc.services.formatting import as_number, format_fixed, format_number, round_to
from engcalc.services.formulas.base import (
    Derivation,
    DivisionByZeroError,
    FormulaOutput,
    InvalidDomainError,
    require_finite,
)


def _optional_number(value: float | None) -> int | float | None:
    return None if value is None else as_number(value)


def ohms_law(params: ElectricalInput) -> FormulaOutput:
    if len(params.provided) != 2:
        raise InvalidDomainError(
            "Please provide exactly 2 of the 3 values (voltage, current, resistance)"
        )

    voltage, current, resistance = params.voltage, params.current, params.resistance
    derivation = Derivation("Ohm's Law Calculation").formula("V = I × R")

    if voltage is not None and current is not None:
        if current == 0:
            raise DivisionByZeroError("Current cannot be zero when calculating resistance")
        resistance = voltage / current
        power = voltage * current
        solved_for = "resistance"
        derivation.section(
            "Given",
            f"Voltage (V) = {format_number(voltage)} V",
            f"Current (I) = {format_number(current)} A",
        ).section(
            "Solving for Resistance",
            f"R = V / I = {format_number(voltage)} / {format_number(current)} = {format_fixed(resistance, 4)} Ω",
        ).section(
            "Additional",
            f"Power (P) = V × I = {format_number(voltage)} × {format_number(current)} = {format_fixed(power, 2)} W",
        ).result(f"R = {format_fixed(resistance, 4)} Ω")
        data = {
            "voltage": as_number(voltage),
            "current": as_number(current),
            "resistance": round_to(resistance, 4),
        }
    elif voltage is not None and resistance is not None:
        if resistance == 0:
            raise DivisionByZeroError("Resistance cannot be zero when calculating current")
        current = voltage / resistance
        power = voltage * current
        solved_for = "current"
        derivation.section(
            "Given",
            f"Voltage (V) = {format_number(voltage)} V",
            f"Resistance (R) = {format_number(resistance)} Ω",
        ).section(
            "Solving for Current",
            f"I = V / R = {format_number(voltage)} / {format_number(resistance)} = {format_fixed(current, 4)} A",
        ).section(
            "Additional",
            f"Power (P) = V × I = {format_number(voltage)} × {format_fixed(current, 4)} = {format_fixed(power, 2)} W",
        ).result(f"I = {format_fixed(current, 4)} A")
        data = {
            "voltage": as_number(voltage),
            "current": round_to(current, 4),
            "resistance": as_number(resistance),
        }
    else:
        voltage = current * resistance
        power = voltage * current
        solved_for = "voltage"
        derivation.section(
            "Given",
            f"Current (I) = {format_number(current)} A",
            f"Resistance (R) = {format_number(resistance)} Ω",
        ).section(
            "Solving for Voltage",
            f"V = I × R = {format_number(current)} × {format_number(resistance)} = {format_fixed(voltage, 4)} V",
        ).section(
            "Additional",
            f"Power (P) = V × I = {format_fixed(voltage, 4)} × {format_number(current)} = {format_fixed(power, 2)} W",
        ).result(f"V = {format_fixed(voltage, 4)} V")
        data = {
            "voltage": round_to(voltage, 4),
            "current": as_number(current),
            "resistance": as_number(resistance),
        }

    require_finite(voltage, current, resistance, power)
    data["power"] = round_to(power, 2)
    data["solvedFor"] = solved_for
    return FormulaOutput(data=data, derivation=derivation.render())


def power_vi(params: ElectricalInput) -> FormulaOutput:
    voltage, current, resistance = params.voltage, params.current, params.resistance

    if voltage is not None and current is not None:
        power = voltage * current
        method = "P = V × I"
        step = f"P = {format_number(voltage)} × {format_number(current)} = {format_fixed(power, 2)} W"
    elif current is not None and resistance is not None:
        power = current * current * resistance
        method = "P = I²R"
        step = f"P = {format_number(current)}² × {format_number(resistance)} = {format_fixed(power, 2)} W"
    elif voltage is not None and resistance is not None:
        if resistance == 0:
            raise DivisionByZeroError("Resistance cannot be zero when using P = V²/R")
        power = (voltage * voltage) / resistance
        method = "P = V²/R"
        step = f"P = {format_number(voltage)}² / {format_number(resistance)} = {format_fixed(power, 2)} W"
    else:
        raise InvalidDomainError(
            "Please provide at least 2 of the 3 values (voltage, current, resistance)"
        )
    require_finite(power)

    given = []
    if voltage is not None:
        given.append(f"Voltage (V) = {format_number(voltage)} V")
    if current is not None:
        given.append(f"Current (I) = {format_number(current)} A")
    if resistance is not None:
        given.append(f"Resistance (R) = {format_number(resistance)} Ω")

    derivation = (
        Derivation("Electrical Power Calculation")
        .formula("P = V × I = I²R = V²/R")
        .section("Given", *given)
        .section(f"Using {method}", step)
        .result(f"{format_fixed(power, 2)} W")
    )

    return FormulaOutput(
        data={
            "power": round_to(power, 2),
            "method": method,
            "voltage": _optional_number(voltage),
            "current": _optional_number(current),
            "resistance": _optional_number(resistance),
        },
        derivation=derivation.render(),
    )


def _check_resistances(resistances: list[float]) -> None:
    if not resistances:
        raise InvalidDomainError("Please provide a list of resistance values")
    if any(value < 0 for value in resistances):
        raise InvalidDomainError("Resistance values cannot be negative")


def resistance_series(params: ResistanceListInput) -> FormulaOutput:
    resistances = list(params.resistances)
    _check_resistances(resistances)

    total = sum(resistances)
    average = total / len(resistances)
    require_finite(total, average)
    terms = " + ".join(format_number(value) for value in resistances)

    derivation = (
        Derivation("Series Resistance Calculation")
        .formula("Rtotal = R₁ + R₂ + R₃ + ...")
        .section(
            "Given",
            *(f"R{index} = {format_number(value)} Ω" for index, value in enumerate(resistances, start=1)),
        )
        .section(
            "Calculation",
            f"Rtotal = {terms} = {format_fixed(total, 4)} Ω",
            f"Average = {format_fixed(total, 4)} / {len(resistances)} = {format_fixed(average, 4)} Ω",
        )
        .result(f"{format_fixed(total, 4)} Ω")
    )

    return FormulaOutput(
        data={
            "totalResistance": round_to(total, 4),
            "individualResistances": [as_number(value) for value in resistances],
            "count": len(resistances),
            "minResistance": as_number(min(resistances)),
            "maxResistance": as_number(max(resistances)),
            "averageResistance": round_to(average, 4),
        },
        derivation=derivation.render(),
    )


def resistance_parallel(params: ResistanceListInput) -> FormulaOutput:
    resistances = list(params.resistances)
    _check_resistances(resistances)
    if any(value == 0 for value in resistances):
        raise DivisionByZeroError("Resistance values cannot be zero in a parallel circuit")

    conductance = sum(1 / value for value in resistances)
    total = 1 / conductance
    require_finite(conductance, total)
    terms = " + ".join(f"1/{format_number(value)}" for value in resistances)

    derivation = (
        Derivation("Parallel Resistance Calculation")
        .formula("1/Rtotal = 1/R₁ + 1/R₂ + 1/R₃ + ...")
        .section(
            "Given",
            *(f"R{index} = {format_number(value)} Ω" for index, value in enumerate(resistances, start=1)),
        )
        .section(
            "Calculation",
            f"1/Rtotal = {terms} = {format_fixed(conductance, 6)} S",
            f"Rtotal = 1 / {format_fixed(conductance, 6)} = {format_fixed(total, 4)} Ω",
        )
        .result(f"{format_fixed(total, 4)} Ω")
    )

    return FormulaOutput(
        data={
            "totalResistance": round_to(total, 4),
            "conductance": round_to(conductance, 6),
            "individualResistances": [as_number(value) for value in resistances],
            "count": len(resistances),
            "minResistance": as_number(min(resistances)),
            "maxResistance": as_number(max(resistances)),
        },
        derivation=derivation.render(),
    )
