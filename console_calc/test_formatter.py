# test_formatter.py

import math

import pytest

from console_calc.formatter import describe, format_line, format_operand, format_result
from console_calc.operations import Operation
from console_calc.settings import CalculatorSettings

# ---------------------------
# format_result
# ---------------------------

@pytest.mark.parametrize("value,expected", [
    (0.0, "0"),
    (-0.0, "0"),
    (0.0000000001, "0"),
    (-5e-11, "0"),
    (1.2246467991473532e-16, "0"),
    (5.0, "5"),
    (-2.5, "-2.5"),
    (0.5000000000000001, "0.5"),
    (3.14159265358979, "3.1415926536"),
    (123.456, "123.456"),
    (999999999999.0, "999999999999"),
    (0.000001, "0.000001"),
    (1234567.1, "1234567.1"),
    (123456789012.3, "123456789012.3"),
    (-98765.4321, "-98765.4321"),
])
def test_format_plain_values(value, expected):
    assert format_result(value) == expected

@pytest.mark.parametrize("value,expected", [
    (1.5e13, "1.500000E+13"),
    (1e12, "1.000000E+12"),
    (-2.5e20, "-2.500000E+20"),
    (1e-7, "1.000000E-07"),
    (-3.25e-9, "-3.250000E-09"),
])
def test_format_scientific_values(value, expected):
    assert format_result(value) == expected

def test_format_non_finite_values():
    assert format_result(math.nan) == "NaN"
    assert format_result(math.inf) == "Infinity"
    assert format_result(-math.inf) == "-Infinity"

def test_format_honours_settings():
    settings = CalculatorSettings(decimal_places=2, decimal_separator=',')
    assert format_result(3.14159, settings) == "3,14"
    assert format_result(1.5e13, settings) == "1,500000E+13"

# ---------------------------
# Operands and result lines
# ---------------------------

@pytest.mark.parametrize("value,expected", [
    (2.0, "2"),
    (-7.0, "-7"),
    (2.5, "2.5"),
    (0.1, "0.1"),
    (1e20, "1E+20"),
])
def test_format_operand(value, expected):
    assert format_operand(value) == expected

@pytest.mark.parametrize("op,operands,expected", [
    (Operation.ADD, [2, 3], "2 + 3"),
    (Operation.MODULO, [-7, 3], "-7 % 3"),
    (Operation.POW, [2, 10], "2 ^ 10"),
    (Operation.SIN, [30], "sin(30°)"),
    (Operation.TAN, [45.5], "tan(45.5°)"),
    (Operation.SQRT, [16], "sqrt(16)"),
    (Operation.LOG, [2, 8], "log_2(8)"),
    (Operation.LN, [5], "ln(5)"),
    (Operation.LOG10, [100], "log10(100)"),
])
def test_describe(op, operands, expected):
    assert describe(op, operands) == expected

def test_format_line():
    assert format_line(Operation.ADD, [2.0, 3.0], 5.0) == "2 + 3 = 5"
    assert format_line(Operation.DIVIDE, [10.0, 3.0], 10 / 3) == "10 / 3 = 3.3333333333"
