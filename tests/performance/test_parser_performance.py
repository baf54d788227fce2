#!/usr/bin/env python3
"""
Parser Performance Test Suite
=============================

Measures lexing and parsing throughput on generated expressions and guards
against pathological slowdowns in deeply nested or long operator chains.
"""

import pytest
import sys
import os
from dataclasses import dataclass

pytest.importorskip("pytest_benchmark")

# Add the project root to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from bantam.lexer import Lexer
from bantam.parser import Parser, print_expression


@dataclass
class ExpressionShape:
    """A generated input and the number of names it contains"""
    name: str
    source: str
    names: int


def _name(index: int) -> str:
    """Spell an index with letters only, since digits are not part of names."""
    letters = []
    while True:
        index, remainder = divmod(index, 26)
        letters.append(chr(ord('a') + remainder))
        if index == 0:
            return "".join(reversed(letters))


def _operator_chain(length: int) -> str:
    operators = "+-*/^"
    parts = [_name(0)]
    for i in range(1, length):
        parts.append(operators[i % len(operators)])
        parts.append(_name(i))
    return " ".join(parts)


def _nested_calls(depth: int) -> str:
    return "f(" * depth + "x" + ")" * depth


SHAPES = [
    ExpressionShape("chain", _operator_chain(500), 500),
    ExpressionShape("nested_calls", _nested_calls(150), 151),
    ExpressionShape("conditionals", " ? ".join(["c"] * 100) + " : d" * 99, 199),
]


class TestParserPerformance:
    """
    Throughput tests for the lexer and parser.
    """

    @pytest.mark.parametrize("shape", SHAPES, ids=lambda s: s.name)
    def test_lexer_throughput(self, benchmark, shape: ExpressionShape):
        tokens = benchmark(lambda: Lexer(shape.source).tokenize())
        assert tokens[-1].is_eof

    @pytest.mark.parametrize("shape", SHAPES, ids=lambda s: s.name)
    def test_parser_throughput(self, benchmark, shape: ExpressionShape):
        expression = benchmark(lambda: Parser(shape.source).parse())
        assert expression is not None

    def test_demo_round_trip(self, benchmark):
        result = benchmark(lambda: print_expression(Parser("a = b + c * d ^ e - f / g").parse()))
        assert result == "(a = ((b + (c * (d ^ e))) - (f / g)))"
