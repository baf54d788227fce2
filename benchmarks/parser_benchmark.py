#!/usr/bin/env python3
"""
Bantam Parser Benchmark
=======================

Measures how fast the lexer and parser handle generated expressions of
increasing size.

Features:
- Separate timings for lexing and for lexing plus parsing
- Memory usage tracking
- Statistical summary over repeated runs
"""

import gc
import statistics
import sys
import os
import time
from dataclasses import dataclass
from typing import Callable, List

import psutil

# Add the project root to the path so the bantam package can be imported
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from bantam.lexer import Lexer
from bantam.parser import Parser


def _rss_mb() -> float:
    return psutil.Process().memory_info().rss / (1024**2)


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    stage_name: str
    expression_size: int
    execution_time_ms: float
    memory_usage_mb: float
    tokens_per_second: float


class ParserBenchmark:
    """
    Lexer and parser throughput benchmark.
    """

    @staticmethod
    def generate_expression(size: int) -> str:
        """Build a mixed expression with ``size`` operands."""
        operators = ["+", "*", "-", "/", "^"]
        parts = []
        for i in range(size):
            name = "x" if i % 7 else "f(a, b!)"
            if i % 11 == 0:
                name = f"(-{name} ? p : q)"
            parts.append(name)
            if i < size - 1:
                parts.append(operators[i % len(operators)])
        return " ".join(parts)

    def lex(self, source: str):
        return Lexer(source).tokenize()

    def parse(self, source: str):
        return Parser(source).parse()

    def benchmark_stage(self, stage: Callable[[str], object], name: str,
                        source: str, size: int, token_count: int) -> BenchmarkResult:
        """
        Benchmark a single stage on one source string.
        """
        gc.collect()

        rss_before = _rss_mb()
        start_time = time.perf_counter()
        stage(source)
        end_time = time.perf_counter()
        rss_after = _rss_mb()

        execution_time_seconds = end_time - start_time

        return BenchmarkResult(
            stage_name=name,
            expression_size=size,
            execution_time_ms=execution_time_seconds * 1000,
            memory_usage_mb=rss_after - rss_before,
            tokens_per_second=token_count / execution_time_seconds if execution_time_seconds else 0.0,
        )

    def run_benchmark(self, size: int, num_runs: int = 5) -> List[BenchmarkResult]:
        """
        Run both stages ``num_runs`` times on an expression of ``size`` operands.
        """
        source = self.generate_expression(size)
        token_count = len(self.lex(source))

        print(f"\n🚀 Expression size: {size} operands ({token_count} tokens)")
        print("=" * 60)

        all_results = []
        for stage, name in [(self.lex, "Lexer"), (self.parse, "Lexer + Parser")]:
            results = [
                self.benchmark_stage(stage, name, source, size, token_count)
                for _ in range(num_runs)
            ]
            times = [r.execution_time_ms for r in results]
            best = min(results, key=lambda r: r.execution_time_ms)
            spread = statistics.stdev(times) if len(times) > 1 else 0.0

            print(f"📊 {name:<16} best {best.execution_time_ms:8.2f}ms  "
                  f"avg {statistics.mean(times):8.2f} ± {spread:.2f}ms  "
                  f"{best.tokens_per_second:,.0f} tokens/s  "
                  f"rss {max(r.memory_usage_mb for r in results):+.1f}MB")
            all_results.extend(results)

        return all_results


def main():
    """Main benchmark execution."""
    print("Bantam Parser Benchmark")
    print("=" * 50)

    benchmark = ParserBenchmark()

    for size in [100, 1000, 10000]:
        benchmark.run_benchmark(size, num_runs=5)

    print(f"\n🏁 Benchmark Complete!")


if __name__ == "__main__":
    main()
