"""Benchmark: Javadoc lexing and literal-joining throughput.

Measures how many comments can be lexed per second through the public
``javadoc_lexer.lex`` API, and how fast the joining pass runs on its own.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import javadoc_lexer

_ITERATIONS: int = 5_000
_JOIN_ITERATIONS: int = 10_000

_SAMPLE_JAVADOC = """/**
 * Parses the given {@code CharSequence} into a <b>normalized</b> form.
 *
 * <p>The input may contain {@link java.util.Locale locale}-specific
 * digits; see @see below. Example:
 * <pre>{@code
 *   Parser p = Parser.create();
 *   p.parse("42");
 * }</pre>
 *
 * <ul>
 *   <li>leading blanks are ignored
 *   <li>trailing blanks are an error
 * </ul>
 *
 * @param text the text to parse, never {@code null}
 * @return the parsed value
 * @throws ParseException if {@code text} is malformed
 */"""


def bench_lex_throughput() -> dict[str, object]:
    """Benchmark full-pipeline lexing throughput.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    start = time.perf_counter()
    for _ in range(_ITERATIONS):
        javadoc_lexer.lex(_SAMPLE_JAVADOC)
    total = time.perf_counter() - start

    result: dict[str, object] = {
        "operation": "javadoc_lex_throughput",
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(total / _ITERATIONS * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


def bench_join_throughput() -> dict[str, object]:
    """Benchmark the literal-joining pass on pre-lexed tokens.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    raw = javadoc_lexer.lex_raw(_SAMPLE_JAVADOC)

    start = time.perf_counter()
    for _ in range(_JOIN_ITERATIONS):
        javadoc_lexer.join_adjacent_literals(raw)
    total = time.perf_counter() - start

    result: dict[str, object] = {
        "operation": "javadoc_join_throughput",
        "iterations": _JOIN_ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_JOIN_ITERATIONS / total, 1),
        "avg_latency_ms": round(total / _JOIN_ITERATIONS * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    for bench_fn, fname in [
        (bench_lex_throughput, "lex_throughput_baseline.json"),
        (bench_join_throughput, "join_throughput_baseline.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
