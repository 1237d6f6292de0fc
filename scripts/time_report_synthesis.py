#!/usr/bin/env python3
"""Quick perf benchmark for report synthesis."""

from __future__ import annotations

import argparse
import cProfile
import io
import pstats
import statistics
import time

from tqdm import tqdm

from diagsynth import (
    AnnotationWithoutDefinition,
    DuplicateLocalDefinition,
    DuplicateType,
    DuplicateValue,
    Expected,
    FailureFact,
    InfixRedeclared,
    ParseFailure,
    PortWithoutAnnotation,
    SystemUnexpected,
    TypeApp,
    TypeArrow,
    TypeCon,
    TypeRecord,
    TypeVar,
    UnboundAliasVars,
    UnboundUnionVars,
    Unexpected,
    synthesize,
)


def _build_facts(count: int, *, constructors: int) -> list[FailureFact]:
    facts: list[FailureFact] = []
    for index in range(count):
        name = f"name{index}"
        var = TypeVar(f"t{index}")
        match index % 9:
            case 0:
                facts.append(
                    ParseFailure(
                        messages=(
                            SystemUnexpected("end of input"),
                            Unexpected(f"`{name}`"),
                            Expected("an expression"),
                        )
                    )
                )
            case 1:
                facts.append(InfixRedeclared("<|" if index % 2 else "mod"))
            case 2:
                facts.append(AnnotationWithoutDefinition(name))
            case 3:
                facts.append(PortWithoutAnnotation(name))
            case 4:
                facts.append(DuplicateValue(name))
            case 5:
                facts.append(DuplicateType(name.capitalize()))
            case 6:
                facts.append(DuplicateLocalDefinition(name))
            case 7:
                facts.append(
                    UnboundAliasVars(
                        type_name=name.capitalize(),
                        explicit_vars=("a",),
                        first_unbound=var.name,
                        rest_unbound=(),
                        aliased=TypeRecord(
                            fields=(("run", TypeArrow(TypeVar("a"), var)),),
                        ),
                    )
                )
            case _:
                facts.append(
                    UnboundUnionVars(
                        type_name=name.capitalize(),
                        explicit_vars=(),
                        first_unbound=var.name,
                        rest_unbound=(),
                        constructors=tuple(
                            (f"Ctor{ctor}", (TypeApp(TypeCon("List"), (var,)),))
                            for ctor in range(constructors)
                        ),
                    )
                )
    return facts


def _run_once(
    facts: list[FailureFact],
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int]:
    start = time.perf_counter()
    total_chars = 0
    iterator = (
        tqdm(facts, desc=label, unit="fact")
        if show_progress
        else facts
    )
    for fact in iterator:
        report = synthesize(fact)
        total_chars += len(report.title) + len(report.body)
    duration = time.perf_counter() - start
    return duration, total_chars


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark report synthesis throughput")
    parser.add_argument("--facts", type=int, default=20_000, help="Number of generated failures")
    parser.add_argument(
        "--constructors",
        type=int,
        default=4,
        help="Constructors per generated union failure (default: 4)",
    )
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    parser.add_argument(
        "--profile-sort",
        type=str,
        default="tottime",
        help="cProfile sort key (default: tottime, common: cumulative)",
    )
    args = parser.parse_args()

    if args.facts <= 0:
        raise SystemExit(f"Invalid --facts: {args.facts}")
    if args.constructors < 0:
        raise SystemExit(f"Invalid --constructors: {args.constructors}")

    facts = _build_facts(args.facts, constructors=args.constructors)
    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                facts,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
            )

        timings: list[float] = []
        chars_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, chars_count = _run_once(
                facts,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, chars_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, chars_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, chars_count = _benchmark()

    mean = statistics.mean(timings)

    print(f"Facts: {len(facts)}")
    print(f"Rendered chars per run: {chars_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Reports/s (mean): {len(facts) / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
