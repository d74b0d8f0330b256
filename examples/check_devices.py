#!/usr/bin/env python3
"""
Example: Checking GM1 devices.

This walks through the library reports: classifies their programs,
validates each device against the GM1 thresholds, and compares the two
devices program by program. It finishes by driving the modulation wheel
on a few channels to show category-dependent controller response.

Usage:
    python examples/check_devices.py
"""

from chuk_mcp_gm1.controllers import ControllerResponseMapper, InMemoryChannelState
from chuk_mcp_gm1.core import classify
from chuk_mcp_gm1.reports import (
    ReportLoader,
    compare_reports,
    dynamic_range_consistent,
    evaluate_report,
)
from chuk_mcp_gm1.validation import estimate_program_switch_latency


def main() -> None:
    """Demonstrate device checks."""
    print("CHUK GM1 Quality Demo")
    print("=" * 40)
    print()

    loader = ReportLoader()

    print("Available reports:")
    for meta in loader.list_reports():
        print(f"  {meta.name}: {meta.description}")
        print(f"    Programs measured: {meta.program_count}")
    print()

    reference = loader.get_report("reference-synth")
    budget = loader.get_report("budget-synth")
    if reference is None or budget is None:
        print("Failed to load library reports")
        return

    for report in (reference, budget):
        evaluation = evaluate_report(report)
        print(f"{report.name}: {evaluation.audio}")
        for program in evaluation.programs:
            mark = "ok" if program.passed else "FAIL"
            print(f"  program {program.program:3d} ({program.category}): {mark}")
        print(f"  Compliant: {evaluation.is_compliant}")
        print()

    print("Consistency (reference vs budget):")
    for result in compare_reports(reference, budget):
        verdict = "consistent" if result.consistent else "inconsistent"
        print(f"  program {result.program:3d}: {result.score:.3f} ({verdict})")
    print(f"  Dynamic range consistent: {dynamic_range_consistent(reference, budget)}")
    print()

    print("Program switch latency:")
    for from_program, to_program in [(1, 2), (41, 57), (81, 1)]:
        latency = estimate_program_switch_latency(from_program, to_program)
        print(
            f"  {classify(from_program).display_name} -> "
            f"{classify(to_program).display_name}: {latency} ms"
        )
    print()

    # Modulation wheel at full on three different instruments
    state = InMemoryChannelState()
    mapper = ControllerResponseMapper(state)
    print("Modulation wheel at 127:")
    for channel, program in [(0, 41), (1, 57), (2, 81)]:
        state.set_channel_program(channel, program)
        mapper.handle_modulation_wheel(channel, 127)
        channel_state = state.channel(channel)
        if channel_state is None:
            continue
        print(
            f"  ch{channel} {classify(program).display_name}: "
            f"vibrato={channel_state.vibrato_depth:.2f} "
            f"brightness={channel_state.brightness:.2f} "
            f"lfo={channel_state.lfo_depth:.2f}"
        )


if __name__ == "__main__":
    main()
