"""Hover demo -- pluck the underline, let it ring out, print each frame.

Demonstrates:
- Wiring a PluckyUnderline to a real-time FrameLoop
- Dispatching pointer events to the pull/release triggers
- Reading the amplitude and the SVG output as the animation runs

Run: python -m examples.hover [--reduced-motion]
"""

import sys

from plucky import FrameLoop, PluckConfig, PluckyUnderline, ReducedMotionPolicy


def bar(amplitude: float, peak: float, width: int = 40) -> str:
    """Signed amplitude as a text bar centred on the baseline."""
    half = width // 2
    cells = round(abs(amplitude) / peak * half) if peak else 0
    if amplitude >= 0:
        return " " * half + "|" + "#" * cells
    return " " * (half - cells) + "#" * cells + "|"


def main() -> None:
    reduced = "--reduced-motion" in sys.argv[1:]
    loop = FrameLoop(fps=30)
    policy = ReducedMotionPolicy(active=reduced)
    underline = PluckyUnderline(
        config=PluckConfig(release_duration=1500),
        scheduler=loop,
        reduced_motion=policy,
    )
    underline.connected()
    peak = underline.config.amplitude

    print(f"=== Hover ({'reduced motion' if reduced else 'full motion'}) ===\n")

    underline.handle_event("pointerenter")
    while loop.pending:
        loop.run(1)
        print(f"  pull     {loop.now():7.1f}ms {bar(underline.controller.amplitude, peak)}")

    underline.handle_event("pointerleave")
    while loop.pending:
        loop.run(1)
        print(f"  release  {loop.now():7.1f}ms {bar(underline.controller.amplitude, peak)}")

    print(f"\nAt rest after {underline.sink.updates} path updates:")
    print(underline.render())


if __name__ == "__main__":
    main()
