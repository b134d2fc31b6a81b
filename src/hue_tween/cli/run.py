"""Run tweeners from a config file.

Pumps every configured tweener once per frame, shows light brightness on
the console and reports each completed loop.
"""

import argparse
import signal
import sys
from dataclasses import dataclass
from pathlib import Path

from ..clock import FrameClock
from ..config import TweenConfig, load_config
from ..control.server import StatusServer
from ..core.errors import TweenError
from ..engine import TweenEngine
from ..lights.rig import LightRig


@dataclass
class RunState:
    """Shared flag between the render loop and signal handlers."""
    running: bool = True


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="hue-tween",
        description="Loop lights and points through timed interpolation sequences.",
    )
    parser.add_argument("-c", "--config", type=Path, help="YAML config file (demo setup if omitted)")
    parser.add_argument("--fps", type=int, help="Frames per second (overrides config)")
    parser.add_argument(
        "--duration",
        type=float,
        default=0.0,
        help="Seconds to run; 0 runs until Ctrl+C",
    )
    parser.add_argument("--serve", action="store_true", help="Start the status server")
    parser.add_argument("-q", "--quiet", action="store_true", help="Don't draw light bars")
    return parser.parse_args(argv)


def run_loop(
    engine: TweenEngine,
    rig: LightRig,
    clock: FrameClock,
    state: RunState,
    duration: float = 0.0,
    quiet: bool = False,
) -> None:
    """
    Render loop: one engine update per frame until stopped.

    Args:
        engine: Engine to pump
        rig: Light state to flush after each frame
        clock: Frame clock (its fps sets the loop rate)
        state: Cleared by signal handlers to stop the loop
        duration: Stop after this many seconds (0 = no limit)
        quiet: Skip the per-frame light readout
    """
    clock.reset()
    run_time = 0.0

    while state.running:
        delta = clock.tick()
        completed = engine.update(delta)
        run_time += delta

        for name, loops in completed.items():
            print(f"\n[TWEEN] {name} completed loop {loops}")

        if not quiet:
            rig.flush()

        if duration > 0 and run_time >= duration:
            break

        clock.sleep_until_next_frame()


def main(argv: list[str] | None = None) -> int:
    """Main tween loop."""
    args = parse_args(argv)

    print("=" * 50)
    print("  hue-tween")
    print("=" * 50)

    # Load config
    if args.config:
        try:
            config = load_config(args.config)
        except FileNotFoundError:
            print(f"Error: config not found: {args.config}")
            return 1
        except TweenError as e:
            print(f"Error: {e}")
            return 1
    else:
        config = TweenConfig.with_defaults()

    fps = args.fps or config.fps

    rig = LightRig(num_lights=config.num_lights)
    try:
        engine = TweenEngine.from_config(config, rig)
        clock = FrameClock(fps=fps)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print(f"[TWEEN] {len(engine.names)} tweeners at {fps} fps: {', '.join(engine.names)}")

    server = None
    if args.serve or config.server.enabled:
        server = StatusServer(engine, host=config.server.host, port=config.server.port)
        server.start_in_thread()

    state = RunState()

    def signal_handler(sig, frame):
        state.running = False
        print("\n[SHUTDOWN] Stopping...")

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        run_loop(engine, rig, clock, state, duration=args.duration, quiet=args.quiet)
    finally:
        if server:
            server.stop()

    print(f"\n[TWEEN] Done after {engine.frame} frames, {engine.total_loops} loops")
    return 0


if __name__ == "__main__":
    sys.exit(main())
