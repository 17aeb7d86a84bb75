import argparse
import logging
import sys
from pathlib import Path

# Ensure local repo package is used even if another "lifesim" is on PYTHONPATH.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from lifesim import SimulationSession, SimulationSpeed, load_config
from lifesim.interfaces import SimulationChanged, SimulationInitialized


class ConsoleStats:
    """Prints engine events the way the statistics panel would display them."""

    def on_simulation_initialized(self, event: SimulationInitialized) -> None:
        print(
            f"total={event.total_cell_count} dead={event.dead_cell_count} "
            f"living={event.living_cell_count} steps={event.step_count}"
        )

    def on_simulation_changed(self, event: SimulationChanged) -> None:
        state = "running" if event.is_running else "paused"
        print(
            f"[{state}] dead={event.dead_cell_count} "
            f"living={event.living_cell_count} steps={event.step_count}"
        )


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a Life simulation without a GUI.")
    parser.add_argument("--config", default=None, help="Path to a YAML config file")
    parser.add_argument(
        "--seconds",
        type=float,
        default=5.0,
        help="Simulated wall-clock time to run for",
    )
    parser.add_argument(
        "--frame",
        type=float,
        default=1 / 60,
        help="Seconds per simulated frame tick",
    )
    parser.add_argument(
        "--speed",
        default=None,
        help="Override the configured speed (e.g. very_fast)",
    )
    parser.add_argument("--show-grid", action="store_true", help="Print the final grid")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    session = SimulationSession(config=load_config(args.config))
    if args.speed is not None:
        session.speed = SimulationSpeed.from_name(args.speed)
    session.engine.subscribe(ConsoleStats())

    session.initialize()
    session.start()

    elapsed = 0.0
    while elapsed < args.seconds and session.engine.is_running:
        session.tick(args.frame)
        elapsed += args.frame

    session.pause()
    box = session.engine.bounding_box
    if box is not None:
        print(f"live region: ({box.min_x}, {box.min_y})-({box.max_x}, {box.max_y})")
    if args.show_grid:
        print(session.grid.format_text())


if __name__ == "__main__":
    main()
