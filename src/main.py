"""
main.py: application entry point for the house lights flicker
--------------------------------------------------------------

Responsible for:
- parsing the command line and layering it over the YAML config
- wiring engine, renderer, transport and run loop
- starting the async run loop
- graceful shutdown (blackout) on Ctrl+C, SIGTERM or end of run
"""

import sys

# ---------------------------------------------------------------------------
# UTF-8 ENCODING FIX (important for Raspberry Pi consoles)
# ---------------------------------------------------------------------------

if hasattr(sys.stdout, 'reconfigure') and (sys.stdout.encoding or '').lower() != 'utf-8':
    sys.stdout.reconfigure(encoding='utf-8')  # type: ignore
if hasattr(sys.stderr, 'reconfigure') and (sys.stderr.encoding or '').lower() != 'utf-8':
    sys.stderr.reconfigure(encoding='utf-8')  # type: ignore

import argparse
import asyncio
import random
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from animations.engine import AnimationEngine
from engine.run_loop import RunLoop
from hardware.dmx import DmxRenderer, create_transport
from lifecycle import ShutdownCoordinator
from lifecycle.handlers import BlackoutShutdownHandler, RunLoopShutdownHandler
from managers import ConfigManager
from models.config import AnimationConfig, ConfigError, RunConfig
from models.enums import AnimationModel, LogCategory, LogLevel, TransportKind
from models.zone import ZoneLayout
from utils.enum_helper import EnumHelper
from utils.logger import configure_logger, get_logger

log = get_logger().for_category(LogCategory.SYSTEM)

# Exit codes
EXIT_OK = 0
EXIT_FATAL = 1
EXIT_CONFIG = 2


# ---------------------------------------------------------------------------
# COMMAND LINE
# ---------------------------------------------------------------------------

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="houselights-flicker",
        description="Random incandescent-style flicker across DMX-driven light zones.",
    )
    parser.add_argument("-d", "--decay", type=float, help="rise/fall step size of the drift model")
    parser.add_argument("-e", "--temprange", action="append", metavar="LOW:HIGH",
                        help="color temperature range in Kelvin (repeatable)")
    parser.add_argument("-g", "--rgbrange", action="append", metavar="RRGGBB:RRGGBB",
                        help="RGB color range (repeatable)")
    parser.add_argument("-m", "--maxintensity", type=int, metavar="1..255",
                        help="brightness ceiling on a 1..255 scale")
    parser.add_argument("-r", "--runfor", type=int, metavar="MINUTES", help="minutes to run")
    parser.add_argument("-s", "--sleep", type=float, metavar="SECONDS", help="seconds between ticks")
    parser.add_argument("-t", "--threshold", type=float, help="per-tick ignition probability of a dark pixel")
    parser.add_argument("--config", metavar="PATH", help="main YAML config file")
    parser.add_argument("--model", choices=EnumHelper.list_names(AnimationModel, lowercase=True),
                        help="pixel transition model")
    parser.add_argument("--transport", choices=EnumHelper.list_names(TransportKind, lowercase=True),
                        help="DMX output")
    parser.add_argument("--seed", type=int, help="random seed for a reproducible run")
    parser.add_argument("--log-level", default="INFO", choices=EnumHelper.list_names(LogLevel),
                        type=str.upper, help="minimum log level")
    parser.add_argument("--no-color", action="store_true", help="disable ANSI colors in the log")
    return parser.parse_args(argv)


def overrides_from_args(args: argparse.Namespace) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Map CLI values onto the 'animation' and 'run' config sections

    Any range given on the command line replaces both range lists from the
    config file; temperature ranges keep coming before RGB ranges.
    """
    animation: Dict[str, Any] = {
        "threshold": args.threshold,
        "decay": args.decay,
        "model": args.model,
    }
    if args.maxintensity is not None:
        animation["max_intensity"] = args.maxintensity / 255
    if args.temprange or args.rgbrange:
        animation["temperature_ranges"] = list(args.temprange or [])
        animation["rgb_ranges"] = list(args.rgbrange or [])

    run = {
        "sleep": args.sleep,
        "run_for": args.runfor,
        "seed": args.seed,
        "transport": args.transport,
    }
    return animation, run


def load_configuration(args: argparse.Namespace) -> Tuple[ZoneLayout, AnimationConfig, RunConfig]:
    """
    Raises:
        ConfigError: Any invalid value in the files or on the command line
    """
    if args.config:
        config = ConfigManager(config_path=Path(args.config).resolve())
    else:
        config = ConfigManager()
    config.load()

    animation, run = overrides_from_args(args)
    config.apply_overrides(animation=animation, run=run)
    config.zone_manager.print_summary()

    return config.get_layout(), config.get_animation_config(), config.get_run_config()


# ---------------------------------------------------------------------------
# MAIN
# ---------------------------------------------------------------------------

async def main(args: argparse.Namespace) -> int:
    """
    Build everything, run until the deadline or a signal, then black out.

    Returns:
        Number of ticks executed
    """
    log.info("Starting house lights flicker...")

    layout, animation_config, run_config = load_configuration(args)

    if run_config.seed is not None:
        log.info("Using fixed random seed", seed=run_config.seed)
    rng = random.Random(run_config.seed)

    engine = AnimationEngine(layout, animation_config, rng=rng)
    transport = create_transport(run_config.transport)
    renderer = DmxRenderer(layout, transport)
    run_loop = RunLoop(engine, renderer, run_config)

    log.info("Initializing shutdown system...")
    coordinator = ShutdownCoordinator()
    coordinator.register(RunLoopShutdownHandler(run_loop))
    coordinator.register(BlackoutShutdownHandler(renderer))
    coordinator.setup_signal_handlers(asyncio.get_running_loop())

    run_task = asyncio.create_task(run_loop.run())

    await coordinator.wait_for_shutdown(run_task)
    await coordinator.shutdown_all()

    # re-raises a run loop failure
    ticks = await run_task
    log.info("👋 Flicker shut down cleanly.", ticks=ticks)
    return ticks


def run(argv: Optional[List[str]] = None) -> int:
    """Console entry point; returns the process exit code"""
    args = parse_args(argv)
    configure_logger(
        min_level=EnumHelper.from_string(LogLevel, args.log_level),
        use_colors=not args.no_color and sys.stdout.isatty(),
    )

    try:
        asyncio.run(main(args))
    except ConfigError as e:
        log.error("Invalid configuration", error=str(e))
        return EXIT_CONFIG
    except KeyboardInterrupt:
        log.info("Keyboard interrupt received")
    except Exception as e:
        log.error(f"Fatal error: {e}", exc_info=True)
        return EXIT_FATAL
    return EXIT_OK


# ---------------------------------------------------------------------------
# ENTRY POINT
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    sys.exit(run())
