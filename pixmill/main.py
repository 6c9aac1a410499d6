"""Command-line entry point for PixMill.

This tool loads an image or generates a pattern, applies a sequence of
filters and an optional mosaic, optionally upscales the result, and saves
it. Alternatively it runs a command script against one session.

All processing occurs on PixelBuffers; Pillow is used only for
loading and saving.

Usage example:
    python -m pixmill -i input.png -o output.png --filter blur --filter sepia
    python -m pixmill --generate swiss_flag 64 64 --mosaic 50 --seed 7 -o flag.png
    python -m pixmill --script edit.txt
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import ConfigManager, EngineConfig
from .errors import PixMillError
from .kinds import FilterKind, PatternKind
from .script import ScriptRunner
from .session import ImageSession
from .utils.loader import load_image, save_image
from .utils.upscale import upscale_nearest

console = Console(stderr=True)

logger = logging.getLogger("pixmill")

# bare --mosaic: take the seed count from the config
MOSAIC_FROM_CONFIG = "config"


def setup_logging(verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """Setup logging with a Rich handler for terminal output.

    Parameters
    ----------
    verbose : bool
        Enable DEBUG logging.
    quiet : bool
        Suppress all but ERROR messages.
    log_file : str | None
        Optional path of a log file that receives the same records.
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    handlers: List[logging.Handler] = [
        RichHandler(console=console, show_time=True, show_path=False, rich_tracebacks=True)
    ]
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        handlers.append(file_handler)

    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True)
    logger.setLevel(level)
    return logger


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="pixmill",
        description=(
            "Filter, dither and mosaic images, or generate test patterns. "
            "All processing uses NumPy-backed pixel buffers."
        ),
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-i", "--input", help="Path to input image file")
    source.add_argument(
        "--generate",
        nargs=3,
        metavar=("KIND", "HEIGHT", "WIDTH"),
        help="Generate a pattern: " + " | ".join(k.value for k in PatternKind),
    )
    source.add_argument("--script", help="Run a command script instead of a single pipeline")

    parser.add_argument("-o", "--output", help="Path to output image file")
    parser.add_argument(
        "--filter",
        action="append",
        default=[],
        choices=[k.value for k in FilterKind],
        help="Filter to apply; repeat to chain filters in order.",
    )
    parser.add_argument(
        "--mosaic",
        type=int,
        nargs="?",
        const=MOSAIC_FROM_CONFIG,
        default=None,
        help="Apply a mosaic after the filters. Without a value, uses the configured seed count.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for mosaic placement.")
    parser.add_argument(
        "--scale",
        type=int,
        default=None,
        help="Optional final nearest-neighbour upscale factor (>=1).",
    )
    parser.add_argument("--config", default=None, help="Path to a JSON config file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors.")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file.")

    return parser.parse_args(argv)


def validate_args(ns: argparse.Namespace) -> None:
    """Validate argument values and raise ValueError for invalid inputs.

    Parameters
    ----------
    ns : argparse.Namespace
        Parsed CLI arguments.
    """
    if ns.script is None and not ns.output:
        raise ValueError("--output is required unless --script is used")
    if ns.scale is not None and ns.scale < 1:
        raise ValueError("--scale must be an integer >= 1")
    if ns.mosaic is not None and ns.mosaic != MOSAIC_FROM_CONFIG and ns.mosaic < 1:
        raise ValueError("--mosaic must be an integer >= 1")
    if ns.input and not Path(ns.input).exists():
        raise ValueError(f"Input file not found: {ns.input}")
    if ns.script and not Path(ns.script).exists():
        raise ValueError(f"Script file not found: {ns.script}")
    if ns.generate:
        PatternKind.parse(ns.generate[0])
        for value in ns.generate[1:]:
            try:
                int(value)
            except ValueError:
                raise ValueError(f"--generate dimensions must be integers, got {value!r}") from None


def load_config(path: Optional[str]) -> EngineConfig:
    if path is None:
        return EngineConfig()
    return ConfigManager(path).load()


def run_pipeline(args: argparse.Namespace, config: EngineConfig) -> ImageSession:
    """Build the image described by the CLI arguments and save it."""
    session = ImageSession(track_history=False)

    # 1) Source: file or generated pattern
    if args.input:
        session.load(load_image(args.input))
    else:
        kind, height, width = args.generate
        session.generate(kind, int(height), int(width))
    logger.info("Source image %dx%d", session.current.height, session.current.width)

    # 2) Filters in the order given
    for name in args.filter:
        session.apply_filter(name)
        logger.info("Applied %s", name)

    # 3) Optional mosaic
    if args.mosaic is not None:
        seeds = config.mosaic_seeds if args.mosaic == MOSAIC_FROM_CONFIG else args.mosaic
        rng = args.seed if args.seed is not None else config.random_seed
        session.mosaic(seeds, rng)
        logger.info("Applied mosaic with %d seeds", seeds)

    # 4) Optional final upscale, then save
    scale = args.scale if args.scale is not None else config.output_scale
    result = upscale_nearest(session.current, scale) if scale > 1 else session.current
    save_image(result, args.output)
    logger.info("Saved %s", args.output)
    return session


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry function for the CLI.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing.

    Returns
    -------
    int
        Exit status code (0 for success, 2 for argument errors, 1 for
        processing errors).
    """
    args = parse_args(argv)
    try:
        setup_logging(args.verbose, args.quiet, args.log_file)
        validate_args(args)
        config = load_config(args.config)
    except (ValueError, OSError, PixMillError) as e:
        logger.error("Argument error: %s", e)
        return 2

    try:
        if args.script:
            rng = args.seed if args.seed is not None else config.random_seed
            session = ImageSession(history_limit=config.history_limit)
            ScriptRunner(session, rng=rng).run_file(args.script)
        else:
            run_pipeline(args, config)
    except (PixMillError, OSError, ValueError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
