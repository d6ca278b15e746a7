"""
project: mazegen
module: run.py
License: MIT

Maze tools CLI entry point.

Provides subcommands for generating a maze wall list, converting it from
tile to line coordinates, and painting either format as ASCII. Accepts
configuration via flags and environment variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import os
import sys
from textwrap import dedent

from colorama import Fore, Style, just_fix_windows_console
from dotenv import load_dotenv

from mazegen import __version__
from mazegen.errors import ConfigError, MazeError


def _color_enabled() -> bool:
    # Disable colors if stderr is not a real terminal (e.g., during pytest capture)
    try:
        return sys.stderr.isatty()
    except (AttributeError, ValueError):
        return False


def _error(message: str) -> None:
    prefix = f"{Fore.RED}{Style.BRIGHT}[ERROR]{Style.RESET_ALL}" if _color_enabled() else "[ERROR]"
    print(f"{prefix} {message}", file=sys.stderr)


def _env_int(name: str):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer (got {raw!r})", "environment") from None


def _resolve_int(value, env_name: str, default: int) -> int:
    """CLI flag wins, then the environment, then the built-in default."""
    if value is not None:
        return value
    env_value = _env_int(env_name)
    return default if env_value is None else env_value


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Maze generator and text tools

    Generate a perfect maze as a list of internal walls, convert that list
    from tile to line coordinates, or paint either format as ASCII. The
    commands read stdin / write stdout so they can be piped together.
    """

    epilog = dedent(
        """
        Environment variables:
          MAZE_WIDTH         Default maze width (default: 20)
          MAZE_HEIGHT        Default maze height (default: 10)
          MAZE_SEED          Default RNG seed (default: random)
          MAZEGEN_LOG_LEVEL  debug, info, warn or error (default: warn)
          MAZEGEN_LOG_JSON   Emit log lines as JSON when set to 1

        Examples:
          # 20x10 perfect maze
          python run.py generate

          # Reproducible maze with rooms and some extra openings
          python run.py generate --width 30 --height 15 --num-rooms 3 --room-size 3 --remove-percentage 10 --seed 7

          # Paint the generator output directly
          python run.py generate --seed 7 | python run.py visualize

          # Convert to line coordinates and paint that instead
          python run.py generate --seed 7 | python run.py convert | python run.py visualize --line
        """
    )

    parser = argparse.ArgumentParser(
        prog="mazegen",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"mazegen {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress (info level) to stderr",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log debug details (sampling range, carve depth) to stderr",
    )

    subparsers = parser.add_subparsers(dest="command")

    # generate subcommand
    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a maze and print its internal walls",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Carve a perfect maze and print one 'wall x1 y1 x2 y2' line per internal wall",
    )
    gen_parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Width of maze (default: env MAZE_WIDTH or 20)",
    )
    gen_parser.add_argument(
        "--height",
        type=int,
        default=None,
        help="Height of maze (default: env MAZE_HEIGHT or 10)",
    )
    gen_parser.add_argument(
        "--remove-percentage",
        dest="remove_percentage",
        type=float,
        default=0.0,
        help="Approximate percentage of walls to remove, resulting in a maze\nwhich can be solved in more than one way (default: 0)",
    )
    gen_parser.add_argument(
        "--num-rooms",
        dest="num_rooms",
        type=int,
        default=0,
        help="Number of randomly placed rooms (default: 0)",
    )
    gen_parser.add_argument(
        "--room-size",
        dest="room_size",
        type=int,
        default=0,
        help="Side length of the optional rooms (default: 0)",
    )
    gen_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="RNG seed for a reproducible maze (default: env MAZE_SEED or random)",
    )
    gen_parser.add_argument(
        "--direction-order",
        dest="direction_order",
        choices=["rotate", "shuffle"],
        default="rotate",
        help="How the carver orders directions at each step (default: rotate)",
    )
    gen_parser.add_argument(
        "--harp",
        action="store_true",
        help="Harp lab maze game preset; overrides all other options except --seed",
    )
    gen_parser.set_defaults(command="generate")

    # convert subcommand
    conv_parser = subparsers.add_parser(
        "convert",
        help="Rewrite tile-format walls as line-format walls",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Read generator output and print each wall as its segment endpoints",
    )
    conv_parser.add_argument(
        "-i",
        "--input",
        dest="input_path",
        default=None,
        help="Read walls from a file instead of stdin",
    )
    conv_parser.set_defaults(command="convert")

    # visualize subcommand
    vis_parser = subparsers.add_parser(
        "visualize",
        help="Paint a wall list as an ASCII maze",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Read a wall list (tile format unless --line) and print it as ASCII",
    )
    vis_parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Width of maze (default: env MAZE_WIDTH or 20)",
    )
    vis_parser.add_argument(
        "--height",
        type=int,
        default=None,
        help="Height of maze (default: env MAZE_HEIGHT or 10)",
    )
    vis_parser.add_argument(
        "-l",
        "--line",
        action="store_true",
        help="Input uses line (segment endpoint) coordinates",
    )
    vis_parser.add_argument(
        "-i",
        "--input",
        dest="input_path",
        default=None,
        help="Read walls from a file instead of stdin",
    )
    vis_parser.set_defaults(command="visualize")

    # If no subcommand provided, default to generate
    if len(argv) == 0:
        argv = ["generate"]

    args = parser.parse_args(argv)
    if args.command is None:
        # Only global flags were given (e.g. `-v`); run generate with its defaults
        args = parser.parse_args(list(argv) + ["generate"])
    return args


def _open_input(path):
    """Return a binary stream so each line is decoded (and reported) separately."""
    if path is None:
        return getattr(sys.stdin, "buffer", sys.stdin)
    return open(path, "rb")


def _close_input(path, stream) -> None:
    if path is not None:
        stream.close()


def _run_generate(args) -> int:
    from mazegen.maze import Maze, MazeConfig

    seed = args.seed if args.seed is not None else _env_int("MAZE_SEED")
    if args.harp:
        config = MazeConfig.harp(seed=seed)
    else:
        width = _resolve_int(args.width, "MAZE_WIDTH", 20)
        height = _resolve_int(args.height, "MAZE_HEIGHT", 10)
        config = MazeConfig(
            width=width,
            height=height,
            remove_percentage=args.remove_percentage,
            num_rooms=args.num_rooms,
            room_size=args.room_size,
            seed=seed,
            direction_order=args.direction_order,
        )
    maze = Maze(config)
    maze.emit(sys.stdout)
    return 0


def _run_convert(args) -> int:
    from mazegen.services.converter import convert_stream

    stream = _open_input(args.input_path)
    try:
        convert_stream(stream, sys.stdout)
    finally:
        _close_input(args.input_path, stream)
    return 0


def _run_visualize(args) -> int:
    from mazegen.services.visualizer import DEFAULT_HEIGHT, DEFAULT_WIDTH, render_stream

    width = _resolve_int(args.width, "MAZE_WIDTH", DEFAULT_WIDTH)
    height = _resolve_int(args.height, "MAZE_HEIGHT", DEFAULT_HEIGHT)
    stream = _open_input(args.input_path)
    try:
        text = render_stream(stream, width=width, height=height, line_format=args.line)
    finally:
        _close_input(args.input_path, stream)
    sys.stdout.write(text)
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    # Load .env if requested, else a default .env if present (no error if missing)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        load_dotenv()

    from mazegen import logging_utils

    logging_utils.configure()
    if args.debug:
        logging_utils.set_level("debug")
    elif args.verbose:
        logging_utils.set_level("info")
    log = logging_utils.get_logger("cli")

    if _color_enabled():
        just_fix_windows_console()

    mode = (getattr(args, "command", None) or "generate").lower()
    log.debug(event="startup", mode=mode, version=__version__)

    handlers = {
        "generate": _run_generate,
        "convert": _run_convert,
        "visualize": _run_visualize,
    }
    try:
        return handlers[mode](args)
    except ConfigError as e:
        log.debug(event="config_error", mode=mode, code=e.code, message=e.message)
        _error(str(e))
        return 1
    except MazeError as e:
        log.debug(event="input_error", mode=mode, code=e.code, message=str(e))
        _error(str(e))
        return 1
    except OSError as e:
        _error(f"could not read input: {e}")
        return 1


def cli() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()
