"""Line oriented command line front end for the Morse decoder."""

from __future__ import annotations

import argparse
from contextlib import ExitStack
import logging
from pathlib import Path
import sys
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .decoder import PLACEHOLDER, MorseDecoder
from .symbol_tree import SymbolTree
from .symbols import build_tree, default_tree, iter_symbols, load_symbol_file
from .viewer import SymbolTableViewer

LOGGER = logging.getLogger(__name__)

_QUIT_COMMANDS = {"q", "quit", "exit"}


class _PromptPrinter:
    def __init__(self, *, interactive: bool) -> None:
        self._interactive = interactive

    def line(self, message: str) -> None:
        sys.stdout.write(f"{message}\n")
        sys.stdout.flush()

    def prompt(self) -> None:
        if not self._interactive:
            return
        sys.stdout.write("> ")
        sys.stdout.flush()


def _parse_registration(value: str) -> Tuple[str, str]:
    if len(value) < 3 or value[1] != "=":
        raise argparse.ArgumentTypeError(f"Registrations must look like CHAR=CODE, got {value!r}")
    return value[0], value[2:]


def _resolve_command_source(
    source: str, extra: Sequence[str], *, stack: ExitStack
) -> Tuple[Iterable[str], bool]:
    """Return the lines to decode and whether the session is interactive.

    ``-`` reads stdin; an existing file is read line by line; anything else is
    treated as an inline message, followed by any *extra* inline messages.
    """

    if source == "-" and not extra:
        stdin = sys.stdin
        return stdin, stdin.isatty()

    if source != "-" and not extra:
        path = Path(source)
        try:
            is_file = path.is_file()
        except OSError:
            is_file = False
        if is_file:
            handle = stack.enter_context(path.open("r", encoding="utf-8"))
            return handle, False

    lines: List[str] = [] if source == "-" else [source]
    lines.extend(extra)
    return lines, False


def _build_tree(symbol_files: Sequence[Path], registrations: Sequence[Tuple[str, str]], *, replace: bool) -> SymbolTree:
    if not symbol_files and not registrations:
        return default_tree()
    extra: Dict[str, str] = {}
    for symbol_file in symbol_files:
        extra.update(load_symbol_file(symbol_file))
    for character, code in registrations:
        extra[character] = code
    LOGGER.debug("Registering %d additional symbols", len(extra))
    return build_tree(extra=extra, replace=replace).freeze()


def _run_loop(lines: Iterable[str], printer: _PromptPrinter, decoder: MorseDecoder) -> None:
    for line in lines:
        stripped = line.strip()
        if not stripped:
            printer.prompt()
            continue
        if stripped.lower() in _QUIT_COMMANDS:
            return
        printer.line(decoder.decode(line))
        printer.prompt()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="morse-decode", description="Decode Morse code text")
    parser.add_argument(
        "source",
        nargs="?",
        default="-",
        help="File containing Morse lines or an inline message. Defaults to stdin when omitted or '-'",
    )
    parser.add_argument("messages", nargs="*", help="Additional inline messages to decode")
    parser.add_argument(
        "--symbols",
        dest="symbol_files",
        type=Path,
        action="append",
        default=[],
        help="JSON file mapping extra characters to codes. May be repeated.",
    )
    parser.add_argument(
        "--register",
        dest="registrations",
        type=_parse_registration,
        action="append",
        default=[],
        metavar="CHAR=CODE",
        help="Register an additional character, e.g. --register \"'=.----.\"",
    )
    parser.add_argument(
        "--replace",
        action="store_true",
        help="Allow extra symbols to overwrite codes already in the default table.",
    )
    parser.add_argument(
        "--placeholder",
        default=PLACEHOLDER,
        help=f"Character printed for unresolved codes (default: {PLACEHOLDER!r})",
    )
    parser.add_argument(
        "--list-symbols",
        action="store_true",
        help="Print the active symbol table and exit.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Python logging level (e.g. INFO, DEBUG).",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        tree = _build_tree(args.symbol_files, args.registrations, replace=args.replace)
        decoder = MorseDecoder(tree, placeholder=args.placeholder)
    except (ValueError, OSError) as exc:
        LOGGER.error("Unable to build symbol table: %s", exc)
        return 2

    if args.list_symbols:
        viewer = SymbolTableViewer(iter_symbols(tree))
        print(viewer.render(viewer.search()))
        return 0

    with ExitStack() as stack:
        lines, interactive = _resolve_command_source(args.source, args.messages, stack=stack)
        printer = _PromptPrinter(interactive=interactive)
        printer.prompt()
        try:
            _run_loop(lines, printer, decoder)
        except KeyboardInterrupt:  # pragma: no cover - interactive helper
            printer.line("")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    raise SystemExit(main())
