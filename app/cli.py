"""
Command-line interface for the TPS tester.

Apply transactions to a number, undo and redo them, and inspect the
resulting history without the GUI.

Usage::

    python -m cli run add:5 add:10 undo redo and:4
    python -m cli run add:12 and:4 undo --format json
    python -m cli script transactions.txt --trace
    python -m cli repl
    python -m cli repl --initial 7
"""

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from controllers.number_controller import NumberController
from controllers.undo_manager import UndoManager
from models.number import NumberModel

__version__ = "1.0.0"

logger = logging.getLogger(__name__)

VALUE_OPERATIONS = ("add", "and", "or")
PLAIN_OPERATIONS = ("undo", "redo", "clear", "reset")


class OperationError(ValueError):
    """Raised when an operation string cannot be parsed."""


@dataclass(frozen=True)
class Operation:
    """One parsed step of a transaction script."""

    name: str
    amount: Optional[int] = None

    def __str__(self) -> str:
        if self.amount is None:
            return self.name
        return f"{self.name} {self.amount}"


def parse_int(text: str) -> int:
    """Parse an integer literal in any base Python accepts (0x, 0b, 0o)."""
    try:
        return int(text, 0)
    except ValueError:
        raise OperationError(f"invalid integer: {text!r}") from None


def parse_operation(text: str) -> Operation:
    """Parse ``add:5``, ``and 0x0F``, ``undo`` and the like.

    Raises:
        OperationError: If the name is unknown or the amount is missing/invalid.
    """
    parts = text.replace(":", " ").split()
    if not parts:
        raise OperationError("empty operation")

    name = parts[0].lower()
    if name in VALUE_OPERATIONS:
        if len(parts) != 2:
            raise OperationError(f"'{name}' takes exactly one integer: {text!r}")
        return Operation(name, parse_int(parts[1]))
    if name in PLAIN_OPERATIONS:
        if len(parts) != 1:
            raise OperationError(f"'{name}' takes no argument: {text!r}")
        return Operation(name)

    valid = ", ".join(VALUE_OPERATIONS + PLAIN_OPERATIONS)
    raise OperationError(f"unknown operation '{parts[0]}'. Valid operations: {valid}")


def read_script(filepath: str) -> list[Operation]:
    """Read one operation per line, skipping blank lines and # comments.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
        OperationError: With the offending line number.
    """
    operations = []
    text = Path(filepath).read_text(encoding="utf-8")
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.split("#", 1)[0].strip()
        if not line:
            continue
        try:
            operations.append(parse_operation(line))
        except OperationError as e:
            raise OperationError(f"{filepath}:{lineno}: {e}") from None
    return operations


def apply_operation(controller: NumberController, op: Operation) -> None:
    """Route a parsed operation to the controller."""
    if op.name == "add":
        controller.add(op.amount)
    elif op.name == "and":
        controller.and_mask(op.amount)
    elif op.name == "or":
        controller.or_mask(op.amount)
    elif op.name == "undo":
        controller.undo()
    elif op.name == "redo":
        controller.redo()
    elif op.name == "clear":
        controller.clear_history()
    elif op.name == "reset":
        controller.reset()
    else:
        raise OperationError(f"unknown operation '{op.name}'")


def build_controller(initial: int = 0, max_depth: Optional[int] = None) -> NumberController:
    """Create a fresh session with the given starting value."""
    return NumberController(NumberModel(initial), UndoManager(max_depth=max_depth))


def _trace_line(op: Operation, controller: NumberController) -> str:
    manager = controller.undo_manager
    return (
        f"{str(op):<16} value={controller.value:<8} size={manager.get_size():<4} "
        f"undo={manager.get_undo_count():<4} redo={manager.get_redo_count()}"
    )


def _format_state(controller: NumberController, fmt: str) -> str:
    if fmt == "json":
        return json.dumps(controller.snapshot(), indent=2)
    return controller.summary().rstrip("\n")


def _run_operations(operations: list[Operation], args: argparse.Namespace) -> int:
    try:
        controller = build_controller(args.initial, args.max_depth)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for op in operations:
        logger.debug("Running %s", op)
        apply_operation(controller, op)
        if args.trace:
            print(_trace_line(op, controller))

    print(_format_state(controller, args.format))
    return 0


def cmd_run(args: argparse.Namespace) -> int:
    """Apply operations given on the command line."""
    try:
        operations = [parse_operation(text) for text in args.operations]
    except OperationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return _run_operations(operations, args)


def cmd_script(args: argparse.Namespace) -> int:
    """Apply operations read from a script file."""
    path = Path(args.script)
    if not path.exists():
        print(f"Error: file not found: {args.script}", file=sys.stderr)
        return 1

    try:
        operations = read_script(args.script)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading {args.script}: {e}", file=sys.stderr)
        return 1
    except OperationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return _run_operations(operations, args)


REPL_BANNER = """\
TPS Tester Interactive REPL
===========================

Available objects:
  controller     - NumberController for this session
  NumberModel    - the value holder type
  AddCommand, AndMaskCommand, OrMaskCommand - transaction types
  UndoManager    - the history type

Quick start:
  controller.add(5)
  controller.and_mask(4)
  controller.undo()
  print(controller.summary())
"""


def build_repl_namespace(initial: int = 0) -> dict:
    """Build the namespace dict for the interactive REPL.

    Args:
        initial: Starting value of the session's number.

    Returns:
        Dict of names to inject into the REPL namespace.
    """
    from controllers.commands import AddCommand, AndMaskCommand, OrMaskCommand

    return {
        "controller": build_controller(initial),
        "NumberModel": NumberModel,
        "UndoManager": UndoManager,
        "AddCommand": AddCommand,
        "AndMaskCommand": AndMaskCommand,
        "OrMaskCommand": OrMaskCommand,
    }


def cmd_repl(args: argparse.Namespace) -> int:
    """Launch an interactive Python REPL with a live session."""
    namespace = build_repl_namespace(args.initial)

    try:
        from IPython import start_ipython

        start_ipython(argv=[], user_ns=namespace, display_banner=False)
        return 0
    except ImportError:
        pass

    import code

    code.interact(banner=REPL_BANNER, local=namespace)
    return 0


def _add_session_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--initial", type=parse_int, default=0, help="Starting value (default: 0)")
    parser.add_argument("--max-depth", type=parse_int, help="Keep at most this many transactions")
    parser.add_argument("--format", choices=["text", "json"], default="text", help="Output format (default: text)")
    parser.add_argument("--trace", action="store_true", help="Print the state after every operation")


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="tps-cli",
        description="Apply undoable transactions to a number from the command line.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log history changes to stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # run
    run_parser = subparsers.add_parser("run", help="Apply operations given as arguments")
    run_parser.add_argument(
        "operations", nargs="+", metavar="OP", help="add:N, and:N, or:N, undo, redo, clear or reset"
    )
    _add_session_options(run_parser)

    # script
    script_parser = subparsers.add_parser("script", help="Apply operations read from a file")
    script_parser.add_argument("script", help="Path to a file with one operation per line")
    _add_session_options(script_parser)

    # repl
    repl_parser = subparsers.add_parser("repl", help="Launch interactive Python REPL with a live session")
    repl_parser.add_argument("--initial", type=parse_int, default=0, help="Starting value (default: 0)")

    return parser


def main(argv=None) -> int:
    """CLI entry point. Returns exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    handlers = {
        "run": cmd_run,
        "script": cmd_script,
        "repl": cmd_repl,
    }

    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
