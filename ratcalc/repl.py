"""
Command-line driver: one-shot expressions, batch mode over stdin, and an
interactive REPL with history and completion via prompt_toolkit.

The calculator core knows nothing about this module.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO, Tuple

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import FileHistory
from pydantic import ValidationError

from ratcalc.calculator import Calculator
from ratcalc.config import Settings, load_settings
from ratcalc.errors import CalculatorError
from ratcalc.formatting import format_fraction

logger = logging.getLogger(__name__)

PROMPT = '> '

_HELP_TOPICS = {
    'general': (
        "Exact rational calculator help:\n"
        "Numbers are exact fractions; 0.1 + 0.2 is exactly 3/10.\n"
        "Examples:\n"
        "  1/3 + 1/6 -> 0.5\n"
        "  -(2 + 3) * 4 -> -20\n"
        "  sqrt(2) -> 1.414213562...\n"
        "  scale(2, 3.14159) -> 3.14\n"
        "Commands:\n"
        "  :help, help [topic]    show help (topics: operators, functions)\n"
        "  :functions             list built-in functions\n"
        "  :exit, :quit           exit\n"
    ),
    'operators': (
        "Operators and precedence (high -> low):\n"
        "  prefix: + - (a single sign only)\n"
        "  * /\n"
        "  + -\n"
        "Notes:\n"
        "  - All binary operators are left-associative (2 - 3 - 4 == -5).\n"
        "  - Division is exact; dividing by zero is an error.\n"
        "  - Parentheses group; newlines inside an expression are ignored.\n"
    ),
}


def show_help(calculator: Calculator, topic: Optional[str] = None) -> str:
    """Return help text for topic or general if None."""
    if not topic:
        return _HELP_TOPICS['general']
    key = topic.lower()
    if key == 'functions':
        return list_functions(calculator)
    return _HELP_TOPICS.get(key, f"No help available for topic '{topic}'")


def list_functions(calculator: Calculator) -> str:
    lines = ["Built-in functions:"]
    for builtin in calculator.functions:
        plural = '' if builtin.arity == 1 else 's'
        lines.append(f"  {builtin.name} ({builtin.arity} argument{plural}) - {builtin.doc}")
    return "\n".join(lines)


class REPL:
    """Read-Eval-Print Loop for the calculator."""

    def __init__(self, settings: Optional[Settings] = None, fraction: bool = False):
        self.settings = settings if settings is not None else Settings()
        self.calculator = Calculator(self.settings)
        self.fraction = fraction
        self.history_file = self.settings.history_file

    def render(self, value) -> str:
        if self.fraction:
            return format_fraction(value)
        return self.calculator.format(value)

    def _process_command(self, line: str) -> Optional[str]:
        """Process commands starting with ':' or 'help'. Returns response string if a command, else None."""
        s = line.strip()
        if not s:
            return None
        if s.startswith(':'):
            parts = s[1:].split(None, 1)
            if not parts:
                return "No command specified. Use :help for available commands."
            cmd = parts[0].lower()
            arg = parts[1].strip() if len(parts) > 1 else None
            if cmd in {'exit', 'quit'}:
                raise EOFError()
            if cmd == 'help':
                return show_help(self.calculator, arg)
            if cmd == 'functions':
                return list_functions(self.calculator)
            return f"Unknown command: {cmd}"
        parts = s.split(None, 1)
        if parts[0].lower() == 'help':
            return show_help(self.calculator, parts[1].strip() if len(parts) > 1 else None)
        return None

    def evaluate_line(self, line: str) -> Tuple[bool, str]:
        """Evaluate a single line (either command or expression). Returns (ok, output)."""
        cmd_out = self._process_command(line)
        if cmd_out is not None:
            return True, cmd_out
        try:
            result = self.calculator.evaluate_line(line)
        except CalculatorError as e:
            logger.info(f"Evaluation of {line!r} failed: {e}")
            return False, f"Error: {e}"
        return True, self.render(result)

    def repl_loop(self) -> None:
        """Interactive loop with persistent history and function-name completion."""
        print("Exact rational calculator. Type :help for help. Ctrl-D or :exit to quit.")
        session = PromptSession(history=FileHistory(self.history_file))
        completer = WordCompleter(self.calculator.functions.names())
        while True:
            try:
                line = session.prompt(PROMPT, completer=completer)
            except KeyboardInterrupt:
                print("^C")
                continue
            except EOFError:
                print("Exiting.")
                break
            if not line.strip():
                continue
            try:
                ok, out = self.evaluate_line(line)
            except EOFError:
                print("Exiting.")
                break
            print(out)


def run_batch(calculator: Calculator, stream: TextIO, out: TextIO, fraction: bool = False) -> int:
    """Evaluate every expression in ``stream``, printing one result per expression."""
    for value in calculator.evaluate_all(stream):
        print(format_fraction(value) if fraction else calculator.format(value), file=out)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='ratcalc', description="Evaluate arithmetic over exact rationals.")
    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate. Without any, read stdin (batch) or start the REPL.",
    )
    parser.add_argument(
        "-p", "--precision",
        type=int,
        help="Decimal digits used by sqrt and for printing non-integers (default: 100).",
    )
    parser.add_argument(
        "-f", "--fraction",
        action="store_true",
        help="Print non-integer results as exact numerator/denominator.",
    )
    parser.add_argument(
        "-i", "--interactive",
        action="store_true",
        help="Start the REPL even when stdin is not a terminal.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level name (default: WARNING, or RATCALC_LOG_LEVEL).",
    )
    parser.add_argument(
        "--env-file",
        type=str,
        help="Path to a .env file with RATCALC_* settings.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    try:
        settings = load_settings(args.env_file, precision=args.precision, log_level=args.log_level)
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    repl = REPL(settings, fraction=args.fraction)
    try:
        if args.expressions:
            for expr in args.expressions:
                print(repl.render(repl.calculator.evaluate_line(expr)))
            return 0
        if args.interactive or sys.stdin.isatty():
            repl.repl_loop()
            return 0
        return run_batch(repl.calculator, sys.stdin, sys.stdout, fraction=args.fraction)
    except CalculatorError as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
