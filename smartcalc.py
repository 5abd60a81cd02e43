#!/usr/bin/env python3
"""
smartcalc.py — SmartCalc command line.

Runs fully locally; variables live as long as the process.

Configuration: environment variables with the SMART_CALC_ prefix
or a .env file (e.g. SMART_CALC_DEFER_FUNCTIONS=false).

Subcommands:
    repl     — interactive calculator ('exit' quits)
    eval     — evaluate lines from --text, --file or stdin with one shared store
    postfix  — show the postfix (RPN) form of an expression

Usage:
    python smartcalc.py repl
    python smartcalc.py eval --text "x = 10
x + 5"
    python smartcalc.py eval --file session.txt --vars
    python smartcalc.py postfix --text "(2 + 3) * sqrt(16)"
    python smartcalc.py postfix --legacy-functions --text "sqrt(16)"
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from adapters.variable_store.memory_store import InMemoryVariableStore
from calculator import Calculator
from config import Settings
from contracts import CalculatorError, render_postfix


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _fmt(value: float) -> str:
    return f"{value:g}"


def _print_kv_table(title: str, rows: list[tuple[str, Any]]) -> None:
    table = Table(title=title, box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Key", no_wrap=True, style="bold cyan")
    table.add_column("Value")
    for key, value in rows:
        table.add_row(str(key), str(value))
    _console().print(table)


def _read_text(args: argparse.Namespace) -> str:
    if getattr(args, "file", None):
        try:
            with open(args.file, encoding="utf-8") as fh:
                return fh.read()
        except OSError as e:
            print(f"Error reading file: {e}", file=sys.stderr)
            sys.exit(1)
    text = getattr(args, "text", None) or sys.stdin.read()
    if not text.strip():
        print("Error: pass an expression via --text, --file or stdin", file=sys.stderr)
        sys.exit(1)
    return text


def _evaluate_line(calculator: Calculator, line: str, store: InMemoryVariableStore) -> bool:
    """Evaluates and prints one line. Returns False if it failed."""
    try:
        value = calculator.evaluate(line, store)
    except CalculatorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return False
    print(f"Result : {_fmt(value)}")
    return True


# -- subcommands -----------------------------------------------------------

def _repl(args: argparse.Namespace, settings: Settings) -> None:
    calculator = Calculator.from_settings(settings)
    store = InMemoryVariableStore()

    print("Welcome in the scientific calculator.\n")
    print(f"Enter an expression to calculate it or '{settings.exit_command}' to quit.\n")

    while True:
        try:
            line = input(settings.prompt)
        except EOFError:
            print()
            break
        if line.strip() == settings.exit_command:
            break
        if not line.strip():
            continue
        _evaluate_line(calculator, line, store)


def _eval(args: argparse.Namespace, settings: Settings) -> None:
    calculator = Calculator.from_settings(settings)
    store = InMemoryVariableStore()

    failed = 0
    for line in _read_text(args).splitlines():
        if not line.strip():
            continue
        if not _evaluate_line(calculator, line, store):
            failed += 1

    if args.vars:
        _print_kv_table(
            f"Variables [{len(store)}]",
            [(name, _fmt(value)) for name, value in store.snapshot().items()],
        )
    if failed:
        sys.exit(1)


def _postfix(args: argparse.Namespace, settings: Settings) -> None:
    defer = settings.defer_functions and not args.legacy_functions
    calculator = Calculator(defer_functions=defer)
    store = InMemoryVariableStore()

    text = _read_text(args).strip()
    try:
        postfix = calculator.converter.to_postfix(text, store)
    except CalculatorError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(" ".join(render_postfix(postfix)))


# -- main ------------------------------------------------------------------

def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        prog="smartcalc",
        description="SmartCalc — scientific calculator CLI",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # repl
    sub.add_parser("repl", help="Interactive calculator")

    # eval
    p = sub.add_parser("eval", help="Evaluate lines with one shared variable store")
    p.add_argument("--text", "-t", help="Expressions, one per line (or stdin)")
    p.add_argument("--file", "-f", help="Path to a file with expressions")
    p.add_argument("--vars", action="store_true",
                   help="Print the variable store afterwards")

    # postfix
    p = sub.add_parser("postfix", help="Show the postfix form of an expression")
    p.add_argument("--text", "-t", help="Expression (or stdin)")
    p.add_argument("--legacy-functions", action="store_true",
                   help="Emit function tokens before their argument")

    args = parser.parse_args(argv)

    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    commands = {
        "repl":    _repl,
        "eval":    _eval,
        "postfix": _postfix,
    }
    commands[args.command](args, settings)


if __name__ == "__main__":
    main()
