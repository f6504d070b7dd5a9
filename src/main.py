"""
Main Entry Point - Arithmetic Utilities CLI

Runs one of the arithmetic operations from the command line and prints the result.
"""

import sys
import os
import logging
from typing import Optional, Sequence

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.arithmetic import DivisionByZero, add, divide, square
from src.coreutils.env import log_level_from_env
from src.coreutils.logging import log_function_call, setup_logging

logger = logging.getLogger(__name__)

OPERATIONS = {
    "add": add,
    "square": square,
    "divide": divide,
}


def parse_number(value: str) -> int | float:
    """Parse a CLI operand as int when possible, float otherwise"""
    try:
        return int(value)
    except ValueError:
        return float(value)


def run_operation(name: str, *operands):
    """
    Run a named operation on the given operands

    Args:
        name: "add", "square" or "divide"
        operands: Numeric operands passed through to the operation

    Returns:
        The operation result
    """
    if name not in OPERATIONS:
        raise ValueError(f"Unknown operation: {name}")

    log_function_call(name, operands=operands)
    return OPERATIONS[name](*operands)


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(description="Arithmetic utilities")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (defaults to ARITHMETIC_LOG_LEVEL or INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    add_parser = subparsers.add_parser("add", help="Add two numbers")
    add_parser.add_argument("a", type=parse_number)
    add_parser.add_argument("b", type=parse_number)

    square_parser = subparsers.add_parser("square", help="Multiply a number by itself")
    square_parser.add_argument("x", type=parse_number)

    divide_parser = subparsers.add_parser(
        "divide", help="Divide a by b (2000 by 100 when omitted)"
    )
    divide_parser.add_argument("a", type=parse_number, nargs="?")
    divide_parser.add_argument("b", type=parse_number, nargs="?")

    return parser


def operands_from_args(args) -> tuple:
    """Collect positional operands for the chosen command"""
    if args.command == "add":
        return (args.a, args.b)
    if args.command == "square":
        return (args.x,)
    return tuple(value for value in (args.a, args.b) if value is not None)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "divide" and (args.a is None) != (args.b is None):
        parser.error("divide takes either no operands or both a and b")

    try:
        setup_logging(args.log_level or log_level_from_env())
    except ValueError as e:
        parser.error(str(e))

    try:
        result = run_operation(args.command, *operands_from_args(args))
    except DivisionByZero as e:
        logger.error(f"❌ {e}")
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
