#!/usr/bin/env python3
"""
aoc — Advent of Code 2019 runner and intcode tools
==================================================

Commands:
    aoc run      — Solve one part of one day's puzzle
    aoc exec     — Run an intcode program file on the VM
    aoc disasm   — List an intcode program file

Usage:
    python aoc.py <command> [options]
    python aoc.py <command> --help

Examples:
    python aoc.py run one two
    python aoc.py run two one --inputs ~/aoc/inputs
    python aoc.py exec inputs/2/1.txt --noun 12 --verb 2
    python aoc.py exec prog.txt --max-steps 1000 --dump -vv
    python aoc.py disasm inputs/2/1.txt
"""

import argparse
import logging
import sys
import os
from pathlib import Path

# Allow running from project root without installing
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from aoc2019 import __version__, config
from aoc2019.challenges import CHALLENGES, get_challenge
from aoc2019.errors import ChallengeError
from aoc2019.intcode import (
    IntcodeError, IntcodeVM, State, disassemble, load_program,
    NOUN_ADDRESS, VERB_ADDRESS, WORD_MAX,
)
from aoc2019.log import console_level_for, setup_logging

log = logging.getLogger("aoc2019.cli")


def parse_word_arg(value: str) -> int:
    """Parse a noun/verb override: decimal or 0x-prefixed hex, 0..WORD_MAX."""
    value = value.strip()
    try:
        n = int(value, 16) if value.lower().startswith("0x") else int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer")
    if not 0 <= n <= WORD_MAX:
        raise argparse.ArgumentTypeError(f"{value} does not fit in a word")
    return n


def parse_steps_arg(value: str) -> int:
    """Parse --max-steps: a non-negative decimal integer."""
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer")
    if n < 0:
        raise argparse.ArgumentTypeError(f"step limit must be >= 0, got {n}")
    return n


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="aoc",
        description="Advent of Code 2019 solvers and intcode VM",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="days: " + ", ".join(CHALLENGES.keys()),
    )
    parser.add_argument("--inputs", type=Path, default=None,
                        help=f"Puzzle inputs directory (default: {config.INPUTS_DIR})")
    parser.add_argument("--log-dir", type=Path, default=config.LOG_DIR,
                        help="Also write a debug log file to this directory")
    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="Increase console log level (-v, -vv)")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Only log errors")
    parser.add_argument("--version", action="version",
                        version=f"aoc {__version__}")

    sub = parser.add_subparsers(dest="command", metavar="command")

    p_run = sub.add_parser("run", help="Solve one part of a day's puzzle")
    p_run.add_argument("day", help="Day name (one, two, ...)")
    p_run.add_argument("part", help="Part name (one, two)")

    p_exec = sub.add_parser("exec", help="Run an intcode program file")
    p_exec.add_argument("program", help="Program text file")
    p_exec.add_argument("--noun", type=parse_word_arg, default=None,
                        help=f"Value written to address {NOUN_ADDRESS} before the run")
    p_exec.add_argument("--verb", type=parse_word_arg, default=None,
                        help=f"Value written to address {VERB_ADDRESS} before the run")
    p_exec.add_argument("--max-steps", type=parse_steps_arg, default=None,
                        help="Stop after this many instructions")
    p_exec.add_argument("--dump", action="store_true",
                        help="Print the whole final memory instead of address 0")

    p_dis = sub.add_parser("disasm", help="List an intcode program file")
    p_dis.add_argument("program", help="Program text file")

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1

    setup_logging(console_level=console_level_for(args.verbose, args.quiet),
                  log_dir=args.log_dir)

    handlers = {
        "run": cmd_run,
        "exec": cmd_exec,
        "disasm": cmd_disasm,
    }

    try:
        return handlers[args.command](args)
    except IntcodeError as e:
        print(f"Intcode error: {e}", file=sys.stderr)
        return 1
    except ChallengeError as e:
        print(f"Challenge error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Internal error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 2


# ══════════════════════════════════════════════
# Commands
# ══════════════════════════════════════════════

def cmd_run(args):
    challenge = get_challenge(args.day, args.inputs)
    log.info("Running day %s part %s", args.day, args.part)
    print(challenge.run(args.part))
    return 0


def _read_program(path: str):
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading {path}: {e}", file=sys.stderr)
        return None
    return load_program(text)


def cmd_exec(args):
    memory = _read_program(args.program)
    if memory is None:
        return 1
    if args.noun is not None:
        memory.write(NOUN_ADDRESS, args.noun)
    if args.verb is not None:
        memory.write(VERB_ADDRESS, args.verb)

    vm = IntcodeVM(memory)
    state = vm.run(max_steps=args.max_steps)
    log.info("%s after %d steps", state.value, vm.steps)

    if state is State.FAULTED:
        raise vm.fault
    if state is State.RUNNING:
        print(f"Step limit reached: still running at pointer {vm.pointer}",
              file=sys.stderr)
        return 1

    if args.dump:
        print(vm.memory.dump())
    else:
        print(vm.result)
    return 0


def cmd_disasm(args):
    memory = _read_program(args.program)
    if memory is None:
        return 1
    for line in disassemble(memory):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
