"""Unified Testing CLI for Rack Pairing.

This module provides an interactive command-line interface for generating,
validating and benchmarking simulated tournaments.
"""

# Rack Pairing
# Copyright (C) 2025  Rack Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import json
import sys
import time
from pathlib import Path

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from rackpairing.constants import (
    PAIRING_SYSTEM_NAMES,
    PAIRING_SYSTEMS,
    SAVE_FILE_EXTENSION,
)
from rackpairing.exceptions import RackPairingException
from rackpairing.models.tournament import Tournament
from rackpairing.testing.rtg import RandomTournamentGenerator, ResultPattern, RTGConfig
from rackpairing.utils import setup_logger
from rackpairing.validation import create_pairing_checker

logger = setup_logger(__name__)

RESULT_PATTERNS = [pattern.value for pattern in ResultPattern]


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Command definitions with their options
COMMANDS = {
    "generate": {
        "description": "Generate random tournaments (RTG)",
        "options": {
            "--players": "Number of players (default: 24)",
            "--rounds": "Number of rounds (default: 7)",
            "--system": "Pairing system (swiss/round_robin/koth/initial_fontes)",
            "--pattern": "Result pattern (realistic/balanced/predictable/random)",
            "--seed": "Random seed for reproducibility",
            "--withdraw-rate": "Chance per round that a player withdraws",
            "--avoid-repeat-byes": "Swiss: give byes to players without one first",
            "--output": "Output file path (JSON)",
            "--no-validate": "Skip pairing validation",
        },
    },
    "validate": {
        "description": "Validate the pairings of a saved tournament",
        "options": {
            "--file": "Tournament file to validate (JSON)",
            "--detailed": "Show every failed check",
            "--export": "Export validation report (json/txt)",
        },
    },
    "benchmark": {
        "description": "Performance benchmarking",
        "options": {
            "--size": "Tournament size to benchmark (default: 24)",
            "--rounds": "Number of rounds (default: 7)",
            "--system": "Pairing system (default: swiss)",
            "--iterations": "Number of iterations (default: 10)",
        },
    },
    "help": {
        "description": "Show help for specific command",
        "options": {
            "<command>": "Command name to get help for",
        },
    },
    "exit": {"description": "Exit the interactive mode", "options": {}},
}


def print_banner():
    """Print the application banner."""
    banner = f"""
{Colors.OKBLUE}╔═══════════════════════════════════════════════════════════════╗
║                                                               ║
║                   RACK PAIRING TEST - CLI                     ║
║                                                               ║
╚═══════════════════════════════════════════════════════════════╝{Colors.ENDC}

Type {Colors.BOLD}/help{Colors.ENDC} to see all available commands
Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} to leave interactive mode
"""
    print(banner)


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:15}{Colors.ENDC} - {info['description']}")
    print()


def print_command_help(command: str):
    """Print detailed help for a specific command."""
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print_commands_list()
        return

    cmd_info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{Colors.OKBLUE}Command: {command}{Colors.ENDC}")
    print(f"{Colors.BOLD}Description:{Colors.ENDC} {cmd_info['description']}\n")

    if cmd_info["options"]:
        print(f"{Colors.BOLD}Options:{Colors.ENDC}")
        for option, description in cmd_info["options"].items():
            print(f"  {Colors.OKCYAN}{option:20}{Colors.ENDC} {description}")
    print()


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for interactive mode."""
    # Support both "/command" and "command" formats
    completions = {}
    for cmd, info in COMMANDS.items():
        options_completer = (
            WordCompleter(list(info["options"].keys())) if info["options"] else None
        )
        completions[cmd] = options_completer
        completions[f"/{cmd}"] = options_completer

    completions["/help"] = None
    completions["/list"] = None

    return NestedCompleter.from_nested_dict(completions)


def print_report(report: dict, detailed: bool = False):
    print(f"\n{Colors.BOLD}Pairing Validation:{Colors.ENDC}")
    violations = report.get("violations", [])
    warnings = report.get("warnings", [])

    if violations:
        print(f"  {Colors.FAIL}Violations: {len(violations)}{Colors.ENDC}")
    if warnings:
        print(f"  {Colors.WARNING}Warnings: {len(warnings)}{Colors.ENDC}")
    print(f"  {report.get('summary', 'N/A')}")

    if detailed:
        for message in violations + warnings:
            print(f"  - {message}")


def run_generate_command(args: argparse.Namespace) -> int:
    """Run the generate (RTG) command."""
    print(f"\n{Colors.BOLD}Generating tournament...{Colors.ENDC}")
    print(f"Pairing system: {PAIRING_SYSTEM_NAMES[args.system]}")

    config = RTGConfig(
        num_players=args.players,
        num_rounds=args.rounds,
        pairing_system=args.system,
        result_pattern=ResultPattern(args.pattern),
        seed=args.seed,
        withdraw_rate=args.withdraw_rate,
        avoid_repeat_byes=args.avoid_repeat_byes,
        validate=not args.no_validate,
    )

    rtg = RandomTournamentGenerator(config)
    tournament_data = rtg.generate_complete_tournament()

    if args.output:
        output_path = Path(args.output)
        content = rtg.export_json_format(tournament_data)
        output_path.write_text(content, encoding="utf-8")
        print(f"{Colors.OKGREEN}Tournament saved to: {output_path}{Colors.ENDC}")

    tournament = tournament_data["tournament"]
    print(f"\n{Colors.BOLD}Tournament Generated:{Colors.ENDC}")
    print(f"  Players: {len(tournament.participants)}")
    print(f"  Rounds: {len(tournament_data['rounds'])}")

    print(f"\n{Colors.BOLD}Top of the standings:{Colors.ENDC}")
    for rank, participant in enumerate(tournament.get_standings()[:5], start=1):
        print(f"  {rank}. {participant}")

    if "validation" in tournament_data:
        print_report(tournament_data["validation"])
        if tournament_data["validation"]["violations"]:
            return 1

    return 0


def run_validate_command(args: argparse.Namespace) -> int:
    """Run the validation command."""
    if not args.file:
        print(f"{Colors.FAIL}Error: --file required{Colors.ENDC}")
        return 1

    file_path = Path(args.file)
    if not file_path.exists():
        print(f"{Colors.FAIL}Error: File not found: {file_path}{Colors.ENDC}")
        return 1

    if file_path.suffix != SAVE_FILE_EXTENSION:
        print(f"{Colors.FAIL}Error: expected a {SAVE_FILE_EXTENSION} file{Colors.ENDC}")
        return 1

    print(f"\n{Colors.BOLD}Validating tournament: {file_path}{Colors.ENDC}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        # RTG exports wrap the tournament, saved tournaments are bare
        tournament = Tournament.from_dict(data.get("tournament", data))
    except (OSError, ValueError, KeyError, AttributeError, RackPairingException) as e:
        print(f"{Colors.FAIL}Error: cannot read {file_path}: {e}{Colors.ENDC}")
        logger.error(f"Failed to load tournament file {file_path}: {e}")
        return 1

    report = create_pairing_checker().validate_tournament(tournament)

    print(f"  Compliance: {report.compliance_percentage:.1f}%")
    print_report(report.to_dict(), detailed=args.detailed)

    if args.export:
        export_path = Path(args.export)
        if export_path.suffix == ".json":
            content = json.dumps(report.to_dict(), indent=2)
            export_path.write_text(content, encoding="utf-8")
        else:
            export_path.write_text(report.summary, encoding="utf-8")
        print(f"\n{Colors.OKGREEN}Report exported to: {export_path}{Colors.ENDC}")

    return 0 if report.is_valid else 1


def run_benchmark_command(args: argparse.Namespace) -> int:
    """Run performance benchmarks."""
    print(f"\n{Colors.BOLD}Running performance benchmark...{Colors.ENDC}")
    print(f"Tournament size: {args.size} players, {args.rounds} rounds")
    print(f"Pairing system: {PAIRING_SYSTEM_NAMES[args.system]}")
    print(f"Iterations: {args.iterations}\n")

    times = []
    for i in range(args.iterations):
        config = RTGConfig(
            num_players=args.size,
            num_rounds=args.rounds,
            pairing_system=args.system,
            seed=42 + i,
            validate=False,
        )
        rtg = RandomTournamentGenerator(config)
        start = time.perf_counter()
        rtg.generate_complete_tournament()
        elapsed = time.perf_counter() - start
        times.append(elapsed)

        print(f"  Iteration {i+1}/{args.iterations}: {elapsed*1000:.2f}ms")

    if not times:
        return 0

    print(f"\n{Colors.BOLD}Results:{Colors.ENDC}")
    print(f"  Average: {sum(times) / len(times) * 1000:.2f}ms")
    print(f"  Min: {min(times) * 1000:.2f}ms")
    print(f"  Max: {max(times) * 1000:.2f}ms")

    return 0


def add_generate_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("--players", type=int, default=24, help="Number of players")
    parser.add_argument("--rounds", type=int, default=7, help="Number of rounds")
    parser.add_argument(
        "--system", choices=PAIRING_SYSTEMS, default="swiss", help="Pairing system"
    )
    parser.add_argument(
        "--pattern", choices=RESULT_PATTERNS, default="realistic", help="Result pattern"
    )
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument(
        "--withdraw-rate", type=float, default=0.0, help="Withdrawal chance per round"
    )
    parser.add_argument(
        "--avoid-repeat-byes", action="store_true", help="Avoid repeat Swiss byes"
    )
    parser.add_argument("--output", help="Output file path")
    parser.add_argument("--no-validate", action="store_true", help="Skip validation")


def add_validate_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("--file", required=True, help="Tournament file (JSON)")
    parser.add_argument(
        "--detailed", action="store_true", help="Show every failed check"
    )
    parser.add_argument("--export", help="Export report (json/txt)")


def add_benchmark_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("--size", type=int, default=24, help="Tournament size")
    parser.add_argument("--rounds", type=int, default=7, help="Number of rounds")
    parser.add_argument(
        "--system", choices=PAIRING_SYSTEMS, default="swiss", help="Pairing system"
    )
    parser.add_argument(
        "--iterations", type=int, default=10, help="Number of iterations"
    )


def create_main_parser() -> argparse.ArgumentParser:
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="rackpairing-test",
        description="Unified testing CLI for Rack Pairing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  rackpairing-test

  # Generate tournament
  rackpairing-test generate --players 24 --rounds 7 --system swiss

  # Validate tournament
  rackpairing-test validate --file tournament.json

  # Benchmark performance
  rackpairing-test benchmark --size 64 --iterations 20
        """,
    )

    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Start in interactive mode"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    gen_parser = subparsers.add_parser("generate", help="Generate random tournaments")
    add_generate_arguments(gen_parser)
    gen_parser.set_defaults(func=run_generate_command)

    val_parser = subparsers.add_parser("validate", help="Validate saved pairings")
    add_validate_arguments(val_parser)
    val_parser.set_defaults(func=run_validate_command)

    bench_parser = subparsers.add_parser("benchmark", help="Performance benchmarking")
    add_benchmark_arguments(bench_parser)
    bench_parser.set_defaults(func=run_benchmark_command)

    return parser


def create_command_parser(command: str) -> argparse.ArgumentParser:
    """Create a standalone parser for one command, used by interactive mode."""
    parser = argparse.ArgumentParser(prog=command)
    if command == "generate":
        add_generate_arguments(parser)
        parser.set_defaults(func=run_generate_command)
    elif command == "validate":
        add_validate_arguments(parser)
        parser.set_defaults(func=run_validate_command)
    elif command == "benchmark":
        add_benchmark_arguments(parser)
        parser.set_defaults(func=run_benchmark_command)
    return parser


def run_interactive_mode() -> int:
    """Run in interactive mode with autocomplete."""
    print_banner()

    style = Style.from_dict(
        {
            "prompt": "#00aa00 bold",
        }
    )

    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=style,
    )

    while True:
        try:
            user_input = session.prompt("rackpairing-test> ").strip()

            if not user_input:
                continue

            if user_input in ["exit", "quit", "q", "/exit"]:
                print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
                break

            if user_input in ["/help", "help", "?", "/list"]:
                print_commands_list()
                continue

            if user_input.startswith("/help ") or user_input.startswith("help "):
                print_command_help(user_input.split()[1].lstrip("/"))
                continue

            parts = user_input.split()
            command = parts[0].lstrip("/")

            if command not in COMMANDS:
                print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
                print(f"Type {Colors.BOLD}/help{Colors.ENDC} to see available commands")
                continue

            if command == "exit":
                print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
                break

            if command == "help":
                print_commands_list()
                continue

            try:
                args = create_command_parser(command).parse_args(parts[1:])
                args.func(args)
            except SystemExit:
                # argparse calls sys.exit on error, catch it
                continue
            except Exception as e:
                print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
                logger.exception("Command execution failed")

        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break

    return 0


def run_standard_mode(argv=None) -> int:
    """Run in standard CLI mode (non-interactive)."""
    parser = create_main_parser()
    args = parser.parse_args(argv)

    if args.interactive:
        return run_interactive_mode()

    if hasattr(args, "func"):
        return args.func(args)
    parser.print_help()
    return 0


def main() -> int:
    """Main entry point for rackpairing-test CLI."""
    # If no arguments, start interactive mode
    if len(sys.argv) == 1:
        return run_interactive_mode()

    if "--interactive" in sys.argv or "-i" in sys.argv:
        return run_interactive_mode()

    return run_standard_mode()


if __name__ == "__main__":
    sys.exit(main())
