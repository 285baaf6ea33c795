"""Command-line interface for psscript."""

import argparse
import logging
import shlex
import sys

from psscript import __version__
from psscript.builder import PsScriptBuilder
from psscript.config import load_config
from psscript.errors import PowershellError, PsError
from psscript.models import ExecutionPolicy

log = logging.getLogger("psscript")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="psscript",
        description="Run a PowerShell script read from a file or stdin",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Load the PowerShell profile (omits -NoProfile)",
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Allow interactive prompts (omits -NonInteractive)",
    )
    parser.add_argument(
        "--show-window",
        action="store_true",
        help="Show the console window on Windows",
    )
    parser.add_argument(
        "--print-commands",
        action="store_true",
        help="Echo each script line before running it",
    )
    parser.add_argument(
        "-x",
        "--execution-policy",
        type=ExecutionPolicy,
        metavar="POLICY",
        help="Execution policy: " + ", ".join(p.value for p in ExecutionPolicy),
    )
    parser.add_argument("--executable", help="PowerShell executable to launch")
    parser.add_argument(
        "--print-args",
        action="store_true",
        help="Print the PowerShell arguments and exit without running",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="Script file to run ('-' or omitted reads stdin)",
    )
    return parser


def _read_script(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def _exit_code(returncode: int) -> int:
    """Map a child return code to a shell exit status (signals become 128 + N)."""
    if returncode < 0:
        return 128 - returncode
    return returncode


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    try:
        config = load_config()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    builder = PsScriptBuilder.from_config(config)
    if args.profile:
        builder = builder.no_profile(False)
    if args.interactive:
        builder = builder.non_interactive(False)
    if args.show_window:
        builder = builder.hidden(False)
    if args.print_commands:
        builder = builder.print_commands(True)
    if args.execution_policy is not None:
        builder = builder.execution_policy(args.execution_policy)
    ps_script = builder.build()
    log.debug("args=%s hidden=%s", ps_script.args, ps_script.hidden)

    if args.print_args:
        print(shlex.join(ps_script.args))
        return 0

    try:
        script = _read_script(args.file)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        output = ps_script.run(script, executable=args.executable or config.executable)
    except PowershellError as e:
        if e.output.stdout():
            sys.stdout.write(e.output.stdout())
        sys.stderr.write(e.output.stderr() or f"{e}\n")
        return _exit_code(e.output.returncode)
    except PsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if output.stdout():
        sys.stdout.write(output.stdout())
    if output.stderr():
        sys.stderr.write(output.stderr())
    return 0


def entrypoint() -> None:
    raise SystemExit(main())
