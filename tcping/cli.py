"""Command-line parsing for TCPing."""

import argparse
import sys

from tcping.config import ProbeSettings
from tcping.models import MAX_PORT, MIN_PORT, Target

EXIT_USAGE = 2

USAGE = """Использование: tcping <хост> [порт]
Примеры:
  tcping example.ru       # Проверка порта 80
  tcping example.ru 443   # Проверка порта 443"""

HELP_FLAGS = ("-h", "--h", "--help")

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def parse_port(value: str) -> int:
    """argparse type for the port argument.

    Only an optional sign followed by ASCII digits that fit a signed 32-bit
    integer is a well-formed port; anything else is a format error, even
    where int() would accept it ("8_0", " 80 ", non-ASCII digits).
    """
    digits = value[1:] if value[:1] in ("+", "-") else value
    if not (digits.isascii() and digits.isdigit()):
        raise argparse.ArgumentTypeError("Неверный формат порта")
    port = int(value)
    if not INT32_MIN <= port <= INT32_MAX:
        raise argparse.ArgumentTypeError("Неверный формат порта")
    if not MIN_PORT <= port <= MAX_PORT:
        raise argparse.ArgumentTypeError(f"Порт должен быть в диапазоне {MIN_PORT}-{MAX_PORT}")
    return port


class TcpingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports errors as a bare one-line diagnostic."""

    def error(self, message):
        self.exit(EXIT_USAGE, f"{message}\n")

    def print_help(self, file=None):
        print(USAGE, file=file if file is not None else sys.stdout)


def build_argparser() -> TcpingArgumentParser:
    ap = TcpingArgumentParser(prog="tcping", add_help=False, exit_on_error=False)
    ap.add_argument("host", nargs="?")
    ap.add_argument("port", nargs="?", type=parse_port)
    return ap


def parse_target(argv: list[str], settings: ProbeSettings | None = None) -> Target:
    """Turn command-line arguments into a Target.

    Help flags print the usage and exit 0 without probing. A wrong argument
    count prints the usage to stderr, a bad port prints its diagnostic
    to stderr; both exit with EXIT_USAGE.
    """
    settings = settings or ProbeSettings()
    ap = build_argparser()

    if argv and argv[0] in HELP_FLAGS:
        ap.print_help()
        ap.exit(0)

    if not 1 <= len(argv) <= 2:
        ap.print_help(sys.stderr)
        ap.exit(EXIT_USAGE)

    try:
        # "--" keeps a dash-prefixed port positional so it reaches parse_port
        args = ap.parse_args(["--", *argv])
    except argparse.ArgumentError as e:
        ap.exit(EXIT_USAGE, f"{e.message}\n")

    port = args.port if args.port is not None else settings.default_port
    return Target(host=args.host, port=port)
