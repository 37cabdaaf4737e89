"""Console shell for the in-memory ledger.

Usage::

    bank-ledger --demo-accounts 5 --seed 42

Then type commands such as ``create 100 Savings Priya``,
``deposit 100 500``, ``withdraw 100 200``, ``show 100`` or ``search pri``.
Everything lives in memory and is gone when the shell exits.
"""

import argparse
import shlex
import sys
from typing import Callable, TextIO

from bank_ledger import __version__
from bank_ledger.config import BankLedgerConfig
from bank_ledger.exceptions import ConfigurationError
from bank_ledger.logging import get_logger, setup_logging
from bank_ledger.result import Result
from bank_ledger.scenarios import DemoLedgerScenario
from bank_ledger.session import BankingSession
from bank_ledger.sinks import ConsoleSink
from bank_ledger.store import AccountLedger
from bank_ledger.views import render_table

logger = get_logger(__name__)

HELP_TEXT = """\
Commands:
  create <number> <Savings|Current> <name...>   open an account
  deposit <number> <amount>                     deposit into an account
  withdraw <number> <amount>                    withdraw from an account
  search [keyword]                              filter accounts by number or name
  list                                          show all accounts
  show <number>                                 show an account's transactions
  clear                                         reset search and selection
  summary                                       ledger totals
  help                                          this text
  quit                                          leave the shell"""


class LedgerShell:
    """Line-oriented command loop over a ``BankingSession``."""

    prompt = "bank> "

    def __init__(self, session: BankingSession, out: TextIO | None = None) -> None:
        self.session = session
        self.out = out or sys.stdout
        self._commands: dict[str, Callable[[str], bool]] = {
            "create": self._create,
            "deposit": self._deposit,
            "withdraw": self._withdraw,
            "search": self._search,
            "list": self._list,
            "show": self._show,
            "clear": self._clear,
            "summary": self._summary,
            "help": self._help,
            "quit": self._quit,
            "exit": self._quit,
        }

    def run(self, stream: TextIO, interactive: bool = False) -> None:
        """Read and execute commands until EOF or ``quit``."""
        while True:
            if interactive:
                self.out.write(self.prompt)
                self.out.flush()
            line = stream.readline()
            if not line:
                break
            if not self.execute(line.rstrip("\n")):
                break

    def execute(self, line: str) -> bool:
        """Execute one command line. Returns False when the shell should stop."""
        if not line.strip():
            return True
        command, _, remainder = line.lstrip().partition(" ")
        handler = self._commands.get(command.lower())
        if handler is None:
            self._echo(f"Error: unknown command {command!r} (try 'help')")
            return True
        return handler(remainder)

    def _create(self, remainder: str) -> bool:
        args = self._split(remainder)
        if args is None:
            return True
        if len(args) < 3:
            self._echo("Usage: create <number> <Savings|Current> <name...>")
            return True
        result = self.session.create_account(args[0], " ".join(args[2:]), args[1])
        self._report(result)
        if result.ok:
            self._print_rows()
        return True

    def _deposit(self, remainder: str) -> bool:
        args = self._split(remainder)
        if args is None:
            return True
        if len(args) != 2:
            self._echo("Usage: deposit <number> <amount>")
            return True
        self._report(self.session.deposit(args[0], args[1]))
        return True

    def _withdraw(self, remainder: str) -> bool:
        args = self._split(remainder)
        if args is None:
            return True
        if len(args) != 2:
            self._echo("Usage: withdraw <number> <amount>")
            return True
        self._report(self.session.withdraw(args[0], args[1]))
        return True

    def _search(self, remainder: str) -> bool:
        # keyword is matched literally, spaces included
        self.session.filter(remainder)
        self._print_rows()
        return True

    def _list(self, remainder: str) -> bool:
        self.session.filter("")
        self._print_rows()
        return True

    def _show(self, remainder: str) -> bool:
        args = self._split(remainder)
        if args is None:
            return True
        if len(args) != 1:
            self._echo("Usage: show <number>")
            return True
        result = self.session.select(args[0])
        if not result.ok:
            self._echo(f"Error: {result.message}")
            return True
        for line in result.value:
            self._echo(line)
        return True

    def _clear(self, remainder: str) -> bool:
        self.session.clear()
        self._print_rows()
        return True

    def _summary(self, remainder: str) -> bool:
        summary = self.session.ledger.summary()
        symbol = self.session.display.currency_symbol
        self._echo(f"Accounts: {summary['accounts']}")
        for kind, count in summary["by_type"].items():
            self._echo(f"  {kind}: {count}")
        self._echo(f"Transactions: {summary['transactions']}")
        self._echo(f"Total balance: {symbol}{summary['total_balance']}")
        return True

    def _help(self, remainder: str) -> bool:
        self._echo(HELP_TEXT)
        return True

    def _quit(self, remainder: str) -> bool:
        return False

    def _split(self, remainder: str) -> list[str] | None:
        try:
            return shlex.split(remainder)
        except ValueError as exc:
            self._echo(f"Error: {exc}")
            return None

    def _report(self, result: Result[str]) -> None:
        if result.ok:
            self._echo(result.value)
        else:
            self._echo(f"Error: {result.message}")

    def _print_rows(self) -> None:
        self._echo(render_table(self.session.rows()))

    def _echo(self, text: str) -> None:
        print(text, file=self.out)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the console script."""
    parser = argparse.ArgumentParser(
        prog="bank-ledger",
        description="In-memory banking ledger shell",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--demo-accounts",
        type=int,
        default=None,
        help="Seed the ledger with N generated accounts (default: $DEMO_ACCOUNTS or 0)",
    )
    parser.add_argument(
        "--demo-activity",
        type=int,
        default=None,
        help="Deposits/withdrawals per demo account (default: $DEMO_ACTIVITY or 5)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for demo data")
    parser.add_argument("--currency", default=None, help="Currency symbol for display")
    parser.add_argument("--log-level", default=None, help="Log level (default: $LOG_LEVEL or INFO)")
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default=None,
        help="Log format (default: $LOG_FORMAT or standard)",
    )
    parser.add_argument(
        "--export",
        action="store_true",
        help="Print a JSON snapshot of the ledger and exit",
    )
    return parser


def load_config(args: argparse.Namespace) -> BankLedgerConfig:
    """Environment config with command-line overrides applied."""
    config = BankLedgerConfig.from_env()
    if args.demo_accounts is not None:
        config.demo.num_accounts = args.demo_accounts
    if args.demo_activity is not None:
        config.demo.activity_per_account = args.demo_activity
    if args.seed is not None:
        config.seed = args.seed
    if args.currency is not None:
        config.display.currency_symbol = args.currency
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.log_format is not None:
        config.log_format = args.log_format
    return config


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Entry point for the ``bank-ledger`` console script."""
    parser = build_parser()
    args = parser.parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        config = load_config(args)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    setup_logging(level=config.log_level, format_type=config.log_format)

    ledger = AccountLedger()
    if config.demo.num_accounts > 0:
        DemoLedgerScenario(
            num_accounts=config.demo.num_accounts,
            activity_per_account=config.demo.activity_per_account,
            seed=config.seed,
            locale=config.demo.locale,
            ledger=ledger,
        ).generate()

    if args.export:
        sink = ConsoleSink(pretty=True, stream=stdout)
        sink.write_batch("accounts", ledger.list())
        sink.write_summary(ledger.summary())
        sink.close()
        return 0

    session = BankingSession(ledger, config.display)
    shell = LedgerShell(session, out=stdout)
    logger.info("Ledger shell started with %d accounts", len(ledger))
    shell.run(stdin, interactive=stdin.isatty())
    return 0


if __name__ == "__main__":
    sys.exit(main())
