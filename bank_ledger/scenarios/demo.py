"""Demo scenario that seeds a ledger with accounts and activity."""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Any

from bank_ledger.generators import AccountGenerator
from bank_ledger.result import ErrorKind
from bank_ledger.store import AccountLedger

logger = logging.getLogger(__name__)


class DemoLedgerScenario:
    """Populate a ledger with generated accounts and random activity.

    Every account is opened through ``AccountLedger.create_account`` and
    funded with its opening deposit. Activity is a mix of deposits and
    withdrawals; withdrawals may overdraw on purpose, in which case the
    ledger rejects them and the rejection is counted.
    """

    def __init__(
        self,
        num_accounts: int = 10,
        activity_per_account: int = 5,
        withdrawal_rate: float = 0.4,
        seed: int | None = None,
        locale: str = "en_IN",
        ledger: AccountLedger | None = None,
    ) -> None:
        """Initialize demo scenario.

        Parameters
        ----------
        num_accounts : int
            Number of accounts to open.
        activity_per_account : int
            Deposits and withdrawals applied to each account after opening.
        withdrawal_rate : float
            Probability that an activity step is a withdrawal.
        seed : int | None
            Random seed for reproducibility.
        locale : str
            Faker locale for holder names.
        ledger : AccountLedger | None
            Ledger to populate; a fresh one is created if omitted.
        """
        self.num_accounts = num_accounts
        self.activity_per_account = activity_per_account
        self.withdrawal_rate = withdrawal_rate
        self.seed = seed

        self.ledger = ledger if ledger is not None else AccountLedger()
        self._account_gen = AccountGenerator(
            seed=seed,
            locale=locale,
            first_number=self._first_free_number(),
        )
        self._counts: dict[str, int] = {
            "deposits": 0,
            "withdrawals": 0,
            "rejected_withdrawals": 0,
        }

    def generate(self) -> AccountLedger:
        """Open all demo accounts and apply their activity.

        Returns
        -------
        AccountLedger
            The populated ledger.
        """
        logger.info("Starting demo scenario: %d accounts", self.num_accounts)
        started = datetime.now()

        for profile in self._account_gen.generate_batch(self.num_accounts):
            account = self.ledger.create_account(
                profile.account_number, profile.name, profile.account_type
            ).unwrap()
            self.ledger.deposit(account.account_number, profile.opening_deposit).unwrap()
            self._counts["deposits"] += 1

            for _ in range(self.activity_per_account):
                self._apply_activity(account.account_number, profile.opening_deposit)

        logger.info(
            "Demo scenario complete: %d accounts, %d deposits, %d withdrawals "
            "(%d rejected) in %.2fs",
            len(self.ledger),
            self._counts["deposits"],
            self._counts["withdrawals"],
            self._counts["rejected_withdrawals"],
            (datetime.now() - started).total_seconds(),
        )
        return self.ledger

    def _apply_activity(self, account_number: int, scale: Decimal) -> None:
        rng = self._account_gen.rng
        # up to 1.5x the opening deposit so some withdrawals overdraw
        amount = self._account_gen.random_amount(scale * 3 / 2)
        if rng.random() < self.withdrawal_rate:
            result = self.ledger.withdraw(account_number, amount)
            if result.ok:
                self._counts["withdrawals"] += 1
            elif result.kind is ErrorKind.INSUFFICIENT_FUNDS:
                self._counts["rejected_withdrawals"] += 1
            else:
                result.unwrap()
        else:
            self.ledger.deposit(account_number, amount).unwrap()
            self._counts["deposits"] += 1

    def _first_free_number(self) -> int:
        return max(self.ledger.accounts, default=1000) + 1

    def get_summary(self) -> dict[str, Any]:
        """Get summary statistics for the generated data.

        Returns
        -------
        dict[str, Any]
            Ledger summary merged with activity counts.
        """
        return {**self.ledger.summary(), **self._counts}
