"""Demo account generator."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator

from bank_ledger.generators.base import BaseGenerator
from bank_ledger.models import AccountType


@dataclass(frozen=True)
class AccountProfile:
    """Arguments for opening one demo account."""

    account_number: int
    name: str
    account_type: AccountType
    opening_deposit: Decimal


class AccountGenerator(BaseGenerator):
    """Generate demo account holders with plausible opening deposits.

    Account types are weighted towards savings (~65%), the rest current.
    Account numbers are unique within one generator instance.
    """

    ACCOUNT_TYPES = list(AccountType)
    ACCOUNT_TYPE_WEIGHTS = [0.65, 0.35]

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_IN",
        first_number: int = 1001,
    ) -> None:
        super().__init__(seed, locale=locale)
        self._next_number = first_number

    def generate(self) -> AccountProfile:
        """Generate a single account profile.

        Returns
        -------
        AccountProfile
            Profile with the next free account number.
        """
        account_type = self.rng.choices(
            self.ACCOUNT_TYPES, weights=self.ACCOUNT_TYPE_WEIGHTS, k=1
        )[0]
        number = self._next_number
        self._next_number += 1

        # Opening deposit between 500.00 and 50000.00, whole rupees/dollars
        opening = Decimal(self.rng.randint(500, 50_000))

        return AccountProfile(
            account_number=number,
            name=self.fake.name(),
            account_type=account_type,
            opening_deposit=opening.quantize(Decimal("0.01")),
        )

    def generate_batch(self, count: int) -> Iterator[AccountProfile]:
        """Generate ``count`` account profiles."""
        for _ in range(count):
            yield self.generate()

    def random_amount(self, upper: Decimal) -> Decimal:
        """Random two-digit amount in ``[0.01, upper]`` (``upper`` >= 0.01)."""
        upper_minor = max(1, int(upper * 100))
        return Decimal(self.rng.randint(1, upper_minor)) / 100
