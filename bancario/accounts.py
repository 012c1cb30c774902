"""
Account Management Module

Bank accounts with balance operations (deposit, withdraw, transfer) and the
checking/savings product types with their monthly fees and per-transaction
limits. All amounts are Decimal; never float.
"""

import itertools
import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from enum import Enum
from typing import Optional, Union

from .config import get_config

logger = logging.getLogger(__name__)

Amount = Union[Decimal, int, str]

MINIMUM_BALANCE = Decimal('0')
CENTS = Decimal('0.01')


def to_decimal(value: Amount) -> Decimal:
    """
    Convert an amount to Decimal, going through str for floats

    Raises:
        ValueError: If the value is not a number, or is NaN or infinite
    """
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except InvalidOperation:
            raise ValueError(f"Invalid amount: {value!r}")

    if not amount.is_finite():
        raise ValueError(f"Amount must be finite: {value!r}")
    return amount


def _operation_amount(value: Amount) -> Optional[Decimal]:
    """Amount for a balance operation, or None when it cannot be used"""
    try:
        amount = to_decimal(value)
    except ValueError:
        return None
    return amount if amount > 0 else None


class AccountStatus(Enum):
    """Account lifecycle states"""
    ACTIVE = "active"      # Normal operation
    BLOCKED = "blocked"    # Temporarily suspended
    CLOSED = "closed"      # Permanently closed


class BankAccount:
    """
    Bank account holding a balance

    Operations answer True/False; only construction raises.
    """

    _counter = itertools.count(1)

    def __init__(
        self,
        number: str,
        holder: str,
        initial_balance: Amount = MINIMUM_BALANCE,
        status: AccountStatus = AccountStatus.ACTIVE
    ):
        initial_balance = to_decimal(initial_balance)

        if not number or not number.strip():
            raise ValueError("Account number must not be blank")
        if not holder or not holder.strip():
            raise ValueError("Holder must not be blank")
        if initial_balance < MINIMUM_BALANCE:
            raise ValueError("Initial balance must be zero or positive")

        self.number = number
        self.holder = holder
        self.status = status
        self._balance = initial_balance

    @property
    def balance(self) -> Decimal:
        """Current balance"""
        return self._balance

    @property
    def is_active(self) -> bool:
        return self.status == AccountStatus.ACTIVE

    @classmethod
    def generate_account_number(cls) -> str:
        """Next sequential account number, e.g. CONTA-000001"""
        settings = get_config()
        sequence = next(BankAccount._counter)
        return f"{settings.account_number_prefix}-{sequence:0{settings.account_number_width}d}"

    @classmethod
    def create(cls, holder: str, initial_balance: Amount = MINIMUM_BALANCE) -> 'BankAccount':
        """Open an account with a freshly generated number"""
        account = cls(cls.generate_account_number(), holder, initial_balance)
        logger.info(f"Account {account.number} opened")
        return account

    def deposit(self, amount: Amount) -> bool:
        """Credit the account; refused for non-positive amounts or inactive accounts"""
        amount = _operation_amount(amount)
        if amount is None or not self.is_active:
            return False
        self._balance += amount
        return True

    def withdraw(self, amount: Amount) -> bool:
        """Debit the account; refused when the balance does not cover it"""
        amount = _operation_amount(amount)
        if amount is None or not self.is_active:
            return False
        if self._balance < amount:
            return False
        self._balance -= amount
        return True

    def transfer(self, target: 'BankAccount', amount: Amount) -> bool:
        """
        Move funds to another account

        Either both sides change or neither does.
        """
        amount = _operation_amount(amount)
        if amount is None or not target.is_active:
            return False
        if not self.withdraw(amount):
            return False
        target.deposit(amount)
        logger.info(f"Transferred {amount} from {self.number} to {target.number}")
        return True

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(number={self.number!r}, holder={self.holder!r}, "
                f"balance={self._balance}, status={self.status.value})")


class CheckingAccount(BankAccount):
    """Checking account: flat maintenance fee, higher transaction limit"""

    maintenance_fee = Decimal('10.00')
    transaction_limit = Decimal('5000.00')

    def can_transact(self, amount: Amount) -> bool:
        try:
            return to_decimal(amount) <= self.transaction_limit
        except ValueError:
            return False

    def monthly_fee(self) -> Decimal:
        return self.maintenance_fee


class SavingsAccount(BankAccount):
    """Savings account: no maintenance fee, fee of 0.5% of the balance"""

    maintenance_fee = Decimal('0.00')
    transaction_limit = Decimal('2000.00')
    balance_fee_rate = Decimal('0.005')

    def can_transact(self, amount: Amount) -> bool:
        try:
            return to_decimal(amount) <= self.transaction_limit
        except ValueError:
            return False

    def monthly_fee(self) -> Decimal:
        return (self.balance * self.balance_fee_rate).quantize(CENTS, rounding=ROUND_HALF_UP)
