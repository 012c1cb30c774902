"""
Transaction Module

Transaction kinds (debit, credit, transfer) and their execution against a
bank account, plus validated transactions gated by a caller-supplied rule.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Union

from .accounts import Amount, BankAccount, to_decimal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Debit:
    """Withdrawal from the account"""
    amount: Decimal

    def __post_init__(self):
        object.__setattr__(self, 'amount', to_decimal(self.amount))


@dataclass(frozen=True)
class Credit:
    """Deposit into the account"""
    amount: Decimal

    def __post_init__(self):
        object.__setattr__(self, 'amount', to_decimal(self.amount))


@dataclass(frozen=True)
class Transfer:
    """Outgoing transfer to another account, identified by its number"""
    amount: Decimal
    target_account: str

    def __post_init__(self):
        object.__setattr__(self, 'amount', to_decimal(self.amount))


TransactionType = Union[Debit, Credit, Transfer]

# Receives (amount, current balance) and answers whether to proceed
TransactionValidator = Callable[[Decimal, Decimal], bool]


@dataclass
class Transaction:
    """A single transaction against an account"""
    id: str
    type: TransactionType
    account: BankAccount

    def execute(self) -> bool:
        """Apply the transaction; False if the account refuses it"""
        if isinstance(self.type, Debit):
            return self.account.withdraw(self.type.amount)
        if isinstance(self.type, Credit):
            return self.account.deposit(self.type.amount)
        if isinstance(self.type, Transfer):
            if not self.account.withdraw(self.type.amount):
                return False
            logger.info(
                f"Transaction {self.id}: transfer of {self.type.amount} "
                f"from {self.account.number} to {self.type.target_account}"
            )
            return True
        raise TypeError(f"Unknown transaction type: {type(self.type).__name__}")


class SecureTransaction:
    """Withdrawal that only runs when the validator approves it"""

    def __init__(self, amount: Amount, account: BankAccount, validator: TransactionValidator):
        self.amount = to_decimal(amount)
        self.account = account
        self.validator = validator

    def execute(self) -> bool:
        if not self.validator(self.amount, self.account.balance):
            return False
        return self.account.withdraw(self.amount)
