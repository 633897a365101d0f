"""Treasury - the city's spendable balance."""
from __future__ import annotations


class Treasury:
    def __init__(self, balance: int = 0) -> None:
        if balance < 0:
            raise ValueError(f"balance must be >= 0, got {balance}")
        self._balance = balance

    @property
    def balance(self) -> int:
        return self._balance

    def can_afford(self, amount: int) -> bool:
        return self._balance >= amount

    def debit(self, amount: int) -> bool:
        """Deduct *amount* if the balance covers it. Returns False otherwise."""
        if amount < 0:
            raise ValueError(f"amount must be >= 0, got {amount}")
        if not self.can_afford(amount):
            return False
        self._balance -= amount
        return True

    def credit(self, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"amount must be >= 0, got {amount}")
        self._balance += amount

    def __repr__(self) -> str:
        return f"Treasury({self._balance})"
