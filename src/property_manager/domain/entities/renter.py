import math
import random
from dataclasses import dataclass
from typing import Optional, Union

MIN_STARTING_CASH = 100
MAX_STARTING_CASH = 5000


def starting_cash() -> float:
    """Random whole-dollar balance a new renter moves in with"""
    return float(random.randint(MIN_STARTING_CASH, MAX_STARTING_CASH))


@dataclass
class Renter:
    name: str
    age: int
    gender: str
    occupation: str
    cash: float
    is_evicted: bool = False

    def __post_init__(self):
        errors = []

        if not isinstance(self.name, str) or not self.name.strip():
            errors.append("Name is required")
        if self.age < 0:
            errors.append("Age cannot be negative")
        if not math.isfinite(self.cash):
            errors.append("Cash must be finite")
        elif self.cash < 0:
            errors.append("Cash cannot be negative")

        if errors:
            raise ValueError(f"Renter validation failed: {', '.join(errors)}")

    @classmethod
    def create(cls, name: str, age: Union[int, str], gender: str, occupation: str,
               cash: Optional[Union[float, str]] = None):
        if isinstance(age, bool):
            raise ValueError("age must be an integer")
        try:
            parsed_age = int(str(age).strip())
        except ValueError:
            raise ValueError(f"age must be an integer, got {age!r}")

        if cash is None:
            parsed_cash = starting_cash()
        else:
            try:
                parsed_cash = float(cash)
            except (TypeError, ValueError):
                raise ValueError(f"cash must be a number, got {cash!r}")

        return cls(
            name=name,
            age=parsed_age,
            gender=gender,
            occupation=occupation,
            cash=parsed_cash
        )

    def pay_rent(self, share: float) -> bool:
        # All or nothing: a renter short of the full share pays nothing.
        if self.cash >= share:
            self.cash -= share
            self.is_evicted = False
            return True

        self.is_evicted = True
        return False

    def evict(self):
        self.is_evicted = True
