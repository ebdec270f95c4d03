"""Chain of responsibility lesson: ATM note dispensing."""

from .atm import (
    Atm,
    DispenseResult,
    FiveHundredHandler,
    HundredHandler,
    MoneyHandler,
    TwoHundredHandler,
    TwoThousandHandler,
    build_chain,
)

__all__ = [
    "Atm",
    "DispenseResult",
    "MoneyHandler",
    "TwoThousandHandler",
    "FiveHundredHandler",
    "TwoHundredHandler",
    "HundredHandler",
    "build_chain",
]
