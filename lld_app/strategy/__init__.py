"""Strategy pattern lessons: robots, payment methods and sorting."""

from .payment import (
    CartItem,
    CreditCardPayment,
    PayPalPayment,
    PaymentStrategy,
    ShoppingCart,
    UpiPayment,
)
from .robot import (
    CompanionRobot,
    NoFly,
    NormalFly,
    NormalTalk,
    NormalWalk,
    NoTalk,
    NoWalk,
    Robot,
    WorkerRobot,
)
from .sorting import BubbleSort, MergeSort, QuickSort, Sorter, SortStrategy

__all__ = [
    "Robot",
    "CompanionRobot",
    "WorkerRobot",
    "NormalWalk",
    "NoWalk",
    "NormalTalk",
    "NoTalk",
    "NormalFly",
    "NoFly",
    "PaymentStrategy",
    "CreditCardPayment",
    "UpiPayment",
    "PayPalPayment",
    "ShoppingCart",
    "CartItem",
    "SortStrategy",
    "BubbleSort",
    "MergeSort",
    "QuickSort",
    "Sorter",
]
