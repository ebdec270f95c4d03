"""
ATM note dispenser as a chain of responsibility.

Each handler owns one denomination. It takes as many of its own notes as
the amount and its stock allow, then forwards the remainder to the next
handler. The walk is greedy, largest denomination first, with no
backtracking: an amount that could be made from smaller notes may still
be refused if a larger note was taken first.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional

from ..config.defaults import AtmParams
from ..errors import InsufficientNotesError, InvalidAmountError
from ..logging.config import get_lesson_logger, log_handler_decision

logger = get_lesson_logger(__name__, lesson="chain")


@dataclass(frozen=True)
class DispenseResult:
    """Notes handed out for one withdrawal."""
    amount: int
    notes: dict[int, int] = field(default_factory=dict)  # denomination -> count

    def describe(self) -> list[str]:
        return [f"Dispensing {count} x {denomination} notes"
                for denomination, count in sorted(self.notes.items(), reverse=True)]


class MoneyHandler:
    """One link of the chain, responsible for a single denomination."""

    def __init__(self, denomination: int, available: int) -> None:
        if denomination <= 0:
            raise InvalidAmountError("Denomination must be positive", amount=denomination)
        if available < 0:
            raise InvalidAmountError("Note count cannot be negative", amount=available)
        self.denomination = denomination
        self.available = available
        self.next_handler: Optional["MoneyHandler"] = None

    def set_next_handler(self, handler: "MoneyHandler") -> "MoneyHandler":
        """Link the next handler and return it so chains can be built inline."""
        self.next_handler = handler
        return handler

    def dispense(self, amount: int, plan: dict[int, int]) -> int:
        """
        Record this handler's share in ``plan`` and forward the rest.

        Stock is not touched here; see ``Atm.withdraw`` for the commit step.

        Returns:
            Amount no handler in the chain could cover
        """
        notes = min(amount // self.denomination, self.available)
        remaining = amount - notes * self.denomination

        if notes > 0:
            plan[self.denomination] = notes

        log_handler_decision(logger, type(self).__name__, self.denomination, notes, remaining)

        if remaining > 0 and self.next_handler is not None:
            return self.next_handler.dispense(remaining, plan)
        return remaining

    def __iter__(self) -> Iterator["MoneyHandler"]:
        handler: Optional[MoneyHandler] = self
        while handler is not None:
            yield handler
            handler = handler.next_handler


class TwoThousandHandler(MoneyHandler):
    def __init__(self, available: int) -> None:
        super().__init__(2000, available)


class FiveHundredHandler(MoneyHandler):
    def __init__(self, available: int) -> None:
        super().__init__(500, available)


class TwoHundredHandler(MoneyHandler):
    def __init__(self, available: int) -> None:
        super().__init__(200, available)


class HundredHandler(MoneyHandler):
    def __init__(self, available: int) -> None:
        super().__init__(100, available)


HANDLER_CLASSES: dict[int, type[MoneyHandler]] = {
    2000: TwoThousandHandler,
    500: FiveHundredHandler,
    200: TwoHundredHandler,
    100: HundredHandler,
}


def build_chain(params: Optional[AtmParams] = None) -> MoneyHandler:
    """Build a chain from the configured inventory, largest denomination first."""
    params = params or AtmParams()
    if not params.notes:
        raise InvalidAmountError("ATM needs at least one denomination")

    head: Optional[MoneyHandler] = None
    tail: Optional[MoneyHandler] = None
    for denomination in sorted(params.notes, reverse=True):
        count = params.notes[denomination]
        handler_cls = HANDLER_CLASSES.get(denomination)
        handler = handler_cls(count) if handler_cls else MoneyHandler(denomination, count)

        if tail is None:
            head = handler
        else:
            tail.set_next_handler(handler)
        tail = handler

    return head  # type: ignore[return-value]


class Atm:
    """Withdrawals are all-or-nothing: stock only changes on success."""

    def __init__(self, params: Optional[AtmParams] = None) -> None:
        self.chain = build_chain(params)

    def withdraw(self, amount: int) -> DispenseResult:
        if not isinstance(amount, int) or isinstance(amount, bool) or amount <= 0:
            raise InvalidAmountError("Withdrawal amount must be a positive integer", amount=amount)

        plan: dict[int, int] = {}
        remaining = self.chain.dispense(amount, plan)

        if remaining > 0:
            logger.warning("Withdrawal refused", amount=amount, remaining=remaining)
            raise InsufficientNotesError(
                f"Remaining amount of {remaining} cannot be fulfilled (insufficient funds)",
                amount=amount,
                remaining=remaining,
                context={"plan": plan}
            )

        for handler in self.chain:
            handler.available -= plan.get(handler.denomination, 0)

        logger.info("Withdrawal dispensed", amount=amount, notes=plan)
        return DispenseResult(amount=amount, notes=plan)

    def balance(self) -> dict[int, int]:
        return {handler.denomination: handler.available for handler in self.chain}

    def total_cash(self) -> int:
        return sum(handler.denomination * handler.available for handler in self.chain)
