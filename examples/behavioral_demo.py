#!/usr/bin/env python3
"""
Behavioral Patterns Demo - Strategy, Command, Chain of Responsibility

This script walks through the behavioural lessons:
- Robots whose walk/talk/fly behaviours are swapped at runtime
- Cart checkout with interchangeable payment strategies
- A remote control whose buttons toggle commands, with undo
- An ATM dispensing notes through a chain of handlers

Run: python examples/behavioral_demo.py
"""

from lld_app.chain import Atm
from lld_app.command import Fan, FanCommand, Light, LightCommand, RemoteController
from lld_app.config.loader import ConfigLoader
from lld_app.errors import CommandNotAssignedError, InsufficientNotesError
from lld_app.logging import configure_logging
from lld_app.strategy import (
    CompanionRobot,
    CreditCardPayment,
    NoFly,
    NormalFly,
    NormalTalk,
    NormalWalk,
    NoTalk,
    NoWalk,
    QuickSort,
    ShoppingCart,
    Sorter,
    UpiPayment,
    WorkerRobot,
)


def demo_robots() -> None:
    """Show behaviour delegation and runtime swapping."""
    print("\n🤖 STRATEGY: ROBOTS")
    print("-" * 40)

    companion = CompanionRobot(NormalWalk(), NormalTalk(), NoFly())
    for line in companion.describe():
        print(f"  {line}")

    print()
    worker = WorkerRobot(NoWalk(), NoTalk(), NormalFly())
    for line in worker.describe():
        print(f"  {line}")

    print("\n  Worker gets legs fitted...")
    worker.set_walk_behavior(NormalWalk())
    print(f"  {worker.walk()}")


def demo_checkout() -> None:
    """Pay the same cart two different ways."""
    print("\n💳 STRATEGY: PAYMENTS")
    print("-" * 40)

    cart = ShoppingCart(CreditCardPayment("4111111111111111", "Alice"))
    cart.add_item("Keyboard", 1500.0)
    cart.add_item("Mouse", 500.0, quantity=2)
    print(f"  {cart.checkout()}")

    cart.add_item("Monitor", 9000.0)
    cart.set_payment_strategy(UpiPayment("alice@upi"))
    print(f"  {cart.checkout()}")

    sorter = Sorter()
    print(f"  Merge sorted: {sorter.sort([5, 3, 9, 1])}")
    sorter.set_strategy(QuickSort())
    print(f"  Quick sorted: {sorter.sort([8, 2, 7, 4])}")


def demo_remote() -> None:
    """Toggle buttons and undo."""
    print("\n🎛️ COMMAND: REMOTE CONTROL")
    print("-" * 40)

    remote = RemoteController(num_buttons=4)
    remote.set_command(0, LightCommand(Light()))
    remote.set_command(1, FanCommand(Fan()))

    print("  --- Toggling Light Button 0 ---")
    print(f"  {remote.press_button(0)}")
    print(f"  {remote.press_button(0)}")

    print("  --- Toggling Fan Button 1 ---")
    print(f"  {remote.press_button(1)}")
    print(f"  Undo last: {remote.undo_last()}")

    print("  --- Pressing Unassigned Button 2 ---")
    try:
        remote.press_button(2)
    except CommandNotAssignedError as e:
        print(f"  {e}")


def demo_atm() -> None:
    """Dispense notes and show a refused withdrawal."""
    print("\n🏧 CHAIN OF RESPONSIBILITY: ATM")
    print("-" * 40)

    atm = Atm(ConfigLoader.create().load().atm)

    for amount in (4000, 3700, 50):
        print(f"\n  Withdrawing {amount}")
        try:
            result = atm.withdraw(amount)
            for line in result.describe():
                print(f"    {line}")
        except InsufficientNotesError as e:
            print(f"    {e}")

    print(f"\n  Remaining notes: {atm.balance()}")


def main() -> None:
    configure_logging(level="WARNING")

    print("🎯 BEHAVIORAL PATTERNS DEMO")
    print("=" * 40)

    demo_robots()
    demo_checkout()
    demo_remote()
    demo_atm()


if __name__ == "__main__":
    main()
