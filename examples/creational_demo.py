#!/usr/bin/env python3
"""
Creational Patterns Demo - Factory, Factory Method, Abstract Factory, Singleton

Run: python examples/creational_demo.py
"""

import threading

from lld_app.config.loader import ConfigLoader
from lld_app.factory import BurgerFactory, KingBurgerFactory, KingMealFactory, SinghBurgerFactory
from lld_app.logging import configure_logging
from lld_app.singleton import DoubleCheckedSingleton, LogBook, get_singleton


def demo_factories() -> None:
    print("\n🍔 FACTORIES")
    print("-" * 40)

    menu = ConfigLoader.create().load().menu

    simple = BurgerFactory(menu)
    burger = simple.create_burger("standard")
    print(f"  Simple factory: {burger.prepare()} ({burger.price} {burger.currency})")

    for factory in (SinghBurgerFactory(menu), KingBurgerFactory(menu)):
        _, line = factory.order_burger("premium")
        print(f"  {type(factory).__name__}: {line}")

    meal = KingMealFactory(menu).create_meal("basic", "cheese")
    for line in meal.prepare():
        print(f"  {line}")
    print(f"  Meal total: {meal.price} {menu.currency}")


def demo_singletons() -> None:
    print("\n🔒 SINGLETONS")
    print("-" * 40)

    instances = []

    def grab() -> None:
        instances.append(DoubleCheckedSingleton.get_instance())

    threads = [threading.Thread(target=grab) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    print(f"  Distinct double-checked instances: {len({id(i) for i in instances})}")
    print(f"  LogBook is shared: {LogBook() is LogBook()}")

    LogBook().write("demo started")
    print(f"  LogBook entries: {len(LogBook().entries())}")
    print(f"  Registry instance reused: {get_singleton(dict) is get_singleton(dict)}")


def main() -> None:
    configure_logging(level="WARNING")

    print("🎯 CREATIONAL PATTERNS DEMO")
    print("=" * 40)

    demo_factories()
    demo_singletons()


if __name__ == "__main__":
    main()
