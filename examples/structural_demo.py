#!/usr/bin/env python3
"""
Structural Patterns Demo - Decorator, Proxy, Facade, Composite

Run: python examples/structural_demo.py
"""

from lld_app.composite import File, Folder, resolve
from lld_app.decorator import GunPowerUp, HeightUp, Mario, StarPowerUp
from lld_app.errors import AccessDeniedError, PathNotFoundError
from lld_app.facade import ComputerFacade
from lld_app.logging import configure_logging
from lld_app.proxy import DataServiceProxy, DocumentProxy, ImageProxy, User


def demo_decorator() -> None:
    print("\n🍄 DECORATOR: POWER-UPS")
    print("-" * 40)

    mario = Mario()
    print(f"  Basic Character: {mario.get_abilities()}")

    mario = HeightUp(mario)
    print(f"  After HeightUp: {mario.get_abilities()}")

    mario = GunPowerUp(mario)
    print(f"  After GunPowerUp: {mario.get_abilities()}")

    mario = StarPowerUp(mario)
    print(f"  After StarPowerUp: {mario.get_abilities()}")


def demo_proxies() -> None:
    print("\n🪞 PROXIES")
    print("-" * 40)

    image = ImageProxy("sample.jpg")
    print(f"  Loaded before display: {image.is_loaded}")
    print(f"  {image.display()}")

    for user in (User("Rohan", premium_member=True), User("Mohan")):
        reader = DocumentProxy(user)
        try:
            print(f"  {reader.unlock_pdf('protected_document.pdf', 'secret123')}")
        except AccessDeniedError as e:
            print(f"  {e}")

    service = DataServiceProxy()
    print(f"  {service.get_data()} / {service.get_data()} "
          f"(remote calls: {service.real_service.calls})")


def demo_facade() -> None:
    print("\n🖥️ FACADE: COMPUTER")
    print("-" * 40)

    computer = ComputerFacade()
    for step in computer.start_computer():
        print(f"  {step}")


def demo_composite() -> None:
    print("\n📁 COMPOSITE: FILE SYSTEM")
    print("-" * 40)

    root = Folder("root")
    root.add(File("file1.txt", 1))
    root.add(File("file2.txt", 1))

    docs = root.add(Folder("docs"))
    docs.add(File("resume.pdf", 1))
    docs.add(File("notes.txt", 1))

    images = root.add(Folder("images"))
    images.add(File("photo.jpg", 1))

    for line in root.ls():
        print(f"  {line}")
    print()
    for line in root.open_all():
        print(f"  {line}")

    print(f"\n  Size of root: {root.get_size()}")
    print(f"  cd docs -> {resolve(root, 'docs').ls()}")

    try:
        resolve(root, "docs/archive")
    except PathNotFoundError as e:
        print(f"  {e}")


def main() -> None:
    configure_logging(level="WARNING")

    print("🎯 STRUCTURAL PATTERNS DEMO")
    print("=" * 40)

    demo_decorator()
    demo_proxies()
    demo_facade()
    demo_composite()


if __name__ == "__main__":
    main()
