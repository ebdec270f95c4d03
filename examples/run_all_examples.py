#!/usr/bin/env python3
"""
Run every lesson demo in turn and report which ones failed.

Run: python examples/run_all_examples.py
"""

import importlib.util
import sys
import time
import traceback
from pathlib import Path

DEMOS = [
    ("Creational patterns", "creational_demo.py"),
    ("Structural patterns", "structural_demo.py"),
    ("Behavioral patterns", "behavioral_demo.py"),
    ("Application sketches", "application_demo.py"),
]


def run_demo(title: str, path: Path) -> bool:
    print(f"\n{'=' * 60}\n▶ {title} ({path.name})\n{'=' * 60}")

    spec = importlib.util.spec_from_file_location(path.stem, path)
    module = importlib.util.module_from_spec(spec)
    started = time.perf_counter()
    try:
        spec.loader.exec_module(module)
        module.main()
    except Exception:
        traceback.print_exc()
        print(f"\n❌ {title} failed")
        return False

    print(f"\n✅ {title} finished in {time.perf_counter() - started:.2f}s")
    return True


def main() -> int:
    demos_dir = Path(__file__).parent
    failed = [title for title, filename in DEMOS
              if not run_demo(title, demos_dir / filename)]

    print(f"\n{len(DEMOS) - len(failed)}/{len(DEMOS)} demos passed")
    for title in failed:
        print(f"  - {title}")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
