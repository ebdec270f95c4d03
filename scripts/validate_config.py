#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import Any, List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from lld_app.config.loader import ConfigLoader
from lld_app.config.validation import ConfigValidator, ValidationError


def validate_overrides(loader: ConfigLoader, overrides: dict[str, Any]) -> List[ValidationError]:
    """Validate configuration after applying call-site overrides."""
    config = loader.merge_config(overrides)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating lesson configuration in {loader.config_dir}...")

    all_valid = True

    errors = validate_overrides(loader, {})
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        all_valid = False
    else:
        print("✅ lessons.yaml merges cleanly over the defaults")

    # Overrides that must be rejected
    print(f"\n📋 Checking that bad overrides are caught...")
    bad_overrides = [
        {"atm": {"notes": {0: 5}}},
        {"atm": {"notes": {500: -1}}},
        {"payment": {"max_retries": -2}},
        {"menu": {"prices": {"basic_burger": "free"}}},
    ]
    for overrides in bad_overrides:
        errors = validate_overrides(loader, overrides)
        if errors:
            print(f"✅ Rejected {overrides}: {errors[0].message}")
        else:
            print(f"❌ Accepted invalid overrides {overrides}")
            all_valid = False

    if all_valid:
        print(f"\n🎉 Configuration is valid")
        return 0

    print(f"\n💥 Configuration has problems")
    return 1


if __name__ == "__main__":
    sys.exit(main())
