#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from capital_tracker.config.loader import ConfigLoader
from capital_tracker.config.validation import ConfigValidator
from capital_tracker.errors import ConfigurationError


def main() -> bool:
    """Validate settings.yaml merged over the defaults."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating {loader.config_dir / 'settings.yaml'}...")

    try:
        config = loader.merge_config()
    except (ConfigurationError, OSError) as e:
        print(f"❌ Cannot read settings: {e}")
        return False

    errors = ConfigValidator.validate_config(config)
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value!r})")
        return False

    print("✅ Configuration is valid")
    for section, values in config.items():
        print(f"  {section}: {values}")
    return True


if __name__ == "__main__":
    sys.exit(0 if main() else 1)
