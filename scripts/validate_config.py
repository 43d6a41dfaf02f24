#!/usr/bin/env python3
"""Validate a Material Search configuration file.

Usage:
    python scripts/validate_config.py search.example.yaml
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from material_search.config.loader import validate_config_file


def main() -> int:
    parser = argparse.ArgumentParser(description="Validate a Material Search configuration file")
    parser.add_argument(
        "config",
        type=Path,
        nargs="?",
        default=Path("search.example.yaml"),
        help="Configuration file to check (default: search.example.yaml)",
    )
    args = parser.parse_args()

    if not args.config.exists():
        print(f"✗ {args.config} not found")
        return 1

    return 0 if validate_config_file(args.config) else 1


if __name__ == "__main__":
    sys.exit(main())
