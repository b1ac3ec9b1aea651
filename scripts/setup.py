#!/usr/bin/env python3
"""
Setup script for dom2figma.
Installs the package and the Chromium build Playwright drives for captures.
"""

import argparse
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def run_step(cmd, description):
    """Run one install step; returns False when it fails."""
    print(f"\n📦 {description}...")
    result = subprocess.run(cmd, capture_output=True, text=True)
    if result.returncode != 0:
        print(f"❌ {description} failed")
        if result.stderr:
            print(result.stderr)
        return False
    print(f"✅ {description} completed")
    return True


def main():
    parser = argparse.ArgumentParser(description="Install dom2figma and its browser")
    parser.add_argument("--dev", action="store_true", help="Also install the test extra")
    args = parser.parse_args()

    if sys.version_info < (3, 8):
        print("❌ Python 3.8+ required")
        sys.exit(1)

    target = f"{PROJECT_ROOT}[test]" if args.dev else str(PROJECT_ROOT)
    steps = [
        ([sys.executable, "-m", "pip", "install", "-e", target], "Installing dom2figma"),
        ([sys.executable, "-m", "playwright", "install", "chromium"], "Installing Chromium browser"),
    ]
    for cmd, description in steps:
        if not run_step(cmd, description):
            sys.exit(1)

    print("\n✅ Setup complete! You can now run:")
    print("   dom2figma <url-or-file> --selector <css> --output design.json")


if __name__ == "__main__":
    main()
