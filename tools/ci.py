#!/usr/bin/env python3
# Copyright 2026 sterfmt Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the sterfmt CI checks locally and print a colored summary."""

import argparse
import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: dict[str, list[str]] = {
    "format": ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"],
    "lint": ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"],
    "typecheck": ["uv", "run", "ty", "check", "src/"],
    "tests": ["uv", "run", "pytest", "--cov=sterfmt", "--cov-report=term-missing"],
    "smoke": ["uv", "run", "sterfmt", "check", "<bold, red></>"],
    "build": ["uv", "build"],
}


def main() -> int:
    """Run the selected CI steps and report results."""
    parser = argparse.ArgumentParser(description="Run sterfmt CI checks locally.")
    parser.add_argument(
        "--only",
        choices=sorted(STEPS),
        action="append",
        help="Run only the named step (repeatable)",
    )
    args = parser.parse_args()
    selected = args.only or list(STEPS)

    results = [_run_step(name, STEPS[name]) for name in selected]

    _banner("Summary")
    for name, passed, elapsed in results:
        style = chalk.green if passed else chalk.red
        label = "PASS" if passed else "FAIL"
        print(style(f"  {label}  {name} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _banner(title: str) -> None:
    rule = chalk.blue("=" * 60)
    print(f"\n{rule}\n{chalk.blue(title)}\n{rule}")


def _run_step(name: str, cmd: list[str]) -> tuple[str, bool, float]:
    _banner(name)
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=Path(__file__).parent.parent)
    return name, proc.returncode == 0, time.monotonic() - start


if __name__ == "__main__":
    sys.exit(main())
