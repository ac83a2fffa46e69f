#!/usr/bin/env python3
"""Composite quality checks: type check plus coverage-gated test runs."""

from __future__ import annotations

import argparse
import os
import subprocess
from pathlib import Path


def _run_checked(*, label: str, command: list[str], env: dict[str, str]) -> None:
    print(label, flush=True)
    completed = subprocess.run(command, env=env, check=False)
    if completed.returncode != 0:
        raise SystemExit(f"{label} failed with exit code {completed.returncode}.")


def main() -> int:
    parser = argparse.ArgumentParser(description="Run repository quality checks.")
    parser.add_argument("--skip-typecheck", action="store_true")
    parser.add_argument("--skip-scenekit-tests", action="store_true")
    parser.add_argument("--skip-showcase-tests", action="store_true")
    args = parser.parse_args()

    root = Path(__file__).resolve().parent.parent
    os.chdir(root)

    env = os.environ.copy()
    env["PYTHONPATH"] = "."

    if not args.skip_typecheck:
        _run_checked(
            label="Running mypy...",
            command=["mypy", "scenekit", "showcase"],
            env=env,
        )

    if not args.skip_scenekit_tests:
        _run_checked(
            label="Running scenekit tests with coverage gate...",
            command=[
                "pytest",
                "tests/scenekit",
                "--cov=scenekit",
                "--cov-report=term-missing",
                "--cov-fail-under=75",
            ],
            env=env,
        )
        _run_checked(
            label="Running asset loader critical coverage gate...",
            command=[
                "pytest",
                "tests/scenekit/unit/assets",
                "--cov=scenekit.assets",
                "--cov-report=term-missing",
                "--cov-fail-under=90",
            ],
            env=env,
        )

    if not args.skip_showcase_tests:
        _run_checked(
            label="Running showcase tests with coverage gate...",
            command=[
                "pytest",
                "tests/showcase",
                "--cov=showcase",
                "--cov-report=term-missing",
                "--cov-fail-under=60",
            ],
            env=env,
        )

    print("All selected checks passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
