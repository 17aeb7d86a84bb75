#!/usr/bin/env python
"""Local quality checks and tests runner with auto-fix capabilities.

Runs the formatting, import-order, lint, type and test checks used for the
lifesim package, with optional automatic fixes for formatting and imports.

Usage:
    python run_quality_checks.py                    # Run all checks (no fixes)
    python run_quality_checks.py --fix              # Run all checks + auto fixes
    python run_quality_checks.py --fix --skip lint  # Fix but skip linting
    python run_quality_checks.py --verbose          # Detailed output
"""

import argparse
import subprocess
import sys
from typing import Callable, Optional

# Directories to check
PACKAGE_DIR = "lifesim"
TESTS_DIR = "tests"
DIRS_TO_CHECK = [PACKAGE_DIR, TESTS_DIR, "examples"]


class CheckRunner:
    """Runs quality checks and tests with optional auto-fixes."""

    def __init__(
        self,
        fix: bool = False,
        verbose: bool = False,
        skip_checks: Optional[list[str]] = None,
    ):
        self.fix = fix
        self.verbose = verbose
        self.skip_checks = [name.lower() for name in skip_checks or []]
        self.failed_checks: list[str] = []
        self.passed_checks: list[str] = []

    def run_command(
        self,
        cmd: list[str],
        name: str,
        show_output: bool = False,
    ) -> bool:
        """Run a shell command and return success status.

        Args:
            cmd: Command and arguments as list
            name: Friendly name for the check
            show_output: Whether to stream command output

        Returns:
            True if command succeeded, False otherwise
        """
        print(f"\n{'=' * 70}")
        print(f"> Running: {name}")
        print(f"{'=' * 70}")

        try:
            if self.verbose or show_output:
                result = subprocess.run(cmd, check=False)
            else:
                result = subprocess.run(
                    cmd,
                    check=False,
                    capture_output=True,
                    text=True,
                )
                if result.returncode != 0:
                    print(result.stdout)
                    print(result.stderr)
        except FileNotFoundError as e:
            print(f"[FAIL] Error: {e}")
            print("   Make sure all tools are installed: pip install -e .[dev]")
            self.failed_checks.append(name)
            return False

        if result.returncode == 0:
            print(f"[OK] {name} passed!")
            self.passed_checks.append(name)
            return True

        print(f"[FAIL] {name} failed!")
        self.failed_checks.append(name)
        return False

    def check_black_formatting(self) -> bool:
        """Check and optionally fix code formatting with Black."""
        if self.fix:
            return self.run_command(
                ["black", *DIRS_TO_CHECK], "Black Formatting (auto-fix enabled)"
            )
        return self.run_command(
            ["black", "--check", *DIRS_TO_CHECK], "Black Formatting Check"
        )

    def check_isort_imports(self) -> bool:
        """Check and optionally fix import ordering with isort."""
        if self.fix:
            return self.run_command(
                ["isort", *DIRS_TO_CHECK], "isort Import Ordering (auto-fix enabled)"
            )
        return self.run_command(
            ["isort", "--check-only", *DIRS_TO_CHECK], "isort Import Ordering Check"
        )

    def check_pylint(self) -> bool:
        return self.run_command(["pylint", PACKAGE_DIR], "Pylint Code Quality Check")

    def check_mypy(self) -> bool:
        return self.run_command(["mypy", PACKAGE_DIR], "Mypy Type Checking")

    def run_tests(self) -> bool:
        """Run pytest with coverage."""
        return self.run_command(
            [
                "pytest",
                f"--cov={PACKAGE_DIR}",
                "--cov-report=term-missing",
                TESTS_DIR,
            ],
            "Pytest + Coverage",
            show_output=True,
        )

    def print_summary(self) -> None:
        print(f"\n{'=' * 70}")
        print("SUMMARY")
        print(f"{'=' * 70}")

        if self.passed_checks:
            print(f"\nPassed ({len(self.passed_checks)}):")
            for check in self.passed_checks:
                print(f"   - {check}")

        if self.failed_checks:
            print(f"\nFailed ({len(self.failed_checks)}):")
            for check in self.failed_checks:
                print(f"   - {check}")
        else:
            print("\nAll checks passed!")

        print(f"\n{'=' * 70}")

    def run_all(self) -> int:
        """Run all checks in order.

        Returns:
            0 if all checks passed, non-zero otherwise
        """
        fix_text = "with auto-fixes" if self.fix else "without fixes"
        print(f"\nStarting quality checks {fix_text}...\n")

        checks: list[tuple[str, Callable[[], bool]]] = [
            ("formatting", self.check_black_formatting),
            ("imports", self.check_isort_imports),
            ("lint", self.check_pylint),
            ("type", self.check_mypy),
            ("tests", self.run_tests),
        ]

        for check_name, check_func in checks:
            if check_name in self.skip_checks:
                print(f"Skipping {check_name}")
                continue
            check_func()

        self.print_summary()

        return 0 if not self.failed_checks else 1


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Run local quality checks and tests with optional auto-fixes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_quality_checks.py              # Run all checks
  python run_quality_checks.py --fix        # Run + auto-fix formatting/imports
  python run_quality_checks.py --skip lint type
        """,
    )
    parser.add_argument(
        "--fix",
        "--apply",
        action="store_true",
        dest="fix",
        help="Automatically fix issues (formatting, imports) where possible",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show detailed output from all commands",
    )
    parser.add_argument(
        "--skip",
        nargs="+",
        default=[],
        help="Skip specific checks (formatting, imports, lint, type, tests)",
    )

    args = parser.parse_args()

    runner = CheckRunner(fix=args.fix, verbose=args.verbose, skip_checks=args.skip)
    return runner.run_all()


if __name__ == "__main__":
    sys.exit(main())
