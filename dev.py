"""Development script to run checks (linting, tests) and the link checker."""

import argparse
import subprocess
import sys


def run_command(command: list[str], step_name: str) -> None:
    """Run a shell command as a step in the development process."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\n❌ Failed: {step_name}")
        sys.exit(1)


def main() -> None:
    """Run the development checks and optionally the link checker."""
    parser = argparse.ArgumentParser(
        description="Run development checks and the link checker."
    )
    parser.add_argument(
        "--ci", action="store_true", help="Run checks and tests only, without fixes"
    )
    parser.add_argument(
        "--docs",
        help="Content root to check with doclinks after the tests pass",
    )
    args = parser.parse_args()

    if not args.ci:
        run_command(["uv", "run", "ruff", "format"], "Ruff Formatting")
        run_command(
            ["uv", "run", "ruff", "check", "--fix", "--unsafe-fixes"],
            "Ruff Linting & Fixes",
        )

    run_command(["uv", "run", "ruff", "check"], "Ruff Lint Gate")
    run_command(
        ["uv", "run", "pytest", "--cov=doclinks", "--cov-report=term-missing"],
        "Tests",
    )

    if args.docs:
        run_command(
            ["uv", "run", "python", "-m", "doclinks.check_links", args.docs],
            "Link Check",
        )

    print("\n✅ All development checks passed successfully.")


if __name__ == "__main__":
    main()
