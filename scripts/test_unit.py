#!/usr/bin/env python3
"""Run the desktop-actions test suites with rich status output.

Usage: scripts/test_unit.py [unit|integration|all] [pytest args...]
"""

import subprocess
import sys
from pathlib import Path

from rich.console import Console

console = Console()

SUITES = {
    "unit": ["tests/unit"],
    "integration": ["tests/integration"],
    "all": ["tests"],
}


def main():
    args = sys.argv[1:]
    suite = args.pop(0) if args and args[0] in SUITES else "unit"

    # Resolve pytest relative to the python interpreter being used
    bin_dir = Path(sys.executable).parent
    pytest_cmd = str(bin_dir / "pytest") if (bin_dir / "pytest").exists() else "pytest"

    cmd = [pytest_cmd, *SUITES[suite], "--timeout=60", *args]
    console.print(f"[bold blue]Running {suite} tests ({' '.join(SUITES[suite])})...[/bold blue]")

    try:
        result = subprocess.run(cmd, check=False)
    except OSError as e:
        console.print(f"[bold red]Error running {suite} tests: {e}[/bold red]")
        sys.exit(1)

    if result.returncode != 0:
        console.print(f"[bold red]{suite.capitalize()} tests FAILED[/bold red]")
        sys.exit(result.returncode)
    console.print(f"[bold green]{suite.capitalize()} tests PASSED[/bold green]")


if __name__ == "__main__":
    main()
