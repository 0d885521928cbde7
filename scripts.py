"""Development commands for ls-option.

Usage: python scripts.py <command>
"""

import subprocess
import sys

COMMANDS = {
    "run_tests": ["pytest"],
    "run_cli_tests": ["pytest", "--run-cli-tests", "tests/integration", "tests/cli"],
    "run_doctests": ["pytest", "--doctest-modules", "src/ls_option"],
    "run_lint": ["flake8", "--max-line-length", "120", "src", "tests"],
    "run_typecheck": ["mypy", "src/ls_option"],
    "run_format": ["black", "src", "tests", "scripts.py"],
    "run_coverage": ["pytest", "--run-cli-tests", "--cov=ls_option", "--cov-report=term-missing", "tests/"],
}


def main(argv):
    if len(argv) != 2 or argv[1] not in COMMANDS:
        print(f"usage: python scripts.py {{{','.join(COMMANDS)}}}", file=sys.stderr)
        return 2
    return subprocess.run(COMMANDS[argv[1]]).returncode


if __name__ == "__main__":
    sys.exit(main(sys.argv))
