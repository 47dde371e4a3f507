"""
Lint script runner.

Runs flake8 and pylint over the compiler package and the ``vid`` entry
point. Linter settings live in ``pyproject.toml`` (pylint) and are passed on
the command line here (flake8, which does not read ``pyproject.toml``).

Usage:
    python scripts/lint.py            # both linters
    python scripts/lint.py pylint     # one linter
"""
import subprocess
import sys

TARGETS = ["./vidlang", "./vid.py"]
MAX_LINE_LENGTH = "120"

LINTERS = {
    "flake8": ["flake8", *TARGETS, "--exclude=vidlang/tests", f"--max-line-length={MAX_LINE_LENGTH}"],
    "pylint": ["pylint", *TARGETS],
}


def main(argv=None) -> int:
    """
    Lint the vidlang project.

    Parameters:
        argv (list[str] | None): Linter names to run; all of them when empty.

    Returns:
        int: 0 when every linter passed, otherwise the first failing status.
    """
    names = (sys.argv[1:] if argv is None else argv) or list(LINTERS)
    unknown = [name for name in names if name not in LINTERS]
    if unknown:
        print(f"Unknown linter: {', '.join(unknown)}", file=sys.stderr)
        return 2

    status = 0
    for name in names:
        print(f"Running {name}...")
        code = subprocess.run(LINTERS[name], check=False).returncode
        if code and not status:
            status = code
    return status


if __name__ == "__main__":
    sys.exit(main())
