import subprocess
import sys


def _run_poe_task(task: str) -> None:
    # Extra arguments are forwarded, e.g. `test -k parser`.
    sys.exit(subprocess.run(["poe", task, *sys.argv[1:]]).returncode)


def check() -> None:
    _run_poe_task("check")


def fix() -> None:
    _run_poe_task("fix")


def test() -> None:
    _run_poe_task("test")
