import sys
from typing import Any


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def printf_err(format: str, *args: Any):
    print("chaintable: " + format.format(*args), end="", file=sys.stderr)


def format_entry(key: Any, value: Any) -> str:
    return f"{key!r}={value!r}"
