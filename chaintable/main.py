import sys

from .debug import dump_table
from .shared import printf, printf_err
from .table import (
    DEFAULT_CAPACITY,
    InvalidCapacity,
    NotFound,
    Table,
    set_debug_trace_table,
)


USAGE = "Usage: chaintable-demo [--dump] [--trace] [capacity]\n"


def run_demo(capacity: int = DEFAULT_CAPACITY) -> Table:
    table = Table(capacity)
    table.insert("one", 1)
    table.insert("two", 2)
    table.insert("three", 3)

    value = table.get("two")
    if not isinstance(value, NotFound):
        printf("Value for key 'two': {0}\n", value)

    removed = table.remove("one")
    if not isinstance(removed, NotFound):
        printf("Removed value for key 'one': {0}\n", removed)

    return table


def parse_capacity(arg: str) -> int:
    try:
        return int(arg)
    except ValueError:
        raise InvalidCapacity(arg) from None


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    dump = "--dump" in args
    trace = "--trace" in args
    rest = [a for a in args if a not in ("--dump", "--trace")]

    if len(rest) > 1 or any(a.startswith("-") and not a[1:].isdigit() for a in rest):
        printf(USAGE)
        return 64

    set_debug_trace_table(trace)
    try:
        capacity = parse_capacity(rest[0]) if rest else DEFAULT_CAPACITY
        table = run_demo(capacity)
    except InvalidCapacity as e:
        printf_err("{0:s}\n", str(e))
        return 65
    finally:
        set_debug_trace_table(False)

    if dump:
        dump_table(table, "demo")
    return 0


if __name__ == "__main__":
    sys.exit(main())
