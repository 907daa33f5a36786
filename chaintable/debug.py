from .shared import format_entry, printf
from .table import Bucket, Table


def dump_table(table: Table, name: str):
    printf("== {0:s} ==\n", name)

    for index in range(table.capacity):
        dump_bucket(table, index)

    printf(
        "count {0:d} capacity {1:d} load {2:.2f}\n",
        table.count,
        table.capacity,
        table.load_factor(),
    )


def dump_bucket(table: Table, index: int):
    printf("{0:04d} ", index)
    printf("[{0:s}]\n", format_bucket(table.buckets[index]))


def format_bucket(bucket: Bucket) -> str:
    if not bucket:
        return " "
    return " " + ", ".join(format_entry(e.key, e.value) for e in bucket) + " "
