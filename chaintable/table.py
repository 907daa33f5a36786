from dataclasses import dataclass
from typing import Any, Hashable, Iterator

from .shared import printf


DEFAULT_CAPACITY = 16

_FNV_OFFSET_BASIS = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3
_MASK_64 = 0xFFFFFFFFFFFFFFFF


_debug_trace_table = False


def set_debug_trace_table(b: bool):
    global _debug_trace_table
    _debug_trace_table = b


class InvalidCapacity(ValueError):
    def __init__(self, capacity: Any) -> None:
        super().__init__(f"Capacity must be a positive integer, got {capacity!r}")
        self.capacity = capacity


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass
class Entry:
    key: Hashable
    value: Any


Bucket = list[Entry]


def hash_key(key: Hashable) -> int:
    """64-bit FNV-1a digest of `key`.

    The digest is built from the builtin `hash()`, which already agrees for
    every pair of keys that compare equal (`"a"` and `UserString("a")`, `1`
    and `1.0`). Buffers that `hash()` refuses are first reduced to a value
    that is equal for equal buffers.
    """
    match key:
        case bytearray():
            seed = hash(bytes(key))
        case memoryview():
            seed = _buffer_hash(key)
        case _:
            seed = hash(key)

    digest = _FNV_OFFSET_BASIS
    for byte in (seed & _MASK_64).to_bytes(8, "little"):
        digest ^= byte
        digest = (digest * _FNV_PRIME) & _MASK_64
    return digest


def _buffer_hash(view: memoryview) -> int:
    # memoryview equality is element-wise, so memoryview(array("i", [97]))
    # equals b"a" and both have to land on hash(b"a")
    if view.ndim != 1:
        return hash(tuple(view.shape))

    values = [
        int(v) if isinstance(v, float) and v.is_integer() else v
        for v in view.tolist()
    ]
    try:
        return hash(bytes(values))
    except (TypeError, ValueError):
        return hash(tuple(values))


def _owned_key(key: Hashable) -> Hashable:
    # mutable buffers are copied so a stored key can't change under the table
    match key:
        case bytearray():
            return bytes(key)
        case memoryview() if key.format == "B" and key.ndim == 1:
            return key.tobytes()
        case memoryview():
            return memoryview(key.tobytes()).cast(key.format, key.shape)
        case _:
            return key


class Table:
    """Separate-chaining hash table with a fixed number of buckets.

    The bucket count is chosen at construction and never grows, so lookups
    degrade linearly once the load factor climbs well past 1.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidCapacity(capacity)
        if capacity < 1:
            raise InvalidCapacity(capacity)

        self.buckets = tuple([] for _ in range(capacity))
        self.count = 0

    def __repr__(self) -> str:
        return f"Table(capacity={self.capacity}, count={self.count})"

    @property
    def capacity(self) -> int:
        return len(self.buckets)

    @property
    def size(self) -> int:
        return self.count

    def __len__(self) -> int:
        return self.count

    def bucket_index(self, key: Hashable) -> int:
        return hash_key(key) % len(self.buckets)

    def insert(self, key: Hashable, value: Any) -> Any | NotFound:
        """Store `value` under `key`.

        Returns the value that was replaced, or NotFound() if the key is new.
        """
        key = _owned_key(key)
        bucket = self._bucket_for(key, "insert")

        index = self._find_index(bucket, key)
        if index is not None:
            previous = bucket[index].value
            bucket[index].value = value
            return previous

        bucket.append(Entry(key, value))
        self.count += 1
        return NotFound()

    def get(self, key: Hashable) -> Any | NotFound:
        bucket = self._bucket_for(key, "get")
        index = self._find_index(bucket, key)
        if index is None:
            return NotFound()
        return bucket[index].value

    def remove(self, key: Hashable) -> Any | NotFound:
        bucket = self._bucket_for(key, "remove")
        index = self._find_index(bucket, key)
        if index is None:
            return NotFound()

        entry = bucket.pop(index)
        self.count -= 1
        return entry.value

    def contains(self, key: Hashable) -> bool:
        return not isinstance(self.get(key), NotFound)

    def __contains__(self, key: Hashable) -> bool:
        return self.contains(key)

    def __getitem__(self, key: Hashable) -> Any:
        value = self.get(key)
        if isinstance(value, NotFound):
            raise KeyError(key)
        return value

    def __setitem__(self, key: Hashable, value: Any) -> None:
        self.insert(key, value)

    def __delitem__(self, key: Hashable) -> None:
        if isinstance(self.remove(key), NotFound):
            raise KeyError(key)

    def __iter__(self) -> Iterator[Hashable]:
        return self.keys()

    def items(self) -> Iterator[tuple[Hashable, Any]]:
        for bucket in self.buckets:
            for entry in bucket:
                yield entry.key, entry.value

    def keys(self) -> Iterator[Hashable]:
        for key, _ in self.items():
            yield key

    def values(self) -> Iterator[Any]:
        for _, value in self.items():
            yield value

    def add_all(self, from_t: "Table"):
        for key, value in from_t.items():
            self.insert(key, value)

    def load_factor(self) -> float:
        return self.count / len(self.buckets)

    def bucket_lengths(self) -> list[int]:
        return [len(bucket) for bucket in self.buckets]

    def free(self):
        for bucket in self.buckets:
            bucket.clear()
        self.count = 0

    def _bucket_for(self, key: Hashable, op: str) -> Bucket:
        index = self.bucket_index(key)
        bucket = self.buckets[index]
        if _debug_trace_table:
            printf("probe {0:s} bucket {1:d} len {2:d}\n", op, index, len(bucket))
        return bucket

    @staticmethod
    def _find_index(bucket: Bucket, key: Hashable) -> int | None:
        for i, entry in enumerate(bucket):
            if entry.key == key:
                return i
        return None
