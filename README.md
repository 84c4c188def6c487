# bytelists

This package has two small utilities. It depends on nothing outside the standard library.

## Clamped integer conversion

`bytelists.converter.convert(value, native_size, output_size, signed)` works in four steps:

1. It reads `value` as an integer of `native_size` bytes (1, 2, 4 or 8). The value is truncated to that width first, like reading the low bytes of a two's-complement integer of that size.
2. It treats the result as signed or unsigned, according to `signed`.
3. It clamps the result to the range of an `output_size`-byte integer (1 to 8).
4. It returns the clamped value as big-endian `bytes`.

```python
from bytelists.converter import convert, clamp, ConversionError

convert(-1, 4, 3, True)             # b'\xff\xff\xff'
convert(9_000_000, 4, 3, True)      # b'\x7f\xff\xff'  (clamped to the 3-byte maximum)
convert(-1234567890, 8, 5, True) == bytes([0xFF, 0xB6, 0x69, 0xFD, 0x2E])  # True

clamp(300, 1, False)                # 255
clamp(-5, 2, False)                 # 0
```

An unsupported native size or output size raises `ConversionError`, which is a subclass of `ValueError`. A `value` that is not an `int` raises `TypeError`; a `bool` counts as not an `int` here.

```python
convert(0, 5, 3, True)              # ConversionError: native size must be one of (1, 2, 4, 8)
convert(0, 4, 9, True)              # ConversionError: output size must be between 1 and 8
```

## Thread-safe list

`bytelists.linked_list.ThreadSafeList` is an ordered collection. A single re-entrant lock guards every operation on it, so one instance can be shared between threads.

```python
from bytelists.linked_list import ThreadSafeList

items = ThreadSafeList([1, 2, 3, 4, 5, 6])
items.insert(5, 3)                  # 3 now sits at position 5
items[5]                            # 3
len(items)                          # 7

items.iterate(lambda data, index: print(index, data))   # runs while holding the lock
items.transform(lambda data: data + 1)       # replaces each item with the result
items.remove_first(lambda data: data == 4)   # True: the first match is removed
items.any_match(lambda data: data > 100)     # False
del items[0]
list(items)                         # iterates over a snapshot taken under the lock
items.clear()
```

Indexing works only with non-negative positions. An index outside the list raises `IndexError`, and `insert` also accepts `len(items)`, which appends. An index that is not an `int` raises `TypeError`. Slicing is not supported.

## Installing and testing

```
pip install .[test]
pytest
```