# ycsbkit

Small, dependency-free building blocks for key-value store benchmark
harnesses.

## What is inside

- `ycsbkit.sds`: `DynamicString` is a binary-safe byte string that keeps
  its length and its spare capacity apart. It supports appending (`cat`),
  overwriting (`copy_from`), trimming (`trim`), inclusive ranges with
  negative indexes (`range`), case mapping (`lower`, `upper`), byte mapping
  (`map_chars`) and comparison (`compare`, `==`, `<`). Capacity is managed
  with `make_room_for`, `incr_len`, `grow_zero`, `remove_free_space`,
  `avail` and `alloc_size`. Growth follows a fixed preallocation rule. Below
  1 MiB the new size is doubled. At 1 MiB and above, 1 MiB is added.
- `ycsbkit.sdsutil`: helpers for byte strings.
  - Integer text with range checks: `ll_to_str`, `ull_to_str` and
    `from_long_long`.
  - `cat_fmt`, a compact formatter that takes `%s`, `%S`, `%i`, `%I`,
    `%u`, `%U`, `%T` and `%%`.
  - `cat_repr`, which gives a quoted and escaped form of its input.
  - `split_len`, which splits on a separator of one or more bytes.
  - `split_args`, which parses a line into arguments the way a REPL does.
    It reads back the output of `cat_repr`.
  - `join`.
- `ycsbkit.hashstring`: `sdbm_hash` computes the 64-bit SDBM hash.
  `HashString` is an immutable key that computes that hash once, when it is
  created. Two keys are equal when both their hash and their bytes match.
- `ycsbkit.latency`: tools for tail-latency reports.
  - `merge_descending` merges the latency lists of several worker threads.
    Each list must already be sorted largest first.
  - `percentile_at` and `summarize` pick out the max, min and middle entry
    and the 90%, 99%, 99.9% and 99.99% tails. `summarize` returns them as a
    `LatencySummary`.
  - `format_second_report`, `format_error_line` and `format_total_report`
    turn a summary into report lines.

## What it does not do

- It has no string-keyed table or other key-value storage.
- It has no database backends.
- It has no command that loads records or runs a workload.

It provides the strings, keys and latency reporting that such a harness
would be built on.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from ycsbkit.sds import DynamicString
from ycsbkit.sdsutil import split_args
from ycsbkit.hashstring import HashString
from ycsbkit.latency import merge_descending, summarize, format_total_report

s = DynamicString(b"xxciaoyyy")
s.trim(b"xy")
assert bytes(s) == b"ciao"

assert split_args('set key "hello world"') == [b"set", b"key", b"hello world"]

assert HashString("user1") == HashString(b"user1")

merged = merge_descending([[5.0, 2.0], [4.0, 1.0]])
print(format_total_report(summarize(merged)))
```