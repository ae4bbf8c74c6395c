# machkit

machkit provides building blocks for machine-controller software. It is written in plain Python and needs no dependencies. Values are fixed-point integers. A `unit` is the number of decimal places, so 1234 with unit 2 means 12.34.

## Modules

- `machkit.mathutil` holds the integer helpers:
  - `deg_to_sec` and `sec_to_deg` convert between angles written as D.MMSS and arc seconds.
  - `mul_by_10` scales by a power of ten and truncates toward zero.
  - `trim` clamps to limits.
  - `round_to_precision` rounds to a multiple of a step. Ties go toward zero.
  - `trim_acc` clamps, then rounds.
- `machkit.param` holds the records:
  - `Param` is a parameter with `acronym`, `value`, limits, `precision`, `unit`, `default_value`, `unit_str` and `name`. Its `correct` method clamps and rounds a value. `increment`, `decrement`, `increment_by` and `decrement_by` step the value only when the result stays within the limits.
  - `AxisValue` is an acronym/value pair.
  - `UnionParam` links two acronyms.
- `machkit.paramlist` provides `ParamsList`, a bounded list of `Param` kept in insertion order and looked up by acronym.
  - Values stored through the list are corrected to each parameter's limits and precision.
  - `add_union(a, b)` makes `b` follow every `set_value` on `a`.
  - An unknown acronym raises `KeyError`.
  - Going over capacity raises `ParamsListFull`.
- `machkit.point` provides `Point`, a bounded, ordered set of `AxisValue` entries. It supports insert, erase, add, subtract, comparison, `largest_abs_axis` and `to_float`. Going over capacity raises `PointFull`.
- `machkit.xy` provides the `XY` (integer) and `XYFloat` plane points.
  - Both support `+` and `-`.
  - Both can be built with `from_params` or `from_point`.
  - `XYFloat.close_to` compares two points within given precisions.
- `machkit.ringqueue` provides `RingQueue`, a fixed-size circular queue of integers. It keeps one slot free, so it holds `max_size - 1` values.
  - `enqueue` returns `False` when the queue is full.
  - `dequeue` raises `IndexError` when the queue is empty.
  - `dequeue_values` reads acronym/value pairs that were stored as two integers each.
- `machkit.timeoutqueue` provides `TimeoutQueue`, a thread-safe `RingQueue`.
  - `put`, `get`, `put_many`, `get_many` and `get_values` wait for room or data.
  - The timeout is in seconds. `0` means do not wait. `WAIT_FOREVER` (`-1`) means wait without limit.
  - When the wait runs out, they raise `TimeoutError`.
- `machkit.lockedqueue` provides `LockedQueue`, which wraps a `RingQueue` and does each read or write under a lock. It never waits:
  - with too little room it raises `queue.Full`;
  - with too little data it raises `queue.Empty`;
  - while the lock is held elsewhere it raises `BlockingIOError`.
- `machkit.frames` sends and reads frames through a `LockedQueue`. A frame is `source, tag, count` followed by `count` integer pairs. The functions are:
  - `enqueue_basic_frame`;
  - `enqueue_values_frame` and `enqueue_params_frame`, each at most `MAX_FRAME_PAIRS` pairs;
  - `enqueue_string_frame`, at most `MAX_STRING_LENGTH` characters;
  - `dequeue_string_frame`.
- `machkit.arc` walks circular arcs one grid step at a time, either `Turn.CLOCKWISE` or `Turn.COUNTERCLOCKWISE`. Its functions are:
  - `implicit_function`;
  - `next_step`;
  - `step_count`, which returns 0 when the end is never reached;
  - `real_end`, which returns the grid point nearest the requested end.

## Installation

```
pip install machkit
```

To install with the test dependencies:

```
pip install "machkit[test]"
```

## Examples

```python
from machkit.param import Param
from machkit.paramlist import ParamsList

params = ParamsList(max_size=8, max_unions=10)
params.insert(Param(acronym="F", value=0, lower_limit=0, upper_limit=5000,
                    precision=10, unit=1, default_value=1000))
params.set_value("F", 1234)      # stored as 1230, rounded to the precision
print(params.real_value("F"))    # 123.0
```

```python
from machkit.arc import Turn, step_count
from machkit.xy import XY

steps = step_count(XY(0, 10), XY(0, 0), XY(10, 0), 1, 1, 0, Turn.COUNTERCLOCKWISE)
```

## What it does not do

machkit is a library only. It has no command-line program. It does not talk to motors, displays, serial ports or other devices. It does not save or load parameters to or from storage. Moving data between threads is left to the queues above.

## Running the tests

```
pytest
```