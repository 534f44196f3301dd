# aiko

A small toolkit for event-driven, loop-based applications of the kind usually
found on microcontrollers:

- `aiko.callback`: `Callback`, a zero-argument callable wrapping a function,
  plus `function_callback` and `method_callback`.
- `aiko.timing`: `TimingManager`, a millisecond clock that starts counting on
  its first use.
- `aiko.events`: `EventManager`, which runs periodic and one-shot handlers
  from a main loop; `EventHandler`, one scheduled callback; and
  `EventHandlerList`, the ordered handler list the manager uses.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Callbacks

```python
from aiko.callback import Callback, function_callback, method_callback

def ping():
    print("ping")

function_callback(ping)()                 # prints: ping

class Receiver:
    def method(self):
        print("called")

receiver = Receiver()
method_callback(receiver, Receiver.method)()   # unbound function
method_callback(receiver, "method")()          # or the method's name
```

`Callback(target)` raises `TypeError` if `target` is not callable, and so does
`method_callback` when `method` is neither callable nor a string.

## The millisecond clock

```python
from aiko.timing import TimingManager

timing = TimingManager()      # uses time.monotonic_ns by default
timing.millis()               # 0 on the first call
timing.is_set_up              # True once millis() has been called
```

`TimingManager(clock)` takes any function returning a monotonic time in
integer nanoseconds, which makes it easy to drive from a fake clock in tests.
`millis()` returns the milliseconds elapsed since its first call, as an
unsigned 32-bit count that wraps at 2**32.

## Scheduling handlers

```python
from aiko.events import EventManager

events = EventManager()

def blink():
    print("blink")

events.add_handler(blink, 1000)            # every second
events.add_handler(blink, 1000, 500)       # every second, first after 500 ms
events.add_one_shot_handler(blink, 5000)   # once, after five seconds

for now in range(0, 10_000, 100):
    events.loop(now)
```

Call `loop(time)` repeatedly with the current time in milliseconds, or call
`loop()` with no argument to read the time from the manager's
`TimingManager` (pass your own as `EventManager(timing)`). The first call
only records the starting time. On each call every handler's countdown falls
by the time that has passed since the previous call; a handler whose countdown
has reached zero fires, and then a periodic handler is rescheduled by its
period while a one-shot handler (period `0`) is removed. The elapsed time is
taken as the signed difference of two 32-bit counts, so a clock that wraps at
2**32 keeps working.

`add_handler` also accepts a ready-made `EventHandler(callback, period,
countdown)` and returns the handler it registered. Adding a function without
a period raises `TypeError`; a negative period or delay raises `ValueError`.
`remove_handler(handler)` unregisters a handler, and `reset()` drops every
handler and restarts timing on the next loop. The registered handlers are
available as `events.handlers`.

## The handler list

`EventHandlerList` keeps handlers in the order they were added and has a
cursor: `reset_iterator()` rewinds it and `next()` returns the next handler,
or `None` at the end. Removing a handler (`remove`) while iterating keeps the
cursor on the handler that followed it, and a handler added with `add` after
the cursor has run off the end is returned by the next call to `next()`.
`remove` raises `ValueError` for a handler that is not in the list, and
`flush()` empties it. The list also supports `len()`, iteration and `in`.

## What this package does not do

It only schedules and times work. It does not parse incoming commands or
messages, keep a node name, talk to a serial port or any other device, and it
installs no command-line program: the functions your handlers call, and the
loop that calls `EventManager.loop`, are yours to write.

## Running the tests

```
pip install .[test]
pytest
```