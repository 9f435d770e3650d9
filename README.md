# fungeplus

Building blocks for interpreting Funge programs (Unefunge, Befunge, Trefunge
and beyond): unbounded sparse Funge-space, N-dimensional vectors, Funge stacks
and the stack of stacks, instruction pointers with torus or Lahey-space
wrapping, a set of fingerprint extensions and an interactive debugger.

## Installing

```
pip install .
```

The package has no dependencies outside the standard library.

## What is in the package

| Module | Contents |
| --- | --- |
| `fungeplus.vector` | `Vector`, an immutable integer vector whose unset components read as zero, and `VectorRange`, which iterates every vector in the box between two corners. |
| `fungeplus.config` | `FungeConfig` with the run's settings, the enums `Topology`, `StringMode`, `CellMode`, `ThreadMode`, `EnvFlags`, `OperatingParadigm`, and `FungeConfig.apply_standard("be98")` and friends (`une93`, `une98`, `be93`, `be98`, `tre98`). |
| `fungeplus.stack` | `Stack` (pops 0 when empty, honours queue and invert modes, 64-bit cells), `StackStack`, and `push_vector`, `pop_vector`, `push_string`, `pop_string`. |
| `fungeplus.field` | `Field`, the sparse Funge-space, with `load`, `parse`, `parse_beq`, `dump`, `get`, `set`, `min`, `max`; `FileFormat.BF` and `FileFormat.BEQ`. |
| `fungeplus.pointer` | `InstructionPointer`: position, delta, storage offset, turning, reflecting and `next()` with wrapping. |
| `fungeplus.instructions` | Abstract bases `State`, `Strategy` and `Fingerprint`. |
| `fungeplus.fingerprints` | The fingerprints `BASE`, `BITW`, `BOOL`, `CPLI`, `HRTI`, `MODE`, `MODU`, `NFUN`, `NULL`, `ORTH`, `PERL`, `REFC`, `ROMA`, `TERM`, `TOYS`, and `FingerprintStrategy`, which loads and unloads them by id. |
| `fungeplus.debugger` | `FungeDebugger`, a line-oriented debugger for instruction pointers. |

## Examples

Loading a program into Funge-space and walking a pointer over it:

```python
import io
from fungeplus.config import FungeConfig
from fungeplus.field import Field
from fungeplus.pointer import InstructionPointer
from fungeplus.vector import Vector

config = FungeConfig()
field = Field(config)
field.load(io.StringIO("12+\n@"))   # fixes config.dimensions from the source's shape
ip = InstructionPointer(field, config)

chr(ip.current())       # '1'
ip.next()
ip.pos == Vector(1)     # True
field.get(Vector(0, 1)) # ord('@')
```

Loading fingerprints by name and running their instructions:

```python
from fungeplus.fingerprints.registry import FingerprintStrategy, fingerprint_id
from fungeplus.stack import StackStack

stack = StackStack(config)
fingerprints = FingerprintStrategy(field, ip, stack, None, config)
fingerprints.load(fingerprint_id("ROMA"))
fingerprints.execute(ord("M"))
stack.top().pop()       # 1000
fingerprints.unload(fingerprint_id("ROMA"))
```

Fingerprints listed in `config.fingerprints` are loaded when a
`FingerprintStrategy` is created. Loading stacks meanings: the most recently
loaded fingerprint handles an instruction, and unloading restores the one
beneath it.

`PERL` runs an external `perl` and is refused (the pointer reflects) when
`config.execute` is false.

## The debugger

```python
from fungeplus.debugger import FungeDebugger

debugger = FungeDebugger(config)          # reads stdin, writes stdout by default
field.on_write = debugger.watch_write     # enables watchpoints
debugger.debug(field, stack, ip)          # call before each instruction
```

At the `(defunge)` prompt it understands `step`/`s`, `run`, `break (x, y)`/`bp`,
`watch (x, y)`/`wp`, `list [n]`/`l`, `get (x, y)`/`g`, `peek [n [s]]`/`p`,
`delta`, `storage`, `position`/`pos`, `backtrace`/`bt`, `thread [id]`/`t`,
`setdelta (dx, dy)`, `setpos (x, y)`, `read (x, y)` and `quit`/`q`.

## What the package does not do

There is no `funge` command and no runner that executes a whole program: the
package has no loop that ticks instruction pointers, no scheduling of
concurrent pointers, and no implementation of the core instruction set
(digits, arithmetic, direction changes, string mode, `g`/`p`, `y`, `t`, `i`/`o`
and the rest). Only the fingerprint instructions are implemented. The pieces
above are meant for building such an interpreter on top.