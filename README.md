# synopsia

Building blocks for visual binary analysis.

## Modules

- `synopsia.entropy` scores memory for randomness. You describe the address space
  as `Segment`s. Each segment has a start and end address, the bytes loaded at its
  start, a name, a `readable` flag and a `SegmentKind`. You then collect the
  segments in a `Memory`, which refuses overlapping segments with `ValueError`.
- `EntropyCalculator` gives a block of bytes a score from 0 to 8. The score comes
  from the Jensen-Shannon divergence between the observed byte distribution and
  the uniform one.
  - 8 means uniform, random-looking data.
  - Low values mean zeros, padding or repetitive data.
  - Empty data scores 0.0.
- `EntropyCalculator` also provides these methods:
  - `analyze_range`, `analyze_segment` and `analyze_database` split memory into
    `EntropyBlock`s. The last block of a range may be shorter than the rest.
    Unreadable blocks score 0.0. `analyze_database` skips segments that are not
    readable.
  - `calculate_at_address` returns -1.0 when no bytes can be read.
  - `get_memory_regions` describes each segment as a `MemoryRegion`. Unnamed
    segments become `seg_<index>`.
  - `format_entropy` and `format_address` format values for display.
- `synopsia.color` provides the `Color` RGBA type, with ARGB and RGBA packing.
  It also provides `ColorGradient`, a multi-stop gradient. Its presets are
  `create_default`, `create_simple`, `create_grayscale` and `create_fire`.
  - `sample(t)` clamps `t` to [0, 1].
  - `sample_entropy` maps the 0 to 8 score onto the gradient.
- `synopsia.minimap` provides `MinimapData`, which holds blocks, regions and a
  `Viewport`.
  - It maps pixel rows and columns to addresses and back. Positions or addresses
    outside the view give `None`.
  - It finds the block or region holding an address.
  - `PluginConfig.validate()` clamps the block size to 16..4096 and the minimap
    width to 60..400.
- `synopsia.functions` provides `FunctionList`, an ordered list of `FunctionInfo`
  entries.
  - `get_function` returns an entry at `FUNC_BADADDR` for an index out of range.
  - `FunctionInfo.has_demangled()` tells whether the entry has a demangled name
    that differs from its plain name.
- `synopsia.registry` provides `Feature` and `FeatureRegistry`.
  - `Feature` is a base class with initialise, cleanup, show, hide and toggle
    methods, plus event hooks.
  - `FeatureRegistry` keeps features in registration order and raises
    `ValueError` on a duplicate id.
  - The registry sends events only to initialised features.
- `synopsia.plugin` provides `Plugin`, which registers and initialises features.
  - `run(arg)` toggles the feature at index `arg`. If `arg` is past the last
    feature, it toggles every feature.
  - Cursor and database-closed events are passed on to the features.
  - `close()` cleans up all features. `Plugin` works as a context manager.
- `synopsia.features` describes the built-in features with `FeatureSpec`
  (entropy minimap, function search, 3D binary map and its focused view). You can
  look them up with `spec_by_id` or `spec_by_hotkey`.

## Installation

```
pip install .
```

## Example

```python
from synopsia.color import ColorGradient
from synopsia.entropy import EntropyCalculator, Memory, Segment, SegmentKind

memory = Memory([
    Segment(0x1000, 0x1200, data=bytes(range(256)) * 2, name=".text", kind=SegmentKind.CODE),
    Segment(0x2000, 0x2100, data=bytes(256), name=".data"),
])
calculator = EntropyCalculator(memory)
gradient = ColorGradient.create_default()

for block in calculator.analyze_database(256):
    colour = gradient.sample_entropy(block.entropy)
    print(hex(block.start_ea), round(block.entropy, 2), hex(colour.to_argb()))
```

Scoring a byte string directly:

```python
from synopsia.entropy import EntropyCalculator, format_entropy

print(format_entropy(EntropyCalculator.calculate(bytes(range(256)))))  # 8.00
print(format_entropy(EntropyCalculator.calculate(b"\0" * 256)))
```

## What it does not do

This is a library only, with no command-line tool. It does not load bytes from
files or from a disassembler database; you supply them as `Segment`s. It draws no
widgets or images, and it has no 3D map data. It does not produce disassembly or
decompiled code for the functions in a `FunctionList`.

## Tests

```
pip install .[test]
pytest
```