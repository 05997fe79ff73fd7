"""Jensen-Shannon divergence scoring of byte blocks over a segmented memory image."""

from __future__ import annotations

import bisect
import enum
import math
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Optional

__all__ = [
    "BADADDR",
    "DEFAULT_BLOCK_SIZE",
    "MIN_BLOCK_SIZE",
    "MAX_BLOCK_SIZE",
    "MAX_ENTROPY",
    "HIGH_ENTROPY_THRESHOLD",
    "LOW_ENTROPY_THRESHOLD",
    "EntropyBlock",
    "MemoryRegion",
    "SegmentKind",
    "Segment",
    "Memory",
    "EntropyCalculator",
    "format_entropy",
    "format_address",
]

#: Marker for "no address".
BADADDR = (1 << 64) - 1

#: Default block size for the divergence calculation, in bytes.
DEFAULT_BLOCK_SIZE = 256
#: Smallest block size allowed in configuration.
MIN_BLOCK_SIZE = 16
#: Largest block size allowed in configuration.
MAX_BLOCK_SIZE = 4096

#: Top of the score scale (uniform, random-looking data).
MAX_ENTROPY = 8.0
#: Scores at or above this look close to uniform.
HIGH_ENTROPY_THRESHOLD = 7.0
#: Scores below this look structured or repetitive.
LOW_ENTROPY_THRESHOLD = 4.0

_UNIFORM_PROB = 1.0 / 256.0


@dataclass(frozen=True)
class EntropyBlock:
    """A block of addresses ``[start_ea, end_ea)`` with its score (0 to 8)."""

    start_ea: int
    end_ea: int
    entropy: float

    def size(self) -> int:
        """Size of the block in bytes."""
        return self.end_ea - self.start_ea

    def contains(self, addr: int) -> bool:
        """Whether ``addr`` lies inside the block."""
        return self.start_ea <= addr < self.end_ea

    def normalized(self) -> float:
        """The score scaled to 0.0..1.0."""
        return self.entropy / MAX_ENTROPY


@dataclass(frozen=True)
class MemoryRegion:
    """A contiguous region ``[start_ea, end_ea)`` such as a segment."""

    start_ea: int
    end_ea: int
    name: str = ""
    readable: bool = True
    initialized: bool = True

    def size(self) -> int:
        """Size of the region in bytes."""
        return self.end_ea - self.start_ea

    def contains(self, addr: int) -> bool:
        """Whether ``addr`` lies inside the region."""
        return self.start_ea <= addr < self.end_ea


class SegmentKind(enum.Enum):
    """What a segment holds."""

    CODE = "code"
    DATA = "data"
    BSS = "bss"
    OTHER = "other"


@dataclass(frozen=True)
class Segment:
    """A segment of the address space and the bytes loaded at its start.

    ``data`` may be shorter than the segment; addresses past it hold no bytes.
    """

    start_ea: int
    end_ea: int
    data: bytes = b""
    name: str = ""
    readable: bool = True
    kind: SegmentKind = SegmentKind.DATA

    def __post_init__(self) -> None:
        if self.start_ea < 0 or self.end_ea <= self.start_ea:
            raise ValueError(
                f"invalid segment range {self.start_ea:#x}..{self.end_ea:#x}"
            )
        if len(self.data) > self.end_ea - self.start_ea:
            raise ValueError("segment data is larger than the segment")

    @property
    def initialized(self) -> bool:
        """Whether the segment holds initialised code or data."""
        return self.kind in (SegmentKind.CODE, SegmentKind.DATA)

    def contains(self, addr: int) -> bool:
        """Whether ``addr`` lies inside the segment."""
        return self.start_ea <= addr < self.end_ea


class Memory:
    """A set of non-overlapping segments, kept ordered by address."""

    def __init__(self, segments: Iterable[Segment] = ()) -> None:
        self._segments: list[Segment] = []
        for segment in segments:
            self.add_segment(segment)

    @property
    def segments(self) -> tuple[Segment, ...]:
        """The segments in address order."""
        return tuple(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self):
        return iter(self._segments)

    def add_segment(self, segment: Segment) -> None:
        """Add a segment; raise ValueError if it overlaps an existing one."""
        starts = [s.start_ea for s in self._segments]
        pos = bisect.bisect_left(starts, segment.start_ea)
        if pos > 0 and self._segments[pos - 1].end_ea > segment.start_ea:
            raise ValueError(f"segment {segment.name!r} overlaps an existing segment")
        if pos < len(self._segments) and self._segments[pos].start_ea < segment.end_ea:
            raise ValueError(f"segment {segment.name!r} overlaps an existing segment")
        self._segments.insert(pos, segment)

    def _segment_at(self, ea: int) -> Optional[Segment]:
        starts = [s.start_ea for s in self._segments]
        pos = bisect.bisect_right(starts, ea) - 1
        if pos >= 0 and self._segments[pos].contains(ea):
            return self._segments[pos]
        return None

    def read(self, ea: int, size: int) -> bytes:
        """Read up to ``size`` loaded bytes starting at ``ea``.

        Reading stops at the first address that holds no loaded byte, so the
        result may be shorter than asked for, or empty.
        """
        chunks: list[bytes] = []
        remaining = size
        while remaining > 0:
            segment = self._segment_at(ea)
            if segment is None:
                break
            offset = ea - segment.start_ea
            chunk = segment.data[offset:offset + remaining]
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
            ea += len(chunk)
            if offset + len(chunk) < len(segment.data):
                break
            if ea < segment.end_ea:
                # Unloaded tail of the segment.
                break
        return b"".join(chunks)


class EntropyCalculator:
    """Scores byte blocks by their divergence from the uniform distribution.

    The Jensen-Shannon divergence between the observed byte distribution and
    the uniform one is inverted and scaled to 0..8, so 8 means uniform,
    random-looking data and low values mean structured or repetitive data.
    """

    def __init__(self, memory: Optional[Memory] = None) -> None:
        self.memory = memory if memory is not None else Memory()

    @staticmethod
    def calculate(data: bytes) -> float:
        """Score a byte string on the 0..8 scale; empty data scores 0.0."""
        size = len(data)
        if size == 0:
            return 0.0

        counts = Counter(data)
        q = _UNIFORM_PROB
        kl_p_m = 0.0
        kl_q_m = 0.0
        for value in range(256):
            p = counts.get(value, 0) / size
            m = 0.5 * (p + q)
            if p > 0.0:
                kl_p_m += p * math.log2(p / m)
            kl_q_m += q * math.log2(q / m)

        js_divergence = 0.5 * kl_p_m + 0.5 * kl_q_m
        return (1.0 - js_divergence) * 8.0

    def calculate_at_address(self, ea: int, size: int) -> float:
        """Score the bytes at ``ea``, or return -1.0 if none can be read."""
        data = self.memory.read(ea, size)
        if not data:
            return -1.0
        return self.calculate(data)

    def get_memory_regions(self) -> list[MemoryRegion]:
        """Describe every segment as a memory region."""
        return [
            MemoryRegion(
                start_ea=segment.start_ea,
                end_ea=segment.end_ea,
                name=segment.name or f"seg_{index}",
                readable=segment.readable,
                initialized=segment.initialized,
            )
            for index, segment in enumerate(self.memory)
        ]

    def analyze_range(
        self, start_ea: int, end_ea: int, block_size: int = DEFAULT_BLOCK_SIZE
    ) -> list[EntropyBlock]:
        """Score ``[start_ea, end_ea)`` in blocks; the last may be shorter.

        Blocks whose bytes cannot be read score 0.0.
        """
        if start_ea >= end_ea or block_size <= 0:
            return []

        blocks: list[EntropyBlock] = []
        for ea in range(start_ea, end_ea, block_size):
            actual = min(block_size, end_ea - ea)
            data = self.memory.read(ea, actual)
            entropy = self.calculate(data) if data else 0.0
            blocks.append(EntropyBlock(ea, ea + actual, entropy))
        return blocks

    def analyze_segment(
        self, segment: Optional[Segment], block_size: int = DEFAULT_BLOCK_SIZE
    ) -> list[EntropyBlock]:
        """Score one segment in blocks."""
        if segment is None:
            return []
        return self.analyze_range(segment.start_ea, segment.end_ea, block_size)

    def analyze_database(self, block_size: int = DEFAULT_BLOCK_SIZE) -> list[EntropyBlock]:
        """Score every readable segment, returning blocks in address order."""
        blocks = [
            block
            for segment in self.memory
            if segment.readable
            for block in self.analyze_segment(segment, block_size)
        ]
        blocks.sort(key=lambda block: block.start_ea)
        return blocks


def format_entropy(entropy: float) -> str:
    """Format a score with two decimals."""
    return f"{entropy:.2f}"


def format_address(addr: int) -> str:
    """Format an address as upper-case hexadecimal without a prefix."""
    return f"{addr:X}"