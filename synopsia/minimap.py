"""Minimap data model: entropy blocks, regions, viewport and screen mapping."""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import Iterable, Optional

from synopsia.entropy import (
    DEFAULT_BLOCK_SIZE,
    MAX_BLOCK_SIZE,
    MIN_BLOCK_SIZE,
    EntropyBlock,
    MemoryRegion,
)

__all__ = [
    "DEFAULT_HOTKEY",
    "ACTION_NAME",
    "ACTION_LABEL",
    "WIDGET_TITLE",
    "DEFAULT_MINIMAP_WIDTH",
    "MIN_MINIMAP_WIDTH",
    "MAX_MINIMAP_WIDTH",
    "CURSOR_LINE_HEIGHT",
    "MINIMAP_MARGIN",
    "Viewport",
    "PluginConfig",
    "MinimapData",
]

DEFAULT_HOTKEY = "Alt+E"
ACTION_NAME = "synopsia:show_minimap"
ACTION_LABEL = "Show JS Minimap"
WIDGET_TITLE = "JS Minimap"

#: Default minimap width in pixels.
DEFAULT_MINIMAP_WIDTH = 120
#: Smallest minimap width allowed.
MIN_MINIMAP_WIDTH = 60
#: Largest minimap width allowed.
MAX_MINIMAP_WIDTH = 400
#: Height of the cursor indicator line.
CURSOR_LINE_HEIGHT = 2
#: Margin around the minimap content.
MINIMAP_MARGIN = 4


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


@dataclass
class Viewport:
    """The visible address range ``[start_ea, end_ea)`` and its zoom factor."""

    start_ea: int = 0
    end_ea: int = 0
    zoom: float = 1.0

    def range(self) -> int:
        """Number of addresses in view."""
        return self.end_ea - self.start_ea

    def reset(self, db_start: int, db_end: int) -> None:
        """Show the whole range ``[db_start, db_end)`` at zoom 1.0."""
        self.start_ea = db_start
        self.end_ea = db_end
        self.zoom = 1.0


@dataclass
class PluginConfig:
    """Options for the entropy minimap."""

    block_size: int = DEFAULT_BLOCK_SIZE
    minimap_width: int = DEFAULT_MINIMAP_WIDTH
    show_cursor: bool = True
    show_regions: bool = True
    auto_refresh: bool = True
    vertical_layout: bool = True

    def validate(self) -> None:
        """Clamp block size and width into their allowed ranges."""
        self.block_size = _clamp(self.block_size, MIN_BLOCK_SIZE, MAX_BLOCK_SIZE)
        self.minimap_width = _clamp(
            self.minimap_width, MIN_MINIMAP_WIDTH, MAX_MINIMAP_WIDTH
        )


_EMPTY_BLOCK = EntropyBlock(0, 0, 0.0)
_EMPTY_REGION = MemoryRegion(0, 0, "")


class MinimapData:
    """Entropy blocks and regions with mapping between pixels and addresses."""

    def __init__(
        self,
        blocks: Iterable[EntropyBlock] = (),
        regions: Iterable[MemoryRegion] = (),
        viewport: Optional[Viewport] = None,
    ) -> None:
        self._blocks = sorted(blocks, key=lambda block: block.start_ea)
        self._block_ends = [block.end_ea for block in self._blocks]
        self._regions = list(regions)
        self.viewport = viewport if viewport is not None else Viewport()

    @property
    def blocks(self) -> tuple[EntropyBlock, ...]:
        """The blocks in address order."""
        return tuple(self._blocks)

    @property
    def regions(self) -> tuple[MemoryRegion, ...]:
        """The memory regions."""
        return tuple(self._regions)

    def block_count(self) -> int:
        """Number of entropy blocks."""
        return len(self._blocks)

    def get_block(self, index: int) -> EntropyBlock:
        """The block at ``index``, or an empty block if out of range."""
        if not 0 <= index < len(self._blocks):
            return _EMPTY_BLOCK
        return self._blocks[index]

    def region_count(self) -> int:
        """Number of memory regions."""
        return len(self._regions)

    def get_region(self, index: int) -> MemoryRegion:
        """The region at ``index``, or an empty region if out of range."""
        if not 0 <= index < len(self._regions):
            return _EMPTY_REGION
        return self._regions[index]

    def get_region_name_at(self, index: int) -> str:
        """The name of the region at ``index``, or "" if out of range."""
        if not 0 <= index < len(self._regions):
            return ""
        return self._regions[index].name

    def get_region_name(self, addr: int) -> str:
        """The name of the region holding ``addr``, or "" if none does."""
        region = self.region_at(addr)
        return region.name if region is not None else ""

    def _pixel_to_address(self, pos: int, extent: int) -> Optional[int]:
        if extent <= 0 or pos < 0 or pos >= extent:
            return None
        t = pos / extent
        return self.viewport.start_ea + int(t * self.viewport.range())

    def _address_to_pixel(self, addr: int, extent: int) -> Optional[int]:
        vp = self.viewport
        if extent <= 0 or addr < vp.start_ea or addr >= vp.end_ea:
            return None
        span = vp.range()
        if span == 0:
            return 0
        t = (addr - vp.start_ea) / span
        return int(t * extent)

    def y_to_address(self, y: int, height: int) -> Optional[int]:
        """Address at row ``y`` of a bar ``height`` pixels tall, or None."""
        return self._pixel_to_address(y, height)

    def x_to_address(self, x: int, width: int) -> Optional[int]:
        """Address at column ``x`` of a bar ``width`` pixels wide, or None."""
        return self._pixel_to_address(x, width)

    def address_to_y(self, addr: int, height: int) -> Optional[int]:
        """Row of ``addr`` in a bar ``height`` pixels tall, or None if out of view."""
        return self._address_to_pixel(addr, height)

    def address_to_x(self, addr: int, width: int) -> Optional[int]:
        """Column of ``addr`` in a bar ``width`` pixels wide, or None if out of view."""
        return self._address_to_pixel(addr, width)

    def entropy_at(self, addr: int) -> Optional[float]:
        """Score of the block holding ``addr``, or None if no block does."""
        block = self.block_at(addr)
        return block.entropy if block is not None else None

    def block_at(self, addr: int) -> Optional[EntropyBlock]:
        """The block holding ``addr``, found by binary search."""
        pos = bisect.bisect_right(self._block_ends, addr)
        if pos < len(self._blocks) and self._blocks[pos].contains(addr):
            return self._blocks[pos]
        return None

    def region_at(self, addr: int) -> Optional[MemoryRegion]:
        """The first region holding ``addr``."""
        return next((r for r in self._regions if r.contains(addr)), None)