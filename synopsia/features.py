"""Identity and UI metadata of the plugin's built-in features."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "FeatureSpec",
    "ENTROPY_MINIMAP",
    "FUNCTION_SEARCH",
    "BINARY_MAP_3D",
    "BINARY_MAP_3D_FOCUSED",
    "FEATURE_SPECS",
    "spec_by_id",
    "spec_by_hotkey",
]


@dataclass(frozen=True)
class FeatureSpec:
    """What identifies a feature and how it appears in the host UI."""

    id: str
    name: str
    description: str
    hotkey: str
    action_name: str
    action_label: str
    widget_title: str


ENTROPY_MINIMAP = FeatureSpec(
    id="entropy_minimap",
    name="Entropy Minimap",
    description="Visual JS divergence analysis with click-to-navigate",
    hotkey="Alt+E",
    action_name="synopsia:entropy_minimap",
    action_label="Show JS Minimap",
    widget_title="JS Minimap",
)

FUNCTION_SEARCH = FeatureSpec(
    id="function_search",
    name="Function Search",
    description="Search and browse functions with disassembly viewer",
    hotkey="Alt+F",
    action_name="synopsia:function_search",
    action_label="Function Search",
    widget_title="Function Search",
)

BINARY_MAP_3D = FeatureSpec(
    id="binary_map_3d",
    name="3D Binary Map",
    description="3D visualization with call depth and Hilbert curve layout",
    hotkey="Alt+3",
    action_name="synopsia:binary_map_3d",
    action_label="3D Binary Map",
    widget_title="3D Binary Map",
)

#: The focused call-graph view of the 3D binary map, docked on the right.
BINARY_MAP_3D_FOCUSED = FeatureSpec(
    id="binary_map_3d",
    name="3D Binary Map",
    description="3D visualization with call depth and Hilbert curve layout",
    hotkey="Alt+2",
    action_name="synopsia:binary_map_3d_focused",
    action_label="3D Call Graph (Focused)",
    widget_title="Call Graph",
)

#: The features in the order the plugin registers them.
FEATURE_SPECS: tuple[FeatureSpec, ...] = (ENTROPY_MINIMAP, FUNCTION_SEARCH, BINARY_MAP_3D)

_ALL_ACTIONS: tuple[FeatureSpec, ...] = FEATURE_SPECS + (BINARY_MAP_3D_FOCUSED,)


def spec_by_id(feature_id: str) -> FeatureSpec:
    """The spec of the feature with ``feature_id``; KeyError if there is none."""
    for spec in FEATURE_SPECS:
        if spec.id == feature_id:
            return spec
    raise KeyError(feature_id)


def spec_by_hotkey(hotkey: str) -> FeatureSpec:
    """The spec of the action bound to ``hotkey``; KeyError if there is none."""
    for spec in _ALL_ACTIONS:
        if spec.hotkey == hotkey:
            return spec
    raise KeyError(hotkey)