"""The plugin: owns the feature registry and routes host events to it."""

from __future__ import annotations

import logging
from typing import Iterable

from synopsia.registry import Feature, FeatureRegistry

__all__ = [
    "PLUGIN_NAME",
    "PLUGIN_VERSION",
    "PLUGIN_COMMENT",
    "PLUGIN_HELP",
    "Plugin",
]

PLUGIN_NAME = "Synopsia"
PLUGIN_VERSION = "1.0.0"
PLUGIN_COMMENT = "Multi-feature binary analysis toolkit"
PLUGIN_HELP = "Visual binary analysis with multiple analysis features"

_log = logging.getLogger(__name__)


class Plugin:
    """Registers and initialises features, then dispatches events to them."""

    def __init__(self, features: Iterable[Feature] = ()) -> None:
        self._registry = FeatureRegistry()
        for feature in features:
            self._registry.register_feature(feature)
        self.initialized_count = self._registry.initialize_all()
        _log.info(
            "%s %s: plugin initialized with %d features",
            PLUGIN_NAME,
            PLUGIN_VERSION,
            self.initialized_count,
        )
        self._open = True

    @property
    def registry(self) -> FeatureRegistry:
        """The registry holding the plugin's features."""
        return self._registry

    @property
    def is_open(self) -> bool:
        """Whether the plugin has not been closed yet."""
        return self._open

    def run(self, arg: int = 0) -> bool:
        """Toggle the feature at index ``arg``.

        An index past the last feature toggles every feature.
        """
        features = list(self._registry)
        if 0 <= arg < len(features):
            features[arg].toggle()
        else:
            for feature in features:
                feature.toggle()
        return True

    def on_cursor_changed(self, addr: int) -> None:
        """Pass a cursor move on to the features."""
        self._registry.broadcast_cursor_changed(addr)

    def on_database_closed(self) -> None:
        """Pass a database close on to the features."""
        self._registry.broadcast_database_closed()

    def close(self) -> None:
        """Clean up every feature; later calls do nothing."""
        if not self._open:
            return
        self._registry.cleanup_all()
        self._open = False

    def __enter__(self) -> "Plugin":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()