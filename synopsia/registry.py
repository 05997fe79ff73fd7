"""Plugin features and the registry that owns them and dispatches events."""

from __future__ import annotations

from typing import Iterator, Optional

__all__ = ["Feature", "FeatureRegistry"]


class Feature:
    """A self-contained plugin feature with its own UI state.

    Subclasses set ``id``, ``name``, ``description`` and ``hotkey`` and
    extend the lifecycle methods, calling the base versions to keep the
    initialised and visible flags right.
    """

    id: str = ""
    name: str = ""
    description: str = ""
    hotkey: Optional[str] = None

    def __init__(self) -> None:
        self._initialized = False
        self._visible = False

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id!r}, "
            f"initialized={self._initialized}, visible={self._visible})"
        )

    @property
    def initialized(self) -> bool:
        """Whether the feature has been initialised."""
        return self._initialized

    @property
    def visible(self) -> bool:
        """Whether the feature's UI is shown."""
        return self._visible

    def initialize(self) -> bool:
        """Initialise the feature; return whether it succeeded."""
        self._initialized = True
        return True

    def cleanup(self) -> None:
        """Hide the feature and release it."""
        self.hide()
        self._initialized = False

    def show(self) -> None:
        """Show the feature's UI."""
        self._visible = True

    def hide(self) -> None:
        """Hide the feature's UI."""
        self._visible = False

    def toggle(self) -> None:
        """Hide the UI if it is shown, otherwise show it."""
        if self._visible:
            self.hide()
        else:
            self.show()

    def on_cursor_changed(self, addr: int) -> None:
        """React to the cursor moving to ``addr``; does nothing by default."""

    def on_database_closed(self) -> None:
        """React to the database closing by hiding the UI."""
        self.hide()

    def on_database_modified(self) -> None:
        """React to a database change; does nothing by default."""


class FeatureRegistry:
    """Owns features in registration order and looks them up by id."""

    def __init__(self) -> None:
        self._features: dict[str, Feature] = {}

    def register_feature(self, feature: Feature) -> None:
        """Add a feature; raise ValueError if its id is already registered."""
        if feature is None:
            raise TypeError("feature must not be None")
        feature_id = feature.id
        if feature_id in self._features:
            raise ValueError(f"feature {feature_id!r} is already registered")
        self._features[feature_id] = feature

    def unregister_feature(self, feature_id: str) -> None:
        """Remove a feature, cleaning it up first if initialised.

        Unknown ids are ignored.
        """
        feature = self._features.get(feature_id)
        if feature is None:
            return
        if feature.initialized:
            feature.cleanup()
        del self._features[feature_id]

    def get_feature(self, feature_id: str) -> Optional[Feature]:
        """The feature with ``feature_id``, or None."""
        return self._features.get(feature_id)

    def has_feature(self, feature_id: str) -> bool:
        """Whether a feature with ``feature_id`` is registered."""
        return feature_id in self._features

    def __contains__(self, feature_id: object) -> bool:
        return feature_id in self._features

    def __len__(self) -> int:
        return len(self._features)

    def __iter__(self) -> Iterator[Feature]:
        return iter(list(self._features.values()))

    def _initialized_features(self) -> list[Feature]:
        return [f for f in self._features.values() if f.initialized]

    def initialize_all(self) -> int:
        """Initialise every feature; return how many succeeded."""
        return sum(1 for feature in list(self._features.values()) if feature.initialize())

    def cleanup_all(self) -> None:
        """Clean up every initialised feature."""
        for feature in self._initialized_features():
            feature.cleanup()

    def broadcast_cursor_changed(self, addr: int) -> None:
        """Tell every initialised feature that the cursor moved."""
        for feature in self._initialized_features():
            feature.on_cursor_changed(addr)

    def broadcast_database_closed(self) -> None:
        """Tell every initialised feature that the database closed."""
        for feature in self._initialized_features():
            feature.on_database_closed()

    def broadcast_database_modified(self) -> None:
        """Tell every initialised feature that the database changed."""
        for feature in self._initialized_features():
            feature.on_database_modified()