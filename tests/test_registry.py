import pytest

from synopsia.registry import Feature, FeatureRegistry


class Recorder(Feature):
    def __init__(self, feature_id, ok=True):
        super().__init__()
        self.id = feature_id
        self.ok = ok
        self.events = []

    def initialize(self):
        if not self.ok:
            return False
        return super().initialize()

    def cleanup(self):
        self.events.append("cleanup")
        super().cleanup()

    def on_cursor_changed(self, addr):
        self.events.append(("cursor", addr))

    def on_database_modified(self):
        self.events.append("modified")


def test_register_and_lookup():
    registry = FeatureRegistry()
    feature = Recorder("alpha")
    registry.register_feature(feature)
    assert registry.get_feature("alpha") is feature
    assert registry.has_feature("alpha")
    assert "alpha" in registry
    assert registry.get_feature("beta") is None
    assert not registry.has_feature("beta")


def test_duplicate_id_rejected():
    registry = FeatureRegistry()
    registry.register_feature(Recorder("alpha"))
    with pytest.raises(ValueError):
        registry.register_feature(Recorder("alpha"))
    assert len(registry) == 1


def test_none_rejected():
    registry = FeatureRegistry()
    with pytest.raises(TypeError):
        registry.register_feature(None)
    assert len(registry) == 0


def test_iteration_keeps_registration_order():
    registry = FeatureRegistry()
    features = [Recorder(name) for name in ("c", "a", "b")]
    for feature in features:
        registry.register_feature(feature)
    assert list(registry) == features
    assert len(registry) == len(features)


def test_unregister_cleans_up_initialized_feature():
    registry = FeatureRegistry()
    feature = Recorder("alpha")
    registry.register_feature(feature)
    registry.initialize_all()
    registry.unregister_feature("alpha")
    assert feature.events == ["cleanup"]
    assert not feature.initialized
    assert not registry.has_feature("alpha")
    assert len(registry) == 0


def test_unregister_skips_cleanup_when_not_initialized():
    registry = FeatureRegistry()
    feature = Recorder("alpha")
    registry.register_feature(feature)
    registry.unregister_feature("alpha")
    assert feature.events == []
    assert len(registry) == 0


def test_unregister_unknown_is_ignored():
    registry = FeatureRegistry()
    registry.register_feature(Recorder("alpha"))
    registry.unregister_feature("missing")
    assert len(registry) == 1


def test_initialize_all_counts_successes():
    registry = FeatureRegistry()
    good = Recorder("good")
    bad = Recorder("bad", ok=False)
    registry.register_feature(good)
    registry.register_feature(bad)
    assert registry.initialize_all() == 1
    assert good.initialized
    assert not bad.initialized


def test_cleanup_all_only_touches_initialized():
    registry = FeatureRegistry()
    good = Recorder("good")
    bad = Recorder("bad", ok=False)
    registry.register_feature(good)
    registry.register_feature(bad)
    registry.initialize_all()
    good.show()
    registry.cleanup_all()
    assert good.events == ["cleanup"]
    assert bad.events == []
    assert not good.initialized
    assert not good.visible


def test_broadcast_cursor_changed_reaches_initialized_only():
    registry = FeatureRegistry()
    good = Recorder("good")
    bad = Recorder("bad", ok=False)
    registry.register_feature(good)
    registry.register_feature(bad)
    registry.initialize_all()
    registry.broadcast_cursor_changed(0x401000)
    assert good.events == [("cursor", 0x401000)]
    assert bad.events == []


def test_broadcast_database_closed_hides_features():
    registry = FeatureRegistry()
    good = Recorder("good")
    registry.register_feature(good)
    registry.initialize_all()
    good.show()
    assert good.visible
    registry.broadcast_database_closed()
    assert not good.visible
    assert good.initialized


def test_broadcast_database_closed_skips_uninitialized():
    registry = FeatureRegistry()
    feature = Recorder("alpha")
    registry.register_feature(feature)
    feature.show()
    registry.broadcast_database_closed()
    assert feature.visible


def test_broadcast_database_modified():
    registry = FeatureRegistry()
    feature = Recorder("alpha")
    registry.register_feature(feature)
    registry.initialize_all()
    registry.broadcast_database_modified()
    assert feature.events == ["modified"]


def test_toggle_flips_visibility():
    feature = Feature()
    assert not feature.visible
    feature.toggle()
    assert feature.visible
    feature.toggle()
    assert not feature.visible


def test_base_lifecycle():
    feature = Feature()
    assert feature.initialize() is True
    assert feature.initialized
    feature.show()
    feature.cleanup()
    assert not feature.initialized
    assert not feature.visible