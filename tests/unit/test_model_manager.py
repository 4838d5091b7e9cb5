"""Tests for the model manager."""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from forge.models.manager import ModelManager
from forge.utils.exceptions import InvalidModelError, ModelLoadError, ModelNotLoadedError
from tests.fixtures.common_mocks import BROKEN_MODEL, OTHER_MODEL, TEST_MODEL, FakeLoader


class GatedLoader(FakeLoader):
    """A loader that blocks every load until `gate` is set."""

    def __init__(self):
        super().__init__()
        self.gate = threading.Event()
        self.entered = threading.Event()
        self.calls = 0
        self._calls_lock = threading.Lock()

    def __call__(self, name):
        with self._calls_lock:
            self.calls += 1
        self.entered.set()
        assert self.gate.wait(timeout=5)
        return super().__call__(name)


@pytest.mark.unit
class TestModelManager:
    """Test suite for loading, switching and resolving models."""

    def test_load_default_model(self, model_manager, fake_loader):
        assert model_manager.get_active_model() == TEST_MODEL
        assert model_manager.list_models() == [TEST_MODEL]
        assert fake_loader.loaded == [TEST_MODEL]

    def test_resolve_without_active_model(self, test_settings, fake_loader):
        manager = ModelManager(test_settings, loader=fake_loader)

        with pytest.raises(ModelNotLoadedError) as exc_info:
            manager.resolve()

        assert exc_info.value.status_code == 503
        assert str(exc_info.value) == "No active model is loaded."

    def test_resolve_active_model(self, model_manager):
        name, model = model_manager.resolve()

        assert name == TEST_MODEL
        assert model.name == TEST_MODEL

    def test_resolve_named_model_loads_without_switching(self, model_manager, fake_loader):
        name, model = model_manager.resolve(OTHER_MODEL)

        assert name == OTHER_MODEL
        assert model_manager.get_active_model() == TEST_MODEL
        assert fake_loader.loaded == [TEST_MODEL, OTHER_MODEL]

    def test_models_are_loaded_once(self, model_manager, fake_loader):
        model_manager.resolve(OTHER_MODEL)
        model_manager.resolve(OTHER_MODEL)
        model_manager.switch_model(OTHER_MODEL)

        assert fake_loader.loaded.count(OTHER_MODEL) == 1

    def test_switch_model(self, model_manager):
        model_manager.switch_model(OTHER_MODEL)

        assert model_manager.get_active_model() == OTHER_MODEL
        assert sorted(model_manager.list_models()) == [OTHER_MODEL, TEST_MODEL]

    def test_switch_to_disallowed_model_keeps_active(self, model_manager):
        with pytest.raises(InvalidModelError):
            model_manager.switch_model("not-allowed")

        assert model_manager.get_active_model() == TEST_MODEL

    def test_switch_to_broken_model_keeps_active(self, model_manager):
        with pytest.raises(ModelLoadError):
            model_manager.switch_model(BROKEN_MODEL)

        assert model_manager.get_active_model() == TEST_MODEL
        assert BROKEN_MODEL not in model_manager.list_models()

    def test_unready_active_model(self, model_manager, fake_loader):
        fake_loader.models[TEST_MODEL].ready = False

        with pytest.raises(ModelNotLoadedError):
            model_manager.resolve()


@pytest.mark.unit
class TestConcurrentLoading:
    """Concurrent requests for a model that is not loaded yet."""

    def test_concurrent_resolves_load_once(self, test_settings):
        loader = GatedLoader()
        manager = ModelManager(test_settings, loader=loader)
        workers = 8
        start = threading.Barrier(workers)

        def resolve():
            start.wait(timeout=5)
            return manager.resolve(OTHER_MODEL)

        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(resolve) for _ in range(workers)]
            assert loader.entered.wait(timeout=5)
            loader.gate.set()
            resolved = [future.result(timeout=5) for future in futures]

        assert loader.calls == 1
        assert loader.loaded.count(OTHER_MODEL) == 1
        models = {id(model) for _, model in resolved}
        assert len(models) == 1
        assert {name for name, _ in resolved} == {OTHER_MODEL}

    def test_concurrent_switches_load_once(self, test_settings):
        loader = GatedLoader()
        manager = ModelManager(test_settings, loader=loader)

        with ThreadPoolExecutor(max_workers=4) as pool:
            futures = [pool.submit(manager.switch_model, OTHER_MODEL) for _ in range(4)]
            assert loader.entered.wait(timeout=5)
            loader.gate.set()
            for future in futures:
                future.result(timeout=5)

        assert loader.loaded == [OTHER_MODEL]
        assert manager.get_active_model() == OTHER_MODEL
