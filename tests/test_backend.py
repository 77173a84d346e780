"""Tests for backend selection and configuration."""

import pytest

import pgtrigram as pt
import pgtrigram._backend as backend_module
from pgtrigram.config import Settings, load_settings
from pgtrigram.engine import ParallelEngine, PortableEngine


class TestSelection:
    """Engine chosen once per process from PGTRIGRAM_BACKEND."""

    def test_portable_from_env(self, monkeypatch):
        monkeypatch.setenv("PGTRIGRAM_BACKEND", "portable")
        pt.reset_backend()
        assert isinstance(pt.get_engine(), PortableEngine)
        assert pt.current_backend() is pt.Backend.PORTABLE

    def test_parallel_from_env(self, monkeypatch):
        monkeypatch.setenv("PGTRIGRAM_BACKEND", "parallel")
        monkeypatch.setenv("PGTRIGRAM_PARALLEL_THRESHOLD", "10")
        monkeypatch.setenv("PGTRIGRAM_MAX_WORKERS", "2")
        pt.reset_backend()
        engine = pt.get_engine()
        assert isinstance(engine, ParallelEngine)
        assert engine.parallel_threshold == 10
        assert engine.max_workers == 2

    def test_auto_multi_core(self, monkeypatch):
        monkeypatch.delenv("PGTRIGRAM_BACKEND", raising=False)
        monkeypatch.setattr(backend_module.os, "cpu_count", lambda: 8)
        pt.reset_backend()
        assert pt.current_backend() is pt.Backend.PARALLEL

    def test_auto_single_core(self, monkeypatch):
        monkeypatch.setenv("PGTRIGRAM_BACKEND", "auto")
        monkeypatch.setattr(backend_module.os, "cpu_count", lambda: 1)
        pt.reset_backend()
        assert pt.current_backend() is pt.Backend.PORTABLE

    def test_selected_once(self, monkeypatch):
        monkeypatch.setenv("PGTRIGRAM_BACKEND", "portable")
        pt.reset_backend()
        first = pt.get_engine()
        monkeypatch.setenv("PGTRIGRAM_BACKEND", "parallel")
        assert pt.get_engine() is first

    def test_unknown_backend(self, monkeypatch):
        monkeypatch.setenv("PGTRIGRAM_BACKEND", "native")
        pt.reset_backend()
        with pytest.raises(pt.ConfigurationError, match="Unknown backend"):
            pt.get_engine()

    def test_available_backends(self):
        assert pt.available_backends() == [pt.Backend.PORTABLE, pt.Backend.PARALLEL]


class TestUseBackend:
    """Runtime switching."""

    def test_switch_by_name(self):
        engine = pt.use_backend("portable")
        assert pt.get_engine() is engine
        assert pt.current_backend() is pt.Backend.PORTABLE

    def test_switch_by_enum(self):
        pt.use_backend(pt.Backend.PARALLEL)
        assert pt.current_backend() is pt.Backend.PARALLEL

    def test_switch_to_instance(self):
        engine = ParallelEngine(parallel_threshold=1, max_workers=2)
        assert pt.use_backend(engine) is engine
        assert pt.similarity("hello", "hello") == 1.0
        assert pt.get_engine() is engine

    def test_reset_rereads_environment(self, monkeypatch):
        monkeypatch.setenv("PGTRIGRAM_BACKEND", "portable")
        pt.use_backend("parallel")
        pt.reset_backend()
        assert pt.current_backend() is pt.Backend.PORTABLE

    def test_bad_type(self):
        with pytest.raises(TypeError):
            pt.use_backend(42)

    def test_build_engine_does_not_switch(self, monkeypatch):
        monkeypatch.setenv("PGTRIGRAM_BACKEND", "portable")
        pt.reset_backend()
        engine = pt.build_engine("parallel", Settings(parallel_threshold=5))
        assert engine.parallel_threshold == 5
        assert pt.current_backend() is pt.Backend.PORTABLE


class TestLoadSettings:
    """Parsing of PGTRIGRAM_* variables."""

    def test_defaults(self):
        settings = load_settings({})
        assert settings == Settings()
        assert settings.backend is pt.Backend.AUTO
        assert settings.parallel_threshold == 250
        assert settings.max_workers is None
        assert settings.executor is pt.Executor.THREAD
        assert settings.similarity_threshold == 0.3

    def test_all_variables(self):
        settings = load_settings(
            {
                "PGTRIGRAM_BACKEND": " Parallel ",
                "PGTRIGRAM_PARALLEL_THRESHOLD": "1000",
                "PGTRIGRAM_MAX_WORKERS": "3",
                "PGTRIGRAM_EXECUTOR": "process",
                "PGTRIGRAM_SIMILARITY_THRESHOLD": "0.45",
            }
        )
        assert settings.backend is pt.Backend.PARALLEL
        assert settings.parallel_threshold == 1000
        assert settings.max_workers == 3
        assert settings.executor is pt.Executor.PROCESS
        assert settings.similarity_threshold == 0.45

    def test_blank_values_ignored(self):
        assert load_settings({"PGTRIGRAM_MAX_WORKERS": "  "}) == Settings()

    @pytest.mark.parametrize(
        "name,value",
        [
            ("PGTRIGRAM_PARALLEL_THRESHOLD", "many"),
            ("PGTRIGRAM_PARALLEL_THRESHOLD", "0"),
            ("PGTRIGRAM_MAX_WORKERS", "-2"),
            ("PGTRIGRAM_EXECUTOR", "gpu"),
            ("PGTRIGRAM_SIMILARITY_THRESHOLD", "high"),
            ("PGTRIGRAM_SIMILARITY_THRESHOLD", "1.5"),
        ],
    )
    def test_malformed(self, name, value):
        with pytest.raises(pt.ConfigurationError):
            load_settings({name: value})

    def test_settings_frozen(self):
        settings = Settings()
        with pytest.raises(AttributeError):
            settings.parallel_threshold = 1
