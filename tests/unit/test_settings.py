import pytest
from pydantic import ValidationError

from app.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_analysis_provider(self) -> None:
        s = Settings()
        assert s.analysis_provider == "gemini"

    def test_default_gemini_model(self) -> None:
        s = Settings()
        assert s.gemini_model_name == "gemini-1.5-flash"

    def test_no_timeouts_by_default(self) -> None:
        s = Settings()
        assert s.analysis_timeout_seconds is None
        assert s.storage_timeout_seconds is None

    def test_default_storage(self) -> None:
        s = Settings()
        assert s.storage_engine == "supabase"
        assert s.storage_bucket == "materials"

    def test_default_records_table(self) -> None:
        s = Settings()
        assert s.records_table == "material_analysis"


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_analysis_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYSIS_PROVIDER", "example")
        s = Settings()
        assert s.analysis_provider == "example"

    def test_loads_analysis_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYSIS_TIMEOUT_SECONDS", "12.5")
        s = Settings()
        assert s.analysis_timeout_seconds == 12.5

    def test_loads_db_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_PORT", "5433")
        s = Settings()
        assert s.db_port == 5433


class TestSettingsValidation:
    def test_invalid_db_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DB_PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_timeout_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STORAGE_TIMEOUT_SECONDS", "abc")
        with pytest.raises(ValidationError):
            Settings()
