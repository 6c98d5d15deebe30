"""
Tests for TimelineSettings validation, persistence and environment overrides.
"""
import json

import pytest

from perf_timeline.settings import TimelineSettings, TimelineSettingsManager, ValidationResult
from perf_timeline.utils.paths import get_settings_path


class TestValidation:

    def test_defaults_are_valid(self):
        result = TimelineSettings().validate()
        assert isinstance(result, ValidationResult)
        assert result.valid is True
        assert result.errors == []

    def test_max_below_min(self):
        result = TimelineSettings(min_scale=5.0, max_scale=1.0).validate()
        assert not result
        assert any(e.startswith("max_scale") for e in result.errors)

    def test_zoom_factors(self):
        result = TimelineSettings(zoom_in_factor=0.9, zoom_out_factor=1.2).validate()
        assert len(result.errors) == 2

    def test_unknown_log_level(self):
        assert not TimelineSettings(log_level="chatty").validate()


class TestSerialization:

    def test_from_dict_ignores_unknown_keys(self):
        settings = TimelineSettings.from_dict({"max_scale": "20", "legacy_option": True})
        assert settings.max_scale == 20.0
        assert settings.min_scale == TimelineSettings().min_scale

    def test_from_dict_bad_value(self):
        with pytest.raises(ValueError):
            TimelineSettings.from_dict({"max_scale": "huge"})

    def test_env_overrides(self):
        settings = TimelineSettings().with_env_overrides({
            "PERF_TIMELINE_MAX_SCALE": "4",
            "PERF_TIMELINE_REPLAY_POLL_INTERVAL_MS": "33",
            "UNRELATED": "1",
        })
        assert settings.max_scale == 4.0
        assert settings.replay_poll_interval_ms == 33


class TestManager:

    def test_defaults_without_file(self, tmp_path):
        manager = TimelineSettingsManager(path=tmp_path / "settings.json", use_env=False)
        assert manager.settings == TimelineSettings()

    def test_default_path_in_user_config(self, isolated_home):
        manager = TimelineSettingsManager(use_env=False)
        assert manager.path == get_settings_path()
        assert str(manager.path).startswith(str(isolated_home))

    def test_update_persists(self, tmp_path):
        path = tmp_path / "settings.json"
        manager = TimelineSettingsManager(path=path, use_env=False)
        manager.update(max_scale=5.0)
        assert json.loads(path.read_text())["max_scale"] == 5.0
        assert TimelineSettingsManager(path=path, use_env=False).settings.max_scale == 5.0

    def test_update_rejects_unknown_and_invalid(self, tmp_path):
        manager = TimelineSettingsManager(path=tmp_path / "settings.json", use_env=False)
        with pytest.raises(ValueError):
            manager.update(bogus=1)
        with pytest.raises(ValueError):
            manager.update(min_scale=-1.0)
        assert manager.settings == TimelineSettings()

    def test_corrupt_file_falls_back_to_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{not json")
        manager = TimelineSettingsManager(path=path, use_env=False)
        assert manager.settings == TimelineSettings()

    def test_invalid_file_values_fall_back_to_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"min_scale": 3, "max_scale": 1}))
        manager = TimelineSettingsManager(path=path, use_env=False)
        assert manager.settings == TimelineSettings()

    def test_environment_wins_over_file(self, tmp_path, monkeypatch):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"max_scale": 5}))
        monkeypatch.setenv("PERF_TIMELINE_MAX_SCALE", "7")
        manager = TimelineSettingsManager(path=path)
        assert manager.settings.max_scale == 7.0
