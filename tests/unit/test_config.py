#!/usr/bin/env python3
"""
Unit tests for process settings and pipeline configuration.
"""

import pytest
from pydantic import ValidationError

from listing_media.config import ImagePipelineConfig, Settings
from listing_media.enums import LogLevel


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "ENVIRONMENT",
        "THUMBNAIL_EDGE_PX",
        "COMPRESSION_MAX_WORKERS",
        "LOG_LEVEL",
        "LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.mark.unit
class TestSettings:
    """Test suite for environment-driven settings."""

    def test_defaults(self, clean_env):
        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.thumbnail_edge_px == 250
        assert settings.compression_max_workers == 4
        assert settings.log_level == LogLevel.INFO
        assert settings.log_file is None

    def test_reads_environment(self, clean_env):
        clean_env.setenv("THUMBNAIL_EDGE_PX", "180")
        clean_env.setenv("COMPRESSION_MAX_WORKERS", "6")
        clean_env.setenv("ENVIRONMENT", "Production")

        settings = Settings(_env_file=None)

        assert settings.thumbnail_edge_px == 180
        assert settings.compression_max_workers == 6
        assert settings.environment == "production"

    def test_log_level_case_insensitive(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "debug")
        assert Settings(_env_file=None).log_level == LogLevel.DEBUG

    def test_log_level_accepts_enum(self, clean_env):
        settings = Settings(_env_file=None, log_level=LogLevel.WARNING)
        assert settings.log_level == LogLevel.WARNING

    def test_invalid_log_level(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")

    def test_invalid_environment(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, environment="moon")

    @pytest.mark.parametrize("edge", [0, -1, 5000])
    def test_thumbnail_edge_out_of_range(self, clean_env, edge):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, thumbnail_edge_px=edge)

    @pytest.mark.parametrize("workers", [0, 9])
    def test_worker_limit_out_of_range(self, clean_env, workers):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, compression_max_workers=workers)

    def test_settings_are_frozen(self, clean_env):
        settings = Settings(_env_file=None)
        with pytest.raises(ValidationError):
            settings.thumbnail_edge_px = 10

    def test_pipeline_config(self, clean_env):
        settings = Settings(
            _env_file=None, thumbnail_edge_px=300, compression_max_workers=2
        )

        config = settings.pipeline_config()

        assert config == ImagePipelineConfig(
            thumbnail_edge_px=300, compression_quality=0.30, compression_max_workers=2
        )


@pytest.mark.unit
class TestImagePipelineConfig:
    """Test suite for the immutable pipeline configuration."""

    def test_defaults(self):
        config = ImagePipelineConfig()
        assert config.thumbnail_edge_px == 250
        assert config.compression_quality == 0.30
        assert config.compression_max_workers == 4

    def test_frozen(self):
        config = ImagePipelineConfig()
        with pytest.raises(ValidationError):
            config.compression_quality = 0.9

    @pytest.mark.parametrize("quality", [-0.1, 1.5])
    def test_quality_range(self, quality):
        with pytest.raises(ValidationError):
            ImagePipelineConfig(compression_quality=quality)
