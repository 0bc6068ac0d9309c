import logging

from graybmp.config import EngineSettings, configure_logging


def test_settings_defaults(monkeypatch):
    for name in ("GRAYBMP_OUTPUT_DIR", "GONZALEZ_MAX_ITER", "GONZALEZ_EPS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = EngineSettings.from_env()

    assert settings.output_dir == "."
    assert settings.gonzalez_max_iterations == 256
    assert settings.gonzalez_epsilon == 2
    assert settings.log_level == "INFO"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("GRAYBMP_OUTPUT_DIR", "/tmp/out")
    monkeypatch.setenv("GONZALEZ_MAX_ITER", "16")
    monkeypatch.setenv("SOURCE_TIMEOUT", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = EngineSettings.from_env()

    assert settings.output_dir == "/tmp/out"
    assert settings.gonzalez_max_iterations == 16
    assert settings.source_timeout == 2.5
    assert settings.log_level == "DEBUG"


def test_configure_logging_returns_package_logger():
    assert configure_logging() is logging.getLogger("graybmp")
