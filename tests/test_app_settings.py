import logging

from utils.app_settings import AppSettings, load_settings


def test_defaults_without_ini(tmp_path):
    assert load_settings(environ={}, data_dir=tmp_path) == AppSettings()


def test_ini_values(tmp_path):
    (tmp_path / "app.ini").write_text(
        "[app]\ndev = yes\nlogo = assets/logo.svg\n\n[print]\nenabled = off\nsettle_delay_ms = 500\n",
        encoding="utf-8",
    )
    settings = load_settings(environ={}, data_dir=tmp_path)
    assert settings.dev_mode is True
    assert settings.print_enabled is False
    assert settings.print_delay_ms == 500
    assert settings.logo_src == "assets/logo.svg"


def test_environment_overrides_ini(tmp_path):
    (tmp_path / "app.ini").write_text("[print]\nsettle_delay_ms = 500\n", encoding="utf-8")
    settings = load_settings(environ={"POSTAL_PRINT_DELAY_MS": "100"}, data_dir=tmp_path)
    assert settings.print_delay_ms == 100


def test_data_dir_from_environment(tmp_path):
    (tmp_path / "app.ini").write_text("[app]\ndev = 1\n", encoding="utf-8")
    settings = load_settings(environ={"POSTAL_DATA_DIR": str(tmp_path)})
    assert settings.dev_mode is True


def test_malformed_values_fall_back(tmp_path, caplog):
    env = {"POSTAL_PRINT_DELAY_MS": "soon", "POSTAL_DEV": "maybe"}
    with caplog.at_level(logging.WARNING):
        settings = load_settings(environ=env, data_dir=tmp_path)
    assert settings.print_delay_ms == 250
    assert settings.dev_mode is False
    assert "not an integer" in caplog.text
    assert "not a boolean" in caplog.text
