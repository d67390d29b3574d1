import logging
import os

from app.config import settings


def test_env_file_loading_is_logged(tmp_path, monkeypatch, caplog):
    (tmp_path / ".env").write_text("CAD_SETTINGS_TEST_VALUE=loaded\n")
    monkeypatch.setattr(settings, "BASE_DIR", tmp_path)
    monkeypatch.setattr(settings, "ENV", "ci")
    monkeypatch.delenv("CAD_SETTINGS_TEST_VALUE", raising=False)

    with caplog.at_level(logging.INFO, logger="app.config.settings"):
        assert settings.load_env_file() is True

    assert os.environ["CAD_SETTINGS_TEST_VALUE"] == "loaded"
    assert f"Loading environment from {tmp_path / '.env'}" in caplog.text
    monkeypatch.delenv("CAD_SETTINGS_TEST_VALUE")


def test_missing_env_file_is_logged(tmp_path, monkeypatch, caplog, capsys):
    monkeypatch.setattr(settings, "BASE_DIR", tmp_path)
    monkeypatch.setattr(settings, "ENV", "ci")

    with caplog.at_level(logging.INFO, logger="app.config.settings"):
        assert settings.load_env_file() is False

    assert "No .env.ci or .env file found" in caplog.text
    assert capsys.readouterr().out == ""
