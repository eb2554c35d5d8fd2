# test_config.py
import importlib

import tasker.config


def test_dotenv_read_from_working_directory(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("PORT=6123\nDATABASE_URI=mongodb://db.example:27017\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("DATABASE_URI", raising=False)

    config = importlib.reload(tasker.config)
    assert config.Config.PORT == 6123
    assert config.Config.DATABASE_URI == "mongodb://db.example:27017"


def test_process_environment_wins_over_dotenv(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("PORT=6123\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PORT", "7000")

    config = importlib.reload(tasker.config)
    assert config.Config.PORT == 7000


def test_empty_dotenv_is_not_an_error(tmp_path, monkeypatch, caplog):
    (tmp_path / ".env").write_text("")
    monkeypatch.chdir(tmp_path)

    importlib.reload(tasker.config)
    assert "Error loading .env file" not in caplog.text
