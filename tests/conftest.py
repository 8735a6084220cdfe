import pytest

from cnfcyk.logging import Logger

@pytest.fixture(autouse=True)
def isolated_logs(tmp_path, monkeypatch):
    log_dir = tmp_path / "logs"
    monkeypatch.setattr(Logger, "log_dir", str(log_dir))
    monkeypatch.setattr(Logger, "default_log_level", "debug")
    return log_dir
