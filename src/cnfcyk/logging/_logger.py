from __future__ import annotations

import pathlib
from datetime import datetime

class Logger():
    log_dir = "./logs/"
    default_log_level = "none"

    def __init__(self, file: str, tag: str, log_level: str = None) -> None:
        self.log_level = log_level if log_level is not None else Logger.default_log_level
        self.file = file
        self.tag = tag

    def _line_header(self, level: str) -> str:
        date = datetime.now().strftime(f"[%d/%m %H:%M:%S]")
        return f"{date}, {level}, {self.tag}: "

    def _path_for(self, suffix: str = "") -> pathlib.Path:
        path = pathlib.Path(self.log_dir)
        path.mkdir(parents=True, exist_ok=True)
        return path / (self.file + suffix + ".log")

    def _log(self, msg: str, level: str) -> None:
        with open(self._path_for(), 'a') as f:
            f.write(self._line_header(level) + msg + "\n")

    def log(self, msg: str):
        if self.should_log_at_level("info"):
            self._log(msg, "INF")

    def log_error(self, msg: str):
        if self.should_log_at_level("error"):
            self._log(msg, "ERR")
            with open(self._path_for("_err"), 'a') as f:
                f.write(self._line_header("ERR") + msg + "\n")

    def log_debug(self, msg: str):
        if self.should_log_at_level("debug"):
            self._log(msg, "DEB")

    @classmethod
    def _log_level_to_int(cls, level: str):
        levels_mapping = {
            "debug": 0,
            "info": 1,
            "error": 2,
            "none": 3,
        }

        level_int = levels_mapping.get(level)
        if level_int is None:
            raise ValueError(f"unknown log level '{level}'")
        return level_int

    def should_log_at_level(self, level_of_message: str):
        return self._log_level_to_int(level_of_message) >= self._log_level_to_int(self.log_level)
