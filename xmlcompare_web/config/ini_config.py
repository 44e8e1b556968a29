########## ini_config.py

import codecs
import os
from configparser import ConfigParser
from dataclasses import dataclass
from pathlib import Path

INI_DEFAULT_NAME = "XMLCompare.ini"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class AppSettings:
    xml_extensions: frozenset[str]
    encoding: str
    max_displayed_differences: int

    timeout_seconds: int
    workers: int

    allow_local_paths: bool
    max_upload_mb: int

    flask_host: str
    flask_port: int
    flask_debug: bool

    log_level: str


class IniConfig:
    """
    Adapter around ConfigParser and filesystem resolution.
    Keeps INI handling out of the service code.
    """

    def __init__(self, ini_path: Path):
        self._ini_path = ini_path
        self._cfg = ConfigParser()
        read_ok = self._cfg.read(str(ini_path), encoding="utf-8-sig")
        if not read_ok:
            raise FileNotFoundError(f"INI file not found or unreadable: {ini_path}")

    @property
    def ini_path(self) -> Path:
        return self._ini_path

    @staticmethod
    def from_env_or_default() -> "IniConfig":
        ini_raw = (os.getenv("APP_INI") or "").strip()
        # If APP_INI is not set, default to repo-root-relative ini location
        ini_path = Path(ini_raw) if ini_raw else (Path(__file__).resolve().parents[2] / INI_DEFAULT_NAME)
        return IniConfig(ini_path)

    def _positive_int(self, section: str, key: str, fallback: int) -> int:
        value = self._cfg.getint(section, key, fallback=fallback)
        if value <= 0:
            raise ValueError(f"{section}.{key} must be a positive integer, got {value}")
        return value

    def load_settings(self) -> AppSettings:
        # Comparison
        xml_extensions = frozenset(
            e.strip().lstrip(".").lower()
            for e in (self._cfg.get("comparison", "xml_extensions", fallback="xml") or "").split(",")
            if e.strip().lstrip(".")
        )
        if not xml_extensions:
            raise ValueError("comparison.xml_extensions is empty in INI")

        encoding = (self._cfg.get("comparison", "encoding", fallback="utf-8-sig") or "").strip() or "utf-8-sig"
        try:
            codecs.lookup(encoding)
        except LookupError as e:
            raise ValueError(f"Unknown comparison.encoding: {encoding}") from e

        max_displayed_differences = self._positive_int("comparison", "max_displayed_differences", 10)

        # Execution
        timeout_seconds = self._positive_int("execution", "timeout_seconds", 60)
        workers = self._positive_int("execution", "workers", 2)

        # Web
        allow_local_paths = self._cfg.getboolean("web", "allow_local_paths", fallback=True)
        max_upload_mb = self._positive_int("web", "max_upload_mb", 50)

        # Flask
        flask_host = (self._cfg.get("flask", "host", fallback="127.0.0.1") or "").strip() or "127.0.0.1"
        flask_port = self._cfg.getint("flask", "port", fallback=5000)
        flask_debug = self._cfg.getboolean("flask", "debug", fallback=False)

        # Logging
        log_level = (self._cfg.get("logging", "level", fallback="INFO") or "").strip().upper() or "INFO"
        if log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown logging.level: {log_level}")

        return AppSettings(
            xml_extensions=xml_extensions,
            encoding=encoding,
            max_displayed_differences=max_displayed_differences,
            timeout_seconds=timeout_seconds,
            workers=workers,
            allow_local_paths=allow_local_paths,
            max_upload_mb=max_upload_mb,
            flask_host=flask_host,
            flask_port=flask_port,
            flask_debug=flask_debug,
            log_level=log_level,
        )
