"""
pdf2txt configuration
Environment variables, optionally loaded from a .env file
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class ConfigError(ValueError):
    pass


def _int(name: str, default: str) -> int:
    raw = os.getenv(name, default).strip()
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    library: str
    pdftotext_bin: str
    default_folder: str
    open_folder: bool
    log_level: str

    @property
    def default_output_dir(self) -> Path:
        return Path.home() / "Desktop" / self.default_folder


@lru_cache()
def get_settings() -> Settings:
    """Read settings from the environment (cached; call cache_clear() to reload)"""
    return Settings(
        host=os.getenv("PDF2TXT_HOST", "127.0.0.1"),
        port=_int("PDF2TXT_PORT", "8082"),
        library=os.getenv("PDF2TXT_LIBRARY", "pdfminer").strip().lower(),
        pdftotext_bin=os.getenv("PDF2TXT_PDFTOTEXT", "pdftotext"),
        default_folder=os.getenv("PDF2TXT_DEFAULT_FOLDER", "PDF Converted"),
        open_folder=_flag("PDF2TXT_OPEN_FOLDER", "1"),
        log_level=os.getenv("PDF2TXT_LOG_LEVEL", "INFO").upper(),
    )
