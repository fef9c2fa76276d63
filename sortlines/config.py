"""
config.py — sortlines.ini loader.

Looked up as --config PATH, else ./sortlines.ini, else ~/.sortlines.ini.
A missing file means defaults everywhere.

sortlines.ini format:
    [sortLines]
    sortEntireFile   = false
    filterBlankLines = true

    [chain:tidy]                   # usable as `sortlines tidy FILE`
    description = Drop blanks, natural sort, dedupe
    steps = remove_blanks, sort_natural, remove_duplicates
"""
import configparser
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from .errors import ConfigError
from .pipeline import POLICIES

INI_NAME = "sortlines.ini"
SECTION  = "sortLines"


@dataclass(frozen=True)
class Settings:
    sort_entire_file:   bool = False
    filter_blank_lines: bool = False

    def override(self, sort_entire_file: Optional[bool] = None,
                 filter_blank_lines: Optional[bool] = None) -> "Settings":
        """Return a copy with every non-None argument applied."""
        changes = {}
        if sort_entire_file is not None:
            changes["sort_entire_file"] = sort_entire_file
        if filter_blank_lines is not None:
            changes["filter_blank_lines"] = filter_blank_lines
        return replace(self, **changes)


def find_ini(explicit: Optional[str] = None) -> Optional[Path]:
    if explicit:
        path = Path(explicit)
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
        return path
    for candidate in (Path.cwd() / INI_NAME, Path.home() / f".{INI_NAME}"):
        if candidate.is_file():
            return candidate
    return None


def load_ini(path: Optional[Path]) -> configparser.ConfigParser:
    # keep key case: sortEntireFile, not sortentirefile
    cfg = configparser.ConfigParser()
    cfg.optionxform = str
    if path is not None:
        try:
            cfg.read(path, encoding="utf-8")
        except configparser.Error as exc:
            raise ConfigError(f"Cannot parse {path}: {exc}") from exc
    return cfg


def get_settings(cfg: configparser.ConfigParser) -> Settings:
    if not cfg.has_section(SECTION):
        return Settings()
    try:
        return Settings(
            sort_entire_file=cfg.getboolean(SECTION, "sortEntireFile", fallback=False),
            filter_blank_lines=cfg.getboolean(SECTION, "filterBlankLines", fallback=False),
        )
    except ValueError as exc:
        raise ConfigError(f"[{SECTION}] {exc}") from exc


def get_chains(cfg: configparser.ConfigParser) -> dict:
    """
    Return chain definitions from the ini, keyed by name.
    Each value: {name, description, steps: [str]}
    """
    chains = {}
    for section in cfg.sections():
        if not section.startswith("chain:"):
            continue
        name = section[len("chain:"):].strip()
        if name in POLICIES:
            raise ConfigError(f"Chain '{name}' would shadow the built-in policy of the same name")
        raw   = cfg.get(section, "steps", fallback="")
        steps = [s.strip() for s in raw.split(",") if s.strip()]
        chains[name] = {
            "name":        name,
            "description": cfg.get(section, "description", fallback=""),
            "steps":       steps,
        }
    return chains
