from __future__ import annotations
import os
import re
from pathlib import Path


# Resolve installation dir (fig package directory)
_FIG_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_DICTIONARY_PATH = _FIG_DIR / 'data' / 'dict.txt'

# Recognised FIG_DEBUG switches
DEBUG_SWITCHES = frozenset({'tokens', 'ast'})


def path_from_env(var: str, default: Path) -> Path:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return Path(raw.strip()).expanduser()


def get_dictionary_path() -> Path:
    return path_from_env('FIG_DICTIONARY_PATH', _DEFAULT_DICTIONARY_PATH)


def debug_switches(raw: str | None = None) -> frozenset[str]:
    """Parse FIG_DEBUG (e.g. "tokens,ast"); unknown switches are ignored."""
    if raw is None:
        raw = os.environ.get('FIG_DEBUG', '')
    requested = {part.lower() for part in re.split(r'[\s,]+', raw) if part}
    if 'all' in requested:
        return DEBUG_SWITCHES
    return frozenset(requested & DEBUG_SWITCHES)
