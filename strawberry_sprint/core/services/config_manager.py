"""
config_manager.py
-----------------
Config file loading and saving for scene tuning.

Features:
- YAML (.yaml/.yml), JSON and Python (DEFAULT_CONFIG) sources
- Bare filenames resolved through a one-time index of the config dirs
- Recursive merge over a defaults dict; '_notes' keys are documentation only
- Non-strict loads warn and fall back to defaults; strict loads raise ConfigError
"""

import os
import json
import importlib.util

import yaml

from strawberry_sprint.core.debug.debug_logger import DebugLogger
from strawberry_sprint.core.errors import ConfigError


# ===========================================================
# Configuration
# ===========================================================

PACKAGE_CONFIG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "config")

# Earlier directories win when two hold the same filename
SEARCH_DIRS = [
    ".",
    "config",
    PACKAGE_CONFIG_DIR,
]

NOTES_KEY = "_notes"

_FILE_INDEX = None


# ===========================================================
# File Loaders
# ===========================================================

def _read_yaml(path):
    with open(path, "r", encoding="utf-8") as f:
        # An empty document is an empty mapping
        return yaml.safe_load(f) or {}


def _read_json(path):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _read_py(path):
    """Execute a Python config file and take its DEFAULT_CONFIG."""
    if not os.path.exists(path):
        raise FileNotFoundError(path)
    spec = importlib.util.spec_from_file_location("scene_config_module", path)
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except (ImportError, SyntaxError, NameError) as e:
        raise ConfigError(f"Python config {path} failed to execute: {e}") from e
    return getattr(module, "DEFAULT_CONFIG", {})


LOADERS = {
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
    ".json": _read_json,
    ".py": _read_py,
}


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a config file and merge it over defaults.

    Args:
        filename: Path, or a bare name looked up in SEARCH_DIRS
            (the extension may be omitted).
        default_dict: Values used for anything the file leaves out.
        strict: Raise ConfigError instead of falling back to defaults.

    Returns:
        dict: New merged dict (default_dict is never modified).
    """
    defaults = default_dict or {}
    path = filename if os.path.exists(filename) else resolve_path(filename)
    loader = LOADERS.get(os.path.splitext(path)[1].lower(), _read_yaml)

    try:
        data = loader(path)
        if not isinstance(data, dict):
            raise ConfigError(f"{path}: top level must be a mapping, got {type(data).__name__}")
    except (OSError, ValueError, yaml.YAMLError) as e:
        # JSONDecodeError and ConfigError are both ValueErrors
        if strict:
            raise ConfigError(f"Could not load config {filename}: {e}") from e
        DebugLogger.warn(f"Using defaults, {path} unreadable: {e}", category="loading")
        return merge_config(defaults, {})

    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return merge_config(defaults, data)


def save_config(path, data):
    """Write a config dict as YAML (used to dump the effective scene config)."""
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False)
    DebugLogger.system(f"Wrote {path}", category="loading")


def merge_config(default, override):
    """Recursively overlay override on default, skipping '_notes' keys."""
    merged = {
        key: merge_config(value, {}) if isinstance(value, dict) else value
        for key, value in default.items()
        if key != NOTES_KEY
    }
    for key, value in override.items():
        if key == NOTES_KEY:
            continue
        base = merged.get(key)
        if isinstance(value, dict) and isinstance(base, dict):
            merged[key] = merge_config(base, value)
        elif isinstance(value, dict):
            merged[key] = merge_config(value, {})
        else:
            merged[key] = value
    return merged


# ===========================================================
# Path Resolution
# ===========================================================

def build_file_index():
    """Map every config filename in SEARCH_DIRS to its path."""
    global _FILE_INDEX
    _FILE_INDEX = {}

    for directory in SEARCH_DIRS:
        if not os.path.isdir(directory):
            continue
        for name in sorted(os.listdir(directory)):
            if os.path.splitext(name)[1].lower() in LOADERS:
                _FILE_INDEX.setdefault(name, os.path.join(directory, name))

    DebugLogger.init(f"Config index: {len(_FILE_INDEX)} files", category="loading")


def resolve_path(filename):
    """Indexed path for a bare filename, or filename itself when unknown."""
    if _FILE_INDEX is None:
        build_file_index()

    name = filename.replace("\\", "/").lstrip("/")
    if name in _FILE_INDEX:
        return _FILE_INDEX[name]
    for ext in LOADERS:
        if name + ext in _FILE_INDEX:
            return _FILE_INDEX[name + ext]
    return filename
