"""Application configuration management."""

from __future__ import annotations

import codecs
import json
import logging
import os
from pathlib import Path

from docpick.core.document import DEFAULT_TITLE

CONFIG_DIR = Path.home() / ".config" / "docpick"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_CONFIG = {
    # Dialog
    "dialog_title": DEFAULT_TITLE,
    "encoding": "utf-8",
    "remember_last_directory": True,
    "last_directory": None,
    # Behavior
    "copy_to_clipboard": False,
    "show_notifications": True,
    # Stats
    "total_imports": 0,
}

_LOG = logging.getLogger("docpick")


def normalize_config(config):
    """Normalize config data, dropping values that would break a pick."""
    normalized = DEFAULT_CONFIG.copy()
    if isinstance(config, dict):
        normalized.update(config)

    try:
        codecs.lookup(str(normalized.get("encoding")))
    except LookupError:
        normalized["encoding"] = DEFAULT_CONFIG["encoding"]

    if not isinstance(normalized.get("dialog_title"), str) or not normalized["dialog_title"].strip():
        normalized["dialog_title"] = DEFAULT_CONFIG["dialog_title"]

    last_directory = normalized.get("last_directory")
    if not isinstance(last_directory, str) or not os.path.isdir(last_directory):
        normalized["last_directory"] = None

    total = normalized.get("total_imports")
    if not isinstance(total, int) or isinstance(total, bool) or total < 0:
        normalized["total_imports"] = 0
    return normalized


def load_config():
    """Load config from file or create default."""
    try:
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        if CONFIG_FILE.exists():
            with open(CONFIG_FILE, encoding="utf-8") as f:
                saved = json.load(f)
                return normalize_config(saved)
    except Exception as exc:
        _LOG.warning(f"Failed to load config from {CONFIG_FILE}: {exc}")
    return normalize_config({})


def save_config(config):
    """Save config to file."""
    try:
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        normalized = normalize_config(config)
        tmp_path = CONFIG_FILE.with_suffix(".json.tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(normalized, f, indent=2)
        tmp_path.replace(CONFIG_FILE)
    except Exception as exc:
        _LOG.warning(f"Failed to save config to {CONFIG_FILE}: {exc}")
