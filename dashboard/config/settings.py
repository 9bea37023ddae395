"""
/**
 * @file dashboard/config/settings.py
 * @description Settings loading and merging (config.json + config.local.json + environment).
 */
"""

from __future__ import annotations

import hashlib
import json
import logging
import os
import threading
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional


REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CONFIG_PATH = os.path.join(REPO_ROOT, "config.json")
CONFIG_LOCAL_PATH = os.path.join(REPO_ROOT, "config.local.json")
CONFIG_EXAMPLE_PATH = os.path.join(REPO_ROOT, "config.example.json")

PREPARE_WEBHOOK_ENV = "N8N_PREPARE_WEBHOOK_URL"
TRANSLATE_WEBHOOK_ENV = "N8N_WEBHOOK_URL"

# Memo table in Business Express
DEFAULT_TABLE = "dab065"
DEFAULT_TARGET_LANG = "de"

logger = logging.getLogger("config_loader")


def _load_json(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r") as f:
            value = json.load(f)
            return value if isinstance(value, dict) else {}
    except FileNotFoundError:
        return {}


def _merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key] = _merge_dicts(base[key], value)
        else:
            base[key] = value
    return base


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = raw.get(name, {})
    return value if isinstance(value, dict) else {}


def _non_empty(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value.strip() else None


def _apply_env_overrides(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Environment variables win over file values; read once when settings are built."""
    webhooks = dict(_section(raw, "webhooks"))
    for key, env_name in (("prepare", PREPARE_WEBHOOK_ENV), ("translate", TRANSLATE_WEBHOOK_ENV)):
        value = _non_empty(os.getenv(env_name))
        if value:
            webhooks[key] = value
    if webhooks:
        raw["webhooks"] = webhooks
    return raw


@dataclass(frozen=True)
class Settings:
    raw: Dict[str, Any]

    @property
    def webhooks(self) -> Dict[str, str]:
        return _section(self.raw, "webhooks")

    @property
    def default_table(self) -> str:
        return _non_empty(_section(self.raw, "prepare").get("default_table")) or DEFAULT_TABLE

    @property
    def target_lang(self) -> str:
        return _non_empty(_section(self.raw, "translator").get("target_lang")) or DEFAULT_TARGET_LANG

    def resolve_prepare_webhook_url(self) -> Optional[str]:
        return _non_empty(self.webhooks.get("prepare"))

    def resolve_translate_webhook_url(self) -> Optional[str]:
        return _non_empty(self.webhooks.get("translate"))


_CACHED_SETTINGS: Optional[Settings] = None
_LAST_LOAD_TIME = 0.0
_CONFIG_HASH = ""
_SETTINGS_LOCK = threading.Lock()


def _deep_diff(d1: Dict[str, Any], d2: Dict[str, Any], path="") -> list:
    diffs = []
    for k in sorted(set(d1.keys()) | set(d2.keys())):
        p = f"{path}.{k}" if path else k
        if k not in d1:
            diffs.append(f"Added: {p}")
        elif k not in d2:
            diffs.append(f"Removed: {p}")
        elif isinstance(d1[k], dict) and isinstance(d2[k], dict):
            diffs.extend(_deep_diff(d1[k], d2[k], p))
        elif d1[k] != d2[k]:
            # Values may hold webhook URLs, only report the key.
            diffs.append(f"Changed: {p}")
    return diffs


def reload_settings(
    base_path: str = CONFIG_PATH,
    local_path: str = CONFIG_LOCAL_PATH,
    example_path: str = CONFIG_EXAMPLE_PATH,
    force: bool = False,
) -> Settings:
    global _CACHED_SETTINGS, _LAST_LOAD_TIME, _CONFIG_HASH

    with _SETTINGS_LOCK:
        now = time.time()
        # Debounce: 500ms
        if not force and _CACHED_SETTINGS and (now - _LAST_LOAD_TIME < 0.5):
            return _CACHED_SETTINGS

        try:
            base_cfg = _load_json(base_path)
            if not base_cfg.get("webhooks") and os.path.exists(example_path):
                base_cfg = _merge_dicts(_load_json(example_path), base_cfg)

            local_cfg = _load_json(local_path)
            merged = _apply_env_overrides(_merge_dicts(base_cfg, local_cfg))

            # Sort keys to ensure consistent hash for same content
            new_hash = hashlib.md5(json.dumps(merged, sort_keys=True).encode("utf-8")).hexdigest()

            if _CACHED_SETTINGS and new_hash == _CONFIG_HASH:
                _LAST_LOAD_TIME = now
                return _CACHED_SETTINGS

            is_reload = _CACHED_SETTINGS is not None
            if is_reload:
                diffs = _deep_diff(_CACHED_SETTINGS.raw, merged)
                if diffs:
                    logger.info(f"Config changes detected: {'; '.join(diffs)}")

            _CACHED_SETTINGS = Settings(raw=merged)
            _CONFIG_HASH = new_hash
            _LAST_LOAD_TIME = now

            if is_reload:
                logger.info("Configuration reloaded successfully.")

        except Exception as e:
            logger.error(f"Failed to reload config: {e}. Keeping old config.")
            if not _CACHED_SETTINGS:
                logger.warning("Initializing with empty settings due to load failure.")
                _CACHED_SETTINGS = Settings(raw={})

    return _CACHED_SETTINGS


def load_settings() -> Settings:
    """
    Get current settings. Lazy loads on first call.
    Subsequent reloads are handled by the file watcher calling reload_settings().
    """
    if _CACHED_SETTINGS is None:
        return reload_settings()
    return _CACHED_SETTINGS


def get_settings() -> Settings:
    """FastAPI dependency; tests replace it through ``app.dependency_overrides``."""
    return load_settings()
