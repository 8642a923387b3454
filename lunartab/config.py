#!/usr/bin/env python3
# lunartab/config.py
from __future__ import annotations

"""
Configuration loader (stdlib-only).

Precedence (low → high):
  1) Built-in defaults
  2) Files in CWD: .env, lunartab.ini, lunartab.json, lunartab.toml
  3) Environment variables prefixed with LUNARTAB_

Validation:
  - FORMAT: non-empty str (resolved against the registry at render time)
  - ALIGN: one of {'left', 'right', 'center'}
  - EMPTY: str placeholder for missing cells
  - HIDE_LINES: comma-separated suppressible line names
  - FLOAT_FORMAT: None or a format spec accepted by format(float, spec)
  - LOG_LEVEL: None or one of {'DEBUG','INFO','WARNING','ERROR','CRITICAL'}
  - LOG_FILE_PATH: None or normalized path
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping
import configparser
import json
import os
import re
import tomllib

from lunartab.table import DEFAULT_ALIGN, DEFAULT_FORMAT, SUPPRESSIBLE_LINES

ENV_PREFIX = "LUNARTAB_"

DEFAULTS: dict[str, Any] = {
    "FORMAT": DEFAULT_FORMAT,
    "ALIGN": DEFAULT_ALIGN,
    "EMPTY": "",
    "HIDE_LINES": "",
    "FLOAT_FORMAT": None,
    "LOG_LEVEL": None,
    "LOG_FILE_PATH": None,
}

_ALIGNMENTS = {"left", "right", "center"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


# ---------- data model ----------

@dataclass(frozen=True)
class TableConfig:
    table_format: str
    align: str
    empty: str
    hide_lines: frozenset[str]
    float_format: str | None
    log_level: str | None
    log_file_path: Path | None

    # Unrecognized keys preserved for debugging/forward-compat
    extra: dict[str, Any] = field(default_factory=dict)


# ---------- file loaders (stdlib) ----------

def _load_env_file(path: Path) -> dict[str, str]:
    """Very small .env parser: KEY=VALUE, supports quotes; ignores comments/blank lines."""
    out: dict[str, str] = {}
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return out

    line_re = re.compile(r"""^\s*([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.*?)\s*$""")
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        m = line_re.match(line)
        if not m:
            continue
        k, v = m.group(1), m.group(2)
        if (v.startswith("'") and v.endswith("'")) or (v.startswith('"') and v.endswith('"')):
            v = v[1:-1]
        # .env is shared with other tools; only our prefixed keys count
        if k.upper().startswith(ENV_PREFIX):
            out[k.upper()[len(ENV_PREFIX):]] = v
    return out


def _load_ini_file(path: Path) -> dict[str, str]:
    cfg = configparser.ConfigParser()
    if not cfg.read(path, encoding="utf-8"):
        return {}
    flat: dict[str, str] = {}
    for sec in cfg.sections():
        for k, v in cfg.items(sec):
            flat[k.upper()] = v
    return flat


def _load_json_file(path: Path) -> dict[str, Any]:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _load_toml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except (FileNotFoundError, tomllib.TOMLDecodeError):
        return {}


def _flatten_mapping(obj: Any, prefix: str = "") -> dict[str, Any]:
    """
    Flatten nested dicts to UPPER_SNAKE keys.
    Example: {'log': {'level': 'DEBUG'}} -> {'LOG_LEVEL': 'DEBUG'}
    """
    flat: dict[str, Any] = {}
    if isinstance(obj, Mapping):
        for k, v in obj.items():
            key = f"{prefix}_{k}" if prefix else str(k)
            if isinstance(v, Mapping):
                flat.update(_flatten_mapping(v, key))
            else:
                flat[str(key).upper()] = v
    return flat


def _find_config_files(base: Path | None = None) -> list[Path]:
    cwd = base or Path.cwd()
    return [
        cwd / ".env",
        cwd / "lunartab.ini",
        cwd / "lunartab.json",
        cwd / "lunartab.toml",
    ]


# ---------- normalization & coercion ----------

def _as_opt_str(val: Any) -> str | None:
    return None if val is None or str(val).strip().lower() in {"", "none"} else str(val)


def _as_align(val: Any) -> str:
    align = str(val).strip().lower() or DEFAULT_ALIGN
    if align not in _ALIGNMENTS:
        raise ValueError(
            f"ALIGN must be one of {sorted(_ALIGNMENTS)}, got {val!r}")
    return align


def _as_hide_lines(val: Any) -> frozenset[str]:
    if isinstance(val, (list, tuple, set, frozenset)):
        names = [str(v).strip() for v in val]
    else:
        names = [part.strip() for part in str(val or "").split(",")]
    hidden = frozenset(name for name in names if name)
    unknown = hidden - SUPPRESSIBLE_LINES
    if unknown:
        raise ValueError(
            f"HIDE_LINES entries must be among {sorted(SUPPRESSIBLE_LINES)}, "
            f"got {sorted(unknown)}")
    return hidden


def _as_float_format(val: Any) -> str | None:
    spec = _as_opt_str(val)
    if spec is None:
        return None
    try:
        format(1.5, spec)
    except ValueError as exc:
        raise ValueError(f"FLOAT_FORMAT is not a valid float format: {spec!r}") from exc
    return spec


def _as_log_level(val: Any) -> str | None:
    lv = _as_opt_str(val)
    if lv is None:
        return None
    up = lv.upper()
    if up not in _LOG_LEVELS:
        raise ValueError(
            f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {lv!r}")
    return up


def _as_opt_path(val: Any) -> Path | None:
    v = _as_opt_str(val)
    if v is None:
        return None
    return Path(os.path.expandvars(os.path.expanduser(v))).resolve()


# ---------- merge & load ----------

def _normalize_keys(d: Mapping[str, Any]) -> dict[str, Any]:
    return {str(k).upper(): v for k, v in d.items()}


def _merge_sources(
    base: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    merged: dict[str, Any] = dict(DEFAULTS)

    for file in _find_config_files(base):
        if file.name == ".env":
            merged.update(_load_env_file(file))
        elif file.suffix == ".ini":
            merged.update(_normalize_keys(_load_ini_file(file)))
        elif file.suffix == ".json":
            merged.update(_normalize_keys(
                _flatten_mapping(_load_json_file(file))))
        elif file.suffix == ".toml":
            merged.update(_normalize_keys(
                _flatten_mapping(_load_toml_file(file))))

    # Environment variables override all; only take our prefix
    env = os.environ if environ is None else environ
    merged.update({k[len(ENV_PREFIX):]: v for k, v in env.items()
                   if k.startswith(ENV_PREFIX)})
    return merged


def _validate_and_build(config: dict[str, Any]) -> TableConfig:
    table_format = _as_opt_str(config.get("FORMAT")) or DEFAULTS["FORMAT"]
    empty = config.get("EMPTY")

    recognized = set(DEFAULTS.keys())
    extra = {k: v for k, v in config.items() if k not in recognized}

    return TableConfig(
        table_format=table_format,
        align=_as_align(config.get("ALIGN", DEFAULTS["ALIGN"])),
        empty="" if empty is None else str(empty),
        hide_lines=_as_hide_lines(config.get("HIDE_LINES", "")),
        float_format=_as_float_format(config.get("FLOAT_FORMAT")),
        log_level=_as_log_level(config.get("LOG_LEVEL")),
        log_file_path=_as_opt_path(config.get("LOG_FILE_PATH")),
        extra=extra,
    )


# ---------- public API ----------

def load_config(
    base: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> TableConfig:
    """
    Load, merge, normalize, and validate configuration.
    `base` defaults to the CWD and `environ` to os.environ.
    """
    return _validate_and_build(_merge_sources(base, environ))
