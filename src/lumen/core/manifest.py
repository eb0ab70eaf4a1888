"""
lumen.toml loading.

    [compile]
    id_prefix = "lm"

    [runtime]
    script_type = "text/lumen"
    style_id = "lumen-styles"
    root_id = "lumen-root"
    mount_class = "lumen-mount"

Every key is optional. A missing file gives the defaults.
"""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from .errors import ConfigError
from .ids import DEFAULT_ID_PREFIX

MANIFEST_NAME = "lumen.toml"


@dataclass
class CompileConfig:
    """Compiler settings."""

    id_prefix: str = DEFAULT_ID_PREFIX


@dataclass
class RuntimeConfig:
    """Where the runtime host finds sources and puts output in a page."""

    script_type: str = "text/lumen"
    style_id: str = "lumen-styles"
    root_id: str = "lumen-root"
    mount_class: str = "lumen-mount"
    target_attribute: str = "target"


@dataclass
class LumenConfig:
    compile: CompileConfig = field(default_factory=CompileConfig)
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)


def _section(data: dict[str, Any], name: str, cls: type, path: Path) -> Any:
    raw = data.get(name, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: [{name}] must be a table")

    known = {f.name for f in fields(cls)}
    values = {}
    for key, value in raw.items():
        if key not in known:
            continue
        if not isinstance(value, str):
            raise ConfigError(f"{path}: {name}.{key} must be a string")
        values[key] = value
    return cls(**values)


def load_manifest(path: Path) -> LumenConfig:
    """
    Load lumen.toml.

    Args:
        path: Path to the manifest file

    Returns:
        LumenConfig; defaults if the file does not exist

    Raises:
        ConfigError: If the file is not valid TOML or has the wrong shape
    """
    if not path.exists():
        return LumenConfig()

    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{path}: {e}") from e

    return LumenConfig(
        compile=_section(data, "compile", CompileConfig, path),
        runtime=_section(data, "runtime", RuntimeConfig, path),
    )
