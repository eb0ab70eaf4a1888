"""Tests for lumen.toml loading."""

from pathlib import Path

import pytest

from lumen.core.errors import ConfigError
from lumen.core.manifest import LumenConfig, load_manifest


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    config = load_manifest(tmp_path / "lumen.toml")
    assert config == LumenConfig()
    assert config.compile.id_prefix == "lm"
    assert config.runtime.style_id == "lumen-styles"
    assert config.runtime.root_id == "lumen-root"


def test_values_are_read(tmp_path: Path) -> None:
    path = tmp_path / "lumen.toml"
    path.write_text(
        """
[compile]
id_prefix = "ui"

[runtime]
root_id = "app"
mount_class = "ui-mount"
""",
        encoding="utf-8",
    )
    config = load_manifest(path)
    assert config.compile.id_prefix == "ui"
    assert config.runtime.root_id == "app"
    assert config.runtime.mount_class == "ui-mount"
    assert config.runtime.script_type == "text/lumen"


def test_unknown_keys_are_ignored(tmp_path: Path) -> None:
    path = tmp_path / "lumen.toml"
    path.write_text('[runtime]\ntheme = "dark"\n[extra]\nx = 1\n', encoding="utf-8")
    assert load_manifest(path) == LumenConfig()


def test_malformed_toml(tmp_path: Path) -> None:
    path = tmp_path / "lumen.toml"
    path.write_text("[compile\nid_prefix = ", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_manifest(path)


def test_section_must_be_a_table(tmp_path: Path) -> None:
    path = tmp_path / "lumen.toml"
    path.write_text('runtime = "yes"\n', encoding="utf-8")
    with pytest.raises(ConfigError) as exc:
        load_manifest(path)
    assert "[runtime] must be a table" in str(exc.value)


def test_values_must_be_strings(tmp_path: Path) -> None:
    path = tmp_path / "lumen.toml"
    path.write_text("[compile]\nid_prefix = 3\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_manifest(path)
