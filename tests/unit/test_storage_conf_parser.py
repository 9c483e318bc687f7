"""
Unit tests for the storage configuration parser.
"""
import pytest
from bldr.PARSERS.storage_conf_parser import (
    CONF_ENV_VAR, DEFAULT_DRIVER, StorageConfParser, default_root,
)
from bldr.UTILS.errors import ConfigError
from bldr.UTILS.string_interpolation import PathInterpolator


def test_parse_storage_section():
    parser = StorageConfParser(context={"HOME": "/home/u"})
    options = parser.parse_from_string("storage:\n  root: /srv/store\n  driver: vfs\n")
    assert options.root == "/srv/store"
    assert options.driver == "vfs"


def test_parse_interpolates_root():
    parser = StorageConfParser(context={"HOME": "/home/u"})
    options = parser.parse_from_string("storage:\n  root: ${HOME}/store\n")
    assert options.root == "/home/u/store"
    assert options.driver == DEFAULT_DRIVER


def test_parse_empty_uses_defaults():
    context = {"HOME": "/home/u", "XDG_DATA_HOME": "/data"}
    options = StorageConfParser(context=context).parse_from_string("")
    assert options.root == default_root(context)
    assert options.driver == "overlay"


def test_parse_unset_variable_raises():
    parser = StorageConfParser(context={})
    with pytest.raises(ConfigError):
        parser.parse_from_string("storage:\n  root: ${NOPE}/store\n")


def test_parse_invalid_yaml_raises():
    with pytest.raises(ConfigError):
        StorageConfParser(context={}).parse_from_string("storage: [unclosed")


def test_parse_non_mapping_raises():
    with pytest.raises(ConfigError):
        StorageConfParser(context={}).parse_from_string("- a\n- b\n")
    with pytest.raises(ConfigError):
        StorageConfParser(context={}).parse_from_string("storage: plain\n")


def test_parse_bad_driver_type_raises():
    with pytest.raises(ConfigError):
        StorageConfParser(context={}).parse_from_string("storage:\n  root: /s\n  driver: [a]\n")


def test_load_explicit_missing_file_raises(tmp_path):
    parser = StorageConfParser(context={"HOME": str(tmp_path)})
    with pytest.raises(ConfigError):
        parser.load(str(tmp_path / "missing.yaml"))


def test_load_from_environment_variable(tmp_path):
    conf = tmp_path / "conf.yaml"
    conf.write_text("storage:\n  root: /from/env\n")
    parser = StorageConfParser(context={"HOME": str(tmp_path), CONF_ENV_VAR: str(conf)})
    assert parser.load().root == "/from/env"


def test_load_default_file(tmp_path):
    conf_dir = tmp_path / ".config" / "bldr"
    conf_dir.mkdir(parents=True)
    (conf_dir / "storage.yaml").write_text("storage:\n  driver: btrfs\n")
    options = StorageConfParser(context={"HOME": str(tmp_path)}).load()
    assert options.driver == "btrfs"


def test_load_without_any_file(tmp_path):
    context = {"HOME": str(tmp_path)}
    options = StorageConfParser(context=context).load()
    assert options.root == default_root(context)


def test_default_root_user(monkeypatch):
    monkeypatch.setattr("os.geteuid", lambda: 1000)
    assert default_root({"XDG_DATA_HOME": "/data"}) == "/data/bldr/storage"
    assert default_root({"HOME": "/home/u"}) == "/home/u/.local/share/bldr/storage"


def test_default_root_system(monkeypatch):
    monkeypatch.setattr("os.geteuid", lambda: 0)
    assert default_root({"HOME": "/root"}) == "/var/lib/bldr/storage"


class TestPathInterpolator:
    """Tests for PathInterpolator."""

    def test_default_value(self):
        interpolator = PathInterpolator({})
        assert interpolator.expand("${DATA:-/srv}/bldr") == "/srv/bldr"

    def test_empty_value_takes_default(self):
        interpolator = PathInterpolator({"DATA": ""})
        assert interpolator.expand("${DATA:-/srv}") == "/srv"

    def test_tilde(self):
        interpolator = PathInterpolator({"HOME": "/home/u"})
        assert interpolator.expand("~/store") == "/home/u/store"
        assert interpolator.expand("/abs/~/x") == "/abs/~/x"

    def test_missing_variable(self):
        with pytest.raises(KeyError):
            PathInterpolator({}).expand("${MISSING}")
