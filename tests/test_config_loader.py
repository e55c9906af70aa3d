"""
Tests for htc.yaml loading, overrides and template data assembly.
"""

import pytest
from pydantic import ValidationError

from htc.config import (
    BuildConfig,
    ConfigError,
    TemplateData,
    load_build_config,
    load_template_data,
    parse_overrides,
)
from tests.infrastructure.file_utils import write, write_json


class TestLoadBuildConfig:

    def test_defaults_without_file(self, tmp_path):
        cfg = load_build_config(tmp_path)

        assert cfg == BuildConfig()
        assert cfg.package_file == "package.json"
        assert cfg.dialect == "coffee"

    def test_empty_file(self, tmp_path):
        write(tmp_path / "htc.yaml", "")

        assert load_build_config(tmp_path) == BuildConfig()

    def test_values_from_yaml(self, tmp_path):
        write(tmp_path / "htc.yaml", "dialect: js\nsrc_dir: app\nversion_file: null\n")

        cfg = load_build_config(tmp_path)

        assert cfg.dialect == "js"
        assert cfg.src_dir == "app"
        assert cfg.version_file is None

    def test_unknown_key(self, tmp_path):
        write(tmp_path / "htc.yaml", "dialekt: js\n")

        with pytest.raises(ConfigError, match="dialekt"):
            load_build_config(tmp_path)

    def test_not_a_mapping(self, tmp_path):
        write(tmp_path / "htc.yaml", "- a\n- b\n")

        with pytest.raises(ConfigError, match="expected a mapping"):
            load_build_config(tmp_path)

    def test_invalid_yaml(self, tmp_path):
        write(tmp_path / "htc.yaml", "dialect: [js\n")

        with pytest.raises(ConfigError, match="Failed to parse"):
            load_build_config(tmp_path)

    def test_config_is_frozen(self):
        cfg = BuildConfig()

        with pytest.raises(ValidationError):
            cfg.dialect = "js"


class TestOverrides:

    def test_split_at_first_equals(self):
        assert parse_overrides(["a=b=c", "tests_enabled=true", "empty="]) == {
            "a": "b=c",
            "tests_enabled": "true",
            "empty": "",
        }

    @pytest.mark.parametrize("item", ["novalue", "=x"])
    def test_malformed(self, item):
        with pytest.raises(ConfigError, match="Expected KEY=VALUE"):
            parse_overrides([item])


class TestTemplateData:

    def test_package_then_version_into_meta(self, project):
        data = load_template_data(project, BuildConfig())

        assert data["name"] == "demo"
        assert data.meta.name == "Demo"
        assert data.meta.version == "1.2.3"

    def test_meta_created_when_missing(self, tmp_path):
        write_json(tmp_path / "package.json", {"name": "x"})
        write_json(tmp_path / "version.json", {"version": "2"})

        data = load_template_data(tmp_path, BuildConfig())

        assert data.meta.to_dict() == {"version": "2"}

    def test_overrides_applied_last(self, project):
        data = load_template_data(project, BuildConfig(), {"name": "override", "meta": "flat"})

        assert data.name == "override"
        assert data.meta == "flat"

    def test_skipped_sources(self, tmp_path):
        cfg = BuildConfig(package_file=None, version_file=None)

        assert len(load_template_data(tmp_path, cfg)) == 0

    def test_missing_package_file_propagates(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_template_data(tmp_path, BuildConfig())

    def test_invalid_json_propagates(self, tmp_path):
        write(tmp_path / "package.json", "{not json")

        with pytest.raises(ValueError):
            load_template_data(tmp_path, BuildConfig(version_file=None))

    def test_package_must_be_object(self, tmp_path):
        write_json(tmp_path / "package.json", [1, 2])

        with pytest.raises(ConfigError, match="expected a JSON object"):
            load_template_data(tmp_path, BuildConfig(version_file=None))

    def test_read_only(self):
        data = TemplateData({"a": {"b": 1}})

        with pytest.raises(TypeError):
            data["a"] = 2
        assert data.a.b == 1
        with pytest.raises(AttributeError):
            data.missing
