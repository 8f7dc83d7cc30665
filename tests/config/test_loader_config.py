# tests/config/test_loader_config.py
"""
Loader Configuration Tests

Code defaults, YAML input and validation issues.
"""

import pytest

from templatestore.config import LoaderConfig, load_config, validate_config
from templatestore.core.errors import LoaderConfigError
from templatestore.core.loader.store import Store
from templatestore.core.templates.parser import YamlTemplateParser
from templatestore.infra.catalog import FileSystemCatalog, MemoryCatalog


class TestLoaderConfig:
    """Construction"""

    def test_defaults(self):
        config = LoaderConfig.default()

        assert config.templates == ()
        assert config.concurrency == 1
        assert isinstance(config.catalog, FileSystemCatalog)
        assert isinstance(config.parser, YamlTemplateParser)

    def test_sequences_become_tuples(self):
        config = LoaderConfig(templates=["a", "b"], tags="cve")

        assert config.templates == ("a", "b")
        assert config.tags == ("cve",)

    def test_default_catalog_uses_templates_directory(self, tmp_path):
        config = LoaderConfig(templates_directory=str(tmp_path))

        assert config.catalog.templates_directory == tmp_path.resolve()

    def test_from_dict_ignores_unknown_keys(self):
        catalog = MemoryCatalog()
        config = LoaderConfig.from_dict(
            {"templates": ["cves/"], "exclude_tags": "dos", "bogus": 1, "catalog": "ignored"},
            catalog=catalog,
        )

        assert config.templates == ("cves/",)
        assert config.exclude_tags == ("dos",)
        assert config.catalog is catalog

    def test_from_dict_rejects_non_mapping(self):
        with pytest.raises(LoaderConfigError):
            LoaderConfig.from_dict(["templates"])

    def test_to_dict(self):
        config = LoaderConfig(tags=("cve",), concurrency=2)

        data = config.to_dict()

        assert data["tags"] == ["cve"]
        assert data["concurrency"] == 2
        assert "catalog" not in data


class TestLoadConfig:
    """YAML input"""

    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.yml")

        assert config.templates == ()

    def test_top_level_options(self, tmp_path):
        path = tmp_path / "loader.yml"
        path.write_text(
            "templates:\n  - cves/\nexclude_tags: dos,fuzz\nseverities: [high, critical]\nconcurrency: 4\n",
            encoding="utf-8",
        )

        config = load_config(path)

        assert config.templates == ("cves/",)
        assert config.exclude_tags == ("dos,fuzz",)
        assert config.severities == ("high", "critical")
        assert config.concurrency == 4

    def test_nested_loader_section(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("loader:\n  tags: [cve]\nother: {}\n", encoding="utf-8")

        assert load_config(path).tags == ("cve",)

    def test_scalar_selector_is_reported(self, tmp_path):
        path = tmp_path / "loader.yml"
        path.write_text("severities: 5\n", encoding="utf-8")

        config = load_config(path)

        assert config.severities == (5,)
        assert any(issue.level == "error" and issue.path == "loader.severities" for issue in validate_config(config))
        with pytest.raises(LoaderConfigError, match="severities"):
            Store(config)

    def test_scalar_selector_from_dict(self):
        config = LoaderConfig.from_dict({"tags": 5})

        assert config.tags == (5,)
        with pytest.raises(LoaderConfigError):
            Store(config)

    def test_unreadable_path_raises(self, tmp_path):
        with pytest.raises(LoaderConfigError, match="could not read"):
            load_config(tmp_path)

    def test_invalid_yaml_raises(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("tags: [unclosed\n", encoding="utf-8")

        with pytest.raises(LoaderConfigError):
            load_config(path)


class TestValidateConfig:
    """Issues"""

    def test_clean_config(self):
        assert validate_config(LoaderConfig(tags=("cve",), severities=("high",))) == []

    def test_bad_concurrency(self):
        issues = validate_config(LoaderConfig(concurrency=0))

        assert [issue.level for issue in issues] == ["error"]
        assert issues[0].path == "loader.concurrency"

    def test_non_string_entries(self):
        issues = validate_config(LoaderConfig(tags=("cve", 42)))

        assert any(issue.level == "error" and issue.path == "loader.tags" for issue in issues)

    def test_unknown_severity(self):
        issues = validate_config(LoaderConfig(severities=("high, urgent",)))

        assert len(issues) == 1
        assert issues[0].level == "warn"
        assert "urgent" in issues[0].message

    def test_requested_and_excluded_tag(self):
        issues = validate_config(LoaderConfig(tags=("cve", "rce"), exclude_tags=("rce",)))

        assert len(issues) == 1
        assert "rce" in issues[0].message

        rescued = validate_config(LoaderConfig(tags=("rce",), exclude_tags=("rce",), include_tags=("rce",)))
        assert rescued == []

    def test_include_templates_without_exclude(self):
        issues = validate_config(LoaderConfig(include_templates=("a.yaml",)))

        assert [issue.path for issue in issues] == ["loader.include_templates"]
