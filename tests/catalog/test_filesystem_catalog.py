# tests/catalog/test_filesystem_catalog.py
"""
FileSystem Catalog Tests

Resolution order: glob, absolute path, working directory, templates directory.
"""

import logging

from templatestore.infra.catalog import FileSystemCatalog, MemoryCatalog


class TestFileSystemCatalog:
    """Definition resolution"""

    def test_directory_is_walked_recursively_in_sorted_order(self, tmp_path, write_template):
        b = write_template("rules/b.yaml")
        a = write_template("rules/nested/a.yml")
        write_template("rules/readme.md", raw="# not a template\n")

        catalog = FileSystemCatalog()
        paths = catalog.get_templates_path([str(tmp_path / "rules")])

        assert paths == [b, a]

    def test_absolute_file(self, write_template):
        path = write_template("x.yaml")

        assert FileSystemCatalog().get_templates_path([path]) == [path]

    def test_relative_to_templates_directory(self, tmp_path, write_template):
        path = write_template("base/cves/x.yaml")

        catalog = FileSystemCatalog(templates_directory=tmp_path / "base")

        assert catalog.get_templates_path(["cves/x.yaml"]) == [path]
        assert catalog.get_templates_path(["cves"]) == [path]

    def test_relative_to_working_directory(self, tmp_path, write_template, monkeypatch):
        path = write_template("work/x.yaml")
        monkeypatch.chdir(tmp_path / "work")

        assert FileSystemCatalog().get_templates_path(["x.yaml"]) == [path]

    def test_glob_anchored_at_templates_directory(self, tmp_path, write_template):
        first = write_template("base/cves/2021-1.yaml")
        second = write_template("base/cves/2022-1.yaml")
        write_template("base/misc/other.yaml")

        catalog = FileSystemCatalog(templates_directory=tmp_path / "base")

        assert catalog.get_templates_path(["cves/*.yaml"]) == [first, second]
        assert catalog.get_templates_path(["**/2022-*.yaml"]) == [second]

    def test_absolute_glob(self, tmp_path, write_template):
        path = write_template("rules/x.yaml")

        assert FileSystemCatalog().get_templates_path([str(tmp_path / "rules" / "*.yaml")]) == [path]

    def test_duplicates_are_collapsed(self, tmp_path, write_template):
        path = write_template("rules/x.yaml")

        paths = FileSystemCatalog().get_templates_path([path, str(tmp_path / "rules"), path])

        assert paths == [path]

    def test_missing_definition_warns_and_continues(self, tmp_path, write_template, caplog):
        path = write_template("x.yaml")
        missing = str(tmp_path / "nope.yaml")

        with caplog.at_level(logging.WARNING):
            paths = FileSystemCatalog().get_templates_path([missing, path])

        assert paths == [path]
        assert any(missing in record.getMessage() for record in caplog.records)

    def test_unmatched_glob_warns(self, tmp_path, caplog):
        paths = FileSystemCatalog().get_templates_path([str(tmp_path / "*.yaml")])

        assert paths == []
        assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 1

    def test_ignore_files(self, tmp_path, write_template):
        keep = write_template("rules/keep.yaml")
        write_template("rules/fuzzing/slow.yaml")

        catalog = FileSystemCatalog(ignore_files=["fuzzing/"])

        assert catalog.get_templates_path([str(tmp_path / "rules")]) == [keep]


class TestMemoryCatalog:
    """Static mapping"""

    def test_unknown_definitions_resolve_to_nothing(self):
        catalog = MemoryCatalog({"a": ["/a.yaml"]})

        assert catalog.get_templates_path(["a", "b"]) == ["/a.yaml"]

    def test_add_and_clear(self):
        catalog = MemoryCatalog()
        catalog.add("a", ["/a.yaml"])
        catalog.add("a", ["/b.yaml"])

        assert catalog.get_templates_path(["a"]) == ["/a.yaml", "/b.yaml"]

        catalog.clear()
        assert catalog.get_templates_path(["a"]) == []
