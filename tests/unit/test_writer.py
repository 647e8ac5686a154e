"""Tests for the barrel writer and ExportsGenerator."""
import pytest
import json
import tempfile
from pathlib import Path
from unittest.mock import patch
from exportgen.config import GeneratorConfig
from exportgen.core import FileTally
from exportgen.writer import ExportsGenerator, choose_extension, render_barrel, write_barrel


class TestChooseExtension:
    def test_typed(self):
        t = FileTally(typed=["/r/a.ts"])
        assert choose_extension(t) == ".ts"

    def test_script(self):
        t = FileTally(script=["/r/a.jsx"])
        assert choose_extension(t) == ".js"

    def test_conflict(self):
        t = FileTally(script=["/r/a.js"], typed=["/r/b.ts"])
        assert choose_extension(t) is None

    def test_empty(self):
        assert choose_extension(FileTally()) is None


class TestRenderBarrel:
    def test_newline_joined_without_trailing_newline(self):
        out = render_barrel(["a;", "b;"])
        assert out == "a;\nb;"


class TestWriteBarrel:
    def test_inline_overwrites(self, tmp_path):
        (tmp_path / "index.js").write_text("stale content that is longer")
        dest = write_barrel(str(tmp_path), GeneratorConfig.inline(), ".js", ["x;"])
        assert dest == str(tmp_path / "index.js")
        assert (tmp_path / "index.js").read_text() == "x;"
        assert not (tmp_path / "package.json").exists()

    def test_subdirectory_creates_dir_and_manifest(self, tmp_path):
        dest = write_barrel(str(tmp_path), GeneratorConfig.subdirectory(), ".ts", ["x;"])
        assert dest == str(tmp_path / "exports" / "module.exports.ts")
        assert Path(dest).read_text() == "x;"
        manifest = json.loads((tmp_path / "package.json").read_text())
        assert manifest == {"main": "exports/module.exports.ts"}

    def test_subdirectory_without_manifest(self, tmp_path):
        cfg = GeneratorConfig.subdirectory(write_manifest=False)
        write_barrel(str(tmp_path), cfg, ".js", ["x;"])
        assert (tmp_path / "exports" / "module.exports.js").exists()
        assert not (tmp_path / "package.json").exists()


class TestExportsGenerator:
    def setup_method(self):
        self.temp_dir = tempfile.mkdtemp()
        self.root = Path(self.temp_dir)

    def test_nothing_found(self, capsys):
        (self.root / "notes.md").write_text("# hi")
        result = ExportsGenerator(str(self.root)).generate()
        assert result.status == "empty"
        assert not result.ok
        assert "No valid files with default exports found" in capsys.readouterr().out
        assert sorted(p.name for p in self.root.iterdir()) == ["notes.md"]

    def test_written(self, capsys):
        (self.root / "widget.ts").write_text("export default function Foo() {}")
        result = ExportsGenerator(str(self.root)).generate()
        assert result.ok
        assert result.output_path == str(self.root / "index.ts")
        assert (self.root / "index.ts").read_text() == "export { default as Foo } from './widget';"
        out = capsys.readouterr().out
        assert "Index file 'index.ts'" in out
        assert str(self.root) in out

    def test_conflict_writes_nothing(self, capsys):
        (self.root / "a.js").write_text("export default A;")
        (self.root / "b.ts").write_text("export default B;")
        result = ExportsGenerator(str(self.root)).generate()
        assert result.status == "conflict"
        assert not (self.root / "index.js").exists()
        assert not (self.root / "index.ts").exists()
        assert "Conflict between TypeScript and JavaScript" in capsys.readouterr().err

    def test_conflict_from_file_without_export(self):
        # tally counts scanned files, not statements
        (self.root / "a.js").write_text("export default A;")
        (self.root / "types.ts").write_text("export type X = number;")
        result = ExportsGenerator(str(self.root)).generate()
        assert result.status == "conflict"

    def test_root_error(self):
        result = ExportsGenerator(str(self.root / "nope")).generate()
        assert result.status == "root_error"
        assert result.error

    def test_write_error_is_reported(self, capsys):
        (self.root / "a.js").write_text("export default A;")
        with patch("exportgen.writer.write_barrel", side_effect=PermissionError("read-only")):
            result = ExportsGenerator(str(self.root)).generate()
        assert result.status == "write_error"
        assert "read-only" in result.error
        assert "error writing exports" in capsys.readouterr().err

    def test_invalid_config_rejected(self):
        with pytest.raises(ValueError):
            ExportsGenerator(str(self.root), GeneratorConfig(output_mode="nowhere"))

    def test_output_dir_blocked_by_file(self, capsys):
        (self.root / "a.js").write_text("export default A;")
        (self.root / "exports").write_text("not a directory")
        result = ExportsGenerator(str(self.root), GeneratorConfig.subdirectory()).generate()
        assert result.status == "write_error"
        assert result.output_path is None
        assert (self.root / "exports").read_text() == "not a directory"
        assert not (self.root / "package.json").exists()
        assert "error writing exports" in capsys.readouterr().err


class TestUnencodableStatements:
    def test_previous_barrel_survives(self, tmp_path):
        (tmp_path / "index.js").write_text("export { default as Old } from './old';")
        with pytest.raises(UnicodeEncodeError):
            write_barrel(str(tmp_path), GeneratorConfig.inline(), ".js",
                         ["export { default as W } from './w\udcff';"])
        assert (tmp_path / "index.js").read_text() == "export { default as Old } from './old';"

    def test_generate_reports_instead_of_raising(self, tmp_path, capsys):
        (tmp_path / "a.js").write_text("export default A;")
        with patch("exportgen.writer.render_barrel", return_value="'\udcff'"):
            result = ExportsGenerator(str(tmp_path)).generate()
        assert result.status == "write_error"
        assert not (tmp_path / "index.js").exists()
        assert "error writing exports" in capsys.readouterr().err
