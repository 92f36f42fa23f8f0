"""Tests for the source-tree import scanner."""

from __future__ import annotations

import pytest

from lic.collectors.gopath import (
    GopathCollector,
    GoSyntaxError,
    extract_go_imports,
    scan_source_tree,
)
from lic.collectors.walk import iter_files
from lic.exceptions import ManifestReadError
from lic.report.models import NOT_APPLICABLE, Project

IMPORT_GROUP = """package main

import (
\t"math"
\tm "math"
\t. "math"
\t_ "github.com/tehcyx/imaginary-api"
\t"github.com/tehcyx/imaginary-service"
\t"fmt"
)

func main() {
\tfmt.Println("test")
}
"""


# ── extract_go_imports ───────────────────────────────────────────────────


class TestExtractGoImports:
    def test_import_group_with_aliases(self):
        imports = extract_go_imports(IMPORT_GROUP)
        assert set(imports) == {
            "math",
            "github.com/tehcyx/imaginary-api",
            "github.com/tehcyx/imaginary-service",
            "fmt",
        }

    def test_single_imports(self):
        src = 'package foo\n\nimport "fmt"\nimport alias "github.com/a/b"\n\nvar x = 1\n'
        assert extract_go_imports(src) == ["fmt", "github.com/a/b"]

    def test_comments_and_build_tags_before_package(self):
        src = (
            "//go:build linux\n"
            "/* license\n   header */\n"
            "package foo // trailing\n"
            "import (\n"
            '\t"os" // comment\n'
            "\t/* inline */ \"github.com/a/b\"\n"
            ")\n"
        )
        assert extract_go_imports(src) == ["os", "github.com/a/b"]

    def test_raw_string_path(self):
        assert extract_go_imports("package foo\nimport `github.com/a/b`\n") == ["github.com/a/b"]

    def test_semicolon_separated(self):
        src = 'package foo; import ("fmt"; "os"); import "io"'
        assert extract_go_imports(src) == ["fmt", "os", "io"]

    def test_stops_after_import_declarations(self):
        src = 'package foo\nimport "fmt"\nfunc f() { s := "import \\"nope\\"" }\n'
        assert extract_go_imports(src) == ["fmt"]

    def test_no_imports(self):
        assert extract_go_imports("package foo\n\nfunc f() {}\n") == []

    def test_byte_order_mark(self):
        assert extract_go_imports('\ufeffpackage foo\nimport "fmt"\n') == ["fmt"]

    def test_missing_package_clause(self):
        with pytest.raises(GoSyntaxError):
            extract_go_imports('import "fmt"\n')

    def test_unterminated_group(self):
        with pytest.raises(GoSyntaxError):
            extract_go_imports('package foo\nimport (\n"fmt"\n')

    def test_missing_path(self):
        with pytest.raises(GoSyntaxError):
            extract_go_imports("package foo\nimport fmt\n")

    def test_not_go_source(self):
        with pytest.raises(GoSyntaxError):
            extract_go_imports("this is not go\n")

    def test_syntax_error_after_imports_ignored(self):
        src = 'package foo\nimport "fmt"\n\nfunc f( {\n'
        assert extract_go_imports(src) == ["fmt"]

    def test_import_keyword_inside_strings_and_comments(self):
        src = (
            "package foo\n"
            "// import \"github.com/commented/out\"\n"
            "import \"github.com/a/b\"\n"
            "var s = `import \"github.com/in/raw\"`\n"
        )
        assert extract_go_imports(src) == ["github.com/a/b"]


# ── walk / scan_source_tree ──────────────────────────────────────────────


class TestScanSourceTree:
    def test_collects_across_files(self, go_project):
        root = go_project(
            {
                "main.go": 'package main\nimport "fmt"\n',
                "pkg/util/util.go": 'package util\nimport "github.com/a/b"\n',
                "pkg/util/util_test.go": 'package util\nimport "testing"\n',
                "README.md": 'import "not/go"\n',
            }
        )
        assert scan_source_tree(root) == {"fmt", "github.com/a/b", "testing"}

    def test_skips_vendor_testdata_and_hidden(self, go_project):
        root = go_project(
            {
                "main.go": 'package main\nimport "fmt"\n',
                "vendor/github.com/x/y/y.go": 'package y\nimport "github.com/vendored/z"\n',
                "testdata/t.go": 'package t\nimport "github.com/testdata/z"\n',
                ".git/hooks/h.go": 'package h\nimport "github.com/hidden/z"\n',
                "_scratch/s.go": 'package s\nimport "github.com/scratch/z"\n',
            }
        )
        assert scan_source_tree(root) == {"fmt"}

    def test_malformed_file_skipped(self, go_project):
        root = go_project(
            {
                "a.go": 'package a\nimport "fmt"\n',
                "b.go": "this is not go\n",
            }
        )
        assert scan_source_tree(root) == {"fmt"}

    def test_missing_root_raises(self, tmp_path):
        with pytest.raises(OSError):
            scan_source_tree(tmp_path / "missing")

    def test_walk_order_is_stable(self, go_project):
        root = go_project({"b/x.go": "", "a/x.go": "", "c.go": "", "a/b/x.go": ""})
        names = [p.relative_to(root).as_posix() for p in iter_files(root, lambda n: n.endswith(".go"))]
        assert names == ["c.go", "a/x.go", "a/b/x.go", "b/x.go"]


# ── GopathCollector ──────────────────────────────────────────────────────


class TestGopathCollector:
    def test_can_handle(self, tmp_path):
        assert GopathCollector().can_handle(tmp_path)
        assert not GopathCollector().can_handle(tmp_path / "missing")

    def test_collect_registers_na_versions(self, ctx, go_project):
        root = go_project({"main.go": IMPORT_GROUP})
        project = Project()
        GopathCollector().collect(ctx, project, root)
        assert len(project.imports) == 4
        assert all(imp.version == NOT_APPLICABLE for imp in project.imports.values())

    def test_cgo_and_own_module_skipped(self, ctx, go_project):
        root = go_project(
            {
                "main.go": (
                    'package main\nimport "C"\nimport (\n'
                    '\t"example.com/app/internal/x"\n\t"github.com/a/b"\n)\n'
                ),
            }
        )
        project = Project(name="example.com/app")
        GopathCollector().collect(ctx, project, root)
        assert list(project.imports) == ["github.com/a/b"]

    def test_missing_folder(self, ctx, tmp_path):
        with pytest.raises(ManifestReadError):
            GopathCollector().collect(ctx, Project(), tmp_path / "missing")
