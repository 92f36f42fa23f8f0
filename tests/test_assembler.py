"""Tests for whitelist classification, report assembly and rendering."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from lic.config import GolangConfig, matches_domain
from lic.exceptions import ComplianceViolationError
from lic.license import LicenseResolver, default_license_table
from lic.report import ComplianceReport, Project, WhitelistValidator, assemble_report, content_hash
from lic.report.assembler import canonical_url
from lic.report.models import STANDARD_LIBRARY
from lic.report.render import render_json, render_text


def _resolver(key="mit"):
    """LicenseResolver backed by a single provider that answers *key* for github.com."""
    provider = MagicMock()
    provider.name = "stub"
    provider.supports = lambda name: name.startswith("github.com/")
    provider.get_license = AsyncMock(return_value=key)
    return LicenseResolver([provider], default_license_table()), provider


# ── domain matching ──────────────────────────────────────────────────────


class TestMatchesDomain:
    @pytest.mark.parametrize(
        "path,domain",
        [
            ("github.com/a/b", "github.com"),
            ("github.com", "github.com"),
            ("golang.org/x/net", "golang.org"),
            ("golang.org/x/net/http2", "golang.org/x"),
            ("github.com/a/b", "github.com/"),
        ],
    )
    def test_matches(self, path, domain):
        assert matches_domain(path, domain)

    @pytest.mark.parametrize(
        "path,domain",
        [
            ("mygithub.company.com/a/b", "github.com"),
            ("evil.com/github.com/fake", "github.com"),
            ("github.company.com/a/b", "github.com"),
            ("github.com/a/b", ""),
        ],
    )
    def test_no_substring_matches(self, path, domain):
        assert not matches_domain(path, domain)


class TestGolangConfig:
    def test_stdlib(self):
        config = GolangConfig()
        assert config.is_stdlib("fmt")
        assert config.is_stdlib("net/http")
        assert not config.is_stdlib("github.com/a/b")

    def test_whitelist(self):
        config = GolangConfig(whitelist_domains=("gopkg.in",))
        assert config.is_whitelisted("gopkg.in/yaml.v2")
        assert not config.is_whitelisted("github.com/a/b")


class TestCanonicalUrl:
    def test_trims_to_repo(self):
        assert canonical_url("github.com/spf13/cobra/doc") == "https://github.com/spf13/cobra"

    def test_other_hosts_keep_path(self):
        assert canonical_url("gopkg.in/yaml.v2") == "https://gopkg.in/yaml.v2"


# ── WhitelistValidator ───────────────────────────────────────────────────


class TestWhitelistValidator:
    @pytest.mark.anyio
    async def test_end_to_end_module_scenario(self, ctx):
        project = Project(name="example.com/app")
        project.insert_import("github.com/spf13/cobra", "v1.0.0")
        project.insert_import("github.com/x/y", "v0.1.0", is_direct=False)
        resolver, provider = _resolver("apache-2.0")

        await WhitelistValidator(GolangConfig(), resolver).validate(ctx, project)

        assert sorted(project.validated) == ["github.com/spf13/cobra", "github.com/x/y"]
        assert project.violations == {}
        cobra = project.imports["github.com/spf13/cobra"]
        assert cobra.license.short_name == "apache-2.0"
        assert cobra.url == "https://github.com/spf13/cobra"
        assert cobra.hash == content_hash("github.com/spf13/cobra", "v1.0.0")
        assert project.imports["github.com/x/y"].hash
        assert provider.get_license.await_count == 2

        report = assemble_report(project, "v1.2.3")
        assert report.succeeded

    @pytest.mark.anyio
    async def test_violation_makes_no_lookup(self, ctx):
        project = Project()
        project.insert_import("example.com/unknown", "v1.0.0")
        resolver, provider = _resolver()

        await WhitelistValidator(GolangConfig(), resolver).validate(ctx, project)

        assert list(project.violations) == ["example.com/unknown"]
        provider.get_license.assert_not_awaited()
        imp = project.imports["example.com/unknown"]
        assert imp.license.is_unknown
        assert imp.hash == content_hash("example.com/unknown", "v1.0.0")

    @pytest.mark.anyio
    async def test_lookalike_domains_are_violations(self, ctx):
        project = Project()
        project.insert_import("mygithub.company.com/a/b")
        project.insert_import("evil.com/github.com/fake")
        resolver, provider = _resolver()

        await WhitelistValidator(GolangConfig(), resolver).validate(ctx, project)

        assert sorted(project.violations) == ["evil.com/github.com/fake", "mygithub.company.com/a/b"]
        provider.get_license.assert_not_awaited()

    @pytest.mark.anyio
    async def test_stdlib_validated_without_lookup(self, ctx):
        project = Project()
        project.insert_import("fmt", "n/a")
        resolver, provider = _resolver()

        await WhitelistValidator(GolangConfig(), resolver).validate(ctx, project)

        assert list(project.validated) == ["fmt"]
        assert project.imports["fmt"].version == STANDARD_LIBRARY
        assert project.imports["fmt"].hash == content_hash("fmt", STANDARD_LIBRARY)
        provider.get_license.assert_not_awaited()

    @pytest.mark.anyio
    async def test_whitelisted_without_provider_gets_unknown(self, ctx):
        project = Project()
        project.insert_import("gopkg.in/yaml.v2", "v2.4.0")
        resolver, _ = _resolver()

        await WhitelistValidator(GolangConfig(), resolver).validate(ctx, project)

        assert list(project.validated) == ["gopkg.in/yaml.v2"]
        assert project.imports["gopkg.in/yaml.v2"].license.is_unknown

    @pytest.mark.anyio
    async def test_cancelled_scan_still_classifies(self, cancelled_ctx):
        project = Project()
        project.insert_import("github.com/a/b")
        project.insert_import("example.com/c")
        resolver, provider = _resolver()

        await WhitelistValidator(GolangConfig(), resolver).validate(cancelled_ctx, project)

        assert project.unclassified == []
        assert project.imports["github.com/a/b"].license.is_unknown
        provider.get_license.assert_not_awaited()


# ── assemble_report ──────────────────────────────────────────────────────


def _classified_project():
    project = Project(name="example.com/app")
    for name, version in [("github.com/b/b", "v2"), ("github.com/a/a", "v1")]:
        project.insert_import(name, version)
        project.mark_validated(name)
    project.insert_import("example.com/bad", "v0.1.0")
    project.mark_violation("example.com/bad")
    return project


class TestAssembleReport:
    def test_sets_project_version_and_hash(self):
        project = _classified_project()
        report = assemble_report(project, "v1.2.3", collector="go.mod")
        assert project.version == "v1.2.3"
        assert project.hash == content_hash("example.com/app", "v1.2.3")
        assert report.hash == project.hash
        assert report.collector == "go.mod"

    def test_sorted_and_counted(self):
        report = assemble_report(_classified_project(), "v1")
        assert [i.name for i in report.validated] == ["github.com/a/a", "github.com/b/b"]
        assert report.validated_count == 2
        assert report.violation_count == 1
        assert not report.succeeded

    def test_unclassified_rejected(self):
        project = Project()
        project.insert_import("github.com/a/b")
        with pytest.raises(ValueError):
            assemble_report(project, "v1")

    def test_empty_project_succeeds(self):
        report = assemble_report(Project(), "n/a")
        assert report.succeeded
        report.raise_for_violations()

    def test_raise_for_violations(self):
        report = assemble_report(_classified_project(), "v1")
        with pytest.raises(ComplianceViolationError) as exc_info:
            report.raise_for_violations()
        assert exc_info.value.report is report
        assert "1 import(s)" in str(exc_info.value)

    def test_to_dict(self):
        data = assemble_report(_classified_project(), "v1", collector="go.mod").to_dict()
        assert data["project"] == "example.com/app"
        assert data["succeeded"] is False
        assert data["violation_count"] == 1
        assert data["validated"][0]["license"] == "na"
        assert data["violations"] == [
            {"name": "example.com/bad", "version": "v0.1.0", "direct": True, "hash": ""}
        ]


# ── rendering ────────────────────────────────────────────────────────────


class TestRender:
    def test_text_plural(self):
        text = render_text(assemble_report(_classified_project(), "v1"))
        lines = text.splitlines()
        assert lines[0] == "Report for example.com/app v1"
        assert lines[1] == f"Generated project hash: {content_hash('example.com/app', 'v1')}"
        assert lines[2] == ""
        assert lines[3] == "During the scan there were 2 dependencies found:"
        assert lines[4] == "\tImport: github.com/a/a, Version: v1, License: Not Available"
        assert lines[6] == "Additionally 1 blacklisted import was found:"
        assert lines[7] == "\tImport: example.com/bad, Version: v0.1.0"
        assert text.endswith("\n")

    def test_text_singular_and_empty(self):
        project = Project(name="example.com/app")
        project.insert_import("github.com/a/a", "v1")
        project.mark_validated("github.com/a/a")
        text = render_text(assemble_report(project, "v1"))
        assert "there was 1 dependency found:" in text
        assert "Additionally 0 blacklisted imports were found:" in text

    def test_text_unnamed_project(self):
        report = ComplianceReport(project_name="", version="n/a", hash="h")
        assert render_text(report).startswith("Report for (unnamed project) n/a")

    def test_json(self):
        report = assemble_report(_classified_project(), "v1")
        data = json.loads(render_json(report))
        assert data == report.to_dict()
