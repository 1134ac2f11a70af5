"""Unit tests for the import boundary checking script.

Tests verify that the hexagonal architecture import rules are enforced:
- domain/ and config/ import NOTHING from other package layers
- application/ imports from domain/ only
- infrastructure/ imports from domain/ and application/
- bootstrap/ may import from every layer
"""

import ast

# Import from scripts directory
import sys
import tempfile
from collections.abc import Iterator
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "scripts"))

from check_imports import (
    ALLOWED_IMPORTS,
    LAYER_HIERARCHY,
    check_file_imports,
    check_import_boundaries,
    format_violations,
    layer_of,
    main,
    module_name,
    resolve_imports,
)

PACKAGE_DIR = Path(__file__).parent.parent.parent / "ballot_workflow"


def _import_node(source: str) -> ast.Import | ast.ImportFrom:
    node = ast.parse(source).body[0]
    assert isinstance(node, (ast.Import, ast.ImportFrom))
    return node


class TestRules:
    """Test that the layer rules are correctly defined."""

    def test_domain_is_innermost(self) -> None:
        assert LAYER_HIERARCHY["domain"] == 0

    def test_bootstrap_is_outermost(self) -> None:
        assert LAYER_HIERARCHY["bootstrap"] == max(LAYER_HIERARCHY.values())

    def test_inner_layers_import_nothing(self) -> None:
        assert ALLOWED_IMPORTS["domain"] == set()
        assert ALLOWED_IMPORTS["config"] == set()

    def test_application_imports_domain_only(self) -> None:
        assert ALLOWED_IMPORTS["application"] == {"domain"}

    def test_no_layer_imports_outward(self) -> None:
        for layer, allowed in ALLOWED_IMPORTS.items():
            for target in allowed:
                assert LAYER_HIERARCHY[target] <= LAYER_HIERARCHY[layer]


class TestNames:
    """Test module and layer name helpers."""

    def test_module_name(self) -> None:
        path = PACKAGE_DIR / "domain" / "models" / "voter.py"
        assert module_name(path, PACKAGE_DIR) == "ballot_workflow.domain.models.voter"

    def test_package_init_module_name(self) -> None:
        path = PACKAGE_DIR / "domain" / "__init__.py"
        assert module_name(path, PACKAGE_DIR) == "ballot_workflow.domain"

    def test_file_outside_package(self) -> None:
        assert module_name(Path("/elsewhere/x.py"), PACKAGE_DIR) is None

    def test_layer_of(self) -> None:
        assert layer_of("ballot_workflow.application.ports") == "application"
        assert layer_of("ballot_workflow") is None
        assert layer_of("structlog.testing") is None


class TestResolveImports:
    """Test resolution of import statements to module names."""

    def test_absolute_from_import(self) -> None:
        node = _import_node("from ballot_workflow.domain.models import Voter")
        assert resolve_imports(node, "ballot_workflow.application.x") == [
            "ballot_workflow.domain.models"
        ]

    def test_every_name_of_plain_import(self) -> None:
        node = _import_node("import os, ballot_workflow.bootstrap")
        assert resolve_imports(node, "ballot_workflow.domain.x") == [
            "os",
            "ballot_workflow.bootstrap",
        ]

    def test_relative_import_from_module(self) -> None:
        node = _import_node("from ..errors import PhaseError")
        assert resolve_imports(node, "ballot_workflow.domain.models.voter") == [
            "ballot_workflow.domain.errors"
        ]

    def test_relative_import_from_package_init(self) -> None:
        node = _import_node("from . import voter")
        assert resolve_imports(
            node, "ballot_workflow.domain.models", is_package=True
        ) == ["ballot_workflow.domain.models.voter"]


class TestCheckFileImports:
    """Test single-file checks against a temporary package tree."""

    @pytest.fixture
    def package_dir(self) -> Iterator[Path]:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "ballot_workflow"
            for layer in LAYER_HIERARCHY:
                (root / layer).mkdir(parents=True)
            yield root

    def _write(self, package_dir: Path, relative: str, source: str) -> Path:
        path = package_dir / relative
        path.write_text(source, encoding="utf-8")
        return path

    def test_domain_importing_application_is_violation(
        self, package_dir: Path
    ) -> None:
        path = self._write(
            package_dir,
            "domain/bad.py",
            "from ballot_workflow.application.services import VotingProcessService\n",
        )

        [violation] = check_file_imports(path, package_dir)

        assert violation.line == 1
        assert violation.importer_layer == "domain"
        assert violation.imported_layer == "application"
        assert "domain layer cannot import from application" in str(violation)

    def test_relative_import_outward_is_violation(self, package_dir: Path) -> None:
        path = self._write(
            package_dir,
            "application/bad.py",
            "import structlog\nfrom ..infrastructure.stubs import InMemoryVotingEventLog\n",
        )

        [violation] = check_file_imports(path, package_dir)

        assert violation.line == 2
        assert violation.module == "ballot_workflow.infrastructure.stubs"

    def test_allowed_and_third_party_imports_pass(self, package_dir: Path) -> None:
        path = self._write(
            package_dir,
            "infrastructure/ok.py",
            "import structlog\n"
            "from ballot_workflow.domain.events import VOTED_EVENT_TYPE\n"
            "from ballot_workflow.application.ports import RecordedVotingEvent\n"
            "from .stubs import InMemoryVotingEventLog\n",
        )

        assert check_file_imports(path, package_dir) == []

    def test_bootstrap_may_import_everything(self, package_dir: Path) -> None:
        path = self._write(
            package_dir,
            "bootstrap/wiring.py",
            "from ballot_workflow.infrastructure.stubs import InMemoryVotingEventLog\n"
            "from ballot_workflow.config import ObservabilityConfig\n",
        )

        assert check_file_imports(path, package_dir) == []

    def test_format_violations(self, package_dir: Path) -> None:
        path = self._write(
            package_dir,
            "config/bad.py",
            "from ballot_workflow.domain import BallotError\n",
        )

        output = format_violations(check_file_imports(path, package_dir))

        assert "config layer cannot import from domain" in output
        assert "Total: 1 violation(s)" in output

    def test_main_exit_codes(self, package_dir: Path) -> None:
        assert main([str(package_dir)]) == 0

        self._write(package_dir, "domain/bad.py", "import ballot_workflow.bootstrap\n")

        assert main([str(package_dir)]) == 1
        assert main([str(package_dir / "missing")]) == 2


class TestRealPackage:
    """The shipped package respects its own boundaries."""

    def test_no_violations(self) -> None:
        assert check_import_boundaries(PACKAGE_DIR) == []
