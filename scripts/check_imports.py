#!/usr/bin/env python3
"""Check the layering rules of the ballot_workflow package.

Layers, innermost first:
- domain/ and config/: import nothing from the other layers
- application/: may import domain/
- infrastructure/: may import domain/ and application/
- bootstrap/: composition root, may import every layer

Absolute and relative imports are both resolved to a dotted module name
before the rules are applied. Standard library and third-party imports
are ignored.

Usage:
    python scripts/check_imports.py [package_directory]

Exit codes:
    0: No violations found
    1: Violations found
    2: Package directory missing
"""

import argparse
import ast
import sys
from dataclasses import dataclass
from pathlib import Path

PACKAGE_NAME = "ballot_workflow"
DEFAULT_PACKAGE_DIR = Path(__file__).resolve().parent.parent / PACKAGE_NAME

# Lower number = more inner layer
LAYER_HIERARCHY: dict[str, int] = {
    "domain": 0,
    "config": 0,
    "application": 1,
    "infrastructure": 2,
    "bootstrap": 3,
}

# Layers each layer may import from, besides itself
ALLOWED_IMPORTS: dict[str, set[str]] = {
    "domain": set(),
    "config": set(),
    "application": {"domain"},
    "infrastructure": {"domain", "application"},
    "bootstrap": {"domain", "application", "infrastructure", "config"},
}


@dataclass(frozen=True, order=True)
class Violation:
    """An import that reaches a layer the importing layer may not use."""

    path: str
    line: int
    importer_layer: str
    imported_layer: str
    module: str

    def __str__(self) -> str:
        return (
            f"{self.path}:{self.line}: {self.importer_layer} layer cannot "
            f"import from {self.imported_layer} ({self.module})"
        )


def module_name(py_file: Path, package_dir: Path) -> str | None:
    """Dotted module name of py_file, or None if it is outside package_dir."""
    try:
        parts = list(py_file.relative_to(package_dir).with_suffix("").parts)
    except ValueError:
        return None
    if parts and parts[-1] == "__init__":
        parts.pop()
    return ".".join([PACKAGE_NAME, *parts])


def layer_of(module: str) -> str | None:
    """Layer a dotted module name belongs to, or None outside the layers."""
    parts = module.split(".")
    if len(parts) < 2 or parts[0] != PACKAGE_NAME:
        return None
    return parts[1] if parts[1] in LAYER_HIERARCHY else None


def resolve_imports(
    node: ast.Import | ast.ImportFrom,
    importer: str,
    is_package: bool = False,
) -> list[str]:
    """Absolute module names an import statement refers to.

    Args:
        node: The import statement.
        importer: Dotted name of the module containing the statement.
        is_package: True when the importer is a package __init__.

    Returns:
        One name per imported module; relative imports are anchored at
        the importer's package.
    """
    if isinstance(node, ast.Import):
        return [alias.name for alias in node.names]
    if node.level == 0:
        return [node.module] if node.module else []

    anchor = importer.split(".")
    if not is_package:
        anchor = anchor[:-1]
    if node.level > 1:
        anchor = anchor[: max(len(anchor) - (node.level - 1), 0)]
    if node.module:
        return [".".join([*anchor, node.module])]
    return [".".join([*anchor, alias.name]) for alias in node.names]


def check_file_imports(py_file: Path, package_dir: Path) -> list[Violation]:
    """Check a single file against the layer rules."""
    importer = module_name(py_file, package_dir)
    importer_layer = layer_of(importer) if importer else None
    if importer is None or importer_layer is None:
        return []

    try:
        tree = ast.parse(py_file.read_text(encoding="utf-8"), filename=str(py_file))
    except (SyntaxError, UnicodeDecodeError) as e:
        print(f"Warning: Could not parse {py_file}: {e}", file=sys.stderr)
        return []

    allowed = ALLOWED_IMPORTS[importer_layer] | {importer_layer}
    is_package = py_file.name == "__init__.py"
    violations: list[Violation] = []
    for node in ast.walk(tree):
        if not isinstance(node, (ast.Import, ast.ImportFrom)):
            continue
        for module in resolve_imports(node, importer, is_package):
            imported_layer = layer_of(module)
            if imported_layer is not None and imported_layer not in allowed:
                violations.append(
                    Violation(
                        path=str(py_file),
                        line=node.lineno,
                        importer_layer=importer_layer,
                        imported_layer=imported_layer,
                        module=module,
                    )
                )
    return violations


def check_import_boundaries(package_dir: Path) -> list[Violation]:
    """Check every module of the package.

    Raises:
        FileNotFoundError: If package_dir does not exist.
    """
    if not package_dir.is_dir():
        raise FileNotFoundError(f"Package directory '{package_dir}' does not exist")

    violations: list[Violation] = []
    for py_file in sorted(package_dir.rglob("*.py")):
        violations.extend(check_file_imports(py_file, package_dir))
    return violations


def format_violations(violations: list[Violation]) -> str:
    """Human-readable report, empty when there is nothing to report."""
    if not violations:
        return ""
    lines = ["Import boundary violations found:", ""]
    lines.extend(f"  {violation}" for violation in sorted(violations))
    lines.extend(["", f"Total: {len(violations)} violation(s)"])
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description=f"Check the layering rules of the {PACKAGE_NAME} package"
    )
    parser.add_argument(
        "package_dir",
        nargs="?",
        type=Path,
        default=DEFAULT_PACKAGE_DIR,
        help=f"Directory of the {PACKAGE_NAME} package",
    )
    args = parser.parse_args(argv)

    try:
        violations = check_import_boundaries(args.package_dir)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if violations:
        print(format_violations(violations))
        return 1
    print("No import boundary violations found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
