"""
Import boundary guards.

Rules:
  - services never import fastapi (transport stays in personinfo.api),
  - the domain layer imports neither ORM nor HTTP libraries,
  - DTOs in personinfo.api.schemas never import ORM modules.
"""

import ast
from collections.abc import Callable
from pathlib import Path

REPO_ROOT = Path(__file__).parent.parent
PACKAGE_ROOT = REPO_ROOT / "src" / "personinfo"


def _file_imports_any(path: Path, is_banned: Callable[[str], bool]) -> bool:
    """Parse *path* with AST and return True if any import matches *is_banned*."""
    source = path.read_text(encoding="utf-8")
    try:
        tree = ast.parse(source, filename=str(path))
    except SyntaxError:
        return True

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                if is_banned(alias.name):
                    return True
        elif isinstance(node, ast.ImportFrom):
            if is_banned(node.module or ""):
                return True

    return False


def _violations(subdir: str, is_banned: Callable[[str], bool]) -> list[str]:
    return [
        py_file.relative_to(REPO_ROOT).as_posix()
        for py_file in sorted((PACKAGE_ROOT / subdir).rglob("*.py"))
        if _file_imports_any(py_file, is_banned)
    ]


def test_service_import_boundaries() -> None:
    """Service files must not import from fastapi."""
    violations = _violations("services", lambda m: m.startswith("fastapi"))
    assert not violations, (
        "Service files must not import fastapi:\n"
        + "\n".join(f"  {v}" for v in violations)
    )


def test_domain_import_boundaries() -> None:
    banned = ("sqlmodel", "sqlalchemy", "httpx", "fastapi", "personinfo.infra", "personinfo.models")
    violations = _violations("domain", lambda m: m.startswith(banned))
    assert not violations, (
        "Domain files must stay free of ORM, HTTP and infra imports:\n"
        + "\n".join(f"  {v}" for v in violations)
    )


def test_schema_import_boundaries() -> None:
    banned = ("sqlmodel", "sqlalchemy", "personinfo.models", "personinfo.infra")
    violations = _violations("api/schemas", lambda m: m.startswith(banned))
    assert not violations, (
        "DTO files must not import ORM modules:\n"
        + "\n".join(f"  {v}" for v in violations)
    )
