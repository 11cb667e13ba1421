"""
Tests for the package surface.

Verifies:
1. Public names are importable with no side effects
2. Error hierarchy is consistent
3. No forbidden imports
"""

import ast
import logging
from pathlib import Path

import pytest

PACKAGE_DIR = Path(__file__).parent.parent / "src" / "multicast_events"


class TestImportable:
    """Test that the package is importable."""

    def test_import_from_root(self) -> None:
        """All exports should be importable from the package root."""
        import multicast_events

        for name in multicast_events.__all__:
            assert hasattr(multicast_events, name), f"Missing export: {name}"

    def test_no_logging_handlers_installed(self) -> None:
        """Importing should not configure logging."""
        import multicast_events  # noqa: F401

        assert logging.getLogger("multicast_events").handlers == []

    def test_version(self) -> None:
        """Package should expose a version string."""
        import multicast_events

        assert isinstance(multicast_events.__version__, str)


class TestErrorHierarchy:
    """Test exception classes."""

    def test_errors_share_base(self) -> None:
        """Every package error should derive from EventError."""
        from multicast_events import DispatchError, EventError, UnknownEventError

        assert issubclass(UnknownEventError, EventError)
        assert issubclass(DispatchError, EventError)

    def test_unknown_event_message(self) -> None:
        """UnknownEventError should name the offending event."""
        from multicast_events import UnknownEventError

        error = UnknownEventError("DataReceived")

        assert "DataReceived" in str(error)
        assert error.event == "DataReceived"

    def test_catch_as_event_error(self) -> None:
        """Callers should be able to catch the whole family."""
        from multicast_events import EventError, EventHost

        with pytest.raises(EventError):
            EventHost().get_event("Missing")


class TestNoForbiddenImports:
    """Test that the package stays a pure library."""

    FORBIDDEN_MODULES = [
        "fastapi",
        "flask",
        "starlette",
        "django",
        "sqlalchemy",
        "sqlite3",
        "redis",
        "dotenv",
        "asyncio",
    ]

    def _get_imports_from_file(self, file_path: Path) -> set[str]:
        """Extract all imports from a Python file using AST."""
        source = file_path.read_text()
        tree = ast.parse(source)
        imports: set[str] = set()

        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    imports.add(alias.name.split(".")[0])
            elif isinstance(node, ast.ImportFrom):
                if node.module:
                    imports.add(node.module.split(".")[0])

        return imports

    @pytest.mark.parametrize(
        "module_file",
        sorted(PACKAGE_DIR.glob("*.py")),
        ids=lambda p: p.name,
    )
    def test_no_forbidden_imports(self, module_file: Path) -> None:
        """Modules must not import frameworks, drivers or async runtimes."""
        imports = self._get_imports_from_file(module_file)

        for forbidden in self.FORBIDDEN_MODULES:
            assert forbidden not in imports, f"Forbidden import found: {forbidden}"

    def test_yaml_only_in_config(self) -> None:
        """Only the config module should touch YAML."""
        for module_file in PACKAGE_DIR.glob("*.py"):
            if module_file.name == "config.py":
                continue
            assert "yaml" not in self._get_imports_from_file(module_file)
