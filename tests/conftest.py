"""
minicc Test Configuration
=========================

pytest fixtures and markers shared by the test suite.

It provides:
- The minicc_requires_toolchain marker, skipped automatically when no
  native x86-64 assembler/linker is available
- Helper fixtures for writing C source files
"""

import platform
import shutil
import sys
from pathlib import Path

import pytest


RETURN_2_SOURCE = "int main(void) {\n    return 2;\n}\n"


def toolchain_available() -> bool:
    """True when gcc can build and run x86-64 Linux executables here."""
    return (
        sys.platform.startswith("linux")
        and platform.machine() in ("x86_64", "AMD64")
        and shutil.which("gcc") is not None
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "minicc_requires_toolchain: Test assembles, links and runs a native executable",
    )


def pytest_collection_modifyitems(config, items):
    """Skip toolchain tests when gcc or an x86-64 Linux host is missing."""
    if toolchain_available():
        return

    skip_marker = pytest.mark.skip(reason="native x86-64 gcc toolchain not available")
    for item in items:
        if "minicc_requires_toolchain" in item.keywords:
            item.add_marker(skip_marker)


# ═══════════════════════════════════════════════════════════════════════════════
# HELPER FIXTURES
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def write_source(tmp_path: Path):
    """
    Fixture: Factory writing C source text to a file under tmp_path.

    Usage:
        path = write_source("int main(void) { return 3; }", "three.c")
    """
    def _write(source: str, name: str = "prog.c") -> Path:
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def return_2_file(write_source) -> Path:
    """Fixture: A valid program returning 2."""
    return write_source(RETURN_2_SOURCE, "return_2.c")
