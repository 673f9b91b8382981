"""Environment validation tests for column-extractor."""

import sys


def test_python_version() -> None:
    """Verify Python version is 3.12 or higher."""
    assert sys.version_info >= (3, 12), f"Python 3.12+ required, got {sys.version}"


def test_core_imports() -> None:
    """Verify core packages can be imported."""
    import dotenv  # noqa: F401
    import httpx  # noqa: F401
    import openpyxl  # noqa: F401
    import xlrd  # noqa: F401


def test_project_structure() -> None:
    """Verify project module structure."""
    from column_extractor import __version__
    from column_extractor.config import PROJECT_ROOT

    assert __version__ == "0.1.0"
    assert PROJECT_ROOT.exists()


def test_data_directories_exist() -> None:
    """Verify data directories exist."""
    from column_extractor.config import DATA_DIR, LOGS_DIR

    assert DATA_DIR.exists()
    assert LOGS_DIR.exists()


def test_logger_is_configured_once() -> None:
    """Repeated setup_logging calls reuse the same handlers."""
    from column_extractor.config import setup_logging

    first = setup_logging("column_extractor.test_env")
    second = setup_logging("column_extractor.test_env")

    assert first is second
    assert len(second.handlers) == 2
