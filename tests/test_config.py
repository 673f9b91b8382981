"""Tests for option merging, validation and job files."""

import json
from pathlib import Path
from typing import Any

import pytest

from column_extractor.config import (
    DEFAULT_OPTIONS,
    ExtractionJob,
    ExtractorOptions,
    build_options,
    load_jobs,
)
from tests.workbooks import SPREADSHEET_URL


def _write_jobs(tmp_path: Path, document: Any) -> Path:
    path = tmp_path / "jobs.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


class TestBuildOptions:
    """Tests for build_options."""

    def test_fills_defaults(self) -> None:
        options = build_options({"url": SPREADSHEET_URL})

        assert options == ExtractorOptions(url=SPREADSHEET_URL)
        assert (options.row, options.column) == (1, 1)
        assert options.trim_whitespace and options.lowercase and options.remove_duplicates
        assert options.sheet_name is None
        assert options.min_occurrences is None

    def test_defaults_are_untouched(self) -> None:
        build_options({"url": SPREADSHEET_URL, "row": 4})
        assert DEFAULT_OPTIONS.row == 1
        assert DEFAULT_OPTIONS.url == ""

    def test_camel_case_aliases(self) -> None:
        options = build_options(
            {
                "url": SPREADSHEET_URL,
                "sheetName": "Nouns",
                "minOccurrences": 3,
                "trimWhitespaces": False,
                "toLowerCase": False,
                "removeDuplicates": False,
            },
        )

        assert options.sheet_name == "Nouns"
        assert options.min_occurrences == 3
        assert not options.trim_whitespace
        assert not options.lowercase
        assert not options.remove_duplicates

    def test_options_are_immutable(self) -> None:
        options = build_options({"url": SPREADSHEET_URL})
        with pytest.raises(AttributeError):
            options.row = 2  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("overrides", "message"),
        [
            ({}, "url"),
            ({"url": SPREADSHEET_URL, "row": 0}, "row"),
            ({"url": SPREADSHEET_URL, "column": -1}, "column"),
            ({"url": SPREADSHEET_URL, "row": "2"}, "row"),
            ({"url": SPREADSHEET_URL, "minOccurrences": -1}, "min_occurrences"),
            ({"url": SPREADSHEET_URL, "minOccurrences": "5"}, "min_occurrences"),
            ({"url": SPREADSHEET_URL, "colour": "red"}, "Unknown option"),
        ],
    )
    def test_invalid_options(self, overrides: dict[str, Any], message: str) -> None:
        with pytest.raises(ValueError, match=message):
            build_options(overrides)


class TestLoadJobs:
    """Tests for load_jobs."""

    def test_loads_jobs_in_order(self, tmp_path: Path) -> None:
        path = _write_jobs(
            tmp_path,
            {
                "jobs": [
                    {"output": "nouns", "options": {"url": SPREADSHEET_URL, "sheetName": "Nouns"}},
                    {"output": "verbs", "options": {"url": SPREADSHEET_URL, "column": 2, "minOccurrences": 10}},
                ],
            },
        )

        jobs = load_jobs(path)

        assert [job.output for job in jobs] == ["nouns", "verbs"]
        assert jobs[0] == ExtractionJob(output="nouns", options=ExtractorOptions(url=SPREADSHEET_URL, sheet_name="Nouns"))
        assert jobs[1].options.column == 2
        assert jobs[1].options.min_occurrences == 10

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_jobs(tmp_path / "absent.json")

    @pytest.mark.parametrize(
        "document",
        [
            [],
            {"jobs": {}},
            {"jobs": [{"options": {"url": SPREADSHEET_URL}}]},
            {"jobs": [{"output": "x"}]},
        ],
    )
    def test_malformed_documents(self, tmp_path: Path, document: Any) -> None:
        with pytest.raises(ValueError):
            load_jobs(_write_jobs(tmp_path, document))

    def test_invalid_job_options(self, tmp_path: Path) -> None:
        path = _write_jobs(tmp_path, {"jobs": [{"output": "x", "options": {"url": SPREADSHEET_URL, "row": 0}}]})
        with pytest.raises(ValueError, match="row"):
            load_jobs(path)
