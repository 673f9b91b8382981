"""Extraction pipeline: fetch → parse → scan → normalize → write.

Each step may raise an :class:`~column_extractor.errors.ExtractionError`;
the first one aborts the run and nothing is written.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from column_extractor.config import REQUEST_TIMEOUT, setup_logging, validate_options
from column_extractor.extractor import decode_workbook, scan_column, select_sheet
from column_extractor.scraper import fetch_bytes, fetch_bytes_sync
from column_extractor.transformer import normalize_values
from column_extractor.writer import save_values

if TYPE_CHECKING:
    from pathlib import Path

    import httpx

    from column_extractor.config import ExtractionJob, ExtractorOptions

logger = setup_logging(__name__)


class ColumnExtractor:
    """Extract one spreadsheet column into a JSON array of strings.

    Parameters
    ----------
    options : ExtractorOptions
        What to fetch and how to read and normalize it.
    client : httpx.Client | httpx.AsyncClient, optional
        HTTP client to reuse; a short-lived one is created per fetch otherwise.
        ``run`` needs a sync client and ``run_async`` an async one.
    timeout : float, optional
        Request timeout in seconds when no client is supplied.
    """

    def __init__(
        self,
        options: ExtractorOptions,
        client: httpx.Client | httpx.AsyncClient | None = None,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        validate_options(options)
        self.options = options
        self.client = client
        self.timeout = timeout

    def extract(self, content: bytes) -> list[str]:
        """Decode ``content`` and return the normalized column values."""
        workbook = decode_workbook(content, source=self.options.url)
        sheet = select_sheet(workbook, self.options.sheet_name)
        values = scan_column(sheet, self.options)
        return normalize_values(values, self.options)

    def run(self, output: str | Path) -> list[str]:
        """Fetch, extract and save to ``<output>.json``.

        Returns
        -------
        list[str]
            The values written.
        """
        content = fetch_bytes_sync(self.options.url, timeout=self.timeout, client=self.client)  # type: ignore[arg-type]
        values = self.extract(content)
        save_values(values, output)
        return values

    async def run_async(self, output: str | Path) -> list[str]:
        """Async variant of :meth:`run`; only the fetch is awaited."""
        content = await fetch_bytes(self.options.url, request_timeout=self.timeout, client=self.client)  # type: ignore[arg-type]
        values = self.extract(content)
        save_values(values, output)
        return values


def run_jobs(jobs: list[ExtractionJob], client: httpx.Client | None = None) -> dict[str, list[str]]:
    """Run jobs in order, stopping at the first failure.

    Parameters
    ----------
    jobs : list[ExtractionJob]
        Jobs as returned by :func:`column_extractor.config.load_jobs`.
    client : httpx.Client, optional
        Shared HTTP client for all fetches.

    Returns
    -------
    dict[str, list[str]]
        Values written, keyed by output identifier.
    """
    results: dict[str, list[str]] = {}
    for index, job in enumerate(jobs, start=1):
        logger.info("Job %d/%d: %s", index, len(jobs), job.output)
        results[job.output] = ColumnExtractor(job.options, client=client).run(job.output)
    return results
