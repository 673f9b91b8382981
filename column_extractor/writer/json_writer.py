"""JSON output for extracted values.

Output naming convention: the caller passes an output identifier and the
values land in ``<output>.json`` as one compact JSON array of strings.
Writes go through a temporary file in the target directory and are renamed
into place, so a failed run never leaves a truncated file behind.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from column_extractor.config import setup_logging
from column_extractor.errors import WriteError

logger = setup_logging(__name__)


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


def output_path(output: str | Path) -> Path:
    """Return the JSON file path for an output identifier (``<output>.json``)."""
    return Path(f"{output}.json")


def save_values(values: list[str], output: str | Path) -> Path:
    """Save values as a JSON array.

    Parameters
    ----------
    values
        Final, normalized values.
    output
        Output identifier; ``.json`` is appended.

    Returns
    -------
    Path
        Location of the written JSON file.

    Raises
    ------
    WriteError
        If the directory cannot be created or the file cannot be written.
    """
    filepath = output_path(output)
    logger.info("Saving to disk")

    payload = json.dumps(values, ensure_ascii=False, separators=(",", ":"))

    tmp_name = None
    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{filepath.name}.", suffix=".tmp", dir=filepath.parent)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
        # mkstemp creates the file owner-only
        os.chmod(tmp_name, 0o666 & ~_current_umask())
        os.replace(tmp_name, filepath)
    except OSError as err:
        if tmp_name is not None and Path(tmp_name).exists():
            Path(tmp_name).unlink()
        raise WriteError(str(filepath), err.strerror or str(err)) from err

    logger.info("Saved %d values: %s", len(values), filepath)
    return filepath


def load_values(output: str | Path) -> list[str]:
    """Load values previously written by :func:`save_values`.

    Raises
    ------
    FileNotFoundError
        If ``<output>.json`` does not exist.
    """
    filepath = output_path(output)
    if not filepath.exists():
        msg = f"Output not found: {filepath}"
        raise FileNotFoundError(msg)

    with filepath.open(encoding="utf-8") as f:
        return json.load(f)  # type: ignore[no-any-return]
