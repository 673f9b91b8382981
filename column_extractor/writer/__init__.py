"""Writer module for JSON output.

Naming convention: output identifier ``data/fruits`` → ``data/fruits.json``.
"""

from column_extractor.writer.json_writer import load_values, output_path, save_values

__all__ = [
    "load_values",
    "output_path",
    "save_values",
]
