"""Readers that turn source text into the pivot value model.

Every reader raises ``ValueError`` when the text is not in its format.
"""

from .csv import csv_to_records
from .markdown import markdown_table_to_records
from .ndjson import loads_json, ndjson_to_values
from .toml import toml_to_value
from .yaml import yaml_to_value

__all__ = [
    "csv_to_records",
    "loads_json",
    "markdown_table_to_records",
    "ndjson_to_values",
    "toml_to_value",
    "yaml_to_value",
]
