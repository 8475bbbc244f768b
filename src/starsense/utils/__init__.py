"""Utility modules for StarSense."""

from .data_prep import export_to_csv, export_to_json, prepare_export, result_tables, to_dataframe

__all__ = [
    "export_to_csv",
    "export_to_json",
    "prepare_export",
    "result_tables",
    "to_dataframe",
]
