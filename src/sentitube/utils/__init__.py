"""Utility modules for SentiTube."""

from .data_prep import analyzed_comments_frame, export_to_csv, export_to_json, prepare_export, sentiment_tables

__all__ = [
    "analyzed_comments_frame",
    "export_to_csv",
    "export_to_json",
    "prepare_export",
    "sentiment_tables",
]
