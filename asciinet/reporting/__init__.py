"""Reporting utilities for asciinet."""

from .ascii import AsciiRenderer
from .metrics import CsvSink, JsonlSink

__all__ = ["AsciiRenderer", "CsvSink", "JsonlSink"]
