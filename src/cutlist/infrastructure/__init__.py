"""Infrastructure layer - output formatters and exporters."""

from .formatters import CostReportFormatter, CutListFormatter, JsonExporter

__all__ = ["CostReportFormatter", "CutListFormatter", "JsonExporter"]
