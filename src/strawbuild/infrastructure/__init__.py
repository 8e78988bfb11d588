"""Infrastructure layer - output formatters."""

from .formatters import (
    DiagnosticsFormatter,
    ElementListFormatter,
    JsonExporter,
    MaterialCatalogFormatter,
    PartsListFormatter,
    ReportFormatter,
    StrawSummaryFormatter,
)

__all__ = [
    "DiagnosticsFormatter",
    "ElementListFormatter",
    "JsonExporter",
    "MaterialCatalogFormatter",
    "PartsListFormatter",
    "ReportFormatter",
    "StrawSummaryFormatter",
]
