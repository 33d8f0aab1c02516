"""Exporter errors."""


class ExportFailure(Exception):
    """A graph (or other unit of export) could not be exported."""

    pass
