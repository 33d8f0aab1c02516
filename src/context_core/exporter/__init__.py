"""
Blueprint export pipeline.

- type_names: pin type -> "List<Actor*>&" style tokens
- graph_text: one graph -> header + per-node text records
- metadata: one Blueprint -> _meta.json document
- orchestrator: writes all of the above for each selected Blueprint
"""

from .errors import ExportFailure
from .graph_text import GraphTextExporter, NodeTextSerializer, T3DNodeSerializer
from .metadata import MetadataDocumentBuilder
from .orchestrator import BatchReport, ExportOrchestrator, ExportReport
from .storage import FileStore, LocalFileStore, MemoryFileStore
from .type_names import render_pin_type

__all__ = [
    "BatchReport",
    "ExportFailure",
    "ExportOrchestrator",
    "ExportReport",
    "FileStore",
    "GraphTextExporter",
    "LocalFileStore",
    "MemoryFileStore",
    "MetadataDocumentBuilder",
    "NodeTextSerializer",
    "T3DNodeSerializer",
    "render_pin_type",
]
