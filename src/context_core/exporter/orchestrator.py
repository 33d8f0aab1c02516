"""
Blueprint export orchestration.

For each Blueprint: resolve <export-root>/<package-path>, write one text file
per event/function/macro graph (plus AnimBlueprint state machines), then
write _meta.json. Failures are recorded and the remaining files are still
written; nothing is retried or cleaned up.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from ..config import get_config
from ..model.blueprint import AnimBlueprint, Blueprint, SelectedAsset
from ..model.graph import Graph
from . import naming
from .errors import ExportFailure
from .graph_text import GraphTextExporter
from .metadata import MetadataDocumentBuilder, iter_state_machine_nodes
from .storage import FileStore, LocalFileStore


@dataclass
class ExportReport:
    """Outcome of exporting one Blueprint. Truthy when everything was written."""

    blueprint: str
    output_dir: Path
    written: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed

    def __bool__(self) -> bool:
        return self.ok

    def to_dict(self) -> dict:
        return {
            "blueprint": self.blueprint,
            "output_dir": str(self.output_dir),
            "ok": self.ok,
            "written": list(self.written),
            "failed": list(self.failed),
        }


@dataclass
class BatchReport:
    exported: int = 0
    failed: int = 0
    skipped: int = 0
    reports: list[ExportReport] = field(default_factory=list)

    def add(self, report: ExportReport) -> None:
        self.reports.append(report)
        if report.ok:
            self.exported += 1
        else:
            self.failed += 1

    @property
    def ok(self) -> bool:
        return self.failed == 0


class ExportOrchestrator:
    """Stateless per call: all inputs come in as arguments or constructor config."""

    def __init__(
        self,
        export_root: Path | str | None = None,
        store: FileStore | None = None,
        graph_exporter: GraphTextExporter | None = None,
        metadata_builder: MetadataDocumentBuilder | None = None,
        verbose: bool | None = None,
    ):
        cfg = get_config()
        self.export_root = Path(export_root) if export_root is not None else cfg.export_root
        self.store = store or LocalFileStore()
        self.graph_exporter = graph_exporter or GraphTextExporter()
        self.metadata_builder = metadata_builder or MetadataDocumentBuilder(
            legacy_state_machine_names=cfg.legacy_state_machine_names
        )
        self.verbose = cfg.verbose if verbose is None else verbose

    def _log(self, message: str) -> None:
        if self.verbose:
            print(f"[ContextCore] {message}", file=sys.stderr)

    def output_dir_for(self, blueprint: Blueprint) -> Path:
        return self.export_root / naming.blueprint_output_dir(blueprint.package_path)

    def export_blueprint(self, blueprint: Blueprint | None) -> ExportReport:
        if blueprint is None:
            self._log("Skipped missing Blueprint")
            return ExportReport(
                blueprint="<missing>", output_dir=self.export_root, failed=["<missing blueprint>"]
            )

        output_dir = self.output_dir_for(blueprint)
        report = ExportReport(blueprint=blueprint.name, output_dir=output_dir)

        if not self.store.ensure_directory(output_dir):
            report.failed.append(str(output_dir))
            self._log(f"Export failed: {blueprint.name} (cannot create {output_dir})")
            return report

        for graph in blueprint.ubergraph_pages:
            self._export_graph(graph, naming.event_graph_file, report)
        for graph in blueprint.function_graphs:
            self._export_graph(graph, naming.function_graph_file, report)
        for graph in blueprint.macro_graphs:
            self._export_graph(graph, naming.macro_graph_file, report)

        if isinstance(blueprint, AnimBlueprint):
            for node in iter_state_machine_nodes(blueprint):
                if node.sub_graph is None:
                    continue
                file_name = naming.state_machine_file(node.title)
                self._write_graph(node.sub_graph, file_name, report)

        meta = self.metadata_builder.to_json(blueprint)
        self._write(naming.META_FILE_NAME, meta, report)

        self._log(f"Exported: {blueprint.name}")
        return report

    def _export_graph(
        self, graph: Graph | None, file_name_for: Callable[[str], str], report: ExportReport
    ) -> None:
        if graph is None:
            report.failed.append("<missing graph>")
            self._log(f"Skipped missing graph in {report.blueprint}")
            return
        self._write_graph(graph, file_name_for(graph.name), report)

    def _write_graph(self, graph: Graph, file_name: str, report: ExportReport) -> None:
        try:
            text = self.graph_exporter.export_graph(graph)
        except ExportFailure as e:
            report.failed.append(file_name)
            self._log(f"Failed to export {file_name}: {e}")
            return
        self._write(file_name, text, report)

    def _write(self, file_name: str, text: str, report: ExportReport) -> None:
        # UTF-8 without BOM
        if self.store.write(report.output_dir / file_name, text.encode("utf-8")):
            report.written.append(file_name)
        else:
            report.failed.append(file_name)

    def export_selected_assets(
        self,
        assets: Iterable[SelectedAsset],
        resolve: Callable[[SelectedAsset], object | None] | None = None,
    ) -> BatchReport:
        """
        Export every Blueprint among the selected assets.

        Args:
            assets: Content browser selection.
            resolve: Loads an asset's object; defaults to the already-resolved
                `SelectedAsset.asset`.

        Returns:
            Aggregate counts. Assets that are not Blueprints, or fail to load,
            are counted as skipped.
        """
        batch = BatchReport()
        for asset in assets:
            obj = resolve(asset) if resolve is not None else asset.asset
            if not isinstance(obj, Blueprint):
                batch.skipped += 1
                continue

            batch.add(self.export_blueprint(obj))

        self._log(f"Export complete: {batch.exported} success, {batch.failed} failed")
        return batch
