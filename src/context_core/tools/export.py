"""
Export tools.

Thin async wrappers that fetch Blueprint snapshots (from the editor plugin
or from disk), run the export pipeline and return structured results.
"""

from __future__ import annotations

from typing import Annotated

from ..config import get_config
from ..exporter import BatchReport, ExportOrchestrator, MetadataDocumentBuilder
from ..model import SelectedAsset, SnapshotError, blueprint_from_dict, load_snapshot
from ..ue_client import get_client
from ..ue_client.http_client import UEPluginError


def _ue_error(tool: str, e: Exception) -> dict:
    """Return a friendly, structured error for plugin connectivity issues."""
    return {
        "ok": False,
        "error": f"Editor plugin API call failed ({tool})",
        "detail": str(e),
        "hint": "Make sure the editor is running with the ContextCore plugin enabled, "
        "and check UE_PLUGIN_HOST/UE_PLUGIN_PORT.",
    }


def _is_blueprint_class(asset_class: str) -> bool:
    # Blueprint, AnimBlueprint, WidgetBlueprint, ...
    return asset_class.endswith("Blueprint")


def _summarize(batch: BatchReport, errors: list[dict]) -> dict:
    failed = batch.failed + len(errors)
    return {
        "ok": failed == 0,
        "exported": batch.exported,
        "failed": failed,
        "skipped": batch.skipped,
        "results": [report.to_dict() for report in batch.reports],
        "errors": errors,
    }


async def export_blueprints(
    bp_paths: Annotated[list[str], "Blueprint asset paths. Example: ['/Game/BP_Player']"],
    output_root: Annotated[str | None, "Export root (default: <Project>/Docs/.context)"] = None,
) -> dict:
    """
    Export Blueprints from the running editor to graph text files and _meta.json.

    Returns:
        A dict:
        - ok: bool
        - exported / failed / skipped: int
        - results: list[dict] (blueprint, output_dir, ok, written, failed)
        - errors: list[dict] (path, error) for snapshots that could not be fetched
    """
    client = get_client()
    orchestrator = ExportOrchestrator(export_root=output_root)
    batch = BatchReport()
    errors: list[dict] = []

    for bp_path in bp_paths:
        try:
            blueprint = blueprint_from_dict(await client.get_blueprint_snapshot(bp_path))
        except (UEPluginError, SnapshotError) as e:
            errors.append({"path": bp_path, "error": str(e)})
            continue

        batch.add(orchestrator.export_blueprint(blueprint))

    return _summarize(batch, errors)


async def export_selection(
    output_root: Annotated[str | None, "Export root (default: <Project>/Docs/.context)"] = None,
) -> dict:
    """
    Export the Blueprints currently selected in the editor's Content Browser.

    Non-Blueprint assets in the selection are skipped.
    """
    client = get_client()
    try:
        selection = await client.get_selected_assets()
    except UEPluginError as e:
        return _ue_error("export_selection", e)

    selected: list[SelectedAsset] = []
    errors: list[dict] = []
    for item in selection:
        path = item.get("path", "")
        asset_class = item.get("class", "")
        asset = None
        if _is_blueprint_class(asset_class):
            try:
                asset = blueprint_from_dict(await client.get_blueprint_snapshot(path))
            except (UEPluginError, SnapshotError) as e:
                errors.append({"path": path, "error": str(e)})
                continue
        selected.append(SelectedAsset(object_path=path, asset_class=asset_class, asset=asset))

    batch = ExportOrchestrator(export_root=output_root).export_selected_assets(selected)
    return _summarize(batch, errors)


async def export_snapshot_files(
    snapshot_paths: Annotated[list[str], "Snapshot JSON files saved by the editor plugin"],
    output_root: Annotated[str | None, "Export root (default: <Project>/Docs/.context)"] = None,
) -> dict:
    """
    Export Blueprints from snapshot files on disk (no editor required).
    """
    orchestrator = ExportOrchestrator(export_root=output_root)
    batch = BatchReport()
    errors: list[dict] = []

    for snapshot_path in snapshot_paths:
        try:
            blueprint = load_snapshot(snapshot_path)
        except (OSError, SnapshotError) as e:
            errors.append({"path": snapshot_path, "error": str(e)})
            continue

        batch.add(orchestrator.export_blueprint(blueprint))

    return _summarize(batch, errors)


async def preview_metadata(
    bp_path: Annotated[str, "Blueprint asset path. Example: '/Game/BP_Player'"],
) -> dict:
    """
    Build the _meta.json document for a Blueprint without writing any files.
    """
    client = get_client()
    try:
        snapshot = await client.get_blueprint_snapshot(bp_path)
    except UEPluginError as e:
        return _ue_error("preview_metadata", e)

    try:
        blueprint = blueprint_from_dict(snapshot)
    except SnapshotError as e:
        return {"ok": False, "error": "Invalid Blueprint snapshot", "detail": str(e)}

    builder = MetadataDocumentBuilder(
        legacy_state_machine_names=get_config().legacy_state_machine_names
    )
    return {"ok": True, "blueprint": bp_path, "meta": builder.build(blueprint)}
