"""
Offline export CLI.

Usage:
  context-core-export Saved/Snapshots/BP_Player.json [more.json ...] --output-root Docs/.context

Exit codes: 0 all exported, 1 some Blueprint failed, 2 a snapshot could not be read.
"""

from __future__ import annotations

import argparse
import sys

from .config import get_config
from .exporter import BatchReport, ExportOrchestrator, MemoryFileStore, MetadataDocumentBuilder
from .model import SnapshotError, load_snapshot


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="context-core-export",
        description="Export Blueprint snapshots to graph text files and _meta.json",
    )
    parser.add_argument("snapshots", nargs="+", help="Blueprint snapshot JSON files")
    parser.add_argument(
        "--output-root",
        default=None,
        help="Export root directory (default: <Project>/Docs/.context)",
    )
    parser.add_argument(
        "--legacy-state-machine-names",
        action="store_true",
        default=None,
        help="Reference state machine files in _meta.json with the narrow sanitizer",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Build everything in memory and list the files that would be written",
    )
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    cfg = get_config()

    legacy = cfg.legacy_state_machine_names
    if args.legacy_state_machine_names is not None:
        legacy = args.legacy_state_machine_names

    store = MemoryFileStore() if args.dry_run else None
    orchestrator = ExportOrchestrator(
        export_root=args.output_root,
        store=store,
        metadata_builder=MetadataDocumentBuilder(legacy_state_machine_names=legacy),
        verbose=False if args.quiet else None,
    )

    blueprints = []
    for snapshot_path in args.snapshots:
        try:
            blueprints.append(load_snapshot(snapshot_path))
        except (OSError, SnapshotError) as e:
            print(f"[ContextCore] Cannot read snapshot {snapshot_path}: {e}", file=sys.stderr)
            return 2

    batch = BatchReport()
    for blueprint in blueprints:
        batch.add(orchestrator.export_blueprint(blueprint))

    if store is not None:
        for path in sorted(store.files):
            print(path)

    if not args.quiet:
        print(
            f"[ContextCore] Export complete: {batch.exported} success, {batch.failed} failed",
            file=sys.stderr,
        )
    return 0 if batch.ok else 1


if __name__ == "__main__":
    sys.exit(main())
