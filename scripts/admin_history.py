"""Admin CLI for inspecting and exporting the WeatherDesk search history.

Usage examples:
    python scripts/admin_history.py list --limit 20
    python scripts/admin_history.py export --format csv --output weather-data.csv
    python scripts/admin_history.py delete --id 42 --yes
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
import sys

from weatherdesk.config import settings
from weatherdesk.db import open_storage
from weatherdesk.domain import WeatherDeskError
from weatherdesk.services import HistoryStore, export_records


def _get_store(args) -> HistoryStore:
    storage = open_storage(args.database_url or settings.database_url)
    return HistoryStore(storage, list_limit=getattr(args, "limit", None))


def cmd_list(args) -> None:
    store = _get_store(args)
    try:
        records = store.list()
        if not records:
            print("No saved searches found.")
        elif args.json:
            print(json.dumps([r.model_dump(mode="json", by_alias=True) for r in records], indent=2))
        else:
            for record in records:
                print(
                    f"{record.id}: {record.location} {record.weather_data.temperature}°C"
                    f" {record.weather_data.condition} searched={record.date_searched.isoformat()}"
                )
    finally:
        store.storage.dispose()


def cmd_export(args) -> None:
    store = _get_store(args)
    try:
        payload = export_records(store.list_all(), args.format)
    except WeatherDeskError as exc:
        sys.stderr.write(f"{exc.message}\n")
        raise SystemExit(1)
    finally:
        store.storage.dispose()

    output = Path(args.output or payload.filename)
    output.write_bytes(payload.content)
    print(f"Wrote {len(payload.content)} bytes to {output}")


def cmd_delete(args) -> None:
    store = _get_store(args)
    try:
        if not args.yes:
            confirmation = input(f"Delete saved search {args.id}? [y/N]: ").strip().lower()
            if confirmation not in {"y", "yes"}:
                print("Cancelled.")
                return
        try:
            store.delete(args.id)
        except WeatherDeskError as exc:
            sys.stderr.write(f"{exc.message}\n")
            raise SystemExit(1)
        print(f"Saved search {args.id} deleted.")
    finally:
        store.storage.dispose()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage the WeatherDesk search history")
    parser.add_argument("--database-url", help="SQLAlchemy URL (defaults to WEATHERDESK_DB_URL)")
    sub = parser.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="List recent saved searches")
    list_cmd.add_argument("--limit", type=int, help="Maximum number of searches to show")
    list_cmd.add_argument("--json", action="store_true", help="Return JSON output")
    list_cmd.set_defaults(func=cmd_list)

    export_cmd = sub.add_parser("export", help="Export the full history to a file")
    export_cmd.add_argument("--format", default="json", help="json, csv or xml")
    export_cmd.add_argument("--output", help="Destination file (defaults to weather-data.<format>)")
    export_cmd.set_defaults(func=cmd_export)

    delete_cmd = sub.add_parser("delete", help="Delete a saved search")
    delete_cmd.add_argument("--id", type=int, required=True, help="ID of the search to delete")
    delete_cmd.add_argument("--yes", action="store_true", help="Confirm deletion without prompt")
    delete_cmd.set_defaults(func=cmd_delete)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
