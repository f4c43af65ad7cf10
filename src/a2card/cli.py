"""
Command-line interface for a2card.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from .config import load_config
from .converter import CardConverter
from .errors import GraphError
from .messaging import reply_for_model_output
from .observability.logging_utils import configure_logging
from .version import CARD_SCHEMA_VERSION, __version__


def build_cli_parser() -> argparse.ArgumentParser:
    cli = argparse.ArgumentParser(prog="a2card", description="Convert A2UI component graphs to Adaptive Cards")
    cli.add_argument(
        "--version",
        action="version",
        version=f"a2card {__version__} (Adaptive Card {CARD_SCHEMA_VERSION}, Python {sys.version.split()[0]})",
    )
    sub = cli.add_subparsers(dest="command", required=True)

    convert_cmd = sub.add_parser("convert", help="Convert an A2UI JSON file to an Adaptive Card")
    convert_cmd.add_argument("file", type=Path)
    convert_cmd.add_argument("--out", type=Path, help="Path to write card JSON (stdout if omitted)")

    reply_cmd = sub.add_parser("reply", help="Shape raw model output into an outgoing message")
    reply_cmd.add_argument("file", type=Path)

    serve_cmd = sub.add_parser("serve", help="Start the FastAPI server")
    serve_cmd.add_argument("--host", default="127.0.0.1")
    serve_cmd.add_argument("--port", type=int, default=8000)
    serve_cmd.add_argument("--dry-run", action="store_true", help="Build app but do not start server")
    return cli


def _read_text(path: Path) -> str:
    if not path.exists():
        raise SystemExit(f"File '{path}' does not exist.")
    return path.read_text(encoding="utf-8")


def _load_json(path: Path) -> Any:
    try:
        return json.loads(_read_text(path))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid JSON in '{path}': {exc}") from exc


def main(argv: list[str] | None = None) -> None:
    cli = build_cli_parser()
    args = cli.parse_args(argv)
    config = load_config()
    configure_logging(config.log_level)

    if args.command == "convert":
        payload = _load_json(args.file)
        try:
            card = CardConverter(config).convert_payload(payload)
        except GraphError as exc:
            raise SystemExit(str(exc)) from exc
        rendered = json.dumps(card, indent=2)
        if args.out:
            args.out.write_text(rendered + "\n", encoding="utf-8")
            print(f"Card written to {args.out}")
        else:
            print(rendered)
        return

    if args.command == "reply":
        message = reply_for_model_output(_read_text(args.file), CardConverter(config))
        print(json.dumps(message.to_dict(), indent=2))
        return

    if args.command == "serve":
        from .server import create_app

        app = create_app(config)
        if args.dry_run:
            print(json.dumps({"status": "ready", "host": args.host, "port": args.port}, indent=2))
            return
        try:
            import uvicorn
        except ImportError as exc:  # pragma: no cover - runtime guard
            raise SystemExit("uvicorn is required to run the server") from exc
        uvicorn.run(app, host=args.host, port=args.port)
        return


if __name__ == "__main__":  # pragma: no cover
    main()
