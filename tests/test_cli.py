import json
from pathlib import Path

import pytest

from a2card.cli import main

A2UI = {
    "components": [
        {"id": "root", "type": "Column", "children": ["title", "go"]},
        {"id": "title", "type": "Text", "properties": {"text": "Reserve"}},
        {"id": "go", "type": "Button", "properties": {"label": "Book", "action": "book"}},
    ],
    "rootComponentId": "root",
}


def write_json(tmp_path: Path, payload, name: str = "graph.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_cli_convert_prints_card(tmp_path, capsys):
    main(["convert", str(write_json(tmp_path, A2UI))])
    card = json.loads(capsys.readouterr().out)
    assert card["type"] == "AdaptiveCard"
    assert [item["type"] for item in card["body"]] == ["TextBlock", "ActionSet"]


def test_cli_convert_writes_out_file(tmp_path, capsys):
    out = tmp_path / "card.json"
    main(["convert", str(write_json(tmp_path, A2UI)), "--out", str(out)])
    assert "Card written to" in capsys.readouterr().out
    card = json.loads(out.read_text(encoding="utf-8"))
    assert card["body"][1]["actions"][0]["data"] == {"action": "book"}


def test_cli_convert_missing_file(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["convert", str(tmp_path / "nope.json")])
    assert "does not exist" in str(excinfo.value)


def test_cli_convert_invalid_json(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["convert", str(bad)])
    assert "Invalid JSON" in str(excinfo.value)


def test_cli_convert_rejects_non_object_payload(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["convert", str(write_json(tmp_path, [1, 2]))])
    assert "must be an object" in str(excinfo.value)


def test_cli_reply_outputs_message(tmp_path, capsys):
    path = tmp_path / "reply.txt"
    path.write_text(json.dumps({"text": "Done", "a2ui": A2UI}), encoding="utf-8")
    main(["reply", str(path)])
    message = json.loads(capsys.readouterr().out)
    assert message["text"] == "Done"
    assert message["attachments"][0]["contentType"] == "application/vnd.microsoft.card.adaptive"


def test_cli_serve_dry_run(capsys):
    main(["serve", "--dry-run", "--port", "9001"])
    captured = json.loads(capsys.readouterr().out)
    assert captured == {"status": "ready", "host": "127.0.0.1", "port": 9001}
