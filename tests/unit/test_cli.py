"""
Tests for the shipbreakers CLI.
"""

import argparse
import json
import logging

import pytest

from shipbreakers.bootstrap.entrypoints import cli_main
from shipbreakers.cli.commands import GenerateCommand, build_registry
from shipbreakers.cli.core import (
    CLIContext,
    CommandResult,
    OutputFormat,
    format_output,
)


def run_json(capsys, *argv):
    code = cli_main(["--json", *argv])
    out = json.loads(capsys.readouterr().out)
    return code, out


class TestRegistry:
    """Command registration."""

    def test_commands_registered(self):
        registry = build_registry()
        assert registry.list_commands() == ["generate", "templates", "validate"]

    def test_aliases(self):
        registry = build_registry()
        assert registry.get("gen").name == "generate"
        assert registry.get("check").name == "validate"
        assert registry.get("missing") is None

    def test_duplicate_name_rejected(self):
        registry = build_registry()
        with pytest.raises(ValueError):
            registry.register(GenerateCommand())
        assert "gen" in registry

    def test_run_converts_layout_errors(self):
        args = argparse.Namespace(seed=7, template="nonexistent", strict=True, hull_mass=None)
        result = GenerateCommand().run(CLIContext(), args)
        assert result.success is False
        assert result.exit_code == 1
        assert result.data["code"] == "LAYOUT_001"


class TestFormatOutput:
    """Result formatting."""

    def test_json(self):
        result = CommandResult(message="ok", data={"a": 1})
        assert json.loads(format_output(result, OutputFormat.JSON))["data"] == {"a": 1}

    def test_text_dict(self):
        result = CommandResult(message="done", data={"template": "I-hauler", "rooms": [1, 2]})
        text = format_output(result, OutputFormat.TEXT)
        assert text.startswith("done")
        assert "template: I-hauler" in text
        assert "rooms:" in text

    def test_text_error(self):
        result = CommandResult(success=False, error="boom", exit_code=1)
        assert format_output(result, OutputFormat.TEXT) == "Error: boom"


class TestGenerate:
    """generate command."""

    def test_generate_json(self, capsys, clean_env):
        code, out = run_json(capsys, "generate", "--seed", "1", "--template", "I-hauler")
        assert code == 0
        assert out["success"] is True
        rooms = out["data"]["rooms"]
        assert [(r["x"], r["y"], r["w"], r["h"], r["kind"]) for r in rooms] == [
            (1, -1, 6, 2, "cargo"),
            (0, 0, 6, 2, "crew"),
        ]

    def test_generate_hex_seed(self, capsys, clean_env):
        code, out = run_json(capsys, "gen", "-s", "0x2a", "-t", "T-freighter")
        assert code == 0
        assert out["data"]["rooms"][0]["x"] == 1

    def test_generate_unknown_template_falls_back(self, capsys, clean_env):
        code, out = run_json(capsys, "generate", "--seed", "7", "--template", "nonexistent")
        assert code == 0
        assert out["data"]["template"] == "nonexistent"
        assert len(out["data"]["rooms"]) == 1

    def test_generate_strict(self, capsys, clean_env):
        code, out = run_json(capsys, "generate", "--seed", "7", "--template", "nonexistent", "--strict")
        assert code == 1
        assert out["success"] is False
        assert out["data"]["code"] == "LAYOUT_001"

    def test_generate_strict_from_env(self, capsys, clean_env):
        clean_env.setenv("SHIPBREAKERS_STRICT_TEMPLATES", "true")
        code, _ = run_json(capsys, "generate", "--seed", "7", "--template", "nonexistent")
        assert code == 1

    def test_generate_seed_too_large(self, capsys, clean_env):
        code, out = run_json(capsys, "generate", "--seed", str(1 << 64), "--template", "I-hauler")
        assert code == 1
        assert out["success"] is False
        assert [e["loc"] for e in out["data"]["errors"]] == [["seed"]]

    def test_generate_negative_seed(self, capsys, clean_env):
        code, out = run_json(capsys, "generate", "--seed", "-1", "--template", "I-hauler")
        assert code == 1
        assert "Invalid generate request" in out["error"]

    def test_generate_with_hull_mass(self, capsys, clean_env):
        code, out = run_json(
            capsys, "generate", "--seed", "1", "--template", "I-hauler", "--hull-mass", "small",
        )
        assert code == 0
        issues = out["data"]["validation"]["issues"]
        assert [i["issue_id"] for i in issues] == ["room-origin-outside-hull"]

    def test_generate_text(self, capsys, clean_env):
        code = cli_main(["generate", "--seed", "1", "--template", "I-hauler"])
        out = capsys.readouterr().out
        assert code == 0
        assert out.startswith("Generated I-hauler (seed 1): 2 rooms")

    def test_execute_direct(self):
        args = argparse.Namespace(seed=42, template="T-freighter", strict=False, hull_mass=None)
        result = GenerateCommand().execute(CLIContext(), args)
        assert result.success
        assert len(result.data["rooms"]) == 3


class TestTemplates:
    """templates command."""

    def test_lists_catalog(self, capsys, clean_env):
        code, out = run_json(capsys, "templates")
        assert code == 0
        by_name = {row["template"]: row for row in out["data"]}
        assert len(by_name) == 8
        assert by_name["I-hauler"]["rooms"] == 2
        assert by_name["H-luxury"]["min_hull_mass"] == "large"


class TestValidate:
    """validate command."""

    def test_valid_file(self, capsys, clean_env, layout_file):
        code, out = run_json(capsys, "validate", str(layout_file), "--seed", "1")
        assert code == 0
        assert out["data"]["reproducible"] is True

    def test_wrong_seed(self, capsys, clean_env, layout_file):
        code, out = run_json(capsys, "validate", str(layout_file), "--seed", "123456789")
        assert code == 1
        assert out["data"]["reproducible"] is False

    def test_seed_too_large(self, capsys, clean_env, layout_file):
        code, out = run_json(capsys, "validate", str(layout_file), "--seed", str(1 << 64))
        assert code == 1
        assert out["data"]["code"] == "LAYOUT_002"

    def test_hull_mass(self, capsys, clean_env, layout_file):
        code, out = run_json(capsys, "validate", str(layout_file), "--hull-mass", "small")
        assert code == 0
        assert "room-origin-outside-hull" in out["data"]["checked_rules"]
        issues = out["data"]["issues"]
        assert [(i["issue_id"], i["room_index"]) for i in issues] == [("room-origin-outside-hull", 0)]

    def test_missing_file(self, capsys, clean_env, tmp_path):
        code, out = run_json(capsys, "validate", str(tmp_path / "nope.json"))
        assert code == 1
        assert "Cannot read" in out["error"]

    def test_malformed_file(self, capsys, clean_env, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{"template": "I-hauler", "rooms": [{"x": 0}]}')
        code, out = run_json(capsys, "validate", str(path))
        assert code == 1
        assert "Malformed layout" in out["error"]

    def test_invalid_utf8_file(self, capsys, clean_env, tmp_path):
        path = tmp_path / "binary.json"
        path.write_bytes(b'{"template": "I-hauler\xff", "rooms": []}')
        code, out = run_json(capsys, "validate", str(path))
        assert code == 1
        assert out["success"] is False
        assert "Cannot read" in out["error"]

    def test_tampered_file(self, capsys, clean_env, tmp_path):
        path = tmp_path / "tampered.json"
        path.write_text(json.dumps({
            "template": "I-hauler",
            "rooms": [{"x": 5, "y": 0, "w": 6, "h": 1, "kind": "cargo"}],
        }))
        code, out = run_json(capsys, "validate", str(path))
        assert code == 1
        ids = {i["issue_id"] for i in out["data"]["issues"]}
        assert {"layout-room-count", "room-outside-envelope"} <= ids


class TestMain:
    """Top-level behaviour."""

    def test_no_command(self, capsys, clean_env):
        assert cli_main([]) == 1
        assert "usage" in capsys.readouterr().out

    def test_verbose_sets_debug(self, capsys, clean_env):
        assert cli_main(["-v", "templates"]) == 0
        assert logging.getLogger().level == logging.DEBUG

    def test_log_file(self, capsys, clean_env, tmp_path):
        log_file = tmp_path / "cli.log"
        code = cli_main([
            "-v", "--log-file", str(log_file),
            "generate", "--seed", "7", "--template", "nonexistent",
        ])
        assert code == 0
        assert "not in catalog, using fallback" in log_file.read_text()

    def test_config_file(self, capsys, clean_env, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"layout": {"strict_templates": True, "json_indent": 4}}))
        code = cli_main(["--config", str(path), "--json", "generate", "--seed", "7", "--template", "nonexistent"])
        out = capsys.readouterr().out
        assert code == 1
        assert '\n    "success": false' in out
        assert json.loads(out)["data"]["code"] == "LAYOUT_001"

    def test_bad_config_file(self, capsys, clean_env, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        code, out = run_json(capsys, "--config", str(path), "templates")
        assert code == 0
        assert len(out["data"]) == 8

    def test_bad_indent_env(self, capsys, clean_env):
        clean_env.setenv("SHIPBREAKERS_JSON_INDENT", "wide")
        code, out = run_json(capsys, "templates")
        assert code == 0
        assert out["success"] is True
