"""Smoke tests for the AskLucy CLI."""

from __future__ import annotations

import json
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from AskLucy.cli import main
from AskLucy.cli.ui import CONFIG_ENVVAR, cli
from AskLucy.config import parse_config_dict
from AskLucy.renderers import ConsoleOutputWriter, JsonFileWriter, create_output_writer


def _config_yaml(base_dir: str, formats: str) -> str:
    return f"""
log:
  level: INFO
  to_file: false

output:
  base_dir: {base_dir}
  formats: {formats}

queries:
  - NAME: books
    clauses:
      - term: quick
        field: title
        operator: required
        boost: 2.5
      - range:
          lower: 10
          upper: 20
        field: price
"""


class TestRenderCommand(unittest.TestCase):
    def test_render_writes_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.yml"
            config_path.write_text(_config_yaml(tmp, "[json]"), encoding="utf-8")

            result = CliRunner().invoke(cli, ["--config", str(config_path), "render"])

            self.assertEqual(result.exit_code, 0, result.output)
            files = list((Path(tmp) / "json").glob("render_*.json"))
            self.assertEqual(len(files), 1)
            payload = json.loads(files[0].read_text(encoding="utf-8"))

        self.assertEqual(payload, [{"name": "books", "query": "+title:quick^2.5 price:[10 TO 20]"}])

    def test_config_path_from_environment(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.yml"
            config_path.write_text(_config_yaml(tmp, "[json]"), encoding="utf-8")

            result = CliRunner().invoke(cli, ["render"], env={CONFIG_ENVVAR: str(config_path)})

            self.assertEqual(result.exit_code, 0, result.output)
            self.assertEqual(len(list((Path(tmp) / "json").glob("render_*.json"))), 1)

    def test_main_reads_config_path_from_dotenv_file(self) -> None:
        cwd = os.getcwd()
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.yml"
            config_path.write_text(_config_yaml(tmp, "[json]"), encoding="utf-8")
            (Path(tmp) / ".env").write_text(f"{CONFIG_ENVVAR}={config_path}\n", encoding="utf-8")
            os.chdir(tmp)
            try:
                with patch.dict(os.environ, {}), patch.object(sys, "argv", ["asklucy", "render"]):
                    os.environ.pop(CONFIG_ENVVAR, None)
                    with self.assertRaises(SystemExit) as exit_info:
                        main()
                    self.assertEqual(os.environ.get(CONFIG_ENVVAR), str(config_path))
            finally:
                os.chdir(cwd)

            self.assertEqual(exit_info.exception.code, 0)
            self.assertEqual(len(list((Path(tmp) / "json").glob("render_*.json"))), 1)

    def test_invalid_config_fails(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.yml"
            config_path.write_text(
                "queries:\n  - clauses:\n      - term: two words\n",
                encoding="utf-8",
            )
            result = CliRunner().invoke(cli, ["--config", str(config_path), "render"])

        self.assertNotEqual(result.exit_code, 0)
        self.assertIn("whitespace", result.output)


class TestOutputWriters(unittest.TestCase):
    def test_console_writer_logs_named_query(self) -> None:
        with self.assertLogs("AskLucy", level="INFO") as captured:
            ConsoleOutputWriter().write_query("books", "+title:quick")
            ConsoleOutputWriter().write_query(None, "fox")
        self.assertEqual([r.getMessage() for r in captured.records], ["books: +title:quick", "fox"])

    def test_factory_builds_configured_writers(self) -> None:
        raw = {
            "output": {"base_dir": "out", "formats": ["console", "json"]},
            "queries": [{"clauses": [{"term": "a"}]}],
        }
        writer = create_output_writer(parse_config_dict(raw))
        kinds = [type(w) for w in writer.writers]
        self.assertEqual(kinds, [ConsoleOutputWriter, JsonFileWriter])


if __name__ == "__main__":
    unittest.main()
