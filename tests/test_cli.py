"""Tests for the command line interface."""

from __future__ import annotations

import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from contrastpack.cli import main


def _run(argv: list[str]) -> tuple[int, str, str]:
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = main(argv)
    return code, out.getvalue(), err.getvalue()


def _write_theme(td: str, sections: list[dict]) -> Path:
    path = Path(td) / "theme.json"
    path.write_text(json.dumps({"padding_base": 10, "sections": sections}), encoding="utf-8")
    return path


class TestResolveCommand(unittest.TestCase):
    def test_json_output(self) -> None:
        code, out, _ = _run(["resolve", "-b", "#ffffff", "--padding", "10", "--json"])
        self.assertEqual(code, 0)
        values = json.loads(out)
        self.assertEqual(values["foreground"], "#000000")
        self.assertEqual(values["link"], "inherit")
        self.assertIsNone(values["container_padding"])
        self.assertEqual(values["child_padding"], "calc(10% - 2em)")

    def test_text_output_with_anchor(self) -> None:
        code, out, _ = _run(["resolve", "-b", "hsl(0, 0%, 20%)", "-a", "hsl(0, 0%, 20%)", "--padding", "10"])
        self.assertEqual(code, 0)
        self.assertIn("foreground", out)
        self.assertIn("#ffffff", out)

    def test_invalid_color(self) -> None:
        code, _, err = _run(["resolve", "-b", "#12"])
        self.assertEqual(code, 1)
        self.assertIn("Error:", err)
        self.assertIn("#12", err)

    def test_empty_anchor_is_an_error(self) -> None:
        code, out, err = _run(["resolve", "-b", "#ffffff", "--anchor", ""])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Error:", err)


class TestThemeCommands(unittest.TestCase):
    def test_css_to_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            theme = _write_theme(td, [{"name": "a", "selector": ".a", "background": "#fff", "anchor": "#0b5ed7"}])
            target = Path(td) / "out.css"
            code, out, err = _run(["css", "--theme", str(theme), "--out", str(target)])
            self.assertEqual(code, 0)
            self.assertTrue(target.exists())
            self.assertIn("Stylesheet written", out)
            self.assertEqual(err, "")

    def test_css_to_stdout_prints_warnings_to_stderr(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            theme = _write_theme(td, [{"name": "a", "selector": ".a", "background": "#fff"}])
            code, out, err = _run(["css", "--theme", str(theme)])
        self.assertEqual(code, 0)
        self.assertIn(".a {", out)
        self.assertIn("Warnings (1)", err)

    def test_check_strict_fails_on_low_contrast(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            theme = _write_theme(td, [{"name": "gray", "selector": ".g", "background": "hsl(0, 0%, 50%)"}])
            code, out, _ = _run(["check", "--theme", str(theme)])
            self.assertEqual(code, 0)
            self.assertIn("AA normal: FAIL", out)

            code, _, _ = _run(["check", "--theme", str(theme), "--strict"])
            self.assertEqual(code, 1)

    def test_check_writes_resolved_json(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            theme = _write_theme(td, [{"name": "a", "selector": ".a", "background": "#000"}])
            target = Path(td) / "resolved.json"
            code, _, _ = _run(["check", "--theme", str(theme), "--strict", "--out", str(target)])
            self.assertEqual(code, 0)
            self.assertEqual(json.loads(target.read_text(encoding="utf-8"))["sections"][0]["foreground"], "#ffffff")

    def test_preview(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            theme = _write_theme(td, [{"name": "a", "selector": ".a", "background": "#fff"}])
            out_dir = Path(td) / "preview"
            code, out, _ = _run(["preview", "--theme", str(theme), "--out", str(out_dir)])
            self.assertEqual(code, 0)
            self.assertTrue((out_dir / "index.html").exists())
            self.assertIn("Preview generated", out)

    def test_missing_theme_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            code, _, err = _run(["css", "--theme", str(Path(td) / "nope.json")])
        self.assertEqual(code, 1)
        self.assertIn("Error:", err)

    def test_bad_color_in_theme(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            theme = _write_theme(td, [{"name": "a", "selector": ".a", "background": "bluish"}])
            code, _, err = _run(["check", "--theme", str(theme)])
        self.assertEqual(code, 1)
        self.assertIn("bluish", err)


class TestVersion(unittest.TestCase):
    def test_version_exits(self) -> None:
        out = io.StringIO()
        with redirect_stdout(out), self.assertRaises(SystemExit) as ctx:
            main(["--version"])
        self.assertEqual(ctx.exception.code, 0)
        self.assertIn("ContrastPack", out.getvalue())


if __name__ == "__main__":
    unittest.main()
