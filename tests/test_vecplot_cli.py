from __future__ import annotations

import contextlib
import importlib.util
import io
import json
from pathlib import Path
import tempfile
import unittest


def _load_main():
    path = Path(__file__).resolve().parents[1] / "main.py"
    spec = importlib.util.spec_from_file_location("vecplot_main", path)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


PLOT_TOML = """
[plot]
width = 120
height = 100

[[elements]]
type = "line"
points = [[-2, -5], [10, 5]]

[[elements]]
type = "axis"
orientation = "x"
tick_delta = 4

[[elements]]
type = "grid"
orientation = "y"
"""


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self.main = _load_main().main

    def _run(self, *argv: str) -> str:
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            self.main(list(argv))
        return out.getvalue()

    def test_ticks_from_delta(self) -> None:
        output = self._run("ticks", "--lowest", "-2", "--highest", "10", "--delta", "4")
        self.assertEqual(output.splitlines(), ["0\t0", "1\t4", "2\t8"])

    def test_ticks_hide_zero_from_values(self) -> None:
        output = self._run("ticks", "--lowest", "-1", "--highest", "1", "--values", "-1", "0", "1", "--hide-zero")
        self.assertEqual(output.splitlines(), ["-1\t-1", "1\t1"])

    def test_render_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "plot.toml"
            path.write_text(PLOT_TOML, encoding="utf-8")
            payload = json.loads(self._run("render", str(path), "--json"))
            summary = self._run("render", str(path))
        self.assertEqual(payload["x_ticks"], [0.0, 4.0, 8.0])
        self.assertEqual([item["kind"] for item in payload["items"]], ["line", "axis", "grid"])
        self.assertIn("plot 120x100", summary)
        self.assertIn("axis x: 0:0 1:4 2:8", summary)


if __name__ == "__main__":
    unittest.main()
