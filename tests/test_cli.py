import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

from riskgraph.cli.main import main


FIXTURE = os.path.join(os.path.dirname(__file__), "fixtures", "validate_payload.json")


class CliTests(unittest.TestCase):
    def test_writes_outputs_from_input_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            out = io.StringIO()
            with redirect_stdout(out):
                code = main(["--input", FIXTURE, "--out", tmp, "--html", "--log-level", "WARNING"])

            self.assertEqual(code, 0)
            for name in ("graph.json", "summary.md", "index.html"):
                self.assertTrue(os.path.exists(os.path.join(tmp, name)), name)
            self.assertIn("3 wallets", out.getvalue())

    def test_bad_input_file_exits_with_1(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            err = io.StringIO()
            with redirect_stdout(io.StringIO()), redirect_stderr(err):
                code = main(["--input", os.path.join(tmp, "nope.json"), "--out", tmp])

        self.assertEqual(code, 1)
        self.assertIn("DataSourceError", err.getvalue())

    def test_unknown_log_level_exits_with_2(self) -> None:
        with redirect_stderr(io.StringIO()):
            self.assertEqual(main(["--input", FIXTURE, "--log-level", "LOUD"]), 2)


if __name__ == "__main__":
    unittest.main()
