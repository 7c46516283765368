"""
Command line driver tests for jlox.

Author: xwest
"""

import unittest
import sys
import os
import io
import json
import tempfile
from contextlib import redirect_stdout, redirect_stderr

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from jlox.cli import (
    main, run_file, run_prompt, EX_OK, EX_USAGE, EX_DATAERR, EX_NOINPUT
)


class TestCli(unittest.TestCase):
    """Exit codes and output of the jlox driver."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmpdir = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, name: str, text: str) -> str:
        path = os.path.join(self.tmpdir, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def _call(self, func, *args, **kwargs):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = func(*args, **kwargs)
        return code, out.getvalue(), err.getvalue()

    def test_run_file_ok(self):
        path = self._write("ok.lox", "var x = 1;\n")
        code, out, err = self._call(run_file, path)
        self.assertEqual(code, EX_OK)
        lines = out.splitlines()
        self.assertEqual(lines[0], "VAR var 1")
        self.assertEqual(lines[3], "NUMBER 1 1.0 1")
        self.assertEqual(lines[-1], "EOF  2")
        self.assertEqual(err, "")

    def test_run_file_with_lexical_error(self):
        """Tokens are still printed; the exit code flags the error."""
        path = self._write("bad.lox", "print 1;\n@\n")
        code, out, err = self._call(run_file, path)
        self.assertEqual(code, EX_DATAERR)
        self.assertIn("PRINT print 1", out)
        self.assertIn("[line 2] Error: Unexpected character: '@'", err)

    def test_run_file_missing(self):
        code, out, err = self._call(run_file, os.path.join(self.tmpdir, "nope.lox"))
        self.assertEqual(code, EX_NOINPUT)
        self.assertEqual(out, "")
        self.assertIn("cannot read", err)

    def test_run_file_not_utf8(self):
        path = os.path.join(self.tmpdir, "latin1.lox")
        with open(path, "wb") as f:
            f.write(b"var \xff;")
        code, _, err = self._call(run_file, path)
        self.assertEqual(code, EX_DATAERR)
        self.assertIn("UTF-8", err)

    def test_json_output(self):
        path = self._write("json.lox", '"hi" 2')
        code, out, _ = self._call(main, [path, "--json"])
        self.assertEqual(code, EX_OK)
        records = [json.loads(line) for line in out.splitlines()]
        self.assertEqual(records[0], {
            "type": "STRING", "lexeme": '"hi"', "literal": "hi", "line": 1, "column": 1
        })
        self.assertEqual(records[1]["literal"], 2.0)
        self.assertEqual(records[-1]["type"], "EOF")

    def test_too_many_arguments(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["a.lox", "b.lox"])
        self.assertEqual(ctx.exception.code, EX_USAGE)

    def test_prompt(self):
        """Each line is scanned alone; errors do not end the session."""
        stdin = io.StringIO("print 1;\n@\nnil\n")
        code, out, err = self._call(run_prompt, stdin=stdin)
        self.assertEqual(code, EX_OK)
        self.assertEqual(out.count(">> "), 4)
        self.assertIn("PRINT print 1", out)
        self.assertIn("NIL nil 1", out)
        self.assertEqual(err.count("Error"), 1)

    def test_prompt_empty_input(self):
        code, out, _ = self._call(run_prompt, stdin=io.StringIO(""))
        self.assertEqual(code, EX_OK)
        self.assertEqual(out, ">> ")


if __name__ == '__main__':
    unittest.main()
