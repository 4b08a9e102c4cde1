import os
import shutil
import tempfile
import unittest
from io import StringIO
from unittest.mock import mock_open, patch

from dotgraph.cli import run


class CliTest(unittest.TestCase):
    def setUp(self):
        self.dir = tempfile.mkdtemp()
        self.test_file = os.path.join(self.dir, "deps.py")
        # a single graph, built with the names the cli binds
        self.test_content_1 = """
graph = digraph("deps", lambda g: g.edge("a", "b", "c"))
"""
        # two graphs, one of them using a nested subgraph
        self.test_content_2 = """
from dotgraph import Graph

with Graph("outer") as first:
    first.boxes()
    with Graph("inner") as inner:
        inner.edge("x", "y")

second = first.invert()
"""

    def tearDown(self):
        shutil.rmtree(self.dir)

    def write(self, path, content):
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)

    def read(self, path):
        with open(path, encoding="utf-8") as f:
            return f.read()

    def test_run_with_valid_file(self):
        self.write(self.test_file, self.test_content_1)
        with patch("sys.argv", ["dotgraph", self.test_file]):
            exit_code = run()
        self.assertEqual(exit_code, 0)
        text = self.read(os.path.join(self.dir, "deps.dot"))
        self.assertEqual('digraph deps\n  {\n    "a" -> "b";\n    "b" -> "c";\n  }\n', text)

    def test_run_with_multiple_graphs(self):
        path = os.path.join(self.dir, "multi.py")
        self.write(path, self.test_content_2)
        with patch("sys.argv", ["dotgraph", path]):
            exit_code = run()
        self.assertEqual(exit_code, 0)
        first = self.read(os.path.join(self.dir, "multi_first.dot"))
        self.assertIn("subgraph inner", first)
        self.assertTrue(os.path.exists(os.path.join(self.dir, "multi_second.dot")))
        self.assertFalse(os.path.exists(os.path.join(self.dir, "multi_inner.dot")))

    def test_run_with_format(self):
        self.write(self.test_file, self.test_content_1)
        stem = os.path.join(self.dir, "deps")
        with patch("dotgraph.graph.Graph.system") as system:
            with patch("sys.argv", ["dotgraph", "-T", "svg", self.test_file]):
                run()
        system.assert_called_once_with(f"dot -Tsvg {stem}.dot > {stem}.svg")

    def test_run_with_no_arguments(self):
        with patch("sys.argv", ["dotgraph"]):
            with patch("sys.stderr", new=StringIO()) as fake_stderr:
                with self.assertRaises(SystemExit):
                    run()
                usage = fake_stderr.getvalue()
                self.assertIn("usage: dotgraph", usage)
                self.assertIn("-T FMT", usage)
                self.assertIn("the following arguments are required: path", usage)

    def test_run_without_graphs(self):
        path = os.path.join(self.dir, "empty.py")
        self.write(path, "nodes = [\"a\", \"b\"]\n")
        with patch("sys.argv", ["dotgraph", path]):
            self.assertEqual(run(), 0)
        self.assertEqual(["empty.py"], os.listdir(self.dir))

    def test_run_stops_at_nonexistent_file(self):
        missing = os.path.join(self.dir, "nonexistent.py")
        self.write(self.test_file, self.test_content_1)
        with patch("sys.argv", ["dotgraph", missing, self.test_file]):
            with self.assertRaises(FileNotFoundError):
                run()
        self.assertFalse(os.path.exists(os.path.join(self.dir, "deps.dot")))

    def test_run_with_invalid_python_code(self):
        invalid_content = "this is not valid python code"
        with patch("dotgraph.graph.Graph.save") as save:
            with patch("builtins.open", mock_open(read_data=invalid_content)):
                with patch("sys.argv", ["dotgraph", self.test_file]):
                    with self.assertRaises(SyntaxError) as ctx:
                        run()
        self.assertEqual(self.test_file, ctx.exception.filename)
        save.assert_not_called()
