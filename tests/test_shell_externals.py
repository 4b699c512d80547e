import os
import tempfile
import unittest

import shell_externals
from exceptions import SpawnError
from process import ProcessResult
from shell_state import ShellState
from tests.fakes import FakeRunner


class TestShellExternals(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)
        self.cwd = os.path.realpath(self.tmpdir.name)
        self.state = ShellState(home_directory=self.cwd)

    def test_registry_contains_ls_only(self):
        self.assertEqual({"ls"}, set(shell_externals.EXTERNALS))

    def test_looks_like_option(self):
        self.assertTrue(shell_externals.looks_like_option("-la"))
        self.assertTrue(shell_externals.looks_like_option("--all"))
        self.assertFalse(shell_externals.looks_like_option("dir"))
        self.assertFalse(shell_externals.looks_like_option("a-b"))

    # -----------------------
    # argv construction
    # -----------------------
    def test_trailing_flag_appends_current_directory(self):
        argv = shell_externals.build_ls_argv(["-la"], self.state)
        self.assertEqual(["ls", "-la", self.cwd], argv)

    def test_flags_after_path_still_append_directory(self):
        argv = shell_externals.build_ls_argv(["sub", "-l"], self.state)
        self.assertEqual(["ls", "sub", "-l", self.cwd], argv)

    def test_trailing_path_is_passed_verbatim(self):
        argv = shell_externals.build_ls_argv(["-l", "sub"], self.state)
        self.assertEqual(["ls", "-l", "sub"], argv)

    def test_no_args_is_passed_verbatim(self):
        self.assertEqual(["ls"], shell_externals.build_ls_argv([], self.state))

    # -----------------------
    # handler
    # -----------------------
    def test_ls_runs_in_current_directory(self):
        result = ProcessResult(b"a\nb\n", b"", 0)
        runner = FakeRunner(result)

        got = shell_externals.EXTERNALS["ls"]([], self.state, runner)

        self.assertIs(result, got)
        self.assertEqual([(["ls"], self.cwd)], runner.calls)

    def test_ls_with_flag_passes_directory_explicitly(self):
        runner = FakeRunner()
        shell_externals.EXTERNALS["ls"](["-a"], self.state, runner)
        self.assertEqual([(["ls", "-a", self.cwd], self.cwd)], runner.calls)

    def test_ls_propagates_spawn_errors(self):
        runner = FakeRunner(error=SpawnError("ls: failed to call ls: boom"))
        with self.assertRaises(SpawnError):
            shell_externals.EXTERNALS["ls"]([], self.state, runner)


if __name__ == "__main__":
    unittest.main()
