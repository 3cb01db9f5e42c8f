"""CLI argument and exit-status behavior tests.

Verifies how ``tmenu.cli.main`` builds the context window, forwards options,
and turns fatal errors into diagnostics.
"""

from __future__ import annotations

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest import mock

from tmenu import cli
from tmenu.errors import OutputError, SourceOpenError
from tmenu.runtime.session import ContextWindow


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        for name, value in (
            ("load_context_lines", (1, 1)),
            ("load_multi_output", False),
            ("load_search_config", None),
        ):
            patcher = mock.patch(f"tmenu.cli.{name}", return_value=value)
            patcher.start()
            self.addCleanup(patcher.stop)

    def _run(self, argv: list[str], status: int = 0) -> mock.Mock:
        with mock.patch("tmenu.cli.run_menu", return_value=status) as run_menu:
            with self.assertRaises(SystemExit) as ctx:
                cli.main(argv)
        self.assertEqual(ctx.exception.code, status)
        return run_menu

    def test_defaults_read_stdin_with_one_line_of_context(self) -> None:
        run_menu = self._run([])

        path, context = run_menu.call_args.args
        self.assertIsNone(path)
        self.assertEqual(context, ContextWindow(before=1, after=1))
        self.assertFalse(run_menu.call_args.kwargs["multi_output"])

    def test_file_and_flags_are_forwarded(self) -> None:
        run_menu = self._run(["-m", "-a", "2", "-b", "5", "list.txt"])

        path, context = run_menu.call_args.args
        self.assertEqual(path, Path("list.txt"))
        self.assertEqual(context, ContextWindow(before=2, after=5))
        self.assertTrue(run_menu.call_args.kwargs["multi_output"])

    def test_context_shorthand_splits_floor_before(self) -> None:
        run_menu = self._run(["-c", "5"])

        self.assertEqual(run_menu.call_args.args[1], ContextWindow(before=2, after=3))

    def test_explicit_before_overrides_shorthand(self) -> None:
        run_menu = self._run(["-c", "4", "-a", "0"])

        self.assertEqual(run_menu.call_args.args[1], ContextWindow(before=0, after=2))

    def test_configured_context_is_default(self) -> None:
        with mock.patch("tmenu.cli.load_context_lines", return_value=(3, 4)):
            run_menu = self._run([])

        self.assertEqual(run_menu.call_args.args[1], ContextWindow(before=3, after=4))

    def test_runtime_status_becomes_exit_code(self) -> None:
        self._run([], status=130)

    def test_fatal_error_prints_diagnostic_and_exits_one(self) -> None:
        stderr = io.StringIO()
        with mock.patch("tmenu.cli.run_menu", side_effect=SourceOpenError("cannot open x: No such file")):
            with redirect_stderr(stderr), self.assertRaises(SystemExit) as ctx:
                cli.main(["x"])

        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("tmenu: cannot open x: No such file", stderr.getvalue())

    def test_broken_pipe_on_output_is_one_line_diagnostic(self) -> None:
        stderr = io.StringIO()
        error = OutputError("cannot write selection: Broken pipe")
        error.__cause__ = BrokenPipeError(32, "Broken pipe")
        with mock.patch("tmenu.cli.run_menu", side_effect=error), mock.patch("tmenu.cli._discard_stdout") as discard:
            with redirect_stderr(stderr), self.assertRaises(SystemExit) as ctx:
                cli.main([])

        self.assertEqual(ctx.exception.code, 1)
        self.assertEqual(stderr.getvalue(), "tmenu: cannot write selection: Broken pipe\n")
        discard.assert_called_once_with()

    def test_keyboard_interrupt_exits_with_abort_status(self) -> None:
        with mock.patch("tmenu.cli.run_menu", side_effect=KeyboardInterrupt):
            with self.assertRaises(SystemExit) as ctx:
                cli.main([])

        self.assertEqual(ctx.exception.code, 130)

    def test_help_exits_zero(self) -> None:
        stdout = io.StringIO()
        with redirect_stdout(stdout), self.assertRaises(SystemExit) as ctx:
            cli.main(["-h"])

        self.assertEqual(ctx.exception.code, 0)
        self.assertIn("usage: tmenu", stdout.getvalue())

    def test_negative_context_is_rejected(self) -> None:
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            cli.main(["-a", "-1"])

        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
