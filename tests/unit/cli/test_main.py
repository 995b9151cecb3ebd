"""CLI argument, default-path, and error-exit behavior tests."""

from __future__ import annotations

import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from rls import cli
from rls.config import ListingDefaults


class CliTests(unittest.TestCase):
    def _run(self, argv: list[str], defaults: ListingDefaults | None = None, **kwargs) -> tuple[str, str, int | None]:
        stdout = io.StringIO()
        stderr = io.StringIO()
        exit_code: int | None = None
        with (
            mock.patch.object(sys, "argv", ["rls", *argv]),
            mock.patch("rls.cli.load_listing_defaults", return_value=defaults or ListingDefaults()),
            mock.patch.dict(os.environ, {"NO_COLOR": ""}),
            mock.patch("sys.stdout", stdout),
            mock.patch("sys.stderr", stderr),
        ):
            try:
                cli.main(**kwargs)
            except SystemExit as exc:
                exit_code = exc.code
        return stdout.getvalue(), stderr.getvalue(), exit_code

    def test_main_defaults_to_current_working_directory_when_no_path_arg(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            previous_cwd = Path.cwd()
            try:
                os.chdir(root)
                with mock.patch("rls.cli.render_listing", return_value="") as render_listing:
                    self._run([])
            finally:
                os.chdir(previous_cwd)

            options = render_listing.call_args.args[0]
            self.assertEqual(options.path.resolve(), root)
            self.assertFalse(options.show_hidden)
            self.assertFalse(options.sort_by_modified)
            self.assertFalse(options.reverse)
            self.assertFalse(options.show_git_status)

    def test_flags_map_onto_listing_options(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            with mock.patch("rls.cli.render_listing", return_value="") as render_listing:
                self._run(["-a", "-t", "-r", "-g", "--no-color", "--theme", "ocean", str(root)])

            options = render_listing.call_args.args[0]
            self.assertEqual(options.path, root)
            self.assertTrue(options.show_hidden)
            self.assertTrue(options.sort_by_modified)
            self.assertTrue(options.reverse)
            self.assertTrue(options.show_git_status)
            self.assertTrue(options.no_color)
            self.assertEqual(options.theme, "ocean")

    def test_config_defaults_apply_without_flags(self) -> None:
        defaults = ListingDefaults(show_hidden=True, show_git_status=True, sort_by_modified=True, theme="ocean")
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("rls.cli.render_listing", return_value="") as render_listing:
                self._run([tmp], defaults=defaults)

            options = render_listing.call_args.args[0]
            self.assertTrue(options.show_hidden)
            self.assertTrue(options.show_git_status)
            self.assertTrue(options.sort_by_modified)
            self.assertEqual(options.theme, "ocean")

    def test_no_color_environment_variable_disables_color(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with (
                mock.patch("rls.cli.render_listing", return_value="") as render_listing,
                mock.patch.dict(os.environ, {"NO_COLOR": "1"}),
                mock.patch.object(sys, "argv", ["rls", tmp]),
                mock.patch("rls.cli.load_listing_defaults", return_value=ListingDefaults()),
            ):
                cli.main()
            self.assertTrue(render_listing.call_args.args[0].no_color)

    def test_prints_table_for_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "hello.txt").write_text("hi\n", encoding="utf-8")
            (root / ".secret").write_text("x\n", encoding="utf-8")

            stdout, stderr, exit_code = self._run(["--no-color", str(root)])

            self.assertIsNone(exit_code)
            self.assertEqual(stderr, "")
            self.assertIn("hello.txt", stdout)
            self.assertNotIn(".secret", stdout)
            self.assertNotIn("\033[", stdout)

    def test_missing_path_exits_with_warning_line(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "nope"
            stdout, stderr, exit_code = self._run([str(missing)])

        self.assertEqual(exit_code, 1)
        self.assertEqual(stdout, "")
        self.assertTrue(stderr.startswith(f"{cli.WARNING_MARKER} path not found"))
        self.assertEqual(len(stderr.splitlines()), 1)

    def test_collection_failure_prints_no_table(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "file.txt"
            target.write_text("x\n", encoding="utf-8")

            stdout, stderr, exit_code = self._run([str(target)])

        self.assertEqual(exit_code, 1)
        self.assertEqual(stdout, "")
        self.assertTrue(stderr.startswith(f"{cli.WARNING_MARKER} cannot read directory"))

    def test_default_path_argument_is_used_when_no_path_given(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "only.txt").write_text("x\n", encoding="utf-8")
            stdout, _stderr, exit_code = self._run(["--no-color"], default_path=root)

        self.assertIsNone(exit_code)
        self.assertIn("only.txt", stdout)


if __name__ == "__main__":
    unittest.main()
