#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from chipotto import run
from chipcore.constants import APP_LICENCE, APP_NAME, APP_VERSION


class TestLauncher(unittest.TestCase):
    def _run_rom(self, rom):
        stdout = io.StringIO()

        with tempfile.TemporaryDirectory() as temp_dir:
            filename = os.path.join(temp_dir, "test.ch8")

            with open(filename, "wb") as f:
                f.write(rom)

            with redirect_stdout(stdout), self.assertRaises(SystemExit) as context:
                run([filename, "-r", "null", "-c", "10000"])

        return stdout.getvalue(), context.exception.code

    def test_launcher_stack_overflow_report(self):
        banner, message = self._run_rom(b"\x22\x00")  # Calls itself until the stack is full
        self.assertEqual("{} V{} -- {}\n".format(APP_NAME, APP_VERSION, APP_LICENCE), banner)
        self.assertIn("Emulation halted.", message)
        self.assertIn("Stack: 0x202 0x202", message)
        self.assertTrue(message.endswith("Stack overflow"))

    def test_launcher_jump_past_end_report(self):
        _, message = self._run_rom(b"\x60\x10\xBF\xF5")
        self.assertIn("PC: 0x1005", message)
        self.assertIn("Illegal memory access at address 0x1005", message)

    def test_launcher_rom_too_large(self):
        _, message = self._run_rom(b"\x00" * 0xE01)
        self.assertEqual("Error: Illegal memory access at address 0x200 for 3585 byte(s)", message)

    def test_launcher_licence(self):
        self.assertNotIn("Copyright", APP_LICENCE)
        self.assertIn("GNU Affero General Public License v3.0", APP_LICENCE)
