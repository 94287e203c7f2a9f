#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import os
import tempfile
import unittest
from chipcore.hostio import Loader, parse_colour


class TestLoader(unittest.TestCase):
    def setUp(self):
        self.loader = Loader()

    def test_loader_load_file_present(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            filename = os.path.join(temp_dir, "test.ch8")

            with open(filename, "wb") as f:
                f.write(b"\x60\x05\x70\x03")

            self.assertEqual(b"\x60\x05\x70\x03", self.loader.load_binary(filename))

    def test_loader_load_file_missing(self):
        self.assertRaises(FileNotFoundError, self.loader.load_binary, "NoFile.ch8")


class TestParseColour(unittest.TestCase):
    def test_parse_colour(self):
        self.assertEqual((0x12, 0x34, 0xAB), parse_colour("1234ab"))
        self.assertEqual((0xFF, 0x00, 0x80), parse_colour("#FF0080"))
        self.assertEqual((0x00, 0x00, 0x01), parse_colour("0x000001"))

    def test_parse_colour_invalid(self):
        for colour in "", "#12345", "1234567", "12345G", "+12345", "1_2345", "0x", "##123456":
            self.assertRaises(ValueError, parse_colour, colour)
