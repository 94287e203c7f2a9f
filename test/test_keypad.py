#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from chipcore.keypad import Keypad, KeypadError


class TestKeypad(unittest.TestCase):
    def setUp(self):
        self.keypad = Keypad()

    def test_keypad_init(self):
        for key in range(0x10):
            self.assertFalse(self.keypad.is_down(key))

        self.assertIsNone(self.keypad.first_down_key())

    def test_keypad_set_down(self):
        self.keypad.set_down(0xA, True)
        self.assertTrue(self.keypad.is_down(0xA))
        self.keypad.set_down(0xA, False)
        self.assertFalse(self.keypad.is_down(0xA))

    def test_keypad_first_down_key_lowest_wins(self):
        self.keypad.set_down(0xF, True)
        self.assertEqual(0xF, self.keypad.first_down_key())
        self.keypad.set_down(0x3, True)
        self.keypad.set_down(0x7, True)
        self.assertEqual(0x3, self.keypad.first_down_key())
        self.keypad.set_down(0x0, True)
        self.assertEqual(0x0, self.keypad.first_down_key())

    def test_keypad_set_all(self):
        states = [False] * 0x10
        states[0x5] = True
        self.keypad.set_down(0x1, True)
        self.keypad.set_all(states)
        self.assertFalse(self.keypad.is_down(0x1))
        self.assertTrue(self.keypad.is_down(0x5))
        self.assertRaises(KeypadError, self.keypad.set_all, [True] * 0xF)

    def test_keypad_release_all(self):
        self.keypad.set_all([True] * 0x10)
        self.keypad.release_all()
        self.assertIsNone(self.keypad.first_down_key())

    def test_keypad_out_of_range(self):
        self.assertRaises(KeypadError, self.keypad.is_down, 0x10)
        self.assertRaises(KeypadError, self.keypad.set_down, -1, True)
