#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from chipcore.constants import DEFAULT_KEYMAP
from chipcore.inputs.i_null import Inputs, InputsError


class TestInputs(unittest.TestCase):
    def test_inputs_keymap(self):
        inputs = Inputs(DEFAULT_KEYMAP, None)
        self.assertEqual(0x0, inputs.keymap_dict[ord("x")])
        self.assertEqual(0x1, inputs.keymap_dict[ord("1")])
        self.assertEqual(0xC, inputs.keymap_dict[ord("4")])
        self.assertEqual(0xF, inputs.keymap_dict[ord("v")])

    def test_inputs_null_behaviour(self):
        inputs = Inputs(DEFAULT_KEYMAP, None)
        self.assertFalse(inputs.process_messages())
        self.assertEqual([False] * 0x10, inputs.get_key_states())
        self.assertFalse(inputs.is_key_down(0x5))
        inputs.shutdown()

    def test_inputs_keymap_wrong_length(self):
        self.assertRaises(InputsError, Inputs, "1,2,3", None)

    def test_inputs_keymap_not_integers(self):
        self.assertRaises(InputsError, Inputs, ",".join(["a"] * 16), None)

    def test_inputs_keymap_duplicates(self):
        self.assertRaises(InputsError, Inputs, ",".join(["1"] * 16), None)
