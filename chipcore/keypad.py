#!/usr/bin/env python3

"""
Keypad Emulator

Sixteen logical keys, 0 to F, each either held down or released.  The host
overwrites the whole latch every time it polls its own input devices, so no
history is kept here.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import NUM_KEYS


class KeypadError(Exception):
    pass


class Keypad:
    def __init__(self):
        self.keys = [False] * NUM_KEYS

    def _check_key(self, key):
        if not 0 <= key < NUM_KEYS:
            raise KeypadError("Key 0x{:x} is out of range".format(key))

    def set_down(self, key, down):
        self._check_key(key)
        self.keys[key] = bool(down)

    def is_down(self, key):
        self._check_key(key)
        return self.keys[key]

    def first_down_key(self):
        # Lowest key wins if several are held
        for key, down in enumerate(self.keys):
            if down:
                return key

        return None

    def set_all(self, states):
        if len(states) != NUM_KEYS:
            raise KeypadError("Exactly {} key states are required".format(NUM_KEYS))

        self.keys[:] = [bool(state) for state in states]

    def release_all(self):
        self.keys[:] = [False] * NUM_KEYS
