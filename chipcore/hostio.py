#!/usr/bin/env python3

"""
Host I/O Functionality

Handles loading ROM binaries for later writing into memory, and converting
user-supplied colours into RGB triplets.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from string import hexdigits


class Loader:
    def load_binary(self, filename):
        with open(filename, "rb") as f:
            return f.read()


def parse_colour(text):
    # Accepts RRGGBB, #RRGGBB or 0xRRGGBB
    colour = text.strip()

    if colour.startswith("#"):
        colour = colour[1:]
    elif colour[:2].lower() == "0x":
        colour = colour[2:]

    if len(colour) != 6 or any(char not in hexdigits for char in colour):
        raise ValueError("Colours must be 6 hex digits long, optionally prefixed with '#' or '0x': {!r}".format(text))

    value = int(colour, 16)
    return value >> 16, (value >> 8) & 0xFF, value & 0xFF
