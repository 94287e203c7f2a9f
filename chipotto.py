#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"
__version__ = "0.1.0"

import sys
from argparse import ArgumentParser, ArgumentTypeError
from chipcore import main, StartupError
from chipcore.constants import DEFAULT_CLOCK_SPEED, DEFAULT_KEYMAP
from chipcore.cpu import CPUError
from chipcore.hostio import parse_colour
from chipcore.inputs.i_null import InputsError
from chipcore.memory import MemoryFault
from chipcore.renderers.r_null import RendererError
from chipcore.stack import StackError


def clock_speed_type(value):
    try:
        clock_speed = int(value)
    except ValueError:
        raise ArgumentTypeError("clock speed must be a whole number, not {!r}".format(value)) from None

    if clock_speed <= 0:
        raise ArgumentTypeError("clock speed must be greater than zero")

    return clock_speed


def colour_type(value):
    try:
        return parse_colour(value)
    except ValueError as err:
        raise ArgumentTypeError(str(err)) from None


def parse_args(argv=None):
    parser = ArgumentParser(description="Simple CHIP-8 emulator")
    parser.add_argument("filename", help="ROM to execute (normally ending in .ch8 or .c8)")
    parser.add_argument(
        "-c", "--clock_speed", type=clock_speed_type, default=DEFAULT_CLOCK_SPEED,
        help="set the CPU speed in operations/second (default {})".format(DEFAULT_CLOCK_SPEED)
    )
    parser.add_argument(
        "--colour1", type=colour_type,
        help="colour of unset pixels in hex, e.g. 000000 or #000000 (default black)"
    )
    parser.add_argument(
        "--colour2", type=colour_type,
        help="colour of set pixels in hex, e.g. FFFFFF or #FFFFFF (default white)"
    )
    parser.add_argument(
        "-r", "--renderer", choices=["pygame", "null"],
        help="set the rendering and input systems (pygame by default)"
    )
    parser.add_argument(
        "-s", "--scale", type=int,
        help="set the window width in PyGame mode (default 512)"
    )
    parser.add_argument(
        "-k", "--keymap", default=DEFAULT_KEYMAP,
        help="redefine the 16 keyscan codes for keys 0-F.  Separate each decimal with a comma"
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", default=False,
        help="enable live debug output.  Slows CPU execution"
    )
    return parser.parse_args(argv)  # Can call sys.exit(2) if args are incorrect


def run(argv=None):
    args = vars(parse_args(argv))

    try:
        # It is possible to start the emulator from a GUI by calling this with a dictionary
        main(args)
    except (CPUError, MemoryFault, StackError) as err:
        # A fault in a running program carries a report, a ROM that is too large does not
        sys.exit("{}\n\n{}".format(err.report, err) if err.report else "Error: {}".format(err))
    except (StartupError, OSError, InputsError, RendererError) as err:
        sys.exit("Error: {}".format(err))


if __name__ == "__main__":
    run()
