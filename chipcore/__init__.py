#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to start the emulator, replacing args with a dictionary
of options.  This can be done via the Terminal or GUI.

All options must be supplied.  Defaults can be specified with a 'None'.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_INTRO, APP_LICENCE, DEFAULT_CLOCK_SPEED, DEFAULT_COLOURS, DEFAULT_KEYMAP
from .debugger import Debugger
from .host import HostLoop
from .hostio import Loader
from .machine import Machine


class StartupError(Exception):
    pass


def main(args):
    print("".join((APP_INTRO, APP_LICENCE)))

    opt_renderer = args["renderer"]

    # flake8: noqa: F401
    if opt_renderer in (None, "pygame"):  # PyGame unless told otherwise
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import pygame
        except ImportError:
            raise StartupError(
                "PyGame does not appear to be installed.  Use the 'null' renderer to run without a display."
            )
        else:
            from .inputs.i_pygame import Inputs
            from .renderers.r_pygame import Renderer

    elif opt_renderer == "null":
        # pylint: disable=import-outside-toplevel
        from .inputs.i_null import Inputs
        from .renderers.r_null import Renderer

    else:
        raise StartupError("Unknown renderer: {}".format(opt_renderer))

    clock_speed = args["clock_speed"]

    if clock_speed is None:
        clock_speed = DEFAULT_CLOCK_SPEED
    elif clock_speed <= 0:
        raise StartupError("Clock speed must be a positive number of operations per second.")

    colours = (
        args["colour1"] or DEFAULT_COLOURS[0],
        args["colour2"] or DEFAULT_COLOURS[1]
    )

    # Read the ROM before anything else is set up, so a bad file never opens a window
    program = Loader().load_binary(args["filename"])

    # Set up debugger and live output if necessary
    debugger = Debugger()
    debugger.set_live(args["debug"])

    # Build the machine and load the ROM.  An oversized ROM is rejected here, before any instruction runs.
    machine = Machine(debugger=debugger)
    machine.load_program(program)

    # Set up the host rendering and input systems
    renderer = Renderer(scale=args["scale"], colours=colours)
    inputs = Inputs(args["keymap"] or DEFAULT_KEYMAP, renderer)

    try:
        HostLoop(machine, inputs, renderer, clock_speed=clock_speed).run()
    finally:
        # The machine has stopped, so shut down the rendering framework.  __del__ cannot be relied upon when using PyPy
        inputs.shutdown()
        renderer.shutdown()
