#!/usr/bin/env python3

"""
Machine

Plugs the memory, keypad, framebuffer and CPU together, and gives the host a
single object to drive.  The host loads a program, then calls cycle() at the
CPU clock rate and timer_tick() at 60Hz, reading the framebuffer whenever it
wants to refresh the display.

Pausing is a simple gate: while paused, neither cycles nor timer ticks have
any effect.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .cpu import CPU
from .framebuffer import Framebuffer
from .keypad import Keypad
from .memory import Memory


class Machine:
    def __init__(self, debugger=None, rng=None):
        self.memory = Memory()
        self.keypad = Keypad()
        self.framebuffer = Framebuffer()
        self.cpu = CPU(debugger=debugger, rng=rng)
        self.paused = False

    def load_program(self, program):
        self.memory.load_program(program)

    def cycle(self):
        if not self.paused:
            self.cpu.cycle(self.framebuffer, self.memory, self.keypad)

    def timer_tick(self):
        if not self.paused:
            self.cpu.timer_tick()

    def reset(self):
        # The loaded program (and the glyphs) stay in memory
        self.cpu.reset()
        self.framebuffer.clear()
        self.keypad.release_all()

    def pause(self):
        self.paused = True

    def resume(self):
        self.paused = False

    def is_paused(self):
        return self.paused

    def get_framebuffer(self):
        return self.framebuffer

    def set_key(self, key, down):
        self.keypad.set_down(key, down)

    def set_keys(self, states):
        self.keypad.set_all(states)

    def is_sound_active(self):
        # Audio is never produced, but the host can still see when the buzzer would be on
        return self.cpu.st > 0
