#!/usr/bin/env python3

"""
CPU Emulator (CHIP-8)

Like a real computer, this is where most of the processing happens.  Each call
to cycle() fetches one instruction, moves the program counter past it, decodes
it and executes it.  The program counter is advanced before execution, so
jumps, skips and rewinds all work relative to the next instruction.

The CPU owns its registers, timers and call stack only.  Memory, the
framebuffer and the keypad are handed in on every cycle, so the CPU never
holds on to another part of the machine.

Timing is not handled here.  The host decides how often to call cycle() and
timer_tick(), and the two are completely independent of each other.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

# pylint: disable=unused-argument

from random import Random
from .constants import (
    APP_INTRO, PROGRAM_START, NUM_REGISTERS, STACK_SIZE, INSTRUCTION_WIDTH, FONT_LOCATION, GLYPH_HEIGHT
)
from .debugger import Debugger
from .instructions import CPUError, DecodeError, Op, decode
from .memory import MemoryFault
from .stack import Stack, StackError

__all__ = ["CPU", "CPUError", "DecodeError"]


class CPU:
    def __init__(self, debugger=None, rng=None):
        self.debugger = Debugger() if debugger is None else debugger
        self.live_debug = self.debugger.is_live()
        self.rng = Random() if rng is None else rng
        self.stack = Stack(STACK_SIZE)

        self.instructions = {
            Op.SYS:       self._0nnn,
            Op.CLS:       self._00E0,
            Op.RET:       self._00EE,
            Op.JP:        self._1nnn,
            Op.CALL:      self._2nnn,
            Op.SE_VX_KK:  self._3xkk,
            Op.SNE_VX_KK: self._4xkk,
            Op.SE_VX_VY:  self._5xy0,
            Op.LD_VX_KK:  self._6xkk,
            Op.ADD_VX_KK: self._7xkk,
            Op.LD_VX_VY:  self._8xy0,
            Op.OR:        self._8xy1,
            Op.AND:       self._8xy2,
            Op.XOR:       self._8xy3,
            Op.ADD_VX_VY: self._8xy4,
            Op.SUB:       self._8xy5,
            Op.SHR:       self._8xy6,
            Op.SUBN:      self._8xy7,
            Op.SHL:       self._8xyE,
            Op.SNE_VX_VY: self._9xy0,
            Op.LD_I:      self._Annn,
            Op.JP_V0:     self._Bnnn,
            Op.RND:       self._Cxkk,
            Op.DRW:       self._Dxyn,
            Op.SKP:       self._Ex9E,
            Op.SKNP:      self._ExA1,
            Op.LD_VX_DT:  self._Fx07,
            Op.LD_VX_K:   self._Fx0A,
            Op.LD_DT_VX:  self._Fx15,
            Op.LD_ST_VX:  self._Fx18,
            Op.ADD_I_VX:  self._Fx1E,
            Op.LD_F_VX:   self._Fx29,
            Op.LD_B_VX:   self._Fx33,
            Op.LD_I_VX:   self._Fx55,
            Op.LD_VX_I:   self._Fx65
        }

        self.reset()

    def reset(self, start_location=PROGRAM_START):
        self.v = memoryview(bytearray(NUM_REGISTERS))  # Mutable, so this should be fast when a register is updated
        self.i = 0    # Index register
        self.dt = 0   # Delay timer
        self.st = 0   # Sound timer
        self.pc = start_location
        self.debug_pc = start_location
        self.opcode = 0
        self.stack.clear()

    def cycle(self, framebuffer, memory, keypad):
        # Keep track of the program counter before altering it in any way for debugging purposes
        self.debug_pc = self.pc
        instruction = "???"

        try:
            self.opcode = self.fetch(memory)
            self.inc_pc()  # Program counter updates after fetch, but before execute
            instruction = decode(self.opcode)

            if self.live_debug:
                self.debugger.output(self, instruction)

            self.execute(instruction, framebuffer, memory, keypad)
        except (CPUError, MemoryFault, StackError) as err:
            # Every one of these halts emulation, so attach the machine state for the user
            err.report = self.crash_report(instruction)
            raise

    def fetch(self, memory):
        return memory.read_word(self.pc)

    def execute(self, instruction, framebuffer, memory, keypad):
        self.instructions[instruction.op](instruction, framebuffer, memory, keypad)

    def timer_tick(self):
        if self.dt > 0:
            self.dt -= 1

        if self.st > 0:
            self.st -= 1

    def inc_pc(self):
        # Running off the end of memory faults on the next fetch
        self.pc += INSTRUCTION_WIDTH

    def dec_pc(self):
        # Only used to re-run instructions (i.e. keypress wait)
        self.pc = (self.pc - INSTRUCTION_WIDTH) & 0xFFF

    def crash_report(self, instruction):
        return "Emulation halted.\n\n{}Debug info:\n{}".format(
            APP_INTRO, self.debugger.debug(self, instruction, verbose=True)
        )

    def _0nnn(self, ins, framebuffer, memory, keypad):  # SYS addr
        # Calls into host machine code on the original hardware.  Ignored by every modern interpreter.
        pass

    def _00E0(self, ins, framebuffer, memory, keypad):  # CLS
        framebuffer.clear()

    def _00EE(self, ins, framebuffer, memory, keypad):  # RET
        # Returning with nothing on the stack leaves the program counter alone
        if not self.stack.is_empty():
            self.pc = self.stack.pop()

    def _1nnn(self, ins, framebuffer, memory, keypad):  # JP addr
        self.pc = ins.nnn

    def _2nnn(self, ins, framebuffer, memory, keypad):  # CALL addr
        self.stack.push(self.pc)
        self.pc = ins.nnn

    def _3xkk(self, ins, framebuffer, memory, keypad):  # SE Vx, byte
        if self.v[ins.x] == ins.kk:
            self.inc_pc()

    def _4xkk(self, ins, framebuffer, memory, keypad):  # SNE Vx, byte
        if self.v[ins.x] != ins.kk:
            self.inc_pc()

    def _5xy0(self, ins, framebuffer, memory, keypad):  # SE Vx, Vy
        if self.v[ins.x] == self.v[ins.y]:
            self.inc_pc()

    def _6xkk(self, ins, framebuffer, memory, keypad):  # LD Vx, byte
        self.v[ins.x] = ins.kk

    def _7xkk(self, ins, framebuffer, memory, keypad):  # ADD Vx, byte
        # Wraps, and never touches Vf
        self.v[ins.x] = (self.v[ins.x] + ins.kk) & 0xFF

    def _8xy0(self, ins, framebuffer, memory, keypad):  # LD Vx, Vy
        self.v[ins.x] = self.v[ins.y]

    def _8xy1(self, ins, framebuffer, memory, keypad):  # OR Vx, Vy
        self.v[ins.x] |= self.v[ins.y]

    def _8xy2(self, ins, framebuffer, memory, keypad):  # AND Vx, Vy
        self.v[ins.x] &= self.v[ins.y]

    def _8xy3(self, ins, framebuffer, memory, keypad):  # XOR Vx, Vy
        self.v[ins.x] ^= self.v[ins.y]

    def _8xy4(self, ins, framebuffer, memory, keypad):  # ADD Vx, Vy
        val = self.v[ins.x] + self.v[ins.y]
        self.v[ins.x] = val & 0xFF
        self.v[0xF] = int(val > 0xFF)  # Vf is set when carrying

    def _post_8xy5_8xy7(self, ins, val):  # Post-SUB/SUBN
        self.v[ins.x] = val & 0xFF
        # Vf is set when NOT borrowing, and this should happen AFTER Vx is set, as sometimes Vf is specified in the
        # parameters.
        self.v[0xF] = int(val >= 0)

    def _8xy5(self, ins, framebuffer, memory, keypad):  # SUB Vx, Vy
        self._post_8xy5_8xy7(ins, self.v[ins.x] - self.v[ins.y])

    def _8xy6(self, ins, framebuffer, memory, keypad):  # SHR Vx
        val = self.v[ins.x]
        self.v[ins.x] = val >> 1
        self.v[0xF] = val & 1  # Least-significant bit, before the shift

    def _8xy7(self, ins, framebuffer, memory, keypad):  # SUBN Vx, Vy
        self._post_8xy5_8xy7(ins, self.v[ins.y] - self.v[ins.x])

    def _8xyE(self, ins, framebuffer, memory, keypad):  # SHL Vx
        val = self.v[ins.x]
        self.v[ins.x] = (val << 1) & 0xFF
        self.v[0xF] = (val & 0x80) >> 7  # Most-significant bit, before the shift

    def _9xy0(self, ins, framebuffer, memory, keypad):  # SNE Vx, Vy
        if self.v[ins.x] != self.v[ins.y]:
            self.inc_pc()

    def _Annn(self, ins, framebuffer, memory, keypad):  # LD I, addr
        self.i = ins.nnn

    def _Bnnn(self, ins, framebuffer, memory, keypad):  # JP V0, addr
        self.pc = self.v[0] + ins.nnn

    def _Cxkk(self, ins, framebuffer, memory, keypad):  # RND Vx, byte
        # The ANDing here is intentional.  This is not a random number between 0 and 'byte' inclusive.
        self.v[ins.x] = self.rng.randint(0, 0xFF) & ins.kk

    def _Dxyn(self, ins, framebuffer, memory, keypad):  # DRW Vx, Vy, nibble
        sprite = memory.read_block(self.i, ins.n)
        collided = framebuffer.draw(self.v[ins.x], self.v[ins.y], sprite)
        self.v[0xF] = int(collided)

    def _Ex9E(self, ins, framebuffer, memory, keypad):  # SKP Vx
        if keypad.is_down(self.v[ins.x] & 0xF):
            self.inc_pc()

    def _ExA1(self, ins, framebuffer, memory, keypad):  # SKNP Vx
        if not keypad.is_down(self.v[ins.x] & 0xF):
            self.inc_pc()

    def _Fx07(self, ins, framebuffer, memory, keypad):  # LD Vx, DT
        self.v[ins.x] = self.dt

    def _Fx0A(self, ins, framebuffer, memory, keypad):  # LD Vx, K
        # This opcode waits for a keypress, but since the timers still need to expire and the framebuffer still needs
        # refreshing, we'll return control to the host and simply rewind the program counter.  The same instruction
        # is then fetched again on the next cycle.
        key = keypad.first_down_key()

        if key is None:
            self.dec_pc()
        else:
            self.v[ins.x] = key

    def _Fx15(self, ins, framebuffer, memory, keypad):  # LD DT, Vx
        self.dt = self.v[ins.x]

    def _Fx18(self, ins, framebuffer, memory, keypad):  # LD ST, Vx
        self.st = self.v[ins.x]

    def _Fx1E(self, ins, framebuffer, memory, keypad):  # ADD I, Vx
        self.i = (self.i + self.v[ins.x]) & 0xFFFF

    def _Fx29(self, ins, framebuffer, memory, keypad):  # LD F, Vx
        self.i = FONT_LOCATION + GLYPH_HEIGHT * (self.v[ins.x] & 0xF)

    def _Fx33(self, ins, framebuffer, memory, keypad):  # LD B, Vx
        val = self.v[ins.x]
        memory.write_block(self.i, bytes((
            val // 100,        # Most-significant digit
            (val // 10) % 10,  # Middle digit
            val % 10           # Least-significant digit
        )))

    def _Fx55(self, ins, framebuffer, memory, keypad):  # LD [I], Vx
        # Ensure with +1s that the final register is copied
        memory.write_block(self.i, self.v[:ins.x + 1])

    def _Fx65(self, ins, framebuffer, memory, keypad):  # LD Vx, [I]
        memory.copy_into(self.v, self.i, ins.x + 1)
