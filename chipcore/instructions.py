#!/usr/bin/env python3

"""
Instruction Decoder

Turns a raw 16-bit opcode into an immutable Instruction.  Nothing is executed
here, so decoding can also be used for disassembly and debug output.

Opcodes are looked up in two stages.  The first nibble selects the family, and
some families are then narrowed down further with a bitmask:

    * 0x0       : exact match (0xFFFF), anything else is the legacy SYS call
    * 0x5/0x8/0x9: bitmask 0xF00F
    * 0xE/0xF   : bitmask 0xF0FF

Every other family is identified by its first nibble alone.  An opcode that
matches none of these is a decode fault.  Unknown opcodes are never skipped.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from enum import Enum
from typing import NamedTuple


class CPUError(Exception):
    def __init__(self, message, report=None):
        self.report = report
        super().__init__(message)


class DecodeError(CPUError):
    def __init__(self, opcode, report=None):
        self.opcode = opcode
        super().__init__("Opcode 0x{:04x} is not a recognised instruction".format(opcode), report)


class Op(Enum):
    SYS = "SYS"              # 0nnn
    CLS = "CLS"              # 00E0
    RET = "RET"              # 00EE
    JP = "JP"                # 1nnn
    CALL = "CALL"            # 2nnn
    SE_VX_KK = "SE_VX_KK"    # 3xkk
    SNE_VX_KK = "SNE_VX_KK"  # 4xkk
    SE_VX_VY = "SE_VX_VY"    # 5xy0
    LD_VX_KK = "LD_VX_KK"    # 6xkk
    ADD_VX_KK = "ADD_VX_KK"  # 7xkk
    LD_VX_VY = "LD_VX_VY"    # 8xy0
    OR = "OR"                # 8xy1
    AND = "AND"              # 8xy2
    XOR = "XOR"              # 8xy3
    ADD_VX_VY = "ADD_VX_VY"  # 8xy4
    SUB = "SUB"              # 8xy5
    SHR = "SHR"              # 8xy6
    SUBN = "SUBN"            # 8xy7
    SHL = "SHL"              # 8xyE
    SNE_VX_VY = "SNE_VX_VY"  # 9xy0
    LD_I = "LD_I"            # Annn
    JP_V0 = "JP_V0"          # Bnnn
    RND = "RND"              # Cxkk
    DRW = "DRW"              # Dxyn
    SKP = "SKP"              # Ex9E
    SKNP = "SKNP"            # ExA1
    LD_VX_DT = "LD_VX_DT"    # Fx07
    LD_VX_K = "LD_VX_K"      # Fx0A
    LD_DT_VX = "LD_DT_VX"    # Fx15
    LD_ST_VX = "LD_ST_VX"    # Fx18
    ADD_I_VX = "ADD_I_VX"    # Fx1E
    LD_F_VX = "LD_F_VX"      # Fx29
    LD_B_VX = "LD_B_VX"      # Fx33
    LD_I_VX = "LD_I_VX"      # Fx55
    LD_VX_I = "LD_VX_I"      # Fx65


# Mnemonic templates, formatted with the instruction's own fields
MNEMONICS = {
    Op.SYS:       "SYS 0x{nnn:03x}",
    Op.CLS:       "CLS",
    Op.RET:       "RET",
    Op.JP:        "JP 0x{nnn:03x}",
    Op.CALL:      "CALL 0x{nnn:03x}",
    Op.SE_VX_KK:  "SE V{x:01x}, 0x{kk:02x}",
    Op.SNE_VX_KK: "SNE V{x:01x}, 0x{kk:02x}",
    Op.SE_VX_VY:  "SE V{x:01x}, V{y:01x}",
    Op.LD_VX_KK:  "LD V{x:01x}, 0x{kk:02x}",
    Op.ADD_VX_KK: "ADD V{x:01x}, 0x{kk:02x}",
    Op.LD_VX_VY:  "LD V{x:01x}, V{y:01x}",
    Op.OR:        "OR V{x:01x}, V{y:01x}",
    Op.AND:       "AND V{x:01x}, V{y:01x}",
    Op.XOR:       "XOR V{x:01x}, V{y:01x}",
    Op.ADD_VX_VY: "ADD V{x:01x}, V{y:01x}",
    Op.SUB:       "SUB V{x:01x}, V{y:01x}",
    Op.SHR:       "SHR V{x:01x}",
    Op.SUBN:      "SUBN V{x:01x}, V{y:01x}",
    Op.SHL:       "SHL V{x:01x}",
    Op.SNE_VX_VY: "SNE V{x:01x}, V{y:01x}",
    Op.LD_I:      "LD I, 0x{nnn:03x}",
    Op.JP_V0:     "JP V0, 0x{nnn:03x}",
    Op.RND:       "RND V{x:01x}, 0x{kk:02x}",
    Op.DRW:       "DRW V{x:01x}, V{y:01x}, 0x{n:01x}",
    Op.SKP:       "SKP V{x:01x}",
    Op.SKNP:      "SKNP V{x:01x}",
    Op.LD_VX_DT:  "LD V{x:01x}, DT",
    Op.LD_VX_K:   "LD V{x:01x}, K",
    Op.LD_DT_VX:  "LD DT, V{x:01x}",
    Op.LD_ST_VX:  "LD ST, V{x:01x}",
    Op.ADD_I_VX:  "ADD I, V{x:01x}",
    Op.LD_F_VX:   "LD F, V{x:01x}",
    Op.LD_B_VX:   "LD B, V{x:01x}",
    Op.LD_I_VX:   "LD [I], V{x:01x}",
    Op.LD_VX_I:   "LD V{x:01x}, [I]"
}


class Instruction(NamedTuple):
    op: Op
    opcode: int
    x: int    # Second nibble, register index
    y: int    # Third nibble, register index
    n: int    # Fourth nibble, sprite height
    kk: int   # Low byte, immediate value
    nnn: int  # Low 12 bits, address

    def __str__(self):
        return MNEMONICS[self.op].format(x=self.x, y=self.y, n=self.n, kk=self.kk, nnn=self.nnn)


# Families identified by their first nibble alone
FAMILIES = {
    0x1: Op.JP,
    0x2: Op.CALL,
    0x3: Op.SE_VX_KK,
    0x4: Op.SNE_VX_KK,
    0x6: Op.LD_VX_KK,
    0x7: Op.ADD_VX_KK,
    0xA: Op.LD_I,
    0xB: Op.JP_V0,
    0xC: Op.RND,
    0xD: Op.DRW
}

# Families which need a second lookup, and the bitmask to apply before it
FAMILY_MASKS = {
    0x0: 0xFFFF,
    0x5: 0xF00F,
    0x8: 0xF00F,
    0x9: 0xF00F,
    0xE: 0xF0FF,
    0xF: 0xF0FF
}

MASKED_OPCODES = {
    # Instructions beginning with nibble 0x0, bitmask 0xFFFF (i.e., exact match)
    0x00E0: Op.CLS,
    0x00EE: Op.RET,
    # Instructions beginning with nibble 0x5/0x8/0x9, bitmask 0xF00F
    0x5000: Op.SE_VX_VY,
    0x8000: Op.LD_VX_VY,
    0x8001: Op.OR,
    0x8002: Op.AND,
    0x8003: Op.XOR,
    0x8004: Op.ADD_VX_VY,
    0x8005: Op.SUB,
    0x8006: Op.SHR,
    0x8007: Op.SUBN,
    0x800E: Op.SHL,
    0x9000: Op.SNE_VX_VY,
    # Instructions beginning with nibble 0xE/0xF, bitmask 0xF0FF
    0xE09E: Op.SKP,
    0xE0A1: Op.SKNP,
    0xF007: Op.LD_VX_DT,
    0xF00A: Op.LD_VX_K,
    0xF015: Op.LD_DT_VX,
    0xF018: Op.LD_ST_VX,
    0xF01E: Op.ADD_I_VX,
    0xF029: Op.LD_F_VX,
    0xF033: Op.LD_B_VX,
    0xF055: Op.LD_I_VX,
    0xF065: Op.LD_VX_I
}


def decode(opcode):
    if not 0 <= opcode <= 0xFFFF:
        raise DecodeError(opcode)

    family = (opcode & 0xF000) >> 12
    op = FAMILIES.get(family)

    if op is None:
        op = MASKED_OPCODES.get(opcode & FAMILY_MASKS[family])

        if op is None:
            if family != 0x0:
                raise DecodeError(opcode)

            # Machine code routines on the original hardware.  Decoded, but never run.
            op = Op.SYS

    return Instruction(
        op, opcode, (opcode & 0xF00) >> 8, (opcode & 0xF0) >> 4, opcode & 0xF, opcode & 0xFF, opcode & 0xFFF
    )
