# src/chip8_tracer/arch/chip8/instructions/alu.py
"""
算術論理演算命令のデコード。
"""
from chip8_tracer.core.instruction import Instruction, Invalid, RegisterOp, imm, vx, vy
from .base import x_of, y_of, kk_of, n_of

# --- 7xkk ---
# @intent:responsibility ADD Vx, kk 命令をデコードします。
def decode_add_imm(word: int) -> Instruction:
    return RegisterOp(word, "ADD", (vx(x_of(word)), imm(kk_of(word))))

# --- 8xyN ---
# @intent:map 下位ニブルから 8xyN 系列のニーモニックへのマッピング。
# SHR / SHL も Vy を保持します（オペコードの再エンコードのため）。
ALU_MNEMONICS = {
    0x0: "LD",
    0x1: "OR",
    0x2: "AND",
    0x3: "XOR",
    0x4: "ADD",
    0x5: "SUB",
    0x6: "SHR",
    0x7: "SUBN",
    0xE: "SHL",
}

# @intent:responsibility 8xyN 系列のレジスタ間演算命令をデコードします。
def decode_alu(word: int) -> Instruction:
    mnemonic = ALU_MNEMONICS.get(n_of(word))
    if mnemonic is None:
        return Invalid(word)
    return RegisterOp(word, mnemonic, (vx(x_of(word)), vy(y_of(word))))

# --- Cxkk ---
# @intent:responsibility RND Vx, kk (乱数とマスクの論理積) 命令をデコードします。
def decode_rnd(word: int) -> Instruction:
    return RegisterOp(word, "RND", (vx(x_of(word)), imm(kk_of(word))))
