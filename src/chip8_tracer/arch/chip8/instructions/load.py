# src/chip8_tracer/arch/chip8/instructions/load.py
"""
ロード・ストア、描画、タイマー／メモリ系命令のデコード。
"""
from chip8_tracer.core.instruction import (
    Instruction, Invalid, RegisterOp, Unimplemented,
    addr, imm, implied, nibble, vx, vy,
)
from .base import nnn_of, x_of, y_of, kk_of, n_of

# --- 6xkk ---
# @intent:responsibility LD Vx, kk 命令をデコードします。
def decode_ld_imm(word: int) -> Instruction:
    return RegisterOp(word, "LD", (vx(x_of(word)), imm(kk_of(word))))

# --- Annn ---
# @intent:responsibility LD I, nnn 命令をデコードします。
def decode_ld_i(word: int) -> Instruction:
    return RegisterOp(word, "LD", (implied("I"), addr(nnn_of(word))))

# --- Dxyn ---
# @intent:responsibility DRW Vx, Vy, n (スプライト描画) 命令をデコードします。
def decode_drw(word: int) -> Instruction:
    return RegisterOp(word, "DRW", (vx(x_of(word)), vy(y_of(word)), nibble(n_of(word))))

# --- Fxkk ---
# @intent:responsibility 0xF 系列をオペランド展開せずに Unimplemented として返します。
def decode_unimplemented(word: int) -> Instruction:
    return Unimplemented(word)

# @intent:map 下位バイトから 0xF 系列の (ニーモニック, オペランド並び) へのマッピング。
# "X" は Vx の位置を示し、それ以外は暗黙オペランド名です。
TIMER_FAMILY_LAYOUTS = {
    0x07: ("LD", ("X", "DT")),
    0x0A: ("LD", ("X", "K")),
    0x15: ("LD", ("DT", "X")),
    0x18: ("LD", ("ST", "X")),
    0x1E: ("ADD", ("I", "X")),
    0x29: ("LD", ("F", "X")),
    0x33: ("LD", ("B", "X")),
    0x55: ("LD", ("[I]", "X")),
    0x65: ("LD", ("X", "[I]")),
}

# @intent:responsibility 0xF 系列を完全にデコードします。
# @intent:rationale decoder.decode_timer_family が有効な場合にのみ使用されます。
def decode_timer_family(word: int) -> Instruction:
    layout = TIMER_FAMILY_LAYOUTS.get(kk_of(word))
    if layout is None:
        return Invalid(word)
    mnemonic, slots = layout
    operands = tuple(vx(x_of(word)) if slot == "X" else implied(slot) for slot in slots)
    return RegisterOp(word, mnemonic, operands)
