# src/chip8_tracer/arch/chip8/instructions/control.py
"""
制御命令（ジャンプ、サブルーチン、スキップ、システムコール）のデコード。
"""
from chip8_tracer.core.instruction import (
    ControlFlow, ControlKind, Instruction, Invalid, RegisterOp,
    addr, implied, imm, vx, vy,
)
from .base import nnn_of, x_of, y_of, kk_of, n_of

# --- 0nnn ---
# @intent:responsibility 0x0 ファミリをデコードします。
# @intent:rationale 00E0 と 00EE の完全一致はファミリ内ディスパッチより優先されます。
def decode_sys_family(word: int) -> Instruction:
    if word == 0x00E0:
        return RegisterOp(word, "CLS")
    if word == 0x00EE:
        return ControlFlow(word, "RET", kind=ControlKind.RETURN)
    target = nnn_of(word)
    return ControlFlow(word, "SYS", (addr(target),), kind=ControlKind.SYS, target=target)

# --- 1nnn ---
# @intent:responsibility JP (絶対ジャンプ) 命令をデコードします。
def decode_jp(word: int) -> Instruction:
    target = nnn_of(word)
    return ControlFlow(word, "JP", (addr(target),), kind=ControlKind.JUMP, target=target)

# --- 2nnn ---
# @intent:responsibility CALL (サブルーチン呼び出し) 命令をデコードします。
def decode_call(word: int) -> Instruction:
    target = nnn_of(word)
    return ControlFlow(word, "CALL", (addr(target),), kind=ControlKind.CALL, target=target)

# --- 3xkk / 4xkk ---
# @intent:responsibility SE Vx, kk (等しければスキップ) 命令をデコードします。
def decode_se_imm(word: int) -> Instruction:
    return ControlFlow(word, "SE", (vx(x_of(word)), imm(kk_of(word))), kind=ControlKind.SKIP)

# @intent:responsibility SNE Vx, kk (等しくなければスキップ) 命令をデコードします。
def decode_sne_imm(word: int) -> Instruction:
    return ControlFlow(word, "SNE", (vx(x_of(word)), imm(kk_of(word))), kind=ControlKind.SKIP)

# --- 5xy0 / 9xy0 ---
# @intent:responsibility SE Vx, Vy 命令をデコードします。下位ニブルが0以外なら Invalid です。
def decode_se_reg(word: int) -> Instruction:
    if n_of(word) != 0:
        return Invalid(word)
    return ControlFlow(word, "SE", (vx(x_of(word)), vy(y_of(word))), kind=ControlKind.SKIP)

# @intent:responsibility SNE Vx, Vy 命令をデコードします。下位ニブルが0以外なら Invalid です。
def decode_sne_reg(word: int) -> Instruction:
    if n_of(word) != 0:
        return Invalid(word)
    return ControlFlow(word, "SNE", (vx(x_of(word)), vy(y_of(word))), kind=ControlKind.SKIP)

# --- Bnnn ---
# @intent:responsibility JP V0, nnn (インデックス付きジャンプ) 命令をデコードします。
# @intent:rationale ターゲットは V0 の実行時の値に依存するため、target はベースアドレスのみを保持します。
def decode_jp_v0(word: int) -> Instruction:
    base = nnn_of(word)
    return ControlFlow(word, "JP", (implied("V0"), addr(base)),
                       kind=ControlKind.INDEXED_JUMP, target=base)

# --- Ex9E / ExA1 ---
# @intent:map 下位バイトからキー入力スキップ命令のニーモニックへのマッピング。
KEY_SKIP_MNEMONICS = {
    0x9E: "SKP",
    0xA1: "SKNP",
}

# @intent:responsibility SKP / SKNP (キー入力によるスキップ) 命令をデコードします。
def decode_key_skip(word: int) -> Instruction:
    mnemonic = KEY_SKIP_MNEMONICS.get(kk_of(word))
    if mnemonic is None:
        return Invalid(word)
    return ControlFlow(word, mnemonic, (vx(x_of(word)),), kind=ControlKind.SKIP)
