# src/chip8_tracer/arch/chip8/instructions/__init__.py
"""
CHIP-8命令セットのデコーダパッケージ。
"""
from chip8_tracer.core.instruction import ControlFlow, ControlKind, Instruction
from .base import family_of
from .maps import DECODE_MAP
from . import load

# @intent:responsibility 16bitのオペコードをデコードします。
# @intent:post-condition 全ての16bit値に対して何らかの Instruction を返し、例外を送出しません。
def decode_opcode(word: int, decode_timer_family: bool = False) -> Instruction:
    """
    CHIP-8のオペコードをデコードし、Instructionオブジェクトを返します。
    decode_timer_family が False の場合、0xF 系列は Unimplemented のままになります。
    """
    word &= 0xFFFF
    family = family_of(word)
    if family == 0xF and decode_timer_family:
        return load.decode_timer_family(word)
    return DECODE_MAP[family](word)

# --- 解析器が使用する分類述語 ---

def _control_kind(instruction: Instruction):
    if isinstance(instruction, ControlFlow):
        return instruction.kind
    return None

# @intent:responsibility 絶対ジャンプ (1nnn) かどうかを判定します。Bnnn は含みません。
def is_absolute_jump(instruction: Instruction) -> bool:
    return _control_kind(instruction) == ControlKind.JUMP

def is_call(instruction: Instruction) -> bool:
    return _control_kind(instruction) == ControlKind.CALL

def is_return(instruction: Instruction) -> bool:
    return _control_kind(instruction) == ControlKind.RETURN

# @intent:responsibility 次の命令を条件付きでスキップする命令かどうかを判定します。
def is_skip(instruction: Instruction) -> bool:
    return _control_kind(instruction) == ControlKind.SKIP
