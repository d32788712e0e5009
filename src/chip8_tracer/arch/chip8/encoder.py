# src/chip8_tracer/arch/chip8/encoder.py
"""
CHIP-8 命令エンコーダ。

デコード済みの Instruction をニーモニックとオペランドから16bitオペコードに再構成します。
デコーダの逆変換として、オペランド抽出のビット窓が正しいことの検証に用います。
"""
from typing import Tuple
from chip8_tracer.core.instruction import Instruction, Invalid, Operand, OperandKind, Unimplemented
from chip8_tracer.arch.chip8.instructions.maps import ENCODE_MAP

# @intent:map オペランド種別からビット窓 (シフト量, マスク) へのマッピング。
FIELD_LAYOUT = {
    OperandKind.VX: (8, 0xF),
    OperandKind.VY: (4, 0xF),
    OperandKind.IMMEDIATE: (0, 0xFF),
    OperandKind.NIBBLE: (0, 0xF),
    OperandKind.ADDRESS: (0, 0xFFF),
}

# @intent:utility_function ENCODE_MAP のキーとなるオペランドシグネチャを作成します。
def operand_signature(operands: Tuple[Operand, ...]) -> Tuple[str, ...]:
    return tuple(op.name if op.kind == OperandKind.IMPLIED else op.kind.value for op in operands)

# @intent:responsibility 命令をオペコードに再エンコードします。
# @intent:pre-condition ControlFlow / RegisterOp のニーモニックとシグネチャは ENCODE_MAP に存在する必要があります。
def encode_instruction(instruction: Instruction) -> int:
    """
    Instruction を16bitワードに変換します。
    Invalid / Unimplemented はオペランドを持たないため、生のワードをそのまま返します。
    """
    if isinstance(instruction, (Invalid, Unimplemented)):
        return instruction.raw

    key = (instruction.mnemonic, operand_signature(instruction.operands))
    base = ENCODE_MAP.get(key)
    if base is None:
        raise ValueError(f"Unknown instruction form: {key[0]} {', '.join(key[1])}")

    word = base
    for op in instruction.operands:
        layout = FIELD_LAYOUT.get(op.kind)
        if layout is None:
            continue
        shift, mask = layout
        if not 0 <= op.value <= mask:
            raise ValueError(f"Operand {op} does not fit in a {op.kind.value} field.")
        word |= op.value << shift
    return word
