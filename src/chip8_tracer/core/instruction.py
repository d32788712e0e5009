# src/chip8_tracer/core/instruction.py
"""
Core Layer (命令モデル)

デコード済みCHIP-8命令を表す不変のデータ構造を定義します。
命令は生の16bitワード以外にプログラムメモリへの参照を持ちません。
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


# @intent:responsibility オペランドがオペコードのどのビット窓から取り出されたかを表します。
class OperandKind(Enum):
    VX = "VX"                # bits 11-8
    VY = "VY"                # bits 7-4
    IMMEDIATE = "IMMEDIATE"  # bits 7-0
    NIBBLE = "NIBBLE"        # bits 3-0
    ADDRESS = "ADDRESS"      # bits 11-0
    IMPLIED = "IMPLIED"      # I, DT, ST など。ビットを占有しない


# @intent:responsibility 単一のオペランドを保持します。
@dataclass(frozen=True)
class Operand:
    kind: OperandKind
    value: int = 0
    name: str = ""  # IMPLIED の場合の表示名

    # @intent:responsibility リスト表示用の文字列を返します。
    # @intent:post-condition レジスタは "V<hex digit>"、即値とアドレスは接頭辞なしの16進数になります。
    def __str__(self) -> str:
        if self.kind in (OperandKind.VX, OperandKind.VY):
            return f"V{self.value:X}"
        if self.kind == OperandKind.IMPLIED:
            return self.name
        if self.kind == OperandKind.IMMEDIATE:
            return f"{self.value:02X}"
        return f"{self.value:X}"


# @intent:utility_function よく使うオペランド生成のための短縮関数群。
def vx(value: int) -> Operand:
    return Operand(OperandKind.VX, value)

def vy(value: int) -> Operand:
    return Operand(OperandKind.VY, value)

def imm(value: int) -> Operand:
    return Operand(OperandKind.IMMEDIATE, value)

def nibble(value: int) -> Operand:
    return Operand(OperandKind.NIBBLE, value)

def addr(value: int) -> Operand:
    return Operand(OperandKind.ADDRESS, value)

def implied(name: str) -> Operand:
    return Operand(OperandKind.IMPLIED, 0, name)


# @intent:responsibility 制御フロー命令の種別を定義します。
# @intent:rationale INDEXED_JUMP (Bnnn) は実行時のレジスタ値に依存するため、静的解析では追跡しません。
class ControlKind(Enum):
    JUMP = "JUMP"
    CALL = "CALL"
    RETURN = "RETURN"
    SKIP = "SKIP"
    SYS = "SYS"
    INDEXED_JUMP = "INDEXED_JUMP"


# @intent:responsibility 全ての命令バリアントの共通基底。
@dataclass(frozen=True)
class Instruction:
    """
    デコード済み命令の基底クラス。
    raw は元の16bitワード、mnemonic は表示用ニーモニック、operands は表示順のオペランドです。
    """
    raw: int
    mnemonic: str = ""
    operands: Tuple[Operand, ...] = field(default_factory=tuple)

    @property
    def opcode_hex(self) -> str:
        return f"{self.raw:04X}"

    # @intent:responsibility オペランドを表示用文字列のリストとして返します。
    def operand_strings(self) -> List[str]:
        return [str(op) for op in self.operands]


# @intent:responsibility 制御フローを変化させる命令 (JP, CALL, RET, SE/SNE/SKP/SKNP, SYS, JP V0)。
@dataclass(frozen=True)
class ControlFlow(Instruction):
    kind: ControlKind = ControlKind.JUMP
    target: Optional[int] = None  # 絶対アドレス。RETURN と SKIP では None


# @intent:responsibility レジスタ操作、ロード、描画などの通常命令。
@dataclass(frozen=True)
class RegisterOp(Instruction):
    pass


# @intent:responsibility 既知の上位ニブルの中で認識できないビットパターン。
# @intent:rationale エラーではなく、表示可能な第一級の命令として扱います。
@dataclass(frozen=True)
class Invalid(Instruction):
    mnemonic: str = "INVALID"


# @intent:responsibility オペランドを展開しない 0xF 系列（タイマー、キー待ち、BCD、ブロック転送など）。
@dataclass(frozen=True)
class Unimplemented(Instruction):
    mnemonic: str = "UNIMPL"
