# src/chip8_tracer/analysis/classification.py
"""
Analysis Layer (バイト分類マップ)

プログラムの各バイトオフセットが CODE / DATA / 未訪問 のいずれであるかを保持します。
"""
from enum import IntEnum
from typing import Iterator, List

from chip8_tracer.common.types import Offset, OPCODE_SIZE


# @intent:responsibility バイトの分類を定義します。
class ByteClass(IntEnum):
    UNVISITED = 0
    DATA = 1
    CODE = 2


# @intent:responsibility プログラム長ちょうどの分類マップを提供します。
# @intent:invariant 一度 CODE になったバイトは再分類されません（CODE -> DATA の遷移はありません）。
class ByteClassification:
    """
    オフセットから ByteClass へのマッピング。
    全てのアクセスは境界チェックされ、範囲外はIndexErrorになります。
    """
    def __init__(self, length: int):
        if not isinstance(length, int) or length < 0:
            raise ValueError("Classification length must be a non-negative integer.")
        self._classes = bytearray(length)  # 全て UNVISITED で初期化

    def __len__(self) -> int:
        return len(self._classes)

    def __getitem__(self, offset: Offset) -> ByteClass:
        self._check(offset)
        return ByteClass(self._classes[offset])

    def __iter__(self) -> Iterator[ByteClass]:
        return (ByteClass(value) for value in self._classes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ByteClassification):
            return NotImplemented
        return self._classes == other._classes

    def _check(self, offset: Offset) -> None:
        if not 0 <= offset < len(self._classes):
            raise IndexError(f"Offset {offset} out of bounds for classification of size {len(self._classes)}.")

    def is_code(self, offset: Offset) -> bool:
        return self[offset] == ByteClass.CODE

    # @intent:responsibility 命令の2バイトを同時に CODE としてマークします。
    # @intent:pre-condition 両バイトがマップ内にある必要があります。
    def mark_code(self, offset: Offset) -> None:
        self._check(offset)
        self._check(offset + OPCODE_SIZE - 1)
        for o in range(offset, offset + OPCODE_SIZE):
            self._classes[o] = ByteClass.CODE

    # @intent:responsibility 未訪問のまま残ったバイトを DATA に確定させます。
    # @intent:post-condition CODE のバイトは変更されません。
    def settle_unvisited(self) -> int:
        settled = 0
        for o, value in enumerate(self._classes):
            if value == ByteClass.UNVISITED:
                self._classes[o] = ByteClass.DATA
                settled += 1
        return settled

    # @intent:utility_function テストやデバッグ用に分類のスナップショットを返します。
    def as_list(self) -> List[ByteClass]:
        return list(self)
