# src/chip8_tracer/analysis/segmenter.py
"""
Analysis Layer (オブジェクト分割)

分類済みのバイトを、命令ごとの CodeObject と連続した DataObject に分割します。
"""
from dataclasses import dataclass
from typing import Iterator, Union

from chip8_tracer.analysis.classification import ByteClass, ByteClassification
from chip8_tracer.common.types import Offset, OPCODE_SIZE
from chip8_tracer.errors import MalformedClassificationError
from chip8_tracer.transport.image import ProgramImage


# @intent:responsibility 単一の命令 (常に OPCODE_SIZE バイト) を表します。
@dataclass(frozen=True)
class CodeObject:
    offset: Offset
    word: int

    @property
    def size(self) -> int:
        return OPCODE_SIZE


# @intent:responsibility CODE 以外に分類された連続バイト列を表します。
@dataclass(frozen=True)
class DataObject:
    offset: Offset
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


ProgramObject = Union[CodeObject, DataObject]


# @intent:responsibility 分類マップとイメージからオブジェクト列を遅延生成します。
# @intent:rationale __iter__ が毎回新しいジェネレータを返すため、何度でも最初から走査できます。
class ObjectSegmenter:
    """
    [0, len(image)) を昇順に、隙間も重複もなく覆うオブジェクト列。
    """
    def __init__(self, classification: ByteClassification, image: ProgramImage):
        if len(classification) != len(image):
            raise ValueError(
                f"Classification size ({len(classification)}) does not match "
                f"the program size ({len(image)})."
            )
        self._classification = classification
        self._image = image

    def __iter__(self) -> Iterator[ProgramObject]:
        return self._segments()

    # @intent:responsibility 左から右へ走査し、オブジェクトを生成します。
    # @intent:post-condition 命令境界が壊れている場合は MalformedClassificationError を送出し、切り詰めた命令は生成しません。
    def _segments(self) -> Iterator[ProgramObject]:
        classification = self._classification
        length = len(self._image)
        offset = 0

        while offset < length:
            if classification[offset] == ByteClass.CODE:
                if offset + 1 >= length or classification[offset + 1] != ByteClass.CODE:
                    raise MalformedClassificationError(offset, "instruction is missing its second byte")
                yield CodeObject(offset, self._image.read_word(offset))
                offset += OPCODE_SIZE
                continue

            end = offset + 1
            while end < length and classification[end] != ByteClass.CODE:
                end += 1
            yield DataObject(offset, self._image.slice(offset, end - offset))
            offset = end
