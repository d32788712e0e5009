# src/chip8_tracer/arch/chip8/disassembler.py
"""
CHIP-8 Disassembler

プログラムイメージを到達可能性解析で CODE / DATA に分類し、オブジェクトに分割した上で、
表示用の行データに変換します。
"""
from typing import List, Optional, Tuple

from chip8_tracer.analysis.classification import ByteClassification
from chip8_tracer.analysis.reachability import AnalysisReport, ReachabilityAnalyzer
from chip8_tracer.analysis.segmenter import CodeObject, ObjectSegmenter, ProgramObject
from chip8_tracer.arch.chip8.instructions import decode_opcode
from chip8_tracer.common.types import ListingRow
from chip8_tracer.config.models import TracerConfig
from chip8_tracer.transport.image import ProgramImage

# @intent:responsibility 新しい分類マップを作成し、エントリオフセットから解析します。
def trace(image: ProgramImage, config: Optional[TracerConfig] = None) -> Tuple[ByteClassification, AnalysisReport]:
    config = config or TracerConfig()
    classification = ByteClassification(len(image))
    report = ReachabilityAnalyzer(config).analyze(classification, image, config.analysis.entry_offset)
    return classification, report

# @intent:responsibility 単一のオブジェクトを表示用の行に変換します。
def to_row(obj: ProgramObject, image: ProgramImage, decode_timer_family: bool = False) -> ListingRow:
    address = image.address_of(obj.offset)
    if isinstance(obj, CodeObject):
        instruction = decode_opcode(obj.word, decode_timer_family)
        return ListingRow(address, instruction.opcode_hex, instruction.mnemonic,
                          instruction.operand_strings())
    return ListingRow(address, obj.data.hex().upper(), "DB", [f"{b:02X}" for b in obj.data])

# @intent:responsibility プログラム全体を逆アセンブルします。
def disassemble(image: ProgramImage, config: Optional[TracerConfig] = None) -> List[ListingRow]:
    """
    プログラム全体を逆アセンブルします。

    Returns:
        List of ListingRow (address, raw_hex, mnemonic, operands), in address order.
    """
    config = config or TracerConfig()
    classification, _report = trace(image, config)
    decode_timer_family = config.decoder.decode_timer_family
    return [to_row(obj, image, decode_timer_family) for obj in ObjectSegmenter(classification, image)]
