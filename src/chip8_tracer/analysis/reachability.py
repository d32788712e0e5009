# src/chip8_tracer/analysis/reachability.py
"""
Analysis Layer (到達可能性解析)

エントリオフセットから制御フローを静的に追跡し、到達可能な命令のバイトを CODE として
分類マップにマークします。ジャンプ、コール、スキップ、リターン命令が示す制御フローグラフを
明示的なワークリストで深さ優先に辿るため、ネイティブのコールスタックは消費しません。
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from chip8_tracer.analysis.classification import ByteClassification
from chip8_tracer.arch.chip8.instructions import (
    decode_opcode, is_absolute_jump, is_call, is_return, is_skip,
)
from chip8_tracer.common.types import Offset, OPCODE_SIZE
from chip8_tracer.config.models import TracerConfig
from chip8_tracer.errors import OutOfBoundsTargetError, TraversalLimitError
from chip8_tracer.transport.image import ProgramImage

logger = logging.getLogger(__name__)


# @intent:responsibility 解析パスの結果を記録します。
@dataclass
class AnalysisReport:
    """
    1回の解析パスの結果。
    errors には回復された（放棄された経路の）OutOfBoundsTargetError が発生順に入ります。
    """
    instructions: int = 0
    errors: List[OutOfBoundsTargetError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


# @intent:responsibility 到達可能性解析を実行します。
class ReachabilityAnalyzer:
    """
    分類マップを直接更新する到達可能性解析器。

    各経路は、既に CODE のオフセットに到達した時点（合流またはループ）か、
    プログラム末尾を越えた時点で終了します。
    """
    def __init__(self, config: Optional[TracerConfig] = None):
        self._config = config or TracerConfig()

    # @intent:responsibility start から到達可能な全ての命令を CODE としてマークします。
    # @intent:pre-condition classification の長さはプログラムイメージの長さと一致する必要があります。
    # @intent:post-condition 未訪問のバイトは全て DATA に確定されます。
    def analyze(self, classification: ByteClassification, image: ProgramImage,
                start: Offset = 0) -> AnalysisReport:
        if len(classification) != len(image):
            raise ValueError(
                f"Classification size ({len(classification)}) does not match "
                f"the program size ({len(image)})."
            )

        limit = self._config.analysis.max_work_items
        decode_timer_family = self._config.decoder.decode_timer_family
        report = AnalysisReport()
        pending: List[Offset] = [start]
        processed = 0

        while pending:
            offset = pending.pop()
            processed += 1
            if processed > limit:
                raise TraversalLimitError(limit)

            # 1つの経路を、終了条件に達するまで直線的に辿る
            while True:
                if not image.contains(offset, OPCODE_SIZE):
                    break
                if classification.is_code(offset) or classification.is_code(offset + 1):
                    break

                word = image.read_word(offset)
                instruction = decode_opcode(word, decode_timer_family)
                classification.mark_code(offset)
                report.instructions += 1

                if is_return(instruction):
                    break

                if is_absolute_jump(instruction):
                    target = self._resolve_target(offset, instruction.target, image, report)
                    if target is None:
                        break
                    offset = target
                    continue

                if is_skip(instruction):
                    self._push(pending, offset + 2 * OPCODE_SIZE, limit)
                elif is_call(instruction):
                    target = self._resolve_target(offset, instruction.target, image, report)
                    if target is not None:
                        self._push(pending, target, limit)

                offset += OPCODE_SIZE

        settled = classification.settle_unvisited()
        logger.debug("Traced %d instructions from offset 0x%04X (%d work items, %d data bytes)",
                     report.instructions, start, processed, settled)
        return report

    # @intent:responsibility ジャンプ・コール先の絶対アドレスをオフセットに変換し、範囲を検証します。
    # @intent:post-condition 範囲外の場合は None を返し、エラーを report に記録します（設定により送出）。
    def _resolve_target(self, source: Offset, target: int, image: ProgramImage,
                        report: AnalysisReport) -> Optional[Offset]:
        offset = image.offset_of(target)
        if image.contains(offset, OPCODE_SIZE):
            return offset

        error = OutOfBoundsTargetError(source, target, image.load_base, len(image))
        if self._config.analysis.abort_on_out_of_bounds:
            raise error
        logger.warning("%s; path abandoned", error.message)
        report.errors.append(error)
        return None

    @staticmethod
    def _push(pending: List[Offset], offset: Offset, limit: int) -> None:
        if len(pending) >= limit:
            raise TraversalLimitError(limit)
        pending.append(offset)
