# tests/analysis/test_reachability.py
"""
chip8_tracer.analysis.reachability モジュールの単体テスト。
"""
import pytest

from chip8_tracer.analysis.classification import ByteClass, ByteClassification
from chip8_tracer.analysis.reachability import ReachabilityAnalyzer
from chip8_tracer.config.models import TracerConfig, AnalysisConfig
from chip8_tracer.errors import OutOfBoundsTargetError, TraversalLimitError
from chip8_tracer.transport.image import ProgramImage

# @intent:test_suite 制御フロー追跡によるバイト分類の検証。

C = ByteClass.CODE
D = ByteClass.DATA


def analyze(program: bytes, config: TracerConfig = None, start: int = 0):
    image = ProgramImage(program)
    classification = ByteClassification(len(image))
    report = ReachabilityAnalyzer(config).analyze(classification, image, start)
    return classification, report


class TestControlFlow:
    # @intent:test_case リターン後の到達不能なジャンプは DATA のままです。
    def test_return_then_unreferenced_jump(self):
        classification, report = analyze(bytes([0x00, 0xEE, 0x12, 0x34]))
        assert classification.as_list() == [C, C, D, D]
        assert report.ok
        assert report.instructions == 1

    # @intent:test_case オフセット0からオフセット4へのコールと、そこでのリターン。
    def test_call_and_return(self):
        program = bytes([
            0x22, 0x04,  # 200: CALL 204
            0x12, 0x02,  # 202: JP 202
            0x00, 0xEE,  # 204: RET
        ])
        classification, report = analyze(program)
        assert classification.as_list() == [C] * 6
        assert report.ok

    def test_jump_over_data(self):
        program = bytes([
            0x12, 0x04,  # 200: JP 204
            0xAB, 0xCD,  # 202: data
            0x00, 0xEE,  # 204: RET
        ])
        classification, _ = analyze(program)
        assert classification.as_list() == [C, C, D, D, C, C]

    # @intent:test_case スキップ命令は次の命令と2つ先の命令の両方を到達可能にします。
    def test_skip_reaches_both_successors(self):
        program = bytes([
            0x30, 0x05,  # 200: SE V0, 05
            0x00, 0xEE,  # 202: RET
            0x00, 0xEE,  # 204: RET
            0xFF, 0xFF,  # 206: data
        ])
        classification, _ = analyze(program)
        assert classification.as_list() == [C, C, C, C, C, C, D, D]

    def test_self_loop_terminates(self):
        classification, report = analyze(bytes([0x12, 0x00, 0x00, 0x00]))
        assert classification.as_list() == [C, C, D, D]
        assert report.instructions == 1

    # @intent:test_case Bnnn のジャンプ先は追跡せず、次の命令へ進みます。
    def test_indexed_jump_is_not_followed(self):
        program = bytes([
            0xB2, 0x06,  # 200: JP V0, 206
            0x00, 0xEE,  # 202: RET
            0xAA, 0xAA,  # 204: data
            0x00, 0xEE,  # 206: only reachable through V0
        ])
        classification, _ = analyze(program)
        assert classification.as_list() == [C, C, C, C, D, D, D, D]

    def test_falls_off_the_end(self):
        classification, report = analyze(bytes([0x60, 0x01, 0x61, 0x02]))
        assert classification.as_list() == [C, C, C, C]
        assert report.ok

    def test_trailing_odd_byte_stays_data(self):
        classification, _ = analyze(bytes([0x00, 0xE0, 0x12]))
        assert classification.as_list() == [C, C, D]

    def test_jump_to_odd_offset(self):
        program = bytes([
            0x12, 0x03,  # 200: JP 203
            0xAA,        # 202: data
            0x00, 0xEE,  # 203: RET
        ])
        classification, _ = analyze(program)
        assert classification.as_list() == [C, C, D, C, C]

    # @intent:test_case 2バイト目が既に CODE の場合、命令の組が重ならないよう経路は終了します。
    def test_overlapping_instruction_is_not_marked(self):
        program = bytes([
            0x30, 0x00,  # 200: SE V0, 00   (skip-taken successor: 204)
            0x12, 0x05,  # 202: JP 205
            0xAB,        # 204: would overlap the RET at 205
            0x00, 0xEE,  # 205: RET
        ])
        classification, _ = analyze(program)
        assert classification.as_list() == [C, C, C, C, D, C, C]

    def test_empty_program(self):
        classification, report = analyze(b"")
        assert len(classification) == 0
        assert report.ok


class TestOutOfBoundsTargets:
    def test_jump_out_of_range_abandons_path(self):
        classification, report = analyze(bytes([0x1F, 0xFF, 0x00, 0xEE]))
        assert classification.as_list() == [C, C, D, D]
        assert not report.ok
        assert len(report.errors) == 1
        error = report.errors[0]
        assert isinstance(error, OutOfBoundsTargetError)
        assert error.source_offset == 0
        assert error.target == 0xFFF

    def test_jump_below_load_base(self):
        _, report = analyze(bytes([0x11, 0x00]))
        assert report.errors[0].target == 0x100

    # @intent:test_case 範囲外のコールはコール先だけを放棄し、呼び出し元は次の命令へ進みます。
    def test_call_out_of_range_keeps_fallthrough(self):
        classification, report = analyze(bytes([0x2F, 0xFF, 0x00, 0xEE]))
        assert classification.as_list() == [C, C, C, C]
        assert len(report.errors) == 1

    def test_target_on_last_single_byte_is_out_of_bounds(self):
        _, report = analyze(bytes([0x12, 0x02, 0x00]))
        assert len(report.errors) == 1

    def test_abort_on_out_of_bounds(self):
        config = TracerConfig(analysis=AnalysisConfig(abort_on_out_of_bounds=True))
        with pytest.raises(OutOfBoundsTargetError):
            analyze(bytes([0x1F, 0xFF]), config)

    def test_out_of_bounds_is_logged(self, caplog):
        with caplog.at_level("WARNING", logger="chip8_tracer.analysis.reachability"):
            analyze(bytes([0x1F, 0xFF]))
        assert "path abandoned" in caplog.text


class TestAnalyzerProperties:
    PROGRAM = bytes([
        0x22, 0x08,  # 200: CALL 208
        0x3A, 0x01,  # 202: SE VA, 01
        0x12, 0x00,  # 204: JP 200
        0x12, 0x06,  # 206: JP 206
        0x6A, 0x01,  # 208: LD VA, 01
        0x00, 0xEE,  # 20A: RET
        0x01, 0x02, 0x03,
    ])

    # @intent:test_case 同じイメージを2回解析すると同一の分類マップになります。
    def test_idempotent(self):
        first, _ = analyze(self.PROGRAM)
        second, _ = analyze(self.PROGRAM)
        assert first == second

        # 同じマップへの再解析も分類を変えない
        ReachabilityAnalyzer().analyze(second, ProgramImage(self.PROGRAM))
        assert second == first

    # @intent:test_case CODE から DATA への遷移は起こりません。
    def test_monotonic(self):
        image = ProgramImage(bytes([0x00, 0xEE, 0x00, 0xE0, 0x00, 0xEE]))
        classification = ByteClassification(len(image))
        analyzer = ReachabilityAnalyzer()
        analyzer.analyze(classification, image, 0)
        before = classification.as_list()
        analyzer.analyze(classification, image, 2)
        after = classification.as_list()
        for old, new in zip(before, after):
            if old == C:
                assert new == C
        assert after == [C] * 6

    def test_code_bytes_are_paired(self):
        classification, _ = analyze(self.PROGRAM)
        classes = classification.as_list()
        assert classes[:12] == [C] * 12
        assert classes[12:] == [D] * 3

    def test_size_mismatch(self):
        with pytest.raises(ValueError):
            ReachabilityAnalyzer().analyze(ByteClassification(3), ProgramImage(bytes(4)))

    def test_work_list_limit(self):
        config = TracerConfig(analysis=AnalysisConfig(max_work_items=1))
        with pytest.raises(TraversalLimitError):
            analyze(bytes([0x30, 0x00, 0x00, 0xEE, 0x00, 0xEE]), config)

    def test_long_call_chain_does_not_recurse(self):
        # 各命令が次の命令を呼び出す長い連鎖
        words = [0x2000 | (0x200 + 2 * (i + 1)) for i in range(1500)] + [0x00EE]
        program = b"".join(w.to_bytes(2, "big") for w in words)
        classification, report = analyze(program)
        assert all(c == C for c in classification)
        assert report.ok
