# src/chip8_tracer/errors.py
"""
例外定義

ローダー、解析器、セグメンタが送出する例外の階層を定義します。
各例外は対応する組み込み例外も継承するため、呼び出し側は ValueError や
IndexError として捕捉することもできます。
"""
from typing import Optional


# @intent:responsibility このパッケージが送出する全ての例外の基底クラス。
class Chip8TracerError(Exception):
    """
    chip8_tracer の全ての例外の基底クラス。
    """


# @intent:responsibility プログラムファイルの読み込み失敗を表します。
class ProgramIoError(Chip8TracerError, OSError):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        self.message = f"Can't open '{path}': {reason}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


# @intent:responsibility アドレス空間に収まらないプログラムイメージを表します。
# @intent:pre-condition デコード開始前に検出されなければなりません。
class FileTooLargeError(Chip8TracerError, ValueError):
    def __init__(self, path: str, size: int, max_size: int):
        self.path = path
        self.size = size
        self.max_size = max_size
        self.message = (f"File too long: '{path}' is {size} bytes. "
                        f"Maximum size is {max_size}.")
        super().__init__(self.message)


# @intent:responsibility ジャンプ・コール先がプログラム範囲外であることを表します。
# @intent:rationale 通常は解析器が経路単位で回復するため、致命的ではありません。
class OutOfBoundsTargetError(Chip8TracerError, IndexError):
    """
    ジャンプまたはコールのターゲットがプログラムイメージの外を指している場合に送出されます。
    source_offset はターゲットを計算した命令のオフセット、target はターゲットの絶対アドレスです。
    """
    def __init__(self, source_offset: int, target: int, load_base: int, length: int):
        self.source_offset = source_offset
        self.target = target
        self.load_base = load_base
        self.length = length
        self.message = (f"Target 0x{target:03X} of instruction at "
                        f"0x{load_base + source_offset:04X} is outside the program "
                        f"(0x{load_base:04X}-0x{load_base + length:04X})")
        super().__init__(self.message)


# @intent:responsibility 分類マップの不変条件違反（解析器のバグ）を表します。
class MalformedClassificationError(Chip8TracerError, ValueError):
    def __init__(self, offset: int, detail: Optional[str] = None):
        self.offset = offset
        self.message = f"Malformed classification at offset 0x{offset:04X}"
        if detail:
            self.message += f": {detail}"
        super().__init__(self.message)


# @intent:responsibility ワークリストの上限超過を表します。
class TraversalLimitError(Chip8TracerError, RuntimeError):
    def __init__(self, limit: int):
        self.limit = limit
        self.message = f"Traversal exceeded the work-list limit of {limit} items"
        super().__init__(self.message)


# @intent:responsibility 設定ファイルの内容が不正であることを表します。
class ConfigError(Chip8TracerError, ValueError):
    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        self.message = message
        super().__init__(self.message)
