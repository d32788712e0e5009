# src/chip8_tracer/transport/image.py
"""
Transport Layer (プログラムイメージ)

ロードベースに配置されたプログラムイメージを、プログラム長ちょうどのバッファとして保持し、
境界チェック付きの読み出しを提供する責務を負います。
"""
from chip8_tracer.common.types import Offset, OPCODE_SIZE

DEFAULT_LOAD_BASE = 0x200


# @intent:responsibility 読み込み専用のプログラムイメージを提供します。
# @intent:rationale 固定長のグローバル配列ではなく、ロードされたプログラム長に合わせたバッファを所有します。
class ProgramImage:
    """
    ロードされたプログラムのバイト列。
    アクセスは全てロードベースからのバイトオフセットで行い、範囲外はIndexErrorになります。
    """
    # @intent:responsibility バイト列とロードベースを保持します。
    # @intent:pre-condition load_baseは非負の整数である必要があります。
    def __init__(self, data: bytes, load_base: int = DEFAULT_LOAD_BASE):
        if not isinstance(load_base, int) or load_base < 0:
            raise ValueError("Load base must be a non-negative integer.")
        self._data = bytes(data)
        self._load_base = load_base

    def __len__(self) -> int:
        return len(self._data)

    @property
    def load_base(self) -> int:
        return self._load_base

    # @intent:responsibility 指定されたオフセットが [offset, offset + length) の範囲で全てイメージ内にあるか判定します。
    def contains(self, offset: Offset, length: int = 1) -> bool:
        return 0 <= offset and offset + length <= len(self._data)

    # @intent:responsibility 指定されたオフセットから8bitのデータを読み出します。
    # @intent:pre-condition オフセットはイメージの有効範囲内である必要があります。
    def read(self, offset: Offset) -> int:
        if not self.contains(offset):
            raise IndexError(f"Offset {offset} out of bounds for image of size {len(self._data)}.")
        return self._data[offset]

    # @intent:responsibility 指定されたオフセットから16bitワードをビッグエンディアン形式で読み出します。
    def read_word(self, offset: Offset) -> int:
        if not self.contains(offset, OPCODE_SIZE):
            raise IndexError(f"Word at offset {offset} out of bounds for image of size {len(self._data)}.")
        return (self.read(offset) << 8) | self.read(offset + 1)

    # @intent:responsibility 指定範囲のバイト列のコピーを返します。
    def slice(self, offset: Offset, length: int) -> bytes:
        if length < 0 or not self.contains(offset, length):
            raise IndexError(f"Range {offset}+{length} out of bounds for image of size {len(self._data)}.")
        return self._data[offset:offset + length]

    # @intent:responsibility オフセットとターゲットメモリ上の絶対アドレスを相互に変換します。
    def address_of(self, offset: Offset) -> int:
        return self._load_base + offset

    def offset_of(self, address: int) -> Offset:
        return address - self._load_base
