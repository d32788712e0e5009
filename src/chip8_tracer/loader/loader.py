# chip8_tracer/loader/loader.py
"""
プログラムローダーモジュール。
生のCHIP-8バイナリを読み込み、ロードベースに配置された ProgramImage を生成します。
"""
import logging
from typing import Optional

from chip8_tracer.config.models import MemoryConfig
from chip8_tracer.errors import FileTooLargeError, ProgramIoError
from chip8_tracer.transport.image import ProgramImage

logger = logging.getLogger(__name__)


class BinaryLoader:
    """
    生バイナリ形式のファイルを丸ごと読み込むローダー。
    オペコードはファイル内でビッグエンディアンとして格納されています。
    """
    def __init__(self, memory: Optional[MemoryConfig] = None):
        self._memory = memory or MemoryConfig()

    # @intent:responsibility ファイルを読み込み、サイズ上限を検証します。
    # @intent:post-condition 上限を超える場合はデコード前に FileTooLargeError を送出します。
    def load_binary(self, file_path: str) -> ProgramImage:
        try:
            with open(file_path, 'rb') as f:
                data = f.read()
        except OSError as e:
            raise ProgramIoError(file_path, e.strerror or str(e)) from e

        image = self.load_bytes(data, file_path)
        logger.info("Loaded %d bytes from '%s' at 0x%04X", len(image), file_path, image.load_base)
        return image

    # @intent:responsibility メモリ上のバイト列から ProgramImage を生成します。
    def load_bytes(self, data: bytes, name: str = "<bytes>") -> ProgramImage:
        max_size = self._memory.max_program_size
        if len(data) > max_size:
            raise FileTooLargeError(name, len(data), max_size)
        return ProgramImage(data, self._memory.load_base)
