# src/chip8_tracer/listing/renderer.py
"""
逆アセンブルリストのテキスト整形。
"""
from typing import Iterable, List, Optional

from chip8_tracer.common.types import ListingRow
from chip8_tracer.config.models import ListingConfig


# @intent:responsibility ListingRow を1行のテキストに整形します。
class ListingRenderer:
    """
    各行の形式: `AAAA [RAW] MNEMONIC operands`
    ニーモニックは mnemonic_width 桁に右寄せされ、オペランドはカンマ区切りになります。
    """
    def __init__(self, config: Optional[ListingConfig] = None):
        self._config = config or ListingConfig()

    def render_row(self, row: ListingRow) -> str:
        width = self._config.mnemonic_width
        line = f"{row.address:04X} [{row.raw_hex}] {row.mnemonic:>{width}}"
        if row.operands:
            line += " " + ", ".join(row.operands)
        return line

    def render(self, rows: Iterable[ListingRow]) -> List[str]:
        return [self.render_row(row) for row in rows]
