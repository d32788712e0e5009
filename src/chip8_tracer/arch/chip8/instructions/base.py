# src/chip8_tracer/arch/chip8/instructions/base.py
"""
CHIP-8命令デコード用の共通ユーティリティ。
オペコードの固定ビット窓からフィールドを取り出します。
"""

# @intent:utility_function 上位ニブル (bits 15-12)。命令ファミリを選択します。
def family_of(word: int) -> int:
    return (word >> 12) & 0xF

# @intent:utility_function アドレス (bits 11-0)。
def nnn_of(word: int) -> int:
    return word & 0x0FFF

# @intent:utility_function レジスタ番号 Vx (bits 11-8)。
def x_of(word: int) -> int:
    return (word >> 8) & 0xF

# @intent:utility_function レジスタ番号 Vy (bits 7-4)。
def y_of(word: int) -> int:
    return (word >> 4) & 0xF

# @intent:utility_function 即値バイト (bits 7-0)。
def kk_of(word: int) -> int:
    return word & 0x00FF

# @intent:utility_function ニブルリテラル (bits 3-0)。
def n_of(word: int) -> int:
    return word & 0x000F
