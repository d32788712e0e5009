"""
共通の型定義を提供するモジュール。
プロジェクト全体で使用される汎用的な型エイリアスや定数などを定義します。
"""
from typing import List, NamedTuple

# @intent:data_structure プログラムイメージ先頭からのバイトオフセット。アドレスではありません。
Offset = int

# CHIP-8の命令は常に2バイト
OPCODE_SIZE = 2

# @intent:data_structure 逆アセンブル結果の1行分。レンダラーが整形するために使用される。
class ListingRow(NamedTuple):
    address: int        # 絶対アドレス (load_base + offset)
    raw_hex: str        # 例: "00E0", "1234"
    mnemonic: str       # 例: "CLS", "DB", "INVALID"
    operands: List[str] # 例: ["V3", "7F"]
