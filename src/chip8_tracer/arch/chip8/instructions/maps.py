# src/chip8_tracer/arch/chip8/instructions/maps.py
"""
命令ファミリとデコード関数、およびニーモニックとベースオペコードのマッピング定義。
"""
from . import load
from . import alu
from . import control

# @intent:map 上位ニブル（命令ファミリ）からデコード関数へのマッピングテーブル。
# 16ファミリ全てを網羅するため、デコードは全域関数になります。
DECODE_MAP = {
    0x0: control.decode_sys_family,
    0x1: control.decode_jp,
    0x2: control.decode_call,
    0x3: control.decode_se_imm,
    0x4: control.decode_sne_imm,
    0x5: control.decode_se_reg,
    0x6: load.decode_ld_imm,
    0x7: alu.decode_add_imm,
    0x8: alu.decode_alu,
    0x9: control.decode_sne_reg,
    0xA: load.decode_ld_i,
    0xB: control.decode_jp_v0,
    0xC: alu.decode_rnd,
    0xD: load.decode_drw,
    0xE: control.decode_key_skip,
    0xF: load.decode_unimplemented,
}

# @intent:map (ニーモニック, オペランドシグネチャ) からベースオペコードへのマッピングテーブル。
# シグネチャの要素は OperandKind の値、暗黙オペランドの場合はその表示名です。
ENCODE_MAP = {
    # Control
    ("CLS", ()): 0x00E0,
    ("RET", ()): 0x00EE,
    ("SYS", ("ADDRESS",)): 0x0000,
    ("JP", ("ADDRESS",)): 0x1000,
    ("CALL", ("ADDRESS",)): 0x2000,
    ("SE", ("VX", "IMMEDIATE")): 0x3000,
    ("SNE", ("VX", "IMMEDIATE")): 0x4000,
    ("SE", ("VX", "VY")): 0x5000,
    ("SNE", ("VX", "VY")): 0x9000,
    ("JP", ("V0", "ADDRESS")): 0xB000,
    ("SKP", ("VX",)): 0xE09E,
    ("SKNP", ("VX",)): 0xE0A1,

    # Load / Draw
    ("LD", ("VX", "IMMEDIATE")): 0x6000,
    ("LD", ("I", "ADDRESS")): 0xA000,
    ("DRW", ("VX", "VY", "NIBBLE")): 0xD000,

    # ALU
    ("ADD", ("VX", "IMMEDIATE")): 0x7000,
    ("LD", ("VX", "VY")): 0x8000,
    ("OR", ("VX", "VY")): 0x8001,
    ("AND", ("VX", "VY")): 0x8002,
    ("XOR", ("VX", "VY")): 0x8003,
    ("ADD", ("VX", "VY")): 0x8004,
    ("SUB", ("VX", "VY")): 0x8005,
    ("SHR", ("VX", "VY")): 0x8006,
    ("SUBN", ("VX", "VY")): 0x8007,
    ("SHL", ("VX", "VY")): 0x800E,
    ("RND", ("VX", "IMMEDIATE")): 0xC000,

    # Timer / Memory
    ("LD", ("VX", "DT")): 0xF007,
    ("LD", ("VX", "K")): 0xF00A,
    ("LD", ("DT", "VX")): 0xF015,
    ("LD", ("ST", "VX")): 0xF018,
    ("ADD", ("I", "VX")): 0xF01E,
    ("LD", ("F", "VX")): 0xF029,
    ("LD", ("B", "VX")): 0xF033,
    ("LD", ("[I]", "VX")): 0xF055,
    ("LD", ("VX", "[I]")): 0xF065,
}
