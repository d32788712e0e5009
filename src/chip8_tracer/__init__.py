# src/chip8_tracer/__init__.py
"""
CHIP-8 Code Tracer

CHIP-8のバイトコードを静的に追跡し、コードとデータを区別した逆アセンブルリストを生成します。
"""
__version__ = "0.1.0"
