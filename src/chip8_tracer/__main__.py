# src/chip8_tracer/__main__.py
"""
`python -m chip8_tracer` のエントリポイント。
"""
import sys
from chip8_tracer.cli import main

if __name__ == '__main__':
    sys.exit(main())
