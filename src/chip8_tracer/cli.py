# src/chip8_tracer/cli.py
"""
CHIP-8 Code Tracer - disassemble a CHIP-8 program, separating code from data.
"""
import argparse
import logging
import sys
from typing import List, Optional

from chip8_tracer import __version__
from chip8_tracer.arch.chip8.disassembler import disassemble
from chip8_tracer.config.loader import ConfigLoader
from chip8_tracer.errors import Chip8TracerError
from chip8_tracer.listing.renderer import ListingRenderer
from chip8_tracer.loader.loader import BinaryLoader

logger = logging.getLogger("chip8_tracer")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="chip8-tracer", description=__doc__)
    parser.add_argument('program', metavar='PROGRAM',
                        help='raw CHIP-8 program image')
    parser.add_argument('--config', '-c', type=str,
                        help='YAML configuration file')
    parser.add_argument('--verbose', '-v', action='count', default=0,
                        help='increase verbosity (-v, -vv)')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')
    return parser.parse_args(argv)


def setup_logging(verbosity: int) -> None:
    """Configure logging for the command-line run."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logging.basicConfig(level=level, handlers=[console], force=True)


# @intent:responsibility ファイルを読み込み、逆アセンブルし、リストを標準出力に書き出します。
# @intent:rationale 致命的なエラーの場合は何も出力しないよう、リスト全体を生成してから書き出します。
def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = ConfigLoader().load_from_file(args.config)
        image = BinaryLoader(config.memory).load_binary(args.program)
        rows = disassemble(image, config)
        lines = ListingRenderer(config.listing).render(rows)
    except Chip8TracerError as e:
        logger.error("%s", e)
        return 1

    if lines:
        sys.stdout.write("\n".join(lines) + "\n")
    return 0


if __name__ == '__main__':
    sys.exit(main())
