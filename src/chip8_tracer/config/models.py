from dataclasses import dataclass, field

@dataclass
class MemoryConfig:
    load_base: int = 0x200
    memory_size: int = 0x1000  # ターゲットのアドレス空間全体

    @property
    def max_program_size(self) -> int:
        return self.memory_size - self.load_base

@dataclass
class DecoderConfig:
    decode_timer_family: bool = False  # True: 0xF 系列のオペランドを展開する

@dataclass
class AnalysisConfig:
    entry_offset: int = 0
    abort_on_out_of_bounds: bool = False
    max_work_items: int = 0x10000

@dataclass
class ListingConfig:
    mnemonic_width: int = 6

@dataclass
class TracerConfig:
    memory: MemoryConfig = field(default_factory=MemoryConfig)
    decoder: DecoderConfig = field(default_factory=DecoderConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    listing: ListingConfig = field(default_factory=ListingConfig)
