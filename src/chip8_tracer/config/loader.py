import yaml
from dataclasses import fields
from typing import Dict, Any, Optional
from chip8_tracer.errors import ConfigError
from .models import TracerConfig, MemoryConfig, DecoderConfig, AnalysisConfig, ListingConfig

class ConfigLoader:
    SECTIONS = {
        "memory": MemoryConfig,
        "decoder": DecoderConfig,
        "analysis": AnalysisConfig,
        "listing": ListingConfig,
    }

    def load_from_file(self, path: Optional[str]) -> TracerConfig:
        if path is None:
            return TracerConfig()
        try:
            with open(path, 'rb') as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Can't open config '{path}': {e.strerror}", path) from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config '{path}': {e}", path) from e
        return self._parse_config(data or {})

    def _parse_config(self, data: Dict[str, Any]) -> TracerConfig:
        if not isinstance(data, dict):
            raise ConfigError("Config root must be a mapping.")

        unknown = set(data) - set(self.SECTIONS)
        if unknown:
            raise ConfigError(f"Unknown config section(s): {', '.join(sorted(unknown))}")

        sections = {}
        for name, section_type in self.SECTIONS.items():
            sections[name] = self._parse_section(name, section_type, data.get(name) or {})
        config = TracerConfig(**sections)
        self._validate(config)
        return config

    def _parse_section(self, name: str, section_type: type, section_data: Any):
        if not isinstance(section_data, dict):
            raise ConfigError(f"Config section '{name}' must be a mapping.")

        known = {f.name: f for f in fields(section_type)}
        unknown = set(section_data) - set(known)
        if unknown:
            raise ConfigError(f"Unknown key(s) in '{name}': {', '.join(sorted(unknown))}")

        values = {}
        for key, value in section_data.items():
            default = getattr(section_type(), key)
            if isinstance(default, bool):
                if not isinstance(value, bool):
                    raise ConfigError(f"'{name}.{key}' must be true or false.")
                values[key] = value
            else:
                values[key] = self._parse_int(value, f"{name}.{key}")
        return section_type(**values)

    def _parse_int(self, value: Any, key: str) -> int:
        if isinstance(value, bool):
            raise ConfigError(f"Invalid integer format for '{key}': {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            try:
                if value.lower().startswith("0x"):
                    return int(value, 16)
                return int(value)
            except ValueError:
                pass
        raise ConfigError(f"Invalid integer format for '{key}': {value}")

    def _validate(self, config: TracerConfig) -> None:
        memory = config.memory
        if memory.load_base < 0 or memory.load_base >= memory.memory_size:
            raise ConfigError("memory.load_base must lie inside memory.memory_size.")
        if config.analysis.entry_offset < 0:
            raise ConfigError("analysis.entry_offset must be non-negative.")
        if config.analysis.max_work_items <= 0:
            raise ConfigError("analysis.max_work_items must be positive.")
        if config.listing.mnemonic_width <= 0:
            raise ConfigError("listing.mnemonic_width must be positive.")
