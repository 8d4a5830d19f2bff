import logging
from dataclasses import dataclass, field

from lineinterp.utils import PrintableEnum

logger = logging.getLogger(__name__)

DEFAULT_WORD_BITS = 32


class DisplayMode(PrintableEnum):
    DEC = "dec"
    HEX = "hex"
    BIN = "bin"


DISPLAY_MODES = {mode.value: mode for mode in DisplayMode}


def to_signed_word(value: int, word_bits: int = DEFAULT_WORD_BITS) -> int:
    """Wraps around like a two's-complement register of `word_bits` bits"""
    half = 1 << (word_bits - 1)
    return ((value + half) & ((1 << word_bits) - 1)) - half


def format_value(value: int, mode: DisplayMode, word_bits: int = DEFAULT_WORD_BITS) -> str:
    if mode is DisplayMode.DEC:
        return str(to_signed_word(value, word_bits))
    bit_pattern = value & ((1 << word_bits) - 1)
    if mode is DisplayMode.HEX:
        return f"0x{bit_pattern:x}"
    elif mode is DisplayMode.BIN:
        return format(bit_pattern, f"0{word_bits}b")
    else:
        raise ValueError(f"Unexpected display mode: {mode}")


@dataclass
class InterpreterState:
    mode: DisplayMode = DisplayMode.DEC
    variables: dict[str, int] = field(default_factory=dict)

    def set_mode(self, mode: DisplayMode) -> None:
        logger.debug("Display mode %s -> %s", self.mode, mode)
        self.mode = mode

    def assign(self, name: str, value: int) -> None:
        self.variables[name] = value

    def clear(self) -> None:
        logger.debug("Clearing %d variable(s), display mode back to %s", len(self.variables), DisplayMode.DEC)
        self.variables.clear()
        self.mode = DisplayMode.DEC
