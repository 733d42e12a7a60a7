"""
Turns the two bytes at the program counter into an instruction: the raw word plus the operation it encodes.

The operation is looked up in fixed tables keyed on the leading nibble, and for the groups which share a leading
nibble, on the trailing nibble or trailing byte.  Anything not found in the tables is Operation.UNDEFINED.
"""
from enum import Enum, auto
from typing import Dict, NamedTuple

from chipcore.constants import ADDRESS_MASK, BYTE_MASK, LOWER_CHAR_MASK, MEMORY_SIZE, UPPER_CHAR_MASK


class Operation(Enum):
    CLEAR_SCREEN = auto()
    RETURN_FROM_SUBROUTINE = auto()
    GOTO = auto()
    CALL_SUBROUTINE = auto()
    IF_EQUAL = auto()
    IF_NOT_EQUAL = auto()
    IF_REGISTER_EQUAL = auto()
    SET_REGISTER_VALUE = auto()
    ADD_VALUE = auto()
    SET_REGISTER_VALUE_OTHER_REGISTER = auto()
    SET_REGISTER_BITWISE_OR = auto()
    SET_REGISTER_BITWISE_AND = auto()
    SET_REGISTER_BITWISE_XOR = auto()
    ADD_OTHER_REGISTER = auto()
    SUBTRACT_FROM_FIRST_REGISTER = auto()
    BIT_SHIFT_RIGHT = auto()
    SUBTRACT_FROM_SECOND_REGISTER = auto()
    BIT_SHIFT_LEFT = auto()
    IF_REGISTER_NOT_EQUAL = auto()
    SET_REGISTER_I = auto()
    GOTO_ADDITION = auto()
    RANDOM_BITWISE_AND = auto()
    DRAW_SPRITE = auto()
    IF_KEY_PRESSED = auto()
    IF_KEY_NOT_PRESSED = auto()
    GET_DELAY_TIMER = auto()
    WAIT_FOR_KEY_PRESS = auto()
    SET_DELAY_TIMER = auto()
    SET_SOUND_TIMER = auto()
    REGISTER_I_ADDITION = auto()
    SET_REGISTER_I_TO_HEX_SPRITE_ADDRESS = auto()
    BINARY_CODED_DECIMAL = auto()
    REGISTER_DUMP = auto()
    REGISTER_LOAD = auto()
    UNDEFINED = auto()


# Leading nibbles which fully identify the operation
PRIMARY_OPERATIONS: Dict[int, Operation] = {
    0x1: Operation.GOTO,
    0x2: Operation.CALL_SUBROUTINE,
    0x3: Operation.IF_EQUAL,
    0x4: Operation.IF_NOT_EQUAL,
    0x6: Operation.SET_REGISTER_VALUE,
    0x7: Operation.ADD_VALUE,
    0xA: Operation.SET_REGISTER_I,
    0xB: Operation.GOTO_ADDITION,
    0xC: Operation.RANDOM_BITWISE_AND,
    0xD: Operation.DRAW_SPRITE,
}

# Keyed on the whole word
MACHINE_OPERATIONS: Dict[int, Operation] = {
    0x00E0: Operation.CLEAR_SCREEN,
    0x00EE: Operation.RETURN_FROM_SUBROUTINE,
}

# Keyed on the leading nibble, only valid with a trailing nibble of 0
REGISTER_COMPARE_OPERATIONS: Dict[int, Operation] = {
    0x5: Operation.IF_REGISTER_EQUAL,
    0x9: Operation.IF_REGISTER_NOT_EQUAL,
}

# Keyed on the trailing nibble
ARITHMETIC_OPERATIONS: Dict[int, Operation] = {
    0x0: Operation.SET_REGISTER_VALUE_OTHER_REGISTER,
    0x1: Operation.SET_REGISTER_BITWISE_OR,
    0x2: Operation.SET_REGISTER_BITWISE_AND,
    0x3: Operation.SET_REGISTER_BITWISE_XOR,
    0x4: Operation.ADD_OTHER_REGISTER,
    0x5: Operation.SUBTRACT_FROM_FIRST_REGISTER,
    0x6: Operation.BIT_SHIFT_RIGHT,
    0x7: Operation.SUBTRACT_FROM_SECOND_REGISTER,
    0xE: Operation.BIT_SHIFT_LEFT,
}

# Keyed on the trailing byte
KEY_OPERATIONS: Dict[int, Operation] = {
    0x9E: Operation.IF_KEY_PRESSED,
    0xA1: Operation.IF_KEY_NOT_PRESSED,
}

# Keyed on the trailing byte
SYSTEM_OPERATIONS: Dict[int, Operation] = {
    0x07: Operation.GET_DELAY_TIMER,
    0x0A: Operation.WAIT_FOR_KEY_PRESS,
    0x15: Operation.SET_DELAY_TIMER,
    0x18: Operation.SET_SOUND_TIMER,
    0x1E: Operation.REGISTER_I_ADDITION,
    0x29: Operation.SET_REGISTER_I_TO_HEX_SPRITE_ADDRESS,
    0x33: Operation.BINARY_CODED_DECIMAL,
    0x55: Operation.REGISTER_DUMP,
    0x65: Operation.REGISTER_LOAD,
}


def get_upper_char(byte: int) -> int:
    """
    Get the upper character (first 4 bits) of the given byte.
    :param byte: The byte from which to extract the character.
    :return: The upper character.
    """
    return (byte & UPPER_CHAR_MASK) >> 4


def get_lower_char(byte: int) -> int:
    """
    Get the lower character (last 4 bits) of the given byte.
    :param byte: The byte from which to extract the character.
    :return: The lower character.
    """
    return byte & LOWER_CHAR_MASK


class Instruction(NamedTuple):
    word: int
    operation: Operation

    @property
    def group(self) -> int:
        return get_upper_char(self.word >> 8)

    @property
    def x(self) -> int:
        return get_lower_char(self.word >> 8)

    @property
    def y(self) -> int:
        return get_upper_char(self.word & BYTE_MASK)

    @property
    def n(self) -> int:
        return get_lower_char(self.word)

    @property
    def nn(self) -> int:
        return self.word & BYTE_MASK

    @property
    def nnn(self) -> int:
        return self.word & ADDRESS_MASK

    def hex(self) -> str:
        return f"{self.word:04x}"


def fetch(ram: bytearray, address: int) -> int:
    """
    Read the big-endian word at the given address.
    :param ram: The memory to read from.
    :param address: The address of the high byte.  Wraps around the end of memory.
    :return: The 16-bit instruction word.
    """
    high = ram[address % MEMORY_SIZE]
    low = ram[(address + 1) % MEMORY_SIZE]
    return (high << 8) | low


def lookup_operation(word: int) -> Operation:
    """
    Find the operation encoded by an instruction word.
    :param word: The 16-bit instruction word.
    :return: The operation, or Operation.UNDEFINED if the word encodes none.
    """
    group = get_upper_char(word >> 8)
    trailing_byte = word & BYTE_MASK
    trailing_nibble = get_lower_char(word)

    if group in PRIMARY_OPERATIONS:
        return PRIMARY_OPERATIONS[group]
    if group == 0x0:
        return MACHINE_OPERATIONS.get(word, Operation.UNDEFINED)
    if group in REGISTER_COMPARE_OPERATIONS:
        return REGISTER_COMPARE_OPERATIONS[group] if trailing_nibble == 0 else Operation.UNDEFINED
    if group == 0x8:
        return ARITHMETIC_OPERATIONS.get(trailing_nibble, Operation.UNDEFINED)
    if group == 0xE:
        return KEY_OPERATIONS.get(trailing_byte, Operation.UNDEFINED)
    if group == 0xF:
        return SYSTEM_OPERATIONS.get(trailing_byte, Operation.UNDEFINED)
    return Operation.UNDEFINED


def decode(word: int) -> Instruction:
    return Instruction(word, lookup_operation(word))
