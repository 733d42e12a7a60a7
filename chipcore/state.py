import logging

import numpy as np

from typing import List

from chipcore.constants import (
    DIGIT_SPRITE_HEIGHT,
    DIGIT_SPRITES,
    GAME_START_ADDRESS,
    KEY_COUNT,
    LOWER_CHAR_MASK,
    MAX_ROM_SIZE,
    MEMORY_SIZE,
    REGISTER_COUNT,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    STACK_DEPTH,
)

logger = logging.getLogger(__name__)


class RomLoadError(Exception):
    """
    A game could not be loaded into memory.  Nothing may be executed after this is raised.
    """


class RomTooLargeError(RomLoadError):
    """
    The game does not fit between the start of the program area and the end of memory.
    """
    def __init__(self, size: int):
        super().__init__(f"The game is {size} bytes but at most {MAX_ROM_SIZE} bytes fit in memory.")
        self.size = size


class Keypad:
    """
    The sixteen hexadecimal keys, as last reported by the host.
    """
    def __init__(self):
        self.keys: List[bool] = [False] * KEY_COUNT
        self.last_key = 0
        self.input_pending = False

    def press(self, key: int) -> None:
        """
        Mark the key as held down and record it as the most recent fresh press.
        :param key: The logical key [0, 15].
        """
        self.keys[key] = True
        self.last_key = key
        self.input_pending = True
        logger.debug(f"Key {key} pressed.")

    def release(self, key: int) -> None:
        """
        Mark the key as released.  The most recent press is left as it is.
        :param key: The logical key [0, 15].
        """
        self.keys[key] = False
        logger.debug(f"Key {key} released.")

    def clear_input_pending(self) -> None:
        """
        Forget that a fresh press happened.  The host calls this every tick before scanning for new presses.
        """
        self.input_pending = False

    def is_pressed(self, value: int) -> bool:
        """
        Check whether the key addressed by a register value is held down.  Only the low nibble of the value is significant.
        :param value: The register value addressing the key.
        :return: True if the key is held down, False otherwise.
        """
        return self.keys[value & LOWER_CHAR_MASK]


class MachineState:
    """
    All the state of the machine: memory, registers, timers, stack, keypad and screen.
    """
    def __init__(self, rom: bytes):
        """
        Constructor.
        :param rom: The game image to place at the start of the program area.
        """
        if len(rom) > MAX_ROM_SIZE:
            raise RomTooLargeError(len(rom))

        self.rom = bytes(rom)
        self.pixels = np.zeros((SCREEN_HEIGHT, SCREEN_WIDTH), np.ubyte)
        self.reset()

    def reset(self) -> None:
        """
        Reset the state of the machine to the moment the game was first loaded.
        """
        self.ram = bytearray(MEMORY_SIZE)
        self.registers = bytearray(REGISTER_COUNT)
        self.register_i = 0
        self.program_counter = GAME_START_ADDRESS
        self.stack: List[int] = [0] * STACK_DEPTH
        self.stack_pointer = 0
        self.delay = 0
        self.sound = 0
        self.keypad = Keypad()
        self.pixels.fill(0)
        self.redraw = False

        self.load_digit_sprites()
        self.load_rom(self.rom)

    def load_digit_sprites(self) -> None:
        """
        Load the sprites for the hexadecimal digits 0-f into memory.
        """
        for digit, sprite in enumerate(DIGIT_SPRITES):
            start = digit * DIGIT_SPRITE_HEIGHT
            self.ram[start:start + DIGIT_SPRITE_HEIGHT] = bytes.fromhex(sprite)

    def load_rom(self, rom: bytes) -> None:
        """
        Copy the game into memory at the start of the program area.
        :param rom: The game image.
        """
        if len(rom) > MAX_ROM_SIZE:
            raise RomTooLargeError(len(rom))

        self.ram[GAME_START_ADDRESS:GAME_START_ADDRESS + len(rom)] = rom
        logger.debug(f"Loaded {len(rom)} bytes at address {hex(GAME_START_ADDRESS)}.")

    @property
    def framebuffer(self) -> np.ndarray:
        """
        The screen as 2048 cells of 0 or 1, row-major, so cell (x, y) is at index y * 64 + x.
        """
        return self.pixels.ravel()

    def consume_redraw(self) -> bool:
        """
        Report whether the screen changed since the last call, clearing the redraw flag.
        :return: True if the screen should be redrawn, False otherwise.
        """
        redraw = self.redraw
        self.redraw = False
        return redraw

    def decrement_timers(self) -> None:
        """
        Count both timers down by one, stopping at 0.
        """
        if self.delay > 0:
            self.delay -= 1
        if self.sound > 0:
            self.sound -= 1
