"""
The window, keyboard and game picker around the emulator.

The emulator itself never touches pygame: this module feeds it key events, runs one cycle per tick and draws the
screen whenever the emulator reports a change.
"""
import argparse
import logging
import sys

import easygui
import pygame

from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from chipcore.constants import (
    COLOUR_PALETTE,
    CYCLES_PER_SECOND,
    SCALED_SCREEN_HEIGHT,
    SCALED_SCREEN_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from chipcore.emulator import Emulator
from chipcore.random_source import SystemRandomSource
from chipcore.state import Keypad, RomLoadError

logger = logging.getLogger(__name__)

GAMES_PATH = str(Path.cwd().joinpath("games", "*.ch8"))
GAME_FILE_TYPES = [["*.ch8", "*.chip8", "CHIP-8"]]
RESET_KEY = pygame.K_F5

# Laid out like the COSMAC keypad:
#   1 2 3 C
#   4 5 6 D
#   7 8 9 E
#   A 0 B F
KEY_LOOKUP = {
    pygame.K_1: 1,
    pygame.K_q: 4,
    pygame.K_a: 7,
    pygame.K_z: 10,
    pygame.K_2: 2,
    pygame.K_w: 5,
    pygame.K_s: 8,
    pygame.K_x: 0,
    pygame.K_3: 3,
    pygame.K_e: 6,
    pygame.K_d: 9,
    pygame.K_c: 11,
    pygame.K_4: 12,
    pygame.K_r: 13,
    pygame.K_f: 14,
    pygame.K_v: 15,
}


def read_rom(path: Path) -> bytes:
    """
    Read a game from disk.
    :param path: The path of the game.
    :return: The raw game image.
    """
    if not path.exists():
        raise RomLoadError(f"Game could not be loaded as the path does not exist!  Path: {path}.")

    if path.suffix not in (".ch8", ".chip8"):
        logger.warning(f"Game does not have a '.ch8' or '.chip8' extension, loading it anyway.  Path: {path}.")

    logger.debug(f"Loading game at path {path}.")
    try:
        with path.open("rb") as file:
            return file.read()
    except OSError as error:
        raise RomLoadError(f"Game could not be read!  Path: {path}.") from error


def pick_rom() -> Optional[Path]:
    """
    Ask for a game with a file picker.
    :return: The path of the selected game, or None if nothing was picked.
    """
    file_name = easygui.fileopenbox(title="Select a Game", default=GAMES_PATH, filetypes=GAME_FILE_TYPES)
    if not file_name:
        easygui.msgbox("Pick a game to play!  Pass the game's path on the command line or pick one when asked.", "No Game Selected")
        return None
    return Path(file_name)


def apply_key_event(keypad: Keypad, event: pygame.event.Event) -> None:
    """
    Forward a keyboard event to the keypad if the key is one of the sixteen mapped keys.
    :param keypad: The keypad to update.
    :param event: A KEYDOWN or KEYUP event.
    """
    key = KEY_LOOKUP.get(event.key, None)
    if key is None:
        return

    if event.type == pygame.KEYDOWN:
        keypad.press(key)
    elif event.type == pygame.KEYUP:
        keypad.release(key)


def parse_colour(value: str) -> Tuple[int, int, int]:
    """
    Parse a colour given as six hexadecimal digits, e.g. 00ff00.
    :param value: The colour as written on the command line.
    :return: The red, green and blue components.
    """
    value = value.lstrip("#")
    if len(value) != 6:
        raise argparse.ArgumentTypeError(f"Colours are six hexadecimal digits, got '{value}'.")
    try:
        colour = bytes.fromhex(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Colours are six hexadecimal digits, got '{value}'.")
    return colour[0], colour[1], colour[2]


class Display:
    """
    The window the screen is drawn to.
    """
    def __init__(self, palette: List[Tuple[int, int, int]], caption: str):
        pygame.display.init()
        pygame.display.set_caption(caption)
        self.screen = pygame.display.set_mode((SCALED_SCREEN_WIDTH, SCALED_SCREEN_HEIGHT), 0, 8)
        self.screen.set_palette(palette)
        self.inter_screen = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), 0, 8)
        self.inter_screen.set_palette(palette)

    def draw(self, emulator: Emulator) -> None:
        """
        Update the display.
        :param emulator: The emulator whose screen should be shown.
        """
        # surfarray wants the x axis first
        pygame.surfarray.blit_array(self.inter_screen, emulator.pixels.T)
        pygame.transform.scale(self.inter_screen, (SCALED_SCREEN_WIDTH, SCALED_SCREEN_HEIGHT), self.screen)
        pygame.display.flip()


class Host:
    """
    Runs the emulator one cycle per tick until the window is closed.
    """
    def __init__(self, emulator: Emulator, display: Display, cycles_per_second: int = CYCLES_PER_SECOND):
        self.emulator = emulator
        self.display = display
        self.cycles_per_second = cycles_per_second
        self.clock = pygame.time.Clock()
        self.running = False

    def handle_events(self) -> None:
        """
        Handle everything that happened since the last tick.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN or event.type == pygame.KEYUP:
                if event.type == pygame.KEYDOWN and event.key == RESET_KEY:
                    logger.info("Resetting the game.")
                    self.emulator.reset()
                    self.display.draw(self.emulator)
                    continue
                apply_key_event(self.emulator.keypad, event)

    def tick(self) -> None:
        """
        One step of the machine: gather input, run one cycle, redraw if needed.
        """
        self.emulator.keypad.clear_input_pending()
        self.handle_events()
        if not self.running:
            return

        self.emulator.cycle()
        if self.emulator.consume_redraw():
            self.display.draw(self.emulator)

    def run(self) -> None:
        """
        Loop until the window is closed.
        """
        self.running = True
        self.display.draw(self.emulator)
        while self.running:
            self.tick()
            self.clock.tick(self.cycles_per_second)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chipcore", description="Play a CHIP-8 game in a pygame window.")
    parser.add_argument("rom", nargs="?", type=Path, help="Path to the game.  A file picker is shown if not given.")
    parser.add_argument("--rate", type=int, default=CYCLES_PER_SECOND, help=f"Instructions executed per second (default {CYCLES_PER_SECOND}).")
    parser.add_argument("--background", type=parse_colour, default=COLOUR_PALETTE[0], help="Colour of unset pixels as six hexadecimal digits.")
    parser.add_argument("--foreground", type=parse_colour, default=COLOUR_PALETTE[1], help="Colour of set pixels as six hexadecimal digits.")
    parser.add_argument("--no-index-increment", action="store_true", help="Leave register I untouched after register dumps and loads.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random number opcode.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every executed instruction.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="[%(levelname)s]:  %(message)s", stream=sys.stdout)

    path = args.rom if args.rom is not None else pick_rom()
    if path is None:
        return 1

    try:
        emulator = Emulator(
            read_rom(path),
            random_source=SystemRandomSource(args.seed),
            increment_index_on_transfer=not args.no_index_increment,
        )
    except RomLoadError as error:
        logger.error(str(error))
        return 1

    pygame.init()
    try:
        display = Display([args.background, args.foreground], path.stem)
        Host(emulator, display, args.rate).run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
