# Masks
UPPER_CHAR_MASK = 240
LOWER_CHAR_MASK = 15
BYTE_MASK = 255
ADDRESS_MASK = 4095
MOST_SIGNIFICANT_BIT = 128

# Memory layout
MEMORY_SIZE = 4096
GAME_START_ADDRESS = 512
INTERPRETER_END_ADDRESS = 80
MAX_ROM_SIZE = MEMORY_SIZE - GAME_START_ADDRESS
INSTRUCTION_SIZE = 2

# Registers and stack
REGISTER_COUNT = 16
FLAG_REGISTER = 15
STACK_DEPTH = 16
KEY_COUNT = 16

# Display
SCREEN_WIDTH = 64
SCREEN_HEIGHT = 32
SPRITE_WIDTH = 8
DIGIT_SPRITE_HEIGHT = 5

DIGIT_SPRITES = [
    "f0909090f0",
    "2060202070",
    "f010f080f0",
    "f010f010f0",
    "9090f01010",
    "f080f010f0",
    "f080f090f0",
    "f010204040",
    "f090f090f0",
    "f090f010f0",
    "f090f09090",
    "e090e090e0",
    "f0808080f0",
    "e0909090e0",
    "f080f080f0",
    "f080f08080",
]

# Host defaults
SCALED_SCREEN_WIDTH = 800
SCALED_SCREEN_HEIGHT = 400
CYCLES_PER_SECOND = 500
COLOUR_PALETTE = [(0, 0, 0), (0, 255, 0)]
