from chipcore.decoder import Instruction, Operation, decode, fetch
from chipcore.emulator import Emulator, KeyWait
from chipcore.random_source import RandomSource, SequenceRandomSource, SystemRandomSource
from chipcore.state import Keypad, MachineState, RomLoadError, RomTooLargeError

__version__ = "1.0.0"
