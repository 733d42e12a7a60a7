import logging

from enum import Enum
from typing import Dict, Optional, Tuple

from chipcore.constants import (
    ADDRESS_MASK,
    BYTE_MASK,
    DIGIT_SPRITE_HEIGHT,
    FLAG_REGISTER,
    INSTRUCTION_SIZE,
    MEMORY_SIZE,
    MOST_SIGNIFICANT_BIT,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SPRITE_WIDTH,
    STACK_DEPTH,
)
from chipcore.decoder import Instruction, Operation, decode, fetch
from chipcore.random_source import RandomSource, SystemRandomSource
from chipcore.state import MachineState

logger = logging.getLogger(__name__)

OPCODE_HANDLERS: Dict[Operation, str] = {
    Operation.CLEAR_SCREEN: "opcode_clear_screen",
    Operation.RETURN_FROM_SUBROUTINE: "opcode_return_from_subroutine",
    Operation.GOTO: "opcode_goto",
    Operation.CALL_SUBROUTINE: "opcode_call_subroutine",
    Operation.IF_EQUAL: "opcode_if_equal",
    Operation.IF_NOT_EQUAL: "opcode_if_not_equal",
    Operation.IF_REGISTER_EQUAL: "opcode_if_register_equal",
    Operation.SET_REGISTER_VALUE: "opcode_set_register_value",
    Operation.ADD_VALUE: "opcode_add_value",
    Operation.SET_REGISTER_VALUE_OTHER_REGISTER: "opcode_set_register_value_other_register",
    Operation.SET_REGISTER_BITWISE_OR: "opcode_set_register_bitwise_or",
    Operation.SET_REGISTER_BITWISE_AND: "opcode_set_register_bitwise_and",
    Operation.SET_REGISTER_BITWISE_XOR: "opcode_set_register_bitwise_xor",
    Operation.ADD_OTHER_REGISTER: "opcode_add_other_register",
    Operation.SUBTRACT_FROM_FIRST_REGISTER: "opcode_subtract_from_first_register",
    Operation.BIT_SHIFT_RIGHT: "opcode_bit_shift_right",
    Operation.SUBTRACT_FROM_SECOND_REGISTER: "opcode_subtract_from_second_register",
    Operation.BIT_SHIFT_LEFT: "opcode_bit_shift_left",
    Operation.IF_REGISTER_NOT_EQUAL: "opcode_if_register_not_equal",
    Operation.SET_REGISTER_I: "opcode_set_register_i",
    Operation.GOTO_ADDITION: "opcode_goto_addition",
    Operation.RANDOM_BITWISE_AND: "opcode_random_bitwise_and",
    Operation.DRAW_SPRITE: "opcode_draw_sprite",
    Operation.IF_KEY_PRESSED: "opcode_if_key_pressed",
    Operation.IF_KEY_NOT_PRESSED: "opcode_if_key_not_pressed",
    Operation.GET_DELAY_TIMER: "opcode_get_delay_timer",
    Operation.WAIT_FOR_KEY_PRESS: "opcode_wait_for_key_press",
    Operation.SET_DELAY_TIMER: "opcode_set_delay_timer",
    Operation.SET_SOUND_TIMER: "opcode_set_sound_timer",
    Operation.REGISTER_I_ADDITION: "opcode_register_i_addition",
    Operation.SET_REGISTER_I_TO_HEX_SPRITE_ADDRESS: "opcode_set_register_i_to_hex_sprite_address",
    Operation.BINARY_CODED_DECIMAL: "opcode_binary_coded_decimal",
    Operation.REGISTER_DUMP: "opcode_register_dump",
    Operation.REGISTER_LOAD: "opcode_register_load",
    Operation.UNDEFINED: "opcode_undefined",
}


class KeyWait(Enum):
    """
    The outcome of the blocking key-wait opcode.
    """
    WAITING = "waiting"
    RESUMED = "resumed"


class Emulator(MachineState):
    """
    The class which holds all the functionality of the emulator.  The host calls cycle() once per tick.
    """
    def __init__(self, rom: bytes, random_source: Optional[RandomSource] = None, increment_index_on_transfer: bool = True):
        """
        Constructor.
        :param rom: The game to load.
        :param random_source: Where the randomizing opcode gets its bytes from.  Unseeded system randomness if not provided.
        :param increment_index_on_transfer: True if the register dump / load opcodes leave register I past the last byte they touched, False if they leave it untouched.
        """
        self.random_source = random_source if random_source is not None else SystemRandomSource()
        self.increment_index_on_transfer = increment_index_on_transfer
        self.waiting_for_key = False
        super().__init__(rom)

    def reset(self) -> None:
        """
        Reset the state of the emulator.
        """
        super().reset()
        self.waiting_for_key = False
        logger.debug("Emulator reset.")

    # region Helpers
    @staticmethod
    def bounded_subtract(minuend: int, subtrahend: int) -> Tuple[int, int]:
        """
        Subtract the subtrahend from the minuend, bounded by the confines of a byte.
        :param minuend: The integer from which to subtract.
        :param subtrahend: The integer to subtract.
        :return: The result of the subtraction and the not borrow (1 if there was no borrow, 0 otherwise).
        """
        difference_of_registers = minuend - subtrahend
        result = difference_of_registers % 256
        not_borrow = 1 if difference_of_registers >= 0 else 0
        return result, not_borrow

    def next_instruction(self) -> None:
        """
        Move the program counter on to the next instruction.
        """
        self.program_counter += INSTRUCTION_SIZE

    def skip_next_instruction_if(self, condition: bool) -> None:
        """
        Move the program counter past the next instruction if the condition holds, on to it otherwise.
        :param condition: Whether the next instruction should be skipped.
        """
        if condition:
            self.program_counter += 2 * INSTRUCTION_SIZE
            logger.debug("Instruction skipped.")
        else:
            self.program_counter += INSTRUCTION_SIZE
            logger.debug("Instruction not skipped.")
    # endregion

    # region Opcodes
    def cycle(self) -> Instruction:
        """
        Fetches the current instruction, executes it and counts the timers down.
        :return: The instruction which was executed.
        """
        instruction = decode(fetch(self.ram, self.program_counter))
        self.run_opcode(instruction)
        self.decrement_timers()
        return instruction

    def run_opcode(self, instruction: Instruction) -> None:
        """
        Route the provided instruction to the correct method to execute it.
        :param instruction: The instruction to execute.
        """
        handler = getattr(self, OPCODE_HANDLERS[instruction.operation])
        handler(instruction)

    def opcode_undefined(self, instruction: Instruction) -> None:
        """
        Skip over an instruction which does not encode any operation.
        :param instruction: The instruction to execute.
        """
        logger.error(f"Unimplemented / Invalid Opcode: {instruction.hex()} at address {hex(self.program_counter)}.  Ignoring.")
        self.next_instruction()

    def opcode_clear_screen(self, instruction: Instruction) -> None:
        """
        Clear the screen.
        :param instruction: The instruction to execute.
        """
        self.pixels.fill(0)
        self.redraw = True
        self.next_instruction()
        logger.debug(f"Execute Opcode {instruction.hex()}: Clearing the screen.")

    def opcode_return_from_subroutine(self, instruction: Instruction) -> None:
        """
        Return from the current subroutine, continuing after the instruction which called it.
        :param instruction: The instruction to execute.
        """
        if self.stack_pointer == 0:
            logger.error(f"Tried to return from a subroutine at address {hex(self.program_counter)} when the stack is empty.  Ignoring.")
            self.next_instruction()
            return

        self.stack_pointer -= 1
        self.program_counter = self.stack[self.stack_pointer] + INSTRUCTION_SIZE
        logger.debug(f"Execute Opcode {instruction.hex()}: Return from subroutine, continue at {hex(self.program_counter)}.")

    def opcode_goto(self, instruction: Instruction) -> None:
        """
        Jump to the provided address.
        :param instruction: The instruction to execute.
        """
        self.program_counter = instruction.nnn
        logger.debug(f"Execute Opcode {instruction.hex()}: Jump to address {hex(instruction.nnn)}.")

    def opcode_call_subroutine(self, instruction: Instruction) -> None:
        """
        Call the subroutine at the given address.
        :param instruction: The instruction to execute.
        """
        if self.stack_pointer == STACK_DEPTH:
            logger.error(f"Tried to call the subroutine at address {hex(instruction.nnn)} with all {STACK_DEPTH} stack entries in use.  Ignoring.")
            self.next_instruction()
            return

        self.stack[self.stack_pointer] = self.program_counter
        self.stack_pointer += 1
        self.program_counter = instruction.nnn
        logger.debug(f"Execute Opcode {instruction.hex()}: Call subroutine at address {hex(instruction.nnn)}.")

    def opcode_if_equal(self, instruction: Instruction) -> None:
        """
        Skip the next instruction if the value of the provided register is equal to the provided value.
        :param instruction: The instruction to execute.
        """
        register = instruction.x
        register_value = self.registers[register]
        logger.debug(f"Execute Opcode {instruction.hex()}: Skip next instruction if register {register}'s value ({register_value}) is {instruction.nn}.")
        self.skip_next_instruction_if(register_value == instruction.nn)

    def opcode_if_not_equal(self, instruction: Instruction) -> None:
        """
        Skip the next instruction if the value of the provided register is not equal to the provided value.
        :param instruction: The instruction to execute.
        """
        register = instruction.x
        register_value = self.registers[register]
        logger.debug(f"Execute Opcode {instruction.hex()}: Skip next instruction if register {register}'s value ({register_value}) is not {instruction.nn}.")
        self.skip_next_instruction_if(register_value != instruction.nn)

    def opcode_if_register_equal(self, instruction: Instruction) -> None:
        """
        Skip the next instruction if the value of the first provided register is equal to the value of the second provided register.
        :param instruction: The instruction to execute.
        """
        first_register = instruction.x
        second_register = instruction.y
        first_register_value = self.registers[first_register]
        second_register_value = self.registers[second_register]
        logger.debug(f"Execute Opcode {instruction.hex()}: Skip next instruction if register {first_register}'s value ({first_register_value}) is equal to register {second_register}'s value ({second_register_value}).")
        self.skip_next_instruction_if(first_register_value == second_register_value)

    def opcode_set_register_value(self, instruction: Instruction) -> None:
        """
        Set the value of the provided register to the provided value.
        :param instruction: The instruction to execute.
        """
        register = instruction.x
        self.registers[register] = instruction.nn
        self.next_instruction()
        logger.debug(f"Execute Opcode {instruction.hex()}: Set the value of register {register} to {instruction.nn}.")

    def opcode_add_value(self, instruction: Instruction) -> None:
        """
        Adds the provided value to the value of the provided register.  The carry flag (register 15) is not set.
        :param instruction: The instruction to execute.
        """
        register = instruction.x
        self.registers[register] = (self.registers[register] + instruction.nn) % 256
        self.next_instruction()
        logger.debug(f"Execute Opcode {instruction.hex()}: Add {instruction.nn} to the value of register {register}.")

    def opcode_set_register_value_other_register(self, instruction: Instruction) -> None:
        """
        Set the value of the first provided register to the value of the second provided register.
        :param instruction: The instruction to execute.
        """
        first_register = instruction.x
        second_register = instruction.y
        second_register_value = self.registers[second_register]
        self.registers[first_register] = second_register_value
        self.next_instruction()
        logger.debug(f"Execute Opcode {instruction.hex()}: Set the value of register {first_register} to the value of register {second_register}'s value ({second_register_value}).")

    def opcode_set_register_bitwise_or(self, instruction: Instruction) -> None:
        """
        Sets the value of the first provided register to the bitwise or of itself and the value of the second provided register.
        :param instruction: The instruction to execute.
        """
        first_register = instruction.x
        second_register = instruction.y
        first_register_value = self.registers[first_register]
        second_register_value = self.registers[second_register]
        result = first_register_value | second_register_value
        self.registers[first_register] = result
        self.next_instruction()
        logger.debug(f"Execute Opcode {instruction.hex()}: Set the value of register {first_register} to the bitwise or of itself and the value of register {second_register} ({first_register_value} | {second_register_value} = {result}).")

    def opcode_set_register_bitwise_and(self, instruction: Instruction) -> None:
        """
        Sets the value of the first provided register to the bitwise and of itself and the value of the second provided register.
        :param instruction: The instruction to execute.
        """
        first_register = instruction.x
        second_register = instruction.y
        first_register_value = self.registers[first_register]
        second_register_value = self.registers[second_register]
        result = first_register_value & second_register_value
        self.registers[first_register] = result
        self.next_instruction()
        logger.debug(f"Execute Opcode {instruction.hex()}: Set the value of register {first_register} to the bitwise and of itself and the value of register {second_register} ({first_register_value} & {second_register_value} = {result}).")

    def opcode_set_register_bitwise_xor(self, instruction: Instruction) -> None:
        """
        Sets the value of the first provided register to the bitwise xor of itself and the value of the second provided register.
        :param instruction: The instruction to execute.
        """
        first_register = instruction.x
        second_register = instruction.y
        first_register_value = self.registers[first_register]
        second_register_value = self.registers[second_register]
        result = first_register_value ^ second_register_value
        self.registers[first_register] = result
        self.next_instruction()
        logger.debug(f"Execute Opcode {instruction.hex()}: Set the value of register {first_register} to the bitwise xor of itself and the value of register {second_register} ({first_register_value} ^ {second_register_value} = {result}).")

    def opcode_add_other_register(self, instruction: Instruction) -> None:
        """
        Sets the value of the first provided register to the sum of itself and the value of the second provided register.  The carry flag (register 15) is set.
        :param instruction: The instruction to execute.
        """
        first_register = instruction.x
        second_register = instruction.y
        first_register_value = self.registers[first_register]
        second_register_value = self.registers[second_register]
        sum_of_registers = first_register_value + second_register_value
        result = sum_of_registers % 256
        carry = 1 if sum_of_registers > BYTE_MASK else 0
        self.registers[first_register] = result
        # The flag is written last so it wins when register 15 is also the target.
        self.registers[FLAG_REGISTER] = carry
        self.next_instruction()
        logger.debug(f"Execute Opcode {instruction.hex()}: Set the value of register {first_register} to the sum of itself and the value of register {second_register} ({first_register_value} + {second_register_value} = {result}, carry = {carry}).")

    def opcode_subtract_from_first_register(self, instruction: Instruction) -> None:
        """
        Sets the value of the first provided register to the difference of itself and the value of the second provided register.  The not borrow flag (register 15) is set.
        :param instruction: The instruction to execute.
        """
        first_register = instruction.x
        second_register = instruction.y
        first_register_value = self.registers[first_register]
        second_register_value = self.registers[second_register]
        result, not_borrow = self.bounded_subtract(first_register_value, second_register_value)
        self.registers[first_register] = result
        self.registers[FLAG_REGISTER] = not_borrow
        self.next_instruction()
        logger.debug(f"Execute Opcode {instruction.hex()}: Set the value of register {first_register} to the difference of itself and the value of register {second_register} ({first_register_value} - {second_register_value} = {result}, not borrow = {not_borrow}).")

    def opcode_bit_shift_right(self, instruction: Instruction) -> None:
        """
        Shift the value of the first provided register to the right by 1.  Set register 15 to the value of the least significant bit before the operation.
        :param instruction: The instruction to execute.
        """
        first_register = instruction.x
        first_register_value = self.registers[first_register]
        bit_shift = first_register_value >> 1
        least_significant_bit = first_register_value & 1
        self.registers[first_register] = bit_shift
        self.registers[FLAG_REGISTER] = least_significant_bit
        self.next_instruction()
        logger.debug(f"Execute Opcode {instruction.hex()}: Shift the value of register {first_register} to the right by 1 ({first_register_value} >> 1 = {bit_shift}, previous least significant bit = {least_significant_bit}).")

    def opcode_subtract_from_second_register(self, instruction: Instruction) -> None:
        """
        Sets the value of the first provided register to the difference of the value of the second provided register and itself.  The not borrow flag (register 15) is set.
        :param instruction: The instruction to execute.
        """
        first_register = instruction.x
        second_register = instruction.y
        first_register_value = self.registers[first_register]
        second_register_value = self.registers[second_register]
        result, not_borrow = self.bounded_subtract(second_register_value, first_register_value)
        self.registers[first_register] = result
        self.registers[FLAG_REGISTER] = not_borrow
        self.next_instruction()
        logger.debug(f"Execute Opcode {instruction.hex()}: Set the value of register {first_register} to the difference of the value of register {second_register} and itself ({second_register_value} - {first_register_value} = {result}, not borrow = {not_borrow}).")

    def opcode_bit_shift_left(self, instruction: Instruction) -> None:
        """
        Shift the value of the first provided register to the left by 1.  Set register 15 to the value of the most significant bit before the operation.
        :param instruction: The instruction to execute.
        """
        first_register = instruction.x
        first_register_value = self.registers[first_register]
        bit_shift = (first_register_value << 1) & BYTE_MASK
        most_significant_bit = 1 if first_register_value & MOST_SIGNIFICANT_BIT else 0
        self.registers[first_register] = bit_shift
        self.registers[FLAG_REGISTER] = most_significant_bit
        self.next_instruction()
        logger.debug(f"Execute Opcode {instruction.hex()}: Shift the value of register {first_register} to the left by 1 ({first_register_value} << 1 = {bit_shift}, previous most significant bit = {most_significant_bit}).")

    def opcode_if_register_not_equal(self, instruction: Instruction) -> None:
        """
        Skip the next instruction if the value of the first provided register is not equal to the value of the second provided register.
        :param instruction: The instruction to execute.
        """
        first_register = instruction.x
        second_register = instruction.y
        first_register_value = self.registers[first_register]
        second_register_value = self.registers[second_register]
        logger.debug(f"Execute Opcode {instruction.hex()}: Skip next instruction if register {first_register}'s value ({first_register_value}) is not equal to register {second_register}'s value ({second_register_value}).")
        self.skip_next_instruction_if(first_register_value != second_register_value)

    def opcode_set_register_i(self, instruction: Instruction) -> None:
        """
        Sets the value of register I to the provided value.
        :param instruction: The instruction to execute.
        """
        self.register_i = instruction.nnn
        self.next_instruction()
        logger.debug(f"Execute Opcode {instruction.hex()}: Set register I to {hex(instruction.nnn)}.")

    def opcode_goto_addition(self, instruction: Instruction) -> None:
        """
        Jump to the provided address plus the value of register 0.
        :param instruction: The instruction to execute.
        """
        address = instruction.nnn
        register_value = self.registers[0]
        self.program_counter = address + register_value
        logger.debug(f"Execute Opcode {instruction.hex()}: Jump to the provided address plus the value of register 0 ({hex(address)} + {hex(register_value)} = {hex(self.program_counter)}).")

    def opcode_random_bitwise_and(self, instruction: Instruction) -> None:
        """
        Set the value of the provided register to the bitwise and of the provided value and a random number [0, 255].
        :param instruction: The instruction to execute.
        """
        register = instruction.x
        random_value = self.random_source.next_byte()
        result = instruction.nn & random_value
        self.registers[register] = result
        self.next_instruction()
        logger.debug(f"Execute Opcode {instruction.hex()}: Set the value of register {register} to the bitwise and of the provided value and a random number [0, 255] ({instruction.nn} & {random_value} = {result}).")

    def opcode_draw_sprite(self, instruction: Instruction) -> None:
        """
        Draws the sprite with the provided height found at the address denoted by the value of register I to the provided x and y coordinates.
        Pixels past the edge of the screen wrap around to the other side.
        The collision flag (register 15) is set to 1 if a pixel was unset, 0 otherwise.
        :param instruction: The instruction to execute.
        """
        register_x = instruction.x
        register_y = instruction.y
        register_x_value = self.registers[register_x]
        register_y_value = self.registers[register_y]
        height = instruction.n
        self.registers[FLAG_REGISTER] = 0
        for row in range(height):
            byte = self.ram[(self.register_i + row) % MEMORY_SIZE]
            y_coordinate = (register_y_value + row) % SCREEN_HEIGHT
            for column in range(SPRITE_WIDTH):
                pixel = (byte >> (SPRITE_WIDTH - 1 - column)) & 1
                if pixel == 0:
                    continue
                x_coordinate = (register_x_value + column) % SCREEN_WIDTH
                if self.pixels[y_coordinate, x_coordinate] == 1:
                    self.registers[FLAG_REGISTER] = 1
                self.pixels[y_coordinate, x_coordinate] ^= 1
        self.redraw = True
        self.next_instruction()
        logger.debug(f"Execute Opcode {instruction.hex()}: Drawing the sprite with a height of {height} and found at address {hex(self.register_i)} to the screen at the x-coordinate from the value of register {register_x} and y-coordinate from the value of register {register_y} ({register_x_value, register_y_value}), collision = {self.registers[FLAG_REGISTER]}.")

    def opcode_if_key_pressed(self, instruction: Instruction) -> None:
        """
        Skip the next instruction if the key represented by the value of the provided register is pressed.
        :param instruction: The instruction to execute.
        """
        register = instruction.x
        key = self.registers[register]
        pressed = self.keypad.is_pressed(key)
        logger.debug(f"Execute Opcode {instruction.hex()}: Skip next instruction if the key represented by the value of register {register} ({key}) is pressed ({pressed}).")
        self.skip_next_instruction_if(pressed)

    def opcode_if_key_not_pressed(self, instruction: Instruction) -> None:
        """
        Skip the next instruction if the key represented by the value of the provided register is not pressed.
        :param instruction: The instruction to execute.
        """
        register = instruction.x
        key = self.registers[register]
        pressed = self.keypad.is_pressed(key)
        logger.debug(f"Execute Opcode {instruction.hex()}: Skip next instruction if the key represented by the value of register {register} ({key}) is not pressed ({pressed}).")
        self.skip_next_instruction_if(not pressed)

    def opcode_get_delay_timer(self, instruction: Instruction) -> None:
        """
        Sets the value of the provided register to the value of the delay timer.
        :param instruction: The instruction to execute.
        """
        register = instruction.x
        self.registers[register] = self.delay
        self.next_instruction()
        logger.debug(f"Execute Opcode {instruction.hex()}: Set the value of register {register} to the value of the delay timer ({self.registers[register]}).")

    def opcode_wait_for_key_press(self, instruction: Instruction) -> KeyWait:
        """
        Wait for a key press, storing it in the provided register once there is one.
        Until then the program counter is left alone, so the same instruction runs again on the next cycle.
        :param instruction: The instruction to execute.
        :return: KeyWait.RESUMED if a key press was stored, KeyWait.WAITING otherwise.
        """
        register = instruction.x
        if not self.keypad.input_pending:
            if not self.waiting_for_key:
                logger.debug(f"Execute Opcode {instruction.hex()}: Waiting until a keypress is detected and stored in register {register}.")
            self.waiting_for_key = True
            return KeyWait.WAITING

        self.waiting_for_key = False
        self.registers[register] = self.keypad.last_key
        self.next_instruction()
        logger.debug(f"Execute Opcode {instruction.hex()}: Storing the key {self.keypad.last_key} in the register {register}, completing the wait.")
        return KeyWait.RESUMED

    def opcode_set_delay_timer(self, instruction: Instruction) -> None:
        """
        Sets the delay timer to the value of the provided register.
        :param instruction: The instruction to execute.
        """
        register = instruction.x
        register_value = self.registers[register]
        self.delay = register_value
        self.next_instruction()
        logger.debug(f"Execute Opcode {instruction.hex()}: Set the value of the delay timer to value of register {register} ({register_value}).")

    def opcode_set_sound_timer(self, instruction: Instruction) -> None:
        """
        Sets the sound timer to the value of the provided register.
        :param instruction: The instruction to execute.
        """
        register = instruction.x
        register_value = self.registers[register]
        self.sound = register_value
        self.next_instruction()
        logger.debug(f"Execute Opcode {instruction.hex()}: Set the value of the sound timer to value of register {register} ({register_value}).")

    def opcode_register_i_addition(self, instruction: Instruction) -> None:
        """
        Add the value of the provided register to register I, wrapping around the end of memory.  Register 15 is not touched.
        :param instruction: The instruction to execute.
        """
        register = instruction.x
        register_value = self.registers[register]
        register_i_value = self.register_i
        self.register_i = (register_i_value + register_value) & ADDRESS_MASK
        self.next_instruction()
        logger.debug(f"Execute Opcode {instruction.hex()}: Adds the value of register {register} to the value of register I ({register_i_value} + {register_value} = {self.register_i}).")

    def opcode_set_register_i_to_hex_sprite_address(self, instruction: Instruction) -> None:
        """
        Sets the value of register I to the address of the hexadecimal sprite represented by the value in the provided register.
        :param instruction: The instruction to execute.
        """
        register = instruction.x
        register_value = self.registers[register]
        self.register_i = register_value * DIGIT_SPRITE_HEIGHT
        self.next_instruction()
        logger.debug(f"Execute Opcode {instruction.hex()}: Set the value of register I to the address ({self.register_i}) of the hexadecimal sprite represented by the value of register {register} ({register_value}).")

    def opcode_binary_coded_decimal(self, instruction: Instruction) -> None:
        """
        Store the Binary Coded Decimal representation of the value of the provided register in memory, starting at the value of register I.
        Hundreds digit stored in memory at the location of the value of register I.
        Tens digit stored in memory at the location of the value of register I + 1.
        Units digit stored in memory at the location of the value of register I + 2.
        :param instruction: The instruction to execute.
        """
        register = instruction.x
        register_value = self.registers[register]
        hundreds = register_value // 100 % 10
        tens = register_value // 10 % 10
        units = register_value % 10
        for offset, digit in enumerate((hundreds, tens, units)):
            self.ram[(self.register_i + offset) % MEMORY_SIZE] = digit
        self.next_instruction()
        logger.debug(f"Execute Opcode {instruction.hex()}: Store the Binary Coded Decimal representation of the value of register {register} ({register_value}), starting at the value of register I ({hex(self.register_i)}), ({hundreds}, {tens}, {units}).")

    def opcode_register_dump(self, instruction: Instruction) -> None:
        """
        Store the values of all registers from register 0 to the provided register in memory, starting at the value of register I.
        Register I is then moved past the last address written if increment_index_on_transfer is set.
        :param instruction: The instruction to execute.
        """
        last_register = instruction.x
        logger.debug(f"Execute Opcode {instruction.hex()}: Dumping the values of all registers from register 0 to register {last_register} into memory, starting at the value of register I ({hex(self.register_i)}).")
        for register in range(last_register + 1):
            target_address = (self.register_i + register) % MEMORY_SIZE
            register_value = self.registers[register]
            self.ram[target_address] = register_value
            logger.debug(f"Register {register}'s value ({register_value}) stored at address {target_address}.")
        if self.increment_index_on_transfer:
            self.register_i = (self.register_i + last_register + 1) & ADDRESS_MASK
        self.next_instruction()

    def opcode_register_load(self, instruction: Instruction) -> None:
        """
        Load the values of all registers from register 0 to the provided register from memory, starting at the value of register I.
        Register I is then moved past the last address read if increment_index_on_transfer is set.
        :param instruction: The instruction to execute.
        """
        last_register = instruction.x
        logger.debug(f"Execute Opcode {instruction.hex()}: Loading the values of all registers from register 0 to register {last_register} from memory, starting at the value of register I ({hex(self.register_i)}).")
        for register in range(last_register + 1):
            target_address = (self.register_i + register) % MEMORY_SIZE
            self.registers[register] = self.ram[target_address]
            logger.debug(f"Register {register}'s value ({self.registers[register]}) loaded from address {target_address}.")
        if self.increment_index_on_transfer:
            self.register_i = (self.register_i + last_register + 1) & ADDRESS_MASK
        self.next_instruction()
    # endregion
