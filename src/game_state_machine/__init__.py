from game_state_machine.event_logger import EventLogger
from game_state_machine.state_machine import MachineState, StateMachine
from game_state_machine.interpreter import Command, CommandInterpreter, parse_command

__all__ = [
    "Command",
    "CommandInterpreter",
    "EventLogger",
    "MachineState",
    "StateMachine",
    "parse_command",
]
