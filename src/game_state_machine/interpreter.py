import logging
import sys
import traceback
from dataclasses import dataclass, field
from typing import Optional

EXIT_COMMAND = "exit"
DEFAULT_PROMPT = "> "
BANNER = (
    "CLI Simulation Harness Started.",
    "Type 'exit' to quit.",
)

logger = logging.getLogger(__name__)


@dataclass
class Command:
    verb: str
    args: tuple = field(default_factory=tuple)


def parse_command(line: str) -> Optional[Command]:
    """Split a line on whitespace. Returns None for blank lines."""
    tokens = line.split()
    if not tokens:
        return None
    return Command(tokens[0], tuple(tokens[1:]))


def _update(machine, args):
    if args[0] != "--package":
        return False
    machine.update_package(args[1])
    return True


# verb -> (minimum number of arguments, handler)
COMMANDS = {
    "start_game": (0, lambda machine, args: machine.start_game()),
    "stop_game": (0, lambda machine, args: machine.stop_game()),
    "signal": (1, lambda machine, args: machine.signal(args[0])),
    "update": (2, _update),
    "device": (3, lambda machine, args: machine.device_command(args[0], args[1], args[2])),
    "os": (2, lambda machine, args: machine.os_command(args[0], args[1])),
    "status": (0, lambda machine, args: machine.print_status()),
}


class CommandInterpreter:
    def __init__(self, machine, event_logger, stdin=None, stdout=None, prompt=DEFAULT_PROMPT):
        self.machine = machine
        self.event_logger = event_logger
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.prompt = prompt

    def print_banner(self):
        for line in BANNER:
            self.stdout.write(f"{line}\n")
        self.stdout.flush()

    def read_line(self) -> Optional[str]:
        self.stdout.write(self.prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")

    def dispatch(self, command: Command):
        if command.verb not in COMMANDS:
            self.event_logger.log("Unknown command.")
            return

        arity, handler = COMMANDS[command.verb]
        if len(command.args) < arity:
            logger.debug(f"Dropped '{command.verb}': expected {arity} argument(s), got {len(command.args)}")
            return

        if handler(self.machine, command.args) is False:
            logger.debug(f"Dropped '{command.verb}': malformed arguments {command.args}")

    def execute(self, line: str) -> bool:
        """Run one input line. Returns False when the loop should stop."""
        if line == EXIT_COMMAND:
            return False

        command = parse_command(line)
        if command is None:
            return True

        try:
            self.dispatch(command)
        except Exception as e:
            self.event_logger.log(f"ERROR: {e}")
            logger.debug(traceback.format_exc())
        return True

    def run(self):
        self.print_banner()
        while True:
            line = self.read_line()
            if line is None:
                logger.info("End of input.")
                break
            if not self.execute(line):
                break
        self.event_logger.log("System shutting down.")
