import argparse
import logging
import sys

from game_state_machine.config import check_update_duration, load_config
from game_state_machine.event_logger import EventLogger
from game_state_machine.interpreter import CommandInterpreter
from game_state_machine.state_machine import StateMachine

logger = logging.getLogger('game_state_machine')


def setup_logging(level=logging.WARNING, stream=None):
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    logger.setLevel(level)
    return logger


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Game machine state simulator')
    parser.add_argument('--config', type=str, default=None, help='Path to a JSON config file')
    parser.add_argument('--update-duration', type=float, default=None,
                        help='Seconds a simulated package update blocks')
    parser.add_argument('-v', '--verbose', action='store_true', help='Write debug diagnostics to stderr')
    return parser.parse_args(argv)


def main(argv=None, stdin=None, stdout=None):
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        settings = load_config(args.config)
        update_duration = settings.update_duration
        if args.update_duration is not None:
            update_duration = check_update_duration(args.update_duration)
    except (OSError, ValueError) as e:
        logger.error(f"Unable to load configuration: {str(e)}")
        return 1

    if not args.verbose:
        logger.setLevel(settings.log_level)

    event_logger = EventLogger(stream=stdout)
    machine = StateMachine(event_logger, update_duration=update_duration)
    interpreter = CommandInterpreter(machine, event_logger, stdin=stdin, stdout=stdout, prompt=settings.prompt)

    try:
        interpreter.run()
    except KeyboardInterrupt:
        interpreter.stdout.write('\n')
        event_logger.log("System shutting down.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
