import sys

from game_state_machine.app import main

if __name__ == "__main__":
    sys.exit(main())
