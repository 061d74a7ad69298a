from game_state_machine.states.state import State


# Reserved. No transition enters or leaves ERROR.
class ErrorState(State):
    pass
