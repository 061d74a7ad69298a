from game_state_machine.states.state import State


class IdleState(State):
    pass
