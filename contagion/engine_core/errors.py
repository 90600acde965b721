"""Engine exceptions."""


class EngineConsistencyError(Exception):
    """
    Raised when the engine finds its own state corrupted.

    This is never a player-facing rejection: the session should be aborted.
    """

    def __init__(self, message: str, state=None):
        self.state = state
        super().__init__(message)
