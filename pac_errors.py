class PacError(Exception):
    pass


class InvalidDirectionError(PacError, ValueError):
    pass


class PolicyContractError(PacError, RuntimeError):
    pass


class ConfigError(PacError, ValueError):
    pass


class MazeError(PacError, ValueError):
    pass


class ReentrantTickError(PacError, RuntimeError):
    pass
