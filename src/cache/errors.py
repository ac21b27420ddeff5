class SimulationError(ValueError):
    message = "Error - Invalid simulation input."

    def __init__(self, message=None):
        super().__init__(message or self.message)


class InsufficientArguments(SimulationError):
    message = "Error - Insufficient number of arguments."


class InvalidArgument(SimulationError):
    message = "Error - Arguments should be integers."


class InvalidMemorySize(SimulationError):
    message = "Error - Main memory size should be 32/64/128."


class InvalidCacheCapacity(SimulationError):
    message = "Error - Cache size should neither exceed 1/4th of main memory size nor be less than 1."


class InvalidReference(SimulationError):
    message = "Error - Main memory block references should be non-negative and less than main memory size."


class InvalidPolicySelector(SimulationError):
    message = "Error - Type of cache replacement algorithm should be F (for FIFO) or L (for LRU)."


class EmptyReferenceSequence(SimulationError):
    message = "Error - Main memory block reference sequence should not be empty."
