from typing import List, Sequence

from .errors import InsufficientArguments, InvalidArgument
from .simulator import SimulationRequest


def _parse_int(value: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidArgument() from None


def load_request(argv: Sequence[str]) -> SimulationRequest:
    """Build a request from ``capacity memory policy ref [ref ...]``.

    Only the first character of the policy argument is looked at, so
    ``F``, ``fifo`` and ``Fast`` all select FIFO.
    """
    if len(argv) < 4:
        raise InsufficientArguments()

    cache_capacity = _parse_int(argv[0])
    memory_size = _parse_int(argv[1])
    selector = str(argv[2])[:1]
    references: List[int] = [_parse_int(arg) for arg in argv[3:]]

    return SimulationRequest(
        cache_capacity=cache_capacity,
        memory_size=memory_size,
        policy=selector,
        references=tuple(references),
    )
