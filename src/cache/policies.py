from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from .errors import InvalidPolicySelector
from .state import CacheState


class ReplacementPolicy(ABC):
    """Decides hit or miss for each reference and which block to evict.

    Subclasses only say what a hit does to the ordering; admission always
    goes to the newest position and eviction always takes the oldest.
    """

    name = ''

    def __init__(self, state: CacheState):
        self.state = state
        self.evictions = 0
        self.last_evicted: Optional[int] = None

    def process(self, block: int) -> bool:
        self.last_evicted = None

        if block in self.state:
            self.on_hit(block)
            return True

        if self.state.is_full():
            self.last_evicted = self.state.evict_oldest()
            self.evictions += 1
        self.state.admit(block)
        return False

    @abstractmethod
    def on_hit(self, block: int):
        pass


class FifoPolicy(ReplacementPolicy):
    name = 'FIFO'

    def on_hit(self, block: int):
        # admission order is all that counts
        pass


class LruPolicy(ReplacementPolicy):
    name = 'LRU'

    def on_hit(self, block: int):
        self.state.promote(block)


POLICIES: Dict[str, Type[ReplacementPolicy]] = {
    FifoPolicy.name: FifoPolicy,
    LruPolicy.name: LruPolicy,
}


def resolve_policy(selector: str) -> str:
    """Map a policy name or its first letter (any case) to a registry key."""
    key = str(selector).upper()
    if key in POLICIES:
        return key
    if len(key) == 1:
        for name in POLICIES:
            if name[0] == key:
                return name
    raise InvalidPolicySelector()


def create_policy(name: str, capacity: int) -> ReplacementPolicy:
    return POLICIES[resolve_policy(name)](CacheState(capacity))
