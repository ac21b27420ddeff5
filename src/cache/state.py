from typing import Iterator, List
from collections import OrderedDict


class CacheState:
    """Resident blocks of one simulation run, oldest first.

    What "oldest" means is up to the policy that owns the state: admission
    order for FIFO, recency for LRU.
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"Cache capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.blocks: OrderedDict = OrderedDict()

    def is_full(self) -> bool:
        return len(self.blocks) >= self.capacity

    def admit(self, block: int):
        if block in self.blocks:
            raise KeyError(f"Block {block} is already resident")
        if self.is_full():
            raise OverflowError(f"Cache is full ({self.capacity} blocks)")
        self.blocks[block] = True

    def promote(self, block: int):
        self.blocks.move_to_end(block)

    def evict_oldest(self) -> int:
        block, _ = self.blocks.popitem(last=False)
        return block

    def snapshot(self) -> List[int]:
        # newest first
        return list(reversed(self.blocks))

    def __len__(self) -> int:
        return len(self.blocks)

    def __contains__(self, block: int) -> bool:
        return block in self.blocks

    def __iter__(self) -> Iterator[int]:
        return iter(self.blocks)
