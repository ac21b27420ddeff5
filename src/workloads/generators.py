import numpy as np
from typing import List, Iterator, Optional

from cache.errors import EmptyReferenceSequence, InvalidReference

WORKLOAD_TYPES = ('zipf', 'uniform', 'scan', 'loop')


class ZipfWorkload:
    def __init__(self, memory_size: int, alpha: float = 1.5, seed: Optional[int] = None):
        self.memory_size = memory_size
        self.alpha = alpha
        self.rng = np.random.RandomState(seed)

    def generate(self, num_requests: int) -> List[int]:
        return (self.rng.zipf(self.alpha, num_requests) % self.memory_size).tolist()

    def __iter__(self) -> Iterator[int]:
        while True:
            yield int(self.rng.zipf(self.alpha) % self.memory_size)


class UniformWorkload:
    def __init__(self, memory_size: int, seed: Optional[int] = None):
        self.memory_size = memory_size
        self.rng = np.random.RandomState(seed)

    def generate(self, num_requests: int) -> List[int]:
        return self.rng.randint(0, self.memory_size, num_requests).tolist()

    def __iter__(self) -> Iterator[int]:
        while True:
            yield int(self.rng.randint(0, self.memory_size))


class LoopWorkload:
    """Cyclic scan over ``loop_size`` consecutive blocks.

    With ``loop_size`` one larger than the cache, both FIFO and LRU miss on
    every reference.
    """

    def __init__(self, memory_size: int, loop_size: int, start: int = 0):
        self.memory_size = memory_size
        self.loop_size = min(loop_size, memory_size)
        self.start = start
        self.request_count = 0

    def generate(self, num_requests: int) -> List[int]:
        requests = []
        for _ in range(num_requests):
            item = (self.start + self.request_count % self.loop_size) % self.memory_size
            requests.append(item)
            self.request_count += 1
        return requests

    def reset(self):
        self.request_count = 0


class TraceWorkload:
    def __init__(self, trace_file: str, memory_size: int):
        self.trace_file = trace_file
        self.memory_size = memory_size
        self.trace_data = self._load_trace()
        self.index = 0

    def _load_trace(self) -> List[int]:
        with open(self.trace_file, 'r') as f:
            refs = [int(token) for token in f.read().split()]
        if not refs:
            raise EmptyReferenceSequence()
        if any(ref < 0 or ref >= self.memory_size for ref in refs):
            raise InvalidReference()
        return refs

    def generate(self, num_requests: int) -> List[int]:
        requests = []
        for _ in range(num_requests):
            requests.append(self.trace_data[self.index % len(self.trace_data)])
            self.index += 1
        return requests

    def reset(self):
        self.index = 0

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.trace_data[self.index % len(self.trace_data)]
            self.index += 1


def create_workload(workload_type: str, memory_size: int, cache_size: int, seed: int = 42):
    workloads = {
        'zipf': lambda: ZipfWorkload(memory_size=memory_size, alpha=1.5, seed=seed),
        'uniform': lambda: UniformWorkload(memory_size=memory_size, seed=seed),
        'scan': lambda: LoopWorkload(memory_size=memory_size, loop_size=cache_size + 1),
        'loop': lambda: LoopWorkload(memory_size=memory_size, loop_size=cache_size * 2),
    }

    if workload_type not in workloads:
        raise ValueError(f"Unknown workload type: {workload_type}")

    return workloads[workload_type]()
