from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Sequence, Tuple

from .errors import (
    EmptyReferenceSequence,
    InvalidCacheCapacity,
    InvalidMemorySize,
    InvalidReference,
)
from .policies import POLICIES, create_policy, resolve_policy

MEMORY_SIZES = (32, 64, 128)


@dataclass(frozen=True)
class SimulationRequest:
    """Validated input of one simulation run.

    Checks run in a fixed order (memory size, capacity, references, policy)
    and the first failure is raised.
    """

    cache_capacity: int
    memory_size: int
    policy: str
    references: Tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if self.memory_size not in MEMORY_SIZES:
            raise InvalidMemorySize()
        if not 1 <= self.cache_capacity <= self.memory_size // 4:
            raise InvalidCacheCapacity()
        references = tuple(self.references)
        if any(ref < 0 or ref >= self.memory_size for ref in references):
            raise InvalidReference()
        object.__setattr__(self, 'references', references)
        object.__setattr__(self, 'policy', resolve_policy(self.policy))


@dataclass(frozen=True)
class SimulationResult:
    policy: str
    hits: int
    total: int
    evictions: int = 0

    @property
    def misses(self) -> int:
        return self.total - self.hits

    @property
    def ratio(self) -> float:
        return self.hits / self.total

    def to_dict(self) -> Dict:
        return {
            'policy': self.policy,
            'hits': self.hits,
            'misses': self.misses,
            'total': self.total,
            'evictions': self.evictions,
            'hit_ratio': self.ratio,
        }


def run(request: SimulationRequest, tracker=None) -> SimulationResult:
    """Replay every reference of ``request`` against a fresh cache.

    ``tracker``, if given, gets ``record(block, hit, evicted, resident)``
    once per reference.
    """
    if not request.references:
        raise EmptyReferenceSequence()

    policy = create_policy(request.policy, request.cache_capacity)
    hits = 0

    for block in request.references:
        hit = policy.process(block)
        if hit:
            hits += 1
        if tracker is not None:
            tracker.record(block, hit, policy.last_evicted, policy.state.snapshot())

    return SimulationResult(
        policy=request.policy,
        hits=hits,
        total=len(request.references),
        evictions=policy.evictions,
    )


def compare_policies(
    references: Sequence[int],
    cache_capacity: int,
    memory_size: int,
    policies: Optional[Iterable[str]] = None,
    trackers: Optional[Dict] = None
) -> Dict[str, SimulationResult]:
    names = list(POLICIES) if policies is None else [resolve_policy(p) for p in policies]
    trackers = trackers or {}

    results = {}
    for name in names:
        request = SimulationRequest(
            cache_capacity=cache_capacity,
            memory_size=memory_size,
            policy=name,
            references=tuple(references),
        )
        results[name] = run(request, tracker=trackers.get(name))

    return results
