from .state import CacheState
from .policies import ReplacementPolicy, FifoPolicy, LruPolicy, POLICIES, create_policy, resolve_policy
from .simulator import SimulationRequest, SimulationResult, run, compare_policies, MEMORY_SIZES
from .loader import load_request
from .errors import (
    SimulationError,
    InsufficientArguments,
    InvalidArgument,
    InvalidMemorySize,
    InvalidCacheCapacity,
    InvalidReference,
    InvalidPolicySelector,
    EmptyReferenceSequence,
)

__all__ = [
    'CacheState', 'ReplacementPolicy', 'FifoPolicy', 'LruPolicy', 'POLICIES',
    'create_policy', 'resolve_policy', 'SimulationRequest', 'SimulationResult',
    'run', 'compare_policies', 'MEMORY_SIZES', 'load_request',
    'SimulationError', 'InsufficientArguments', 'InvalidArgument',
    'InvalidMemorySize', 'InvalidCacheCapacity', 'InvalidReference',
    'InvalidPolicySelector', 'EmptyReferenceSequence',
]
