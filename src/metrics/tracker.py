import numpy as np
from typing import Dict, List, Optional
import json


class TraceTracker:
    def __init__(self, policy: str = ''):
        self.policy = policy
        self.blocks: List[int] = []
        self.hits: List[bool] = []
        self.evictions: List[Optional[int]] = []
        self.occupancy: List[int] = []
        self.resident: List[List[int]] = []

    def record(self, block: int, hit: bool, evicted: Optional[int], resident: List[int]):
        self.blocks.append(int(block))
        self.hits.append(bool(hit))
        self.evictions.append(None if evicted is None else int(evicted))
        self.occupancy.append(len(resident))
        self.resident.append([int(b) for b in resident])

    def cumulative_hits(self) -> np.ndarray:
        return np.cumsum(np.array(self.hits, dtype=int))

    def cumulative_hit_ratio(self) -> np.ndarray:
        if not self.hits:
            return np.array([], dtype=float)
        return self.cumulative_hits() / np.arange(1, len(self.hits) + 1)

    def get_stats(self) -> Dict:
        total = len(self.hits)
        hits = int(sum(self.hits))
        return {
            'policy': self.policy,
            'total': total,
            'hits': hits,
            'misses': total - hits,
            'evictions': sum(1 for e in self.evictions if e is not None),
            'hit_ratio': hits / total if total > 0 else 0.0,
            'max_occupancy': max(self.occupancy) if self.occupancy else 0,
        }

    def save(self, filepath: str):
        data = {
            'policy': self.policy,
            'blocks': self.blocks,
            'hits': self.hits,
            'evictions': self.evictions,
            'occupancy': self.occupancy,
            'resident': self.resident
        }
        with open(filepath, 'w') as f:
            json.dump(data, f)

    def load(self, filepath: str):
        with open(filepath, 'r') as f:
            data = json.load(f)
        self.policy = data['policy']
        self.blocks = data['blocks']
        self.hits = data['hits']
        self.evictions = data['evictions']
        self.occupancy = data['occupancy']
        self.resident = data['resident']
