# -*- coding: utf-8 -*-
"""Operations under test: hash digests and a fault-injecting no-op."""

import hashlib
import numpy as np
from collections import OrderedDict
from typing import Callable, Dict, Optional

from hashbench.errors import OperationFailure


# Shared by every FaultyOperation that is not given its own generator.
# Never reseeded, so failure counts vary from one run to the next.
_PROCESS_RNG = np.random.default_rng()


class Operation:
    """Base class for a named unit of work: compute(bytes) -> bytes, may fail."""

    name: str = ''

    def compute(self, data: bytes) -> bytes:
        raise NotImplementedError

    def __call__(self, data: bytes) -> bytes:
        return self.compute(data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class HashOperation(Operation):
    """Digest computation backed by a hashlib constructor."""

    def __init__(self, name: str, constructor: Callable, digest_size: int):
        self.name = name
        self._constructor = constructor
        self.digest_size = digest_size

    def compute(self, data: bytes) -> bytes:
        return self._constructor(data).digest()


class FaultyOperation(Operation):
    """Ignores its input and fails on roughly half of invocations."""

    name = 'FaultyOp'
    SUCCESS_VALUE = b'\x01'

    def __init__(self, rng: Optional[np.random.Generator] = None,
                 failure_probability: float = 0.5):
        if not (0 <= failure_probability <= 1):
            raise ValueError(f"Failure probability must be in [0,1], got {failure_probability}")
        self.rng = rng if rng is not None else _PROCESS_RNG
        self.failure_probability = failure_probability

    def compute(self, data: bytes) -> bytes:
        if self.rng.random() < self.failure_probability:
            raise OperationFailure("boom")
        return self.SUCCESS_VALUE


def sha256_operation() -> HashOperation:
    return HashOperation('SHA-256', hashlib.sha256, 32)


def md5_operation() -> HashOperation:
    # FIPS builds
    return HashOperation('MD5', lambda data: hashlib.md5(data, usedforsecurity=False), 16)


def build_default_registry(fault_rng: Optional[np.random.Generator] = None) -> Dict[str, Operation]:
    """Build the ordered operation registry used by the harness.

    Registry order defines execution order, so results are comparable
    across runs regardless of how the caller lists operations.
    """
    registry = OrderedDict()
    for operation in (sha256_operation(), md5_operation(), FaultyOperation(rng=fault_rng)):
        registry[operation.name] = operation
    return registry
