import hashlib

import numpy as np
import pytest

from hashbench.benchmark.measurement import generate_input_buffer
from hashbench.benchmark.operations import (
    FaultyOperation,
    build_default_registry,
    md5_operation,
    sha256_operation,
)
from hashbench.errors import OperationFailure


@pytest.mark.parametrize("size", [0, 1, 10, 100, 1_000, 10_000])
def test_digest_sizes(size):
    data = generate_input_buffer(size, 42)
    assert len(sha256_operation()(data)) == 32
    assert len(md5_operation()(data)) == 16


def test_digests_match_hashlib():
    data = generate_input_buffer(100, 42)
    assert sha256_operation().compute(data) == hashlib.sha256(data).digest()
    assert md5_operation().compute(data) == hashlib.md5(data).digest()


def test_hash_operations_are_deterministic():
    data = generate_input_buffer(64, 7)
    op = sha256_operation()
    assert op(data) == op(data)


def test_registry_order_and_names():
    registry = build_default_registry()
    assert list(registry) == ["SHA-256", "MD5", "FaultyOp"]
    assert all(name == op.name for name, op in registry.items())


def test_faulty_op_fails_about_half_the_time():
    op = FaultyOperation(rng=np.random.default_rng(99))
    failures = 0
    for _ in range(2000):
        try:
            assert op.compute(b"ignored") == FaultyOperation.SUCCESS_VALUE
        except OperationFailure as exc:
            assert str(exc) == "boom"
            failures += 1
    assert 800 < failures < 1200


def test_faulty_op_probability_bounds():
    always = FaultyOperation(rng=np.random.default_rng(0), failure_probability=1.0)
    never = FaultyOperation(rng=np.random.default_rng(0), failure_probability=0.0)
    with pytest.raises(OperationFailure):
        always(b"")
    assert never(b"") == FaultyOperation.SUCCESS_VALUE
    with pytest.raises(ValueError):
        FaultyOperation(failure_probability=1.5)


def test_faulty_ops_share_process_source_by_default():
    assert FaultyOperation().rng is FaultyOperation().rng
