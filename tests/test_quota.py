# tests/test_quota.py
import pytest
from nubevdc.vcloud.quota import (
    CPU,
    UNLIMITED,
    Memory,
    Resources,
    available_capacity,
    available_cores,
    available_memory_mb,
)


@pytest.mark.parametrize('limit, used, expected', [
    (8, 4, 4),
    (8, 0, 8),
    (8, 8, 0),
    (8, 10, -2),  # over-commit: valor negativo, sem clamp
])
def test_available_is_limit_minus_used(limit, used, expected):
    assert available_capacity(limit, used) == expected
    assert available_cores(limit, used) == expected
    assert available_memory_mb(limit, used) == expected


@pytest.mark.parametrize('limit, used', [(0, 0), (0, 4), (-5, 3)])
def test_no_limit_returns_sentinel(limit, used):
    assert available_cores(limit, used) == UNLIMITED == -1
    assert available_memory_mb(limit, used) == -1


def test_unlimited_flag_keeps_sentinel():
    cpu = CPU(limit=0, used=3)
    assert cpu.is_unlimited
    assert cpu.available_cores == -1

    memory = Memory(limit=8192, used=4096)
    assert not memory.is_unlimited
    assert memory.available_mb == 4096


def test_resources_to_dict():
    data = Resources(CPU(8, 4), Memory(0, 100)).to_dict()

    assert data['cpu']['available_cores'] == 4
    assert data['memory']['available_mb'] == -1
    assert data['memory']['unlimited'] is True
