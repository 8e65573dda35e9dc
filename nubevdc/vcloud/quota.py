"""Cálculo de capacidade disponível (CPU, memória, storage)."""
from dataclasses import dataclass

# Sem limite configurado na plataforma. Não é erro nem capacidade negativa.
UNLIMITED = -1


def available_capacity(limit: int, used: int) -> int:
    """limit > 0 ? limit - used : -1. Sem clamp: over-commit dá valor negativo."""
    if limit > 0:
        return limit - used
    return UNLIMITED


def available_cores(limit: int, used: int) -> int:
    return available_capacity(limit, used)


def available_memory_mb(limit: int, used: int) -> int:
    return available_capacity(limit, used)


@dataclass
class CPU:
    limit: int
    used: int

    @property
    def available_cores(self) -> int:
        return available_cores(self.limit, self.used)

    @property
    def is_unlimited(self) -> bool:
        return self.limit <= 0


@dataclass
class Memory:
    limit: int
    used: int

    @property
    def available_mb(self) -> int:
        return available_memory_mb(self.limit, self.used)

    @property
    def is_unlimited(self) -> bool:
        return self.limit <= 0


@dataclass
class Resources:
    cpu: CPU
    memory: Memory

    def to_dict(self):
        return {
            'cpu': {
                'limit': self.cpu.limit,
                'used': self.cpu.used,
                'available_cores': self.cpu.available_cores,
                'unlimited': self.cpu.is_unlimited,
            },
            'memory': {
                'limit_mb': self.memory.limit,
                'used_mb': self.memory.used,
                'available_mb': self.memory.available_mb,
                'unlimited': self.memory.is_unlimited,
            },
        }
