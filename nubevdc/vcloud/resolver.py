"""
Resolução de recursos filhos por nome.

Trabalha sempre sobre uma coleção já lida (snapshot). "exists" nunca falha;
"resolve" transforma a ausência em ObjectNotFoundError.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .documents import ResourceDescriptor
from .errors import ObjectNotFoundError

logger = logging.getLogger(__name__)


class MatchKind(Enum):
    EMPTY = 'empty'
    UNIQUE = 'unique'
    MULTIPLE = 'multiple'


@dataclass
class NameMatch:
    """Resultado tagueado de uma busca por nome."""
    name: str
    items: List[ResourceDescriptor] = field(default_factory=list)

    @property
    def kind(self) -> MatchKind:
        if not self.items:
            return MatchKind.EMPTY
        if len(self.items) == 1:
            return MatchKind.UNIQUE
        return MatchKind.MULTIPLE

    @property
    def first(self):
        return self.items[0] if self.items else None

    @property
    def count(self):
        return len(self.items)


def match_by_name(collection, name) -> NameMatch:
    # Comparação exata, sensível a maiúsculas
    return NameMatch(name, [item for item in collection if item.name == name])


def resolve_all_by_name(collection, name) -> List[ResourceDescriptor]:
    return match_by_name(collection, name).items


def exists_by_name(collection, name) -> bool:
    return bool(resolve_all_by_name(collection, name))


def resolve_by_name(collection, name, kind='Object') -> ResourceDescriptor:
    """
    Retorna o descritor cujo nome é `name`.
    Se houver mais de um, devolve o primeiro e regista um aviso.
    """
    match = match_by_name(collection, name)
    if match.kind is MatchKind.EMPTY:
        raise ObjectNotFoundError(f"{kind} '{name}' is not found", kind=kind, name=name)
    if match.kind is MatchKind.MULTIPLE:
        logger.warning(f"{match.count} recursos do tipo {kind} com o nome '{name}'; usando o primeiro.")
    return match.first
