from ..resolver import exists_by_name, resolve_by_name
from .base import Resource


class Network(Resource):
    """Rede da organização disponível no VDC."""
    pass


class NetworkManager:
    """Mixin para as redes disponíveis (AvailableNetworks)."""

    def _network_refs(self):
        return self._snapshot().network_refs

    def networks(self):
        return [Network(self._session, ref) for ref in self._network_refs()]

    def list_networks(self):
        return [ref.name for ref in self._network_refs()]

    def find_network_by_name(self, name):
        return Network(self._session, resolve_by_name(self._network_refs(), name, 'Network'))

    def network_exists(self, name):
        return exists_by_name(self._network_refs(), name)
