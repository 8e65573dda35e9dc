from ..resolver import exists_by_name, resolve_by_name
from .base import Resource


class EdgeGateway(Resource):
    """Edge gateway (NAT/firewall/roteamento) do VDC."""
    pass


class EdgeGatewayManager:
    """Mixin para edge gateways. A lista vem do link de query 'edgeGateways'."""

    def _edge_gateway_refs(self):
        link = self._snapshot().edge_gateways_link
        # Versões antigas da API não expõem o link
        if link is None:
            return []
        return self.connection.get(link.href).edge_gateway_refs

    def edge_gateways(self):
        return [EdgeGateway(self._session, ref) for ref in self._edge_gateway_refs()]

    def list_edge_gateways(self):
        return [ref.name for ref in self._edge_gateway_refs()]

    def find_edge_gateway_by_name(self, name):
        ref = resolve_by_name(self._edge_gateway_refs(), name, 'Edge gateway')
        return EdgeGateway(self._session, ref)

    def edge_gateway_exists(self, name):
        return exists_by_name(self._edge_gateway_refs(), name)
