from ..resolver import exists_by_name, resolve_by_name
from .base import Resource


class VM(Resource):
    """VM dentro de um vApp. Usada como dica de localidade para discos."""
    pass


class VApp(Resource):

    @property
    def status(self):
        return self.document.status

    @property
    def vms(self):
        return [VM(self._session, ref) for ref in self.document.vm_refs]


class VAppManager:
    """Mixin para vApps do VDC."""

    def _vapp_refs(self):
        return self._snapshot().vapp_refs

    def vapps(self):
        return [VApp(self._session, ref) for ref in self._vapp_refs()]

    def list_vapps(self):
        return [ref.name for ref in self._vapp_refs()]

    def find_vapp_by_name(self, name):
        return VApp(self._session, resolve_by_name(self._vapp_refs(), name, 'VApp'))

    def vapp_exists(self, name):
        return exists_by_name(self._vapp_refs(), name)
