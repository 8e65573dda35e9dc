import logging

from .quota import CPU, Memory, Resources
from .resources import (
    DiskManager,
    EdgeGatewayManager,
    NetworkManager,
    StorageProfileManager,
    VAppManager,
)


# A ordem de herança não importa entre os mixins: todos dependem apenas de
# self._session, self.connection e self._snapshot(), fornecidos aqui.
class VDC(StorageProfileManager,
          VAppManager,
          NetworkManager,
          DiskManager,
          EdgeGatewayManager):
    """
    Virtual Data Center (Facade).

    Cada operação pública relê o documento do VDC uma única vez e trabalha
    sobre esse snapshot. A sessão é emprestada por quem chamou: o VDC nunca
    a cria nem a fecha.
    """

    def __init__(self, session, link, name=None, delete_workers=1):
        self._session = session
        self._link = link
        self._name = name
        self.delete_workers = delete_workers
        self.logger = logging.getLogger(__name__)

    @property
    def connection(self):
        return self._session.connection

    @property
    def href(self):
        return self._link

    @property
    def name(self):
        if self._name is None:
            self._name = self._snapshot().name
        return self._name

    @name.setter
    def name(self, value):
        # Apenas para exibição; a identidade do VDC é o link
        self._name = value

    def _snapshot(self):
        return self.connection.get(self._link)

    @staticmethod
    def _resources_of(snapshot):
        return Resources(
            cpu=CPU(*snapshot.cpu_capacity),
            memory=Memory(*snapshot.memory_capacity),
        )

    @property
    def resources(self):
        return self._resources_of(self._snapshot())

    def to_dict(self):
        # Nome e capacidade saem do mesmo snapshot
        snapshot = self._snapshot()
        if self._name is None:
            self._name = snapshot.name
        return {
            'name': self._name,
            'href': self.href,
            'resources': self._resources_of(snapshot).to_dict(),
        }

    def __repr__(self):
        return f"<VDC name={self._name!r} href={self._link!r}>"
