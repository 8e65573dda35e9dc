class Resource:
    """
    Handle de um recurso filho do VDC.
    Guarda apenas a sessão partilhada e o descritor que o originou;
    não tem referência de volta ao VDC.
    """

    def __init__(self, session, descriptor):
        self._session = session
        self._descriptor = descriptor

    @property
    def connection(self):
        return self._session.connection

    @property
    def name(self):
        return self._descriptor.name

    @property
    def href(self):
        return self._descriptor.href

    @property
    def document(self):
        """Documento atual do recurso (sempre relido da API)."""
        return self.connection.get(self.href)

    def to_dict(self):
        return {'name': self.name, 'href': self.href}

    def __repr__(self):
        return f"<{self.__class__.__name__} name={self.name!r} href={self.href!r}>"
