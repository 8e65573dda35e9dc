"""
Exceções do cliente vCloud.

Erros de transporte (requests.HTTPError, ConnectionError) NÃO são
convertidos: sobem intactos para quem chamou.
"""


class CloudError(Exception):
    """Base para os erros levantados pela camada de VDC."""
    pass


class ObjectNotFoundError(CloudError):
    """Recurso nomeado não existe no snapshot atual do VDC."""

    def __init__(self, message, kind=None, name=None):
        super().__init__(message)
        self.kind = kind
        self.name = name


class InvalidArgumentError(CloudError, ValueError):
    """Parâmetro inválido, detectado antes de qualquer chamada de rede."""
    pass


class ConflictError(CloudError):
    """Operação válida, mas o estado atual do recurso impede a execução."""

    def __init__(self, message, links=None):
        super().__init__(message)
        self.links = list(links or [])


class BatchFailureError(CloudError):
    """Falha agregada de uma operação em lote (best-effort)."""

    def __init__(self, message, failures=None):
        super().__init__(message)
        # Lista de (href, exceção) de cada item que falhou
        self.failures = list(failures or [])


class TaskFailedError(CloudError):
    """Levantada quando uma tarefa do vCloud termina em erro."""

    def __init__(self, message, status=None):
        super().__init__(message)
        self.status = status
