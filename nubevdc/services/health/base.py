from abc import ABC, abstractmethod
import logging
import time

logger = logging.getLogger(__name__)


class HealthCheckProvider(ABC):
    """
    Interface base para os verificadores de saúde (vCloud e futuros backends).
    """

    @property
    @abstractmethod
    def name(self):
        """Nome legível do serviço (ex: 'vCloud VDC')"""
        pass

    @property
    @abstractmethod
    def category(self):
        """Categoria: 'compute', 'storage', 'network'"""
        pass

    @abstractmethod
    def check(self):
        """
        Retorna um dicionário com 'status' e metadados opcionais,
        ou lança uma exceção em caso de erro.
        """
        pass

    def run(self):
        """Mede o tempo de resposta e converte exceções em status 'unhealthy'."""
        start = time.time()
        try:
            result = self.check()
            result.setdefault('status', 'healthy')
        except Exception as e:
            logger.error(f"Health check '{self.name}' falhou: {e}")
            result = {
                'status': 'unhealthy',
                'error': str(e)
            }

        result['latency_ms'] = round((time.time() - start) * 1000, 2)
        return result
