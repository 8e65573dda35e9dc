from flask import current_app, has_app_context
import logging
import time

from .connection import Connection
from .errors import TaskFailedError
from .vdc import VDC


class VCloudClient:
    """
    Cliente Base do vCloud Director (a "sessão" partilhada pelos VDCs).
    Responsável pela Conexão, pela espera de tarefas e por abrir VDCs.
    """

    def __init__(self):
        # Inicializa vazio para suportar o padrão de Factory do Flask
        self.config = None
        self._connection = None
        self.logger = logging.getLogger(__name__)

    def init_app(self, app):
        """
        Carrega as configurações do Flask.
        Chamado em nubevdc/__init__.py.
        """
        self.config = app.config

        for key in ('VCD_HOST', 'VCD_VDC_LINK'):
            if not self.config.get(key):
                self.logger.warning(f"{key} não definido na configuração.")

    def _setting(self, key, default=None):
        if not self.config:
            return default
        return self.config.get(key, default)

    @property
    def connection(self):
        """
        Retorna a conexão ativa com o vCloud (Singleton).
        """
        if self._connection:
            return self._connection

        if not self.config and has_app_context():
            self.config = current_app.config

        if not self.config:
            raise RuntimeError("VCloudClient não inicializado. Chame init_app(app) primeiro.")

        host = self.config.get('VCD_HOST')
        token = self.config.get('VCD_API_TOKEN')

        ssl_val = self.config.get('VCD_VERIFY_SSL', False)
        verify_ssl = str(ssl_val).lower() == 'true'

        try:
            connection = Connection(
                host,
                user=self.config.get('VCD_USER'),
                org=self.config.get('VCD_ORG'),
                password=self.config.get('VCD_PASSWORD'),
                token=token,
                api_version=self.config.get('VCD_API_VERSION', '5.1'),
                verify_ssl=verify_ssl,
                timeout=self.config.get('VCD_REQUEST_TIMEOUT', 30)
            )
            # Com token a sessão já está aberta
            if not connection.is_authenticated:
                connection.login()

            self._connection = connection
            self.logger.info(f"Conexão com vCloud ({host}) estabelecida com sucesso.")
            return self._connection

        except Exception as e:
            self.logger.error(f"Falha ao conectar no vCloud ({host}): {str(e)}")
            raise

    def wait_for_task(self, task, timeout=None):
        """
        Bloqueia a execução até a tarefa do vCloud terminar.
        Erros de rede durante o polling sobem para quem chamou.
        """
        if task is None:
            return None
        if task.is_success:
            return task
        if task.is_failure:
            raise TaskFailedError(f"Task {task.operation} failed: {task.error_message}", status=task.status)

        timeout = timeout or self._setting('VCD_TASK_TIMEOUT', 300)
        poll_interval = self._setting('VCD_TASK_POLL_INTERVAL', 2)
        start_time = time.time()

        while (time.time() - start_time) < timeout:
            current = self.connection.get(task.href)
            if current.is_success:
                return current
            if current.is_failure:
                raise TaskFailedError(
                    f"Task {current.operation} failed: {current.error_message}",
                    status=current.status
                )
            time.sleep(poll_interval)

        raise TimeoutError(f"Timeout ({timeout}s) waiting for task {task.href}.")

    def get_vdc(self, link=None):
        """Abre o VDC pelo link informado ou pelo VCD_VDC_LINK da configuração."""
        link = link or self._setting('VCD_VDC_LINK')
        if not link:
            raise RuntimeError("Nenhum VDC configurado. Defina VCD_VDC_LINK.")
        return VDC(self, link, delete_workers=int(self._setting('VCD_DELETE_WORKERS', 1)))
