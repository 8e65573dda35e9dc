from flask import Blueprint

# 1. Base: Conexão, sessão e tarefas
from .client import VCloudClient
from .errors import (
    BatchFailureError,
    CloudError,
    ConflictError,
    InvalidArgumentError,
    ObjectNotFoundError,
    TaskFailedError,
)

# 2. Facade do VDC (compõe os mixins de nubevdc/vcloud/resources/)
from .vdc import VDC

# 3. Blueprint das rotas REST do VDC
bp = Blueprint('vcloud', __name__)

# 4. Instância Global (Singleton), configurada por init_app em nubevdc/__init__.py
vcloud_client = VCloudClient()

# 5. Importar Rotas (no final para evitar Ciclo de Importação)
from . import routes
