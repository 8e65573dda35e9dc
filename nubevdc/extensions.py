from flask_cors import CORS

from nubevdc.vcloud import vcloud_client

# Inicialização das extensões
# Nota: A vinculação com o app (init_app) é feita no __init__.py
cors = CORS()

__all__ = ['cors', 'vcloud_client']
