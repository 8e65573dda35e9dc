from nubevdc.services.health.base import HealthCheckProvider
from nubevdc.vcloud import vcloud_client


class VCloudHealthCheck(HealthCheckProvider):
    @property
    def name(self):
        return "vCloud VDC"

    @property
    def category(self):
        return "compute"

    def check(self):
        # 1. Acessa a propriedade .connection (Lazy Loading + login)
        try:
            conn = vcloud_client.connection
            if not conn:
                return {'status': 'unhealthy', 'error': 'Falha ao criar conexão.'}
        except Exception as e:
            # Captura erro de configuração (ex: falta VCD_HOST no .env)
            return {'status': 'unhealthy', 'error': str(e)}

        # 2. Teste real de API: lê o documento do VDC configurado
        try:
            vdc = vcloud_client.get_vdc()
            resources = vdc.resources
        except Exception as e:
            return {'status': 'unhealthy', 'error': f'VDC inacessível: {str(e)}'}

        return {
            'status': 'healthy',
            'details': {
                'vdc': vdc.name,
                'available_cores': resources.cpu.available_cores,
                'available_memory_mb': resources.memory.available_mb,
            }
        }
