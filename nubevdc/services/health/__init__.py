from .providers.vcloud import VCloudHealthCheck


def get_system_health():
    """
    Executa verificação de saúde em todos os subsistemas registrados.
    """
    providers = [
        VCloudHealthCheck(),
    ]

    results = []
    global_status = "healthy"

    for provider in providers:
        # O método .run() trata erros e cronometra
        data = provider.run()

        data['name'] = provider.name
        data['category'] = provider.category

        if data['status'] != 'healthy':
            global_status = "unhealthy"

        results.append(data)

    return {
        "status": global_status,
        "checks": results
    }
