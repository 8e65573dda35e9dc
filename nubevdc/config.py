import os


class Config:
    # --- SEGURANÇA ---
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-key-change-in-production'

    # --- CONFIGS GERAIS ---
    DEBUG = False
    TESTING = False

    # --- VCLOUD DIRECTOR ---
    VCD_HOST = os.environ.get('VCD_HOST', 'vcd.local')
    VCD_USER = os.environ.get('VCD_USER', 'administrator')
    VCD_ORG = os.environ.get('VCD_ORG', 'System')
    VCD_PASSWORD = os.environ.get('VCD_PASSWORD', '')
    # Token já emitido (x-vcloud-authorization); dispensa o login
    VCD_API_TOKEN = os.environ.get('VCD_API_TOKEN')
    VCD_API_VERSION = os.environ.get('VCD_API_VERSION', '5.1')
    VCD_VERIFY_SSL = os.environ.get('VCD_VERIFY_SSL', 'false').lower() == 'true'

    # Link do VDC operado pela API (ex: https://vcd.local/api/vdc/<uuid>)
    VCD_VDC_LINK = os.environ.get('VCD_VDC_LINK')

    VCD_REQUEST_TIMEOUT = int(os.environ.get('VCD_REQUEST_TIMEOUT', 30))

    # --- API & CORS ---
    API_PREFIX = '/api'
    CORS_ORIGINS = ['http://localhost:5000', 'http://localhost:5173']

    # --- TAREFAS ASSÍNCRONAS ---
    VCD_TASK_TIMEOUT = int(os.environ.get('VCD_TASK_TIMEOUT', 300))
    VCD_TASK_POLL_INTERVAL = int(os.environ.get('VCD_TASK_POLL_INTERVAL', 2))

    # Exclusões em lote: 1 = sequencial
    VCD_DELETE_WORKERS = int(os.environ.get('VCD_DELETE_WORKERS', 1))


class DevelopmentConfig(Config):
    """
    Configuração para Dev Local.
    """
    DEBUG = True


class ProductionConfig(Config):
    """
    Configuração para Produção.
    """
    DEBUG = False
    VCD_VERIFY_SSL = os.environ.get('VCD_VERIFY_SSL', 'true').lower() == 'true'


class TestingConfig(Config):
    """
    Configuração para os testes (pytest). Nunca fala com um vCloud real.
    """
    TESTING = True
    VCD_HOST = 'mock.vcd'
    VCD_USER = 'test'
    VCD_ORG = 'test-org'
    VCD_PASSWORD = 'test'
    VCD_API_TOKEN = 'test-token'
    VCD_VDC_LINK = 'https://mock.vcd/api/vdc/vdc-1'
    VCD_TASK_TIMEOUT = 1
    VCD_TASK_POLL_INTERVAL = 0
