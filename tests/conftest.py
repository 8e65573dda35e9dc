import pytest
from nubevdc import create_app
from nubevdc.config import TestingConfig
from nubevdc.extensions import vcloud_client as global_vcloud_client
from nubevdc.vcloud.client import VCloudClient
from nubevdc.vcloud.documents import wrap_document
from nubevdc.vcloud.vdc import VDC

from vcd_responses import (
    BASE, DISK_2_URL, DISK_NAME, DISK_URL, EDGE_GATEWAY_NAME, EMPTY_VDC_LINK,
    ISOLATED_NETWORK_NAME, NEW_DISK_URL, ORG_NETWORK_NAME, OVDC_NAME,
    STORAGE_RECORD, TASK_URL, VAPP_NAME, VAPP_URL, VAPP_XML, VDC_LINK,
    VDC_WITH_TWO_DISKS_LINK, FakeVCloud, disk_xml, query_xml,
    storage_query_link, task_xml, vdc_xml, vms_xml,
)


@pytest.fixture
def app():
    """
    Cria a instância do Flask configurada para TESTES.
    Nenhuma chamada sai para a rede: a conexão é sempre mockada.
    """
    app = create_app(TestingConfig)

    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    """
    Client HTTP simulado para fazer requisições nas rotas.
    Ex: client.get('/api/vcloud/vdc/disks')
    """
    return app.test_client()


@pytest.fixture
def fake_vcloud():
    """vCloud com um VDC completo, um VDC vazio e um VDC com dois discos homónimos."""
    fake = FakeVCloud()

    fake.add(VDC_LINK, vdc_xml(
        OVDC_NAME, VDC_LINK,
        disks=[(DISK_NAME, DISK_URL)],
        vapps=[(VAPP_NAME, VAPP_URL)],
        networks=[(ISOLATED_NETWORK_NAME, f'{BASE}/network/net-1'),
                  (ORG_NETWORK_NAME, f'{BASE}/network/net-2')],
    ))
    fake.add(EMPTY_VDC_LINK, vdc_xml('ovdc-empty', EMPTY_VDC_LINK, cpu=(0, 0), memory=(0, 0)))
    fake.add(VDC_WITH_TWO_DISKS_LINK, vdc_xml(
        'ovdc-two-disks', VDC_WITH_TWO_DISKS_LINK,
        disks=[(DISK_NAME, DISK_URL), (DISK_NAME, DISK_2_URL)],
    ))

    for disk_href in (DISK_URL, DISK_2_URL):
        fake.add(disk_href, disk_xml(DISK_NAME, disk_href))
        fake.add(f'{disk_href}/attachedVms', vms_xml())

    fake.add(VAPP_URL, VAPP_XML)
    fake.add(TASK_URL, task_xml('success'))

    fake.add(f'{VDC_LINK}/edgeGateways', query_xml(
        f'<EdgeGatewayRecord name="{EDGE_GATEWAY_NAME}" href="{BASE}/admin/edgeGateway/eg-1"/>'
    ))
    fake.add(f'{EMPTY_VDC_LINK}/edgeGateways', query_xml())
    fake.add(f'{VDC_WITH_TWO_DISKS_LINK}/edgeGateways', query_xml())

    fake.add(storage_query_link(OVDC_NAME), query_xml(STORAGE_RECORD))
    fake.add(storage_query_link('ovdc%20with%20space'), query_xml(STORAGE_RECORD))
    fake.add(storage_query_link('ovdc-empty'), query_xml())
    return fake


@pytest.fixture
def mock_vcd_connection(mocker, fake_vcloud):
    """
    Conexão mockada: GET vai para o FakeVCloud, DELETE devolve uma tarefa
    concluída e POST (criação de disco) devolve um disco com tarefa pendente.
    """
    connection = mocker.MagicMock()
    connection.api_url = BASE
    connection.get.side_effect = fake_vcloud.get
    connection.delete.side_effect = lambda href: wrap_document(task_xml('success'))
    connection.post.side_effect = lambda href, payload, content_type: wrap_document(
        disk_xml(DISK_NAME, NEW_DISK_URL, tasks=f'<Tasks>{task_xml("running", operation="vdcCreateDisk")}</Tasks>')
    )
    return connection


@pytest.fixture
def session(app, mock_vcd_connection):
    """
    Singleton vcloud_client com a conexão mockada injetada.
    Limpa a injeção no fim para não vazar entre testes.
    """
    global_vcloud_client._connection = mock_vcd_connection
    yield global_vcloud_client
    global_vcloud_client._connection = None


@pytest.fixture
def standalone_session(mock_vcd_connection):
    """VCloudClient sem Flask, como usado por scripts."""
    svc = VCloudClient()
    svc._connection = mock_vcd_connection
    return svc


@pytest.fixture
def vdc(session):
    return VDC(session, VDC_LINK)


@pytest.fixture
def empty_vdc(session):
    return VDC(session, EMPTY_VDC_LINK)


@pytest.fixture
def two_disks_vdc(session):
    return VDC(session, VDC_WITH_TWO_DISKS_LINK)
