# tests/test_routes.py
import requests

from vcd_responses import (
    DISK_2_URL, DISK_NAME, DISK_URL, NEW_DISK_URL, VAPP_NAME, VDC_LINK,
    VDC_WITH_TWO_DISKS_LINK, VM_NAME, VM_URL,
)

API = '/api/vcloud'


def test_vdc_summary(client, session):
    response = client.get(f'{API}/vdc')

    assert response.status_code == 200
    assert response.json['href'] == VDC_LINK
    assert response.json['resources']['cpu']['available_cores'] == 4


def test_vdc_resources(client, session):
    data = client.get(f'{API}/vdc/resources').json

    assert data['memory']['available_mb'] == 4096


def test_list_disks(client, session):
    response = client.get(f'{API}/vdc/disks')

    assert response.status_code == 200
    assert response.json['count'] == 1
    assert response.json['data'][0]['attachment_state'] == 'not-attached'


def test_get_vapp_with_vms(client, session):
    data = client.get(f'{API}/vdc/vapps/{VAPP_NAME}').json

    assert data['name'] == VAPP_NAME
    assert data['vms'][0]['name'] == VM_NAME


def test_list_storage_profiles_and_networks(client, session):
    assert client.get(f'{API}/vdc/storage-profiles').json['count'] == 1
    assert client.get(f'{API}/vdc/networks').json['count'] == 2
    assert client.get(f'{API}/vdc/edge-gateways').json['count'] == 1


def test_not_found_maps_to_404(client, session):
    response = client.get(f'{API}/vdc/networks/xxx')

    assert response.status_code == 404
    assert response.json['error'] == "Network 'xxx' is not found"


def test_create_disk(client, session, mock_vcd_connection):
    response = client.post(f'{API}/vdc/disks', json={
        'name': DISK_NAME, 'size_mb': 100, 'vm_href': VM_URL
    })

    assert response.status_code == 201
    assert response.json['href'] == NEW_DISK_URL
    assert VM_URL.encode() in mock_vcd_connection.post.call_args.args[1]


def test_create_disk_missing_fields(client, session, mock_vcd_connection):
    response = client.post(f'{API}/vdc/disks', json={'name': 'data'})

    assert response.status_code == 400
    assert 'size_mb' in response.json['error']
    mock_vcd_connection.post.assert_not_called()


def test_create_disk_invalid_size_maps_to_400(client, session):
    response = client.post(f'{API}/vdc/disks', json={'name': 'data', 'size_mb': -1})

    assert response.status_code == 400
    assert response.json['error'] == 'Invalid size in MB -1'


def test_delete_disk(client, session, mock_vcd_connection):
    response = client.delete(f'{API}/vdc/disks/{DISK_NAME}')

    assert response.status_code == 200
    mock_vcd_connection.delete.assert_called_once_with(DISK_URL)


def test_delete_ambiguous_disk_maps_to_409(app, client, session):
    app.config['VCD_VDC_LINK'] = VDC_WITH_TWO_DISKS_LINK

    response = client.delete(f'{API}/vdc/disks/{DISK_NAME}')

    assert response.status_code == 409
    assert response.json['links'] == [DISK_URL, DISK_2_URL]


def test_delete_all_partial_failure_maps_to_500(app, client, session, fake_vcloud):
    app.config['VCD_VDC_LINK'] = VDC_WITH_TWO_DISKS_LINK
    fake_vcloud.attach_disk(DISK_2_URL)

    response = client.delete(f'{API}/vdc/disks/{DISK_NAME}?all=true')

    assert response.status_code == 500
    assert response.json['failed'] == [DISK_2_URL]


def test_vcloud_http_error_maps_to_502(client, session, mock_vcd_connection):
    mock_vcd_connection.get.side_effect = requests.HTTPError('503 Service Unavailable')

    response = client.get(f'{API}/vdc/disks')

    assert response.status_code == 502


def test_health_check(client, session):
    response = client.get('/health')

    assert response.status_code == 200
    assert response.json['status'] == 'healthy'
    assert response.json['checks'][0]['details']['available_cores'] == 4


def test_health_check_unhealthy(client, session, mock_vcd_connection):
    mock_vcd_connection.get.side_effect = requests.ConnectionError('refused')

    data = client.get('/api/health').json

    assert data['status'] == 'unhealthy'
    assert 'refused' in data['checks'][0]['error']


def test_unknown_endpoint(client):
    assert client.get('/api/xxx').status_code == 404


def test_create_disk_numeric_bus_type_maps_to_400(client, session, mock_vcd_connection):
    response = client.post(f'{API}/vdc/disks', json={'name': 'data', 'size_mb': 100, 'bus_type': 6})

    assert response.status_code == 400
    assert response.json['error'] == 'Invalid bus type!'
    mock_vcd_connection.post.assert_not_called()
