from flask import jsonify, request, abort
from . import bp, vcloud_client
from .documents import MEDIA_TYPE, ResourceDescriptor
from .resources import VM


def get_vdc():
    return vcloud_client.get_vdc()


def _collection(items):
    data = [item.to_dict() for item in items]
    return {'data': data, 'count': len(data)}


# --- Rotas VDC ---

@bp.route('/vdc', methods=['GET'])
def vdc_summary():
    """
    Resumo do VDC configurado (nome, link e capacidade).
    ---
    tags:
      - VDC
    responses:
      200:
        description: Resumo do VDC
    """
    return jsonify(get_vdc().to_dict())


@bp.route('/vdc/resources', methods=['GET'])
def vdc_resources():
    """
    Capacidade de CPU e memória disponível no VDC.
    Um valor -1 significa que a plataforma não impõe limite.
    ---
    tags:
      - VDC
    responses:
      200:
        description: Limite, uso e disponível de CPU (cores) e memória (MB)
    """
    return jsonify(get_vdc().resources.to_dict())


# --- Rotas Storage Profiles ---

@bp.route('/vdc/storage-profiles', methods=['GET'])
def list_storage_profiles():
    """
    Lista os storage profiles do VDC.
    ---
    tags:
      - Storage
    responses:
      200:
        description: Lista de storage profiles com limite e uso
    """
    return jsonify(_collection(get_vdc().storage_profiles()))


@bp.route('/vdc/storage-profiles/<string:name>', methods=['GET'])
def get_storage_profile(name):
    """
    Busca um storage profile pelo nome.
    ---
    tags:
      - Storage
    parameters:
      - name: name
        in: path
        type: string
        required: true
    responses:
      200:
        description: Storage profile encontrado
      404:
        description: Storage profile não existe
    """
    return jsonify(get_vdc().find_storage_profile_by_name(name).to_dict())


# --- Rotas vApps ---

@bp.route('/vdc/vapps', methods=['GET'])
def list_vapps():
    """
    Lista os vApps do VDC.
    ---
    tags:
      - vApps
    responses:
      200:
        description: Lista de vApps
    """
    return jsonify(_collection(get_vdc().vapps()))


@bp.route('/vdc/vapps/<string:name>', methods=['GET'])
def get_vapp(name):
    """
    Busca um vApp pelo nome, com as suas VMs.
    ---
    tags:
      - vApps
    parameters:
      - name: name
        in: path
        type: string
        required: true
    responses:
      200:
        description: vApp encontrado
      404:
        description: vApp não existe
    """
    vapp = get_vdc().find_vapp_by_name(name)
    data = vapp.to_dict()
    data['vms'] = [vm.to_dict() for vm in vapp.vms]
    return jsonify(data)


# --- Rotas Redes ---

@bp.route('/vdc/networks', methods=['GET'])
def list_networks():
    """
    Lista as redes disponíveis no VDC.
    ---
    tags:
      - Rede
    responses:
      200:
        description: Lista de redes
    """
    return jsonify(_collection(get_vdc().networks()))


@bp.route('/vdc/networks/<string:name>', methods=['GET'])
def get_network(name):
    """
    Busca uma rede pelo nome.
    ---
    tags:
      - Rede
    parameters:
      - name: name
        in: path
        type: string
        required: true
    responses:
      200:
        description: Rede encontrada
      404:
        description: Rede não existe
    """
    return jsonify(get_vdc().find_network_by_name(name).to_dict())


@bp.route('/vdc/edge-gateways', methods=['GET'])
def list_edge_gateways():
    """
    Lista os edge gateways do VDC.
    ---
    tags:
      - Rede
    responses:
      200:
        description: Lista de edge gateways
    """
    return jsonify(_collection(get_vdc().edge_gateways()))


@bp.route('/vdc/edge-gateways/<string:name>', methods=['GET'])
def get_edge_gateway(name):
    """
    Busca um edge gateway pelo nome.
    ---
    tags:
      - Rede
    parameters:
      - name: name
        in: path
        type: string
        required: true
    responses:
      200:
        description: Edge gateway encontrado
      404:
        description: Edge gateway não existe
    """
    return jsonify(get_vdc().find_edge_gateway_by_name(name).to_dict())


# --- Rotas Discos Independentes ---

@bp.route('/vdc/disks', methods=['GET'])
def list_disks():
    """
    Lista os discos independentes do VDC, com o estado de ligação.
    ---
    tags:
      - Discos
    responses:
      200:
        description: Lista de discos
    """
    return jsonify(_collection(get_vdc().disks()))


@bp.route('/vdc/disks/<string:name>', methods=['GET'])
def find_disks(name):
    """
    Busca discos pelo nome. Nomes de disco não são únicos.
    ---
    tags:
      - Discos
    parameters:
      - name: name
        in: path
        type: string
        required: true
    responses:
      200:
        description: Todos os discos com o nome
      404:
        description: Nenhum disco com o nome
    """
    return jsonify(_collection(get_vdc().find_disks_by_name(name)))


@bp.route('/vdc/disks', methods=['POST'])
def create_disk():
    """
    Cria um disco independente.
    ---
    tags:
      - Discos
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - name
            - size_mb
          properties:
            name:
              type: string
              example: "data-disk-01"
            size_mb:
              type: integer
              example: 1024
            bus_type:
              type: string
              example: "scsi"
            bus_sub_type:
              type: string
              example: "lsilogic"
            vm_href:
              type: string
              description: VM perto da qual o disco deve ser criado
    responses:
      201:
        description: Disco criado
      400:
        description: Parâmetros inválidos
    """
    data = request.get_json() or {}
    name = data.get('name')
    size_mb = data.get('size_mb')

    if not name:
        abort(400, description="O campo 'name' é obrigatório.")
    if size_mb is None:
        abort(400, description="O campo 'size_mb' é obrigatório.")

    vm = None
    if data.get('vm_href'):
        vm = VM(vcloud_client, ResourceDescriptor(None, data['vm_href'], MEDIA_TYPE['VM']))

    disk = get_vdc().create_disk(
        name,
        size_mb,
        vm,
        data.get('bus_type'),
        data.get('bus_sub_type')
    )
    return jsonify({'name': disk.name, 'href': disk.href, 'message': f"Disco '{disk.name}' criado."}), 201


@bp.route('/vdc/disks/<string:name>', methods=['DELETE'])
def delete_disk(name):
    """
    Exclui discos pelo nome.
    Sem 'all', recusa (409) quando existe mais de um disco com o nome.
    Com all=true, tenta excluir todos e reporta falha agregada no fim.
    ---
    tags:
      - Discos
    parameters:
      - name: name
        in: path
        type: string
        required: true
      - name: all
        in: query
        type: boolean
        required: false
    responses:
      200:
        description: Disco(s) excluído(s)
      404:
        description: Nenhum disco com o nome
      409:
        description: Disco ligado a uma VM ou nome ambíguo
    """
    vdc = get_vdc()
    if request.args.get('all', 'false').lower() == 'true':
        vdc.delete_all_disks_by_name(name)
        return jsonify({'message': f"Discos com o nome '{name}' excluídos."})

    vdc.delete_disk_by_name(name)
    return jsonify({'message': f"Disco '{name}' excluído."})
