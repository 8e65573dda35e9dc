import logging
from concurrent.futures import ThreadPoolExecutor, as_completed

from ..documents import BUS_SUB_TYPE, BUS_TYPE, MEDIA_TYPE, ResourceDescriptor, disk_create_params
from ..errors import BatchFailureError, CloudError, ConflictError, InvalidArgumentError, ObjectNotFoundError
from ..resolver import MatchKind, exists_by_name, match_by_name, resolve_all_by_name
from .base import Resource
from .vapp import VM

logger = logging.getLogger(__name__)

ATTACHED = 'attached'
NOT_ATTACHED = 'not-attached'

DEFAULT_BUS_TYPE = 'scsi'
DEFAULT_BUS_SUB_TYPE = {
    'ide': 'ide',
    'scsi': 'lsilogic',
    'sata': 'vmware.sata.ahci',
}

_BUS_TYPE_NAMES = {code: name for name, code in BUS_TYPE.items()}


def validate_disk_params(size_mb, bus_type=None, bus_sub_type=None):
    """
    Valida tamanho e barramento antes de qualquer chamada de rede.
    Retorna (bus_type, bus_sub_type) normalizados.
    """
    if isinstance(size_mb, bool) or not isinstance(size_mb, int) or size_mb <= 0:
        # repr deixa claro quando o valor veio como texto (ex: '100')
        raise InvalidArgumentError(f"Invalid size in MB {size_mb!r}")

    bus_type = bus_type or DEFAULT_BUS_TYPE
    if not isinstance(bus_type, str) or bus_type.lower() not in BUS_TYPE:
        raise InvalidArgumentError("Invalid bus type!")
    bus_type = bus_type.lower()

    if bus_sub_type is None:
        return bus_type, DEFAULT_BUS_SUB_TYPE[bus_type]
    if not isinstance(bus_sub_type, str):
        raise InvalidArgumentError("Invalid bus sub type!")

    # Sub tipos aceitos sem diferenciar maiúsculas (ex: virtualscsi)
    valid = {sub.lower(): sub for sub in BUS_SUB_TYPE[bus_type]}
    if bus_sub_type.lower() not in valid:
        raise InvalidArgumentError("Invalid bus sub type!")
    return bus_type, valid[bus_sub_type.lower()]


class Disk(Resource):
    """Disco independente. Pode estar ligado a no máximo uma VM."""

    @property
    def size_mb(self):
        return self.document.size_mb

    @property
    def bus_type(self):
        code = self.document.bus_type
        return _BUS_TYPE_NAMES.get(code, code)

    @property
    def bus_sub_type(self):
        return self.document.bus_sub_type

    def attached_vms(self, document=None):
        document = document or self.document
        link = document.attached_vms_link
        if link is None:
            return []
        return [VM(self._session, ref) for ref in self.connection.get(link.href).vm_refs]

    @property
    def vm(self):
        vms = self.attached_vms()
        return vms[0] if vms else None

    @property
    def attachment_state(self):
        return ATTACHED if self.attached_vms() else NOT_ATTACHED

    @property
    def attached(self):
        return self.attachment_state == ATTACHED

    def to_dict(self):
        document = self.document
        vms = self.attached_vms(document)
        return {
            'name': self.name,
            'href': self.href,
            'size_mb': document.size_mb,
            'bus_type': _BUS_TYPE_NAMES.get(document.bus_type, document.bus_type),
            'bus_sub_type': document.bus_sub_type,
            'attachment_state': ATTACHED if vms else NOT_ATTACHED,
            'vm': vms[0].name if vms else None,
        }


class DiskManager:
    """
    Mixin para discos independentes.
    Nomes de disco NÃO são únicos: a busca sempre considera vários resultados.
    """

    def _disk_refs(self):
        return self._snapshot().disk_refs

    def disks(self):
        return [Disk(self._session, ref) for ref in self._disk_refs()]

    def list_disks(self):
        return [ref.name for ref in self._disk_refs()]

    def disk_exists(self, name):
        return exists_by_name(self._disk_refs(), name)

    def find_disks_by_name(self, name):
        match = match_by_name(self._disk_refs(), name)
        if match.kind is MatchKind.EMPTY:
            raise ObjectNotFoundError(f"Disk '{name}' is not found", kind='Disk', name=name)
        return [Disk(self._session, ref) for ref in match.items]

    def create_disk(self, name, size_mb, vm=None, bus_type=None, bus_sub_type=None):
        """
        Cria um disco independente e espera as tarefas do vCloud terminarem.

        Args:
            name: Nome do disco (não precisa ser único).
            size_mb: Tamanho em MB, maior que zero.
            vm: VM opcional; o disco é criado perto do storage dela.
            bus_type: 'ide', 'scsi' ou 'sata' (padrão scsi).
            bus_sub_type: Controlador válido para o bus_type.

        Returns:
            Disk: handle do disco criado.
        """
        bus_type, bus_sub_type = validate_disk_params(size_mb, bus_type, bus_sub_type)

        snapshot = self._snapshot()
        link = snapshot.add_disk_link
        if link is None:
            raise CloudError(f"VDC '{snapshot.name}' does not expose a link to create disks")

        payload = disk_create_params(name, size_mb, bus_type, bus_sub_type, vm.href if vm else None)
        logger.info(f"Criando disco '{name}' ({size_mb} MB, {bus_type}/{bus_sub_type}) no VDC '{snapshot.name}'.")

        created = self.connection.post(link.href, payload, MEDIA_TYPE['DISK_CREATE_PARAMS'])
        for task in created.tasks:
            self._session.wait_for_task(task)

        return Disk(self._session, ResourceDescriptor(created.name, created.href, MEDIA_TYPE['DISK']))

    def delete_disk_by_name(self, name):
        """Exclui o único disco com este nome. Recusa quando o nome é ambíguo."""
        match = match_by_name(self._disk_refs(), name)
        if match.kind is MatchKind.EMPTY:
            raise ObjectNotFoundError(f"Disk '{name}' is not found", kind='Disk', name=name)
        if match.kind is MatchKind.MULTIPLE:
            raise ConflictError(
                f"{match.count} disks with name {name} were found",
                links=[ref.href for ref in match.items]
            )

        self._delete_single_disk(Disk(self._session, match.first))
        return self

    def delete_all_disks_by_name(self, name):
        """
        Exclui todos os discos com este nome (best-effort).
        Cada disco é tentado de forma independente; as falhas só são
        reportadas no fim, numa única BatchFailureError.
        """
        disks = [Disk(self._session, ref) for ref in resolve_all_by_name(self._disk_refs(), name)]

        failures = []
        for disk, error in self._attempt_disk_deletes(disks):
            if error is not None:
                logger.error(f"Falha ao excluir o disco '{disk.name}' ({disk.href}): {error}")
                failures.append((disk.href, error))

        if failures:
            raise BatchFailureError(
                f"Failed to delete one or more of the disks with name '{name}'. Check logs for details.",
                failures=failures
            )
        return self

    def _attempt_disk_deletes(self, disks):
        """Retorna [(disk, erro ou None)] depois de TODAS as tentativas."""
        workers = getattr(self, 'delete_workers', 1) or 1
        if workers > 1 and len(disks) > 1:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                futures = {executor.submit(self._delete_single_disk, disk): disk for disk in disks}
                return [(futures[future], future.exception()) for future in as_completed(futures)]

        outcomes = []
        for disk in disks:
            try:
                self._delete_single_disk(disk)
                outcomes.append((disk, None))
            except Exception as e:
                outcomes.append((disk, e))
        return outcomes

    def _delete_single_disk(self, disk):
        document = disk.document
        vms = disk.attached_vms(document)
        if vms:
            raise ConflictError(
                f"Disk '{disk.name}', link {disk.href} is attached to VM '{vms[0].name}'",
                links=[disk.href]
            )

        remove_link = document.remove_link
        task = self.connection.delete(remove_link.href if remove_link else disk.href)
        self._session.wait_for_task(task)
        logger.info(f"Disco '{disk.name}' ({disk.href}) excluído.")
