"""
Leitura dos documentos XML do vCloud Director.

Cada resposta da API é embrulhada numa classe de documento tipada
(VdcDocument, DiskDocument, ...). A camada de VDC nunca toca no XML cru:
consome apenas ResourceDescriptor e os pares (limite, uso) expostos aqui.
"""
from dataclasses import dataclass
from typing import List, Optional, Tuple

from lxml import etree

VCLOUD_NS = 'http://www.vmware.com/vcloud/v1.5'

MEDIA_TYPE = {
    'VDC': 'application/vnd.vmware.vcloud.vdc+xml',
    'VAPP': 'application/vnd.vmware.vcloud.vApp+xml',
    'VM': 'application/vnd.vmware.vcloud.vm+xml',
    'VMS': 'application/vnd.vmware.vcloud.vms+xml',
    'DISK': 'application/vnd.vmware.vcloud.disk+xml',
    'DISK_CREATE_PARAMS': 'application/vnd.vmware.vcloud.diskCreateParams+xml',
    'NETWORK': 'application/vnd.vmware.vcloud.network+xml',
    'EDGE_GATEWAY': 'application/vnd.vmware.admin.edgeGateway+xml',
    'VDC_STORAGE_PROFILE': 'application/vnd.vmware.vcloud.vdcStorageProfile+xml',
    'QUERY_RECORDS': 'application/vnd.vmware.vcloud.query.records+xml',
    'TASK': 'application/vnd.vmware.vcloud.task+xml',
    'SESSION': 'application/vnd.vmware.vcloud.session+xml',
}

# Códigos de barramento aceites pelo DiskCreateParams
BUS_TYPE = {
    'ide': '5',
    'scsi': '6',
    'sata': '20',
}

BUS_SUB_TYPE = {
    'ide': ('ide',),
    'scsi': ('buslogic', 'lsilogic', 'lsilogicsas', 'VirtualSCSI'),
    'sata': ('vmware.sata.ahci',),
}

# 1 core equivale a 1 GHz de clock reservado
CPU_CLOCK_MHZ = 1000

BYTES_PER_MB = 1024 * 1024


@dataclass(frozen=True)
class ResourceDescriptor:
    """Referência leve (nome + link + tipo) para um recurso filho."""
    name: str
    href: str
    type: Optional[str] = None


def _path(*tags):
    return '/'.join(f'{{{VCLOUD_NS}}}{tag}' for tag in tags)


def _descriptor(element) -> ResourceDescriptor:
    return ResourceDescriptor(element.get('name'), element.get('href'), element.get('type'))


class XmlDocument:
    """Wrapper genérico de um elemento raiz do vCloud."""

    def __init__(self, element):
        self.element = element

    @property
    def tag(self):
        return etree.QName(self.element).localname

    @property
    def name(self):
        return self.element.get('name')

    @property
    def href(self):
        return self.element.get('href')

    @property
    def type(self):
        return self.element.get('type')

    def _children(self, *tags):
        return self.element.findall(_path(*tags))

    def _text(self, *tags, default=None):
        child = self.element.find(_path(*tags))
        if child is None or child.text is None:
            return default
        return child.text.strip()

    def links(self, rel=None, media_type=None) -> List[ResourceDescriptor]:
        return [
            _descriptor(link) for link in self._children('Link')
            if (rel is None or link.get('rel') == rel)
            and (media_type is None or link.get('type') == media_type)
        ]

    def link(self, rel, media_type=None) -> Optional[ResourceDescriptor]:
        found = self.links(rel, media_type)
        return found[0] if found else None

    @property
    def tasks(self) -> List['TaskDocument']:
        return [TaskDocument(el) for el in self._children('Tasks', 'Task')]

    def to_string(self):
        return etree.tostring(self.element)

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.tag} name={self.name!r} href={self.href!r}>"


class TaskDocument(XmlDocument):
    """Tarefa assíncrona (status: queued, preRunning, running, success, error...)."""

    FINAL_FAILURE = ('error', 'aborted', 'canceled')

    @property
    def status(self):
        return self.element.get('status')

    @property
    def operation(self):
        return self.element.get('operationName') or self.element.get('operation')

    @property
    def is_success(self):
        return self.status == 'success'

    @property
    def is_failure(self):
        return self.status in self.FINAL_FAILURE

    @property
    def error_message(self):
        errors = self._children('Error')
        return errors[0].get('message') if errors else None


class VdcDocument(XmlDocument):

    def _resource_entities(self, media_type):
        return [
            _descriptor(el) for el in self._children('ResourceEntities', 'ResourceEntity')
            if el.get('type') == media_type
        ]

    @property
    def vapp_refs(self) -> List[ResourceDescriptor]:
        return self._resource_entities(MEDIA_TYPE['VAPP'])

    @property
    def disk_refs(self) -> List[ResourceDescriptor]:
        return self._resource_entities(MEDIA_TYPE['DISK'])

    @property
    def network_refs(self) -> List[ResourceDescriptor]:
        return [_descriptor(el) for el in self._children('AvailableNetworks', 'Network')]

    @property
    def add_disk_link(self) -> Optional[ResourceDescriptor]:
        return self.link('add', MEDIA_TYPE['DISK_CREATE_PARAMS'])

    @property
    def edge_gateways_link(self) -> Optional[ResourceDescriptor]:
        return self.link('edgeGateways', MEDIA_TYPE['QUERY_RECORDS'])

    def _capacity(self, resource) -> Tuple[int, int, Optional[str]]:
        limit = int(self._text('ComputeCapacity', resource, 'Limit', default='0'))
        used = int(self._text('ComputeCapacity', resource, 'Used', default='0'))
        units = self._text('ComputeCapacity', resource, 'Units')
        return limit, used, units

    @property
    def cpu_capacity(self) -> Tuple[int, int]:
        """(limite, uso) em cores equivalentes."""
        limit, used, units = self._capacity('Cpu')
        if units == 'MHz':
            # Limite positivo abaixo de 1 GHz continua a ser limite (mínimo 1 core)
            if limit > 0:
                limit = max(1, limit // CPU_CLOCK_MHZ)
            return limit, used // CPU_CLOCK_MHZ
        return limit, used

    @property
    def memory_capacity(self) -> Tuple[int, int]:
        """(limite, uso) em MB."""
        limit, used, units = self._capacity('Memory')
        if units == 'GB':
            return limit * 1024, used * 1024
        return limit, used


class DiskDocument(XmlDocument):

    @property
    def status(self):
        return self.element.get('status')

    @property
    def size_mb(self):
        if self.element.get('sizeMb') is not None:
            return int(self.element.get('sizeMb'))
        return int(self.element.get('size', '0')) // BYTES_PER_MB

    @property
    def bus_type(self):
        return self.element.get('busType')

    @property
    def bus_sub_type(self):
        return self.element.get('busSubType')

    @property
    def attached_vms_link(self) -> Optional[ResourceDescriptor]:
        return self.link('down', MEDIA_TYPE['VMS'])

    @property
    def remove_link(self) -> Optional[ResourceDescriptor]:
        return self.link('remove')


class VmsDocument(XmlDocument):

    @property
    def vm_refs(self) -> List[ResourceDescriptor]:
        return [_descriptor(el) for el in self._children('VmReference')]


class VAppDocument(XmlDocument):

    @property
    def status(self):
        return int(self.element.get('status', '-1'))

    @property
    def vm_refs(self) -> List[ResourceDescriptor]:
        return [_descriptor(el) for el in self._children('Children', 'Vm')]


class QueryRecordsDocument(XmlDocument):

    def records(self, record_tag):
        return [dict(el.attrib) for el in self._children(record_tag)]

    @property
    def edge_gateway_refs(self) -> List[ResourceDescriptor]:
        return [
            ResourceDescriptor(rec.get('name'), rec.get('href'), MEDIA_TYPE['EDGE_GATEWAY'])
            for rec in self.records('EdgeGatewayRecord')
        ]

    @property
    def storage_profile_records(self):
        return self.records('OrgVdcStorageProfileRecord')


_WRAPPERS = {
    'Vdc': VdcDocument,
    'AdminVdc': VdcDocument,
    'Disk': DiskDocument,
    'Vms': VmsDocument,
    'VApp': VAppDocument,
    'QueryResultRecords': QueryRecordsDocument,
    'Task': TaskDocument,
}


def wrap_document(content) -> XmlDocument:
    """Converte o corpo de uma resposta no wrapper adequado à raiz."""
    if isinstance(content, str):
        content = content.encode('utf-8')
    root = etree.fromstring(content)
    wrapper = _WRAPPERS.get(etree.QName(root).localname, XmlDocument)
    return wrapper(root)


def disk_create_params(name, size_mb, bus_type, bus_sub_type, vm_href=None) -> bytes:
    """Monta o payload DiskCreateParams (tamanho enviado em bytes)."""
    root = etree.Element(f'{{{VCLOUD_NS}}}DiskCreateParams', nsmap={None: VCLOUD_NS})
    etree.SubElement(root, f'{{{VCLOUD_NS}}}Disk', attrib={
        'name': name,
        'size': str(size_mb * BYTES_PER_MB),
        'busType': BUS_TYPE[bus_type],
        'busSubType': bus_sub_type,
    })
    if vm_href:
        etree.SubElement(root, f'{{{VCLOUD_NS}}}Locality', attrib={
            'href': vm_href,
            'type': MEDIA_TYPE['VM'],
        })
    return etree.tostring(root, xml_declaration=True, encoding='UTF-8')
