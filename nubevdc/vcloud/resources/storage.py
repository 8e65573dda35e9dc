from urllib.parse import quote

from ..documents import MEDIA_TYPE, ResourceDescriptor
from ..quota import available_capacity
from ..resolver import exists_by_name, resolve_by_name
from .base import Resource


def _href_id(href):
    """Último segmento do link (uuid do recurso)."""
    return href.rstrip('/').rsplit('/', 1)[-1]


class VdcStorageProfile(Resource):
    """Storage profile do VDC, montado a partir do registro de query."""

    def __init__(self, session, descriptor, record=None):
        super().__init__(session, descriptor)
        self._record = record or {}

    @property
    def limit_mb(self):
        return int(self._record.get('storageLimitMB', 0))

    @property
    def used_mb(self):
        return int(self._record.get('storageUsedMB', 0))

    @property
    def available_storage_mb(self):
        # -1 quando o profile não tem limite
        return available_capacity(self.limit_mb, self.used_mb)

    @property
    def enabled(self):
        return self._record.get('isEnabled', 'true') == 'true'

    def to_dict(self):
        data = super().to_dict()
        data.update({
            'limit_mb': self.limit_mb,
            'used_mb': self.used_mb,
            'available_mb': self.available_storage_mb,
            'enabled': self.enabled,
        })
        return data


class StorageProfileManager:
    """
    Mixin para storage profiles.
    Usa o serviço de query filtrado pelo nome do VDC, que pode ter espaços.
    """

    def _storage_profile_query_link(self):
        vdc_name = quote(self.name, safe='')
        return (f"{self.connection.api_url}/query?type=orgVdcStorageProfile"
                f"&format=records&filter=vdcName=={vdc_name}")

    def _storage_profile_records(self):
        records = self.connection.get(self._storage_profile_query_link()).storage_profile_records
        # O filtro é por nome; VDCs homónimos noutras orgs também respondem.
        # Compara pelo id do VDC: o link pode ser o admin (/api/admin/vdc/<id>)
        vdc_id = _href_id(self.href)
        return [rec for rec in records if rec.get('vdc') is None or _href_id(rec['vdc']) == vdc_id]

    def _storage_profile_entries(self):
        return [
            (ResourceDescriptor(rec.get('name'), rec.get('href'), MEDIA_TYPE['VDC_STORAGE_PROFILE']), rec)
            for rec in self._storage_profile_records()
        ]

    def storage_profiles(self):
        return [
            VdcStorageProfile(self._session, ref, rec)
            for ref, rec in self._storage_profile_entries()
        ]

    def list_storage_profiles(self):
        return [ref.name for ref, _ in self._storage_profile_entries()]

    def find_storage_profile_by_name(self, name):
        entries = self._storage_profile_entries()
        ref = resolve_by_name([ref for ref, _ in entries], name, 'Storage profile')
        record = next(rec for r, rec in entries if r is ref)
        return VdcStorageProfile(self._session, ref, record)

    def storage_profile_exists(self, name):
        return exists_by_name([ref for ref, _ in self._storage_profile_entries()], name)
