from .base import Resource
from .disk import ATTACHED, NOT_ATTACHED, Disk, DiskManager
from .edge_gateway import EdgeGateway, EdgeGatewayManager
from .network import Network, NetworkManager
from .storage import StorageProfileManager, VdcStorageProfile
from .vapp import VM, VApp, VAppManager
