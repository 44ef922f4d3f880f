from .step_10_prepare_staging import PrepareStagingStep
from .step_20_fetch_containerd import FetchContainerdStep
from .step_30_fetch_runc import FetchRuncStep
from .step_40_write_unit import WriteServiceUnitStep
from .step_50_write_release import WriteExtensionReleaseStep
from .step_60_package_image import PackageImageStep
from .step_70_activate import ActivateStep

__all__ = [
    "PrepareStagingStep",
    "FetchContainerdStep",
    "FetchRuncStep",
    "WriteServiceUnitStep",
    "WriteExtensionReleaseStep",
    "PackageImageStep",
    "ActivateStep",
]
