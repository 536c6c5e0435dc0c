from .step_10_backup_configs import BackupConfigsStep
from .step_20_install_packages import InstallPackagesStep
from .step_25_install_aur_helper import InstallAurHelperStep
from .step_30_install_aur_packages import InstallAurPackagesStep
from .step_35_create_directories import CreateDirectoriesStep
from .step_40_install_configs import InstallConfigsStep
from .step_50_configure_system import ConfigureSystemStep
from .step_55_configure_pam import ConfigurePamStep
from .step_60_add_user_groups import AddUserGroupsStep
from .step_65_download_wallpaper import DownloadWallpaperStep
from .step_70_enable_services import EnableServicesStep
from .step_75_enable_user_services import EnableUserServicesStep
from .step_78_enable_firewall import EnableFirewallStep
from .step_80_enroll_fingerprint import EnrollFingerprintStep

__all__ = [
    "BackupConfigsStep",
    "InstallPackagesStep",
    "InstallAurHelperStep",
    "InstallAurPackagesStep",
    "CreateDirectoriesStep",
    "InstallConfigsStep",
    "ConfigureSystemStep",
    "ConfigurePamStep",
    "AddUserGroupsStep",
    "DownloadWallpaperStep",
    "EnableServicesStep",
    "EnableUserServicesStep",
    "EnableFirewallStep",
    "EnrollFingerprintStep",
]
