import logging
import platform
import socket

import psutil
from hostreport.hwosinfo.models import OSInfo

logger = logging.getLogger(__name__)

CPUINFO_PATH = "/proc/cpuinfo"


def get_hostname() -> str:
    try:
        return socket.gethostname()
    except Exception as e:
        logger.warning(f"Could not read hostname: {e}")
        return ""


def get_username() -> str:
    try:
        # Resolved from the process uid, not from USER/LOGNAME
        return psutil.Process().username()
    except Exception as e:
        logger.warning(f"Could not determine current user: {e}")
        return ""


def get_os_info() -> OSInfo:
    """
    Returns the platform name and version.
    On Linux this is the distribution id and version from os-release
    (e.g. ubuntu / 22.04); elsewhere it is the system name and release.
    """
    try:
        release = platform.freedesktop_os_release()
        name = release.get("ID", "")
        version = release.get("VERSION_ID", "")
        if name:
            return OSInfo(platform=name, platform_version=version)
    except OSError:
        # No os-release file
        pass

    try:
        return OSInfo(platform=platform.system().lower(), platform_version=platform.release())
    except Exception as e:
        logger.warning(f"Could not read platform info: {e}")
        return OSInfo()


def _read_cpuinfo_model(path: str = CPUINFO_PATH) -> str:
    try:
        with open(path, "r", encoding="utf-8", errors="ignore") as f:
            for line in f:
                key, _, value = line.partition(":")
                if key.strip() == "model name":
                    return value.strip()
    except OSError:
        return ""
    return ""


def get_cpu_model() -> str:
    """CPU model name, falling back to the processor/machine string."""
    return _read_cpuinfo_model() or platform.processor() or platform.machine()
