import ipaddress
import logging
import socket
from typing import Dict, Optional

import psutil
from hostreport.config.settings import config
from hostreport.hwosinfo.models import CPUInfo, DiskIOCounters, MemoryStats
from hostreport.hwosinfo.os import get_cpu_model

logger = logging.getLogger(__name__)

IP_LOOKUP_FAILED = "Не удалось получить IP-адрес"
IP_NOT_FOUND = "IP-адрес не найден"
DISK_IO_ERROR = "Ошибка при получении данных о вводе/выводе диска: {error}"
DISK_IO_UNAVAILABLE = "Информация о вводе/выводе диска недоступна"


def get_local_ip() -> str:
    """
    Returns the first non-loopback IPv4 address found on the host's interfaces.
    Interfaces and their addresses are walked in the order psutil reports them.
    """
    try:
        interfaces = psutil.net_if_addrs()
    except Exception as e:
        logger.warning(f"Could not enumerate network interfaces: {e}")
        return IP_LOOKUP_FAILED

    for iface_name, iface_addresses in interfaces.items():
        for addr in iface_addresses:
            if addr.family != socket.AF_INET:
                continue
            try:
                ip = ipaddress.ip_address(addr.address)
            except ValueError:
                logger.debug(f"Skipping unparsable address {addr.address!r} on {iface_name}")
                continue
            if not ip.is_loopback:
                return str(ip)
    return IP_NOT_FOUND


def get_memory() -> MemoryStats:
    try:
        vmem = psutil.virtual_memory()
    except Exception as e:
        logger.warning(f"Could not read virtual memory stats: {e}")
        return MemoryStats()
    return MemoryStats(total=vmem.total, used=vmem.used)


def get_cpu_info() -> Optional[CPUInfo]:
    """Model name and core counts, or None when the CPU cannot be described."""
    try:
        model_name = get_cpu_model()
        physical = psutil.cpu_count(logical=False) or 0
        logical = psutil.cpu_count(logical=True) or 0
    except Exception as e:
        logger.warning(f"Could not read CPU info: {e}")
        return None

    if not model_name:
        return None
    return CPUInfo(model_name=model_name, physical_cores=physical, logical_cores=logical)


def get_cpu_percent() -> float:
    # Blocks for the whole sampling window.
    try:
        return psutil.cpu_percent(interval=config.cpu_sample_interval)
    except Exception as e:
        logger.warning(f"Could not sample CPU utilization: {e}")
        return 0.0


def format_disk_io(counters: Dict[str, DiskIOCounters]) -> str:
    lines = []
    for device, io in counters.items():
        lines.append(
            f"Устройство: {device}, "
            f"Чтение: {io.read_count} операций ({io.read_gb} GB), "
            f"Запись: {io.write_count} операций ({io.write_gb} GB)"
        )

    if not lines:
        return DISK_IO_UNAVAILABLE
    return "\n".join(lines)


def get_disk_io() -> str:
    """Per-device disk I/O counters rendered one device per line."""
    try:
        raw = psutil.disk_io_counters(perdisk=True)
    except Exception as e:
        logger.warning(f"Could not read disk I/O counters: {e}")
        return DISK_IO_ERROR.format(error=e)

    # psutil returns None (or {}) when the kernel exposes no block devices
    counters = {
        device: DiskIOCounters(
            read_count=io.read_count,
            write_count=io.write_count,
            read_bytes=io.read_bytes,
            write_bytes=io.write_bytes,
        )
        for device, io in (raw or {}).items()
    }
    return format_disk_io(counters)
