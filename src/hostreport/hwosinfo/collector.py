import logging

from hostreport.hwosinfo.hw import get_cpu_info, get_cpu_percent, get_disk_io, get_local_ip, get_memory
from hostreport.hwosinfo.models import HostIdentity, HostReport
from hostreport.hwosinfo.os import get_hostname, get_os_info, get_username

logger = logging.getLogger(__name__)


def collect_report() -> HostReport:
    """
    Runs every host query once, in order.
    Each query tolerates its own failure, so this never raises for missing data.
    """
    hostname = get_hostname()
    local_ip = get_local_ip()
    username = get_username()
    os_info = get_os_info()
    memory = get_memory()
    cpu = get_cpu_info()
    cpu_percent = get_cpu_percent()
    disk_io = get_disk_io()

    if cpu is not None:
        cpu = cpu.model_copy(update={"percent": cpu_percent})

    logger.info(f"Collected host telemetry for {hostname!r}")
    return HostReport(
        identity=HostIdentity(hostname=hostname, username=username),
        ip_address=local_ip,
        memory=memory,
        os_info=os_info,
        cpu=cpu,
        disk_io=disk_io,
    )
