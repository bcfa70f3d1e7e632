from typing import Optional
from pydantic import BaseModel

GIGABYTE = 1024 ** 3


class HostIdentity(BaseModel):
    hostname: str = ""
    username: str = ""

class OSInfo(BaseModel):
    platform: str = ""
    platform_version: str = ""

class MemoryStats(BaseModel):
    total: int = 0
    used: int = 0

    @property
    def total_gb(self) -> float:
        return self.total / GIGABYTE

    @property
    def used_gb(self) -> float:
        return self.used / GIGABYTE

class CPUInfo(BaseModel):
    model_name: str
    physical_cores: int = 0
    logical_cores: int = 0
    percent: float = 0.0

class DiskIOCounters(BaseModel):
    read_count: int
    write_count: int
    read_bytes: int
    write_bytes: int

    @property
    def read_gb(self) -> float:
        return self.read_bytes / GIGABYTE

    @property
    def write_gb(self) -> float:
        return self.write_bytes / GIGABYTE

class HostReport(BaseModel):
    identity: HostIdentity
    ip_address: str
    memory: MemoryStats
    os_info: OSInfo
    cpu: Optional[CPUInfo] = None
    disk_io: str
