import logging
from enum import Enum
from typing import Optional
from pydantic import BaseModel

from hostreport.config.settings import config

logger = logging.getLogger(__name__)


class WriteStatus(str, Enum):
    WRITTEN = "written"
    CREATE_FAILED = "create_failed"
    WRITE_FAILED = "write_failed"

class WriteResult(BaseModel):
    status: WriteStatus
    path: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == WriteStatus.WRITTEN

    @property
    def message(self) -> str:
        if self.status == WriteStatus.CREATE_FAILED:
            return f"Ошибка при создании файла: {self.error}"
        if self.status == WriteStatus.WRITE_FAILED:
            return f"Ошибка при записи в файл: {self.error}"
        return f"Информация успешно записана в файл '{self.path}'"


def report_filename(hostname: str) -> str:
    """system_info_<hostname>.txt, with spaces in the hostname turned into underscores."""
    return f"{config.filename_prefix}{hostname.replace(' ', '_')}{config.filename_suffix}"


def write_report(text: str, path: str) -> WriteResult:
    """
    Creates (or truncates) the file at path and writes the report into it.
    The file is not replaced atomically, so a failed write can leave it partial.
    """
    try:
        f = open(path, "w", encoding=config.encoding)
    except OSError as e:
        logger.error(f"Failed to create report file {path}: {e}")
        return WriteResult(status=WriteStatus.CREATE_FAILED, path=path, error=str(e))

    try:
        with f:
            f.write(text)
    except OSError as e:
        # Raised by write() or by the flush on close
        logger.error(f"Failed to write report file {path}: {e}")
        return WriteResult(status=WriteStatus.WRITE_FAILED, path=path, error=str(e))

    logger.info(f"Wrote {len(text)} characters to {path}")
    return WriteResult(status=WriteStatus.WRITTEN, path=path)
