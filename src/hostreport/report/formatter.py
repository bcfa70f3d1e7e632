from hostreport.hwosinfo.models import HostReport

CPU_UNAVAILABLE = "Информация о CPU недоступна"


def format_report(report: HostReport) -> str:
    """
    Renders the collected telemetry with the fixed Russian-language template.
    Every section header is emitted even when its data could not be collected.
    """
    identity = report.identity
    memory = report.memory
    os_info = report.os_info

    text = (
        f"Имя пользователя: {identity.username}\n"
        f"Имя компьютера: {identity.hostname}\n"
        f"IP-адрес: {report.ip_address}\n"
        f"Общее количество ОЗУ: {memory.total_gb:.2f} GB\n"
        f"Используемое ОЗУ: {memory.used_gb:.2f} GB\n"
        f"Версия ОС: {os_info.platform}-{os_info.platform_version}\n"
    )

    cpu = report.cpu
    if cpu is not None:
        text += (
            f"CPU: {cpu.model_name}, Ядер: {cpu.physical_cores}\n"
            f"Использование CPU: {cpu.percent:.2f}%\n"
        )
    else:
        text += f"CPU: {CPU_UNAVAILABLE}\nИспользование CPU: {0.0:.2f}%\n"

    text += f"Информация о дисковом вводе/выводе:\n{report.disk_io}\n"
    return text
