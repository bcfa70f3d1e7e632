from hostreport.hwosinfo.models import CPUInfo, HostIdentity, HostReport, MemoryStats, OSInfo
from hostreport.report.formatter import CPU_UNAVAILABLE, format_report

GB = 1024 ** 3

HEADERS = [
    "Имя пользователя:",
    "Имя компьютера:",
    "IP-адрес:",
    "Общее количество ОЗУ:",
    "Используемое ОЗУ:",
    "Версия ОС:",
    "CPU:",
    "Использование CPU:",
    "Информация о дисковом вводе/выводе:",
]

def _report(**overrides):
    fields = dict(
        identity=HostIdentity(hostname="web-01", username="deploy"),
        ip_address="192.168.0.10",
        memory=MemoryStats(total=16 * GB, used=6 * GB + GB // 4),
        os_info=OSInfo(platform="ubuntu", platform_version="22.04"),
        cpu=CPUInfo(model_name="Intel Xeon", physical_cores=4, logical_cores=8, percent=3.14159),
        disk_io="Устройство: sda, Чтение: 1 операций (0.0 GB), Запись: 2 операций (0.0 GB)",
    )
    fields.update(overrides)
    return HostReport(**fields)


def test_format_report_full_template():
    text = format_report(_report())
    assert text == (
        "Имя пользователя: deploy\n"
        "Имя компьютера: web-01\n"
        "IP-адрес: 192.168.0.10\n"
        "Общее количество ОЗУ: 16.00 GB\n"
        "Используемое ОЗУ: 6.25 GB\n"
        "Версия ОС: ubuntu-22.04\n"
        "CPU: Intel Xeon, Ядер: 4\n"
        "Использование CPU: 3.14%\n"
        "Информация о дисковом вводе/выводе:\n"
        "Устройство: sda, Чтение: 1 операций (0.0 GB), Запись: 2 операций (0.0 GB)\n"
    )

def test_format_report_keeps_headers_when_everything_failed():
    report = HostReport(
        identity=HostIdentity(),
        ip_address="Не удалось получить IP-адрес",
        memory=MemoryStats(),
        os_info=OSInfo(),
        cpu=None,
        disk_io="Ошибка при получении данных о вводе/выводе диска: boom",
    )
    text = format_report(report)

    for header in HEADERS:
        assert header in text
    assert f"CPU: {CPU_UNAVAILABLE}\n" in text
    assert "Общее количество ОЗУ: 0.00 GB\n" in text
    assert "Версия ОС: -\n" in text
    assert text.endswith("boom\n")
