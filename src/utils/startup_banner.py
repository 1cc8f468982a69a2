# -*- coding: utf-8 -*-
"""
Модуль для отображения баннера при запуске приложения.
"""

import platform
import sys
from datetime import datetime

from sqlalchemy.engine import make_url

from src.config.settings import settings


def get_system_info():
    """Получает информацию о системе."""
    return {
        "os": f"{platform.system()} {platform.release()}",
        "python": f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
        "hostname": platform.node(),
        "architecture": platform.machine(),
    }


def get_app_banner():
    """Возвращает ASCII баннер для приложения."""
    banner = f"""
    ████████╗ █████╗ ███╗   ██╗ ██████╗  ██████╗
    ╚══██╔══╝██╔══██╗████╗  ██║██╔════╝ ██╔═══██╗
       ██║   ███████║██╔██╗ ██║██║  ███╗██║   ██║
       ██║   ██╔══██║██║╚██╗██║██║   ██║██║   ██║
       ██║   ██║  ██║██║ ╚████║╚██████╔╝╚██████╔╝
       ╚═╝   ╚═╝  ╚═╝╚═╝  ╚═══╝ ╚═════╝  ╚═════╝

               📝 {settings.app_name} 単語テスト
    """
    return banner


def get_database_label() -> str:
    """Адрес базы данных без пароля."""
    url = make_url(settings.database_url)
    return url.render_as_string(hide_password=True)


def get_startup_info():
    """Возвращает информацию о запуске приложения."""
    system = get_system_info()
    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    info = (
        f"\n"
        f"      📅 Запуск: {now}\n"
        f"      🖥️  Система: {system['os']} ({system['architecture']})\n"
        f"      🐍 Python: {system['python']}\n"
        f"      🏠 Хост: {system['hostname']}\n"
        f"      🌐 API: http://{settings.app_host}:{settings.app_port}/api/v1\n"
        f"      📊 База данных: {get_database_label()}\n"
        f"      🏷️  Категория по умолчанию: {settings.default_category_name}\n"
        f"      ⚙️  Конфиг: {settings.get_config_source()}\n"
    )
    return info


def print_startup_banner():
    """Выводит полный баннер при запуске."""
    try:
        print(get_app_banner())
        print(get_startup_info())
        print("    " + "=" * 80)
    except UnicodeEncodeError:
        # Fallback для Windows консоли с проблемами кодировки
        print("=" * 80)
        print(settings.app_name)
        print("=" * 80)
        print(get_startup_info())
        print("    " + "=" * 80)
