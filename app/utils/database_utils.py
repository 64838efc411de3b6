from datetime import datetime
from zoneinfo import ZoneInfo

from app.config.settings import TIMEZONE


def now_trimmed():
    """Retorna datetime atual no timezone configurado, sem microsegundos"""
    return datetime.now(ZoneInfo(TIMEZONE)).replace(microsecond=0)
