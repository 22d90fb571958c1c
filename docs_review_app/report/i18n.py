from __future__ import annotations

from typing import Callable, Dict, Optional

from loguru import logger

from .messages_en import MESSAGES as EN
from .messages_zh import MESSAGES as ZH

Translator = Callable[..., str]


def _table(lang: str) -> Dict[str, str]:
    return ZH if (lang or "").lower().startswith("zh") else EN


def lookup(lang: str, key: str) -> Optional[str]:
    """Raw catalogue entry for ``lang`` (no fallback), or None."""
    return _table(lang).get(key)


def get_translator(lang: str) -> Translator:
    """
    Returns a translator function t(key, **kwargs) with:
    - Primary table by lang ("zh" -> ZH, otherwise EN)
    - Fallback to EN
    - Logs a warning if key absent in both
    - Deterministic formatting via str.format(**kwargs)
    """
    primary = _table(lang)

    def t(key: str, **kwargs) -> str:
        msg = primary.get(key)
        if msg is None:
            msg = EN.get(key)
            if msg is None:
                logger.warning("i18n: missing key '{}' for lang='{}'", key, lang)
                msg = key
        try:
            return msg.format(**kwargs) if kwargs else msg
        except (KeyError, IndexError, ValueError) as ex:
            logger.warning("i18n: format error for key '{}': {}", key, ex)
            return msg

    return t


__all__ = ["get_translator", "lookup", "Translator"]
