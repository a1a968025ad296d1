# -*- coding: utf-8 -*-
"""
Построение URL-безопасных slug для модулей.
"""

import re
import unicodedata

_NON_ALNUM = re.compile(r"[^a-z0-9]+")

DEFAULT_SLUG = "item"


def slugify(value: str | None, max_length: int = 50) -> str:
    """
    Преобразовать строку в slug: латиница в нижнем регистре, цифры и дефисы.

    Диакритика отбрасывается, последовательности прочих символов заменяются
    одним дефисом. Пустой результат заменяется на "item".
    """
    if not value:
        return DEFAULT_SLUG

    normalized = unicodedata.normalize("NFKD", value)
    ascii_text = "".join(ch for ch in normalized if not unicodedata.combining(ch))
    slug = _NON_ALNUM.sub("-", ascii_text.lower()).strip("-")

    if not slug:
        return DEFAULT_SLUG
    if len(slug) > max_length:
        slug = slug[:max_length].rstrip("-")
    return slug
