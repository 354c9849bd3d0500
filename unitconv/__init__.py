"""unitconv package.

Важно: пакет не должен иметь побочных эффектов при импорте.
Таблицы единиц строятся в своих модулях, здесь eager-import'ов нет.

Импортируй нужное напрямую:
- from unitconv.convert import convert
- from unitconv.registry import classify
"""

from __future__ import annotations

__all__: list[str] = []

__version__ = "0.1.0"
