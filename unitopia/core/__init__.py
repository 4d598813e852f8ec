"""
Core domain models, conversion tables, and parsing contracts.

Всё ядро синхронное и не выполняет I/O: таблицы конверсии строятся
один раз при импорте и далее только читаются.
"""
