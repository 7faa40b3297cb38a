"""
gamemath — 2D/3D/4D математический инструментарий.

Векторы, матрицы фиксированного и произвольного размера, скалярные
функции. Чистые вычисления без I/O и состояния между вызовами.
"""
