"""
Core arithmetic engine: value representation, digit storage and the
arithmetic primitives built on it.

Ядро не зависит от внешних систем и не хранит глобального изменяемого
состояния.
"""
