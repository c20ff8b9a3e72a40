"""
Core: арифметическое ядро, value type BigInteger и типизированные ошибки.

Модули не зависят от внешних систем: нет I/O, нет разделяемого
изменяемого состояния, все операции синхронные и детерминированные.
"""
