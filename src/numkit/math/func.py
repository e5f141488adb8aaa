"""
Function — псевдоним типа для вещественных функций одной переменной.

Используется в derivative и integral: операции принимают Function и
возвращают новую Function (замыкание), которую можно вызывать много раз.
"""

from typing import Callable

Function = Callable[[float], float]


def ensure_function(f: Function) -> Function:
    """
    Проверка, что f можно вызвать.

    Raises:
        TypeError: Если f не callable
    """
    if not callable(f):
        raise TypeError(f"f must be callable, got {type(f).__name__}")
    return f
