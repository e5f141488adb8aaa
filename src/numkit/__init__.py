"""
numkit — быстрая и лёгкая математическая библиотека.

Набор независимых численных функций из теории чисел и анализа:
простые числа, факторизация, суммы делителей, цепные дроби,
фигурные числа, функция разбиений, функция Эйлера, численное
дифференцирование и интегрирование.

Все функции чистые: без I/O, без глобального состояния.
"""

__version__ = "0.3.0"
