"""
Errors — исключения библиотеки

Численные ошибки (деление на ноль, выход из области определения) НЕ являются
исключениями: они выражаются через NaN / ±Infinity по правилам IEEE-754.

Исключение поднимается только при нарушении контракта вызывающим кодом:
неверная длина векторов, gamma(0), переполнение u64 в factorial.
"""


class MathContractViolation(Exception):
    """
    Нарушение контракта функции (ошибка программиста, не численная ошибка).

    Возникает когда:
    1. dot(a, b) вызван с векторами разной длины
    2. cross(a, b) вызван с векторами длины != 3
    3. gamma(0) — беззнаковое вычитание 0 - 1
    4. fact(n) / gamma(n) с n, не являющимся неотрицательным целым
    5. fact(n) превышает 2**64 - 1 (переполнение u64)
    6. u64_to_f64 / i64_to_f64 получают целое вне 64-битного диапазона

    Восстановление не предусмотрено: вызывающий код должен исправить входные данные.
    """

    pass
