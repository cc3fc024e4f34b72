"""
Lift — поэлементное применение скалярных функций к последовательностям

Четыре формы broadcast, на которых построен весь векторный слой:
- map_vec(f, xs)        → [f(x) for x in xs]
- num_vec(f, x, ys)     → [f(x, y) for y in ys]      (скаляр слева)
- vec_num(f, xs, y)     → [f(x, y) for x in xs]      (скаляр справа)
- zip_vec(f, xs, ys)    → [f(x, y) for x, y in zip(xs, ys)]

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Порядок элементов сохраняется
2. Входные последовательности не изменяются, результат — новый список
3. zip_vec усекает результат до min(len(xs), len(ys)) без ошибки:
   лишние элементы более длинной последовательности отбрасываются
4. Порядок аргументов некоммутативной функции сохраняется:
   num_vec(subt, k, ys)[i] == subt(k, ys[i]), vec_num(subt, xs, k)[i] == subt(xs[i], k)
"""

from typing import Callable, Iterable, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def map_vec(func: Callable[[T], R], xs: Iterable[T]) -> list[R]:
    """Применение унарной функции к каждому элементу."""
    return [func(x) for x in xs]


def num_vec(func: Callable[[float, float], R], x: float, ys: Iterable[float]) -> list[R]:
    """Broadcast скаляра x как левого аргумента против каждого элемента ys."""
    return [func(x, y) for y in ys]


def vec_num(func: Callable[[float, float], R], xs: Iterable[float], y: float) -> list[R]:
    """Broadcast скаляра y как правого аргумента против каждого элемента xs."""
    return [func(x, y) for x in xs]


def zip_vec(
    func: Callable[[float, float], R], xs: Iterable[float], ys: Iterable[float]
) -> list[R]:
    """
    Попарное применение бинарной функции.

    Длина результата равна длине более короткой последовательности.

    Examples:
        >>> zip_vec(lambda a, b: a + b, [1.0, 2.0, 3.0], [10.0, 20.0])
        [11.0, 22.0]
    """
    return [func(x, y) for x, y in zip(xs, ys)]
