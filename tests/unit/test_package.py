"""
Тесты публичного интерфейса пакета mathlab
"""

import mathlab
from mathlab import vector
from mathlab.core import math as core_math


class TestPublicSurface:
    """Тесты плоского реэкспорта"""

    def test_all_names_resolve(self) -> None:
        """Каждое имя из __all__ доступно в пакете"""
        for name in mathlab.__all__:
            assert hasattr(mathlab, name), name

    def test_no_duplicates_in_all(self) -> None:
        """__all__ без повторов"""
        assert len(mathlab.__all__) == len(set(mathlab.__all__))

    def test_scalar_and_vector_reexported(self) -> None:
        """Скалярные и векторные функции доступны из корня"""
        assert mathlab.sin_deg is core_math.sin_deg
        assert mathlab.add_vec_vec is vector.add_vec_vec
        assert mathlab.sin_deg(30.0) == 0.5

    def test_lift_helpers_not_shadowed(self) -> None:
        """Помощники num_vec / vec_num остаются функциями"""
        assert callable(vector.num_vec)
        assert callable(vector.vec_num)
        assert vector.num_vec(mathlab.subt, 1.0, [1.0]) == [0.0]

    def test_shadowed_builtins(self) -> None:
        """range / round / abs / pow — функции библиотеки"""
        assert mathlab.round(2.5) == 3.0
        assert mathlab.range(0.0, 1.0, 2, "asc") == [0.0, 1.0]
        assert mathlab.pow(2.0, 3.0) == 8.0
