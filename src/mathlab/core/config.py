"""
PrecisionConfig — параметры численной точности

Immutable Pydantic модель с параметрами, которые разделяют все функции семейства:
- Количество знаков для fix-снэппинга тригонометрии и генераторов
- Порог "практически ноль" для тригонометрического snapping
- Максимальная длина генерируемой последовательности

Конфигурация не читается из окружения или файлов: значения по умолчанию
зафиксированы в DEFAULT_CONFIG, альтернативная конфигурация передаётся явно.
"""

from typing import Final

from pydantic import BaseModel, Field

# =============================================================================
# ЗНАЧЕНИЯ ПО УМОЛЧАНИЮ
# =============================================================================

# Знаков после запятой для fix() в тригонометрии
TRIG_DECIMALS_DEFAULT: Final[int] = 10

# |x| <= порога → x считается "практически нулём"
SNAP_THRESHOLD_DEFAULT: Final[float] = 1e-10

# Максимальная длина результата monolist / range / range_from_to
SIZE_CAP_DEFAULT: Final[int] = 1_000_000


# =============================================================================
# CONFIG MODEL
# =============================================================================


class PrecisionConfig(BaseModel):
    """
    Параметры численной точности.

    Attributes:
        trig_decimals: Количество знаков после запятой для fix-снэппинга
        snap_threshold: Порог near-zero snapping (включительно)
        size_cap: Максимальная длина генерируемой последовательности
    """

    trig_decimals: int = Field(
        TRIG_DECIMALS_DEFAULT, ge=0, le=15, description="Знаков после запятой для fix()"
    )
    snap_threshold: float = Field(
        SNAP_THRESHOLD_DEFAULT, gt=0, lt=1e-6, description="Порог near-zero snapping"
    )
    size_cap: int = Field(
        SIZE_CAP_DEFAULT, gt=0, description="Максимальная длина генерируемой последовательности"
    )

    model_config = {"frozen": True}


# Глобальная конфигурация по умолчанию
DEFAULT_CONFIG: Final[PrecisionConfig] = PrecisionConfig()
