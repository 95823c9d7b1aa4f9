"""
GeneratedSeries — Модель сгенерированной серии

Immutable Pydantic модель, связывающая материализованную серию с параметрами
генерации. Closed-form селектор требует random access и growth rate той же
генерации: модель передаёт оба значения вместе.
"""

from pydantic import BaseModel, Field


class GeneratedSeries(BaseModel):
    """
    Серия, материализованная в индексируемый immutable контейнер.

    Инварианты values (обеспечиваются генератором):
    - строго по возрастанию, без дубликатов
    - len(values) <= requested_length
    - каждый элемент кратен 0.25
    """

    # Параметры генерации
    x: float = Field(..., description="Параметр первого члена (квадратичная формула)")
    y: float = Field(..., description="Параметр growth rate (линейная формула)")
    requested_length: int = Field(..., description="Запрошенная длина серии")

    # Производные параметры прогрессии (могут быть NaN/Inf)
    first_term: float = Field(..., description="Первый член до округления")
    growth_rate: float = Field(..., description="Growth rate геометрической прогрессии")

    values: tuple[float, ...] = Field(
        default=(), description="Значения серии по возрастанию"
    )

    model_config = {"frozen": True}  # Immutable

    def __len__(self) -> int:
        return len(self.values)

    def as_list(self) -> list[float]:
        """Новый список значений (для линейного селектора)."""
        return list(self.values)

    def is_degenerate(self) -> bool:
        """
        Проверка вырожденной серии.

        Returns:
            True если серия пустая или из одного элемента
        """
        return len(self.values) < 2
