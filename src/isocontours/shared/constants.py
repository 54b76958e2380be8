from enum import IntEnum

# --- Marching Squares: именованные маски
# Битовая раскладка окна 2×2 (начало окна: верхний левый отсчёт):
# b0: BL, b1: BR, b2: TR, b3: TL
# Бит установлен, если значение в углу >= порога
MS_BIT_BL = 0
MS_BIT_BR = 1
MS_BIT_TR = 2
MS_BIT_TL = 3

# Пустая и полная маски (все углы ниже/выше уровня соответственно)
MS_MASK_EMPTY = 0  # 0b0000: все ниже уровня
MS_MASK_FULL = 15  # 0b1111: все выше уровня

# Одиночные углы
MS_MASK_BL = 1  # 0b0001: только нижний левый
MS_MASK_BR = 2  # 0b0010: только нижний правый
MS_MASK_TR = 4  # 0b0100: только верхний правый
MS_MASK_TL = 8  # 0b1000: только верхний левый

# Две вершины: стороны клетки
MS_MASK_BOTTOM = 3  # 0b0011: BL+BR (низ)
MS_MASK_RIGHT = 6  # 0b0110: BR+TR (право)
MS_MASK_TOP = 12  # 0b1100: TR+TL (верх)
MS_MASK_LEFT = 9  # 0b1001: BL+TL (лево)

# Диагональные (седловые) случаи, всегда два отдельных отрезка
MS_MASK_BL_TR = 5  # 0b0101: BL+TR
MS_MASK_BR_TL = 10  # 0b1010: BR+TL

# Три вершины: «всё кроме …»
MS_MASK_NOT_BL = 14  # 0b1110: все кроме BL
MS_MASK_NOT_BR = 13  # 0b1101: все кроме BR
MS_MASK_NOT_TR = 11  # 0b1011: все кроме TR
MS_MASK_NOT_TL = 7  # 0b0111: все кроме TL

# Случаи, когда изолиния в клетке отсутствует
MS_NO_CONTOUR_CASES = frozenset({MS_MASK_EMPTY, MS_MASK_FULL})
MS_AMBIGUOUS_CASES = (MS_MASK_BL_TR, MS_MASK_BR_TL)  # (5, 10) седловые

# Середины рёбер окна в нормированном пространстве 2×2
# (центры отсчётов лежат в 0.5 и 1.5, границы пикселей в 1.0)
MS_EDGE_TOP = (1.0, 0.5)
MS_EDGE_RIGHT = (1.5, 1.0)
MS_EDGE_BOTTOM = (1.0, 1.5)
MS_EDGE_LEFT = (0.5, 1.0)

# Таблица случаев: код -> отрезки (начало, конец).
# Направление отрезков согласовано: внешние кольца вокруг значений >= порога
# получают положительную площадь (см. contours.geometry.area).
MS_CASES = (
    (),
    ((MS_EDGE_BOTTOM, MS_EDGE_LEFT),),
    ((MS_EDGE_RIGHT, MS_EDGE_BOTTOM),),
    ((MS_EDGE_RIGHT, MS_EDGE_LEFT),),
    ((MS_EDGE_TOP, MS_EDGE_RIGHT),),
    ((MS_EDGE_BOTTOM, MS_EDGE_LEFT), (MS_EDGE_TOP, MS_EDGE_RIGHT)),
    ((MS_EDGE_TOP, MS_EDGE_BOTTOM),),
    ((MS_EDGE_TOP, MS_EDGE_LEFT),),
    ((MS_EDGE_LEFT, MS_EDGE_TOP),),
    ((MS_EDGE_BOTTOM, MS_EDGE_TOP),),
    ((MS_EDGE_LEFT, MS_EDGE_TOP), (MS_EDGE_RIGHT, MS_EDGE_BOTTOM)),
    ((MS_EDGE_RIGHT, MS_EDGE_TOP),),
    ((MS_EDGE_LEFT, MS_EDGE_RIGHT),),
    ((MS_EDGE_BOTTOM, MS_EDGE_RIGHT),),
    ((MS_EDGE_LEFT, MS_EDGE_BOTTOM),),
    (),
)

# --- Сцепление отрезков в кольца
# Квантование координат концов отрезков: все точки пересечения лежат
# на сетке с шагом 0.5, поэтому множитель 2 даёт точные целые ключи
RING_KEY_QUANT_FACTOR = 2
# Запас по ширине строки ключей (окна заходят на одну клетку за границу)
RING_KEY_ROW_PADDING = 2

# Минимальное число точек замкнутого кольца (три вершины + повтор первой)
MIN_RING_POINTS = 4

# --- Изополосы
# Кольца с числом точек не больше этого значения отбрасываются
ISOBAND_MIN_RING_POINTS = 3


class Containment(IntEnum):
    """Результат проверки принадлежности точки/кольца другому кольцу."""

    INSIDE = 1
    ON_BOUNDARY = 0
    OUTSIDE = -1
