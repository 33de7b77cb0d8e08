"""
Default Levels — Каталог типовых опорных уровней

Именованные константы, построенные только через публичную фабрику
Quantity.from_number_and_unit. Quantity неизменяема, поэтому константы
безопасно разделять между потоками.
"""

from typing import Final

from eelevels.core.domain.quantity import Quantity
from eelevels.core.domain.unit import DBFS, DBU, DECIBEL, FULL_SCALE, HERTZ, VOLT

# =============================================================================
# АНАЛОГОВЫЕ УРОВНИ
# =============================================================================

# 1 Vrms
LEVEL_1_VRMS: Final[Quantity] = Quantity.from_number_and_unit(1.0, VOLT)

# 2.83 Vrms (1 W на 8 Ом)
LEVEL_2_83_VRMS: Final[Quantity] = Quantity.from_number_and_unit(2.83, VOLT)

# 0 Vrms
LEVEL_0_VRMS: Final[Quantity] = Quantity.from_number_and_unit(0.0, VOLT)

# 0 dBu
LEVEL_0_DBU: Final[Quantity] = Quantity.from_number_and_unit(0.0, DBU)

# -10 dBu
LEVEL_MINUS_10_DBU: Final[Quantity] = Quantity.from_number_and_unit(-10.0, DBU)

# -40 dBu
LEVEL_MINUS_40_DBU: Final[Quantity] = Quantity.from_number_and_unit(-40.0, DBU)


# =============================================================================
# ЦИФРОВЫЕ УРОВНИ
# =============================================================================

# 0 dBFS (полная шкала)
LEVEL_0_DBFS: Final[Quantity] = Quantity.from_number_and_unit(0.0, DBFS)

# -12 dBFS
LEVEL_MINUS_12_DBFS: Final[Quantity] = Quantity.from_number_and_unit(-12.0, DBFS)

# 0 FS
LEVEL_0_FS: Final[Quantity] = Quantity.from_number_and_unit(0.0, FULL_SCALE)


# =============================================================================
# ОТНОШЕНИЯ
# =============================================================================

# 0 dB
RATIO_0_DB: Final[Quantity] = Quantity.from_number_and_unit(0.0, DECIBEL)


# =============================================================================
# ЧАСТОТЫ
# =============================================================================

# 1 kHz (стандартная тестовая частота)
FREQUENCY_1_KHZ: Final[Quantity] = Quantity.from_number_and_unit(1000.0, HERTZ)
