__version__ = "0.0.1"

from exact_price.domain.price.price import Price, sum_all
from exact_price.domain.price.rounding_mode import RoundingMode
from exact_price.domain.charge.charge import Charge, CHARGE_TYPE_MAIN
from exact_price.domain.charge.charges import Charges

__all__ = ["Price", "sum_all", "RoundingMode", "Charge", "CHARGE_TYPE_MAIN", "Charges"]
