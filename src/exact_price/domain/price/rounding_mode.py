from enum import Enum


class RoundingMode(Enum):
    """Represents how an exact amount is cut down to the payable precision."""

    FLOOR = "floor"  # Cut; negative amounts move one minor unit further down
    CEIL = "ceil"  # Round up whenever anything follows the last payable digit
    HALF_UP = "halfup"  # Round up on .5 (default for fiat currencies)
    HALF_DOWN = "halfdown"  # Round down on .5
