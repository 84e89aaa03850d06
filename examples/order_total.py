from __future__ import annotations

import logging

from exact_price.codec.price_codec import PriceJsonCodec
from exact_price.domain.charge.charge import CHARGE_TYPE_MAIN, Charge
from exact_price.domain.charge.charges import Charges
from exact_price.domain.price.price import Price


logger = logging.getLogger(__name__)


def run() -> None:
    # Net item price with 19% tax and a 10% discount
    item = Price.from_float(10.49, "EUR").discounted(10).taxed(19)

    # Main charge is paid in EUR and is worth the same amount of loyalty points
    main = Charge(price=item, value=Price.from_decimal(item.amount, "points"), type=CHARGE_TYPE_MAIN)
    shipping = Charge(price=Price.from_float(4.99, "EUR"), value=Price.zero("points"), type="shipping")

    # Two items of the same kind merge into one (rounded) main charge
    charges = Charges().add_charge(main).add_charge(main).add_charge(shipping)
    for charge in charges:
        logger.info(f"{charge.type}: {charge.get_payable().price} (worth {charge.get_payable().value})")

    # Pay the total in 3 installments whose sum is exactly the payable total
    total = Price.sum_all(*(charge.price for charge in charges))
    installments = total.split_in_payables(3)
    logger.info(f"Total {total.get_payable()} paid as {', '.join(str(p) for p in installments)}")

    # Persist without losing precision
    encoded = PriceJsonCodec().encode(total)
    logger.info(f"Encoded total: {encoded.decode('utf-8')}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    run()
