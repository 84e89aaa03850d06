from __future__ import annotations

import json
from decimal import Decimal
from typing import Any, Mapping

from exact_price.codec.protocol import Codec
from exact_price.domain.price.price import Price


class PriceDictCodec(Codec[Price, dict[str, str]]):
    """Encodes Price as `{"amount": "<decimal string>", "currency": "<code>"}`.

    The amount is a string so its precision is never limited to what a float can hold.
    """

    def encode(self, value: Price) -> dict[str, str]:
        return value.to_dict()

    def decode(self, data: Mapping[str, Any]) -> Price:
        if not isinstance(data, Mapping):
            raise ValueError(f"Cannot decode `Price` because $data must be a mapping, but provided value is: {data!r}")
        return Price.from_dict(data)


class PriceJsonCodec(Codec[Price, bytes]):
    """Encodes Price as UTF-8 JSON bytes of the `PriceDictCodec` record.

    Decoding also accepts a JSON number for "amount"; it is parsed as Decimal, never as float.
    """

    def __init__(self) -> None:
        self._dict_codec = PriceDictCodec()

    def encode(self, value: Price) -> bytes:
        return json.dumps(self._dict_codec.encode(value)).encode("utf-8")

    def decode(self, data: bytes | str) -> Price:
        try:
            record = json.loads(data, parse_float=Decimal, parse_int=Decimal)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ValueError(f"Cannot decode `Price` because $data is not valid JSON: {data!r}") from e
        return self._dict_codec.decode(record)
