from __future__ import annotations

from alphabase.lib.base58 import to_base58
from alphabase.lib.tools import count_leading
from alphabase.units import Unit


class b58(Unit):
    """
    Base58 encoding. It is famously used as an encoding in Bitcoin addresses because the alphabet
    omits digits and letters that look similar. Each leading zero byte of the input is encoded as
    one leading `1` character.
    """
    def process(self, data: bytearray):
        self.log_debug(lambda: F'encoding {len(data)} bytes, {count_leading(data)} of which are leading zeros')
        return to_base58(data).encode('ascii')
