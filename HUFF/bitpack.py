class BitWriter:
    def __init__(self):
        self._buf = bytearray()
        self._cur = 0
        self._nbits = 0  # bits currently in _cur (0..7)
        self.bits_written = 0

    def write_bits(self, length: int, value: int):
        """Write the low 'length' bits of value (MSB-first), 1 <= length <= 32."""
        if not (1 <= length <= 32):
            raise ValueError(f"bit width out of range (1..32): {length}")
        for i in range(length - 1, -1, -1):
            self._push((value >> i) & 1)

    def write_code(self, code: str):
        """Write a '0'/'1' path string, first character first."""
        for ch in code:
            self._push(1 if ch == "1" else 0)

    def _push(self, bit: int):
        self._cur = (self._cur << 1) | bit
        self._nbits += 1
        self.bits_written += 1
        if self._nbits == 8:
            self._buf.append(self._cur)
            self._cur = 0
            self._nbits = 0

    def finish(self) -> bytes:
        """Pad remaining bits with zeros."""
        if self._nbits > 0:
            self._buf.append(self._cur << (8 - self._nbits))
            self._cur = 0
            self._nbits = 0
        return bytes(self._buf)

class BitReader:
    def __init__(self, data: bytes):
        self.data = bytes(data)
        self.reset()

    def reset(self):
        self.i = 0
        self.bit = 0  # bit index in current byte (0..7), MSB-first
        self.bits_read = 0

    def bits_left(self) -> int:
        return (len(self.data) - self.i) * 8 - self.bit

    def read_bits(self, length: int):
        """
        Read 'length' bits as an unsigned int (MSB-first).
        Returns None when fewer than 'length' bits remain; nothing is consumed then.
        """
        if not (1 <= length <= 32):
            raise ValueError(f"bit width out of range (1..32): {length}")
        if self.bits_left() < length:
            return None
        v = 0
        for _ in range(length):
            b = (self.data[self.i] >> (7 - self.bit)) & 1
            v = (v << 1) | b
            self.bit += 1
            if self.bit == 8:
                self.bit = 0
                self.i += 1
        self.bits_read += length
        return v

    def read_bit(self):
        return self.read_bits(1)
