import bech32 # type: ignore
from typing import Tuple, Optional

ADDRESS_LENGTH = 20
ZERO_ADDRESS = "0x" + "00" * ADDRESS_LENGTH

def decode_address(addr: str) -> Tuple[str, bytes]:
    """Decodes Bech32 address to (prefix, h20_bytes)."""
    hrp, data = bech32.bech32_decode(addr)
    if hrp is None or data is None:
        raise ValueError("Invalid bech32 address")
    
    decoded = bech32.convertbits(data, 5, 8, False)
    if decoded is None:
        raise ValueError("Error converting from bech32 words")
        
    return hrp, bytes(decoded)

def encode_address(addr: str, prefix: str) -> str:
    """Re-encodes any accepted address form as Bech32 with the given prefix."""
    raw = bytes.fromhex(normalize_address(addr)[2:])
    five_bit_r = bech32.convertbits(raw, 8, 5)
    if five_bit_r is None:
        raise ValueError("Error converting to bech32 words")

    return bech32.bech32_encode(prefix, five_bit_r)

def normalize_address(addr: str) -> str:
    """
    Canonical form of an address: lowercase 0x-prefixed hex.

    Accepts 0x hex in any letter case, or Bech32 with any prefix.
    Raises ValueError for anything that is not a 20-byte address.
    """
    if not addr:
        raise ValueError("Empty address")
    addr = addr.strip()

    if addr[:2] in ("0x", "0X"):
        body = addr[2:]
        if len(body) != ADDRESS_LENGTH * 2:
            raise ValueError(f"Invalid hex address length: {addr}")
        try:
            raw = bytes.fromhex(body)
        except ValueError:
            raise ValueError(f"Invalid hex address: {addr}")
        return "0x" + raw.hex()

    _, raw = decode_address(addr)
    if len(raw) != ADDRESS_LENGTH:
        raise ValueError(f"Invalid address length: {addr}")
    return "0x" + raw.hex()

def eq_address(a: str, b: str) -> bool:
    return normalize_address(a) == normalize_address(b)

def eq_address_safe(a: Optional[str], b: Optional[str]) -> bool:
    """Like eq_address, but malformed or missing input compares unequal."""
    try:
        return eq_address(a, b)
    except ValueError:
        return False

def is_zero_address(addr: Optional[str]) -> bool:
    """True for an unset or all-zero address."""
    if not addr:
        return True
    return eq_address_safe(addr, ZERO_ADDRESS)

def is_valid_address(addr: str, expected_prefix: Optional[str] = None) -> bool:
    try:
        if expected_prefix:
            hrp, _ = decode_address(addr)
            if hrp != expected_prefix:
                return False
        normalize_address(addr)
        return True
    except ValueError:
        return False
