"""UTF-8 decoding and text shortening used when drawing text."""

UTF_INVALID = 0xFFFD
UTF_SIZ = 4
MAX_TEXT_LENGTH = 1023

_UTF_BYTE = (0x80, 0x00, 0xC0, 0xE0, 0xF0)
_UTF_MASK = (0xC0, 0x80, 0xE0, 0xF0, 0xF8)
_UTF_MIN = (0, 0, 0x80, 0x800, 0x10000)
_UTF_MAX = (0x10FFFF, 0x7F, 0x7FF, 0xFFFF, 0x10FFFF)


def _decode_byte(byte):
    """Return the payload bits of a byte and its kind (0 = continuation)."""
    for kind, (mask, lead) in enumerate(zip(_UTF_MASK, _UTF_BYTE)):
        if byte & mask == lead:
            return byte & ~mask & 0xFF, kind
    return 0, UTF_SIZ + 1


def utf8_decode(data):
    """Decode one code point from the start of ``data``.

    Returns ``(codepoint, length)``. Invalid sequences decode to U+FFFD;
    a sequence cut short by the end of ``data`` has length 0.
    """
    window = bytes(data[:UTF_SIZ])
    if not window:
        return UTF_INVALID, 0
    value, length = _decode_byte(window[0])
    if not 1 <= length <= UTF_SIZ:
        return UTF_INVALID, 1
    for position, byte in enumerate(window[1:length], start=1):
        bits, kind = _decode_byte(byte)
        value = (value << 6) | bits
        if kind:
            return UTF_INVALID, position
    if len(window) < length:
        return UTF_INVALID, 0
    if not _UTF_MIN[length] <= value <= _UTF_MAX[length] or 0xD800 <= value <= 0xDFFF:
        value = UTF_INVALID
    return value, length


def decode_all(data):
    """Yield every code point of ``data``, as a terminated string is walked."""
    data = bytes(data)
    terminated = data + b"\0"
    position = 0
    while position < len(data):
        codepoint, length = utf8_decode(terminated[position:position + UTF_SIZ])
        yield codepoint
        position += length


def truncate_text(text, max_width, measure):
    """Shorten ``text`` until ``measure`` of it fits in ``max_width``.

    A shortened result ends in up to three dots. Returns an empty string
    when nothing fits.
    """
    width = measure(text)
    length = min(len(text), MAX_TEXT_LENGTH)
    while length and width > max_width:
        width = measure(text[:length])
        length -= 1
    if not length:
        return ""
    shown = text[:length]
    if length < len(text):
        dots = min(3, length)
        shown = shown[:length - dots] + "." * dots
    return shown