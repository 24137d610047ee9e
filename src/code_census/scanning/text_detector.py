"""Text vs. binary detection from a short byte prefix.

A file is text when it opens with a UTF-8 / UTF-16 byte-order mark, or
when zero bytes stay at or below 10% of the sampled prefix.
"""

from pathlib import Path

SAMPLE_SIZE = 512
NULL_BYTE_RATIO = 0.1

BOM_UTF8 = b"\xef\xbb\xbf"
BOM_UTF16_LE = b"\xff\xfe"
BOM_UTF16_BE = b"\xfe\xff"


def has_bom(sample: bytes) -> bool:
    return sample.startswith((BOM_UTF16_LE, BOM_UTF16_BE, BOM_UTF8))


def is_text_sample(sample: bytes) -> bool:
    """Classify a byte prefix as text (True) or binary (False)."""
    if has_bom(sample):
        return True

    limit = len(sample) * NULL_BYTE_RATIO
    null_count = 0
    for byte in sample:
        if byte == 0:
            null_count += 1
            if null_count > limit:
                return False
    return True


def read_sample(filepath: Path, size: int = SAMPLE_SIZE) -> bytes:
    """Read up to ``size`` leading bytes. Raises OSError on failure."""
    with open(filepath, "rb") as f:
        return f.read(size)


def is_text_file(filepath: Path) -> bool:
    return is_text_sample(read_sample(filepath))
