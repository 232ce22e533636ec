"""Input normalization and the end-to-end Extractor."""

from suffixdex.extract.extractor import Extractor, extract, get_default_extractor
from suffixdex.extract.normalize import extract_host, normalize_url, strip_scheme

__all__ = [
    "Extractor",
    "extract",
    "extract_host",
    "get_default_extractor",
    "normalize_url",
    "strip_scheme",
]
