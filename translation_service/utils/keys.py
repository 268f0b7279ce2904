"""
Cache key derivation for translation records.
"""
import hashlib

KEY_SEPARATOR = "_"


def generate_translation_key(text: str, language_code: str) -> str:
    """
    Derive the cache key for (text, language).
    
    The text is stripped before hashing, so surrounding whitespace never
    produces a second record. Context is deliberately not part of the key.
    
    Args:
        text: Source text
        language_code: Target language code
    
    Returns:
        32-char hex MD5 digest
    """
    if not text or not isinstance(text, str):
        raise ValueError("Text must be a non-empty string")
    if not language_code or not isinstance(language_code, str):
        raise ValueError("Valid language code is required")
    
    key_data = f"{text.strip()}{KEY_SEPARATOR}{language_code}"
    return hashlib.md5(key_data.encode("utf-8")).hexdigest()
