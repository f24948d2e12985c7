"""Hash utilities for Gitlet."""

import hashlib
from typing import Optional


def hash_object(data: bytes) -> str:
    """
    Compute SHA-1 hash of data.
    
    Args:
        data: Bytes to hash
        
    Returns:
        40-character hex string
    """
    return hashlib.sha1(data).hexdigest()


def _frame(field: Optional[str]) -> bytes:
    # None gets its own tag so it never collides with the empty string
    if field is None:
        return b'n\0'
    encoded = field.encode('utf-8')
    return b's' + str(len(encoded)).encode() + b':' + encoded


def hash_fields(*fields: Optional[str]) -> str:
    """
    Compute SHA-1 hash of an ordered sequence of fields.
    
    Each field is framed with a type tag and its byte length before hashing,
    so the digest changes whenever any field's content changes or the fields
    are reordered. ('ab', 'c') and ('a', 'bc') hash differently.
    
    Args:
        *fields: Strings (or None) in significant order
        
    Returns:
        40-character hex string
    """
    return hash_object(b''.join(_frame(field) for field in fields))
