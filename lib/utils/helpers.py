"""General helper utilities."""

import base64
import binascii
import re
from typing import Optional

from lib.contracts.access import Credentials

BASIC_AUTH_RE = re.compile(r"^\s*basic\s+(\S+)\s*$", re.I)


def parse_basic_auth(header: Optional[str]) -> Optional[Credentials]:
    """Decode an HTTP Basic ``Authorization`` header.

    Returns ``None`` for anything that is not a well formed Basic header.
    The password may itself contain ``:``; only the first one separates it
    from the username.
    """

    if not header:
        return None
    m = BASIC_AUTH_RE.match(header)
    if not m:
        return None
    try:
        decoded = base64.b64decode(m.group(1), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None
    username, sep, password = decoded.partition(":")
    if not sep:
        return None
    return Credentials(username=username, password=password)
