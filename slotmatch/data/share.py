from __future__ import annotations

import base64
import binascii
import json

from ..errors import ShareLinkError, StateError
from ..models.roster import Roster
from .loader import roster_from_payload, roster_to_payload

SHARE_MARKER = "#share="


def encode_share(roster: Roster) -> str:
    text = json.dumps(roster_to_payload(roster), separators=(",", ":"), ensure_ascii=False)
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def share_link(roster: Roster, base_url: str) -> str:
    # any existing fragment on the base is replaced
    return base_url.split("#", 1)[0] + SHARE_MARKER + encode_share(roster)


def decode_share(link_or_token: str) -> Roster:
    text = link_or_token.strip()
    if "#" in text:
        _, sep, token = text.partition(SHARE_MARKER)
        if not sep:
            raise ShareLinkError(f"Link has no {SHARE_MARKER!r} fragment")
    else:
        token = text
    if not token:
        raise ShareLinkError("Share token is empty")
    try:
        raw = base64.b64decode(token, validate=True).decode("utf-8")
        payload = json.loads(raw)
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ShareLinkError(f"Share token does not decode: {exc}") from exc
    try:
        return roster_from_payload(payload)
    except StateError as exc:
        raise ShareLinkError(str(exc)) from exc
