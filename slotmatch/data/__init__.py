from .loader import (
    clear_state,
    export_state,
    import_state,
    load_saved,
    load_state,
    roster_from_payload,
    roster_to_payload,
    save_state,
)
from .sample import sample_them
from .share import decode_share, encode_share, share_link

__all__ = [
    "clear_state",
    "export_state",
    "import_state",
    "load_saved",
    "load_state",
    "roster_from_payload",
    "roster_to_payload",
    "save_state",
    "sample_them",
    "decode_share",
    "encode_share",
    "share_link",
]
