from reverie.shared.utils.generators import (UUID7_VERSION, generate_uuid7,
                                            uuid7_unix_ms)

__all__ = [
    "UUID7_VERSION",
    "generate_uuid7",
    "uuid7_unix_ms",
]
