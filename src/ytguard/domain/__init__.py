"""Domain types shared across ytguard modules."""

from ytguard.domain.enums import EncoderMode, OutputCodec, Resolution, RunOutcome

__all__ = [
    "EncoderMode",
    "OutputCodec",
    "Resolution",
    "RunOutcome",
]
