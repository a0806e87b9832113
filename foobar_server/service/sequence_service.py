from __future__ import annotations

from ..domain.sequence import InvalidLength, generate, render_sequence
from ..logging_conf import get_logger

logger = get_logger("service.sequence")


def compute_sequence(*, length: int) -> str:
    """Generate the sequence for `length` and return its one-line text form.

    Raises:
        InvalidLength: propagated from the generator for negative lengths.
    """
    try:
        seq = generate(length)
    except InvalidLength as e:
        logger.info(
            "sequence.rejected",
            extra={"event": "sequence_rejected", "length": length, "reason": e.code},
        )
        raise
    logger.info("sequence.computed", extra={"event": "sequence_computed", "length": length})
    return render_sequence(seq)
