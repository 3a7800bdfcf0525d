import logging
from datetime import datetime
from typing import List, Optional

from rootanchors.document import DSRecord, TrustAnchorDocument
from rootanchors.exceptions import ValidationError
from rootanchors.utils import format_timestamp, utcnow

logger = logging.getLogger(__name__)


def project(
    document: TrustAnchorDocument,
    instant: Optional[datetime] = None,
    filter_to_valid: bool = False,
) -> List[DSRecord]:
    """
    Build DS records for the key digests of a trust anchor document.

    When filter_to_valid is set, only key digests valid at instant (default
    now) are included. Document order is kept. The instant is only used, and
    only checked, when filtering.
    """
    if filter_to_valid:
        if instant is None:
            instant = utcnow()
        elif instant.tzinfo is None:
            raise ValidationError(f"Evaluation instant {instant} has no timezone")

    res = []
    for entry in document.digests:
        if filter_to_valid and not entry.is_valid_at(instant):
            logger.debug(
                "Skipping key tag %d (valid from %s until %s)",
                entry.key_tag,
                format_timestamp(entry.valid_from),
                format_timestamp(entry.valid_until),
            )
            continue
        res.append(DSRecord.from_entry(document.zone, entry))
    return res
