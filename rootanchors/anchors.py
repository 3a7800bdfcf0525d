"""
DS records from trust anchor documents, read from a file, a stream or the
embedded copy.
"""

from datetime import datetime
from typing import BinaryIO, List, Optional

from rootanchors.decoder import decode_file, decode_stream
from rootanchors.document import DSRecord
from rootanchors.embedded import embedded_document
from rootanchors.projector import project


def get_all_from_reader(fp: BinaryIO) -> List[DSRecord]:
    """Return all DS records from a binary stream"""
    return project(decode_stream(fp))


def get_valid_from_reader(
    fp: BinaryIO, instant: Optional[datetime] = None
) -> List[DSRecord]:
    """Return DS records from a binary stream valid at instant (default now)"""
    return project(decode_stream(fp), instant=instant, filter_to_valid=True)


def get_all_from_file(filename: str) -> List[DSRecord]:
    """Return all DS records from a file"""
    return project(decode_file(filename))


def get_valid_from_file(
    filename: str, instant: Optional[datetime] = None
) -> List[DSRecord]:
    """Return DS records from a file valid at instant (default now)"""
    return project(decode_file(filename), instant=instant, filter_to_valid=True)


def get_all_from_embedded() -> List[DSRecord]:
    """Return all DS records from the embedded root trust anchors"""
    return project(embedded_document())


def get_valid_from_embedded(instant: Optional[datetime] = None) -> List[DSRecord]:
    """Return DS records from the embedded root trust anchors valid at instant"""
    return project(embedded_document(), instant=instant, filter_to_valid=True)
