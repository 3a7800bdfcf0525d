"""
Decoder for RFC 7958 trust anchor documents (IANA root-anchors.xml).
"""

import logging
import xml.etree.ElementTree as ET
from datetime import datetime
from typing import BinaryIO, Optional, Union

import defusedxml
import defusedxml.ElementTree
import dns.exception
import dns.name

from rootanchors.document import KeyDigestEntry, TrustAnchorDocument
from rootanchors.exceptions import DecodeError
from rootanchors.utils import cmtimer, parse_timestamp

logger = logging.getLogger(__name__)

ROOT_ELEMENT = "TrustAnchor"

UINT8_MAX = 0xFF
UINT16_MAX = 0xFFFF


def _child_text(element: ET.Element, tag: str) -> str:
    child = element.find(tag)
    if child is None:
        raise DecodeError(f"Missing <{tag}> in <{element.tag}>")
    return child.text or ""


def _decode_uint(element: ET.Element, tag: str, maximum: int) -> int:
    text = _child_text(element, tag).strip()
    if not text.isascii() or not text.isdigit():
        raise DecodeError(f"Invalid <{tag}> value {text!r}")
    try:
        value = int(text)
    except ValueError as exc:
        raise DecodeError(f"Invalid <{tag}> value: {exc}") from exc
    if value > maximum:
        raise DecodeError(f"<{tag}> value {value} out of range (max {maximum})")
    return value


def _decode_timestamp(element: ET.Element, attr: str) -> Optional[datetime]:
    value = element.get(attr)
    if value is None:
        return None
    try:
        return parse_timestamp(value)
    except ValueError as exc:
        raise DecodeError(f"Invalid {attr} timestamp {value!r}") from exc


def _decode_zone(root: ET.Element) -> str:
    zone = _child_text(root, "Zone").strip()
    if not zone:
        raise DecodeError("Empty <Zone>")
    try:
        dns.name.from_text(zone)
    except dns.exception.DNSException as exc:
        raise DecodeError(f"Invalid zone name {zone!r}: {exc}") from exc
    return zone


def _decode_key_digest(element: ET.Element) -> KeyDigestEntry:
    return KeyDigestEntry(
        id=element.get("id"),
        valid_from=_decode_timestamp(element, "validFrom"),
        valid_until=_decode_timestamp(element, "validUntil"),
        key_tag=_decode_uint(element, "KeyTag", UINT16_MAX),
        algorithm=_decode_uint(element, "Algorithm", UINT8_MAX),
        digest_type=_decode_uint(element, "DigestType", UINT8_MAX),
        digest=_child_text(element, "Digest"),
    )


def decode(data: Union[bytes, str]) -> TrustAnchorDocument:
    """
    Decode trust anchor document.

    Any malformed part of the document fails the whole decode with
    DecodeError, no partial document is ever returned.
    """
    with cmtimer("Decoding trust anchor document", logger=logger):
        try:
            root = defusedxml.ElementTree.fromstring(data)
        except (ET.ParseError, defusedxml.DefusedXmlException) as exc:
            raise DecodeError(f"Malformed trust anchor document: {exc}") from exc

        if root.tag != ROOT_ELEMENT:
            raise DecodeError(
                f"Unexpected root element <{root.tag}>, expected <{ROOT_ELEMENT}>"
            )

        document = TrustAnchorDocument(
            id=root.get("id"),
            source=root.get("source"),
            zone=_decode_zone(root),
            digests=tuple(_decode_key_digest(e) for e in root.findall("KeyDigest")),
        )

    logger.debug(
        "Decoded %d key digests for zone %s", len(document.digests), document.zone
    )
    return document


def decode_stream(fp: BinaryIO) -> TrustAnchorDocument:
    return decode(fp.read())


def decode_file(filename: str) -> TrustAnchorDocument:
    with open(filename, "rb") as fp:
        return decode_stream(fp)
