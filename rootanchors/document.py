from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional, Tuple

import dns.exception
import dns.name
import dns.rdata
import dns.rdataclass
import dns.rdatatype
import dns.rrset
from dns.rdtypes.ANY.DS import DS

from rootanchors.constants import DS_TTL
from rootanchors.exceptions import ValidationError


@dataclass(frozen=True)
class KeyDigestEntry:
    key_tag: int
    algorithm: int
    digest_type: int
    digest: str
    valid_from: Optional[datetime] = None
    valid_until: Optional[datetime] = None
    id: Optional[str] = None

    def is_valid_at(self, instant: datetime) -> bool:
        """
        Check if the key digest is valid at instant.

        Both bounds are inclusive and a missing bound is unbounded. A window
        with valid_from after valid_until never matches.
        """
        if self.valid_from is not None and instant < self.valid_from:
            return False
        if self.valid_until is not None and instant > self.valid_until:
            return False
        return True


@dataclass(frozen=True)
class TrustAnchorDocument:
    zone: str
    digests: Tuple[KeyDigestEntry, ...] = ()
    id: Optional[str] = None
    source: Optional[str] = None

    @property
    def origin(self) -> dns.name.Name:
        return dns.name.from_text(self.zone)


@dataclass(frozen=True)
class DSRecord:
    owner_name: str
    key_tag: int
    algorithm: int
    digest_type: int
    digest: str
    rdclass: dns.rdataclass.RdataClass = field(default=dns.rdataclass.IN, init=False)
    rdtype: dns.rdatatype.RdataType = field(default=dns.rdatatype.DS, init=False)
    ttl: int = field(default=DS_TTL, init=False)

    @classmethod
    def from_entry(cls, owner_name: str, entry: KeyDigestEntry):
        return cls(
            owner_name=owner_name,
            key_tag=entry.key_tag,
            algorithm=entry.algorithm,
            digest_type=entry.digest_type,
            digest=entry.digest,
        )

    @property
    def name(self) -> dns.name.Name:
        return dns.name.from_text(self.owner_name)

    def to_rdata(self) -> DS:
        try:
            return dns.rdata.from_text(
                self.rdclass,
                self.rdtype,
                f"{self.key_tag} {self.algorithm} {self.digest_type} {self.digest}",
            )
        except dns.exception.DNSException as exc:
            raise ValidationError(
                f"Invalid DS rdata for key tag {self.key_tag}: {exc}"
            ) from exc

    def to_text(self) -> str:
        return f"{self.name} {self.ttl} IN DS {self.to_rdata().to_text()}"


def to_rrset(records: Iterable[DSRecord], ttl: int = DS_TTL) -> dns.rrset.RRset:
    """Build DS RRset, all records must share the same owner name"""
    records = list(records)
    if not records:
        raise ValidationError("Cannot build RRset without records")
    names = set(r.name for r in records)
    if len(names) > 1:
        raise ValidationError(
            "Records span multiple owner names: "
            + ", ".join(sorted(str(n) for n in names))
        )
    return dns.rrset.from_rdata_list(
        records[0].name, ttl, [r.to_rdata() for r in records]
    )
