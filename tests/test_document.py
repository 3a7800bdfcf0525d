from dataclasses import FrozenInstanceError

import dns.name
import dns.rdataclass
import dns.rdatatype
import pytest
from pytest import raises

import rootanchors
from rootanchors.constants import DS_TTL
from rootanchors.document import DSRecord, TrustAnchorDocument, to_rrset
from rootanchors.exceptions import ValidationError

KSK2017_DIGEST = "E06D44B80B8F1D39A95C0B0D7C65D08458E880409BBC683457104237C7F8EC8D"
KSK2024_DIGEST = "683D2D0ACB8C9B712A1948B27F741219298D0A450D612C483AF444A4C0FB2B16"


def ds(key_tag=20326, digest=KSK2017_DIGEST, owner_name=".", digest_type=2):
    return DSRecord(
        owner_name=owner_name,
        key_tag=key_tag,
        algorithm=8,
        digest_type=digest_type,
        digest=digest,
    )


def test_fixed_fields():
    record = ds()
    assert record.rdclass == dns.rdataclass.IN
    assert record.rdtype == dns.rdatatype.DS
    assert record.ttl == DS_TTL == 0
    assert rootanchors.DS_TTL == DS_TTL


def test_value_equality():
    assert ds() == ds()
    assert ds() != ds(key_tag=1)
    assert hash(ds()) == hash(ds())


def test_immutable():
    with raises(FrozenInstanceError):
        ds().key_tag = 1


def test_document_origin():
    assert TrustAnchorDocument(zone=".").origin == dns.name.root
    assert TrustAnchorDocument(zone="example.com").origin == dns.name.from_text(
        "example.com."
    )


def test_to_rdata():
    rdata = ds().to_rdata()
    assert rdata.key_tag == 20326
    assert rdata.algorithm == 8
    assert rdata.digest_type == 2
    assert rdata.digest.hex().upper() == KSK2017_DIGEST


def test_to_text():
    assert ds().to_text() == f". 0 IN DS 20326 8 2 {KSK2017_DIGEST.lower()}"
    assert ds(owner_name="example.com").to_text().startswith("example.com. 0 IN DS ")


@pytest.mark.parametrize(
    "digest,digest_type",
    [
        ("not hex", 2),
        ("", 2),
        ("ABC", 2),
    ],
)
def test_to_rdata_invalid_digest(digest, digest_type):
    with raises(ValidationError):
        ds(digest=digest, digest_type=digest_type).to_rdata()


def test_to_rrset():
    rrset = to_rrset([ds(), ds(key_tag=38696, digest=KSK2024_DIGEST)])
    assert rrset.name == dns.name.root
    assert rrset.rdtype == dns.rdatatype.DS
    assert rrset.ttl == 0
    assert sorted(rdata.key_tag for rdata in rrset) == [20326, 38696]


def test_to_rrset_errors():
    with raises(ValidationError):
        to_rrset([])
    with raises(ValidationError):
        to_rrset([ds(), ds(owner_name="example.")])
