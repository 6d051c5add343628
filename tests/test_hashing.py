from __future__ import annotations

import hashlib
from dataclasses import dataclass

import pytest

from search_indexers.errors import IndexerError
from search_indexers.hashing import document_id, encode_document


@dataclass
class Person:
    name: str
    age: int


class FakeModel:
    def model_dump(self, mode="python"):
        return {"mode": mode, "value": 1}


def test_encoding_is_compact_and_key_sorted():
    assert encode_document({"b": 2, "a": [1, "x"]}) == b'{"a":[1,"x"],"b":2}'


def test_scalars_are_valid_documents():
    assert encode_document("example document") == b'"example document"'
    assert encode_document(42) == b"42"
    assert encode_document(3.14) == b"3.14"
    assert encode_document(False) == b"false"
    assert encode_document(None) == b"null"


def test_non_ascii_kept_as_utf8():
    assert encode_document({"city": "São Paulo"}) == '{"city":"São Paulo"}'.encode("utf-8")


def test_dataclass_and_model_documents():
    assert encode_document(Person(name="John Doe", age=25)) == b'{"age":25,"name":"John Doe"}'
    assert encode_document(FakeModel()) == b'{"mode":"json","value":1}'


@pytest.mark.parametrize("document", [object(), {"when": {1, 2}}, float("nan")])
def test_unencodable_document_raises(document):
    with pytest.raises(IndexerError, match="Cannot encode document"):
        encode_document(document)


def test_document_id_is_sha256_hex():
    body = encode_document({"key1": "value1", "key2": 123, "key3": True})
    assert document_id(body) == hashlib.sha256(body).hexdigest()
    assert len(document_id(body)) == 64


def test_equal_documents_share_an_id():
    first = document_id(encode_document({"a": 1, "b": 2}))
    second = document_id(encode_document({"b": 2, "a": 1}))
    assert first == second
    assert first != document_id(encode_document({"a": 1, "b": 3}))
