from urllib.parse import unquote_plus

import pytest

from matrixsdk._utils import decode_path_segment, encode_path_segment


class TestEncodePathSegment:
    @pytest.mark.parametrize(
        "segment, expected",
        [
            ("!r:matrix.org", "%21r%3Amatrix.org"),
            ("$e", "%24e"),
            ("$x y", "%24x+y"),
            ("@user:matrix.org", "%40user%3Amatrix.org"),
            ("a/b?c#d&e", "a%2Fb%3Fc%23d%26e"),
            ("plain", "plain"),
            ("", ""),
        ],
    )
    def test_www_form_encoding(self, segment: str, expected: str) -> None:
        assert encode_path_segment(segment) == expected

    @pytest.mark.parametrize(
        "identifier",
        [
            "!a:b.org",
            "$x y",
            "$abc+def/ghi=",
            "@üser:example.org",
            "a+b",
            "#alias:matrix.org",
        ],
    )
    def test_round_trip(self, identifier: str) -> None:
        encoded = encode_path_segment(identifier)

        assert "/" not in encoded
        assert unquote_plus(encoded) == identifier
        assert decode_path_segment(encoded) == identifier

    @pytest.mark.parametrize("segment", ["!a:b.org", "$x y", "$abc+def/ghi="])
    def test_does_not_double_encode(self, segment: str) -> None:
        once = encode_path_segment(segment)

        assert encode_path_segment(once) == once

    def test_literal_plus_is_escaped(self) -> None:
        assert encode_path_segment("a+b") == "a%2Bb"

    def test_text_that_looks_encoded_is_kept(self) -> None:
        assert encode_path_segment("%21x") == "%21x"
        assert decode_path_segment(encode_path_segment("%21x")) == "!x"
