import pytest
from pydantic import ValidationError

from matrixsdk._utils import encode_auth, header_bearer
from matrixsdk.models import (
    Dummy,
    Token,
    UserPassword,
    login_dummy,
    login_token,
    login_user,
)
from matrixsdk.models.errors import InvalidArgumentError


class TestEncodeAuth:
    def test_token(self) -> None:
        assert encode_auth(Token(token="tok")) == {
            "type": "m.login.token",
            "token": "tok",
        }

    def test_user_password(self) -> None:
        credential = UserPassword(identifier="maurice_moss", password="pw")

        assert encode_auth(credential) == {
            "type": "m.login.password",
            "identifier": {"type": "m.id.user", "user": "maurice_moss"},
            "password": "pw",
        }

    def test_dummy(self) -> None:
        assert encode_auth(Dummy()) == {"type": "m.login.dummy"}

    @pytest.mark.parametrize(
        "credential",
        ["tok", {"user": "u", "password": "p"}, ("u", "p"), None, 42],
    )
    def test_rejects_unknown_shapes(self, credential: object) -> None:
        with pytest.raises(InvalidArgumentError, match="credential"):
            encode_auth(credential)

    def test_returns_fresh_dict(self) -> None:
        credential = Token(token="tok")
        first = encode_auth(credential)
        first["token"] = "changed"

        assert encode_auth(credential)["token"] == "tok"


class TestCredentials:
    def test_helpers(self) -> None:
        assert login_token("tok") == Token(token="tok")
        assert login_user("u", "p") == UserPassword(identifier="u", password="p")
        assert login_dummy() == Dummy()

    def test_credentials_are_frozen(self) -> None:
        credential = Token(token="tok")

        with pytest.raises(ValidationError):
            credential.token = "other"  # type: ignore[misc]

    def test_empty_token_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Token(token="")

    def test_repr_hides_password(self) -> None:
        assert "secret" not in repr(UserPassword(identifier="u", password="secret"))


class TestHeaderBearer:
    def test_single_authorization_pair(self) -> None:
        assert header_bearer("t") == [("Authorization", "Bearer t")]
