import pytest
from sqlalchemy import func, select

from storefront.data.models.user import UserModel
from storefront.domain.errors import AuthError, AuthReason, ConflictError, NotFoundError, ValidationError
from storefront.services.auth_service import prefilled_cart


def _user_count(db):
    return db.execute(select(func.count()).select_from(UserModel)).scalar()


def test_signup_then_login(auth_service, token_service, db):
    token = auth_service.signup("Ann", "ann@x.com", "pw123")
    user_id = token_service.verify(token)

    user = db.get(UserModel, user_id)
    assert user.email == "ann@x.com"
    assert user.password != "pw123"

    login_token = auth_service.login("ann@x.com", "pw123")
    assert token_service.verify(login_token) == user_id


def test_signup_prefills_cart_with_zeros(auth_service, token_service, db):
    user_id = token_service.verify(auth_service.signup("Ann", "ann@x.com", "pw123"))
    cart = db.get(UserModel, user_id).cart_data

    assert len(cart) == 300
    assert set(cart) == {str(i) for i in range(1, 301)}
    assert set(cart.values()) == {0}


def test_prefilled_cart_size():
    assert prefilled_cart(3) == {"1": 0, "2": 0, "3": 0}


def test_signup_duplicate_email(auth_service, db):
    auth_service.signup("Ann", "ann@x.com", "pw123")

    with pytest.raises(ConflictError):
        auth_service.signup("Other Ann", "ann@x.com", "secret")
    assert _user_count(db) == 1


def test_email_match_is_case_sensitive(auth_service, db):
    auth_service.signup("Ann", "ann@x.com", "pw123")
    auth_service.signup("Ann", "Ann@x.com", "pw123")
    assert _user_count(db) == 2


def test_signup_race_hits_unique_constraint(auth_service, db, monkeypatch):
    auth_service.signup("Ann", "ann@x.com", "pw123")
    #drugi request nie widzi jeszcze pierwszego
    monkeypatch.setattr(auth_service.repo, "get_user_by_email", lambda email: None)

    with pytest.raises(ConflictError):
        auth_service.signup("Ann", "ann@x.com", "pw123")
    assert _user_count(db) == 1


@pytest.mark.parametrize("name,email,password", [
    ("", "ann@x.com", "pw"),
    ("Ann", "", "pw"),
    ("Ann", "ann@x.com", ""),
])
def test_signup_requires_all_fields(auth_service, name, email, password):
    with pytest.raises(ValidationError):
        auth_service.signup(name, email, password)


def test_login_unknown_email(auth_service):
    with pytest.raises(NotFoundError):
        auth_service.login("nobody@x.com", "pw")


def test_login_wrong_password(auth_service):
    auth_service.signup("Ann", "ann@x.com", "pw123")

    with pytest.raises(AuthError) as exc:
        auth_service.login("ann@x.com", "wrong")
    assert exc.value.reason is AuthReason.WRONG_PASSWORD


def test_login_requires_fields(auth_service):
    with pytest.raises(ValidationError):
        auth_service.login("", "pw")
    with pytest.raises(ValidationError):
        auth_service.login("ann@x.com", "")
