import pytest
from jose import jwt

from common.exceptions import (
    AuthenticationError, AuthorizationError, DuplicateError, InvalidAssertionError, ValidationError,
)
from modules.auth.identity import IdentityClaims, decode_identity_assertion
from modules.auth.service import IdentityStore
from modules.storage.service import active_user_key, users_key


def _google_token(**claims):
    return jwt.encode(claims, "issuer-key-we-never-see", algorithm="HS256")


def test_signup_creates_active_account(identity, alice):
    assert alice.name == "Alice"
    assert alice.orders == [] and alice.addresses == [] and alice.payment_methods == []
    assert identity.restore() == alice


def test_password_is_not_stored_in_plaintext(identity, storage, alice):
    assert "s3cret" not in storage.get_item(users_key())
    assert alice.password and alice.password != "s3cret"


def test_signup_duplicate_email_leaves_account_untouched(identity, alice):
    with pytest.raises(DuplicateError):
        identity.signup("Impostor", "alice@example.com", "other")
    assert identity.get_user("alice@example.com") == alice


def test_signup_password_confirmation_mismatch(identity):
    with pytest.raises(ValidationError):
        identity.signup("Bob", "bob@example.com", "one", "two")
    assert identity.get_user("bob@example.com") is None
    assert identity.restore() is None


def test_login_with_correct_password(identity, alice):
    identity.logout()
    assert identity.restore() is None
    assert identity.login("alice@example.com", "s3cret") == alice
    assert identity.restore() == alice


def test_wrong_password_keeps_active_pointer(identity, storage, alice):
    bob = identity.signup("Bob", "bob@example.com", "pw")
    with pytest.raises(AuthenticationError):
        identity.login("alice@example.com", "wrong")
    assert storage.get_item(active_user_key()) == "bob@example.com"
    assert identity.restore() == bob


def test_login_unknown_email(identity):
    with pytest.raises(AuthenticationError):
        identity.login("nobody@example.com", "pw")


def test_logout_keeps_accounts(identity, alice):
    identity.logout()
    assert identity.restore() is None
    assert identity.get_user("alice@example.com") == alice


def test_external_identity_creates_passwordless_account(identity):
    token = _google_token(email="carol@example.com", name="Carol", sub="google-42")
    user = identity.login_with_external_identity(token)
    assert user.id == "google-42"
    assert user.password is None
    assert identity.restore() == user

    # password login is impossible for this account
    with pytest.raises(AuthenticationError):
        identity.login("carol@example.com", "")


def test_external_identity_reuses_existing_account(identity, alice):
    identity.logout()
    token = _google_token(email="alice@example.com", name="Alice G", sub="google-1")
    user = identity.login_with_external_identity(token)
    assert user == alice


def test_injected_decoder(storage):
    store = IdentityStore(storage, decoder=lambda token: IdentityClaims("dan@example.com", "Dan", token))
    user = store.login_with_external_identity("sub-7")
    assert user.id == "sub-7" and user.email == "dan@example.com"


def test_decode_identity_assertion_errors():
    with pytest.raises(InvalidAssertionError):
        decode_identity_assertion("not-a-jwt")
    with pytest.raises(InvalidAssertionError):
        decode_identity_assertion(_google_token(name="No Email", sub="x"))
    claims = decode_identity_assertion(_google_token(email="eve@example.com", sub="9"))
    assert claims.name == "eve"


def test_update_user_replaces_record(identity, alice):
    updated = alice.model_copy(update={"name": "Alice Liddell"})
    assert identity.update_user(alice, updated) == updated
    assert identity.get_user("alice@example.com").name == "Alice Liddell"


def test_update_user_refused_for_other_account(identity, alice):
    bob = identity.signup("Bob", "bob@example.com", "pw")
    with pytest.raises(AuthorizationError):
        identity.update_user(bob, alice.model_copy(update={"name": "Hacked"}))
    with pytest.raises(AuthorizationError):
        identity.update_user(None, alice.model_copy(update={"name": "Hacked"}))
    assert identity.get_user("alice@example.com") == alice


def test_malformed_users_collection_reads_as_empty(identity, storage):
    storage.set_item(users_key(), "{oops")
    storage.set_item(active_user_key(), "alice@example.com")
    assert identity.restore() is None
    assert identity.signup("Alice", "alice@example.com", "pw").email == "alice@example.com"
