from modules.cart.models import CartItemList
from modules.storage.service import cart_key, users_key, active_user_key


def test_keys_are_namespaced():
    assert users_key() == "seedhaven_users"
    assert active_user_key() == "seedhaven_active_user"
    assert cart_key("user-1") == "seedhaven_cart_user-1"


def test_set_get_remove(storage):
    assert storage.get_item("k") is None
    storage.set_item("k", "one")
    storage.set_item("k", "two")
    assert storage.get_item("k") == "two"
    storage.remove_item("k")
    assert storage.get_item("k") is None
    # removing a missing key is harmless
    storage.remove_item("k")


def test_read_json_treats_malformed_as_default(storage):
    storage.set_item("broken", "{not json")
    assert storage.read_json("broken", {}) == {}
    assert storage.read_json("absent", []) == []

    storage.write_json("ok", {"a": 1})
    assert storage.read_json("ok") == {"a": 1}


def test_read_typed_rejects_wrong_shape(storage):
    storage.set_item("cart", '[{"id": "p1"}]')
    assert storage.read_typed("cart", CartItemList, []) == []

    storage.set_item("cart", "garbage")
    assert storage.read_typed("cart", CartItemList, []) == []
