import pytest

from ucdpublisher.modules.ucdeploy.service import PropertyReconciler
from ucdpublisher.modules.ucdeploy.util.exceptions import (
    UcdResponseException,
    UcdTransportException,
)

from conftest import FakeUcd


def build(fake: FakeUcd, messages=None) -> PropertyReconciler:
    return PropertyReconciler(fake, fake, fake, status_callback=messages.append if messages is not None else None)


def test_every_property_round_trips():
    fake = FakeUcd(prop_defs=["build", "commit"])
    properties = {"build": "42", "commit": "abc123", "branch": "main", "owner": "team-a"}

    build(fake).reconcile("svc-a", "1.0.0", properties)

    for name, value in properties.items():
        assert fake.get_version_property("svc-a", "1.0.0", name) == value


def test_existing_definition_is_updated_without_duplicate():
    fake = FakeUcd(prop_defs=["build"])

    build(fake).reconcile("svc-a", "1.0.0", {"build": "42"})

    assert fake.count("create_prop_def") == 0
    assert fake.count("set_version_property") == 1
    assert [d["name"] for d in fake.prop_defs] == ["build"]


def test_new_name_creates_exactly_one_definition_then_sets_value():
    fake = FakeUcd()

    build(fake).reconcile("svc-a", "1.0.0", {"build": "42"})

    assert fake.count("create_prop_def") == 1
    ops = fake.ops()
    assert ops.index("create_prop_def") < ops.index("set_version_property")
    _, args = next(call for call in fake.calls if call[0] == "create_prop_def")
    sheet_id, sheet_path, name, description, label, required, prop_type, value = args
    assert (name, description, label, required, prop_type, value) == ("build", "", "", False, "TEXT", "")
    assert sheet_id == fake.sheet["id"]
    assert sheet_path == fake.sheet["path"]


def test_updates_happen_before_creations():
    fake = FakeUcd(prop_defs=["zeta"])

    build(fake).reconcile("svc-a", "1.0.0", {"alpha": "1", "zeta": "2"})

    set_calls = [args for op, args in fake.calls if op == "set_version_property"]
    assert set_calls[0][2] == "zeta"
    assert set_calls[1][2] == "alpha"


def test_caller_mapping_is_not_mutated():
    fake = FakeUcd(prop_defs=["build"])
    properties = {"build": "42", "env": "qa"}

    build(fake).reconcile("svc-a", "1.0.0", properties)

    assert properties == {"build": "42", "env": "qa"}


def test_empty_mapping_makes_no_calls():
    fake = FakeUcd()

    build(fake).reconcile("svc-a", "1.0.0", {})

    assert fake.calls == []


def test_partition_is_disjoint():
    updates, creates = PropertyReconciler.partition(["a", "b", "a"], {"a": "1", "c": "3"})

    assert updates == [("a", "1")]
    assert creates == {"c": "3"}


def test_sheet_transport_failure(transport_error):
    fake = FakeUcd()
    fake.fail["get_component_version_prop_sheet_def"] = transport_error

    with pytest.raises(UcdTransportException, match="An error occurred acquiring property sheets"):
        build(fake).reconcile("svc-a", "1.0.0", {"build": "42"})


def test_malformed_sheet_is_a_response_error():
    fake = FakeUcd()
    fake.sheet = {"path": "no-id-here"}

    with pytest.raises(UcdResponseException, match="JSON object of the version property sheet"):
        build(fake).reconcile("svc-a", "1.0.0", {"build": "42"})


def test_malformed_definition_is_a_response_error():
    fake = FakeUcd()
    fake.prop_defs = [{"label": "nameless"}]

    with pytest.raises(UcdResponseException, match="existing property definition"):
        build(fake).reconcile("svc-a", "1.0.0", {"build": "42"})


def test_update_failure_keeps_category(transport_error):
    fake = FakeUcd(prop_defs=["build"])
    fake.fail["set_version_property"] = transport_error

    with pytest.raises(UcdTransportException, match="An error occurred while updating the property"):
        build(fake).reconcile("svc-a", "1.0.0", {"build": "42"})


def test_create_failure_leaves_earlier_updates(transport_error):
    fake = FakeUcd(prop_defs=["build"])
    fake.fail["create_prop_def"] = transport_error

    with pytest.raises(UcdTransportException, match="An error occurred while setting the version property"):
        build(fake).reconcile("svc-a", "1.0.0", {"build": "42", "env": "qa"})

    assert fake.get_version_property("svc-a", "1.0.0", "build") == "42"


def test_progress_messages():
    fake = FakeUcd()
    messages = []

    build(fake, messages).reconcile("svc-a", "1.0.0", {"build": "42"})

    assert "Creating property definition for 'build'" in messages
    assert "Setting version property 'build' to '42'" in messages
