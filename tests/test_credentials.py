"""Tests for the durable credential store."""

from reviewsense.services.credentials import CredentialStore


def test_round_trip_across_instances(tmp_path):
    store = CredentialStore(str(tmp_path))
    assert store.load() is None
    store.save("hf_secret")
    store.close()

    reopened = CredentialStore(str(tmp_path))
    assert reopened.load() == "hf_secret"
    reopened.close()


def test_clear(tmp_path):
    store = CredentialStore(str(tmp_path))
    store.save("hf_secret")
    store.clear()
    assert store.load() is None
    store.close()
