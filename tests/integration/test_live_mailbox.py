"""
Integration tests against a real mailbox.

Read-only except for the label round trip, which deletes what it creates.
"""

import uuid

import pytest

from gmailrest.sdk.exceptions import NotFoundError


@pytest.mark.integration
def test_list_then_get_thread(gmail_client):
    threads, _ = gmail_client.threads.list({"max_results": 2})
    if not threads:
        pytest.skip("Mailbox has no threads")

    assert len(threads) <= 2
    assert all(t.id and t.messages == () for t in threads)

    thread = gmail_client.threads.get(threads[0].id)
    assert thread.id == threads[0].id
    assert thread.messages, "A fetched thread should carry its messages"


@pytest.mark.integration
def test_paging_follows_next_page_token(gmail_client):
    first, token = gmail_client.threads.list({"max_results": 1})
    if token is None:
        pytest.skip("Mailbox has a single page of threads")

    second, _ = gmail_client.threads.list({"page_token": token, "max_results": 1})
    assert second and second[0].id != first[0].id


@pytest.mark.integration
def test_search_returns_summaries(gmail_client):
    for thread in gmail_client.threads.search("in:inbox newer_than:30d"):
        assert thread.id
        assert thread.messages == ()


@pytest.mark.integration
def test_missing_thread_is_not_found(gmail_client):
    with pytest.raises(NotFoundError):
        gmail_client.threads.get("ffffffffffffffff")


@pytest.mark.integration
def test_label_round_trip(gmail_client):
    name = f"gmailrest-test-{uuid.uuid4().hex[:8]}"
    label = gmail_client.labels.create(name, message_list_visibility="show")
    try:
        assert gmail_client.labels.get(label.id).name == name
        renamed = gmail_client.labels.patch(label._replace(name=name + "-renamed", type=None))
        assert renamed.name == name + "-renamed"
    finally:
        gmail_client.labels.delete(label.id)

    with pytest.raises(NotFoundError):
        gmail_client.labels.get(label.id)
