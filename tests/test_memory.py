import threading

import pytest

from agent.core.memory import ConversationStore


def test_record_keeps_last_five_in_order(conversations):
    for i in range(8):
        conversations.record("s1", f"msg {i}", f"reply {i}")

    history = conversations.history("s1")
    assert len(history) == 5
    assert [e.user_message for e in history] == [f"msg {i}" for i in range(3, 8)]
    assert history[-1].bot_reply == "reply 7"


def test_sessions_are_independent(conversations):
    conversations.record("a", "hi", "hello")
    conversations.record("b", "yo", "hey")
    conversations.clear("a")

    assert "a" not in conversations
    assert conversations.history("a") == []
    assert len(conversations.history("b")) == 1
    assert len(conversations) == 1


def test_clear_unknown_session_is_noop(conversations):
    conversations.clear("never-seen")
    assert len(conversations) == 0


def test_history_is_a_copy(conversations):
    conversations.record("s1", "hi", "hello")
    conversations.history("s1").clear()
    assert len(conversations.history("s1")) == 1


def test_record_waits_for_store_lock():
    store = ConversationStore(limit=5)
    writer = threading.Thread(target=store.record, args=("shared", "hi", "hello"))

    with store._lock:
        writer.start()
        writer.join(timeout=0.2)
        assert writer.is_alive()
        assert "shared" not in store._logs

    writer.join(timeout=5)
    assert not writer.is_alive()
    assert len(store.history("shared")) == 1


def test_clear_waits_for_store_lock(conversations):
    conversations.record("s1", "hi", "hello")
    clearer = threading.Thread(target=conversations.clear, args=("s1",))

    with conversations._lock:
        clearer.start()
        clearer.join(timeout=0.2)
        assert clearer.is_alive()
        assert "s1" in conversations._logs

    clearer.join(timeout=5)
    assert "s1" not in conversations


def test_limit_must_be_positive():
    with pytest.raises(ValueError):
        ConversationStore(limit=0)
