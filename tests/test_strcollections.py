import pytest

from dracgraph.strcollections import SortedStringSet, StringQueue, StringStack


def test_set_keeps_sorted_unique_elements():
    s = SortedStringSet()
    for value in ["pear", "apple", "fig", "apple"]:
        s.insert(value)
    assert list(s) == ["apple", "fig", "pear"]
    assert len(s) == 3
    assert "fig" in s
    assert "kiwi" not in s


def test_set_discard():
    s = SortedStringSet()
    s.insert("a")
    s.insert("b")
    s.discard("a")
    s.discard("missing")
    assert list(s) == ["b"]
    assert "a" not in s


def test_set_show(capsys):
    s = SortedStringSet()
    s.show()
    s.insert("b")
    s.insert("a")
    s.show()
    assert capsys.readouterr().out == (
        "Set is empty\nSet has 2 elements:\n[000] a\n[001] b\n"
    )


def test_set_non_string_membership():
    s = SortedStringSet()
    s.insert("1")
    assert 1 not in s


def test_queue_is_fifo():
    q = StringQueue()
    assert q.is_empty()
    for value in ["one", "two", "three"]:
        q.enter(value)
    assert list(q) == ["one", "two", "three"]
    assert q.leave() == "one"
    assert q.leave() == "two"
    assert len(q) == 1
    assert q.leave() == "three"
    assert q.is_empty()


def test_queue_leave_empty_raises():
    with pytest.raises(IndexError):
        StringQueue().leave()


def test_queue_show(capsys):
    q = StringQueue()
    q.show()
    q.enter("x")
    q.enter("y")
    q.show()
    assert capsys.readouterr().out == (
        "Queue is empty\nQueue (front-to-back):\n[000] x\n[001] y\n"
    )


def test_stack_is_lifo():
    s = StringStack()
    for value in ["one", "two", "three"]:
        s.push(value)
    assert list(s) == ["three", "two", "one"]
    assert s.pop() == "three"
    assert s.pop() == "two"
    assert len(s) == 1
    assert not s.is_empty()


def test_stack_pop_empty_raises():
    with pytest.raises(IndexError):
        StringStack().pop()


def test_stack_show(capsys):
    s = StringStack()
    s.show()
    s.push("x")
    s.push("y")
    s.show()
    assert capsys.readouterr().out == (
        "Stack is empty\nStack (top-to-bottom):\n[000] y\n[001] x\n"
    )