from checkpointer.multiselection import MultiSelection


def test_starts_empty_and_disabled():
    ms = MultiSelection()
    assert ms.selected_entries() == []
    assert ms.enabled() is False


def test_toggle_adds_in_order():
    ms = MultiSelection()
    for i in (5, 2, 9):
        ms.toggle(i)
    assert ms.selected_entries() == [5, 2, 9]
    assert ms.enabled() is True


def test_toggle_twice_removes():
    ms = MultiSelection()
    ms.toggle(3)
    ms.toggle(7)
    ms.toggle(3)
    assert ms.selected_entries() == [7]
    assert 3 not in ms
    assert 7 in ms


def test_removing_last_disables():
    ms = MultiSelection()
    ms.toggle(1)
    ms.toggle(1)
    assert ms.enabled() is False
    assert len(ms) == 0


def test_clear():
    ms = MultiSelection()
    for i in range(4):
        ms.toggle(i)
    ms.clear()
    assert ms.selected_entries() == []
    assert ms.enabled() is False


def test_selected_entries_is_a_copy():
    ms = MultiSelection()
    ms.toggle(4)
    entries = ms.selected_entries()
    entries.append(8)
    assert ms.selected_entries() == [4]


def test_select_all_then_toggle_one_keeps_order():
    ms = MultiSelection()
    for i in range(5):
        ms.toggle(i)
    ms.toggle(2)
    assert ms.selected_entries() == [0, 1, 3, 4]
    ms.toggle(2)
    assert ms.selected_entries() == [0, 1, 3, 4, 2]