from models.expense import Expense
from services.expense_store import SEED_EXPENSES, ExpenseStore


def test_new_store_is_seeded():
    store = ExpenseStore()
    expenses = store.list_all()
    assert [e.id for e in expenses] == [1, 2, 3]
    assert [e.amount for e in expenses] == ["50.00", "15.50", "300.00"]
    assert expenses[2].category == "Housing"
    assert store.next_id == 4
    assert len(store) == len(SEED_EXPENSES)


def test_add_assigns_next_id_and_appends():
    store = ExpenseStore()
    first = store.add(amount="10.00", description="Bus", category="Transport", date="2024-02-01")
    second = store.add(amount="2.50", description="Gum", category="Food", date="2024-02-02")

    assert isinstance(first, Expense)
    assert (first.id, second.id) == (4, 5)
    assert store.next_id == 6
    assert store.list_all()[-2:] == [first, second]


def test_empty_store_starts_at_one():
    store = ExpenseStore(seed=None)
    assert store.list_all() == []
    assert store.add(amount="1.00", description="a", category="b", date="c").id == 1


def test_list_all_returns_a_snapshot():
    store = ExpenseStore()
    snapshot = store.list_all()
    store.add(amount="1.00", description="a", category="b", date="c")
    assert len(snapshot) == 3
    assert len(store.list_all()) == 4


def test_stores_do_not_share_state():
    a = ExpenseStore()
    b = ExpenseStore()
    a.add(amount="1.00", description="a", category="b", date="c")
    assert len(b) == 3
    assert b.next_id == 4
