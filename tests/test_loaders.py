from itemhelper.models import Field, Item
from itemhelper.normalizers import InMemoryFieldLoader, NullFieldLoader, get_default_loader


def test_null_loader_returns_nothing():
    assert NullFieldLoader().get_fields("com_content.article", Item()) == []
    assert isinstance(get_default_loader(), NullFieldLoader)

def test_in_memory_loader_hands_out_copies():
    loader = InMemoryFieldLoader()
    loader.register("com_content.article", [{"name": "a", "rawvalue": "1"}])
    first = loader.get_fields("com_content.article", Item())
    second = loader.get_fields("com_content.article", Item())
    assert first == second
    assert first[0] is not second[0]
    assert isinstance(first[0], Field)

def test_in_memory_loader_unknown_type():
    assert InMemoryFieldLoader().get_fields("com_users.user", Item()) == []
