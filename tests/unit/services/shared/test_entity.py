from services.shared.domain import Entity


class _Room(Entity[str]):
    pass


class _Guest(Entity[str]):
    pass


class TestEntity:
    def test_same_class_and_id_are_equal(self):
        assert _Room("a") == _Room("a")
        assert hash(_Room("a")) == hash(_Room("a"))

    def test_different_id_are_not_equal(self):
        assert _Room("a") != _Room("b")

    def test_different_class_with_same_id_are_not_equal(self):
        assert _Room("a") != _Guest("a")

    def test_repr_shows_id(self):
        assert repr(_Room("a")) == "_Room(id='a')"
