import pytest

from dheap.dway_heap.errors import HeapIndexError, InvalidKeyError
from dheap.session.session import Session


class TestSession:
    @pytest.fixture
    def session(self):
        return Session([[3, 1, 4, 1, 5, 9, 2, 6], [10, 20, 30]])

    def test_describe(self, session):
        assert len(session) == 2
        assert session.describe() == [
            "array 1: 3 1 4 1 5 9 2 6",
            "array 2: 10 20 30",
        ]

    def test_no_heap_before_selection(self, session):
        assert session.selected is None
        with pytest.raises(RuntimeError):
            session.heap
        with pytest.raises(RuntimeError):
            session.insert(1)

    def test_select(self, session):
        heap = session.select(1, 2)
        assert session.selected == 1
        assert session.degree == 2
        assert session.heap is heap
        assert heap.to_list() == [9, 6, 4, 1, 5, 3, 2, 1]

    @pytest.mark.parametrize("number", [0, 3])
    def test_select_invalid_number(self, session, number):
        with pytest.raises(ValueError):
            session.select(number, 2)

    def test_select_invalid_degree(self, session):
        with pytest.raises(ValueError):
            session.select(1, 0)

    def test_select_copies_the_array(self, session):
        session.select(2, 3)
        session.extract_max()
        assert session.arrays[1] == [10, 20, 30]

        heap = session.select(2, 3)
        assert len(heap) == 3

    def test_operations(self, session):
        session.select(1, 2)
        assert session.extract_max() == 9
        assert session.insert(10) == 0
        assert session.increase_key(4, 20) == 0
        assert session.delete(0) == 20
        assert session.heap._validate()
        assert len(session.heap) == 7

    def test_rejected_operations_leave_heap_unchanged(self, session):
        heap = session.select(1, 2)
        before = heap.to_list()
        with pytest.raises(InvalidKeyError):
            session.increase_key(4, 0)
        with pytest.raises(HeapIndexError):
            session.delete(8)
        assert heap.to_list() == before

    def test_capacity(self):
        session = Session([[1, 2, 3]], capacity=2)
        with pytest.raises(ValueError):
            session.select(1, 2)

    def test_from_file(self, tmp_path):
        path = tmp_path / "arrays.txt"
        path.write_text("5 3 8\n1\n")
        session = Session.from_file(path, capacity=None)
        assert session.arrays == [[5, 3, 8], [1]]
        assert session.select(1, 2).peek() == 8
        assert session.heap.capacity is None
