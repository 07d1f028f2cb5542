from pqheap.core.ordering import Ordering, natural_compare


def by_length(a, b):
    return natural_compare(len(a), len(b))


class TestOrdering:
    def test_natural_compare(self):
        assert natural_compare(1, 2) == -1
        assert natural_compare(2, 1) == 1
        assert natural_compare("a", "a") == 0

    def test_min_direction(self):
        ordering = Ordering()
        assert ordering.is_worse("B", "A")
        assert not ordering.is_worse("A", "B")

    def test_max_direction(self):
        ordering = Ordering(is_max_heap=True)
        assert ordering.is_worse("A", "B")
        assert not ordering.is_worse("B", "A")

    def test_ties_are_never_worse(self):
        for is_max_heap in (False, True):
            ordering = Ordering(is_max_heap=is_max_heap)
            assert not ordering.is_worse(3, 3)

    def test_comparator(self):
        ordering = Ordering(by_length)
        assert ordering.is_worse("ccc", "a")
        assert not ordering.is_worse("zz", "aa")
        assert ordering.compare("a", "bb") == -1
        assert ordering.comparator is by_length
