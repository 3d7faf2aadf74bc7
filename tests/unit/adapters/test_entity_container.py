"""
Tests for EntityContainer, the list-backed Container adapter.

Covers positional insert/remove/update/get, snapshots, and the rule that
an out-of-range call leaves the container untouched.
"""
import pytest
from datetime import date

from periodicals.domain.errors import OutOfRangeError
from periodicals.infrastructure.adapters.entity_container import EntityContainer


@pytest.fixture
def container():
    return EntityContainer()


@pytest.fixture
def filled():
    """Container holding "a", "b", "c" at positions 0..2."""
    c = EntityContainer()
    for position, value in enumerate(["a", "b", "c"]):
        c.add(position, value)
    return c


class TestAdd:
    """Tests for EntityContainer.add."""

    def test_starts_empty(self, container):
        """New containers are empty."""
        assert len(container) == 0
        assert container.get_all() == ()

    def test_add_then_get(self, container):
        """get(i) after add(i, e) returns e."""
        container.add(0, "x")
        assert container.get(0) == "x"
        assert len(container) == 1

    @pytest.mark.parametrize("position", [0, 1, 2, 3])
    def test_add_at_every_valid_position(self, filled, position):
        """Insertion at any position in [0, len] grows length by one."""
        filled.add(position, "new")
        assert filled.get(position) == "new"
        assert len(filled) == 4

    def test_add_at_length_appends(self, filled):
        """add(len, e) appends."""
        filled.add(3, "d")
        assert filled.get_all() == ("a", "b", "c", "d")

    def test_add_shifts_later_elements(self, filled):
        """Elements at and after the position move one place later."""
        filled.add(1, "x")
        assert filled.get_all() == ("a", "x", "b", "c")

    def test_add_negative_position_raises(self, filled):
        """Negative positions are out of range, not counted from the end."""
        with pytest.raises(OutOfRangeError) as exc_info:
            filled.add(-1, "x")
        assert exc_info.value.operation == "add"
        assert filled.get_all() == ("a", "b", "c")

    def test_add_beyond_length_raises(self, filled):
        """add(len + 1, e) is out of range and changes nothing."""
        with pytest.raises(OutOfRangeError):
            filled.add(4, "x")
        assert len(filled) == 3
        assert filled.get_all() == ("a", "b", "c")

    def test_add_to_empty_beyond_zero_raises(self, container):
        """Only position 0 is valid for an empty container."""
        with pytest.raises(OutOfRangeError):
            container.add(1, "x")
        assert len(container) == 0

    def test_duplicates_allowed(self, container):
        """No deduplication is performed."""
        container.add(0, "x")
        container.add(1, "x")
        assert container.get_all() == ("x", "x")


class TestRemove:
    """Tests for EntityContainer.remove."""

    def test_remove_returns_element(self, filled):
        """remove(i) returns the element previously at i."""
        assert filled.remove(1) == "b"
        assert len(filled) == 2

    def test_remove_shifts_later_elements_left(self, filled):
        """Later elements shift back and keep their order."""
        filled.remove(0)
        assert filled.get_all() == ("b", "c")

    def test_remove_last(self, filled):
        """The last position is removable."""
        assert filled.remove(2) == "c"
        assert filled.get_all() == ("a", "b")

    @pytest.mark.parametrize("position", [-1, 3, 100])
    def test_remove_out_of_range_raises(self, filled, position):
        """Invalid positions raise and leave contents unchanged."""
        with pytest.raises(OutOfRangeError) as exc_info:
            filled.remove(position)
        assert exc_info.value.position == position
        assert exc_info.value.size == 3
        assert filled.get_all() == ("a", "b", "c")

    def test_remove_from_empty_raises(self, container):
        """remove(0) on an empty container raises."""
        with pytest.raises(OutOfRangeError):
            container.remove(0)


class TestUpdate:
    """Tests for EntityContainer.update."""

    def test_update_replaces_element(self, filled):
        """get(i) returns the new element after update(i, e)."""
        filled.update(1, "B")
        assert filled.get(1) == "B"

    def test_update_keeps_length(self, filled):
        """update never changes length."""
        filled.update(0, "A")
        assert len(filled) == 3
        assert filled.get_all() == ("A", "b", "c")

    @pytest.mark.parametrize("position", [-1, 3])
    def test_update_out_of_range_raises(self, filled, position):
        """update(len, e) is not an append."""
        with pytest.raises(OutOfRangeError):
            filled.update(position, "x")
        assert filled.get_all() == ("a", "b", "c")


class TestGet:
    """Tests for EntityContainer.get."""

    def test_get_does_not_mutate(self, filled):
        """get leaves the container unchanged."""
        assert filled.get(2) == "c"
        assert filled.get_all() == ("a", "b", "c")

    @pytest.mark.parametrize("position", [-1, -3, 3])
    def test_get_out_of_range_raises(self, filled, position):
        """get rejects positions outside [0, len)."""
        with pytest.raises(OutOfRangeError):
            filled.get(position)

    def test_get_from_empty_raises(self, container):
        """get(0) on an empty container raises."""
        with pytest.raises(OutOfRangeError):
            container.get(0)

    def test_out_of_range_is_index_error(self, container):
        """Callers catching IndexError still catch the failure."""
        with pytest.raises(IndexError):
            container.get(0)


class TestPositionType:
    """Tests for non-integer positions."""

    @pytest.mark.parametrize("position", [True, 1.0, "1", None])
    def test_non_int_position_raises_type_error(self, filled, position):
        """Positions must be real ints; bool is rejected."""
        with pytest.raises(TypeError):
            filled.get(position)
        with pytest.raises(TypeError):
            filled.add(position, "x")
        with pytest.raises(TypeError):
            filled.remove(position)
        with pytest.raises(TypeError):
            filled.update(position, "x")
        assert filled.get_all() == ("a", "b", "c")
        assert len(filled) == 3


class TestSnapshot:
    """Tests for get_all snapshots."""

    def test_get_all_in_positional_order(self, filled):
        """get_all returns elements in order 0..len-1."""
        assert filled.get_all() == tuple(filled.get(i) for i in range(len(filled)))

    def test_snapshot_is_read_only(self, filled):
        """The snapshot is a tuple."""
        snapshot = filled.get_all()
        assert isinstance(snapshot, tuple)
        with pytest.raises(TypeError):
            snapshot[0] = "z"

    def test_mutating_snapshot_copy_does_not_affect_container(self, filled):
        """Changing a list made from the snapshot never changes get()."""
        items = list(filled.get_all())
        items.clear()
        assert filled.get(0) == "a"
        assert len(filled) == 3

    def test_snapshot_not_updated_by_later_mutation(self, filled):
        """A snapshot taken earlier does not see later changes."""
        snapshot = filled.get_all()
        filled.remove(0)
        filled.add(0, "z")
        assert snapshot == ("a", "b", "c")

    def test_elements_are_shared_references(self):
        """Snapshots copy the sequence, not the elements."""
        element = ["mutable"]
        c = EntityContainer()
        c.add(0, element)
        assert c.get_all()[0] is element

    def test_entities_property_matches_get_all(self, filled):
        """entities is the same snapshot as get_all()."""
        assert filled.entities == filled.get_all()

    def test_iteration_follows_positional_order(self, filled):
        """Iterating yields elements in positional order."""
        assert list(filled) == ["a", "b", "c"]

    def test_iteration_tolerates_mutation(self, filled):
        """Iteration walks a snapshot, so mutating while iterating is safe."""
        for element in filled:
            filled.add(len(filled), element.upper())
        assert filled.get_all() == ("a", "b", "c", "A", "B", "C")

    def test_repr(self, filled):
        """repr shows the contents."""
        assert repr(filled) == "EntityContainer(['a', 'b', 'c'])"


class TestScenario:
    """End-to-end positional scenario."""

    def test_insert_front_then_remove_middle(self, container):
        """add(0,X), add(1,Y), add(0,Z) -> [Z,X,Y]; remove(1) -> X."""
        container.add(0, "X")
        container.add(1, "Y")
        container.add(0, "Z")
        assert container.get_all() == ("Z", "X", "Y")
        assert container.remove(1) == "X"
        assert container.get_all() == ("Z", "Y")

    def test_container_never_sorts(self):
        """Records are kept in insertion position, not natural order."""
        from periodicals.domain.entities import ScientificArticle
        late = ScientificArticle("B", "Автор", date(2024, 1, 1), 10, 1, True)
        early = ScientificArticle("A", "Автор", date(2023, 1, 1), 10, 1, True)
        c = EntityContainer()
        c.add(0, late)
        c.add(1, early)
        assert c.get_all() == (late, early)
        assert tuple(sorted(c.get_all())) == (early, late)
