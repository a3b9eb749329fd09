import pytest

from utilkit.string_array import StringArray, StringArrayError, string_array_cmp


def _make(*values):
    array = StringArray(len(values))
    for index, value in enumerate(values):
        array[index] = value
    return array


def test_boot_zero_initialized_fini():
    array = StringArray()
    array.fini()
    assert len(array) == 0


def test_boot_init_and_fini():
    array = StringArray(3)
    assert len(array) == 3
    assert array[0] is None
    array.fini()
    assert len(array) == 0
    with pytest.raises(StringArrayError):
        array[0]


def test_boot_set_values():
    array = StringArray(2)
    array[0] = "Hello"
    array[1] = "World"
    assert array[0] == "Hello"
    assert array[1] == "World"
    array.fini()
    array.fini()
    assert len(array) == 0


def test_negative_size():
    with pytest.raises(ValueError):
        StringArray(-1)


def test_set_non_string():
    array = StringArray(1)
    with pytest.raises(TypeError):
        array[0] = 5
    assert array[0] is None
    assert len(array) == 1


def test_index_out_of_range():
    array = _make("foo", "bar")
    with pytest.raises(IndexError):
        array[2]
    assert len(array) == 2
    assert array[1] == "bar"


@pytest.fixture
def arrays():
    return {
        "sa0": _make("foo", "bar", "baz"),
        "sa1": _make("foo", "bar", "baz"),
        "sa2": _make("foo", "baz", "bar"),
        "sa3": _make("foo", "bar"),
        "incomplete": StringArray(3),
    }


def test_cmp_failure_cases(arrays):
    with pytest.raises(TypeError):
        string_array_cmp(None, arrays["sa0"])
    with pytest.raises(TypeError):
        string_array_cmp(arrays["sa0"], None)
    with pytest.raises(StringArrayError, match="element is null"):
        string_array_cmp(arrays["sa0"], arrays["incomplete"])


def test_cmp_finalized_array(arrays):
    arrays["sa1"].fini()
    with pytest.raises(StringArrayError, match="data is null"):
        arrays["sa0"].compare(arrays["sa1"])


def test_cmp_equal(arrays):
    assert string_array_cmp(arrays["sa0"], arrays["sa1"]) == 0
    assert string_array_cmp(arrays["sa1"], arrays["sa0"]) == 0


def test_cmp_element_order(arrays):
    assert string_array_cmp(arrays["sa0"], arrays["sa2"]) < 0
    assert string_array_cmp(arrays["sa2"], arrays["sa0"]) > 0


def test_cmp_size_order(arrays):
    assert string_array_cmp(arrays["sa0"], arrays["sa3"]) > 0
    assert string_array_cmp(arrays["sa3"], arrays["sa0"]) < 0


def test_cmp_transitivity(arrays):
    assert string_array_cmp(arrays["sa3"], arrays["sa2"]) < 0


def test_method_matches_function(arrays):
    assert arrays["sa0"].compare(arrays["sa2"]) == string_array_cmp(arrays["sa0"], arrays["sa2"])