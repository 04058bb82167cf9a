import pytest

import multiflag


class _RecordingRegistrar:
    def __init__(self):
        self.registered = []

    def register(self, name, accumulator, usage):
        self.registered.append((name, accumulator, usage))


@pytest.mark.parametrize("n", [0, 1, 2, 7])
def test_counting_occurrences(n: int) -> None:
    verbosity = multiflag.counting(
        "verbose", "false", "Verbosity", registrar=_RecordingRegistrar()
    )
    for _ in range(n):
        verbosity.set("true")
    assert verbosity.occurrence_count() == n
    assert verbosity.values() == []


def test_counting_ignores_payload() -> None:
    verbosity = multiflag.counting(
        "verbose", "false", "Verbosity", registrar=_RecordingRegistrar()
    )
    verbosity.set("false")
    verbosity.set("")
    assert verbosity.occurrence_count() == 2
    assert verbosity.values() == []
    assert verbosity.is_argument_free()


def test_collecting_preserves_order() -> None:
    trace = multiflag.collecting(
        "trace", "none", "Trace", registrar=_RecordingRegistrar()
    )
    assert trace.values() == []
    assert trace.occurrence_count() == 0

    for item in ["parse", "compile", "parse", ""]:
        trace.set(item)
    assert trace.values() == ["parse", "compile", "parse", ""]
    assert trace.occurrence_count() == 4
    assert not trace.is_argument_free()


def test_values_is_a_copy() -> None:
    trace = multiflag.collecting(
        "trace", "none", "Trace", registrar=_RecordingRegistrar()
    )
    trace.set("parse")
    trace.values().append("mutated")
    assert trace.values() == ["parse"]


def test_display_string_is_invariant() -> None:
    trace = multiflag.collecting(
        "trace", "none", "Trace", registrar=_RecordingRegistrar()
    )
    for item in ["a", "b", "c"]:
        trace.set(item)
        assert trace.display_string() == "none"
        assert str(trace) == "none"
    assert trace.display_value == "none"

    with pytest.raises(AttributeError):
        trace.display_value = "other"  # type: ignore


def test_registers_name_and_aliases() -> None:
    registrar = _RecordingRegistrar()
    verbosity = multiflag.counting(
        "verbose", "false", "Verbosity", "v", "loud", registrar=registrar
    )
    assert registrar.registered == [
        ("verbose", verbosity, "Verbosity"),
        ("v", verbosity, "Alias for verbose"),
        ("loud", verbosity, "Alias for verbose"),
    ]


def test_variant_types() -> None:
    registrar = _RecordingRegistrar()
    counter = multiflag.counting("a", "", "", registrar=registrar)
    collector = multiflag.collecting("b", "", "", registrar=registrar)
    assert isinstance(counter, multiflag.CountingAccumulator)
    assert isinstance(collector, multiflag.CollectingAccumulator)
    assert isinstance(counter, multiflag.Accumulator)
    assert isinstance(collector, multiflag.Accumulator)
    assert isinstance(registrar, multiflag.Registrar)


def test_repr() -> None:
    counter = multiflag.counting("a", "false", "", registrar=_RecordingRegistrar())
    counter.set("true")
    assert repr(counter) == (
        "CountingAccumulator(display_value='false', occurrence_count=1)"
    )
