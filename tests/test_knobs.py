from __future__ import annotations

import pytest

from envknob.errors import InvalidKnobError
from envknob.knobs import KnobRegistry
from envknob.opt import OptBool
from envknob.parse import parse_bool, parse_int


@pytest.mark.parametrize("raw", ["1", "true", "TRUE", "True", "t", "T", "yes", "YES", "y", "on"])
def test_truthy_spellings_are_canonicalized(raw: str) -> None:
    knobs = KnobRegistry({"TS_FLAG": raw})
    assert knobs.bool("TS_FLAG") is True
    assert knobs.active() == {"TS_FLAG": "true"}


@pytest.mark.parametrize("raw", ["0", "false", "FALSE", "f", "no", "n", "off"])
def test_falsy_spellings_are_canonicalized(raw: str) -> None:
    knobs = KnobRegistry({"TS_FLAG": raw})
    assert knobs.bool_default_true("TS_FLAG") is False
    assert knobs.active() == {"TS_FLAG": "false"}


def test_unset_bool_returns_default_without_recording() -> None:
    knobs = KnobRegistry({})
    assert knobs.bool("UNSET_KNOB") is False
    assert knobs.bool_default_true("UNSET_KNOB") is True
    assert knobs.active() == {}


def test_empty_bool_counts_as_unset() -> None:
    knobs = KnobRegistry({"TS_FLAG": ""})
    assert knobs.bool_default_true("TS_FLAG") is True
    assert knobs.active() == {}


def test_malformed_bool_exits_with_name_and_value() -> None:
    knobs = KnobRegistry({"TS_FLAG": "banana"})
    with pytest.raises(SystemExit) as exc:
        knobs.bool("TS_FLAG")
    msg = str(exc.value)
    assert "TS_FLAG" in msg
    assert "banana" in msg
    assert knobs.active() == {}


def test_malformed_bool_raises_under_raise_policy() -> None:
    knobs = KnobRegistry({"TS_FLAG": "banana"}, on_invalid="raise")
    with pytest.raises(InvalidKnobError) as exc:
        knobs.bool("TS_FLAG")
    assert exc.value.name == "TS_FLAG"
    assert exc.value.value == "banana"
    assert exc.value.kind == "boolean"


def test_unknown_policy_rejected() -> None:
    with pytest.raises(ValueError):
        KnobRegistry({}, on_invalid="ignore")


def test_lookup_bool_distinguishes_absent_from_false() -> None:
    knobs = KnobRegistry({"TS_OFF": "false"})
    assert knobs.lookup_bool("TS_OFF") == (False, True)
    assert knobs.lookup_bool("TS_MISSING") == (False, False)


def test_lookup_bool_malformed_is_fatal() -> None:
    knobs = KnobRegistry({"TS_FLAG": "maybe"})
    with pytest.raises(SystemExit):
        knobs.lookup_bool("TS_FLAG")


def test_opt_bool_tristate() -> None:
    knobs = KnobRegistry({"TS_ON": "1", "TS_OFF": "no"})
    assert knobs.opt_bool("TS_ON") is OptBool.TRUE
    assert knobs.opt_bool("TS_OFF") is OptBool.FALSE
    assert knobs.opt_bool("TS_MISSING") is OptBool.UNSET

    assert OptBool.UNSET.get() == (False, False)
    assert OptBool.FALSE.get() == (False, True)
    assert OptBool.TRUE.equal_bool(True)
    assert not OptBool.UNSET.equal_bool(False)


@pytest.mark.parametrize("raw,want", [("0", 0), ("42", 42), ("-7", -7), ("+15", 15), ("007", 7)])
def test_lookup_int_records_raw_string(raw: str, want: int) -> None:
    knobs = KnobRegistry({"TS_N": raw})
    assert knobs.lookup_int("TS_N") == (want, True)
    assert knobs.active() == {"TS_N": raw}


def test_lookup_int_unset() -> None:
    knobs = KnobRegistry({})
    assert knobs.lookup_int("TS_N") == (0, False)
    assert knobs.active() == {}


@pytest.mark.parametrize("raw", ["1.5", "ten", "1_000", " 3", "0x10", "5\n", "-"])
def test_lookup_int_malformed_is_fatal(raw: str) -> None:
    knobs = KnobRegistry({"TS_N": raw})
    with pytest.raises(SystemExit) as exc:
        knobs.lookup_int("TS_N")
    assert "TS_N" in str(exc.value)
    assert "integer" in str(exc.value)


def test_string_rereads_environment_each_call() -> None:
    env = {"TS_PATH": "/a"}
    knobs = KnobRegistry(env)
    assert knobs.string("TS_PATH") == "/a"
    assert knobs.active() == {"TS_PATH": "/a"}

    env["TS_PATH"] = "/b"
    assert knobs.string("TS_PATH") == "/b"
    assert knobs.active() == {"TS_PATH": "/b"}

    del env["TS_PATH"]
    assert knobs.string("TS_PATH") == ""
    assert knobs.active() == {}


def test_default_environ_is_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("TS_FROM_OS", "yes")
    knobs = KnobRegistry()
    assert knobs.bool("TS_FROM_OS") is True


def test_parse_helpers() -> None:
    assert parse_bool("Yes") is True
    with pytest.raises(ValueError):
        parse_bool("")
    assert parse_int("-12") == -12
    with pytest.raises(ValueError):
        parse_int("")


@pytest.mark.parametrize("raw", [" true", "true ", "1\n", "yes\t"])
def test_bool_with_stray_whitespace_is_fatal(raw: str) -> None:
    knobs = KnobRegistry({"TS_FLAG": raw})
    with pytest.raises(SystemExit) as exc:
        knobs.bool("TS_FLAG")
    assert "TS_FLAG" in str(exc.value)
    assert knobs.active() == {}
